"""
Word completion index.

Every word is registered under all of its prefixes, so given the start of
an indexed word the full words can be retrieved. This is the structure
behind a basic completion engine, like the ones found in shells.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .config import load_config
from .core import ReverseIndex
from .strategies import prefix_strategy

logger = logging.getLogger(__name__)


class WordReverseIndex:
    """Prefix -> words reverse index."""

    def __init__(self, words: Iterable[str] = (), config: Optional[Any] = None):
        """
        Build the index from a collection of words.

        Args:
            words: Words to index, in buffer order. No deduplication is done.
            config: Optional Config or dict of overrides.
        """
        self.config = load_config(config)
        self._core = ReverseIndex.build(words, prefix_strategy, self.config)

    @classmethod
    def _wrap(cls, core: ReverseIndex, config: Any) -> "WordReverseIndex":
        index = cls.__new__(cls)
        index.config = config
        index._core = core
        return index

    @property
    def core(self) -> ReverseIndex:
        return self._core

    def __len__(self) -> int:
        return len(self._core)

    def __iter__(self) -> Iterator[str]:
        return iter(self._core)

    def get_completions(self, prefix: str) -> List[str]:
        """
        Get all indexed words starting with a prefix.

        Args:
            prefix: Start of the word. A complete word matches itself.

        Returns:
            Matching words in build/insertion order, empty if none match.
        """
        return self._core.lookup(prefix)

    def add_word(self, word: str) -> "WordReverseIndex":
        """
        Add a word without reindexing.

        The buffer is no longer sorted afterwards and duplicates are not
        rejected; use merge_dedup_reindex() to restore both.

        Returns:
            This index.
        """
        self._core.append(word, prefix_strategy)
        logger.debug("Added word at position %d", len(self._core) - 1)
        return self

    def merge_dedup_reindex(self, words: Iterable[str]) -> "WordReverseIndex":
        """
        Add more words, sort and dedupe the buffer, then reindex.

        Returns:
            A new index. This one is consumed.
        """
        core = self._core.merge_dedup_reindex(words, prefix_strategy)
        return self._wrap(core, self.config)

    def eject_buffer(self) -> List[str]:
        """Take the words out of the index. The index is consumed."""
        return self._core.eject_buffer()

    def get_stats(self) -> Dict[str, Any]:
        """Get item, key and posting counts of the prefix map."""
        return self._core.get_stats()

    def summarize_index(self, top_n: Optional[int] = None) -> None:
        """Print a summary of the prefix map (see ReverseIndex.summarize_index)."""
        self._core.summarize_index(top_n)
