"""
Document search index.

Documents are split into whitespace-delimited words and each word is used
as a key pointing back at the document. Given a query, documents are ranked
by how many distinct query words they contain.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .config import load_config
from .core import ReverseIndex
from .navigator import Navigator
from .strategies import token_strategy_for
from .utils import distinct, split_words

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Document:
    """A named document. Documents sort by name, then content."""

    name: str
    content: str

    def __str__(self) -> str:
        return self.content


class DocumentReverseIndex:
    """Word -> documents reverse index with match-count ranking."""

    def __init__(self, documents: Iterable[Any] = (), config: Optional[Any] = None):
        """
        Build the index from a collection of documents.

        Args:
            documents: Items whose str() is the document text (plain strings
                or Document). No deduplication is done.
            config: Optional Config or dict of overrides.
        """
        self.config = load_config(config)
        self.strategy = token_strategy_for(self.config)
        self._core = ReverseIndex.build(documents, self.strategy, self.config)

    @classmethod
    def _wrap(cls, core: ReverseIndex, config: Any) -> "DocumentReverseIndex":
        index = cls.__new__(cls)
        index.config = config
        index.strategy = core.strategy
        index._core = core
        return index

    @property
    def core(self) -> ReverseIndex:
        return self._core

    def __len__(self) -> int:
        return len(self._core)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._core)

    def _ranked_positions(self, query: str, limit: Optional[int]) -> List[Tuple[int, int]]:
        """
        Rank buffer positions by the number of distinct query terms they match.

        Args:
            query: Whitespace-separated query terms.
            limit: Maximum number of positions. If None, uses config default.

        Returns:
            List of (position, count) sorted by count descending, then
            position ascending.
        """
        if limit is None:
            limit = self.config.DEFAULT_SEARCH_LIMIT
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")

        # A term adds at most one to a position, however often it is listed
        counts = Counter()
        for term in distinct(split_words(query)):
            counts.update(set(self._core.positions(term)))

        ranked = sorted(counts.items(), key=lambda pc: (-pc[1], pc[0]))
        return ranked[:limit]

    def search(self, query: str, limit: Optional[int] = None) -> List[Any]:
        """
        Search for documents containing the query words.

        Args:
            query: Search string, split on whitespace into terms.
            limit: Upper bound on the number of documents returned. If None,
                uses DEFAULT_SEARCH_LIMIT.

        Returns:
            Documents ordered by how many query terms appear in each; ties
            go to the document indexed first. Empty if nothing matches.
        """
        return [self._core.item_at(position) for position, _ in self._ranked_positions(query, limit)]

    def search_with_counts(self, query: str, limit: Optional[int] = None) -> List[Tuple[Any, int]]:
        """Like search(), returning (document, matched term count) pairs."""
        return [(self._core.item_at(position), count) for position, count in self._ranked_positions(query, limit)]

    def search_with_navigators(self, query: str, limit: Optional[int] = None) -> List[Navigator]:
        """
        Search, returning navigators instead of documents.

        Selection and order are the same as search(). Each navigator can walk
        to the documents indexed before and after its match.
        """
        return [Navigator(self._core, position) for position, _ in self._ranked_positions(query, limit)]

    def add_document(self, document: Any) -> "DocumentReverseIndex":
        """
        Add a document without reindexing.

        The buffer is no longer sorted afterwards and duplicates are not
        rejected; use merge_dedup_reindex() to restore both.

        Returns:
            This index.
        """
        self._core.append(document, self.strategy)
        logger.debug("Added document at position %d", len(self._core) - 1)
        return self

    def merge_dedup_reindex(self, documents: Iterable[Any]) -> "DocumentReverseIndex":
        """
        Add more documents, sort and dedupe the buffer, then reindex.

        Navigators from this index are invalidated.

        Returns:
            A new index. This one is consumed.
        """
        core = self._core.merge_dedup_reindex(documents, self.strategy)
        return self._wrap(core, self.config)

    def eject_buffer(self) -> List[Any]:
        """Take the documents out of the index. The index is consumed."""
        return self._core.eject_buffer()

    def get_stats(self) -> Dict[str, Any]:
        """Get item, key and posting counts of the word map."""
        return self._core.get_stats()

    def summarize_index(self, top_n: Optional[int] = None) -> None:
        """Print a summary of the word map (see ReverseIndex.summarize_index)."""
        self._core.summarize_index(top_n)
