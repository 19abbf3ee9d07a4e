"""
Generic reverse index construction and management.

This module holds the ReverseIndex core shared by the word completion and
document search indexes: an ordered buffer of items plus a map from string
key to the buffer positions registered under that key. Which keys an item
gets is decided by a pluggable strategy (see strategies.py).
"""

import logging
from itertools import groupby
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .config import load_config
from .errors import IndexConsumedError, PositionOutOfRangeError
from .navigator import Navigator
from .strategies import IndexStrategy
from .utils import item_text

logger = logging.getLogger(__name__)


class ReverseIndex:
    """
    Ordered item buffer with a key -> positions map.

    Positions are zero-based and stay valid for the lifetime of the buffer.
    append() extends the buffer in place; merge_dedup_reindex() consumes this
    index and returns a new one, invalidating every position issued so far.
    """

    def __init__(self, strategy: IndexStrategy, config: Optional[Any] = None):
        """
        Create an empty index. Use ReverseIndex.build() to populate one.

        Args:
            strategy: Callable (index, position) registering keys for the
                item at position.
            config: Optional Config or dict of overrides.
        """
        self.strategy = strategy
        self.config = load_config(config)
        self._buffer: Optional[List[Any]] = []
        self._map: Dict[str, List[int]] = {}

    @classmethod
    def build(cls, items: Iterable[Any], strategy: IndexStrategy, config: Optional[Any] = None) -> "ReverseIndex":
        """
        Build an index from an ordered collection of items.

        The strategy runs once per position, in position order. No sorting
        or deduplication is done.

        Args:
            items: Items to store, in buffer order. Any iterable.
            strategy: Indexing strategy.
            config: Optional Config or dict of overrides.

        Returns:
            Fully populated index. Empty input gives an empty index.
        """
        index = cls(strategy, config)
        index._buffer = list(items)
        for position in range(len(index._buffer)):
            strategy(index, position)

        logger.debug("Built reverse index: %d keys across %d items", len(index._map), len(index._buffer))
        return index

    def _live_buffer(self) -> List[Any]:
        if self._buffer is None:
            raise IndexConsumedError()
        return self._buffer

    def _check_position(self, position: int) -> None:
        buffer = self._live_buffer()
        if not 0 <= position < len(buffer):
            raise PositionOutOfRangeError(position, len(buffer))

    @property
    def is_consumed(self) -> bool:
        return self._buffer is None

    def __len__(self) -> int:
        return len(self._live_buffer())

    def __iter__(self) -> Iterator[Any]:
        return iter(self._live_buffer())

    def __getitem__(self, position: int) -> Any:
        return self.item_at(position)

    def __repr__(self) -> str:
        if self._buffer is None:
            return f"<{type(self).__name__} consumed>"
        return f"<{type(self).__name__} items={len(self._buffer)} keys={len(self._map)}>"

    def item_at(self, position: int) -> Any:
        """
        Get the item stored at a buffer position.

        Raises:
            PositionOutOfRangeError: If position is outside the buffer.
            IndexConsumedError: If the index was consumed.
        """
        self._check_position(position)
        return self._buffer[position]

    def text_at(self, position: int) -> str:
        """Get the text view of the item at a buffer position."""
        return item_text(self.item_at(position))

    def insert(self, key: str, position: int) -> None:
        """
        Register a buffer position under a key.

        Called by strategies. The position is appended to the key's list,
        which is created on first use.

        Args:
            key: Key to register.
            position: Buffer position of the item being indexed.
        """
        self._check_position(position)
        self._map.setdefault(key, []).append(position)

    def append(self, item: Any, strategy: Optional[IndexStrategy] = None) -> "ReverseIndex":
        """
        Append an item and index it without rebuilding.

        The item goes to position len(buffer) and the strategy runs for that
        position only. The buffer is neither sorted nor deduplicated, so
        callers accept duplicates until the next merge_dedup_reindex().

        Args:
            item: Item to append.
            strategy: Strategy to index with. If None, uses self.strategy.

        Returns:
            This index, extended in place.
        """
        if strategy is None:
            strategy = self.strategy

        buffer = self._live_buffer()
        buffer.append(item)
        strategy(self, len(buffer) - 1)
        return self

    def positions(self, key: str) -> Tuple[int, ...]:
        """
        Get the buffer positions registered under a key.

        Args:
            key: Exact key to look up.

        Returns:
            Positions in insertion order, or an empty tuple if absent.
        """
        self._live_buffer()
        return tuple(self._map.get(key, ()))

    def lookup(self, key: str) -> List[Any]:
        """
        Given an exact key, return all matching items.

        Args:
            key: Exact key to look up. No partial matching is done.

        Returns:
            Items in the order their positions were registered, or an empty
            list if the key is absent.
        """
        buffer = self._live_buffer()
        return [buffer[position] for position in self._map.get(key, ())]

    def keys(self) -> List[str]:
        """Return all keys in lexicographic order."""
        self._live_buffer()
        return sorted(self._map)

    @property
    def key_map(self) -> Dict[str, Tuple[int, ...]]:
        """Copy of the key map, ordered by key."""
        return {key: tuple(self._map[key]) for key in self.keys()}

    def navigator(self, position: int) -> Navigator:
        """Bind a Navigator to a buffer position of this index."""
        return Navigator(self, position)

    def eject_buffer(self) -> List[Any]:
        """
        Take the items out of the index.

        The index is consumed: later calls on it, or on navigators bound to
        it, raise IndexConsumedError.

        Returns:
            The buffer items in position order.
        """
        buffer = self._live_buffer()
        self._buffer = None
        self._map = {}
        return buffer

    def merge_dedup_reindex(self, more_items: Iterable[Any], strategy: Optional[IndexStrategy] = None) -> "ReverseIndex":
        """
        Merge more items into the buffer, then sort, dedupe and reindex.

        more_items are appended to a copy of the current buffer, the result
        is sorted by the items' natural order, adjacent equal items are
        dropped and a full build runs.

        Args:
            more_items: Items to merge in.
            strategy: Strategy to rebuild with. If None, uses self.strategy.

        Returns:
            A new index. This one is consumed only once the merged buffer
            is sorted; if sorting raises, this index is left untouched.
        """
        if strategy is None:
            strategy = self.strategy

        combined = list(self._live_buffer())
        before = len(combined)
        combined.extend(more_items)
        combined.sort()
        merged = [item for item, _ in groupby(combined)]

        self.eject_buffer()
        logger.info("Merged %d new items into %d, %d after dedup", len(combined) - before, before, len(merged))
        return type(self).build(merged, strategy, self.config)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the index.

        Returns:
            Dictionary with item, key and posting counts.
        """
        buffer = self._live_buffer()
        posting_lengths = sorted(len(positions) for positions in self._map.values())
        total_postings = sum(posting_lengths)

        stats = {
            "num_items": len(buffer),
            "num_keys": len(posting_lengths),
            "total_postings": total_postings,
            "avg_postings_per_key": total_postings / len(posting_lengths) if posting_lengths else 0.0,
            "min_postings": posting_lengths[0] if posting_lengths else 0,
            "max_postings": posting_lengths[-1] if posting_lengths else 0,
            "median_postings": posting_lengths[len(posting_lengths) // 2] if posting_lengths else 0,
        }
        return stats

    def widest_keys(self, top_n: int) -> List[Tuple[str, int]]:
        """Keys with the most postings, ties broken by key order."""
        self._live_buffer()
        ranked = sorted(self._map.items(), key=lambda kv: (-len(kv[1]), kv[0]))
        return [(key, len(positions)) for key, positions in ranked[:top_n]]

    def summarize_index(self, top_n: Optional[int] = None) -> None:
        """
        Print a summary of the index.

        Args:
            top_n: Number of widest keys to list. If None, uses the
                SUMMARY_TOP_KEYS setting of this index.
        """
        if top_n is None:
            top_n = self.config.SUMMARY_TOP_KEYS

        stats = self.get_stats()
        print("\n=== Reverse Index Summary ===")
        print(f"Items indexed: {stats['num_items']}")
        print(f"Unique keys: {stats['num_keys']}")
        print(f"Total postings: {stats['total_postings']}")
        if not stats["num_keys"]:
            return

        print(f"Average postings per key: {stats['avg_postings_per_key']:.2f}")
        print(f"Min posting list length: {stats['min_postings']}")
        print(f"Max posting list length: {stats['max_postings']}")
        print(f"Median posting list length: {stats['median_postings']}")
        if top_n > 0:
            preview = ", ".join(f"{key}:{count}" for key, count in self.widest_keys(top_n))
            print(f"Top {top_n} keys: {preview}")
