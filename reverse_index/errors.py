"""
Exceptions raised by the reverse index library.

Lookups that match nothing and navigators that reach a buffer boundary are
not errors; they return an empty result or end iteration.
"""


class ReverseIndexError(Exception):
    """Base class for reverse index errors."""


class PositionOutOfRangeError(ReverseIndexError, IndexError):
    """A buffer position outside 0 <= position < len(buffer) was used.

    Positions are only created internally, so this signals a bug rather
    than a condition callers are expected to recover from.
    """

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(f"Position {position} out of range for buffer of length {length}")


class IndexConsumedError(ReverseIndexError, RuntimeError):
    """The index was consumed by eject_buffer() or merge_dedup_reindex()."""

    def __init__(self, message: str = "Index buffer was ejected. Use the index returned by merge_dedup_reindex()."):
        super().__init__(message)
