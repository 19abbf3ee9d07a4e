"""
Positional navigation around a matched buffer item.

A Navigator is bound to one position of a ReverseIndex and walks to the
items next to it in buffer order, without running another search.
"""

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from .core import ReverseIndex


class Navigator:
    """
    Handle on one buffer position of a ReverseIndex.

    The navigator borrows the index; it does not own it. Once the index is
    consumed (eject_buffer() or merge_dedup_reindex()) every call raises
    IndexConsumedError. Items appended to the index after the navigator was
    created are reachable through forwards().
    """

    def __init__(self, index: "ReverseIndex", position: int):
        """
        Bind to a buffer position.

        Args:
            index: The index owning the buffer.
            position: Buffer position of the matched item.

        Raises:
            PositionOutOfRangeError: If position is outside the buffer.
        """
        index.item_at(position)
        self._index = index
        self._position = position

    @property
    def position(self) -> int:
        return self._position

    @property
    def index(self) -> "ReverseIndex":
        return self._index

    def current(self) -> Any:
        """Get the item at the bound position."""
        return self._index.item_at(self._position)

    def forwards(self) -> Iterator[Any]:
        """
        Iterate over the items after the bound position.

        Yields items at position+1, position+2, ... and stops at the end of
        the buffer. Each call starts a new iteration from position+1.
        """
        position = self._position + 1
        while position < len(self._index):
            yield self._index.item_at(position)
            position += 1

    def backwards(self) -> Iterator[Any]:
        """
        Iterate over the items before the bound position, nearest first.

        Yields items at position-1 down to 0. Bound to position 0 it yields
        nothing.
        """
        for position in range(self._position - 1, -1, -1):
            yield self._index.item_at(position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Navigator):
            return NotImplemented
        return self._index is other._index and self._position == other._position

    def __hash__(self) -> int:
        return hash((id(self._index), self._position))

    def __repr__(self) -> str:
        return f"Navigator(position={self._position})"
