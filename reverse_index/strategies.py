"""
Indexing strategies.

A strategy decides which keys an item is registered under. It is called
once per buffer position at build/append time as ``strategy(index,
position)`` and registers keys through ``index.insert(key, position)``.
A strategy must not mutate the buffer or touch any other position.
"""

from typing import TYPE_CHECKING, Any, Callable

from .utils import distinct, split_words

if TYPE_CHECKING:
    from .core import ReverseIndex

IndexStrategy = Callable[["ReverseIndex", int], None]


def prefix_strategy(index: "ReverseIndex", position: int) -> None:
    """
    Register every prefix of the item's text.

    For text of length L, inserts keys text[:1] through text[:L]. Lengths
    are counted in characters, so multi-byte text is split correctly.

    Args:
        index: The index being populated.
        position: Buffer position of the item to index.
    """
    text = index.text_at(position)
    for length in range(1, len(text) + 1):
        index.insert(text[:length], position)


def whitespace_token_strategy(index: "ReverseIndex", position: int) -> None:
    """
    Register each distinct whitespace-delimited word of the item's text.

    A word repeated within one item is registered once, so a key's
    position list never holds the same position twice.

    Args:
        index: The index being populated.
        position: Buffer position of the item to index.
    """
    for word in distinct(split_words(index.text_at(position))):
        index.insert(word, position)


def occurrence_token_strategy(index: "ReverseIndex", position: int) -> None:
    """
    Register the item's position once per word occurrence.

    A word appearing three times pushes the position into its key list
    three times. Document search still counts it once per query term.
    """
    for word in split_words(index.text_at(position)):
        index.insert(word, position)


def token_strategy_for(config: Any) -> IndexStrategy:
    """Pick the document token strategy configured by DEDUPLICATE_DOCUMENT_TOKENS."""
    if config.DEDUPLICATE_DOCUMENT_TOKENS:
        return whitespace_token_strategy
    return occurrence_token_strategy
