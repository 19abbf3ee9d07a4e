"""
Utility functions for text handling and logging setup.

Tokenization is deliberately plain: text is split on runs of whitespace
and nothing else (no case folding, no punctuation stripping).
"""

import logging
from typing import Any, Iterable, List, Optional

from . import config as default_config


def item_text(item: Any) -> str:
    """
    Return the read-only text view of an indexed item.

    Args:
        item: A buffer item. Strings are their own text view; other items
            provide one through __str__.

    Returns:
        The text the strategies key on.
    """
    if isinstance(item, str):
        return item
    return str(item)


def split_words(text: str) -> List[str]:
    """
    Split text on runs of whitespace.

    Args:
        text: Text to split.

    Returns:
        List of words in order of appearance, repeats included.
    """
    return text.split()


def distinct(words: Iterable[str]) -> List[str]:
    """Drop repeated words, keeping first-appearance order."""
    return list(dict.fromkeys(words))


def configure_logging(level: Optional[str] = None, config: Optional[Any] = None) -> None:
    """
    Configure root logging for scripts using the library.

    Args:
        level: Logging level name. If None, uses config LOG_LEVEL.
        config: Config object. If None, uses the module defaults.
    """
    if config is None:
        config = default_config
    if level is None:
        level = config.LOG_LEVEL

    logging.basicConfig(level=level.upper(), format=config.LOG_FORMAT)
