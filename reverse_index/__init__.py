"""
Reverse Index

An in-memory substring/prefix reverse index supporting word completion and
multi-term document search.

Main components:
- ReverseIndex: Generic buffer + key map core, parameterized by a strategy
- prefix_strategy / whitespace_token_strategy: Indexing strategies
- WordReverseIndex: Prefix completion over a collection of words
- DocumentReverseIndex: Match-count ranked search over documents
- Navigator: Walks to buffer-adjacent items from a search match
"""

from .config import Config, load_config
from .core import ReverseIndex
from .document_index import Document, DocumentReverseIndex
from .errors import IndexConsumedError, PositionOutOfRangeError, ReverseIndexError
from .navigator import Navigator
from .strategies import (
    IndexStrategy,
    occurrence_token_strategy,
    prefix_strategy,
    token_strategy_for,
    whitespace_token_strategy,
)
from .utils import configure_logging
from .word_index import WordReverseIndex

__version__ = "1.0.0"

__all__ = [
    "ReverseIndex",
    "IndexStrategy",
    "prefix_strategy",
    "whitespace_token_strategy",
    "occurrence_token_strategy",
    "token_strategy_for",
    "WordReverseIndex",
    "Document",
    "DocumentReverseIndex",
    "Navigator",
    "ReverseIndexError",
    "PositionOutOfRangeError",
    "IndexConsumedError",
    "Config",
    "load_config",
    "configure_logging",
]
