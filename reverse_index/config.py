"""
Configuration settings for the reverse index library.

This module contains the configurable parameters of the indexes.
Modify these values, or pass overrides to load_config(), to customize
the behavior of the system.
"""

from typing import Any, Dict, Optional

# Search settings
DEFAULT_SEARCH_LIMIT = 10  # Documents returned when search() gets no limit

# Indexing settings
DEDUPLICATE_DOCUMENT_TOKENS = True  # Index a repeated word once per document

# Summary settings
SUMMARY_TOP_KEYS = 5  # Widest keys listed by summarize_index()

# Logging settings
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_SETTINGS = (
    "DEFAULT_SEARCH_LIMIT",
    "DEDUPLICATE_DOCUMENT_TOKENS",
    "SUMMARY_TOP_KEYS",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


class Config:
    """Settings object holding the module defaults plus any overrides."""

    def __init__(self, config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize from the module defaults.

        Args:
            config_dict: Optional mapping of setting name to value.

        Raises:
            ValueError: If config_dict names an unknown setting.
        """
        for key in _SETTINGS:
            setattr(self, key, globals()[key])
        for key, value in (config_dict or {}).items():
            if key not in _SETTINGS:
                raise ValueError(f"Unknown configuration key: {key}")
            setattr(self, key, value)

    def as_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, key) for key in _SETTINGS}

    def __repr__(self) -> str:
        return f"Config({self.as_dict()!r})"


def load_config(config_dict: Optional[Any] = None) -> Config:
    """
    Load configuration from the module defaults or the provided overrides.

    Args:
        config_dict: None, a dict of overrides, or an existing Config
            (returned unchanged).

    Returns:
        A Config instance.
    """
    if isinstance(config_dict, Config):
        return config_dict
    return Config(config_dict)
