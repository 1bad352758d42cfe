"""
Core infrastructure for phrasesync: errors, logging and database wiring.
"""

from .exceptions import (
    ErrorCode,
    PhraseSyncException,
    LanguageNotFoundError,
    InvalidStateError,
    InvalidPhraseRowError,
)
from .logging import configure_logging

__all__ = [
    "ErrorCode",
    "PhraseSyncException",
    "LanguageNotFoundError",
    "InvalidStateError",
    "InvalidPhraseRowError",
    "configure_logging",
]
