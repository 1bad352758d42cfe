"""
Custom exceptions for phrasesync.

Both error kinds are raised at the point of detection and propagate to the
caller; nothing in the core catches them.
"""

from typing import Optional, Dict, Any, Iterable
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Lookup errors
    LANGUAGE_NOT_FOUND = "LANGUAGE_NOT_FOUND"

    # Contract violations
    INVALID_STATE = "INVALID_STATE"
    INVALID_PHRASE_ROW = "INVALID_PHRASE_ROW"


class PhraseSyncException(Exception):
    """Base exception for phrasesync."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class LanguageNotFoundError(PhraseSyncException):
    """Raised when a language ID has no language set on the project."""

    def __init__(self, language_id: str, known_languages: Optional[Iterable[str]] = None):
        details: Dict[str, Any] = {"language_id": language_id}
        if known_languages is not None:
            details["known_languages"] = sorted(known_languages)

        super().__init__(
            message=f"Unknown language ID {language_id}",
            error_code=ErrorCode.LANGUAGE_NOT_FOUND,
            details=details,
        )
        self.language_id = language_id


class InvalidStateError(PhraseSyncException):
    """Raised when an unrecognized visibility or role value is encountered."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_STATE,
            details=details,
        )


class InvalidPhraseRowError(PhraseSyncException):
    """Raised when a row returned by a phrase store fails validation."""

    def __init__(self, message: str = "Invalid phrase row", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_PHRASE_ROW,
            details=details,
        )
