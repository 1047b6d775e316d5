"""Custom exceptions for SecureMSG."""

from .base import SecureMsgException
from .cipher import CodePointOutOfRangeError
from .storage import InvalidStateError, StorageError
from .validation import (
    InvalidCharacterError,
    KeyTooShortError,
    MissingInputError,
    ValidationError,
)

__all__ = [
    "SecureMsgException",
    "ValidationError",
    "MissingInputError",
    "InvalidCharacterError",
    "KeyTooShortError",
    "CodePointOutOfRangeError",
    "StorageError",
    "InvalidStateError",
]
