"""Validation-related exceptions."""

from .base import SecureMsgException


class ValidationError(SecureMsgException):
    """Raised when user input fails validation."""

    pass


class MissingInputError(ValidationError):
    """Raised when the text or the key is empty."""

    pass


class InvalidCharacterError(ValidationError):
    """Raised when text to encrypt contains a character outside the allow-list."""

    pass


class KeyTooShortError(ValidationError):
    """Raised when the key is shorter than the minimum length."""

    pass
