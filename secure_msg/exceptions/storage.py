"""Persistence and state exceptions."""

from .base import SecureMsgException


class StorageError(SecureMsgException):
    """Raised when the key-value store cannot be written."""

    pass


class InvalidStateError(SecureMsgException):
    """Raised when a confirmation step is invoked out of order."""

    pass
