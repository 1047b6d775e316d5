"""Data models for SecureMSG."""

from .cipher import CipherMode, CipherRequest
from .confirmation import ConfirmState
from .history import HistoryEntry
from .validation import KeyStrength, ValidationResult

__all__ = [
    "CipherMode",
    "CipherRequest",
    "ConfirmState",
    "HistoryEntry",
    "KeyStrength",
    "ValidationResult",
]
