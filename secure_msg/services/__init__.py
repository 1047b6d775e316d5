"""Business logic services for SecureMSG."""

from .cipher_engine import (
    generate_random_key,
    score_key_strength,
    transform,
    validate_input,
    validate_key,
)
from .history_service import HistoryService
from .storage import JsonFileStorage, MemoryStorage

__all__ = [
    "transform",
    "validate_input",
    "validate_key",
    "score_key_strength",
    "generate_random_key",
    "HistoryService",
    "JsonFileStorage",
    "MemoryStorage",
]
