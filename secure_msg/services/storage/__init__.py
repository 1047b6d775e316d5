"""Key-value storage backends for the history store."""

from .json_file_storage import JsonFileStorage
from .memory_storage import MemoryStorage

__all__ = ["JsonFileStorage", "MemoryStorage"]
