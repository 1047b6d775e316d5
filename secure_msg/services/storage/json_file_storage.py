"""JSON file backed key-value storage."""

import json
import logging
from pathlib import Path

from secure_msg.exceptions import StorageError
from secure_msg.utils import ensure_directory

logger = logging.getLogger(__name__)


class JsonFileStorage:
    """Persist string values under string keys in a single JSON object on disk.

    The whole file is rewritten on every change. Two processes writing the
    same file race, and the last write wins.
    """

    def __init__(self, file_path: Path):
        """Initialize the storage.

        Args:
            file_path: Path to the JSON file (created on first write)
        """
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get_item(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent or unreadable."""
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, rewriting the file.

        Raises:
            StorageError: If the file cannot be written
        """
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        """Remove key if present, rewriting the file."""
        items = self._load()
        if key in items:
            del items[key]
            self._save(items)

    def _load(self) -> dict:
        """Load all items from the JSON file."""
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Unreadable storage file {self._file_path}, ignoring it: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self._file_path} does not hold an object, ignoring it")
            return {}
        return data

    def _save(self, items: dict) -> None:
        """Write all items to the JSON file."""
        try:
            ensure_directory(self._file_path.parent)
            # ASCII escapes keep lone surrogates from shifted text writable
            self._file_path.write_text(json.dumps(items, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Could not write {self._file_path}: {e}") from e
