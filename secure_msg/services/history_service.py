"""Persisted log of past cipher operations."""

import json
import logging
import uuid
from datetime import datetime, timezone

from secure_msg.interfaces import KeyValueStorage
from secure_msg.models import CipherMode, HistoryEntry

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "messageHistory"


class HistoryService:
    """Service for recording and managing cipher history.

    The full log is kept in memory and written back to the storage backend
    as one JSON array on every mutation. Entries are never edited in place,
    only appended, deleted individually or cleared together.
    """

    def __init__(self, storage: KeyValueStorage, storage_key: str = DEFAULT_STORAGE_KEY):
        """Initialize the history service.

        Args:
            storage: Key-value backend holding the serialized log
            storage_key: Key the log is stored under
        """
        self.storage = storage
        self.storage_key = storage_key
        self._entries: list[HistoryEntry] = []

    @property
    def entries(self) -> list[HistoryEntry]:
        """Current log, oldest first (a copy)."""
        return list(self._entries)

    def load(self) -> list[HistoryEntry]:
        """Replace the in-memory log with the persisted one.

        Missing or corrupt data yields an empty log; this never raises.

        Returns:
            The loaded entries, oldest first
        """
        self._entries = self._read()
        logger.info(f"Loaded {len(self._entries)} history entries")
        return self.entries

    def record(self, input_text: str, output_text: str, mode: CipherMode) -> HistoryEntry:
        """Append a new entry and persist the log.

        Args:
            input_text: Text the user submitted
            output_text: Result of the transform
            mode: Mode the transform ran in

        Returns:
            The newly created entry

        Raises:
            StorageError: If the log cannot be persisted (memory is left unchanged)
        """
        entry = HistoryEntry(
            id=self._new_id(),
            input_text=input_text,
            output_text=output_text,
            mode=mode,
            created_at=datetime.now(timezone.utc),
        )
        self._commit([*self._entries, entry])
        logger.debug(f"Recorded {mode.value} history entry {entry.id}")
        return entry

    def get_entry(self, entry_id: str) -> HistoryEntry | None:
        """Get a specific entry by ID, or None if not found."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def delete_entry(self, entry_id: str) -> list[HistoryEntry]:
        """Remove an entry by ID. Unknown IDs are ignored.

        Args:
            entry_id: ID of the entry to remove

        Returns:
            The updated log
        """
        remaining = [e for e in self._entries if e.id != entry_id]
        if len(remaining) == len(self._entries):
            logger.debug(f"No history entry {entry_id} to delete")
        self._commit(remaining)
        return self.entries

    def clear_all(self) -> list[HistoryEntry]:
        """Remove every entry in a single write. There is no undo.

        Returns:
            The (empty) log
        """
        count = len(self._entries)
        self._commit([])
        logger.info(f"Cleared {count} history entries")
        return self.entries

    def _commit(self, entries: list[HistoryEntry]) -> None:
        """Persist entries, then adopt them as the in-memory log."""
        blob = json.dumps([e.to_dict() for e in entries])
        self.storage.set_item(self.storage_key, blob)
        self._entries = entries

    def _read(self) -> list[HistoryEntry]:
        """Parse the persisted blob, skipping anything malformed."""
        blob = self.storage.get_item(self.storage_key)
        if blob is None:
            return []
        try:
            data = json.loads(blob)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt history data, starting empty: {e}")
            return []
        if not isinstance(data, list):
            logger.warning("History data is not a list, starting empty")
            return []

        entries: list[HistoryEntry] = []
        seen_ids: set[str] = set()
        for item in data:
            try:
                entry = HistoryEntry.from_dict(item)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed history entry: {e}")
                continue
            if entry.id in seen_ids:
                logger.warning(f"Skipping duplicate history entry {entry.id}")
                continue
            seen_ids.add(entry.id)
            entries.append(entry)
        return entries

    @staticmethod
    def _new_id() -> str:
        return uuid.uuid4().hex
