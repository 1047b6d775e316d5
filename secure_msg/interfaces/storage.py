"""Protocol for key-value persistence backends."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Interface for a string key-value store, modelled on browser localStorage.

    The history store keeps its whole log as one serialized blob under a
    single key, so backends only need whole-value get and set.
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent or unreadable."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one.

        Raises:
            StorageError: If the value cannot be persisted.
        """
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing a missing key is not an error."""
        ...
