"""Data model for cipher history entries."""

from dataclasses import dataclass
from datetime import datetime

from .cipher import CipherMode


@dataclass(frozen=True)
class HistoryEntry:
    """A single recorded cipher operation."""

    id: str
    input_text: str
    output_text: str
    mode: CipherMode
    created_at: datetime

    def to_dict(self) -> dict:
        """Serialize to the JSON shape stored under the history key."""
        return {
            "id": self.id,
            "inputText": self.input_text,
            "outputText": self.output_text,
            "mode": self.mode.value,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        """Rebuild an entry from its stored form.

        Args:
            data: Dict with id, inputText, outputText, mode and createdAt keys

        Returns:
            HistoryEntry with created_at parsed back into a datetime

        Raises:
            KeyError: If a required key is missing
            ValueError: If mode or createdAt cannot be parsed
            TypeError: If a value has the wrong type
        """
        entry_id = data["id"]
        created_at = data["createdAt"]
        input_text = data["inputText"]
        output_text = data["outputText"]
        if not all(isinstance(v, str) for v in (entry_id, input_text, output_text)):
            raise TypeError("id, inputText and outputText must be strings")
        return cls(
            id=entry_id,
            input_text=input_text,
            output_text=output_text,
            mode=CipherMode(data["mode"]),
            created_at=datetime.fromisoformat(_normalize_utc_suffix(created_at)),
        )


def _normalize_utc_suffix(timestamp: str) -> str:
    """Rewrite a trailing "Z" (as written by JavaScript toISOString) to "+00:00".

    datetime.fromisoformat only accepts "Z" from Python 3.11 onward.
    """
    if isinstance(timestamp, str) and timestamp.endswith(("Z", "z")):
        return timestamp[:-1] + "+00:00"
    return timestamp
