"""Configuration classes for SecureMSG."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SecureMsgConfig:
    """Immutable configuration for cipher and history operations.

    All configuration is frozen (immutable) so a single instance can be
    shared between the session, the history store and the CLI.
    """

    # Persistence settings
    storage_path: Path = field(
        default_factory=lambda: Path.home() / ".secure_msg" / "storage.json"
    )
    history_storage_key: str = "messageHistory"
    record_history: bool = True

    # Key settings
    min_key_length: int = 8
    strong_key_length: int = 8  # Keys must be strictly longer to earn the length point
    random_key_length: int = 16

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.storage_path, str):
            object.__setattr__(self, "storage_path", Path(self.storage_path))
