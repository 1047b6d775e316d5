"""Default configuration values for SecureMSG."""

from .config import SecureMsgConfig


def create_default_config(**overrides) -> SecureMsgConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        SecureMsgConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            storage_path="/tmp/secure_msg.json",
            record_history=False
        )
    """
    return SecureMsgConfig(**overrides)
