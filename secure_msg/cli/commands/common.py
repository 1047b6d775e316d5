"""Helpers shared by CLI commands."""

from secure_msg.config import SecureMsgConfig, create_default_config


def config_from_args(args, **overrides) -> SecureMsgConfig:
    """Build a configuration from global CLI options plus overrides."""
    if getattr(args, "storage", None):
        overrides["storage_path"] = args.storage
    return create_default_config(**overrides)
