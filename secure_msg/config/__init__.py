"""Configuration management for SecureMSG."""

from .config import SecureMsgConfig
from .defaults import create_default_config

__all__ = ["SecureMsgConfig", "create_default_config"]
