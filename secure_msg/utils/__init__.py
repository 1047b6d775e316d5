"""Utility functions for SecureMSG."""

from .file_utils import ensure_directory

__all__ = ["ensure_directory"]
