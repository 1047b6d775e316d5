"""Qt collaborators for a SecureMSG front end."""

from .clipboard import CopyFeedback, QtClipboard

__all__ = ["CopyFeedback", "QtClipboard"]
