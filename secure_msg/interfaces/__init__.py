"""Interface protocols for SecureMSG."""

from .clipboard import Clipboard
from .presenter import PresenterProtocol
from .storage import KeyValueStorage

__all__ = ["Clipboard", "KeyValueStorage", "PresenterProtocol"]
