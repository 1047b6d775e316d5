"""Orchestration layer tying services to a presenter."""

from .cipher_session import CipherSession
from .clear_history_gate import ClearHistoryGate

__all__ = ["CipherSession", "ClearHistoryGate"]
