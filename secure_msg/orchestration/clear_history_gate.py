"""Two-step confirmation in front of clearing the history."""

import logging

from secure_msg.exceptions import InvalidStateError
from secure_msg.models import ConfirmState, HistoryEntry
from secure_msg.services import HistoryService

logger = logging.getLogger(__name__)


class ClearHistoryGate:
    """State machine: Idle -> ConfirmPending -> (Committed | Cancelled).

    The history is only cleared by confirm() while a request is pending.
    A finished gate can be reused by calling request() again.
    """

    def __init__(self, history: HistoryService):
        self.history = history
        self.state = ConfirmState.IDLE

    @property
    def is_pending(self) -> bool:
        return self.state is ConfirmState.CONFIRM_PENDING

    def request(self) -> ConfirmState:
        """Open the confirmation step."""
        self.state = ConfirmState.CONFIRM_PENDING
        return self.state

    def confirm(self) -> list[HistoryEntry]:
        """Commit the pending clear.

        Returns:
            The (empty) history log

        Raises:
            InvalidStateError: If no confirmation is pending
        """
        self._require_pending("confirm")
        cleared = self.history.clear_all()
        self.state = ConfirmState.COMMITTED
        return cleared

    def cancel(self) -> ConfirmState:
        """Abandon the pending clear, leaving history untouched.

        Raises:
            InvalidStateError: If no confirmation is pending
        """
        self._require_pending("cancel")
        self.state = ConfirmState.CANCELLED
        logger.debug("Clear history cancelled")
        return self.state

    def _require_pending(self, action: str) -> None:
        if not self.is_pending:
            raise InvalidStateError(
                f"Cannot {action}: no clear request is pending (state is {self.state.value})"
            )
