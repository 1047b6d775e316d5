"""States of the two-step clear-history confirmation."""

from enum import Enum


class ConfirmState(Enum):
    """Where a confirm-then-commit interaction currently stands."""

    IDLE = "idle"
    CONFIRM_PENDING = "confirm_pending"
    COMMITTED = "committed"
    CANCELLED = "cancelled"
