"""Null presenter for testing (no output)."""

from secure_msg.models import HistoryEntry, KeyStrength


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_output(self, output: str) -> None:
        """Display the result of a cipher operation (no-op)."""
        pass

    def show_key_strength(self, strength: KeyStrength) -> None:
        """Display a key strength score (no-op)."""
        pass

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display the recorded history (no-op)."""
        pass
