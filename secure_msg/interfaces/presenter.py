"""Presenter protocol for output abstraction."""

from typing import Protocol

from secure_msg.models import HistoryEntry, KeyStrength


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    session logic to drive different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_output(self, output: str) -> None:
        """Display the result of a cipher operation.

        Args:
            output: The transformed text
        """
        ...

    def show_key_strength(self, strength: KeyStrength) -> None:
        """Display a key strength score and its suggestions.

        Args:
            strength: The strength result to display
        """
        ...

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display the recorded history.

        Args:
            entries: History entries in chronological order
        """
        ...
