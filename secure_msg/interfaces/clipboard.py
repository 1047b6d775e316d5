"""Protocol for the system clipboard."""

from typing import Protocol


class Clipboard(Protocol):
    """Write-only access to the system clipboard."""

    def write_text(self, text: str) -> None:
        """Place text on the clipboard. Completion is not awaited."""
        ...
