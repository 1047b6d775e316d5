"""System clipboard access and the transient "copied" indicator."""

from PyQt6.QtCore import QObject, QTimer, pyqtSignal
from PyQt6.QtGui import QGuiApplication

DEFAULT_RESET_MS = 2000


class QtClipboard:
    """Clipboard collaborator backed by the running Qt application.

    A QGuiApplication (or QApplication) must exist before write_text is called.
    """

    def write_text(self, text: str) -> None:
        """Place text on the system clipboard."""
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise RuntimeError("No Qt application is running; cannot access the clipboard")
        clipboard.setText(text)


class CopyFeedback(QObject):
    """Holds the "copied" flag shown after a copy and resets it after a delay.

    Copying again while the flag is set restarts the delay. Destroying the
    object stops its timer along with it.
    """

    # Emitted with the new flag value whenever it changes
    copied_changed = pyqtSignal(bool)

    def __init__(self, reset_ms: int = DEFAULT_RESET_MS, parent=None):
        """Initialize the indicator.

        Args:
            reset_ms: Milliseconds before the flag clears itself
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self._copied = False
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(reset_ms)
        self._timer.timeout.connect(self.reset)

    @property
    def copied(self) -> bool:
        return self._copied

    @property
    def reset_ms(self) -> int:
        return self._timer.interval()

    def mark_copied(self) -> None:
        """Turn the flag on and (re)start the reset timer."""
        self._set_copied(True)
        self._timer.start()

    def reset(self) -> None:
        """Turn the flag off immediately."""
        self._timer.stop()
        self._set_copied(False)

    def _set_copied(self, value: bool) -> None:
        if self._copied != value:
            self._copied = value
            self.copied_changed.emit(value)
