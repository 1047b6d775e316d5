"""Orchestrator holding the state a cipher front end renders."""

from __future__ import annotations

import logging
from collections.abc import Callable

from secure_msg.config import SecureMsgConfig
from secure_msg.exceptions import CodePointOutOfRangeError, StorageError
from secure_msg.interfaces import Clipboard, PresenterProtocol
from secure_msg.models import CipherMode, CipherRequest, HistoryEntry
from secure_msg.services import (
    HistoryService,
    generate_random_key,
    score_key_strength,
    transform,
    validate_input,
    validate_key,
)

logger = logging.getLogger(__name__)


class CipherSession:
    """Keep input, key, mode and derived values in sync for one user session.

    Each setter recomputes whatever depends on the changed value straight
    away, so a front end only needs to call the setter from its change
    handler and then render the public attributes.
    """

    def __init__(
        self,
        config: SecureMsgConfig,
        history: HistoryService,
        presenter: PresenterProtocol,
    ):
        """Initialize the session.

        Args:
            config: Configuration
            history: History store (already loaded or to be loaded by the caller)
            presenter: Output presenter
        """
        self.config = config
        self.history_service = history
        self.presenter = presenter

        self.input = ""
        self.key = ""
        self.mode = CipherMode.ENCRYPT
        self.output = ""
        self.input_error = ""
        self.key_error = ""
        self.strength = score_key_strength("", config.strong_key_length)

    @property
    def history(self) -> list[HistoryEntry]:
        """Current history log, read through to the store on every access."""
        return self.history_service.entries

    @property
    def request(self) -> CipherRequest:
        return CipherRequest(text=self.input, key=self.key, mode=self.mode)

    @property
    def suggestions(self) -> list[str]:
        return self.strength.suggestions

    def set_input(self, text: str) -> None:
        self.input = text
        self._check_input()

    def set_key(self, key: str) -> None:
        self.key = key
        self._check_key()

    def set_mode(self, mode: CipherMode) -> None:
        self.mode = mode
        self._check_input()

    def generate_key(self) -> str:
        """Replace the key with a random one and return it."""
        self.set_key(generate_random_key(self.config.random_key_length))
        return self.key

    def run(self) -> str | None:
        """Transform the current input with the current key and mode.

        Validation failures and out-of-range shifts are reported through the
        presenter rather than raised.

        Returns:
            The transformed text, or None if nothing was produced
        """
        if not self.input or not self.key:
            self.presenter.show_error("Please enter both a message and a key")
            return None

        self._check_input()
        self._check_key()
        if self.input_error or self.key_error:
            for message in (self.input_error, self.key_error):
                if message:
                    self.presenter.show_error(message)
            return None

        request = self.request
        try:
            output = transform(request.text, request.key, request.mode)
        except CodePointOutOfRangeError as e:
            self.presenter.show_error(str(e))
            return None

        self.output = output
        self.presenter.show_output(output)

        if self.config.record_history:
            try:
                self.history_service.record(request.text, output, request.mode)
            except StorageError as e:
                logger.warning(f"History not saved: {e}")
                self.presenter.show_warning(f"Result not saved to history: {e}")

        return output

    def copy_output(
        self,
        clipboard: Clipboard,
        on_copied: Callable[[], None] | None = None,
    ) -> bool:
        """Send the current output to the clipboard.

        Args:
            clipboard: Clipboard collaborator (fire-and-forget)
            on_copied: Optional hook, e.g. CopyFeedback.mark_copied

        Returns:
            True if there was output to copy
        """
        if not self.output:
            return False
        clipboard.write_text(self.output)
        if on_copied is not None:
            on_copied()
        return True

    def _check_input(self) -> None:
        self.input_error = validate_input(self.input, self.mode).message

    def _check_key(self) -> None:
        self.strength = score_key_strength(self.key, self.config.strong_key_length)
        # An empty key is reported as missing input when run, not as too short
        if self.key:
            self.key_error = validate_key(self.key, self.config.min_key_length).message
        else:
            self.key_error = ""
