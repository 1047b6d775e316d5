"""Pytest configuration and shared fixtures."""

import pytest

from secure_msg.config import SecureMsgConfig
from secure_msg.presenters import NullPresenter
from secure_msg.services import HistoryService, MemoryStorage


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return SecureMsgConfig(storage_path=temp_dir / "storage.json")


@pytest.fixture
def memory_storage():
    """Provide an empty in-memory key-value store."""
    return MemoryStorage()


@pytest.fixture
def history_service(memory_storage):
    """Provide a loaded HistoryService backed by memory storage."""
    service = HistoryService(memory_storage)
    service.load()
    return service


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


class RecordingPresenter:
    """A real presenter implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.successes = []
        self.warnings = []
        self.errors = []
        self.outputs = []
        self.strengths = []
        self.histories = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_output(self, output: str) -> None:
        self.outputs.append(output)

    def show_key_strength(self, strength) -> None:
        self.strengths.append(strength)

    def show_history(self, entries) -> None:
        self.histories.append(entries)


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()


class RecordingClipboard:
    """Clipboard that keeps every written value."""

    def __init__(self):
        self.writes = []

    def write_text(self, text: str) -> None:
        self.writes.append(text)


@pytest.fixture
def recording_clipboard():
    """Provide a clipboard that records writes."""
    return RecordingClipboard()
