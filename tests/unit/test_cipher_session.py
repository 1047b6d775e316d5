"""Tests for the CipherSession orchestrator."""

import pytest

from secure_msg.config import SecureMsgConfig
from secure_msg.exceptions import StorageError
from secure_msg.models import CipherMode, CipherRequest
from secure_msg.orchestration import CipherSession, ClearHistoryGate
from secure_msg.services import HistoryService, MemoryStorage
from secure_msg.services.cipher_engine import KEY_ALPHABET, transform


@pytest.fixture
def session(test_config, history_service, recording_presenter):
    return CipherSession(test_config, history_service, recording_presenter)


class TestDerivedState:
    """Tests for values recomputed by the setters."""

    def test_initial_state(self, session):
        assert session.mode is CipherMode.ENCRYPT
        assert session.output == ""
        assert session.strength.score == 0
        assert session.input_error == ""
        assert session.key_error == ""

    def test_set_key_updates_strength(self, session):
        session.set_key("Abc123!@")
        assert session.strength.score == 80
        assert session.suggestions == ["Use more than 8 characters"]

    def test_set_key_flags_short_key(self, session):
        session.set_key("short")
        assert "at least 8" in session.key_error

    def test_empty_key_has_no_key_error(self, session):
        session.set_key("short")
        session.set_key("")
        assert session.key_error == ""

    def test_set_input_flags_invalid_character(self, session):
        session.set_input("hello#world")
        assert session.input_error

    def test_switching_to_decrypt_clears_input_error(self, session):
        session.set_input("hello#world")
        session.set_mode(CipherMode.DECRYPT)
        assert session.input_error == ""

    def test_generate_key(self, session, test_config):
        key = session.generate_key()
        assert len(key) == test_config.random_key_length
        assert set(key) <= set(KEY_ALPHABET)
        assert session.key == key
        assert session.key_error == ""


class TestRun:
    """Tests for CipherSession.run."""

    def test_encrypt_produces_output_and_history(self, session, recording_presenter):
        session.set_input("hello, world!")
        session.set_key("longenough")

        output = session.run()

        assert output == transform("hello, world!", "longenough", CipherMode.ENCRYPT)
        assert session.output == output
        assert recording_presenter.outputs == [output]
        assert len(session.history) == 1
        assert session.history[0].input_text == "hello, world!"
        assert session.history[0].output_text == output

    def test_decrypt_restores_plaintext(self, session):
        session.set_input("Meet at noon.")
        session.set_key("Abc123!@x")
        encrypted = session.run()

        session.set_mode(CipherMode.DECRYPT)
        session.set_input(encrypted)
        assert session.run() == "Meet at noon."
        assert [e.mode for e in session.history] == [CipherMode.ENCRYPT, CipherMode.DECRYPT]

    def test_missing_input_reports_and_returns_none(self, session, recording_presenter):
        session.set_key("longenough")
        assert session.run() is None
        assert recording_presenter.errors
        assert session.history == []

    def test_missing_key_reports_and_returns_none(self, session, recording_presenter):
        session.set_input("hello")
        assert session.run() is None
        assert len(recording_presenter.errors) == 1

    def test_invalid_input_blocks_run(self, session, recording_presenter):
        session.set_input("hello#world")
        session.set_key("longenough")
        assert session.run() is None
        assert session.output == ""
        assert recording_presenter.outputs == []

    def test_short_key_blocks_run(self, session, recording_presenter):
        session.set_input("hello")
        session.set_key("short")
        assert session.run() is None
        assert any("at least 8" in e for e in recording_presenter.errors)

    def test_out_of_range_reported(self, session, recording_presenter):
        session.set_mode(CipherMode.DECRYPT)
        session.set_input("aaa")
        session.set_key("zzzzzzzz")
        assert session.run() is None
        assert any("position 0" in e for e in recording_presenter.errors)

    def test_record_history_disabled(self, history_service, recording_presenter, tmp_path):
        config = SecureMsgConfig(storage_path=tmp_path / "s.json", record_history=False)
        session = CipherSession(config, history_service, recording_presenter)
        session.set_input("hello")
        session.set_key("longenough")
        assert session.run() is not None
        assert history_service.entries == []

    def test_storage_failure_still_returns_output(self, test_config, recording_presenter):
        class FailingStorage(MemoryStorage):
            def set_item(self, key, value):
                raise StorageError("read-only")

        session = CipherSession(test_config, HistoryService(FailingStorage()), recording_presenter)
        session.set_input("hello")
        session.set_key("longenough")
        assert session.run() is not None
        assert recording_presenter.warnings
        assert session.history == []


class TestCopyOutput:
    """Tests for CipherSession.copy_output."""

    def test_nothing_to_copy(self, session, recording_clipboard):
        assert session.copy_output(recording_clipboard) is False
        assert recording_clipboard.writes == []

    def test_copies_current_output(self, session, recording_clipboard):
        session.set_input("hello")
        session.set_key("longenough")
        output = session.run()

        copied = []
        assert session.copy_output(recording_clipboard, on_copied=lambda: copied.append(True))
        assert recording_clipboard.writes == [output]
        assert copied == [True]


class TestHistoryView:
    """Tests for CipherSession.history staying in step with the store."""

    def _run_once(self, session, text="hello"):
        session.set_input(text)
        session.set_key("longenough")
        return session.run()

    def test_reflects_clear_through_gate(self, session, history_service):
        self._run_once(session)
        gate = ClearHistoryGate(history_service)
        gate.request()
        gate.confirm()
        assert session.history == history_service.entries == []

    def test_reflects_delete_entry(self, session, history_service):
        self._run_once(session, "one")
        self._run_once(session, "two")
        first = session.history[0]

        history_service.delete_entry(first.id)

        assert session.history == history_service.entries
        assert [e.input_text for e in session.history] == ["two"]

    def test_reflects_load_after_construction(self, test_config, memory_storage, null_presenter):
        HistoryService(memory_storage).record("earlier", "out", CipherMode.ENCRYPT)
        history = HistoryService(memory_storage)
        session = CipherSession(test_config, history, null_presenter)

        history.load()

        assert session.history == history.entries
        assert [e.input_text for e in session.history] == ["earlier"]


class TestRequest:
    """Tests for CipherSession.request."""

    def test_request_mirrors_current_fields(self, session):
        session.set_mode(CipherMode.DECRYPT)
        session.set_input("text")
        session.set_key("longenough")
        assert session.request == CipherRequest(
            text="text", key="longenough", mode=CipherMode.DECRYPT
        )
