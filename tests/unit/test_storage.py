"""Tests for key-value storage backends."""

import json

import pytest

from secure_msg.exceptions import StorageError
from secure_msg.services import JsonFileStorage, MemoryStorage


class TestJsonFileStorage:
    """Tests for JsonFileStorage."""

    @pytest.fixture
    def storage(self, tmp_path):
        return JsonFileStorage(tmp_path / "nested" / "storage.json")

    def test_missing_file_returns_none(self, storage):
        assert storage.get_item("messageHistory") is None

    def test_set_creates_file_and_parent_dirs(self, storage):
        storage.set_item("messageHistory", "[]")
        assert storage.file_path.exists()

    def test_set_then_get(self, storage):
        storage.set_item("messageHistory", '[{"id": "1"}]')
        assert storage.get_item("messageHistory") == '[{"id": "1"}]'

    def test_keys_are_independent(self, storage):
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        assert storage.get_item("a") == "1"
        assert storage.get_item("b") == "2"

    def test_values_survive_new_instance(self, storage):
        storage.set_item("messageHistory", "[]")
        assert JsonFileStorage(storage.file_path).get_item("messageHistory") == "[]"

    def test_remove_item(self, storage):
        storage.set_item("a", "1")
        storage.remove_item("a")
        assert storage.get_item("a") is None

    def test_remove_missing_item_is_noop(self, storage):
        storage.remove_item("never-set")
        assert not storage.file_path.exists()

    def test_corrupt_file_reads_as_empty(self, storage):
        storage.file_path.parent.mkdir(parents=True)
        storage.file_path.write_text("{oops", encoding="utf-8")
        assert storage.get_item("messageHistory") is None

    def test_non_object_file_reads_as_empty(self, storage):
        storage.file_path.parent.mkdir(parents=True)
        storage.file_path.write_text(json.dumps(["a", "b"]), encoding="utf-8")
        assert storage.get_item("messageHistory") is None

    def test_non_string_value_reads_as_none(self, storage):
        storage.file_path.parent.mkdir(parents=True)
        storage.file_path.write_text(json.dumps({"messageHistory": [1, 2]}), encoding="utf-8")
        assert storage.get_item("messageHistory") is None

    def test_corrupt_file_is_replaced_on_write(self, storage):
        storage.file_path.parent.mkdir(parents=True)
        storage.file_path.write_text("{oops", encoding="utf-8")
        storage.set_item("a", "1")
        assert json.loads(storage.file_path.read_text(encoding="utf-8")) == {"a": "1"}

    def test_unwritable_path_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        storage = JsonFileStorage(blocker / "storage.json")
        with pytest.raises(StorageError):
            storage.set_item("a", "1")


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_round_trip(self):
        storage = MemoryStorage()
        storage.set_item("k", "v")
        assert storage.get_item("k") == "v"

    def test_initial_values(self):
        assert MemoryStorage({"k": "v"}).get_item("k") == "v"

    def test_remove(self):
        storage = MemoryStorage({"k": "v"})
        storage.remove_item("k")
        storage.remove_item("k")
        assert storage.get_item("k") is None
