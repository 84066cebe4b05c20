"""Tests for the key-value store adapters."""

from __future__ import annotations

import json

import pytest

from todolite.adapters import FileLocalStorage, MemoryLocalStorage
from todolite.repositories import KeyValueStore, StorageError


@pytest.fixture(params=["memory", "file"])
def kv(request, tmp_path) -> KeyValueStore:
    if request.param == "memory":
        return MemoryLocalStorage()
    return FileLocalStorage(tmp_path / "nested" / "storage.json")


class TestKeyValueContract:
    """Behaviour shared by every adapter."""

    def test_missing_key_is_none(self, kv):
        assert kv.get_item("todos") is None

    def test_set_then_get(self, kv):
        kv.set_item("theme", "nord")
        assert kv.get_item("theme") == "nord"

    def test_set_replaces(self, kv):
        kv.set_item("theme", "nord")
        kv.set_item("theme", "dracula")
        assert kv.get_item("theme") == "dracula"

    def test_keys_are_independent(self, kv):
        kv.set_item("theme", "nord")
        kv.set_item("todos", "[]")
        kv.remove_item("todos")
        assert kv.get_item("theme") == "nord"
        assert kv.get_item("todos") is None

    def test_remove_missing_key_is_noop(self, kv):
        kv.remove_item("nothing")
        assert kv.get_item("nothing") is None

    def test_clear(self, kv):
        kv.set_item("theme", "nord")
        kv.set_item("todos", "[]")
        kv.clear()
        assert kv.get_item("theme") is None
        assert kv.get_item("todos") is None


class TestFileLocalStorage:
    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "a" / "b" / "storage.json"
        FileLocalStorage(path).set_item("theme", "nord")
        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "nord"}

    def test_second_instance_sees_writes(self, tmp_path):
        path = tmp_path / "storage.json"
        FileLocalStorage(path).set_item("theme", "nord")
        assert FileLocalStorage(path).get_item("theme") == "nord"

    def test_corrupt_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("{not json", encoding="utf-8")
        assert FileLocalStorage(path).get_item("theme") is None

    def test_non_object_file_reads_as_empty(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert FileLocalStorage(path).get_item("theme") is None

    def test_write_failure_raises_storage_error(self, tmp_path):
        path = tmp_path / "storage.json"
        path.mkdir()
        with pytest.raises(StorageError):
            FileLocalStorage(path).set_item("theme", "nord")


class TestMemoryLocalStorage:
    def test_initial_data_is_copied(self):
        initial = {"theme": "nord"}
        kv = MemoryLocalStorage(initial)
        kv.set_item("theme", "dracula")
        assert initial == {"theme": "nord"}
