"""Shared test fixtures and configuration.

Keeps logs, config and storage files inside each test's tmp_path.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

from todolite.adapters import MemoryLocalStorage
from todolite.repositories import StorageError
from todolite.models import TodoRecord, dump_todos
from todolite.services.todo_service import TODOS_KEY, TodoService
from todolite.utils.ui.formatters import TodoItemFormatter


def _reset_logger() -> None:
    import todolite.utils.logger as logger_mod

    logger_mod._logger = None
    existing = logging.getLogger("todolite")
    for handler in list(existing.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            existing.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Route the application log file into tmp_path."""
    _reset_logger()
    with patch("todolite.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs"
    _reset_logger()


class FailingStorage(MemoryLocalStorage):
    """Reads work; every write raises StorageError."""

    def set_item(self, key: str, value: str) -> None:
        raise StorageError("disk full")


@pytest.fixture()
def storage():
    return MemoryLocalStorage()


@pytest.fixture()
def failing_storage():
    return FailingStorage()


@pytest.fixture()
def seeded_failing_storage():
    """Failing store already holding two pending todos, id1 and id2."""
    todos = [
        TodoRecord(id="id1", task="first", due_date="No due date"),
        TodoRecord(id="id2", task="second", due_date="No due date"),
    ]
    return FailingStorage({TODOS_KEY: dump_todos(todos)})


@pytest.fixture()
def todo_service(storage):
    return TodoService(storage, TodoItemFormatter())


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only and
    clears the lru_cache so each test gets a fresh service instance.
    """
    from todolite.services.config_service import ConfigService, get_config_service

    tmpdir = str(tmp_path / "config")
    get_config_service.cache_clear()
    with patch("todolite.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("todolite.services.config_service.user_data_dir", return_value=tmpdir):
            yield ConfigService()
    get_config_service.cache_clear()


@pytest.fixture()
def cli_storage(tmp_config, tmp_path, monkeypatch):
    """Point CLI commands at a storage file under tmp_path; return its path."""
    path = tmp_path / "storage.json"
    monkeypatch.setenv("TODOLITE_STORAGE", str(path))
    return path
