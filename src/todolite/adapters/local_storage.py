"""Key-value store adapters.

``FileLocalStorage`` keeps every key in a single JSON object on disk, the
terminal counterpart of a browser profile's ``localStorage``.
``MemoryLocalStorage`` keeps them in a dict and is used by tests and
throwaway sessions.
"""

from __future__ import annotations

import json
from json import JSONDecodeError
from pathlib import Path

from todolite.repositories import KeyValueStore, StorageError
from todolite.utils.logger import get_logger


class FileLocalStorage(KeyValueStore):
    """Key-value store backed by one JSON file.

    The file is re-read on every access, but ``TodoService`` loads the todo
    list once when it is built. A running TUI therefore does not see todos
    changed by a CLI command, and its next save overwrites them.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, JSONDecodeError) as e:
            get_logger().warning("storage file %s unreadable, using empty store: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            get_logger().warning("storage file %s is not a JSON object, ignoring", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def clear(self) -> None:
        self._write({})


class MemoryLocalStorage(KeyValueStore):
    """In-process key-value store."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()
