"""Todo service - owns the todo list and its persistence.

The whole list is the unit of persistence: every mutation re-serializes the
complete list to the key-value store under ``TODOS_KEY``. Callers only ever
receive copies of records, so nothing outside this service can change the
list without it being persisted.
"""

from __future__ import annotations

import random
import string
from collections.abc import Callable

from pydantic import ValidationError

from todolite.models import TodoRecord, dump_todos, load_todos
from todolite.repositories import KeyValueStore
from todolite.utils.logger import get_logger
from todolite.utils.ui.formatters import TodoItemFormatter

TODOS_KEY = "todos"

FILTER_ALL = "all"
FILTER_PENDING = "pending"
FILTER_COMPLETED = "completed"
FILTER_CRITERIA = (FILTER_ALL, FILTER_PENDING, FILTER_COMPLETED)

_BASE36 = string.digits + string.ascii_lowercase
_FRAGMENT_LENGTH = 13


def _random_fragment() -> str:
    return "".join(random.choices(_BASE36, k=_FRAGMENT_LENGTH))


def generate_todo_id() -> str:
    """Return two random base-36 fragments concatenated.

    No uniqueness check is made; a collision between 26-character random
    strings is not expected in a single user's list.
    """
    return _random_fragment() + _random_fragment()


class TodoService:
    """Service for todo list operations.

    Args:
        storage: Key-value store the list is loaded from and saved to
        formatter: Formatter applied to task text and due date on add
        id_factory: Callable producing fresh todo ids
    """

    def __init__(
        self,
        storage: KeyValueStore,
        formatter: TodoItemFormatter | None = None,
        id_factory: Callable[[], str] = generate_todo_id,
    ):
        self.storage = storage
        self.formatter = formatter or TodoItemFormatter()
        self.id_factory = id_factory
        self._todos: list[TodoRecord] = self._load()

    def _load(self) -> list[TodoRecord]:
        raw = self.storage.get_item(TODOS_KEY)
        if raw is None:
            return []
        try:
            return load_todos(raw)
        except ValidationError as e:
            get_logger().warning(
                "stored todo list is malformed, starting empty: %s", e.error_count()
            )
            return []

    def _commit(self, todos: list[TodoRecord]) -> None:
        """Persist *todos*, then make them the live list.

        If the write raises ``StorageError`` the live list is left unchanged.
        """
        self.storage.set_item(TODOS_KEY, dump_todos(todos))
        self._todos = todos

    def _find(self, todo_id: str) -> TodoRecord | None:
        return next((t for t in self._todos if t.id == todo_id), None)

    def _replace(self, updated: TodoRecord) -> list[TodoRecord]:
        return [updated if t.id == updated.id else t for t in self._todos]

    def add_todo(self, task: str, due_date: str | None = None) -> TodoRecord:
        """Create a todo, append it to the list and persist.

        Task text and due date are formatted here, once. Empty task text is
        accepted; rejecting it is the caller's job.
        """
        todo = TodoRecord(
            id=self.id_factory(),
            task=self.formatter.format_task(task),
            due_date=self.formatter.format_due_date(due_date),
        )
        self._commit([*self._todos, todo])
        get_logger().info("todo added: %s", todo.id)
        return todo.model_copy()

    def edit_todo(self, todo_id: str, updated_task: str) -> TodoRecord | None:
        """Replace a todo's task text in place with the raw, unformatted text.

        Returns:
            The updated todo, or None (and nothing persisted) if not found
        """
        todo = self._find(todo_id)
        if todo is None:
            return None
        updated = todo.model_copy(update={"task": updated_task})
        self._commit(self._replace(updated))
        get_logger().info("todo edited: %s", todo_id)
        return updated.model_copy()

    def delete_todo(self, todo_id: str) -> None:
        """Remove a todo if present. The list is persisted either way."""
        self._commit([t for t in self._todos if t.id != todo_id])
        get_logger().info("todo deleted: %s", todo_id)

    def toggle_todo_status(self, todo_id: str) -> None:
        todo = self._find(todo_id)
        if todo is None:
            return
        updated = todo.model_copy(update={"completed": not todo.completed})
        self._commit(self._replace(updated))
        get_logger().info("todo toggled: %s completed=%s", todo_id, updated.completed)

    def clear_all_todos(self) -> None:
        if not self._todos:
            return
        self._commit([])
        get_logger().info("all todos cleared")

    def filter_todos(self, status: str) -> list[TodoRecord]:
        """Return copies of the todos matching *status*.

        Args:
            status: "all", "pending" or "completed"; anything else matches nothing
        """
        if status == FILTER_ALL:
            selected = self._todos
        elif status == FILTER_PENDING:
            selected = [t for t in self._todos if not t.completed]
        elif status == FILTER_COMPLETED:
            selected = [t for t in self._todos if t.completed]
        else:
            selected = []
        return [t.model_copy() for t in selected]

    def get_todo(self, todo_id: str) -> TodoRecord | None:
        todo = self._find(todo_id)
        return todo.model_copy() if todo is not None else None


def get_todo_service() -> TodoService:
    """Get a TodoService over the configured key-value store."""
    from todolite.services.config_service import get_storage

    return TodoService(get_storage())
