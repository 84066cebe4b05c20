"""Todo UI controller.

Connects the todo service to whatever UI hosts it. The controller never
touches widgets directly; it talks to small capability protocols (a text
source, an action button, a render target, an alert area and a timer
scheduler) so the same logic drives the textual app and the tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from todolite.models import TodoRecord
from todolite.repositories import StorageError
from todolite.services.todo_service import FILTER_ALL, TodoService
from todolite.utils.logger import get_logger
from todolite.utils.ui.formatters import TodoItemFormatter

ALERT_SECONDS = 3.0

SEVERITY_SUCCESS = "success"
SEVERITY_ERROR = "error"

MODE_ADD = "add"
MODE_UPDATE = "update"

MSG_EMPTY_TASK = "Please enter a task"
MSG_ADDED = "Task added successfully"
MSG_UPDATED = "Todo updated successfully"
MSG_DELETED = "Todo deleted successfully"
MSG_CLEARED = "All todos cleared successfully"
MSG_NO_TASK = "No task found"
MSG_SAVE_FAILED = "Could not save todos"


@runtime_checkable
class TextSource(Protocol):
    """An input producing (and accepting) a string value."""

    value: str


@runtime_checkable
class ActionButton(Protocol):
    """The add button; it shows either the add or the update affordance."""

    def set_mode(self, mode: str) -> None:
        ...


@runtime_checkable
class RenderTarget(Protocol):
    """A container whose displayed content can be replaced wholesale."""

    def show_rows(self, rows: list[TodoRow]) -> None:
        ...

    def show_placeholder(self, message: str) -> None:
        ...


@runtime_checkable
class AlertTarget(Protocol):
    def show_alert(self, message: str, severity: str) -> None:
        ...

    def hide_alert(self) -> None:
        ...


@runtime_checkable
class TimerHandle(Protocol):
    def stop(self) -> None:
        ...


@runtime_checkable
class Scheduler(Protocol):
    """Runs a callback once after a delay (textual's ``App.set_timer`` fits)."""

    def set_timer(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        ...


@dataclass(frozen=True)
class TodoRow:
    """Display values for one rendered todo, plus the id its actions target."""

    todo_id: str
    task: str
    due_date: str
    status: str
    completed: bool


class TodoController:
    """Handles every user trigger of the todo widget.

    Editing is delete-then-re-add: ``handle_edit_todo`` moves the record's
    text into the task input and removes the record; the next add trigger
    creates a fresh record (with a new id) from the input. ``editing_id``
    holds the id being edited, or None when idle.
    """

    def __init__(
        self,
        todo_service: TodoService,
        formatter: TodoItemFormatter,
        *,
        task_input: TextSource,
        date_input: TextSource,
        add_button: ActionButton,
        list_view: RenderTarget,
        alert: AlertTarget,
        scheduler: Scheduler,
        alert_seconds: float = ALERT_SECONDS,
    ):
        self.todo_service = todo_service
        self.formatter = formatter
        self.task_input = task_input
        self.date_input = date_input
        self.add_button = add_button
        self.list_view = list_view
        self.alert = alert
        self.scheduler = scheduler
        self.alert_seconds = alert_seconds

        self.editing_id: str | None = None
        self._hide_timer: TimerHandle | None = None

    @property
    def mode(self) -> str:
        return MODE_ADD if self.editing_id is None else MODE_UPDATE

    def start(self) -> None:
        """Render the initial, unfiltered list."""
        self.show_all_todos()

    # -------------------- triggers --------------------

    def handle_add_todo(self) -> None:
        task = self.task_input.value
        due_date = self.date_input.value
        if task == "":
            self.show_alert_message(MSG_EMPTY_TASK, SEVERITY_ERROR)
            return

        try:
            self.todo_service.add_todo(task, due_date)
        except StorageError as e:
            self._save_failed(e)
            return

        self.show_all_todos()
        self.task_input.value = ""
        self.date_input.value = ""

        if self.editing_id is not None:
            get_logger().debug("edit of %s committed", self.editing_id)
            self.editing_id = None
            self.add_button.set_mode(MODE_ADD)
            self.show_alert_message(MSG_UPDATED, SEVERITY_SUCCESS)
        else:
            self.show_alert_message(MSG_ADDED, SEVERITY_SUCCESS)

    def handle_enter_key(self) -> None:
        if len(self.task_input.value) > 0:
            self.handle_add_todo()

    def handle_clear_all_todos(self) -> None:
        try:
            self.todo_service.clear_all_todos()
        except StorageError as e:
            self._save_failed(e)
            return
        self.show_all_todos()
        self.show_alert_message(MSG_CLEARED, SEVERITY_SUCCESS)

    def handle_filter_todos(self, label: str) -> None:
        """Show only the todos matching a filter button's label.

        The view stays filtered until the next mutation re-renders the full list.
        """
        status = label.strip().lower()
        self.display_todos(self.todo_service.filter_todos(status))

    def handle_edit_todo(self, todo_id: str) -> None:
        todo = self.todo_service.get_todo(todo_id)
        if todo is None:
            return

        try:
            self.todo_service.delete_todo(todo_id)
        except StorageError as e:
            self._save_failed(e)
            return

        self.task_input.value = todo.task
        self.show_all_todos()

        self.editing_id = todo_id
        self.add_button.set_mode(MODE_UPDATE)

    def handle_toggle_status(self, todo_id: str) -> None:
        try:
            self.todo_service.toggle_todo_status(todo_id)
        except StorageError as e:
            self._save_failed(e)
            return
        self.show_all_todos()

    def handle_delete_todo(self, todo_id: str) -> None:
        try:
            self.todo_service.delete_todo(todo_id)
        except StorageError as e:
            self._save_failed(e)
            return
        self.show_alert_message(MSG_DELETED, SEVERITY_SUCCESS)
        self.show_all_todos()

    # -------------------- rendering --------------------

    def show_all_todos(self) -> None:
        self.display_todos(self.todo_service.filter_todos(FILTER_ALL))

    def display_todos(self, todos: list[TodoRecord]) -> None:
        if not todos:
            self.list_view.show_placeholder(MSG_NO_TASK)
            return

        rows = [
            TodoRow(
                todo_id=todo.id,
                task=self.formatter.format_task(todo.task),
                due_date=self.formatter.format_due_date(todo.due_date),
                status=self.formatter.format_status(todo.completed),
                completed=todo.completed,
            )
            for todo in todos
        ]
        self.list_view.show_rows(rows)

    def show_alert_message(self, message: str, severity: str) -> None:
        """Show an alert and hide it after ``alert_seconds``.

        A pending hide from an earlier alert is stopped first, so each alert
        stays up for its full duration.
        """
        self.alert.show_alert(message, severity)
        if self._hide_timer is not None:
            self._hide_timer.stop()
        self._hide_timer = self.scheduler.set_timer(self.alert_seconds, self._hide_alert)

    def _save_failed(self, error: StorageError) -> None:
        """Report a failed write. The list and the inputs are left as they were."""
        get_logger().error("saving todos failed: %s", error)
        self.show_alert_message(MSG_SAVE_FAILED, SEVERITY_ERROR)

    def _hide_alert(self) -> None:
        self._hide_timer = None
        self.alert.hide_alert()
