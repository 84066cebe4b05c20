"""Textual TUI hosting the todo widget and theme switcher."""

from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Static

from todolite.repositories import KeyValueStore, StorageError
from todolite.services.theme_service import ThemeService
from todolite.services.todo_service import TodoService
from todolite.ui.controller import (
    ALERT_SECONDS,
    MODE_UPDATE,
    SEVERITY_ERROR,
    TodoController,
    TodoRow,
)
from todolite.utils.logger import get_logger
from todolite.utils.ui.formatters import TodoItemFormatter

FILTER_LABELS = ("All", "Pending", "Completed")

DEFAULT_THEMES = (
    "textual-dark",
    "textual-light",
    "nord",
    "gruvbox",
    "dracula",
    "tokyo-night",
)

MSG_THEME_SAVE_FAILED = "Could not save theme"


class AddTaskButton(Button):
    """The add button; switches to an update affordance while editing."""

    def __init__(self, **kwargs):
        super().__init__("+ Add", variant="primary", **kwargs)
        self.mode = "add"

    def set_mode(self, mode: str) -> None:
        self.mode = mode
        if mode == MODE_UPDATE:
            self.label = "✓ Update"
            self.add_class("update-mode")
        else:
            self.label = "+ Add"
            self.remove_class("update-mode")


class FilterButton(Button):
    def __init__(self, label: str):
        super().__init__(label, classes="filter-button", compact=True)
        self.label_text = label


class ThemeButton(Button):
    def __init__(self, theme_name: str):
        super().__init__(theme_name, classes="theme-item", compact=True)
        self.theme_name = theme_name


class RowActionButton(Button):
    """Edit, toggle or delete button bound to one todo id."""

    def __init__(self, label: str, row_action: str, todo_id: str, variant: str = "default"):
        super().__init__(label, variant=variant, classes="row-action", compact=True)
        self.row_action = row_action
        self.todo_id = todo_id


class TodoRowWidget(Horizontal):
    """One rendered todo: task, due date, status and its action buttons."""

    def __init__(self, row: TodoRow):
        super().__init__(classes="todo-item")
        self.row = row
        if row.completed:
            self.add_class("completed")

    def compose(self) -> ComposeResult:
        yield Static(self.row.task, classes="todo-task", markup=False)
        yield Static(self.row.due_date, classes="todo-due", markup=False)
        yield Static(self.row.status, classes="todo-status")
        yield RowActionButton("✎", "edit", self.row.todo_id, variant="warning")
        yield RowActionButton("✓", "toggle", self.row.todo_id, variant="success")
        yield RowActionButton("✗", "delete", self.row.todo_id, variant="error")


class TodoList(VerticalScroll):
    """The list body; its content is replaced on every render."""

    def show_rows(self, rows: list[TodoRow]) -> None:
        self.remove_children()
        self.mount_all([TodoRowWidget(row) for row in rows])

    def show_placeholder(self, message: str) -> None:
        self.remove_children()
        self.mount(Static(message, classes="placeholder"))


class AlertBanner(Static):
    """Transient message area, styled by severity."""

    def show_alert(self, message: str, severity: str) -> None:
        self.update(message)
        self.remove_class("alert-success", "alert-error", "hide")
        self.add_class(f"alert-{severity}", "show")

    def hide_alert(self) -> None:
        self.remove_class("show")
        self.add_class("hide")


class TodoApp(App):
    """Todo list with add/edit/toggle/delete, filters, bulk clear and themes."""

    TITLE = "todolite"
    CSS = """
    #input-row {
        height: auto;
    }

    #task-input {
        width: 2fr;
    }

    #date-input {
        width: 1fr;
    }

    #add-task-button.update-mode {
        background: $success;
    }

    #alert-message {
        width: 100%;
        padding: 0 1;
        margin: 1 0 0 0;
    }

    #alert-message.hide {
        display: none;
    }

    #alert-message.alert-success {
        background: $success;
        color: $text;
    }

    #alert-message.alert-error {
        background: $error;
        color: $text;
    }

    #todos-filter, #theme-list {
        height: auto;
        margin: 1 0;
    }

    #delete-all-btn {
        dock: right;
    }

    #todos-list-body {
        height: 1fr;
        border: round $primary;
    }

    .todo-item {
        height: auto;
    }

    .todo-task {
        width: 2fr;
    }

    .todo-due, .todo-status {
        width: 1fr;
    }

    .todo-item.completed .todo-task {
        text-style: strike;
        color: $text-muted;
    }

    .placeholder {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }
    """
    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        storage: KeyValueStore,
        *,
        alert_seconds: float = ALERT_SECONDS,
        default_theme: str | None = None,
        themes: tuple[str, ...] = DEFAULT_THEMES,
    ):
        super().__init__()
        self.formatter = TodoItemFormatter()
        self.todo_service = TodoService(storage, self.formatter)
        self.theme_service = ThemeService(storage, self, default_theme)
        self.alert_seconds = alert_seconds
        self.theme_names = themes
        self.controller: TodoController | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="todo-form"):
            with Horizontal(id="input-row"):
                yield Input(placeholder="Add a todo...", id="task-input")
                yield Input(placeholder="Due date (YYYY-MM-DD)", id="date-input")
                yield AddTaskButton(id="add-task-button")
            yield AlertBanner("", id="alert-message", classes="hide")
            with Horizontal(id="todos-filter"):
                for label in FILTER_LABELS:
                    yield FilterButton(label)
                yield Button("Delete All", id="delete-all-btn", variant="error", compact=True)
            yield TodoList(id="todos-list-body")
            with Horizontal(id="theme-list"):
                for theme_name in self.theme_names:
                    yield ThemeButton(theme_name)
        yield Footer()

    def on_mount(self) -> None:
        self.controller = TodoController(
            self.todo_service,
            self.formatter,
            task_input=self.query_one("#task-input", Input),
            date_input=self.query_one("#date-input", Input),
            add_button=self.query_one("#add-task-button", AddTaskButton),
            list_view=self.query_one("#todos-list-body", TodoList),
            alert=self.query_one("#alert-message", AlertBanner),
            scheduler=self,
            alert_seconds=self.alert_seconds,
        )
        self.theme_service.init()
        self.controller.start()
        self.query_one("#task-input", Input).focus()

    def apply_theme(self, theme_name: str) -> None:
        """Switch to a textual theme; unknown names are logged and ignored."""
        if theme_name not in self.available_themes:
            get_logger().warning("unknown theme ignored: %s", theme_name)
            return
        self.theme = theme_name

    def get_controller(self) -> TodoController:
        if self.controller is None:
            raise RuntimeError("TodoApp is not mounted yet")
        return self.controller

    @on(Button.Pressed, "#add-task-button")
    def handle_add_pressed(self) -> None:
        self.get_controller().handle_add_todo()

    @on(Input.Submitted, "#task-input")
    def handle_task_submitted(self) -> None:
        self.get_controller().handle_enter_key()

    @on(Button.Pressed, "#delete-all-btn")
    def handle_delete_all_pressed(self) -> None:
        self.get_controller().handle_clear_all_todos()

    @on(Button.Pressed, ".filter-button")
    def handle_filter_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, FilterButton):
            self.get_controller().handle_filter_todos(event.button.label_text)

    @on(Button.Pressed, ".theme-item")
    def handle_theme_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, ThemeButton):
            try:
                self.theme_service.select_theme(event.button.theme_name)
            except StorageError as e:
                get_logger().error("saving theme failed: %s", e)
                self.get_controller().show_alert_message(MSG_THEME_SAVE_FAILED, SEVERITY_ERROR)

    @on(Button.Pressed, ".row-action")
    def handle_row_action(self, event: Button.Pressed) -> None:
        button = event.button
        if not isinstance(button, RowActionButton):
            return
        controller = self.get_controller()
        match button.row_action:
            case "edit":
                controller.handle_edit_todo(button.todo_id)
            case "toggle":
                controller.handle_toggle_status(button.todo_id)
            case "delete":
                controller.handle_delete_todo(button.todo_id)


def run_todo_app() -> None:
    """Run the TUI against the configured key-value store."""
    from todolite.services.config_service import get_config_service, get_storage

    config = get_config_service().config
    app = TodoApp(
        get_storage(),
        alert_seconds=config.ui.alert_seconds,
        default_theme=config.ui.default_theme,
    )
    app.run()
