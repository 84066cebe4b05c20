"""Todo display formatting and CLI output helpers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from todolite.models import TodoRecord

console = Console()

MAX_TASK_LENGTH = 14
ELLIPSIS = "..."
NO_DUE_DATE = "No due date"
STATUS_COMPLETED = "Completed"
STATUS_PENDING = "Pending"


def format_task(task: str) -> str:
    """Truncate task text longer than 14 characters and mark the cut."""
    return task[:MAX_TASK_LENGTH] + ELLIPSIS if len(task) > MAX_TASK_LENGTH else task


def format_due_date(due_date: str | None) -> str:
    """Return the due date, or the placeholder when it is empty."""
    return due_date or NO_DUE_DATE


def format_status(completed: bool) -> str:
    return STATUS_COMPLETED if completed else STATUS_PENDING


class TodoItemFormatter:
    """Bundles the todo formatting functions for injection.

    The store formats text once at insert time and the controller formats
    again at render time; both receive the same formatter instance.
    """

    def format_task(self, task: str) -> str:
        return format_task(task)

    def format_due_date(self, due_date: str | None) -> str:
        return format_due_date(due_date)

    def format_status(self, completed: bool) -> str:
        return format_status(completed)


# ============================================================================
# CLI output
# ============================================================================


def format_output(data: Any, output_format: str = "table") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        console.print(data)


def format_todo_table(todos: list[TodoRecord], title: str | None = None) -> None:
    """Render todos as a rich table, one row per record."""
    if not todos:
        console.print("[yellow]No task found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Task")
    table.add_column("Due Date")
    table.add_column("Status")

    for todo in todos:
        status = format_status(todo.completed)
        style = "green" if todo.completed else "yellow"
        table.add_row(
            Text(todo.id),
            Text(format_task(todo.task)),
            Text(format_due_date(todo.due_date)),
            f"[{style}]{status}[/{style}]",
        )

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    console.print(f"[bold blue]Info:[/bold blue] {message}")
