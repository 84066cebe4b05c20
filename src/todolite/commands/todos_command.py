"""Todo commands - scriptable access to the same list the UI shows."""

from typing import Annotated

import typer
from rich.markup import escape

from todolite.services.todo_service import FILTER_ALL, FILTER_CRITERIA, get_todo_service
from todolite.ui.controller import MSG_EMPTY_TASK
from todolite.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from todolite.utils.ui.formatters import (
    format_info,
    format_output,
    format_status,
    format_success,
    format_todo_table,
)

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Todo management commands", no_args_is_help=True)


def _not_found(todo_id: str) -> AppError:
    return AppError(f"Todo '{todo_id}' not found", ERROR_NOT_FOUND)


@app.command("add")
@command_wrapper
def add_todo(
    task: Annotated[str, typer.Argument(help="Task text")],
    due: Annotated[
        str, typer.Option("--due", "-d", help="Due date, free text (e.g. 2024-01-01)")
    ] = "",
) -> None:
    """Add a todo."""
    if task == "":
        raise AppError(MSG_EMPTY_TASK, ERROR_INVALID_ARGS)

    todo = get_todo_service().add_todo(task, due)
    format_success(f"Task added: {escape(todo.task)} [dim]({todo.id})[/dim]")


@app.command("list")
@command_wrapper
def list_todos(
    status: Annotated[
        str, typer.Option("--filter", "-f", help="all, pending or completed")
    ] = FILTER_ALL,
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output format: table, json, yaml")
    ] = "table",
) -> None:
    """List todos."""
    status = status.lower()
    if status not in FILTER_CRITERIA:
        raise AppError(
            f"Unknown filter '{status}'. Use one of: {', '.join(FILTER_CRITERIA)}",
            ERROR_INVALID_ARGS,
        )

    todos = get_todo_service().filter_todos(status)
    if output == "table":
        format_todo_table(todos)
    else:
        format_output([t.model_dump(by_alias=True) for t in todos], output)


@app.command("edit")
@command_wrapper
def edit_todo(
    todo_id: Annotated[str, typer.Argument(help="Todo ID")],
    task: Annotated[str, typer.Argument(help="New task text")],
) -> None:
    """Replace a todo's text in place (the id is kept)."""
    if task == "":
        raise AppError(MSG_EMPTY_TASK, ERROR_INVALID_ARGS)

    todo = get_todo_service().edit_todo(todo_id, task)
    if todo is None:
        raise _not_found(todo_id)
    format_success(f"Todo updated: {escape(todo.task)}")


@app.command("toggle")
@command_wrapper
def toggle_todo(todo_id: Annotated[str, typer.Argument(help="Todo ID")]) -> None:
    """Flip a todo between pending and completed."""
    service = get_todo_service()
    service.toggle_todo_status(todo_id)
    todo = service.get_todo(todo_id)
    if todo is None:
        raise _not_found(todo_id)
    format_success(f"{escape(todo.task)}: {format_status(todo.completed)}")


@app.command("delete")
@command_wrapper
def delete_todo(todo_id: Annotated[str, typer.Argument(help="Todo ID")]) -> None:
    """Delete a todo."""
    service = get_todo_service()
    if service.get_todo(todo_id) is None:
        raise _not_found(todo_id)

    service.delete_todo(todo_id)
    format_success("Todo deleted successfully")


@app.command("clear")
@command_wrapper
def clear_todos(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Delete every todo."""
    if not yes and not typer.confirm("Delete all todos?"):
        format_info("Cancelled")
        raise typer.Exit(0)

    get_todo_service().clear_all_todos()
    format_success("All todos cleared successfully")
