"""Main entry point for todolite."""

import typer

from todolite import __version__
from todolite.commands import config_command, theme_command, todos_command
from todolite.ui.todo_app import run_todo_app
from todolite.utils.ui.formatters import console

app = typer.Typer(
    name="todolite",
    help="A small todo list for the terminal, with a TUI and scriptable commands",
    no_args_is_help=True,
)

app.add_typer(todos_command.app, name="todos", help="Todo management commands")
app.add_typer(theme_command.app, name="theme", help="Theme commands")
app.add_typer(config_command.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todolite[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def ui() -> None:
    """Open the interactive todo list."""
    run_todo_app()


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
