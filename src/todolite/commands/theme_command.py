"""Theme commands."""

from typing import Annotated

import typer
from rich.markup import escape
from textual.theme import BUILTIN_THEMES

from todolite.services.config_service import get_storage
from todolite.services.theme_service import ThemeService
from todolite.utils.ui.formatters import console, format_info, format_success, format_warning

from .decorators import command_wrapper

app = typer.Typer(help="Theme commands", no_args_is_help=True)


class _SavedThemeTarget:
    """Theme target for the CLI: nothing to repaint, the UI applies it on start."""

    def apply_theme(self, theme_name: str) -> None:
        format_info(f"Theme '{escape(theme_name)}' will be applied the next time the UI starts")


@app.command("show")
@command_wrapper
def show_theme() -> None:
    """Show the saved theme."""
    theme = ThemeService(get_storage(), _SavedThemeTarget()).get_saved_theme()
    if theme is None:
        console.print("[dim]No theme saved[/dim]")
        return
    console.print(theme, markup=False)


@app.command("set")
@command_wrapper
def set_theme(theme_name: Annotated[str, typer.Argument(help="Theme name")]) -> None:
    """Save the theme the UI should use."""
    if theme_name not in BUILTIN_THEMES:
        format_warning(f"'{escape(theme_name)}' is not a built-in theme; the UI will ignore it")
    ThemeService(get_storage(), _SavedThemeTarget()).select_theme(theme_name)
    format_success(f"Theme set to '{escape(theme_name)}'")


@app.command("list")
def list_themes() -> None:
    """List the built-in theme names."""
    for name in sorted(BUILTIN_THEMES):
        console.print(name)
