"""Configuration management commands."""

from typing import Annotated, Any, Optional

import typer
from rich.markup import escape

from todolite.services.config_service import get_config_service
from todolite.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from todolite.utils.ui.formatters import console, format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands", no_args_is_help=True)


def _parse_value(value: str) -> Any:
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lower() in ("none", "null"):
        return None
    return value


@app.command("view")
@command_wrapper
def view_config(
    output: Annotated[str, typer.Option("--output", "-o", help="Output format")] = "json",
) -> None:
    """View current configuration."""
    config_svc = get_config_service()
    format_output(config_svc.config.model_dump(), output)
    console.print(f"[dim]Storage file: {escape(str(config_svc.storage_path))}[/dim]")


@app.command("get")
@command_wrapper
def get_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g. ui.alert_seconds)")],
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    console.print(value, markup=False)


@app.command("set")
@command_wrapper
def set_config(
    key: Annotated[str, typer.Argument(help="Configuration key (e.g. ui.alert_seconds)")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValueError as e:
        raise AppError(f"Invalid value for '{key}': {e}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{escape(key)}' set to '{escape(str(parsed_value))}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: Annotated[Optional[str], typer.Argument(help="Configuration key to reset")] = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all configuration"
        if not typer.confirm(f"Reset {target} to defaults?"):
            format_info("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_service().reset(key)
    except (KeyError, AttributeError) as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    format_success("Configuration reset to defaults")
