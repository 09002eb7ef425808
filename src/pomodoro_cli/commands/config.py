"""Configuration management commands."""

import json
from typing import Optional

import typer
from pydantic import ValidationError

from pomodoro_cli.config import get_config_manager
from pomodoro_cli.utils.exit_codes import ERROR_INVALID_ARGS
from pomodoro_cli.utils.ui.console import get_console
from pomodoro_cli.utils.ui.formatters import format_error, format_success

app = typer.Typer(help="Configuration management commands")
console = get_console()


def parse_value(value: str) -> str | int | float | bool:
    """Convert a command-line value to the most specific scalar type."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@app.command("show")
def show_config() -> None:
    """Show the current configuration."""
    config_manager = get_config_manager()
    console.print_json(json.dumps(config_manager.config.model_dump(mode="json")))


@app.command("get")
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., intervals.work)"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager().get(key)
    if value is None:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS)
    console.print(value)


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., intervals.work)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    current = get_config_manager().get(key)
    # Text settings take the value verbatim, even when it looks like a number.
    parsed_value = value if isinstance(current, str) else parse_value(value)
    try:
        get_config_manager().set(key, parsed_value)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS)
    except ValidationError as e:
        first = e.errors()[0]
        format_error(f"Invalid value for '{key}': {first['msg']}")
        raise typer.Exit(ERROR_INVALID_ARGS)
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
def reset_config(
    key: Optional[str] = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        msg = "entire configuration" if not key else f"'{key}'"
        confirm = typer.confirm(f"Are you sure you want to reset {msg}?")
        if not confirm:
            format_error("Cancelled")
            raise typer.Exit(0)

    try:
        get_config_manager().reset(key)
    except KeyError:
        format_error(f"Configuration key '{key}' not found")
        raise typer.Exit(ERROR_INVALID_ARGS)

    if key:
        format_success(f"Configuration '{key}' reset to default")
    else:
        format_success("Configuration reset to defaults")
