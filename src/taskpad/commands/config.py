"""Configuration management commands."""

import typer

from taskpad.services.config_service import get_config_service
from taskpad.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND, SUCCESS
from taskpad.utils.ui.console import get_console
from taskpad.utils.ui.formatters import format_info, format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("json", "--output", "-o", help="Output format"),
) -> None:
    """Show the current configuration."""
    config_service = get_config_service()
    format_output(config_service.config.model_dump(mode="json"), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., storage.backend)"),
) -> None:
    """Get a configuration value."""
    value = get_config_service().get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND)
    console.print(getattr(value, "value", value))


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., view.default_sort)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    try:
        get_config_service().set(key, value)
    except ValueError as e:
        # pydantic.ValidationError is a ValueError too
        raise AppError(f"Failed to set config: {e}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all settings to their defaults?"):
        format_info("Cancelled")
        raise typer.Exit(SUCCESS)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
