"""Configuration management commands."""

import typer

from todolist_cli.services.config_service import CONFIG_KEYS, get_config_service
from todolist_cli.utils.typer_helpers import SuggestingGroup
from todolist_cli.utils.ui.console import get_console
from todolist_cli.utils.ui.formatters import format_error, format_info, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("show")
@command_wrapper
def show_config() -> None:
    """Show the configuration and where it is stored."""
    config_service = get_config_service()
    console.print(f"config file: {config_service.config_path}")
    for key, value in config_service.config.model_dump().items():
        console.print(f"{key} = {value if value is not None else '(default)'}")


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help=f"Configuration key ({', '.join(CONFIG_KEYS)})"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    config_service = get_config_service()
    try:
        config_service.set(key, value)
    except KeyError:
        format_error(f"Unknown configuration key '{key}'")
        raise typer.Exit(1) from None
    format_success(f"Configuration '{key}' set to '{value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        confirm = typer.confirm("Reset all configuration to defaults?")
        if not confirm:
            format_info("Cancelled")
            raise typer.Exit(0)

    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
