"""List commands - create, delete, focus and show named lists."""

import typer

from todolist_cli.models.list_file import validate_list_name
from todolist_cli.utils.ui.formatters import (
    format_info,
    format_list_names,
    format_success,
)

from .common import get_store_service
from .decorators import command_wrapper


@command_wrapper
def create(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the new list"),
) -> None:
    """Create a new list (focused if it is the first one)."""
    validate_list_name(name)
    with get_store_service(ctx).edit() as store:
        store.create_list(name)
        focused = store.focused

    format_success(f"Created list '{name}'")
    if focused == name:
        format_info(f"Focused on '{name}'")


@command_wrapper
def delete(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the list to delete"),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Skip re-typing the list name"
    ),
) -> None:
    """Delete a list after confirming its name."""
    validate_list_name(name)
    with get_store_service(ctx).edit() as store:
        previous_focus = store.focused
        # Fail on a missing list before asking for confirmation
        store.get_list(name)
        if yes:
            confirmation = name
        else:
            confirmation = typer.prompt(
                "Please confirm list deletion by re-typing the list name",
                default="",
                show_default=False,
            )
        store.delete_list(name, confirmation.strip())
        focused = store.focused

    format_success(f"Deleted list '{name}'")
    if focused != previous_focus:
        if focused is None:
            format_info("No lists remain")
        else:
            format_info(f"Focus moved to '{focused}'")


@command_wrapper
def focus(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name of the list to focus"),
) -> None:
    """Focus a list; task commands act on the focused list."""
    validate_list_name(name)
    with get_store_service(ctx).edit() as store:
        store.shift_focus(name)

    format_success(f"Focused on '{name}'")


@command_wrapper
def list_lists(ctx: typer.Context) -> None:
    """Show all lists, marking the focused one (alias: ls)."""
    store = get_store_service(ctx).load()
    if not store.lists:
        format_info("No lists yet. Create one with 'todo create <name>'.")
        return
    format_list_names(store.list_names(), store.focused)
