"""Task commands - show, add, drop and complete tasks in the focused list.

Indices are the 1-based numbers printed by ``todo tasks``, i.e. positions in
the due-date sorted view. Indices that do not match a task are ignored.
"""

import typer

from todolist_cli.models.date import parse_date
from todolist_cli.utils.ui.formatters import (
    format_all_lists,
    format_info,
    format_success,
    format_todolist,
)

from .common import get_store_service
from .decorators import command_wrapper


@command_wrapper
def show_tasks(
    ctx: typer.Context,
    all_lists: bool = typer.Option(False, "--all", "-a", help="Show tasks of every list"),
) -> None:
    """Show the focused list's tasks, sorted by due date (alias: ts)."""
    store = get_store_service(ctx).load()
    if all_lists:
        if not store.lists:
            format_info("No lists yet. Create one with 'todo create <name>'.")
            return
        format_all_lists(store)
        return
    format_todolist(store.get_focused())


@command_wrapper
def add(
    ctx: typer.Context,
    titles: list[str] = typer.Argument(..., help="One or more task titles"),
    date: str | None = typer.Option(
        None, "--date", "-d", help="Due date: MM/DD, MM/DD/YY or MM/DD/YYYY"
    ),
) -> None:
    """Add tasks to the focused list."""
    due_date = parse_date(date) if date is not None else None
    with get_store_service(ctx).edit() as store:
        todolist = store.get_focused()
        added = todolist.add_tasks(titles, due_date)

    format_success(f"Added {len(added)} task(s) to '{todolist.name}'")


@command_wrapper
def drop(
    ctx: typer.Context,
    indices: list[int] = typer.Argument(..., help="Task numbers as shown by 'todo tasks'"),
) -> None:
    """Remove tasks from the focused list."""
    with get_store_service(ctx).edit() as store:
        todolist = store.get_focused()
        removed = todolist.drop_tasks(indices)

    format_success(f"Dropped {len(removed)} task(s)")
    format_todolist(todolist)


def _set_completion(ctx: typer.Context, indices: list[int], complete: bool) -> None:
    with get_store_service(ctx).edit() as store:
        todolist = store.get_focused()
        selected = todolist.set_completion(indices, complete)

    state = "complete" if complete else "incomplete"
    format_success(f"Marked {len(selected)} task(s) {state}")
    format_todolist(todolist)


@command_wrapper
def done(
    ctx: typer.Context,
    indices: list[int] = typer.Argument(..., help="Task numbers as shown by 'todo tasks'"),
) -> None:
    """Mark tasks in the focused list as complete."""
    _set_completion(ctx, indices, True)


@command_wrapper
def undo(
    ctx: typer.Context,
    indices: list[int] = typer.Argument(..., help="Task numbers as shown by 'todo tasks'"),
) -> None:
    """Mark tasks in the focused list as incomplete."""
    _set_completion(ctx, indices, False)
