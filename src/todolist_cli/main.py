"""Main entry point for todolist-cli."""

from pathlib import Path

import typer

from todolist_cli import __version__
from todolist_cli.commands import config, lists, tasks
from todolist_cli.commands.common import get_store_service
from todolist_cli.commands.decorators import command_wrapper
from todolist_cli.utils.typer_helpers import SuggestingGroup
from todolist_cli.utils.ui.console import get_console

app = typer.Typer(
    name="todo",
    cls=SuggestingGroup,
    help="Manage named todo lists from the command line",
    no_args_is_help=True,
)

console = get_console()


@app.callback()
def main(
    ctx: typer.Context,
    file: Path | None = typer.Option(
        None,
        "--file",
        "-f",
        help="List file to use (default: $TODOLIST_FILE, config, or the user data dir)",
    ),
) -> None:
    """Manage named todo lists from the command line."""
    ctx.obj = {"file": file}


# List commands
app.command("create")(lists.create)
app.command("delete")(lists.delete)
app.command("focus")(lists.focus)
app.command("list")(lists.list_lists)

# Task commands
app.command("tasks")(tasks.show_tasks)
app.command("add")(tasks.add)
app.command("drop")(tasks.drop)
app.command("done")(tasks.done)
app.command("undo")(tasks.undo)

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todolist-cli[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
@command_wrapper
def path(ctx: typer.Context) -> None:
    """Show the absolute path of the list file."""
    console.print(str(get_store_service(ctx).path.resolve()), soft_wrap=True)


if __name__ == "__main__":
    app()
