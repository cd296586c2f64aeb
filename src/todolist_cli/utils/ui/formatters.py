"""Output formatters for lists and tasks."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from todolist_cli.models.list_file import ListFile
from todolist_cli.models.todolist import TodoList

from .console import get_console

console = get_console()

FOCUS_MARKER = "*"


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(Text.assemble(("Error:", "bold red"), " ", message))


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(Text.assemble(("Success:", "bold green"), " ", message))


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(Text.assemble(("Info:", "bold blue"), " ", message))


def format_list_names(names: Iterable[str], focused: str | None) -> None:
    """Print list names alphabetically, marking the focused one."""
    for name in sorted(names):
        if name == focused:
            console.print(Text.assemble((f"{FOCUS_MARKER} ", "bold cyan"), (name, "bold")))
        else:
            console.print(Text(f"  {name}"))


def format_todolist(todolist: TodoList, focused: bool = False) -> None:
    """Print a list header followed by its numbered, due-date sorted tasks."""
    header = f"-- {todolist.name} --"
    if focused:
        header = f"{header} {FOCUS_MARKER}"
    console.print(Text(header, style="bold"))

    lines = todolist.render()
    if not lines:
        console.print(Text("(no tasks yet)", style="dim"))
        return
    for line, task in zip(lines, todolist.sorted_tasks()):
        console.print(Text(line, style="dim" if task.complete else ""))


def format_all_lists(store: ListFile) -> None:
    """Print every list in alphabetical order, separated by blank lines."""
    for i, name in enumerate(sorted(store.lists)):
        if i:
            console.print()
        format_todolist(store.lists[name], focused=name == store.focused)
