"""Task list data models.

Tasks are stored in insertion order, but everything the user sees and every
index the user types refers to the *sorted view*: tasks ordered by due date,
dateless tasks first, ties kept in their stored order.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from todolist_cli.models import date as dates
from todolist_cli.models.date import Date

COMPLETE_MARK = "✓"
INCOMPLETE_MARK = "✕"


class Task(BaseModel):
    """A single task.

    Attributes:
        title: Task text as entered
        complete: Whether the task has been marked done
        due_date: Optional due date, serialized under the ``date`` key
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    complete: bool = False
    due_date: Date | None = Field(default=None, alias="date")

    def __str__(self) -> str:
        mark = COMPLETE_MARK if self.complete else INCOMPLETE_MARK
        if self.due_date is None:
            return f"{mark} {self.title}"
        return f"{mark} [{self.due_date}] {self.title}"


def _sort_key(task: Task, year: int) -> tuple:
    if task.due_date is None:
        return (0,)
    return (1, *task.due_date.sort_key(year))


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Return tasks in due-date order (stable, dateless first)."""
    year = dates.current_year()
    return sorted(tasks, key=lambda task: _sort_key(task, year))


def _resolve_offsets(indices: Iterable[int]) -> list[int]:
    """Turn 1-based user indices into unique 0-based offsets, highest first."""
    return [index - 1 for index in sorted(set(indices), reverse=True)]


class TodoList(BaseModel):
    """A named, ordered list of tasks."""

    name: str
    tasks: list[Task] = Field(default_factory=list)

    def sorted_tasks(self) -> list[Task]:
        return sort_tasks(self.tasks)

    def add_tasks(self, titles: Iterable[str], due_date: Date | None = None) -> list[Task]:
        """Append one incomplete task per title, all sharing ``due_date``."""
        added = [Task(title=title, due_date=due_date) for title in titles]
        self.tasks.extend(added)
        return added

    def drop_tasks(self, indices: Iterable[int]) -> list[Task]:
        """Remove tasks by their 1-based position in the sorted view.

        Offsets are applied highest first so earlier removals never shift an
        offset that is still pending. Out-of-range indices are ignored. The
        stored order becomes the sorted order.

        Returns:
            The removed tasks, highest index first
        """
        tasks = self.sorted_tasks()
        removed: list[Task] = []
        for offset in _resolve_offsets(indices):
            if 0 <= offset < len(tasks):
                removed.append(tasks.pop(offset))
        self.tasks = tasks
        return removed

    def set_completion(self, indices: Iterable[int], complete: bool) -> list[Task]:
        """Mark tasks complete/incomplete by 1-based sorted-view position.

        Out-of-range indices are ignored and the stored order is untouched.

        Returns:
            The tasks that were selected
        """
        view = self.sorted_tasks()
        selected: list[Task] = []
        for offset in _resolve_offsets(indices):
            if 0 <= offset < len(view):
                view[offset].complete = complete
                selected.append(view[offset])
        return selected

    def render(self) -> list[str]:
        """Return numbered display lines for the sorted view."""
        width = len(str(len(self.tasks)))
        return [
            f"{number:<{width}}| {task}"
            for number, task in enumerate(self.sorted_tasks(), start=1)
        ]
