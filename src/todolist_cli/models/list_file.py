"""The list file: every named task list plus the focus pointer.

``ListFile`` is the whole persisted state. It keeps one invariant across every
mutation and on load: ``focused`` is ``None`` exactly when there are no lists,
and otherwise names one of them.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, model_validator

from todolist_cli.exceptions import (
    ConfirmationMismatch,
    DuplicateListName,
    InvalidListName,
    ListNotFound,
    NoFocusedList,
)
from todolist_cli.models.todolist import TodoList

LIST_NAME_RE = re.compile(r"^[A-Za-z0-9]([A-Za-z0-9_-]*[A-Za-z0-9])?$")


def is_valid_list_name(name: str) -> bool:
    return LIST_NAME_RE.match(name) is not None


def validate_list_name(name: str) -> str:
    """Return ``name`` unchanged, or raise InvalidListName."""
    if not is_valid_list_name(name):
        raise InvalidListName(name)
    return name


class ListFile(BaseModel):
    """All task lists and the currently focused one."""

    focused: str | None = None
    lists: dict[str, TodoList] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_lists(self) -> ListFile:
        for key, todolist in self.lists.items():
            if key != todolist.name:
                raise ValueError(
                    f"list stored under {key!r} is named {todolist.name!r}"
                )
            if not is_valid_list_name(key):
                raise ValueError(f"invalid list name {key!r}")
        self._refocus()
        return self

    def _refocus(self) -> bool:
        """Restore the focus invariant; return True if focus changed."""
        if self.focused is not None and self.focused in self.lists:
            return False
        previous = self.focused
        self.focused = min(self.lists) if self.lists else None
        return previous != self.focused

    def create_list(self, name: str) -> TodoList:
        """Create an empty list, focusing it if no list is focused.

        Raises:
            InvalidListName: If the name is not allowed
            DuplicateListName: If a list with this name exists
        """
        validate_list_name(name)
        if name in self.lists:
            raise DuplicateListName(name)

        todolist = TodoList(name=name)
        self.lists[name] = todolist
        if self.focused is None:
            self.focused = name
        self._refocus()
        return todolist

    def delete_list(self, name: str, confirmation: str) -> TodoList:
        """Delete a list once the caller has re-typed its name.

        Args:
            name: List to delete
            confirmation: Name as re-typed by the user

        Raises:
            ListNotFound: If no such list exists
            ConfirmationMismatch: If ``confirmation`` differs from ``name``
        """
        if name not in self.lists:
            raise ListNotFound(name)
        if confirmation != name:
            raise ConfirmationMismatch(entered=confirmation, requested=name)

        removed = self.lists.pop(name)
        if self.focused is None or self.focused == name:
            self.focused = None
        self._refocus()
        return removed

    def shift_focus(self, name: str) -> None:
        if name not in self.lists:
            raise ListNotFound(name)
        self.focused = name

    def get_focused(self) -> TodoList:
        """Return the focused list, or raise NoFocusedList."""
        if self.focused is None:
            raise NoFocusedList()
        return self.lists[self.focused]

    def get_list(self, name: str) -> TodoList:
        try:
            return self.lists[name]
        except KeyError:
            raise ListNotFound(name) from None

    def list_names(self) -> list[str]:
        return list(self.lists)
