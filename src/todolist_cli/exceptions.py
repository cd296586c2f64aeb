"""Custom exceptions for todolist-cli.

Every error raised by the list store carries an exit code so the command layer
can report it and terminate the invocation uniformly.
"""

from __future__ import annotations

from todolist_cli.utils.exit_codes import ERROR_GENERAL


class AppError(Exception):
    """Base application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class InvalidListName(AppError):
    """Raised when a list name does not match the allowed pattern."""

    def __init__(self, name: str):
        super().__init__(
            f"Invalid list name {name!r}. Names use letters, digits, '-' and '_' "
            "and must start and end with a letter or digit."
        )
        self.name = name


class DuplicateListName(AppError):
    """Raised when creating a list whose name is already taken."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot create list named {name!r}, a list already exists with this name."
        )
        self.name = name


class ListNotFound(AppError):
    """Raised when a named list does not exist."""

    def __init__(self, name: str):
        super().__init__(f"No list named {name!r} exists.")
        self.name = name


class ConfirmationMismatch(AppError):
    """Raised when the re-typed name does not match the list being deleted."""

    def __init__(self, entered: str, requested: str):
        super().__init__(
            f"Cannot delete list; list name entered {entered!r} does not match "
            f"requested deletion {requested!r}."
        )
        self.entered = entered
        self.requested = requested


class NoFocusedList(AppError):
    """Raised when a task command runs with no focused list."""

    def __init__(self):
        super().__init__(
            "No list is focused. Create one with 'todo create <name>'."
        )


class DateParseError(AppError):
    """Raised when a due date cannot be parsed."""

    def __init__(self, given: str, reason: str):
        super().__init__(f"Could not parse date from {given!r}. {reason}")
        self.given = given
        self.reason = reason


class StoreLoadFailure(AppError):
    """Raised when the list file cannot be read or is corrupt."""


class StoreWriteFailure(AppError):
    """Raised when the list file cannot be written."""
