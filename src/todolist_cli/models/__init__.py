"""todolist-cli domain models.

Pydantic models for the persisted state: due dates, tasks, task lists and the
list file that holds them all.
"""

from .config_models import AppConfig
from .date import Date, parse_date
from .list_file import ListFile, validate_list_name
from .todolist import Task, TodoList

__all__ = [
    "AppConfig",
    "Date",
    "ListFile",
    "Task",
    "TodoList",
    "parse_date",
    "validate_list_name",
]
