"""todolist-cli - named task lists from the command line."""

__version__ = "0.3.0"
