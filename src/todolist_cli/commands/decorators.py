"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from todolist_cli.exceptions import AppError
from todolist_cli.utils.exit_codes import ERROR_GENERAL, get_exit_code_name
from todolist_cli.utils.logger import get_logger
from todolist_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable) -> Callable:
    """Log a command's run and turn application errors into exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except AppError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) exit=%s - %s: %s",
                cmd,
                elapsed,
                get_exit_code_name(e.exit_code),
                type(e).__name__,
                str(e),
            )
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except (typer.Exit, typer.Abort):
            # Typer's own exits (--help, explicit Exit, Ctrl-C at a prompt)
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
