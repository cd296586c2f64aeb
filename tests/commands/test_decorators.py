"""Tests for command_wrapper error handling and logging."""

from __future__ import annotations

from unittest.mock import patch

import pytest
import typer

from todolist_cli.commands.decorators import command_wrapper
from todolist_cli.exceptions import ListNotFound


def test_passes_result_through():
    @command_wrapper
    def ok(x):
        return x * 2

    assert ok(3) == 6


def test_preserves_metadata():
    @command_wrapper
    def documented():
        """Docs."""

    assert documented.__name__ == "documented"
    assert documented.__doc__ == "Docs."
    assert documented.__wrapped__ is not None


def test_app_error_becomes_exit_code():
    @command_wrapper
    def failing():
        raise ListNotFound("work")

    with patch("todolist_cli.commands.decorators.format_error") as format_error:
        with pytest.raises(typer.Exit) as exc_info:
            failing()
    assert exc_info.value.exit_code == 1
    format_error.assert_called_once_with("No list named 'work' exists.")


def test_unexpected_error_is_reported():
    @command_wrapper
    def crashing():
        raise ValueError("boom")

    with patch("todolist_cli.commands.decorators.format_error") as format_error:
        with pytest.raises(typer.Exit) as exc_info:
            crashing()
    assert exc_info.value.exit_code == 1
    assert "boom" in format_error.call_args.args[0]


def test_typer_exit_passes_through():
    @command_wrapper
    def exiting():
        raise typer.Exit(0)

    with pytest.raises(typer.Exit) as exc_info:
        exiting()
    assert exc_info.value.exit_code == 0


def test_failures_are_logged(isolated_dirs):
    @command_wrapper
    def failing():
        raise ListNotFound("work")

    with patch("todolist_cli.commands.decorators.format_error"):
        with pytest.raises(typer.Exit):
            failing()

    log = (isolated_dirs / "logs" / "todolist.log").read_text()
    assert "command started: failing" in log
    assert "ListNotFound" in log
    assert "exit=ERROR_GENERAL" in log
