"""Tests for SuggestingGroup alias resolution and suggestions."""

from __future__ import annotations

import typer
from typer.testing import CliRunner

from todolist_cli.utils.typer_helpers import SuggestingGroup

runner = CliRunner()


def _make_app() -> typer.Typer:
    app = typer.Typer(cls=SuggestingGroup)

    @app.command("list")
    def list_cmd() -> None:
        print("listing")

    @app.command("tasks")
    def tasks_cmd() -> None:
        print("tasks")

    return app


def test_alias_resolves():
    result = runner.invoke(_make_app(), ["ls"])
    assert result.exit_code == 0
    assert "listing" in result.output


def test_second_alias_resolves():
    result = runner.invoke(_make_app(), ["ts"])
    assert result.exit_code == 0
    assert "tasks" in result.output


def test_close_match_suggested():
    result = runner.invoke(_make_app(), ["lsit"])
    assert result.exit_code == 2
    assert "Did you mean" in result.output
    assert "list" in result.output


def test_no_match_is_usage_error():
    result = runner.invoke(_make_app(), ["zzz"])
    assert result.exit_code == 2
    assert "Did you mean" not in result.output
