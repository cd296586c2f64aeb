"""Tests for the top-level CLI app."""

from __future__ import annotations

from todolist_cli import __version__
from todolist_cli.main import app


def test_no_args_shows_help(runner):
    result = runner.invoke(app, [])
    assert "create" in result.output
    assert "tasks" in result.output


def test_version(runner):
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_path_uses_file_option(runner, store_file):
    result = runner.invoke(app, ["--file", str(store_file), "path"])
    assert result.exit_code == 0
    assert str(store_file.resolve()) in result.output.replace("\n", "")


def test_path_from_env(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("TODOLIST_FILE", str(tmp_path / "env.json"))
    result = runner.invoke(app, ["path"])
    assert result.exit_code == 0
    assert "env.json" in result.output


def test_path_default(runner, isolated_dirs):
    result = runner.invoke(app, ["path"])
    assert result.exit_code == 0
    assert "lists.json" in result.output


def test_unknown_command_suggests(runner):
    result = runner.invoke(app, ["craete", "work"])
    assert result.exit_code == 2
    assert "Did you mean" in result.output
    assert "create" in result.output


def test_full_session(runner, store_file):
    def todo(*args, input=None):
        return runner.invoke(app, ["--file", str(store_file), *args], input=input)

    assert todo("create", "school").exit_code == 0
    assert todo("add", "essay", "quiz").exit_code == 0
    assert todo("done", "2").exit_code == 0
    result = todo("tasks")
    assert "1| ✕ essay" in result.output
    assert "2| ✓ quiz" in result.output
    assert todo("delete", "school", input="school\n").exit_code == 0
    assert todo("tasks").exit_code == 1
