"""Shared test fixtures and configuration.

Keeps every test away from the real platform directories: the log file,
config.json and the default list file all land in *tmp_path*.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

# Must differ from the real year; every code path reads it through
# models.date.current_year
FIXED_YEAR = 2030


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Redirect platformdirs lookups and reset cached singletons."""
    import todolist_cli.utils.logger as logger_mod
    from todolist_cli.services.config_service import get_config_service

    monkeypatch.delenv("TODOLIST_FILE", raising=False)
    monkeypatch.delenv("TODOLIST_LOG_LEVEL", raising=False)
    logger_mod._logger = None
    get_config_service.cache_clear()

    with (
        patch("todolist_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")),
        patch(
            "todolist_cli.services.config_service.user_config_dir",
            return_value=str(tmp_path / "config"),
        ),
        patch(
            "todolist_cli.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ),
    ):
        yield tmp_path

    logger = logging.getLogger(logger_mod.LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)
    logger_mod._logger = None
    get_config_service.cache_clear()


@pytest.fixture()
def fixed_year():
    """Pin the year used for dates that have none."""
    with patch("todolist_cli.models.date.current_year", return_value=FIXED_YEAR):
        yield FIXED_YEAR


@pytest.fixture()
def store_file(tmp_path):
    """Path of a list file that does not exist yet."""
    return tmp_path / "store" / "lists.json"


@pytest.fixture()
def runner():
    return CliRunner()

