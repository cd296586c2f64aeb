"""File logger for todolist-cli.

Log records go to a rotating file under platformdirs' user_log_dir so that
command output on the terminal stays clean. Set TODOLIST_LOG_LEVEL (e.g.
``WARNING``) to make the log quieter.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "todolist_cli"
LOG_LEVEL_ENV = "TODOLIST_LOG_LEVEL"
_LOG_FILE = "todolist.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def get_log_file() -> Path:
    """Return the log file path, creating its directory."""
    log_dir = Path(user_log_dir(LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / _LOG_FILE


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "DEBUG").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.DEBUG


def get_logger() -> logging.Logger:
    """Return the application logger, initialising it on first call."""
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level_from_env())
    # Other handlers (e.g. a test harness's capture handler) may already be
    # attached; only the file handler must not be added twice
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        handler = logging.handlers.RotatingFileHandler(
            get_log_file(),
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
