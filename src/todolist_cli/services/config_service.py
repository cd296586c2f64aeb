"""Configuration service for todolist-cli.

Loads and saves config.json and resolves where the list file lives. The
resolved path is handed to the store service explicitly; nothing else in the
application reads configuration behind the caller's back.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

from todolist_cli.models.config_models import AppConfig
from todolist_cli.utils.logger import get_logger

APP_NAME = "todolist_cli"
STORE_FILE_NAME = "lists.json"
STORE_PATH_ENV = "TODOLIST_FILE"

# Keys accepted by `todo config set`
CONFIG_KEYS = tuple(AppConfig.model_fields)


class ConfigService:
    """Service for loading, saving and resolving application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir(APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(APP_NAME))

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def default_store_path(self) -> Path:
        return self.data_dir / STORE_FILE_NAME

    def load_config(self) -> AppConfig:
        """Load configuration from config.json, defaulting when it is absent."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run, nothing configured yet
            self._config = AppConfig()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to config.json."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise RuntimeError(f"Failed to save config: {e}") from e
        get_logger().info("config saved: %s", self.config_path)

    def set(self, key: str, value: str) -> AppConfig:
        """Set a configuration key and persist it.

        Raises:
            KeyError: If ``key`` is not a known configuration key
        """
        if key not in CONFIG_KEYS:
            raise KeyError(key)
        data = self.config.model_dump()
        data[key] = value
        self._config = AppConfig.model_validate(data)
        self.save_config()
        return self._config

    def reset_config(self) -> None:
        """Reset configuration to defaults and remove config.json."""
        self._config = AppConfig()
        if self.config_path.exists():
            self.config_path.unlink()

    def resolve_store_path(self, override: str | Path | None = None) -> Path:
        """Resolve the list file path.

        Precedence: explicit override (``--file``), the TODOLIST_FILE
        environment variable, ``store_path`` from config.json, then the
        default file in the user data directory.
        """
        candidate = override or os.environ.get(STORE_PATH_ENV) or self.config.store_path
        if candidate:
            return Path(candidate).expanduser()
        return self.default_store_path


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    return ConfigService()
