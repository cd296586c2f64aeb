"""Configuration models for todolist-cli."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class AppConfig(BaseModel):
    """Root configuration persisted as config.json."""

    store_path: str | None = Field(
        default=None, description="Path of the list file (default: user data dir)"
    )

    @field_validator("store_path")
    @classmethod
    def _blank_is_default(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value
