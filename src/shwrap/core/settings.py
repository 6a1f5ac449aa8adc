"""Runtime settings read from SHWRAP_* environment variables."""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shwrap.core.constants import DEFAULT_SANDBOX_BINARY

__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHWRAP_", env_ignore_empty=True, extra="ignore"
    )

    config: Path | None = Field(
        default=None, description="Explicit policy file, skips discovery"
    )
    log_level: str = Field(default="WARNING", description="shwrap log level")
    sandbox_binary: str = Field(
        default=DEFAULT_SANDBOX_BINARY,
        description="Sandbox launcher invoked by 'command exec'",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    return Settings()
