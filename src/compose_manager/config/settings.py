"""Settings for compose invocations.

Environment variables override defaults using the COMPOSE_MANAGER_ prefix.

Example environment variables:
    COMPOSE_MANAGER_COMPOSE_BINARY=/usr/local/bin/docker-compose
    COMPOSE_MANAGER_TIMEOUT_SEC=300
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ComposeSettings(BaseSettings):
    """Environment-backed settings for the compose manager."""

    model_config = SettingsConfigDict(env_prefix="COMPOSE_MANAGER_", extra="ignore")

    compose_binary: str = "docker-compose"
    """Program invoked for compose subcommands."""

    docker_binary: str = "docker"
    """Program invoked for container inspection (used by ``ips``)."""

    timeout_sec: float | None = Field(default=None, gt=0)
    """Per-invocation timeout. None waits for the process to finish."""

    log_level: str = "INFO"
    """Log level used by the command-line interface."""

    @field_validator("compose_binary", "docker_binary")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        """Ensure program names are not blank."""
        stripped = value.strip()
        if not stripped:
            raise ValueError("must be non-empty")
        return stripped

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the log level is a known logging level name."""
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{value}'")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


@lru_cache(maxsize=1)
def get_settings() -> ComposeSettings:
    """Load and cache settings from the environment."""
    return ComposeSettings()


__all__ = [
    "ComposeSettings",
    "get_settings",
]
