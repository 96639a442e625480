# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
Settings for stockroom applications.

Values are read from environment variables prefixed with ``STOCKROOM_`` and,
when present, from a ``.env`` file in the working directory.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stockroom.errors import CONFIG_ENVIRONMENT_ERROR, ConfigError


class Environment(str, Enum):
    """Supported environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str | None) -> Environment:
        """Convert a string to an Environment enum value.

        Args:
            value: String representation of environment

        Returns:
            Environment enum value

        Raises:
            ConfigError: If the string doesn't match a valid environment
        """
        if value is None:
            return cls.DEVELOPMENT

        normalized = value.lower().strip()

        if normalized in ("dev", "development"):
            return cls.DEVELOPMENT
        elif normalized in ("test", "testing"):
            return cls.TESTING
        elif normalized in ("prod", "production"):
            return cls.PRODUCTION
        raise ConfigError(
            f"Invalid environment: {value}",
            code=CONFIG_ENVIRONMENT_ERROR,
            context={"provided_value": value},
        )


class StockroomSettings(BaseSettings):
    """General settings for the stockroom package and its CLI."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_",
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    env: Environment = Field(
        default=Environment.DEVELOPMENT, description="Deployment environment"
    )
    debug: bool = Field(default=False, description="Force DEBUG logging")
    description_separator: str = Field(
        default="/", min_length=1, description="Separator for item descriptions"
    )

    @field_validator("env", mode="before")
    @classmethod
    def validate_env(cls, v: Any) -> Environment:
        if isinstance(v, Environment):
            return v
        return Environment.from_string(v)

    @property
    def is_production(self) -> bool:
        return self.env is Environment.PRODUCTION


@lru_cache(maxsize=1)
def get_settings() -> StockroomSettings:
    """Return the process-wide settings, loading them on first use."""
    return StockroomSettings()
