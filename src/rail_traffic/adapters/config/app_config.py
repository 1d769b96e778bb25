"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every field can be set through a ``RAIL_`` prefixed environment variable
    or a ``.env`` file, e.g. ``RAIL_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="RAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Network description
    # If not set, the built-in demonstration network is used
    network_file: str | None = Field(
        default=None,
        description="Path to a TOML file describing stations and routes",
    )

    # Demonstration run
    demo_wagons: int = Field(
        default=10,
        ge=0,
        description="Number of wagons hooked on and off during the demonstration",
    )
    demo_speed: float = Field(
        default=100,
        ge=0,
        description="Speed the demonstration train accelerates to",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return level
