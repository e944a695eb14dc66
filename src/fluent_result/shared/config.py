"""Configuration management using Pydantic Settings.

Loads configuration from environment variables with validation.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResultSettings(BaseSettings):
    """Library settings loaded from FLUENT_RESULT_* environment variables."""

    # Logging
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Error reporting
    error_message_sink: Literal["stdout", "stderr"] = Field(
        default="stdout",
        description="Stream print_error_message() writes to when no file is given",
    )

    model_config = SettingsConfigDict(
        env_prefix="FLUENT_RESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        # Unknown names fall back to INFO, matching configure_logging
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level


@lru_cache
def get_settings() -> ResultSettings:
    """Get library settings (singleton).

    Cached because the environment is read once per process.
    Call get_settings.cache_clear() to reload.

    Returns:
        Library settings
    """
    return ResultSettings()
