"""Environment-based configuration using pydantic-settings.

Example:
    >>> from outcomecase.foundation.config import get_settings
    >>> get_settings().logging.level
    'WARNING'

    # Or with environment variables:
    # OUTCOMECASE_LOG_LEVEL=DEBUG
    # OUTCOMECASE_CAPTURE_LOG_FAILURES=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMECASE_LOG_",
        extra="ignore",
    )

    level: LogLevel = "WARNING"
    format: Literal["text", "json"] = "text"
    include_timestamps: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class CaptureSettings(BaseSettings):
    """How the from_throwing boundary reports what it captures."""

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMECASE_CAPTURE_",
        extra="ignore",
    )

    log_failures: bool = Field(default=True, description="Log every exception captured into a Failure")
    log_level: LogLevel = "DEBUG"
    include_traceback: bool = Field(default=False, description="Attach tracebacks to ErrorReport details")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class OutcomeSettings(BaseSettings):
    """Root settings for outcomecase.

    Loads configuration from environment variables with the OUTCOMECASE_ prefix.
    Nested groups read their own prefixes (OUTCOMECASE_LOG_, OUTCOMECASE_CAPTURE_).
    """

    model_config = SettingsConfigDict(
        env_prefix="OUTCOMECASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)

    @computed_field
    @property
    def effective_log_level(self) -> LogLevel:
        """Debug mode forces DEBUG regardless of the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> OutcomeSettings:
    """Get the global settings instance (cached)."""
    return OutcomeSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() rereads the environment."""
    get_settings.cache_clear()
