"""Configuration management for mail-headers.

This module handles application configuration using Pydantic settings.
Configuration can be loaded from environment variables or .env files.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mail_headers import __version__

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with environment variable support.

    All settings can be overridden via environment variables with
    the MAIL_HEADERS_ prefix (e.g., MAIL_HEADERS_LOG_LEVEL).
    """

    model_config = SettingsConfigDict(
        env_prefix="MAIL_HEADERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Header storage policy
    allow_custom_headers: bool = Field(
        default=True,
        description=(
            "Store header names outside the generic vocabulary as opaque custom "
            "headers. When disabled, such names raise UnknownHeaderError."
        ),
    )
    default_user_agent: str = Field(
        default=f"mail-headers/{__version__}",
        description="Value written to User-Agent and X-Mailer by set_user_agent()",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
