"""
Configuration management for heliumlog.

Settings are loaded with pydantic-settings from environment variables
prefixed with ``HELIUMLOG_`` and from an optional ``.env`` file. None of
them are required: every field has a default that matches a freshly
constructed HeliumLogger.

Classes:
    Settings: Logger defaults and diagnostics configuration

Environment Variables:
    HELIUMLOG_THRESHOLD        Lowest logged severity (default: VERBOSE)
    HELIUMLOG_COLORED          Colorize output by severity (default: false)
    HELIUMLOG_DETAILS          Detailed built-in layout (default: true)
    HELIUMLOG_FULL_FILE_PATH   Keep full source paths (default: false)
    HELIUMLOG_FORMAT           Template string, e.g. "(%date) (%msg)"
    HELIUMLOG_DATE_FORMAT      strftime pattern for (%date)
    HELIUMLOG_TIME_ZONE        IANA zone name for (%date)
    HELIUMLOG_LOG_LEVEL        Level of heliumlog's own diagnostics
    HELIUMLOG_LOG_FORMAT       Diagnostics renderer, "text" or "json"

Example:
    >>> import os
    >>> os.environ["HELIUMLOG_THRESHOLD"] = "warning"
    >>> from heliumlog.core.config.settings import Settings
    >>> Settings().THRESHOLD
    'WARNING'
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from heliumlog.core.dates import resolve_time_zone
from heliumlog.core.exceptions.custom_exceptions import (
    ConfigurationError,
    InvalidSeverityError,
)
from heliumlog.core.severity import Severity


class Settings(BaseSettings):
    """
    heliumlog settings with environment variable support.

    Attributes:
        APP_NAME: Application name shown by the CLI
        APP_VERSION: Current package version
        ENVIRONMENT: Deployment environment (development/production)
        DEBUG: Enable rich console diagnostics

        LOG_LEVEL: Level for heliumlog's own diagnostics
        LOG_FORMAT: Diagnostics renderer (text/json)

        THRESHOLD: Default logger threshold, stored as a severity description
        COLORED: Default colorization flag
        DETAILS: Default built-in layout selector
        FULL_FILE_PATH: Default full-path flag
        FORMAT: Default template string
        DATE_FORMAT: Default strftime pattern
        TIME_ZONE: Default IANA time zone name
    """

    # Application
    APP_NAME: str = "heliumlog"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Diagnostics
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"

    # Logger defaults
    THRESHOLD: str = "VERBOSE"
    COLORED: bool = False
    DETAILS: bool = True
    FULL_FILE_PATH: bool = False
    FORMAT: Optional[str] = None
    DATE_FORMAT: Optional[str] = None
    TIME_ZONE: Optional[str] = None

    @field_validator("THRESHOLD")
    @classmethod
    def validate_threshold(cls, v: str) -> str:
        """
        Normalize the threshold to a severity description.

        Accepts any name understood by ``Severity.parse``, including
        aliases like ``warn``.

        Raises:
            ValueError: If the value does not name a severity
        """
        try:
            return Severity.parse(v).description
        except InvalidSeverityError as e:
            raise ValueError(e.message) from e

    @field_validator("TIME_ZONE")
    @classmethod
    def validate_time_zone(cls, v: Optional[str]) -> Optional[str]:
        """Reject time zone names that zoneinfo cannot resolve."""
        if v is None:
            return v
        try:
            resolve_time_zone(v)
        except ConfigurationError as e:
            raise ValueError(e.message) from e
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the diagnostics level is a standard logging level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_prefix="HELIUMLOG_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get a fresh settings instance"""
    return Settings()
