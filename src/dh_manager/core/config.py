"""Configuration management for the Daggerheart character manager.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from dh_manager.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.engine.default_proficiency
    2

Environment Variables:
    DH_MANAGER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    DH_MANAGER_JSON_LOGS: Emit JSON log lines instead of console output
    DH_MANAGER_ENGINE_DEFAULT_PROFICIENCY: Base Proficiency used when a
        calculation does not supply its own
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dh_manager.core.constants import DEFAULT_PROFICIENCY
from dh_manager.core.exceptions import ConfigurationError


class EngineSettings(BaseSettings):
    """Configuration for the stats calculation engine.

    Attributes:
        default_proficiency: Base Proficiency when the input omits one.
    """

    model_config = SettingsConfigDict(
        env_prefix="DH_MANAGER_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_proficiency: int = Field(
        default=DEFAULT_PROFICIENCY,
        ge=0,
        le=10,
        description="Base Proficiency used when a calculation supplies none",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        engine: Stats engine settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="DH_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Daggerheart Character Manager",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    engine: EngineSettings = Field(default_factory=EngineSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production mode.

        Returns:
            True if not in debug mode.
        """
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Primarily useful for testing or when environment variables have
    changed at runtime.
    """
    get_settings.cache_clear()


__all__ = [
    "EngineSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
