"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        DhManagerError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.

    Configuration:
        Settings: Main application settings class.
        EngineSettings: Stats engine settings.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from dh_manager.core.config import (
    EngineSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from dh_manager.core.exceptions import ConfigurationError, DhManagerError
from dh_manager.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "DhManagerError",
    "ConfigurationError",
    # Configuration
    "Settings",
    "EngineSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
