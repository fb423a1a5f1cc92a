"""Custom exception hierarchy for the Daggerheart character manager core.

The stat pipeline itself is total over its input domain: unrecognized
feature text, missing equipment slots and absent fields all resolve to
zero modifiers rather than errors. Exceptions are therefore reserved for
the surrounding infrastructure (configuration loading). All of them
inherit from DhManagerError so callers can handle them at one boundary.

Example:
    >>> from dh_manager.core.exceptions import ConfigurationError
    >>> raise ConfigurationError("Bad proficiency", config_key="default_proficiency")
"""

from __future__ import annotations

from typing import Any


class DhManagerError(Exception):
    """Base exception for all character manager errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(DhManagerError):
    """Raised when application configuration is invalid.

    This includes unparseable environment values and settings that
    violate cross-field constraints.
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


__all__ = [
    "DhManagerError",
    "ConfigurationError",
]
