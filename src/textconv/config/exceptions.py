"""Error hierarchy for the configuration system."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for all configuration-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize ConfigError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class ConfigLoadError(ConfigError):
    """Exception raised when a configuration file cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        full_context = context or {}
        if file_path is not None:
            full_context["file_path"] = file_path

        super().__init__(message, full_context)
        self.file_path: str | None = file_path


class EnvLoadError(ConfigError):
    """Exception raised when an environment variable cannot be interpreted."""

    def __init__(
        self,
        message: str,
        env_var: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        full_context = context or {}
        if env_var is not None:
            full_context["env_var"] = env_var

        super().__init__(message, full_context)
        self.env_var: str | None = env_var


class ConfigValidationError(ConfigError):
    """Exception raised when merged settings fail model validation."""

    def __init__(
        self,
        message: str,
        pydantic_error: ValidationError | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        full_context = context or {}
        if pydantic_error is not None:
            full_context["validation_errors"] = self._format_validation_errors(pydantic_error)

        super().__init__(message, full_context)
        self.pydantic_error: ValidationError | None = pydantic_error

    def _format_validation_errors(self, error: ValidationError) -> list[dict[str, Any]]:
        """Flatten pydantic errors into field/message/type/input records."""
        return [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
                "input": err.get("input"),
            }
            for err in error.errors()
        ]

    def __str__(self) -> str:
        details = self.context.get("validation_errors", [])
        if not details:
            return super().__str__()
        lines = [super().__str__()]
        lines.extend(f"  {item['field']}: {item['message']}" for item in details)
        return "\n".join(lines)


def handle_config_error(error: Exception, operation: str) -> ConfigError:
    """Wrap an exception raised while handling configuration.

    Args:
        error: Original exception
        operation: Description of the operation that failed

    Returns:
        The error itself when it already is a ConfigError, otherwise a
        ConfigError subclass chained to it
    """
    logger.debug("Configuration error during %s: %s", operation, error, exc_info=True)

    if isinstance(error, ConfigError):
        return error

    if isinstance(error, ValidationError):
        wrapped: ConfigError = ConfigValidationError(
            f"Configuration validation failed during {operation}",
            pydantic_error=error,
        )
    elif isinstance(error, OSError):
        wrapped = ConfigLoadError(
            f"Failed to read configuration during {operation}: {error}",
            file_path=getattr(error, "filename", None),
        )
    else:
        wrapped = ConfigError(
            f"Unexpected error during {operation}: {error}",
            {"error_type": type(error).__name__},
        )

    wrapped.__cause__ = error
    return wrapped
