"""Configuration management: models, loaders and errors."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    EnvLoadError,
    handle_config_error,
)
from .loader import ConfigLoader, EnvLoader, YamlLoader, discover_config_file, load_config, merge_config
from .models import AppConfig, FormattingConfig, LinesConfig, LoggingConfig

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "EnvLoadError",
    "handle_config_error",
    # Loaders
    "ConfigLoader",
    "EnvLoader",
    "YamlLoader",
    "discover_config_file",
    "load_config",
    "merge_config",
    # Models
    "AppConfig",
    "FormattingConfig",
    "LinesConfig",
    "LoggingConfig",
]
