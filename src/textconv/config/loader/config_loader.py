"""Configuration loader combining the YAML file and environment overrides."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..exceptions import ConfigLoadError, ConfigValidationError
from ..models import AppConfig
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

logger = logging.getLogger(__name__)

# Configuration file discovery paths in order of precedence
CURRENT_DIR_CONFIG_FILES = [
    'textconv.yaml',
    'textconv.yml',
]

HOME_CONFIG_FILES = [
    '.textconv.yaml',
    '.textconv.yml',
]

SYSTEM_CONFIG_PATHS = [
    Path('/etc/textconv/config.yaml'),
    Path('/etc/textconv.yaml'),
]


def discover_config_file() -> Path | None:
    """Find the first configuration file in the standard locations.

    Searches the current directory, then the user home directory, then the
    system configuration directories.

    Returns:
        Path to the first file found, or None when there is none
    """
    for config_file in CURRENT_DIR_CONFIG_FILES:
        config_path = Path(config_file)
        if config_path.is_file():
            return config_path

    try:
        home_dir = Path.home()
    except (OSError, RuntimeError):
        # Path.home() can fail when no home directory is set
        home_dir = None

    if home_dir is not None:
        for config_file in HOME_CONFIG_FILES:
            config_path = home_dir / config_file
            if config_path.is_file():
                return config_path

    for config_path in SYSTEM_CONFIG_PATHS:
        if config_path.is_file():
            return config_path

    return None


def merge_config(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two configuration mappings, override taking precedence.

    Nested mappings are merged key by key; any other value in override
    replaces the one in base. Neither input is modified.
    """
    result: dict[str, Any] = copy.deepcopy(dict(base))
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = merge_config(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


class ConfigLoader:
    """Build an AppConfig from a YAML file and environment overrides."""

    def __init__(self, env_prefix: str = "TEXTCONV_") -> None:
        self.yaml_loader: YamlLoader = YamlLoader()
        self.env_loader: EnvLoader = EnvLoader(prefix=env_prefix)

    def load(self, path: Path | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Load and validate the complete configuration.

        Args:
            path: YAML file to read; None uses defaults plus environment only
            environ: Environment to read overrides from (default: ``os.environ``)

        Returns:
            Validated configuration

        Raises:
            ConfigLoadError: If the file is missing or unreadable
            EnvLoadError: If an environment override cannot be interpreted
            ConfigValidationError: If the merged settings are invalid
        """
        file_config: dict[str, object] = {}
        if path is not None:
            if not path.is_file():
                raise ConfigLoadError(f"Configuration file not found: {path}", file_path=str(path))
            file_config = self.yaml_loader.load(path)
            logger.debug("Loaded configuration file %s", path)

        env_config = self.env_loader.load(environ)
        if env_config:
            logger.debug("Applying environment overrides for: %s", ", ".join(sorted(env_config)))

        merged = merge_config(file_config, env_config)
        try:
            return AppConfig.model_validate(merged)
        except ValidationError as e:
            source = str(path) if path is not None else "defaults and environment"
            raise ConfigValidationError(f"Invalid configuration from {source}", pydantic_error=e) from e


def load_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> AppConfig:
    """Load the configuration with the default loader."""
    return ConfigLoader().load(path, environ)
