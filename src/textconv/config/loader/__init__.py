"""Configuration loader module for YAML and environment variable loading."""

from __future__ import annotations

from .config_loader import ConfigLoader, discover_config_file, load_config, merge_config
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

__all__ = [
    "ConfigLoader",
    "EnvLoader",
    "YamlLoader",
    "discover_config_file",
    "load_config",
    "merge_config",
]
