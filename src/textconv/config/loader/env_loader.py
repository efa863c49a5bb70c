"""Environment variable configuration loader."""

from __future__ import annotations

import json
import math
import os
from collections.abc import Mapping
from typing import cast

from textconv.core.numeric import parse_double, parse_int64

from ..exceptions import EnvLoadError

_TRUE_WORDS = frozenset({"true", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "no", "off"})


class EnvLoader:
    """Read nested settings from prefixed environment variables.

    ``TEXTCONV_FORMATTING__BUFFER_SIZE=64`` becomes
    ``{"formatting": {"buffer_size": 64}}``: the prefix is dropped, double
    underscores separate nesting levels and names are lowercased.
    """

    def __init__(self, prefix: str = "TEXTCONV_", convert_types: bool = True) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            convert_types: Whether to convert values to bool, int, float or
                JSON containers
        """
        self.prefix: str = prefix
        self.convert_types: bool = convert_types

    def load(self, environ: Mapping[str, str] | None = None) -> dict[str, object]:
        """Load configuration from environment variables.

        Args:
            environ: Variables to read (default: ``os.environ``)

        Returns:
            Dictionary containing the loaded configuration

        Raises:
            EnvLoadError: If a JSON value cannot be parsed or a variable
                name has an empty path segment
        """
        source = environ if environ is not None else os.environ
        config: dict[str, object] = {}

        for env_var, raw_value in sorted(source.items()):
            if not env_var.startswith(self.prefix):
                continue

            config_key = env_var[len(self.prefix):].lower()
            if not config_key:
                continue

            keys = config_key.split("__")
            if not all(keys):
                raise EnvLoadError(f"Empty name segment in {env_var}", env_var)

            value: object = raw_value
            if self.convert_types:
                value = self._convert_value(raw_value, env_var)

            self._set_nested_value(config, keys, value)

        return config

    def _convert_value(self, value: str, env_var: str) -> object:
        """Convert a raw string to the most specific type it spells.

        Numbers are read with the strict parsers, so ``"12 "`` or ``"0x10"``
        stay strings and are left to model validation.
        """
        if not value:
            return value

        lower_value = value.lower()
        if lower_value in _TRUE_WORDS:
            return True
        if lower_value in _FALSE_WORDS:
            return False

        integer = parse_int64(value)
        if integer is not None:
            return integer

        real = parse_double(value)
        if real is not None and math.isfinite(real):
            return real

        if value.startswith(('[', '{')):
            try:
                return cast(object, json.loads(value))
            except json.JSONDecodeError as e:
                raise EnvLoadError(f"Failed to parse JSON for {env_var}: {e}", env_var) from e

        return value

    def _set_nested_value(self, config: dict[str, object], keys: list[str], value: object) -> None:
        current: dict[str, object] = config
        for key in keys[:-1]:
            child = current.get(key)
            if not isinstance(child, dict):
                child = {}
                current[key] = child
            current = cast(dict[str, object], child)
        current[keys[-1]] = value
