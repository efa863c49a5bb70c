"""Log level names."""

from __future__ import annotations

import logging
from enum import IntEnum

from textconv.core.numeric import parse_int32


class LogLevel(IntEnum):
    """Severities accepted by the configuration and the CLI."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_string(cls, level_str: str) -> LogLevel:
        """Look up a level by name, in any case, or by its numeric value.

        Raises:
            ValueError: If level_str names no known level
        """
        name = level_str.strip().upper()
        if name in cls.__members__:
            return cls[name]

        number = parse_int32(name)
        if number is not None and number in cls._value2member_map_:
            return cls(number)

        raise ValueError(f"Invalid log level: {level_str!r}")
