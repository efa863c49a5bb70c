"""Logging utilities and structured logging setup."""

from __future__ import annotations

from .handlers import (
    ColoredFormatter,
    ConsoleHandler,
    FileHandler,
    make_formatter,
)
from .levels import LogLevel
from .configure import ROOT_LOGGER_NAME, setup_logging
from .structured_formatter import (
    LogFormat,
    StructuredFormatter,
    TimestampFormat,
)

__all__ = [
    "ColoredFormatter",
    "ConsoleHandler",
    "FileHandler",
    "LogFormat",
    "LogLevel",
    "ROOT_LOGGER_NAME",
    "StructuredFormatter",
    "TimestampFormat",
    "make_formatter",
    "setup_logging",
]
