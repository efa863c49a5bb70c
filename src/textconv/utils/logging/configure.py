"""One-call logging configuration for the textconv logger tree."""

from __future__ import annotations

import logging
from typing import Final

from textconv.config.models import LoggingConfig

from .handlers import ConsoleHandler, FileHandler
from .levels import LogLevel
from .structured_formatter import LogFormat

ROOT_LOGGER_NAME: Final[str] = "textconv"

# Marks handlers installed here so a second call replaces them
_INSTALLED_FLAG: Final[str] = "_textconv_installed"


def setup_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Install console (and optionally file) handlers on the textconv logger.

    Calling it again replaces the handlers installed by the previous call
    and leaves any other handler alone.

    Args:
        config: Logging settings (defaults apply when None)

    Returns:
        The configured ``textconv`` logger
    """
    config = config if config is not None else LoggingConfig()
    level = LogLevel.from_string(config.level).value
    format_type = LogFormat(config.format)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _INSTALLED_FLAG, False):
            logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [ConsoleHandler(level=level, format_type=format_type, colors=config.colors)]
    if config.file is not None:
        handlers.append(FileHandler(config.file, level=level))

    for handler in handlers:
        setattr(handler, _INSTALLED_FLAG, True)
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.debug("Logging configured at %s", config.level)
    return logger
