"""Console and file handlers for the textconv logger tree."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Final, TextIO, override

from .structured_formatter import LogFormat, StructuredFormatter, TimestampFormat

_RESET: Final[str] = "\033[0m"


class ColoredFormatter(StructuredFormatter):
    """Structured formatter that colors the level field by severity.

    Only the level value is wrapped in ANSI codes, so the rest of the line
    stays greppable and JSON output stays parseable once the codes are
    stripped.
    """

    COLORS: dict[int, str] = {
        logging.DEBUG: "\033[2m",        # Dim
        logging.INFO: "\033[32m",        # Green
        logging.WARNING: "\033[33m",     # Yellow
        logging.ERROR: "\033[31m",       # Red
        logging.CRITICAL: "\033[1;31m",  # Bold red
    }
    RESET: str = _RESET

    def __init__(
        self,
        format_type: LogFormat = LogFormat.KEYVALUE,
        timestamp_format: TimestampFormat = TimestampFormat.HUMAN,
        enable_colors: bool = True,
    ) -> None:
        super().__init__(format_type=format_type, timestamp_format=timestamp_format)
        self.enable_colors: bool = enable_colors

    @override
    def _build_log_data(self, record: logging.LogRecord) -> dict[str, Any]:
        log_data = super()._build_log_data(record)

        color = self.COLORS.get(record.levelno)
        if self.enable_colors and color is not None:
            log_data["level"] = f"{color}{record.levelname}{self.RESET}"
        return log_data


def make_formatter(format_type: LogFormat = LogFormat.KEYVALUE, colors: bool = False) -> StructuredFormatter:
    """Build the console formatter for the given output settings."""
    if colors:
        return ColoredFormatter(format_type=format_type)
    return StructuredFormatter(format_type=format_type)


class ConsoleHandler(logging.StreamHandler[TextIO]):
    """Write structured records to stderr, or stdout when asked to."""

    def __init__(
        self,
        level: int = logging.INFO,
        use_stderr: bool = True,
        format_type: LogFormat = LogFormat.KEYVALUE,
        colors: bool = False,
    ) -> None:
        """Initialize console handler.

        Args:
            level: Log level threshold
            use_stderr: Write to stderr so that log lines never mix with
                command output on stdout
            format_type: JSON or key=value lines
            colors: Color the level field
        """
        super().__init__(sys.stderr if use_stderr else sys.stdout)
        self.setLevel(level)
        self.setFormatter(make_formatter(format_type, colors))


class FileHandler(logging.FileHandler):
    """Append JSON records with ISO timestamps to a file.

    Missing parent directories are created first.
    """

    def __init__(self, filename: Path | str, level: int = logging.INFO, mode: str = "a") -> None:
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)

        super().__init__(path, mode=mode, encoding="utf-8")
        self.setLevel(level)
        self.setFormatter(StructuredFormatter(format_type=LogFormat.JSON, timestamp_format=TimestampFormat.ISO))
