"""Structured log formatter."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from enum import Enum
from typing import Any, override

# LogRecord attributes that are not user-supplied extras
_RECORD_ATTRIBUTES: frozenset[str] = frozenset({
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "lineno", "funcName", "created", "msecs", "relativeCreated",
    "thread", "threadName", "processName", "process", "taskName",
    "exc_info", "exc_text", "stack_info", "message",
})


class LogFormat(Enum):
    """Supported log output formats."""

    JSON = "json"
    KEYVALUE = "keyvalue"


class TimestampFormat(Enum):
    """Supported timestamp formats."""

    ISO = "iso"
    EPOCH = "epoch"
    HUMAN = "human"


class StructuredFormatter(logging.Formatter):
    """Render log records as JSON objects or ``key="value"`` lines."""

    FIELDS: tuple[str, ...] = ("timestamp", "level", "logger", "message")

    def __init__(
        self,
        format_type: LogFormat = LogFormat.KEYVALUE,
        timestamp_format: TimestampFormat = TimestampFormat.HUMAN,
    ) -> None:
        """Initialize the formatter.

        Args:
            format_type: Output format type (JSON or key-value)
            timestamp_format: Timestamp format to use
        """
        super().__init__()
        self.format_type: LogFormat = format_type
        self.timestamp_format: TimestampFormat = timestamp_format

    @override
    def format(self, record: logging.LogRecord) -> str:
        log_data = self._build_log_data(record)

        if self.format_type is LogFormat.JSON:
            return json.dumps(log_data, ensure_ascii=False, separators=(",", ":"), default=str)
        return " ".join(self._format_pair(key, value) for key, value in log_data.items())

    def _build_log_data(self, record: logging.LogRecord) -> dict[str, Any]:
        log_data: dict[str, Any] = {
            "timestamp": self._format_timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return log_data

    def _format_timestamp(self, created: float) -> str | float:
        if self.timestamp_format is TimestampFormat.EPOCH:
            return created
        moment = datetime.fromtimestamp(created)
        if self.timestamp_format is TimestampFormat.ISO:
            return moment.isoformat()
        return moment.strftime("%Y-%m-%d %H:%M:%S")

    @staticmethod
    def _format_pair(key: str, value: Any) -> str:
        if value is None:
            return f"{key}=null"
        if isinstance(value, (bool, int, float)):
            return f"{key}={value}"
        escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
        return f'{key}="{escaped}"'
