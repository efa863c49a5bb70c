"""Configuration models."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from textconv.core.lines import SINK_LOGGER_NAME
from textconv.core.limits import BUFSIZE


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )


class FormattingConfig(BaseConfig):
    """Settings for the human-readable renderers."""

    buffer_size: int = Field(
        default=BUFSIZE,
        ge=1,
        description="Capacity of rendered strings, terminator included",
    )
    aligned_intervals: bool = Field(
        default=False,
        description="Right-align interval renderings so they line up in columns",
    )


class LinesConfig(BaseConfig):
    """Settings for splitting and logging multi-line output."""

    max_lines: int = Field(
        default=BUFSIZE,
        ge=1,
        description="Maximum number of lines emitted per text block",
    )
    logger_name: str = Field(
        default=SINK_LOGGER_NAME,
        min_length=1,
        description="Logger receiving emitted lines",
    )


class LoggingConfig(BaseConfig):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["keyvalue", "json"] = Field(
        default="keyvalue",
        description="Console log format",
    )
    colors: bool = Field(
        default=False,
        description="Color console log lines by severity",
    )
    file: Path | None = Field(
        default=None,
        description="Optional JSON log file",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalize and check the level name."""
        normalized = value.upper()
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if normalized not in valid_levels:
            raise ValueError(f"Invalid log level '{value}'. Valid options: {', '.join(sorted(valid_levels))}")
        return normalized


class AppConfig(BaseConfig):
    """Complete application configuration."""

    formatting: FormattingConfig = Field(
        default_factory=FormattingConfig,
        description="Formatting configuration",
    )
    lines: LinesConfig = Field(
        default_factory=LinesConfig,
        description="Line splitting configuration",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )
