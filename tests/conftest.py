"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def reset_textconv_logger() -> Generator[None, None, None]:
    """Drop handlers installed on the textconv logger during a test."""
    textconv_logger = logging.getLogger("textconv")
    handlers = list(textconv_logger.handlers)
    level = textconv_logger.level
    try:
        yield
    finally:
        for handler in list(textconv_logger.handlers):
            if handler not in handlers:
                textconv_logger.removeHandler(handler)
                handler.close()
        textconv_logger.setLevel(level)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a complete configuration file and return its path."""
    path = tmp_path / "textconv.yaml"
    _ = path.write_text(
        "formatting:\n"
        "  buffer_size: 64\n"
        "  aligned_intervals: true\n"
        "lines:\n"
        "  max_lines: 10\n"
        "logging:\n"
        "  level: warning\n"
        "  format: json\n",
        encoding="utf-8",
    )
    return path
