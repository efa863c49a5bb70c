"""Newline-delimited line splitting.

Multi-line text blocks, typically output captured from a subprocess, are cut
into lines so that each line can be logged on its own.
"""

from __future__ import annotations

import logging
from typing import Final

from textconv.core.limits import BUFSIZE

# Logger receiving lines emitted by log_lines() when the caller gives none
SINK_LOGGER_NAME: Final[str] = "textconv.subprocess"


def count_lines(buffer: str | None) -> int:
    """Count the lines of a text block.

    Every newline terminates one line, empty or not. Text after the last
    newline is one more line only when it is not empty, so ``"a\\n"`` has a
    single line rather than a phantom empty second one.

    The result is an upper bound on ``len(split_lines(buffer))``, which
    drops empty lines.

    Args:
        buffer: Text to inspect, or None

    Returns:
        Number of lines, zero for None
    """
    if buffer is None:
        return 0

    segments = buffer.split("\n")
    count = len(segments) - 1
    if segments[-1]:
        count += 1
    return count


def split_lines(buffer: str | None, max_lines: int | None = None) -> list[str]:
    """Split a text block into its non-empty lines.

    Args:
        buffer: Text to split, or None
        max_lines: Maximum number of lines to return, None for no limit.
            Lines beyond the limit are dropped without error.

    Returns:
        Non-empty lines in order, without their newline

    Raises:
        ValueError: If max_lines is negative

    Examples:
        >>> split_lines("a\\nb\\n\\nc")
        ['a', 'b', 'c']
        >>> split_lines("a\\nb\\n\\nc", max_lines=2)
        ['a', 'b']
    """
    if max_lines is not None and max_lines < 0:
        msg = "max_lines must be non-negative"
        raise ValueError(msg)

    if buffer is None:
        return []

    lines: list[str] = []
    for segment in buffer.split("\n"):
        if max_lines is not None and len(lines) >= max_lines:
            break
        if segment:
            lines.append(segment)
    return lines


def log_lines(
    buffer: str | None,
    *,
    error: bool = False,
    logger: logging.Logger | None = None,
    max_lines: int | None = BUFSIZE,
) -> int:
    """Log each non-empty line of a text block.

    The whole block shares one severity: ERROR when ``error`` is set,
    INFO otherwise.

    Args:
        buffer: Text to emit, or None
        error: Whether the block comes from an error stream
        logger: Logger receiving the lines (default: ``textconv.subprocess``)
        max_lines: Maximum number of lines emitted, None for no limit

    Returns:
        Number of lines logged
    """
    sink = logger if logger is not None else logging.getLogger(SINK_LOGGER_NAME)
    level = logging.ERROR if error else logging.INFO

    lines = split_lines(buffer, max_lines)
    for line in lines:
        sink.log(level, "%s", line)

    return len(lines)
