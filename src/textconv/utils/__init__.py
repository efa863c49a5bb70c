"""Shared utility modules for rendering text.

This package provides pure, stateless helpers for:
- Capacity-checked text writing (bounded buffers)
- Integer, interval, byte count and item count formatting

The logging subpackage is imported on its own as ``textconv.utils.logging``.
"""

from textconv.utils.buffer import BoundedWriter, bounded
from textconv.utils.formatting import (
    BYTE_UNITS,
    COUNT_NAMES,
    IntString,
    format_bytes,
    format_count,
    format_interval,
    int_to_string,
)

__all__ = [
    # Bounded output
    "BoundedWriter",
    "bounded",
    # Formatting utilities
    "BYTE_UNITS",
    "COUNT_NAMES",
    "IntString",
    "format_bytes",
    "format_count",
    "format_interval",
    "int_to_string",
]
