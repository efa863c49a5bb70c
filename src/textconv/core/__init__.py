"""Core conversion algorithms: strict parsing, line splitting, replacement."""

from textconv.core.lines import count_lines, log_lines, split_lines
from textconv.core.numeric import (
    NUMBER_KINDS,
    parse_double,
    parse_int,
    parse_int16,
    parse_int32,
    parse_int64,
    parse_number,
    parse_uint,
    parse_uint16,
    parse_uint32,
    parse_uint64,
)
from textconv.core.replace import PositionCache, find_positions, replace_all

__all__ = [
    # Strict numeric parsing
    "NUMBER_KINDS",
    "parse_double",
    "parse_int",
    "parse_int16",
    "parse_int32",
    "parse_int64",
    "parse_number",
    "parse_uint",
    "parse_uint16",
    "parse_uint32",
    "parse_uint64",
    # Line splitting
    "count_lines",
    "log_lines",
    "split_lines",
    # Substring replacement
    "PositionCache",
    "find_positions",
    "replace_all",
]
