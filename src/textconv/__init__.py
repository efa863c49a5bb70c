"""textconv - strict number parsing, human-readable rendering, substring replacement.

The helpers are plain functions grouped by concern:

- ``textconv.core``: strict numeric parsing, line splitting, replacement
- ``textconv.utils``: bounded output and human-readable formatting
- ``textconv.config``: configuration models and loaders
"""

from textconv.core import (
    count_lines,
    log_lines,
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
    replace_all,
    split_lines,
)
from textconv.utils import (
    BoundedWriter,
    IntString,
    format_bytes,
    format_count,
    format_interval,
    int_to_string,
)

__all__ = [
    "BoundedWriter",
    "IntString",
    "count_lines",
    "format_bytes",
    "format_count",
    "format_interval",
    "int_to_string",
    "log_lines",
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
    "replace_all",
    "split_lines",
]
