"""Strict string to number conversion.

Every parser in this module follows the same contract: the whole string must
be consumed by a single base-10 numeral, otherwise the parse fails and ``None``
is returned. Nothing is raised for malformed input, so callers check the
result before using it::

    >>> parse_int32("42")
    42
    >>> parse_int32("42 ") is None
    True

Integers are first read into the widest intermediate width (64-bit signed for
signed targets, 64-bit unsigned for unsigned ones) and then narrowed with an
explicit range check against the target width. The accepted grammar is the
one of ``strtoll``/``strtoull``/``strtod`` in the "C" locale: leading ASCII
whitespace is skipped, an optional sign is allowed, and only ASCII digits
count as digits.
"""

import math
import re
from collections.abc import Callable, Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Final

from textconv.core.limits import (
    DBL_MAX,
    DBL_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    INT_MAX,
    INT_MIN,
    UINT16_MAX,
    UINT32_MAX,
    UINT64_MAX,
    UINT_MAX,
)

# isspace() in the "C" locale
_C_WHITESPACE: Final[str] = " \t\n\v\f\r"

_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

_DECIMAL_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"(?P<mantissa>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))(?:[eE][+-]?[0-9]+)?"
)
_HEX_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"(?P<mantissa>[+-]?0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+))"
    r"(?:[pP](?P<exponent>[+-]?[0-9]+))?"
)
_SPECIAL_FLOAT: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>[+-]?)(?:(?P<inf>inf(?:inity)?)|nan(?:\([0-9A-Za-z_]*\))?)",
    re.IGNORECASE,
)


def _strip_leading(text: str) -> str:
    return text.lstrip(_C_WHITESPACE)


def _read_integer(text: str | None) -> int | None:
    if not isinstance(text, str):
        return None

    numeral = _strip_leading(text)
    if _INTEGER.fullmatch(numeral) is None:
        return None

    # More significant digits than UINT64_MAX has cannot fit in 64 bits
    if len(numeral.lstrip("+-").lstrip("0")) > len(str(UINT64_MAX)):
        return None
    return int(numeral)


def _wide_signed(text: str | None) -> int | None:
    """Read text as a 64-bit signed integer, the ``strtoll`` way."""
    value = _read_integer(text)
    # Overflow of the intermediate type is a parse error, not a clamp
    if value is None or value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def _wide_unsigned(text: str | None) -> int | None:
    """Read text as a 64-bit unsigned integer.

    ``strtoull`` silently wraps negative input around to huge positive
    values; here a negative numeral is simply out of range. ``-0`` is zero.
    """
    value = _read_integer(text)
    if value is None or value < 0 or value > UINT64_MAX:
        return None
    return value


def _narrow(value: int | None, minimum: int, maximum: int) -> int | None:
    if value is None:
        return None
    if value < minimum or value > maximum:
        return None
    return value


def parse_int16(text: str | None) -> int | None:
    """Parse a signed 16-bit integer (C ``short``)."""
    return _narrow(_wide_signed(text), INT16_MIN, INT16_MAX)


def parse_uint16(text: str | None) -> int | None:
    """Parse an unsigned 16-bit integer (C ``unsigned short``)."""
    return _narrow(_wide_unsigned(text), 0, UINT16_MAX)


def parse_int32(text: str | None) -> int | None:
    """Parse a signed 32-bit integer."""
    return _narrow(_wide_signed(text), INT32_MIN, INT32_MAX)


def parse_uint32(text: str | None) -> int | None:
    """Parse an unsigned 32-bit integer."""
    return _narrow(_wide_unsigned(text), 0, UINT32_MAX)


def parse_int64(text: str | None) -> int | None:
    """Parse a signed 64-bit integer."""
    return _narrow(_wide_signed(text), INT64_MIN, INT64_MAX)


def parse_uint64(text: str | None) -> int | None:
    """Parse an unsigned 64-bit integer."""
    return _narrow(_wide_unsigned(text), 0, UINT64_MAX)


def parse_int(text: str | None) -> int | None:
    """Parse a C ``int``."""
    return _narrow(_wide_signed(text), INT_MIN, INT_MAX)


def parse_uint(text: str | None) -> int | None:
    """Parse a C ``unsigned int``."""
    return _narrow(_wide_unsigned(text), 0, UINT_MAX)


def _has_nonzero_digit(mantissa: str, digits: str) -> bool:
    return any(char in digits for char in mantissa)


def _hex_literal(match: re.Match[str]) -> Fraction:
    """Exact rational value of a hexadecimal float literal."""
    mantissa = match["mantissa"].lower()
    whole, _, fraction = mantissa.partition("x")[2].partition(".")
    exponent = int(match["exponent"] or 0) - 4 * len(fraction)
    value = Fraction(int(whole + fraction, 16)) * Fraction(2) ** exponent
    return -value if mantissa.startswith("-") else value


def _is_subnormal(value: float) -> bool:
    return 0.0 < abs(value) < DBL_MIN


def parse_double(text: str | None) -> float | None:
    """Parse a double precision float.

    Accepts decimal literals (``1.5``, ``.5``, ``2e10``), hexadecimal float
    literals (``0x1.8p3``), and ``inf``/``infinity``/``nan`` in any case.

    A finite literal that overflows to infinity fails like a range error from
    ``strtod``. So does a literal that lands below the smallest normal double
    without being exactly representable: ``1e-400`` and ``1e-310`` fail while
    ``0x1p-1070`` is accepted. Beyond that, only values above the largest
    finite double are rejected: ``inf`` fails while ``-inf`` and ``nan`` are
    accepted.

    Args:
        text: String to parse

    Returns:
        The parsed value, or None when the string is not a complete numeral
        or falls out of range.

    Examples:
        >>> parse_double("2.5")
        2.5
        >>> parse_double("1e400") is None
        True
        >>> parse_double("-inf")
        -inf
    """
    if not isinstance(text, str):
        return None

    numeral = _strip_leading(text)
    value: float

    if (match := _DECIMAL_FLOAT.fullmatch(numeral)) is not None:
        value = float(numeral)
        if math.isinf(value):
            return None
        if value == 0.0 and _has_nonzero_digit(match["mantissa"], "123456789"):
            return None
        if _is_subnormal(value) and Decimal(numeral) != Decimal(value):
            return None
    elif (match := _HEX_FLOAT.fullmatch(numeral)) is not None:
        try:
            value = float.fromhex(numeral)
        except OverflowError:
            return None
        hex_digits = match["mantissa"].lower().partition("x")[2]
        if value == 0.0 and _has_nonzero_digit(hex_digits, "123456789abcdef"):
            return None
        if _is_subnormal(value) and _hex_literal(match) != Fraction(value):
            return None
    elif (match := _SPECIAL_FLOAT.fullmatch(numeral)) is not None:
        negative = match["sign"] == "-"
        if match["inf"] is not None:
            value = -math.inf if negative else math.inf
        else:
            value = -math.nan if negative else math.nan
    else:
        return None

    # Upper bound only: -inf passes this check
    if value > DBL_MAX:
        return None

    return value


_PARSERS: Final[Mapping[str, Callable[[str | None], int | float | None]]] = {
    "int16": parse_int16,
    "uint16": parse_uint16,
    "int32": parse_int32,
    "uint32": parse_uint32,
    "int64": parse_int64,
    "uint64": parse_uint64,
    "int": parse_int,
    "uint": parse_uint,
    "double": parse_double,
}

NUMBER_KINDS: Final[tuple[str, ...]] = tuple(_PARSERS)


def parse_number(kind: str, text: str | None) -> int | float | None:
    """Parse text strictly as the numeric width named by kind.

    Args:
        kind: One of NUMBER_KINDS
        text: String to parse

    Returns:
        The parsed value, or None on parse failure

    Raises:
        ValueError: If kind is not a known numeric width
    """
    try:
        parser = _PARSERS[kind]
    except KeyError:
        known = ", ".join(NUMBER_KINDS)
        raise ValueError(f"Unknown number kind: {kind!r}. Known kinds are: {known}") from None
    return parser(text)
