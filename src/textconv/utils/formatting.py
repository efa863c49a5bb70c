"""Pure formatting utilities for human-readable output.

This module renders machine quantities (integers, millisecond intervals, byte
counts and item counts) as short human-readable strings. All functions are
pure with no side effects.

Every renderer accepts an optional ``size`` capacity and honours the bounded
write contract of :mod:`textconv.utils.buffer`: the result never holds more
than ``size - 1`` characters, and truncation is silent.
"""

from dataclasses import dataclass
from typing import Final

from textconv.core.limits import INT64_MAX, INT64_MIN, INTSTRING_MAX_DIGITS, UINT64_MAX
from textconv.utils.buffer import bounded

# Time unit constants, in milliseconds
_SECOND = 1000
_MINUTE = _SECOND * 60  # 60,000
_HOUR = _MINUTE * 60  # 3,600,000
_DAY = _HOUR * 24  # 86,400,000

# Byte counts are scaled while the value has five digits or more
_BYTES_SCALE_THRESHOLD = 10240
BYTE_UNITS: Final[tuple[str, ...]] = ("B", "kB", "MB", "GB", "TB", "PB", "EB")

# Item counts: thousands are left unlabeled
_COUNT_SCALE_THRESHOLD = 10000
COUNT_NAMES: Final[tuple[str, ...]] = (
    "",
    "",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
)


@dataclass(frozen=True, slots=True)
class IntString:
    """A 64-bit signed integer paired with its decimal rendering."""

    value: int
    text: str

    def __str__(self) -> str:
        return self.text


def _check_unsigned(name: str, value: int) -> None:
    if value < 0:
        msg = f"{name} must be non-negative"
        raise ValueError(msg)
    if value > UINT64_MAX:
        msg = f"{name} must fit in 64 bits"
        raise ValueError(msg)


def int_to_string(number: int) -> IntString:
    """Render a 64-bit signed integer in base 10.

    Args:
        number: Integer between INT64_MIN and INT64_MAX

    Returns:
        IntString holding the value and its canonical decimal text

    Raises:
        ValueError: If number does not fit in a 64-bit signed integer

    Examples:
        >>> int_to_string(-42).text
        '-42'
    """
    if number < INT64_MIN or number > INT64_MAX:
        msg = "number must fit in a 64-bit signed integer"
        raise ValueError(msg)

    return IntString(value=number, text=bounded(str(number), INTSTRING_MAX_DIGITS))


def format_interval(millisecs: int, *, size: int | None = None, aligned: bool = False) -> str:
    """Convert a millisecond count to a compact duration.

    The format is picked by magnitude and always shows the two most
    significant units:

    - under a second: ``"<n>ms"``
    - under 10 seconds: ``"<s>s<ms>"`` with milliseconds on 3 digits
    - under a minute: ``"<s>s"``
    - under an hour: ``"<m>m<ss>s"``
    - under a day: ``"<h>h<mm>m"``
    - otherwise: ``"<d>d<hh>h"``

    Args:
        millisecs: Duration in milliseconds (0 to 2**64 - 1)
        size: Buffer capacity including the terminator, or None for no limit
        aligned: Right-align the leading number so values line up in columns

    Returns:
        Human-readable duration string

    Raises:
        ValueError: If millisecs is negative or does not fit in 64 bits

    Examples:
        >>> format_interval(500)
        '500ms'
        >>> format_interval(1500)
        '1s500'
        >>> format_interval(65000)
        '1m05s'
        >>> format_interval(90000000)
        '1d01h'
        >>> format_interval(65000, aligned=True)
        ' 1m05s'
    """
    _check_unsigned("millisecs", millisecs)

    if millisecs < _SECOND:
        text = f"{millisecs:3d}ms" if aligned else f"{millisecs}ms"

    elif millisecs < 10 * _SECOND:
        seconds = millisecs // _SECOND
        remainder = millisecs - seconds * _SECOND
        text = f"{seconds:2d}s{remainder:03d}" if aligned else f"{seconds}s{remainder:03d}"

    elif millisecs < _MINUTE:
        seconds = millisecs // _SECOND
        text = f"{seconds:2d}s" if aligned else f"{seconds}s"

    elif millisecs < _HOUR:
        minutes = millisecs // _MINUTE
        seconds = (millisecs % _MINUTE) // _SECOND
        text = f"{minutes:2d}m{seconds:02d}s" if aligned else f"{minutes}m{seconds:02d}s"

    elif millisecs < _DAY:
        hours = millisecs // _HOUR
        minutes = (millisecs % _HOUR) // _MINUTE
        text = f"{hours:2d}h{minutes:02d}m" if aligned else f"{hours}h{minutes:02d}m"

    else:
        days = millisecs // _DAY
        hours = (millisecs % _DAY) // _HOUR
        text = f"{days:2d}d{hours:02d}h" if aligned else f"{days}d{hours:02d}h"

    return bounded(text, size)


def format_bytes(count: int, *, size: int | None = None) -> str:
    """Convert a byte count to a whole number of binary units.

    The value is divided by 1024 while it stays at or above 10240, so the
    rendered number keeps four or five significant digits. No fractional
    part is ever shown.

    Args:
        count: Number of bytes (0 to 2**64 - 1)
        size: Buffer capacity including the terminator, or None for no limit

    Returns:
        ``"<n> <unit>"`` with unit one of B, kB, MB, GB, TB, PB, EB

    Raises:
        ValueError: If count is negative or does not fit in 64 bits

    Examples:
        >>> format_bytes(1023)
        '1023 B'
        >>> format_bytes(10240)
        '10 kB'
        >>> format_bytes(17179869184)
        '16 GB'
    """
    _check_unsigned("count", count)

    index = 0
    scaled = count
    while scaled >= _BYTES_SCALE_THRESHOLD and index < len(BYTE_UNITS) - 1:
        index += 1
        scaled //= 1024

    return bounded(f"{scaled} {BYTE_UNITS[index]}", size)


def format_count(number: int, *, size: int | None = None) -> str:
    """Convert an item count to a short human-readable figure.

    - under 1000: the plain number
    - under a million: thousands and remainder as two numbers, ``"12 345"``
      for 12345 (the remainder is not zero-padded: 1005 gives ``"1 5"``)
    - otherwise: divided by 1000 while at or above 10000, then suffixed with
      its magnitude name, so 1234567890 gives ``"1234 million"`` rather
      than ``"1 billion"``

    The thousands magnitude has an empty name, which leaves a trailing
    space, as in ``"5000 "`` for five million.

    Args:
        number: Item count (0 to 2**64 - 1)
        size: Buffer capacity including the terminator, or None for no limit

    Returns:
        Human-readable count

    Raises:
        ValueError: If number is negative or does not fit in 64 bits

    Examples:
        >>> format_count(999)
        '999'
        >>> format_count(12345)
        '12 345'
        >>> format_count(1234567890)
        '1234 million'
    """
    _check_unsigned("number", number)

    if number < 1000:
        return bounded(str(number), size)

    if number < 1000 * 1000:
        thousands = number // 1000
        units = number - thousands * 1000
        return bounded(f"{thousands} {units}", size)

    index = 0
    scaled = number
    while scaled >= _COUNT_SCALE_THRESHOLD and index < len(COUNT_NAMES) - 1:
        index += 1
        scaled //= 1000

    return bounded(f"{scaled} {COUNT_NAMES[index]}", size)
