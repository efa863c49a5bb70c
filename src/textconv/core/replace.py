"""Substring replacement.

``replace_all`` works in two passes. The scan pass records the start offset
of every non-overlapping match in a PositionCache. The build pass then knows
the exact length of the result up front and assembles it from the unmatched
segments of the source and copies of the replacement.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import AnyStr, overload

logger = logging.getLogger(__name__)


class PositionCache:
    """Start offsets of the pattern matches found in one source string.

    Offsets are strictly increasing and never closer to each other than the
    pattern length, so matches cannot overlap.
    """

    __slots__ = ("pattern_length", "_offsets")

    def __init__(self, pattern_length: int) -> None:
        """Initialize an empty cache.

        Args:
            pattern_length: Length of the pattern the offsets refer to
        """
        if pattern_length <= 0:
            msg = "pattern_length must be positive"
            raise ValueError(msg)

        self.pattern_length: int = pattern_length
        self._offsets: list[int] = []

    def append(self, offset: int) -> None:
        """Record the start of the next match.

        Raises:
            ValueError: If the match would overlap the previous one
        """
        if self._offsets and offset < self._offsets[-1] + self.pattern_length:
            msg = f"Match at offset {offset} overlaps the match at offset {self._offsets[-1]}"
            raise ValueError(msg)
        self._offsets.append(offset)

    def clear(self) -> None:
        self._offsets.clear()

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        return self._offsets[index]

    def __len__(self) -> int:
        return len(self._offsets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._offsets)

    def __repr__(self) -> str:
        return f"PositionCache(pattern_length={self.pattern_length}, offsets={self._offsets!r})"


def replaced_length(original_length: int, pattern_length: int, replacement_length: int, matches: int) -> int:
    """Length of a string after replacing ``matches`` occurrences of a pattern."""
    return original_length + (replacement_length - pattern_length) * matches


def _scan(source: AnyStr, pattern: AnyStr, positions: PositionCache) -> None:
    start = 0
    while (offset := source.find(pattern, start)) != -1:
        positions.append(offset)
        start = offset + len(pattern)


def _check_types(source: str | bytes, *others: str | bytes) -> None:
    kind = str if isinstance(source, str) else bytes
    for other in others:
        if not isinstance(other, kind):
            msg = f"expected {kind.__name__} arguments, got {type(source).__name__} and {type(other).__name__}"
            raise TypeError(msg)


def find_positions(source: AnyStr, pattern: AnyStr) -> PositionCache:
    """Find the start of every non-overlapping occurrence of pattern.

    Scanning resumes right after the end of each match, so ``"aa"`` is found
    twice in ``"aaaa"`` and not three times.

    Args:
        source: String to scan
        pattern: Non-empty substring to look for

    Returns:
        PositionCache with the match offsets in ascending order

    Raises:
        ValueError: If pattern is empty
        TypeError: If source and pattern mix ``str`` and ``bytes``
    """
    _check_types(source, pattern)
    if not pattern:
        msg = "pattern must not be empty"
        raise ValueError(msg)

    positions = PositionCache(len(pattern))
    _scan(source, pattern, positions)
    return positions


def _build(source: AnyStr, replacement: AnyStr, positions: PositionCache) -> AnyStr:
    pieces: list[AnyStr] = [source[: positions[0]]]
    last = len(positions) - 1

    for index, offset in enumerate(positions):
        segment_start = offset + positions.pattern_length
        segment_end = len(source) if index == last else positions[index + 1]
        pieces.append(replacement)
        pieces.append(source[segment_start:segment_end])

    return source[:0].join(pieces)


def replace_all(source: AnyStr, pattern: AnyStr, replacement: AnyStr) -> AnyStr | None:
    """Replace every non-overlapping occurrence of pattern.

    Works on ``str`` or ``bytes``; the three arguments must share the type.
    The source is never modified.

    Args:
        source: String to copy with replacements
        pattern: Non-empty substring to replace
        replacement: Substring to insert instead, may be empty

    Returns:
        A new string whose length is exactly
        ``len(source) + (len(replacement) - len(pattern)) * matches``, an
        equal copy of source when nothing matches, or None when pattern is
        empty or the build fails.

    Raises:
        TypeError: If the arguments mix ``str`` and ``bytes``

    Examples:
        >>> replace_all("ababab", "ab", "xyz")
        'xyzxyzxyz'
        >>> replace_all("hello", "zz", "y")
        'hello'
    """
    _check_types(source, pattern, replacement)

    if not pattern:
        logger.error("Refusing to replace an empty pattern")
        return None

    positions = PositionCache(len(pattern))
    try:
        _scan(source, pattern, positions)

        if not positions:
            return source[:]

        matches = len(positions)
        expected = replaced_length(len(source), len(pattern), len(replacement), matches)
        result = _build(source, replacement, positions)
        if len(result) != expected:
            logger.error("Built %d characters where %d were expected", len(result), expected)
            return None
    except MemoryError:
        logger.error(
            "Out of memory replacing %d occurrence(s) in a %d-character string",
            len(positions),
            len(source),
        )
        return None
    finally:
        positions.clear()

    logger.debug("Replaced %d occurrence(s), %d -> %d characters", matches, len(source), expected)
    return result
