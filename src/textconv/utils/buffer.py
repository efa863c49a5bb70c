"""Capacity-checked text writer.

Formatting helpers render into a BoundedWriter instead of an unchecked
buffer. The capacity follows the bounded ``snprintf`` convention: a writer of
size ``n`` stores at most ``n - 1`` characters, the last slot being reserved
for the terminator, and a writer of size 0 stores nothing.
"""

from __future__ import annotations


class BoundedWriter:
    """Accumulate text up to a fixed capacity, dropping the excess."""

    def __init__(self, size: int) -> None:
        """Initialize the writer.

        Args:
            size: Capacity including the terminator slot (must be non-negative)

        Raises:
            ValueError: If size is negative
        """
        if size < 0:
            msg = "size must be non-negative"
            raise ValueError(msg)

        self.size: int = size
        self.truncated: bool = False
        self._parts: list[str] = []
        self._length: int = 0

    @property
    def remaining(self) -> int:
        """Number of characters that can still be stored."""
        return max(self.size - 1, 0) - self._length

    def write(self, text: str) -> int:
        """Append as much of text as fits.

        Args:
            text: Text to append

        Returns:
            Number of characters actually stored. When it is smaller than
            ``len(text)`` the ``truncated`` flag is set.
        """
        kept = text[: self.remaining]
        if len(kept) < len(text):
            self.truncated = True
        if kept:
            self._parts.append(kept)
            self._length += len(kept)
        return len(kept)

    def getvalue(self) -> str:
        """Return everything stored so far."""
        return "".join(self._parts)

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"BoundedWriter(size={self.size}, length={self._length}, truncated={self.truncated})"


def bounded(text: str, size: int | None) -> str:
    """Return text cut to fit a buffer of the given size.

    Args:
        text: Fully rendered text
        size: Buffer capacity including the terminator, or None for no limit

    Returns:
        The text itself when size is None, otherwise the stored prefix.
    """
    if size is None:
        return text

    writer = BoundedWriter(size)
    _ = writer.write(text)
    return writer.getvalue()
