"""Unit tests for the bounded writer."""

import pytest

from textconv.utils.buffer import BoundedWriter, bounded


class TestBoundedWriter:
    """Test suite for BoundedWriter."""

    def test_write_within_capacity(self) -> None:
        writer = BoundedWriter(16)
        assert writer.write("hello") == 5
        assert writer.getvalue() == "hello"
        assert not writer.truncated
        assert writer.remaining == 10

    def test_reserves_terminator_slot(self) -> None:
        writer = BoundedWriter(5)
        assert writer.write("hello") == 4
        assert writer.getvalue() == "hell"
        assert writer.truncated
        assert writer.remaining == 0

    def test_writes_accumulate_until_full(self) -> None:
        writer = BoundedWriter(8)
        assert writer.write("abc") == 3
        assert writer.write("defgh") == 4
        assert writer.write("ijk") == 0
        assert writer.getvalue() == "abcdefg"
        assert len(writer) == 7
        assert writer.truncated

    def test_zero_size_stores_nothing(self) -> None:
        writer = BoundedWriter(0)
        assert writer.write("x") == 0
        assert writer.getvalue() == ""
        assert writer.truncated

    def test_size_one_stores_nothing(self) -> None:
        writer = BoundedWriter(1)
        assert writer.write("x") == 0
        assert writer.remaining == 0

    def test_empty_write_is_not_truncation(self) -> None:
        writer = BoundedWriter(0)
        assert writer.write("") == 0
        assert not writer.truncated

    def test_negative_size_raises(self) -> None:
        with pytest.raises(ValueError, match="size must be non-negative"):
            _ = BoundedWriter(-1)

    def test_repr(self) -> None:
        writer = BoundedWriter(3)
        _ = writer.write("abc")
        assert repr(writer) == "BoundedWriter(size=3, length=2, truncated=True)"


class TestBounded:
    """Test suite for the bounded() helper."""

    def test_no_limit(self) -> None:
        assert bounded("anything", None) == "anything"

    @pytest.mark.parametrize(("size", "expected"), [(0, ""), (1, ""), (3, "ab"), (4, "abc"), (100, "abc")])
    def test_limits(self, size: int, expected: str) -> None:
        assert bounded("abc", size) == expected
