"""Tests for the display helpers in lineposition.context."""

from __future__ import annotations

import pytest

from lineposition import (
    LineOutOfRangeError,
    OffsetOutOfBoundsError,
    format_position,
    get_error_context,
    get_line_content,
    parse,
)


class TestFormatPosition:
    """Test format_position()."""

    def test_one_based_by_default(self) -> None:
        """Default output is what an editor status bar shows."""
        index = parse(b"hello\nworld\ntest")

        assert format_position(index, 0) == "1:1"
        assert format_position(index, 6) == "2:1"
        assert format_position(index, 8) == "2:3"

    def test_zero_based(self) -> None:
        """Zero-based output, as LSP expects."""
        index = parse(b"hello\nworld\ntest")

        assert format_position(index, 6, zero_based=True) == "1:0"
        assert format_position(index, 14, zero_based=True) == "2:2"

    def test_out_of_bounds_propagates(self) -> None:
        """Offsets beyond the buffer are not clamped."""
        with pytest.raises(OffsetOutOfBoundsError):
            format_position(parse(b"abc"), 4)


class TestGetLineContent:
    """Test get_line_content()."""

    def test_str_lines(self) -> None:
        """Lines come back without their newline."""
        source = "hello\nworld\ntest"
        index = parse(source)

        assert get_line_content(source, index, 1) == "hello"
        assert get_line_content(source, index, 2) == "world"
        assert get_line_content(source, index, 3) == "test"

    def test_bytes_in_bytes_out(self) -> None:
        """bytes input returns bytes."""
        source = b"abcdefg\nhijklmnop\n"

        assert get_line_content(source, parse(source), 2) == b"hijklmnop"

    def test_crlf_is_stripped(self) -> None:
        """CR before the LF is part of the terminator."""
        source = "one\r\ntwo\r\n"
        index = parse(source)

        assert get_line_content(source, index, 1) == "one"
        assert get_line_content(source, index, 2) == "two"

    def test_empty_lines(self) -> None:
        """Blank lines and the empty buffer give empty content."""
        source = b"a\n\nb"

        assert get_line_content(source, parse(source), 2) == b""
        assert get_line_content(b"", parse(b""), 1) == b""

    def test_multibyte_text_round_trips(self) -> None:
        """str content is decoded back from UTF-8."""
        source = "naïve\ncafé"

        assert get_line_content(source, parse(source), 2) == "café"

    def test_line_out_of_range(self) -> None:
        """Unknown lines raise the index error."""
        source = "only"

        with pytest.raises(LineOutOfRangeError):
            get_line_content(source, parse(source), 2)


class TestGetErrorContext:
    """Test get_error_context()."""

    def test_marker_under_column(self) -> None:
        """Marker points at the offset, with one line of context each side."""
        source = "line1\nline2\nerror here\nline4\nline5"

        result = get_error_context(source, parse(source), 14, context_lines=1)

        assert result.split("\n") == [
            "   2 | line2",
            "   3 | error here",
            "     |   ^",
            "   4 | line4",
        ]

    def test_context_clipped_at_buffer_edges(self) -> None:
        """Context never runs before line 1 or after the last line."""
        source = b"first\nsecond"

        result = get_error_context(source, parse(source), 0, context_lines=5)

        assert result.split("\n") == [
            "   1 | first",
            "     | ^",
            "   2 | second",
        ]

    def test_custom_marker_and_no_context(self) -> None:
        """context_lines=0 shows only the offending line."""
        source = "a\nbcd\ne"

        result = get_error_context(source, parse(source), 4, context_lines=0, marker="~")

        assert result == "   2 | bcd\n     |   ~"

    def test_end_of_buffer(self) -> None:
        """End-of-buffer offset points just past the last byte."""
        source = "abc\n"

        result = get_error_context(source, parse(source), 4, context_lines=0)

        assert result == "   1 | abc\n     |     ^"

    def test_negative_context_rejected(self) -> None:
        """context_lines must be non-negative."""
        with pytest.raises(ValueError, match="context_lines"):
            get_error_context("abc", parse("abc"), 0, context_lines=-1)

    def test_out_of_bounds_propagates(self) -> None:
        """Offset errors from the index propagate."""
        with pytest.raises(OffsetOutOfBoundsError):
            get_error_context("abc", parse("abc"), 10)
