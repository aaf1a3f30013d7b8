"""Line index over an immutable text buffer.

Precomputes line start offsets in a single O(n) pass, then answers
offset -> (line, column) and (line, column) -> offset queries. Offset
lookups are O(log n) binary searches; line lookups are O(1).

Coordinates:
    - Offsets are zero-indexed BYTE positions. ``str`` input is encoded
      as UTF-8 before indexing.
    - Lines are one-indexed.
    - Columns are zero-indexed byte offsets from the start of the line.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter, the \\r
      stays the last byte of its line)
    - CR-only (Classic Mac, \\r): NOT supported

Bounds:
    Valid offsets are ``0..=buffer_length``. The end-of-buffer offset is a
    real position (where an editor cursor sits after the last byte) and
    resolves to the end of the last line. Anything else raises
    OffsetOutOfBoundsError; nothing is clamped.

Thread Safety:
    Thread-safe. LineIndex and LinePosition are frozen after construction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import TypeAlias

from lineposition.config import DEFAULT_CONFIG, IndexConfig
from lineposition.constants import CR, LF, TEXT_ENCODING, LineEnding
from lineposition.diagnostics import (
    ColumnOutOfRangeError,
    LineOutOfRangeError,
    OffsetOutOfBoundsError,
)

__all__ = ["LineIndex", "LinePosition", "parse"]

logger = logging.getLogger(__name__)

Text: TypeAlias = str | bytes | bytearray | memoryview


@dataclass(frozen=True, slots=True)
class LinePosition:
    """Position of a byte offset within its line.

    Attributes:
        line: Line number, starting with 1
        offset: Byte offset within the line, starting with 0

    Example:
        >>> position = LinePosition(line=2, offset=4)
        >>> str(position)
        '2:4'
    """

    line: int
    offset: int

    def __post_init__(self) -> None:
        """Validate LinePosition invariants.

        Raises:
            ValueError: If line is less than 1 (lines are 1-indexed) or
                offset is negative.
        """
        if self.line < 1:
            msg = f"LinePosition.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.offset < 0:
            msg = f"LinePosition.offset must be >= 0, got {self.offset}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.line}:{self.offset}"


@dataclass(frozen=True, slots=True)
class LineIndex:
    """Line start offsets of one text buffer.

    Simply:
        1. Build with ``parse`` (or ``LineIndex.parse``)
        2. Call ``position`` with a byte offset to get a LinePosition
        3. Go back with ``offset(line, column)`` or ``offset_of(position)``

    Example:
        >>> index = parse(b"abcdefg\\nhijklmnop\\n")
        >>> index.num_lines
        2
        >>> index.position(5)   # 'f'
        LinePosition(line=1, offset=5)
        >>> index.offset_line(8)  # 'h'
        2
        >>> index.offset(2, 0)
        8

    Attributes:
        buffer_length: Length of the indexed buffer in bytes
        line_starts: Byte offset of the first byte of each line; starts
            at 0 and is strictly increasing
        line_ending: Newline convention seen while indexing
    """

    buffer_length: int
    line_starts: tuple[int, ...]
    line_ending: LineEnding = LineEnding.NONE

    def __post_init__(self) -> None:
        """Validate the cheap structural invariants.

        Raises:
            ValueError: If line_starts is empty, does not start at 0, or
                ends beyond buffer_length.
        """
        if not self.line_starts or self.line_starts[0] != 0:
            msg = f"line_starts must begin with 0, got {self.line_starts[:1]}"
            raise ValueError(msg)
        if self.line_starts[-1] > self.buffer_length:
            msg = (
                f"line_starts ends at {self.line_starts[-1]}, "
                f"beyond buffer_length {self.buffer_length}"
            )
            raise ValueError(msg)

    @classmethod
    def parse(cls, text: Text, config: IndexConfig | None = None) -> LineIndex:
        """Index the given buffer.

        Records the offset right after every ``\\n`` as the start of the
        next line. Never fails for bytes-like or str input.

        Args:
            text: Buffer to index. str is encoded as UTF-8 first.
            config: Construction options (default: IndexConfig())

        Returns:
            New LineIndex. The buffer itself is not retained.

        Raises:
            TypeError: If text is neither str nor bytes-like

        Complexity:
            O(n) where n = buffer length in bytes
        """
        data = to_bytes(text)
        options = config if config is not None else DEFAULT_CONFIG
        length = len(data)

        starts = [0]
        crlf = lf = 0
        pos = data.find(LF)
        while pos != -1:
            if pos > 0 and data[pos - 1] == CR:
                crlf += 1
            else:
                lf += 1
            # Next line starts after this newline
            starts.append(pos + 1)
            pos = data.find(LF, pos + 1)

        # A final newline terminates the last line unless configured otherwise
        if starts[-1] == length and length > 0 and not options.count_trailing_empty_line:
            starts.pop()

        index = cls(
            buffer_length=length,
            line_starts=tuple(starts),
            line_ending=_classify(crlf, lf),
        )
        logger.debug(
            "Indexed %d bytes: %d lines, line endings %s",
            length,
            index.num_lines,
            index.line_ending,
        )
        return index

    @property
    def num_lines(self) -> int:
        """Number of lines in the buffer, always at least 1."""
        return len(self.line_starts)

    def position(self, offset: int) -> LinePosition:
        """Look up the line and column for a byte offset.

        Args:
            offset: Byte offset, 0 up to and including buffer_length

        Returns:
            LinePosition with one-indexed line and zero-indexed column

        Raises:
            OffsetOutOfBoundsError: If offset is negative or beyond buffer_length
            TypeError: If offset is not an int

        Example:
            >>> index = parse(b"abc\\ndef")
            >>> index.position(4)   # 'd'
            LinePosition(line=2, offset=0)
            >>> index.position(7)   # end of buffer
            LinePosition(line=2, offset=3)
        """
        line_idx = self._find_line(offset)
        return LinePosition(line=line_idx + 1, offset=offset - self.line_starts[line_idx])

    def offset_line(self, offset: int) -> int:
        """Look up only the one-indexed line number for a byte offset.

        Same bounds contract as ``position``.

        Raises:
            OffsetOutOfBoundsError: If offset is negative or beyond buffer_length
            TypeError: If offset is not an int
        """
        return self._find_line(offset) + 1

    def line_start(self, line: int) -> int:
        """Byte offset of the first byte of a line.

        Raises:
            LineOutOfRangeError: If line is outside 1..=num_lines
        """
        self._check_line(line)
        return self.line_starts[line - 1]

    def line_end(self, line: int) -> int:
        """Exclusive end offset of a line.

        This is the start of the next line, so the line's newline (if any)
        falls inside ``line_start(line)..line_end(line)``. For the last line
        it is buffer_length.

        Raises:
            LineOutOfRangeError: If line is outside 1..=num_lines
        """
        self._check_line(line)
        if line == self.num_lines:
            return self.buffer_length
        return self.line_starts[line]

    def line_span(self, line: int) -> tuple[int, int]:
        """``(line_start, line_end)`` of a line."""
        return self.line_start(line), self.line_end(line)

    def offset(self, line: int, column: int = 0) -> int:
        """Byte offset for a one-indexed line and zero-indexed column.

        A column is accepted when the resulting offset stays on the line:
        strictly before the next line start, or up to buffer_length on the
        last line. Every accepted pair therefore round-trips through
        ``position``.

        Args:
            line: Line number, starting with 1
            column: Byte offset within the line, starting with 0

        Returns:
            Byte offset into the buffer

        Raises:
            LineOutOfRangeError: If line is outside 1..=num_lines
            ColumnOutOfRangeError: If column falls outside the line

        Example:
            >>> index = parse(b"abc\\ndef")
            >>> index.offset(2, 1)  # 'e'
            5
            >>> index.offset(2, 3)  # end of buffer
            7
        """
        start, end = self.line_span(line)
        # Only the last line may address its end (end of buffer)
        max_column = end - start if line == self.num_lines else end - start - 1
        if column < 0 or column > max_column:
            raise ColumnOutOfRangeError(line, column, max_column)
        return start + column

    def offset_of(self, position: LinePosition) -> int:
        """Inverse of ``position``: byte offset of a LinePosition."""
        return self.offset(position.line, position.offset)

    def _find_line(self, offset: int) -> int:
        """Zero-based index of the line containing offset."""
        if isinstance(offset, bool) or not isinstance(offset, int):
            msg = f"Offset must be an int, got {type(offset).__name__}"
            raise TypeError(msg)
        if offset < 0 or offset > self.buffer_length:
            raise OffsetOutOfBoundsError(offset, self.buffer_length)
        # Line index = index of largest start <= offset
        return bisect_right(self.line_starts, offset) - 1

    def _check_line(self, line: int) -> None:
        if line < 1 or line > self.num_lines:
            raise LineOutOfRangeError(line, self.num_lines)


def parse(text: Text, config: IndexConfig | None = None) -> LineIndex:
    """Index a text buffer. See ``LineIndex.parse``."""
    return LineIndex.parse(text, config)


def to_bytes(text: Text) -> bytes:
    if isinstance(text, str):
        return text.encode(TEXT_ENCODING)
    if isinstance(text, bytes):
        return text
    if isinstance(text, (bytearray, memoryview)):
        return bytes(text)
    msg = f"Expected str or bytes-like text, got {type(text).__name__}"
    raise TypeError(msg)


def _classify(crlf: int, lf: int) -> LineEnding:
    if crlf and lf:
        return LineEnding.MIXED
    if crlf:
        return LineEnding.CRLF
    if lf:
        return LineEnding.LF
    return LineEnding.NONE
