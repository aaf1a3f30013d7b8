"""Display helpers over a LineIndex and its text.

The index stores offsets only, so these helpers take the indexed text
alongside it. Useful for error reporting and editor integration: render a
position, pull out one line, or show a caret under an offset.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from lineposition.constants import CR, LF, TEXT_ENCODING
from lineposition.index import LineIndex, Text, to_bytes

__all__ = ["format_position", "get_error_context", "get_line_content"]


def format_position(index: LineIndex, offset: int, zero_based: bool = False) -> str:
    """Format an offset as a human-readable ``line:column`` string.

    Args:
        index: Index of the buffer the offset points into
        offset: Byte offset in the buffer
        zero_based: If True, use 0-based line and column; if False, 1-based

    Returns:
        Position string like "2:1" (1-based) or "1:0" (0-based)

    Raises:
        OffsetOutOfBoundsError: If offset is outside the buffer

    Example:
        >>> from lineposition import parse
        >>> index = parse(b"hello\\nworld\\ntest")
        >>> format_position(index, 6)
        '2:1'
        >>> format_position(index, 6, zero_based=True)
        '1:0'
    """
    position = index.position(offset)
    if zero_based:
        return f"{position.line - 1}:{position.offset}"
    return f"{position.line}:{position.offset + 1}"


def get_line_content(text: Text, index: LineIndex, line: int) -> str | bytes:
    """Extract the content of one line, without its line ending.

    Strips the trailing ``\\n`` and, for CRLF text, the ``\\r`` before it.

    Args:
        text: The buffer the index was built from
        index: Index of that buffer
        line: One-indexed line number

    Returns:
        Line content. str when text is str (decoded from the UTF-8 bytes
        with errors="replace"), bytes otherwise.

    Raises:
        LineOutOfRangeError: If line is outside the index

    Example:
        >>> from lineposition import parse
        >>> source = "hello\\r\\nworld"
        >>> get_line_content(source, parse(source), 1)
        'hello'
    """
    content = _line_bytes(to_bytes(text), index, line)
    if isinstance(text, str):
        return content.decode(TEXT_ENCODING, errors="replace")
    return content


def get_error_context(
    text: Text,
    index: LineIndex,
    offset: int,
    context_lines: int = 2,
    marker: str = "^",
) -> str:
    """Get formatted context showing an offset in its source.

    Shows the line holding the offset with up to ``context_lines`` lines on
    either side, each prefixed by its line number, and a marker under the
    offset's column. Columns are bytes, so the marker lines up exactly for
    ASCII text.

    Args:
        text: The buffer the index was built from
        index: Index of that buffer
        offset: Byte offset to point at
        context_lines: Number of lines to show before/after the offset's line
        marker: Character to use for the marker

    Returns:
        Multi-line context string

    Raises:
        OffsetOutOfBoundsError: If offset is outside the buffer
        ValueError: If context_lines is negative

    Example:
        >>> from lineposition import parse
        >>> source = "line1\\nline2\\nerror here\\nline4\\nline5"
        >>> print(get_error_context(source, parse(source), 14, context_lines=1))
           2 | line2
           3 | error here
             |   ^
           4 | line4
    """
    if context_lines < 0:
        msg = f"context_lines must be >= 0, got {context_lines}"
        raise ValueError(msg)

    position = index.position(offset)
    start_line = max(1, position.line - context_lines)
    end_line = min(index.num_lines, position.line + context_lines)

    data = to_bytes(text)
    result: list[str] = []
    for line in range(start_line, end_line + 1):
        content = _line_bytes(data, index, line).decode(TEXT_ENCODING, errors="replace")
        gutter = f"{line:4} | "
        result.append(gutter + content)
        if line == position.line:
            result.append(" " * (len(gutter) - 2) + "| " + " " * position.offset + marker)

    return "\n".join(result)


def _line_bytes(data: bytes, index: LineIndex, line: int) -> bytes:
    start, end = index.line_span(line)
    if end > start and data[end - 1] == LF:
        end -= 1
        if end > start and data[end - 1] == CR:
            end -= 1
    return data[start:end]
