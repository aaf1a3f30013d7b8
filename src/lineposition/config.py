"""Index construction options.

Provides a single frozen dataclass carrying every option that changes
how a buffer is split into lines. Constructing ``IndexConfig()`` with no
arguments gives the default behaviour used by ``parse``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "IndexConfig"]


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Immutable configuration for LineIndex construction.

    Attributes:
        count_trailing_empty_line: If True, a newline that is the last byte
            of the buffer opens a new, empty final line, so a buffer always
            has one more line than it has newlines. If False (default), that
            newline terminates the last line instead: ``b"abc\\n"`` is one
            line, and the end-of-buffer offset resolves to the end of it.
            An empty buffer is one empty line under both settings.

    Example:
        >>> from lineposition import parse
        >>> parse(b"abc\\n").num_lines
        1
        >>> parse(b"abc\\n", IndexConfig(count_trailing_empty_line=True)).num_lines
        2
    """

    count_trailing_empty_line: bool = False


DEFAULT_CONFIG = IndexConfig()
