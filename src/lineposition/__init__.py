"""lineposition - byte offset <-> line/column lookup for text buffers.

Built for editor and language-server tooling that receives byte offsets
from external tools and must report human-addressable positions, or the
other way round.

Public API:
    parse - Index a text buffer (str or bytes-like)
    LineIndex - Immutable index of line start offsets
    LinePosition - One-indexed line, zero-indexed byte column
    IndexConfig - Index construction options
    LineEnding - Line-ending convention observed while indexing
    format_position / get_line_content / get_error_context - Display helpers

Exceptions:
    LinePositionError - Base exception class
    OffsetOutOfBoundsError - Offset outside 0..=buffer_length
    LineOutOfRangeError - Line outside 1..=num_lines
    ColumnOutOfRangeError - Column outside its line

Submodules:
    lineposition.diagnostics - Diagnostic codes, templates and formatter
"""

from .config import IndexConfig
from .constants import LineEnding
from .context import format_position, get_error_context, get_line_content
from .diagnostics import (
    ColumnOutOfRangeError,
    LineOutOfRangeError,
    LinePositionError,
    OffsetOutOfBoundsError,
)
from .index import LineIndex, LinePosition, parse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("lineposition")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ColumnOutOfRangeError",
    "IndexConfig",
    "LineEnding",
    "LineIndex",
    "LineOutOfRangeError",
    "LinePosition",
    "LinePositionError",
    "OffsetOutOfBoundsError",
    "__version__",
    "format_position",
    "get_error_context",
    "get_line_content",
    "parse",
]
