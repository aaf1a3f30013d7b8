"""Lookup exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic
from .templates import ErrorTemplate


class LinePositionError(Exception):
    """Base exception for all lineposition errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LinePositionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class OffsetOutOfBoundsError(LinePositionError):
    """Byte offset outside ``0..=buffer_length``.

    The end-of-buffer offset itself is valid and never raises this.

    Attributes:
        offset: The rejected offset
        buffer_length: Length of the indexed buffer
    """

    def __init__(self, offset: int, buffer_length: int) -> None:
        super().__init__(ErrorTemplate.offset_out_of_bounds(offset, buffer_length))
        self.offset = offset
        self.buffer_length = buffer_length


class LineOutOfRangeError(LinePositionError):
    """One-indexed line number outside ``1..=num_lines``.

    Attributes:
        line: The rejected line number
        num_lines: Number of lines in the index
    """

    def __init__(self, line: int, num_lines: int) -> None:
        super().__init__(ErrorTemplate.line_out_of_range(line, num_lines))
        self.line = line
        self.num_lines = num_lines


class ColumnOutOfRangeError(LinePositionError):
    """Column that would land outside its line.

    Attributes:
        line: Line the column was applied to
        column: The rejected column
        max_column: Largest column the line accepts
    """

    def __init__(self, line: int, column: int, max_column: int) -> None:
        super().__init__(ErrorTemplate.column_out_of_range(line, column, max_column))
        self.line = line
        self.column = column
        self.max_column = max_column
