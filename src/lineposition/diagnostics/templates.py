"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps every rejected-lookup message in one place, where tests can
    assert against it.
    """

    @staticmethod
    def offset_out_of_bounds(offset: int, buffer_length: int) -> Diagnostic:
        """Byte offset lies outside the indexed buffer.

        Args:
            offset: The rejected byte offset
            buffer_length: Length of the indexed buffer in bytes

        Returns:
            Diagnostic for OFFSET_OUT_OF_BOUNDS
        """
        msg = f"Offset {offset} is out of bounds (valid range 0..={buffer_length})"
        return Diagnostic(
            code=DiagnosticCode.OFFSET_OUT_OF_BOUNDS,
            message=msg,
            hint="Offsets may range from 0 up to and including the buffer length",
        )

    @staticmethod
    def line_out_of_range(line: int, num_lines: int) -> Diagnostic:
        """Line number outside the index.

        Args:
            line: The rejected one-indexed line number
            num_lines: Number of lines in the index

        Returns:
            Diagnostic for LINE_OUT_OF_RANGE
        """
        msg = f"Line {line} is out of range (valid range 1..={num_lines})"
        return Diagnostic(
            code=DiagnosticCode.LINE_OUT_OF_RANGE,
            message=msg,
            hint="Line numbers are one-indexed",
        )

    @staticmethod
    def column_out_of_range(line: int, column: int, max_column: int) -> Diagnostic:
        """Column does not fall within its line.

        Args:
            line: One-indexed line number the column was applied to
            column: The rejected zero-indexed byte column
            max_column: Largest column accepted on that line

        Returns:
            Diagnostic for COLUMN_OUT_OF_RANGE
        """
        msg = f"Column {column} is out of range for line {line} (valid range 0..={max_column})"
        return Diagnostic(
            code=DiagnosticCode.COLUMN_OUT_OF_RANGE,
            message=msg,
            hint="Columns are zero-indexed byte offsets within the line",
        )
