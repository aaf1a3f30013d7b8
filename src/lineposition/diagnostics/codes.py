"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for failed position lookups.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Lookup errors (offset, line or column outside the index)
    """

    # Lookup errors (1000-1099)
    OFFSET_OUT_OF_BOUNDS = 1001
    LINE_OUT_OF_RANGE = 1002
    COLUMN_OUT_OF_RANGE = 1003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Gives both humans and tools
    (editors, LSP servers) enough to explain a rejected lookup.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[OFFSET_OUT_OF_BOUNDS]: Offset 19 is out of bounds (valid range 0..=18)
              = help: Offsets may range from 0 up to and including the buffer length

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
