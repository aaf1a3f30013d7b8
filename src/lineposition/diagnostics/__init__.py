"""Diagnostic system for lineposition errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ColumnOutOfRangeError,
    LineOutOfRangeError,
    LinePositionError,
    OffsetOutOfBoundsError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ColumnOutOfRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "LineOutOfRangeError",
    "LinePositionError",
    "OffsetOutOfBoundsError",
    "OutputFormat",
]
