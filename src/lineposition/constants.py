"""Shared constants for lineposition.

Byte values scanned while indexing, and the names of the line-ending
conventions an index can report.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

__all__ = [
    "CR",
    "LF",
    "TEXT_ENCODING",
    "LineEnding",
]

# Line feed: the only line delimiter. CRLF text works because it still ends in LF.
LF = 0x0A

# Carriage return: inspected only to classify the line-ending convention
CR = 0x0D

# str input is encoded with this before indexing so offsets stay byte offsets
TEXT_ENCODING = "utf-8"


class LineEnding(StrEnum):
    """Line-ending convention observed while indexing a buffer.

    Informational only. Lines are always split after ``\\n``; a CRLF
    buffer keeps the ``\\r`` as the last content byte of each line.

    Members:
        NONE: Buffer contains no newline at all
        LF: Every newline is a bare ``\\n``
        CRLF: Every newline is preceded by ``\\r``
        MIXED: Both conventions occur
    """

    NONE = "none"
    LF = "lf"
    CRLF = "crlf"
    MIXED = "mixed"
