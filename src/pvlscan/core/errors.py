#!/usr/bin/env python3
"""
PVLSCAN ERRORS
--------------
Failure kinds raised by the scanning primitives and typed accessors.
Every error derives from LabelError so callers can catch the whole family.

Author: PvlScan Team
Date: 2026-10-18
"""

from typing import Optional


class LabelError(ValueError):
    """Base class for every scanning failure."""

    def __init__(self, message: str = "", line_no: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line_no = line_no

    def __str__(self) -> str:
        if self.line_no is not None:
            return f"line {self.line_no}: {self.message}"
        return self.message


class EofError(LabelError):
    """A position probe ran past the end of the buffer."""

    def __init__(self, message: str = "End of input", line_no: Optional[int] = None):
        super().__init__(message, line_no)


class LabelSyntaxError(LabelError):
    pass


class CommentIsntCommentError(LabelError):
    """Comment skip requested while not positioned at '/*'."""

    def __init__(self, message: str = "Not positioned at a comment opening", line_no: Optional[int] = None):
        super().__init__(message, line_no)


class ProgrammingError(LabelError):
    pass


class InvalidTypeError(LabelError):
    """Typed accessor called against a value of another classified type."""


class ValueTypeParseError(LabelError):
    """Raw text could not be converted although the type tag matched."""
