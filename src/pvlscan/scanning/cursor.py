#!/usr/bin/env python3
"""
PVLSCAN CURSOR - The Needle (Phase 1.1)
---------------------------------------
Tracks a single offset into an immutable label buffer. Every other scanning
component reads through the cursor, and only advance() and jump() are
allowed to move it.

Labels are 8-bit text: bytes are decoded as Latin-1 so that one character
always stands for one byte of the original file.

Author: PvlScan Team
Date: 2026-10-18
"""

import re
from bisect import bisect_right
from typing import Union

from pvlscan.core.errors import EofError

LINE_TERMINATORS = ("\r", "\n")
# CRLF, a lone CR and a lone LF each end one line.
LINE_BREAK = re.compile(r"\r\n?|\n")


class PvlCursor:
    """
    Read-only view over the label text plus a mutable position.
    The position always stays within [0, length]; length means end of input.
    """

    def __init__(self, content: Union[str, bytes]):
        if isinstance(content, (bytes, bytearray)):
            content = bytes(content).decode("latin-1")
        self.content = content
        self.length = len(content)
        self.pos = 0
        self._line_ends = [m.end() for m in LINE_BREAK.finditer(content)]

    def char_at(self, indx: int) -> str:
        if indx < 0 or indx >= self.length:
            raise EofError(f"Offset {indx} is outside the buffer (length {self.length})")
        return self.content[indx]

    def char_at_offset(self, num_chars: int) -> str:
        """Probes the character num_chars ahead of the current position."""
        return self.char_at(self.pos + num_chars)

    def current_char(self) -> str:
        return self.char_at(self.pos)

    def peek_char(self) -> str:
        return self.char_at(self.pos + 1)

    def remaining(self, num_chars: int) -> str:
        """Up to num_chars characters from the position, without moving."""
        return self.content[self.pos:self.pos + num_chars]

    def is_eof(self) -> bool:
        return self.pos >= self.length

    def advance(self) -> str:
        """Moves one character forward and returns the new current character."""
        if self.is_eof():
            raise EofError("Cannot advance past end of input", self.line_no())
        self.pos += 1
        return self.current_char()

    def jump(self, num_chars: int):
        """
        Moves num_chars forward, stopping at end of input instead of
        overrunning it. Only fails when already sitting at the end.
        """
        if self.is_eof():
            raise EofError("Cannot jump past end of input", self.line_no())
        self.pos = min(self.pos + num_chars, self.length)

    def is_at_line_start(self) -> bool:
        if self.pos == 0:
            return True
        return self.char_at(self.pos - 1) in LINE_TERMINATORS

    def is_at_crlf_middle(self) -> bool:
        """True on the LF of a CRLF pair, which belongs to the line already ended."""
        return (0 < self.pos < self.length
                and self.content[self.pos] == "\n"
                and self.content[self.pos - 1] == "\r")

    def line_no(self) -> int:
        """1-based line number of the position, for diagnostics."""
        return bisect_right(self._line_ends, self.pos) + 1
