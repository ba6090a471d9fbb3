#!/usr/bin/env python3
"""
PVLSCAN VALUE READER - Continuation Stitcher (Phase 1.3)
--------------------------------------------------------
Reads the right-hand side of a label entry. Long values are wrapped onto
continuation lines that start with a fixed run of blank columns; those
lines are trimmed and glued onto the value with no separator.

Known limitation: a '=' met while reading is treated as a stray separator
and dropped together with the character after it, so an '=' inside a
quoted string is lost as well.

Author: PvlScan Team
Date: 2026-10-18
"""

import logging

from pvlscan.scanning.cursor import LINE_TERMINATORS, PvlCursor

logger = logging.getLogger("pvlscan.values")

# Leading blank columns that mark a value continuation line.
CONTINUATION_WIDTH = 37


def is_at_continuation(cursor: PvlCursor, width: int = CONTINUATION_WIDTH) -> bool:
    """
    True when the cursor sits at a line start followed by `width` spaces.
    Too few characters left to hold the run simply means "no".
    """
    if not cursor.is_at_line_start():
        return False
    return cursor.remaining(width) == " " * width


class PvlValueReader:

    def __init__(self, cursor: PvlCursor, continuation_width: int = CONTINUATION_WIDTH):
        self.cursor = cursor
        self.continuation_width = continuation_width

    def is_at_value_line_continuation(self) -> bool:
        return is_at_continuation(self.cursor, self.continuation_width)

    def read_remaining_line(self) -> str:
        """
        Reads up to the next line terminator (not consumed) and trims it.
        """
        cursor = self.cursor
        line_text = []
        while not cursor.is_eof():
            if cursor.current_char() == "=":
                # The separator and the character after it are dropped, but a
                # line terminator right after '=' still ends the line.
                cursor.jump(1)
                if cursor.is_eof():
                    break
                if cursor.current_char() not in LINE_TERMINATORS:
                    cursor.jump(1)
                    if cursor.is_eof():
                        break
            c = cursor.current_char()
            if c in LINE_TERMINATORS:
                break
            line_text.append(c)
            cursor.jump(1)
        return "".join(line_text).strip()

    def consume_line_end(self):
        """Steps over one CR, LF or CRLF terminator if the cursor is on one."""
        cursor = self.cursor
        if cursor.is_eof():
            return
        c = cursor.current_char()
        if c == "\r":
            cursor.jump(1)
            if not cursor.is_eof() and cursor.current_char() == "\n":
                cursor.jump(1)
        elif c == "\n":
            cursor.jump(1)

    def read_value(self) -> str:
        """
        Reads the rest of the current line plus any continuation lines and
        returns the concatenated value text. Leaves the cursor at the start
        of the first line that is not a continuation.
        """
        value_text = self.read_remaining_line()
        self.consume_line_end()
        while self.is_at_value_line_continuation():
            continued = self.read_remaining_line()
            logger.debug("Continuation at line %d: %r", self.cursor.line_no(), continued)
            value_text += continued
            self.consume_line_end()
        return value_text
