#!/usr/bin/env python3
"""
PVLSCAN COMMENT SKIPPER
-----------------------
Detects and consumes /* ... */ spans. Comments do not nest: the first
closing delimiter ends the span whatever appears before it.

Author: PvlScan Team
Date: 2026-10-18
"""

from pvlscan.core.errors import CommentIsntCommentError, EofError, LabelSyntaxError
from pvlscan.scanning.cursor import PvlCursor

COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"


class PvlCommentSkipper:

    def __init__(self, cursor: PvlCursor):
        self.cursor = cursor

    def is_at_comment_start(self) -> bool:
        return self.cursor.remaining(2) == COMMENT_OPEN

    def is_at_comment_end(self) -> bool:
        return self.cursor.remaining(2) == COMMENT_CLOSE

    def skip_comment(self) -> str:
        """
        Consumes the comment under the cursor and returns its interior text.
        The cursor ends up right after the closing '*/'.
        """
        if not self.is_at_comment_start():
            raise CommentIsntCommentError(line_no=self.cursor.line_no())

        start_line = self.cursor.line_no()
        self.cursor.jump(len(COMMENT_OPEN))
        comment_text = []
        try:
            while not self.is_at_comment_end():
                comment_text.append(self.cursor.current_char())
                self.cursor.advance()
        except EofError as e:
            raise LabelSyntaxError("Unterminated comment", start_line) from e

        self.cursor.jump(len(COMMENT_CLOSE))
        return "".join(comment_text)
