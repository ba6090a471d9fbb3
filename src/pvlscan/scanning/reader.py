#!/usr/bin/env python3
"""
PVLSCAN READER - The Driving Loop
---------------------------------
Walks a label buffer and turns it into a flat stream of entries:

    1. On '/*' the comment skipper consumes the comment.
    2. At a line start the symbol and value readers produce one entry.
    3. Anything else is stepped over one character at a time.

A failed entry is logged and recorded, and scanning resumes on the next
line. GROUP/OBJECT nesting is not tracked here (see structure.builder).

Author: PvlScan Team
Date: 2026-10-18
"""

import logging
from typing import Iterator, List, Optional, Union

from pvlscan.core.errors import EofError, LabelError
from pvlscan.core.models import Comment, KeyValuePair, Value
from pvlscan.scanning.comments import PvlCommentSkipper
from pvlscan.scanning.context import ScanOptions
from pvlscan.scanning.cursor import LINE_TERMINATORS, PvlCursor
from pvlscan.scanning.symbols import PvlSymbolReader
from pvlscan.scanning.values import PvlValueReader

logger = logging.getLogger("pvlscan.reader")

ScanItem = Union[KeyValuePair, Comment]


class PvlReader:
    """
    One scan session: owns the cursor and the readers that share it.
    """

    def __init__(self, content: Union[str, bytes], options: Optional[ScanOptions] = None):
        self.options = options or ScanOptions()
        self.cursor = PvlCursor(content)
        self.comment_skipper = PvlCommentSkipper(self.cursor)
        self.symbol_reader = PvlSymbolReader(self.cursor, self.options.continuation_width)
        self.value_reader = PvlValueReader(self.cursor, self.options.continuation_width)
        self.errors: List[LabelError] = []

    def read_key_value_pair(self) -> KeyValuePair:
        line_no = self.cursor.line_no()
        key = self.symbol_reader.read_symbol()
        # The separator itself belongs to neither side.
        if not self.cursor.is_eof() and self.symbol_reader.is_at_equals():
            self.cursor.jump(1)
        value_text = self.value_reader.read_value()
        return KeyValuePair(key=key, value=Value(value_text), line_no=line_no)

    def skip_to_next_line(self):
        while not self.cursor.is_eof() and self.cursor.current_char() not in LINE_TERMINATORS:
            self.cursor.jump(1)
        self.value_reader.consume_line_end()

    def _indented_comment_offset(self) -> int:
        """
        Number of blanks before a '/*' that opens the current line, or -1
        if the line does not open with a comment.
        """
        offset = 0
        try:
            while self.cursor.char_at_offset(offset) in (" ", "\t"):
                offset += 1
            if self.cursor.char_at_offset(offset) == "/" and self.cursor.char_at_offset(offset + 1) == "*":
                return offset
        except EofError:
            pass
        return -1

    def _record(self, error: LabelError):
        if self.options.strict:
            raise error
        logger.warning("Skipping entry: %s", error)
        self.errors.append(error)

    def scan(self) -> Iterator[ScanItem]:
        """Lazily yields KeyValuePair and Comment items until end of input."""
        cursor = self.cursor
        while not cursor.is_eof():
            # --- Comments, including ones indented inside a group ---
            if cursor.is_at_line_start() and not self.value_reader.is_at_value_line_continuation():
                offset = self._indented_comment_offset()
                if offset > 0:
                    cursor.jump(offset)

            if self.comment_skipper.is_at_comment_start():
                line_no = cursor.line_no()
                try:
                    text = self.comment_skipper.skip_comment()
                except LabelError as e:
                    self._record(e)
                    continue
                logger.debug("Comment at line %d: %r", line_no, text)
                yield Comment(text=text, line_no=line_no)

            # --- Entries ---
            elif cursor.is_at_line_start() and not cursor.is_at_crlf_middle():
                try:
                    kvp = self.read_key_value_pair()
                except LabelError as e:
                    self._record(e)
                    self.skip_to_next_line()
                    continue
                logger.debug("Entry at line %d: %s = %r", kvp.line_no, kvp.key, kvp.value.value_raw)
                yield kvp

            else:
                cursor.jump(1)

    def entries(self) -> Iterator[KeyValuePair]:
        """Like scan(), without the comments."""
        for item in self.scan():
            if isinstance(item, KeyValuePair):
                yield item
