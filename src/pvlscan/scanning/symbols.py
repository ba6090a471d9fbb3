#!/usr/bin/env python3
"""
PVLSCAN SYMBOL READER - Left-Hand Classifier (Phase 1.2)
--------------------------------------------------------
Reads the token to the left of '=' and decides what kind of entry the line
starts. Classification is exact-match and ordered:

    ''          -> BLANK_LINE
    '^...'      -> POINTER (caret kept)
    'GROUP'     -> GROUP
    'OBJECT'    -> OBJECT
    anything    -> KEY

A key literally named GROUP is indistinguishable from the keyword; the
label format has the same ambiguity.

Author: PvlScan Team
Date: 2026-10-18
"""

from pvlscan.core.errors import EofError, LabelSyntaxError, ProgrammingError
from pvlscan.core.models import Symbol, SymbolKind
from pvlscan.scanning.cursor import LINE_TERMINATORS, PvlCursor
from pvlscan.scanning.values import CONTINUATION_WIDTH, is_at_continuation

GROUP_KEYWORD = "GROUP"
OBJECT_KEYWORD = "OBJECT"
POINTER_PREFIX = "^"


class PvlSymbolReader:

    def __init__(self, cursor: PvlCursor, continuation_width: int = CONTINUATION_WIDTH):
        self.cursor = cursor
        self.continuation_width = continuation_width

    def is_at_pointer(self) -> bool:
        return self.cursor.current_char() == POINTER_PREFIX

    def is_at_equals(self) -> bool:
        return self.cursor.current_char() == "="

    def _is_at_keyword(self, keyword: str) -> bool:
        if self.cursor.pos + len(keyword) > self.cursor.length:
            raise EofError(f"Too little input left to hold {keyword}", self.cursor.line_no())
        return self.cursor.remaining(len(keyword)) == keyword

    def is_at_group(self) -> bool:
        return self._is_at_keyword(GROUP_KEYWORD)

    def is_at_object(self) -> bool:
        return self._is_at_keyword(OBJECT_KEYWORD)

    def check_preconditions(self):
        """Raises unless the cursor is at the start of a fresh entry line."""
        if is_at_continuation(self.cursor, self.continuation_width):
            raise LabelSyntaxError(
                "Value line continuation without a preceding key value pair",
                self.cursor.line_no(),
            )
        if not self.cursor.is_at_line_start():
            raise ProgrammingError(
                "Attempt to read a symbol when not at beginning of a line",
                self.cursor.line_no(),
            )

    def read_symbol(self) -> Symbol:
        """Consumes the left-hand token, stopping on '=' or a line terminator."""
        self.check_preconditions()

        symbol_text = []
        while not self.cursor.is_eof():
            c = self.cursor.current_char()
            if c in LINE_TERMINATORS or c == "=":
                break
            symbol_text.append(c)
            self.cursor.jump(1)

        text = "".join(symbol_text).strip()
        if not text:
            return Symbol(SymbolKind.BLANK_LINE)
        if text.startswith(POINTER_PREFIX):
            return Symbol(SymbolKind.POINTER, text)
        if text == GROUP_KEYWORD:
            return Symbol(SymbolKind.GROUP)
        if text == OBJECT_KEYWORD:
            return Symbol(SymbolKind.OBJECT)
        return Symbol(SymbolKind.KEY, text)
