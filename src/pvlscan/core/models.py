#!/usr/bin/env python3
"""
PVLSCAN CORE MODELS
-------------------
Defines the fundamental data structures produced by the label scanner.
A scan step yields one KeyValuePair: the Symbol found on the left of the
'=' and the Value read from the right, continuation lines included.

Author: PvlScan Team
Date: 2026-10-18
"""

import enum
import re
import struct
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pvlscan.core.classifier import ValueType, determine_type
from pvlscan.core.errors import InvalidTypeError, ValueTypeParseError

__all__ = ["SymbolKind", "Symbol", "ValueType", "Value", "KeyValuePair", "Comment"]

_INT_LITERAL = re.compile(r'[-+]?[0-9]+')
_FLOAT_LITERAL = re.compile(r'[-+]?[0-9]+\.[0-9]*(?:[eE][-+]?[0-9]+)?')


class SymbolKind(enum.Enum):
    POINTER = "pointer"
    KEY = "key"
    GROUP = "group"
    OBJECT = "object"
    BLANK_LINE = "blank_line"


@dataclass(frozen=True)
class Symbol:
    """
    The left-hand side of a label line.

    Only POINTER and KEY carry a name; a pointer keeps its leading caret.
    """
    kind: SymbolKind
    name: Optional[str] = None  # '^IMAGE' for pointers, 'EXPOSURE_DURATION' for keys

    def value(self) -> Optional[str]:
        if self.kind in (SymbolKind.POINTER, SymbolKind.KEY):
            return self.name
        return None

    def __str__(self) -> str:
        if self.name is not None:
            return f"{self.kind.name}({self.name})"
        return self.kind.name


def _int_parser(bits: int, signed: bool):
    """Builds a width-checked integer accessor (parse_u8, parse_i32, ...)."""
    def parse(self) -> int:
        return self._parse_int(bits, signed)
    parse.__name__ = f"parse_{'i' if signed else 'u'}{bits}"
    parse.__doc__ = f"Converts an Integer value to a {'signed' if signed else 'unsigned'} {bits}-bit int."
    return parse


@dataclass(frozen=True)
class Value:
    """
    Raw value text plus the type tag derived from it at construction.

    The raw text is kept verbatim (quotes and parentheses included); the
    parse_* accessors check the tag first and only then convert.
    """
    value_raw: str
    value_type: ValueType = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "value_type", determine_type(self.value_raw))

    def _require(self, expected: ValueType):
        if self.value_type != expected:
            raise InvalidTypeError(
                f"Value {self.value_raw!r} is {self.value_type.name}, not {expected.name}"
            )

    def _parse_int(self, bits: Optional[int], signed: bool) -> int:
        self._require(ValueType.INTEGER)
        if not _INT_LITERAL.fullmatch(self.value_raw):
            raise ValueTypeParseError(f"Malformed integer: {self.value_raw!r}")
        number = int(self.value_raw)
        if bits is not None:
            low, high = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)
            if not low <= number <= high:
                raise ValueTypeParseError(f"{number} does not fit in {bits} bits")
        return number

    parse_u8 = _int_parser(8, False)
    parse_u16 = _int_parser(16, False)
    parse_u32 = _int_parser(32, False)
    parse_u64 = _int_parser(64, False)
    parse_i8 = _int_parser(8, True)
    parse_i16 = _int_parser(16, True)
    parse_i32 = _int_parser(32, True)
    parse_i64 = _int_parser(64, True)

    def parse_f64(self) -> float:
        self._require(ValueType.FLOAT)
        if not _FLOAT_LITERAL.fullmatch(self.value_raw):
            raise ValueTypeParseError(f"Malformed float: {self.value_raw!r}")
        return float(self.value_raw)

    def parse_f32(self) -> float:
        """Same as parse_f64, rounded to single precision."""
        number = self.parse_f64()
        try:
            return struct.unpack("<f", struct.pack("<f", number))[0]
        except OverflowError as e:
            raise ValueTypeParseError(f"{number} does not fit in a 32-bit float") from e

    def parse_bool(self) -> bool:
        self._require(ValueType.BOOL)
        return self.value_raw.strip('"') == "TRUE"

    def parse_string(self) -> str:
        """Returns the text between the surrounding quotes."""
        self._require(ValueType.STRING)
        return self.value_raw[1:-1]

    def parse_flag(self) -> str:
        self._require(ValueType.FLAG)
        return self.value_raw

    def parse_array(self) -> List["Value"]:
        """
        Splits the parenthesised text on every comma.

        Quoting and nesting are not tracked: a comma inside a quoted element
        or a nested array still splits it.
        """
        self._require(ValueType.ARRAY)
        inner = self.value_raw[1:-1]
        return [Value(element.strip()) for element in inner.split(",")]

    def to_python(self) -> Any:
        """
        Best-effort conversion to a native object. Falls back to the raw
        text for types without a conversion or when conversion fails.
        """
        try:
            if self.value_type == ValueType.BOOL:
                return self.parse_bool()
            if self.value_type == ValueType.STRING:
                return self.parse_string()
            if self.value_type == ValueType.INTEGER:
                return self._parse_int(None, True)
            if self.value_type == ValueType.FLOAT:
                return self.parse_f64()
            if self.value_type == ValueType.ARRAY:
                return [v.to_python() for v in self.parse_array()]
        except ValueTypeParseError:
            return self.value_raw
        return self.value_raw


@dataclass(frozen=True)
class KeyValuePair:
    """One scan step: a symbol and the value that followed it."""
    key: Symbol
    value: Value
    line_no: int = 0        # 1-based line the entry started on


@dataclass(frozen=True)
class Comment:
    text: str               # Interior text, delimiters excluded
    line_no: int = 0
