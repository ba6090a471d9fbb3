#!/usr/bin/env python3
"""
PVLSCAN VALUE CLASSIFIER
------------------------
Maps the raw text of a value onto a ValueType. The rules are tried in a
fixed order and the first match wins, so a quoted "TRUE" is a Bool and not
a String, and a based bit mask such as 2#0101# is never read as an Integer.

The patterns are compiled once at import time and never mutated afterwards.

Author: PvlScan Team
Date: 2026-10-18
"""

import re
import enum
from typing import List, Pattern, Tuple


class ValueType(enum.Enum):
    """Semantic type of a raw value, decided once by determine_type()."""
    UNDETERMINED = "undetermined"
    ARRAY = "array"
    STRING = "string"
    FLOAT = "float"
    INTEGER = "integer"
    BOOL = "bool"
    FLAG = "flag"          # Bare identifier, not wrapped in quotes
    BITMASK = "bitmask"


BOOL_DETERMINATE = re.compile(r'^"(TRUE|FALSE)"$')
STRING_DETERMINATE = re.compile(r'^".*"$')
ARRAY_DETERMINATE = re.compile(r'^\(.*\)$')
FLOAT_DETERMINATE = re.compile(r'^[-+]?[0-9]+\.[0-9]')
# Digits must not run on into another digit or a '#', otherwise "25#01#" would
# match on its leading "2".
INTEGER_DETERMINATE = re.compile(r'^[-+]?[0-9]+(?![0-9#])')
FLAG_DETERMINATE = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')
BITMASK_DETERMINATE = re.compile(r'^[1-8]*#[01]+#$')

# Order is load-bearing.
RULES: List[Tuple[Pattern, ValueType]] = [
    (BOOL_DETERMINATE, ValueType.BOOL),
    (STRING_DETERMINATE, ValueType.STRING),
    (ARRAY_DETERMINATE, ValueType.ARRAY),
    (FLOAT_DETERMINATE, ValueType.FLOAT),
    (INTEGER_DETERMINATE, ValueType.INTEGER),
    (FLAG_DETERMINATE, ValueType.FLAG),
    (BITMASK_DETERMINATE, ValueType.BITMASK),
]


def determine_type(value_raw: str) -> ValueType:
    """Classifies raw value text. Pure; safe to call from any thread."""
    for pattern, value_type in RULES:
        if pattern.match(value_raw):
            return value_type
    return ValueType.UNDETERMINED
