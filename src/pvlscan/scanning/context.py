#!/usr/bin/env python3
"""
PVLSCAN SCAN CONTEXT
--------------------
Options that steer a scan and the record a finished scan leaves behind.

The context is created by the ScanPipeline and enriched by the reader and
the tree builder in turn.

Author: PvlScan Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from pvlscan.core.errors import LabelError
from pvlscan.core.models import Comment, KeyValuePair
from pvlscan.scanning.values import CONTINUATION_WIDTH


@dataclass
class ScanOptions:
    continuation_width: int = CONTINUATION_WIDTH  # Leading blanks marking a continuation line
    keep_blank_lines: bool = False                # Keep BLANK_LINE entries in the context
    strict: bool = False                          # Re-raise the first failed entry instead of skipping it


@dataclass
class ScanContext:
    """
    Maintains the outcome of a single label scan.
    """
    raw_text: str                                           # The label text as handed to the reader
    options: ScanOptions = field(default_factory=ScanOptions)
    entries: List[KeyValuePair] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    errors: List[LabelError] = field(default_factory=list)  # Recoverable failures, in input order
    tree: Optional[Any] = None                              # CommentedMap built from the entries
    tree_error: Optional[LabelError] = None                 # Why the tree could not be assembled

    @property
    def success(self) -> bool:
        return not self.errors and self.tree_error is None

    def find(self, name: str) -> List[KeyValuePair]:
        """All entries whose key or pointer name equals `name`."""
        return [kvp for kvp in self.entries if kvp.key.value() == name]
