#!/usr/bin/env python3
"""
PVLSCAN SCAN PIPELINE - The Coordinator
---------------------------------------
Runs one label through the scanner and the tree builder in a fixed order
and returns the ScanContext that records everything found along the way.

Author: PvlScan Team
Date: 2026-10-18
"""

import logging
from typing import Optional, Union

from pvlscan.core.errors import LabelError
from pvlscan.core.models import Comment, SymbolKind
from pvlscan.scanning.context import ScanContext, ScanOptions
from pvlscan.scanning.reader import PvlReader
from pvlscan.structure.builder import PvlTreeBuilder

logger = logging.getLogger("pvlscan.pipeline")


class ScanPipeline:

    def __init__(self, options: Optional[ScanOptions] = None):
        self.options = options or ScanOptions()
        self.builder = PvlTreeBuilder()

    def run(self, label_text: Union[str, bytes]) -> ScanContext:
        # --- PHASE 1: FLAT SCAN ---
        reader = PvlReader(label_text, self.options)
        items = list(reader.scan())

        context = ScanContext(raw_text=reader.cursor.content, options=self.options)
        for item in items:
            if isinstance(item, Comment):
                context.comments.append(item)
            elif self.options.keep_blank_lines or item.key.kind != SymbolKind.BLANK_LINE:
                context.entries.append(item)
        context.errors.extend(reader.errors)

        # --- PHASE 2: TREE ASSEMBLY ---
        try:
            context.tree = self.builder.build(items)
        except LabelError as e:
            if self.options.strict:
                raise
            logger.warning("Tree assembly failed: %s", e)
            context.tree_error = e

        logger.info(
            "Scanned %d entries, %d comments, %d errors",
            len(context.entries), len(context.comments), len(context.errors),
        )
        return context
