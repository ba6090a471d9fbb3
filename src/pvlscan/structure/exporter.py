#!/usr/bin/env python3
"""
PVLSCAN EXPORTER - YAML Rendering
---------------------------------
Author: PvlScan Team
Date: 2026-10-18
"""

import io
from typing import Any

from ruamel.yaml import YAML

from pvlscan.scanning.context import ScanContext


class PvlExporter:
    """
    Renders an assembled label tree as YAML, comments included.
    """

    def __init__(self):
        self.yaml = YAML(typ='rt')
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        # Long label strings stay on one line.
        self.yaml.width = 4096

    def export(self, tree: Any) -> str:
        stream = io.StringIO()
        self.yaml.dump(tree, stream)
        return stream.getvalue()

    def export_context(self, context: ScanContext) -> str:
        if context.tree is None:
            return ""
        return self.export(context.tree)
