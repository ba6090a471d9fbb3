#!/usr/bin/env python3
"""
PVLSCAN ENGINE - File Orchestrator
----------------------------------
Loads label files from disk, runs them through the ScanPipeline and
reports per-file outcomes plus a batch summary. The scanning core itself
never touches the filesystem; this is the only module that does.

Author: PvlScan Team
Date: 2026-10-18
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from pvlscan.core.errors import LabelError
from pvlscan.scanning.context import ScanOptions
from pvlscan.scanning.pipeline import ScanPipeline

logger = logging.getLogger("pvlscan.engine")


class ScanEngine:
    """
    Principal orchestrator for label scanning across files and directories.
    """

    def __init__(self, options: Optional[ScanOptions] = None):
        self.options = options or ScanOptions()
        self.pipeline = ScanPipeline(self.options)

    def scan_file(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Performs a full scan of one label file.
        """
        path = Path(file_path)
        try:
            # Labels are 8-bit text; the cursor decodes bytes as Latin-1.
            raw = path.read_bytes()
        except OSError as e:
            logger.error(f"Unable to read {path}: {e}")
            return self._file_error(path, "READ_ERROR", str(e))

        try:
            context = self.pipeline.run(raw)
        except LabelError as e:
            # Only reachable in strict mode.
            logger.error(f"Scan of {path} aborted: {e}")
            return self._file_error(path, "SCAN_ERROR", str(e))

        return {
            "file_path": str(path),
            "success": context.success,
            "status": self._derive_status(len(context.entries), len(context.errors), context.tree_error),
            "entries": len(context.entries),
            "comments": len(context.comments),
            "errors": [str(e) for e in context.errors],
            "tree_error": str(context.tree_error) if context.tree_error else None,
            "context": context,
            "timestamp": time.time(),
        }

    def scan_directory(self, root: Union[str, Path], extension: str = ".LBL", max_depth: int = 10,
                       progress_callback: Optional[Callable[[int, int], None]] = None) -> List[Dict[str, Any]]:
        """
        Recursively scans every label under `root`. Symlinks are skipped and
        the extension match is case-insensitive.
        """
        root = Path(root)
        all_files = sorted(
            f for f in root.rglob("*")
            if f.is_file() and not f.is_symlink() and f.suffix.lower() == extension.lower()
        )

        reports = []
        total_files = len(all_files)
        for processed, file_path in enumerate(all_files, 1):
            if len(file_path.relative_to(root).parts) > max_depth:
                logger.debug(f"Skipping {file_path}: deeper than {max_depth}")
            else:
                reports.append(self.scan_file(file_path))
            if progress_callback:
                progress_callback(processed, total_files)
        return reports

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        total = len(reports)
        return {
            "total_files": total,
            "successful": sum(1 for r in reports if r.get("success", False)),
            "entries": sum(r.get("entries", 0) for r in reports),
            "entry_errors": sum(len(r.get("errors", [])) for r in reports),
            "system_errors": sum(1 for r in reports if r.get("status") in ("READ_ERROR", "SCAN_ERROR")),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        }

    def _derive_status(self, entries: int, errors: int, tree_error: Optional[LabelError]) -> str:
        if not entries:
            return "EMPTY" if not errors else "FAILED"
        if errors:
            return "RECOVERED"
        if tree_error:
            return "FLAT_ONLY"
        return "CLEAN"

    def _file_error(self, path: Path, status: str, error: str) -> Dict[str, Any]:
        return {
            "file_path": str(path), "status": status, "errors": [error],
            "success": False, "entries": 0, "comments": 0, "tree_error": None,
            "context": None,
        }
