#!/usr/bin/env python3
"""
PVLSCAN CLI
-----------
Command-line front end for the label scanner:

    pvlscan scan   PATH        table of entries per label
    pvlscan export PATH        nested YAML rendering of a label
    pvlscan get    PATH KEY    typed value of every entry named KEY

Author: PvlScan Team
Date: 2026-10-18
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    BarColumn,
    TaskProgressColumn
)

from pvlscan.cli.formatter import PvlFormatter
from pvlscan.core.engine import ScanEngine
from pvlscan.scanning.context import ScanOptions
from pvlscan.scanning.values import CONTINUATION_WIDTH
from pvlscan.structure.exporter import PvlExporter

# Global console for consistent styling across the application
console = Console()

VERSION = "0.1.0"


class PvlScanCLI:
    """
    CLI wrapper that translates user commands into engine actions.
    """

    def __init__(self, out: Optional[Console] = None):
        self.console = out or console
        self.formatter = PvlFormatter(self.console)
        self.exporter = PvlExporter()
        self.parser = argparse.ArgumentParser(
            prog="pvlscan",
            description="PvlScan - PVL/PDS label scanner",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._setup_args()

    def _setup_args(self):
        """Configures the command-line flags and subcommands."""
        self.parser.add_argument("--version", action="version", version=f"pvlscan v{VERSION}")
        self.parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
        subparsers = self.parser.add_subparsers(dest="command", metavar="Command")

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument("path", help="Label file or directory")
        common.add_argument("--ext", default=".LBL", help="Label extension for directories (default: .LBL)")
        common.add_argument("--strict", action="store_true", help="Abort on the first malformed entry")
        common.add_argument("--continuation-width", type=int, default=CONTINUATION_WIDTH,
                            help=f"Leading blanks marking a continuation line (default: {CONTINUATION_WIDTH})")

        scan_parser = subparsers.add_parser("scan", parents=[common], help="List the entries of labels")
        scan_parser.add_argument("--comments", action="store_true", help="Show comments between entries")
        scan_parser.add_argument("--keep-blank", action="store_true", help="Show blank lines as entries")

        subparsers.add_parser("export", parents=[common], help="Render labels as nested YAML")

        get_parser = subparsers.add_parser("get", parents=[common], help="Print the value of a key")
        get_parser.add_argument("key", help="Key or pointer name, e.g. EXPOSURE_DURATION or ^IMAGE")

    def _build_options(self, args: argparse.Namespace) -> ScanOptions:
        return ScanOptions(
            continuation_width=args.continuation_width,
            keep_blank_lines=getattr(args, "keep_blank", False),
            strict=args.strict,
        )

    def _collect_reports(self, args: argparse.Namespace, engine: ScanEngine) -> List[Dict[str, Any]]:
        input_path = Path(args.path)
        if input_path.is_dir():
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(bar_width=40),
                TaskProgressColumn(),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            ) as progress:
                task_id = progress.add_task("Scanning labels...", total=None)

                def advance(processed: int, total: int):
                    progress.update(task_id, completed=processed, total=total)

                return engine.scan_directory(input_path, extension=args.ext, progress_callback=advance)
        return [engine.scan_file(input_path)]

    def _run_scan(self, args: argparse.Namespace, engine: ScanEngine, reports: List[Dict[str, Any]]):
        for r in reports:
            context = r.get("context")
            if context is None:
                self.console.print(f"[bold red]Error in {r['file_path']}:[/bold red] {r['errors'][0]}")
                continue
            self.formatter.print_entries_table(context, r["file_path"], show_comments=args.comments)
            self.formatter.show_issues(context)
        self.formatter.print_summary(reports, engine.generate_summary(reports))

    def _run_export(self, reports: List[Dict[str, Any]]):
        for r in reports:
            context = r.get("context")
            if context is None:
                self.console.print(f"[bold red]Error in {r['file_path']}:[/bold red] {r['errors'][0]}")
                continue
            self.formatter.display_yaml(self.exporter.export_context(context), r["file_path"])
            self.formatter.show_issues(context)

    def _run_get(self, args: argparse.Namespace, reports: List[Dict[str, Any]]) -> int:
        found = 0
        for r in reports:
            context = r.get("context")
            if context is None:
                continue
            for kvp in context.find(args.key):
                found += 1
                self.console.print(
                    f"{r['file_path']}:{kvp.line_no}: {kvp.key.name} = {kvp.value.to_python()!r} "
                    f"({kvp.value.value_type.name})",
                    markup=False, highlight=False, soft_wrap=True,
                )
        if not found:
            self.console.print(f"[bold yellow]{args.key} not found.[/bold yellow]")
            return 1
        return 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Primary routing entry point. Returns the process exit code."""
        args = self.parser.parse_args(argv)
        if not args.command:
            self.console.print(Panel.fit(f"[bold cyan]PvlScan v{VERSION}[/bold cyan]", border_style="cyan"))
            self.parser.print_help()
            return 0

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )

        if not Path(args.path).exists():
            self.console.print(f"[bold red]Error:[/bold red] Path '{args.path}' not found.")
            return 2

        engine = ScanEngine(self._build_options(args))
        reports = self._collect_reports(args, engine)

        if args.command == "scan":
            self._run_scan(args, engine, reports)
        elif args.command == "export":
            self._run_export(reports)
        elif args.command == "get":
            return self._run_get(args, reports)
        return 0 if all(r.get("success") for r in reports) else 1


def main():
    """Application entry point with interrupt handling."""
    try:
        sys.exit(PvlScanCLI().run())
    except KeyboardInterrupt:
        console.print("\n[bold red]Terminated by user.[/bold red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
