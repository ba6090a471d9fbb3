# src/pvlscan/cli/formatter.py
from typing import Any, Dict, List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from pvlscan.core.models import ValueType
from pvlscan.scanning.context import ScanContext

# Initialize the Rich console for high-quality terminal output
console = Console()

TYPE_STYLES = {
    ValueType.STRING: "green",
    ValueType.FLOAT: "cyan",
    ValueType.INTEGER: "cyan",
    ValueType.BOOL: "magenta",
    ValueType.FLAG: "yellow",
    ValueType.ARRAY: "blue",
    ValueType.BITMASK: "bright_blue",
    ValueType.UNDETERMINED: "dim",
}


class PvlFormatter:
    """
    PvlFormatter: renders scan results for the terminal.
    """

    def __init__(self, out: Console = None):
        self.console = out or console

    def print_entries_table(self, context: ScanContext, title: str, show_comments: bool = False):
        """
        One row per entry, in label order. Comments are interleaved by line
        number when requested.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Symbol")
        table.add_column("Name", style="bold")
        table.add_column("Type")
        table.add_column("Raw Value", overflow="fold")

        rows = [(kvp.line_no, 1, kvp) for kvp in context.entries]
        if show_comments:
            rows.extend((c.line_no, 0, c) for c in context.comments)

        for line_no, _, item in sorted(rows, key=lambda r: (r[0], r[1])):
            if hasattr(item, "key"):
                style = TYPE_STYLES[item.value.value_type]
                table.add_row(
                    str(line_no),
                    item.key.kind.name,
                    item.key.name or "",
                    f"[{style}]{item.value.value_type.name}[/{style}]",
                    escape(item.value.value_raw),
                )
            else:
                table.add_row(str(line_no), "COMMENT", "", "", f"[dim]{escape(item.text.strip())}[/dim]")

        self.console.print(table)

    def show_issues(self, context: ScanContext):
        for error in context.errors:
            self.console.print(f"[bold yellow]Skipped:[/bold yellow] {escape(str(error))}")
        if context.tree_error:
            self.console.print(f"[bold red]Structure:[/bold red] {escape(str(context.tree_error))}")

    def display_yaml(self, yaml_text: str, file_name: str):
        if not yaml_text:
            self.console.print(f"[dim]No tree could be assembled for {file_name}.[/dim]")
            return
        syntax = Syntax(yaml_text, "yaml", theme="monokai", line_numbers=False)
        self.console.print(Panel(syntax, title=f"Label Tree: {file_name}", border_style="green"))

    def print_summary(self, reports: List[Dict[str, Any]], summary: Dict[str, Any]):
        table = Table(title="PvlScan Execution Report", show_lines=True, header_style="bold magenta")
        table.add_column("File Path", style="cyan")
        table.add_column("Entries", justify="right")
        table.add_column("Status", style="bold")
        table.add_column("Result", justify="center")

        for r in reports:
            success = r.get("success", False)
            status_color = "green" if success else "yellow" if r.get("entries") else "red"
            table.add_row(
                str(r.get("file_path")), str(r.get("entries", 0)),
                f"[{status_color}]{r.get('status', 'FAILED')}[/{status_color}]",
                "✅" if success else "⚠️" if r.get("entries") else "❌",
            )

        self.console.print(table)
        self.console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Total Files:    {summary['total_files']}\n"
            f"Clean:          [green]{summary['successful']}[/green]\n"
            f"Entries:        {summary['entries']}\n"
            f"Entry Errors:   [yellow]{summary['entry_errors']}[/yellow]\n"
            f"System Errors:  [red]{summary['system_errors']}[/red]",
            border_style="dim"
        ))
