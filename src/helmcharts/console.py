"""Rich console output utilities for helmcharts.

Provides consistent output for validation reports and schema generation
using the Rich library.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, LiteralString

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.theme import Theme

if TYPE_CHECKING:
    from helmcharts.models import ValidationReport

HELMCHARTS_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "heading": "bold magenta",
        "muted": "dim",
        "chart": "bold blue",
        "path": "dim cyan",
        "location": "bold",
    }
)


console = Console(theme=HELMCHARTS_THEME)
err_console = Console(theme=HELMCHARTS_THEME, stderr=True)


def print_success(message: str, prefix: str = "✓") -> None:
    """Print a success message."""
    console.print(f"[success]{prefix}[/success] {message}")


def print_error(message: str, prefix: str = "✗") -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]{prefix}[/error] {message}")


def print_warning(message: str, prefix: str = "⚠") -> None:
    """Print a warning message."""
    console.print(f"[warning]{prefix}[/warning] {message}")


def print_info(message: str, prefix: str = "•") -> None:
    """Print an info message."""
    console.print(f"[info]{prefix}[/info] {message}")


def print_header(title: str) -> None:
    """Print a section header."""
    console.print(f"\n[heading]{title}[/heading]")
    console.print(f"[muted]{'─' * len(title)}[/muted]")


def print_key_value(key: str, value: str, indent: int = 0) -> None:
    """Print a key-value pair."""
    spaces: LiteralString = "  " * indent
    console.print(f"{spaces}[muted]{key}:[/muted] {value}")


def print_bullet(text: str, indent: int = 1, err: bool = False) -> None:
    """Print a bullet point."""
    spaces: LiteralString = "  " * indent
    (err_console if err else console).print(f"{spaces}[muted]•[/muted] {text}")


def format_chart(name: str) -> str:
    """Format a chart name for display."""
    return f"[chart]{name}[/chart]"


def format_path(path: str) -> str:
    """Format a path for display."""
    return f"[path]{path}[/path]"


def format_check(exists: bool) -> str:
    """Format a check/cross mark."""
    return "[success]✓[/success]" if exists else "[error]✗[/error]"


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a styled table."""
    return Table(
        title=title,
        show_header=show_header,
        header_style="bold",
        border_style="muted",
        title_style="heading",
    )


def print_chart_list(charts: list[tuple[str, bool]]) -> None:
    """Print registered charts and whether their directory exists."""
    table: Table = create_table()
    table.add_column("Status", justify="center", width=6)
    table.add_column("Chart", style="chart")

    for chart_name, exists in charts:
        table.add_row(format_check(exists), chart_name)

    console.print(table)


def print_json(content: str, title: str | None = None) -> None:
    """Print JSON content with syntax highlighting."""
    syntax = Syntax(content, "json", theme="monokai", line_numbers=False)
    if title:
        console.print(Panel(syntax, title=title, border_style="muted"))
    else:
        console.print(syntax)


def print_validation_report(report: ValidationReport) -> None:
    """Print the outcome of validating one values document."""
    source: str = format_path(escape(str(report.source))) if report.source else "values"
    chart: str = format_chart(report.chart)

    if report.skipped:
        reason: str = f": {escape(report.reason)}" if report.reason else ""
        print_warning(f"Skipped {chart} ({source}){reason}")
        return

    if report.valid:
        print_success(f"{source} is valid for chart {chart}")
        return

    print_error(f"Validation errors in {source} for chart {chart}:")
    for issue in report.issues:
        if issue.location:
            print_bullet(f"[location]{escape(issue.location)}[/location]: {escape(issue.message)}", err=True)
        else:
            print_bullet(escape(issue.message), err=True)


def print_summary(success: int, errors: int, skipped: int = 0) -> None:
    """Print a summary of operations."""
    console.print()
    skipped_text: str = f", [warning]{skipped} skipped[/warning]" if skipped else ""
    if errors == 0:
        console.print(f"[success]✓ All done![/success] {success} successful{skipped_text}")
    else:
        console.print(
            f"[warning]Complete[/warning]: "
            f"[success]{success} successful[/success], "
            f"[error]{errors} errors[/error]{skipped_text}"
        )
