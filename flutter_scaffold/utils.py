"""Console helpers for the command-line front end.

The scaffolder core returns structured results and prints nothing; this module
turns those results into Rich output.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

if TYPE_CHECKING:
    from pathlib import Path

    from flutter_scaffold.catalog.registry import FragmentCatalog
    from flutter_scaffold.generator import GenerationReport

console = Console()


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def sanitize_name(name: str) -> str:
    """Convert an arbitrary project name to a valid Dart package name.

    * Lowercases the input.
    * Replaces spaces, hyphens and other non-alphanumeric characters with
      underscores.
    * Collapses consecutive underscores and strips leading/trailing ones.
    * Prefixes an underscore when the result would start with a digit.

    Examples::

        sanitize_name("My Shop App") -> "my_shop_app"
        sanitize_name("  2FA-demo ") -> "_2fa_demo"
    """
    result = re.sub(r"[^a-z0-9_]", "_", name.strip().lower())
    result = re.sub(r"_+", "_", result).strip("_")
    if result[:1].isdigit():
        result = "_" + result
    return result


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.42) -> "0.4s"
        format_duration(65.2) -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule announcing a command."""
    console.print()
    console.print(Rule(f"[bold bright_green] {title} [/bold bright_green]", style="bright_green"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


# ---------------------------------------------------------------------------
# Report rendering
# ---------------------------------------------------------------------------

_STATUS_STYLES = {
    "written": "green",
    "unchanged": "dim",
    "skipped": "yellow",
    "applied": "green",
    "already_present": "dim",
    "anchor_not_found": "bold yellow",
    "failed": "bold red",
}


def _styled(status: str) -> str:
    style = _STATUS_STYLES.get(status, "white")
    return f"[{style}]{status}[/{style}]"


def _relative(path: "Path", root: "Path") -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def print_report(report: "GenerationReport") -> None:
    """Render a generation report: files, patches, follow-ups."""
    if report.compositions or report.writes:
        files = Table(title="Files", show_header=True, header_style="bold cyan")
        files.add_column("Path", no_wrap=True)
        files.add_column("Operation")
        files.add_column("Status")
        for write in report.writes:
            files.add_row(_relative(write.path, report.project_root), write.op.kind.value, _styled(write.status.value))
        for comp in report.failed_compositions:
            files.add_row(comp.path, "create", _styled("failed"))
        console.print(files)
        console.print()

    if report.patches:
        patches = Table(title="Patches", show_header=True, header_style="bold cyan")
        patches.add_column("Rule", no_wrap=True)
        patches.add_column("File")
        patches.add_column("Outcome")
        for result in report.patches:
            patches.add_row(result.rule, result.target.path, _styled(result.reason.value))
        console.print(patches)
        console.print()

    for comp in report.failed_compositions:
        print_error(f"{comp.path}: {comp.error}")
    for result in report.manual_followups:
        print_warning(f"Manual follow-up ({result.rule}): {result.hint}")


def print_catalog(catalog: "FragmentCatalog", axes: dict[str, list[str]]) -> None:
    """List the axes with their values, and catalog counts per file."""
    table = Table(title="Axes", show_header=True, header_style="bold cyan")
    table.add_column("Axis", style="dim", no_wrap=True)
    table.add_column("Values")
    for axis, values in axes.items():
        table.add_row(axis, ", ".join(values))
    console.print(table)
    console.print()

    stats = catalog.stats()
    print_summary_table(
        {target.path: str(count) for target, count in stats.per_target.items()},
        title=f"Catalog ({len(catalog)} fragments)",
    )
