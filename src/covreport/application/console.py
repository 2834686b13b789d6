"""Console rendering of aggregate statistics with rich."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from covreport.domain.model.run_statistics import RunStatistics


def render_statistics(stats: RunStatistics, set_name: str, *, width: int = 100) -> str:
    """Format statistics as a rich table.

    Output is str, not print(). Caller decides destination.

    Args:
        stats: Statistics to render
        set_name: Symbol set shown in the title
        width: Console width in columns

    Returns:
        Rendered table without color codes.
    """
    output = StringIO()
    console = Console(file=output, force_terminal=False, color_system=None, width=width)

    table = Table(title=f"Coverage summary: {set_name}", show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")

    table.add_row("Bytes analyzed", str(stats.total_bytes))
    table.add_row("Bytes not executed", str(stats.bytes_not_executed))
    table.add_row("Percentage executed", f"{stats.percentage_executed:.2f}")
    table.add_row("Unreferenced symbols", str(stats.unreferenced_symbols))
    table.add_row("Uncovered ranges", str(stats.uncovered_ranges))

    covered = stats.percentage_branch_paths_covered
    if covered is None:
        table.add_row("Branch paths", "no branch information")
    else:
        table.add_row("Branch paths", str(stats.total_branch_paths))
        table.add_row("Uncovered branch paths", str(stats.uncovered_branch_paths))
        table.add_row("Percentage branch paths covered", f"{covered:.2f}")

    console.print(table)
    return output.getvalue()
