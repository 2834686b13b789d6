"""Aggregate statistics over one symbol set and the summary.txt report.

The summary is format-independent: it is written once per set, into the
set directory, after every per-format report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from covreport.domain.model.run_statistics import RunStatistics
from covreport.infrastructure.files import close_stream, ensure_and_open

if TYPE_CHECKING:
    from pathlib import Path

    from covreport.domain.model.desired_symbols import DesiredSymbols


def compute_run_statistics(
    symbols: DesiredSymbols,
    set_name: str,
    branch_info_available: bool,
) -> RunStatistics:
    """Count analyzed and never executed bytes of a set.

    Only symbols with a unified coverage map contribute bytes; every offset
    from 0 to size - 1 is queried. Branch and symbol counters come from the
    set counters computed by the symbol analysis.

    Args:
        symbols: Read-only symbol view
        set_name: Symbol set to aggregate
        branch_info_available: Executables carried branch instrumentation

    Returns:
        RunStatistics for the set.
    """
    total_bytes = 0
    not_executed = 0

    for name in symbols.symbols_for_set(set_name):
        info = symbols.symbol(name)
        coverage_map = info.unified_coverage_map
        if coverage_map is None:
            continue

        for offset in range(info.size_in_bytes):
            total_bytes += 1
            if not coverage_map.was_executed(offset):
                not_executed += 1

    counters = symbols.counters_for_set(set_name)
    return RunStatistics(
        total_bytes=total_bytes,
        bytes_not_executed=not_executed,
        branches_found=counters.branches_found,
        branches_always_taken=counters.branches_always_taken,
        branches_never_taken=counters.branches_never_taken,
        branches_not_executed=counters.branches_not_executed,
        unreferenced_symbols=counters.unreferenced_symbols,
        uncovered_ranges=counters.uncovered_ranges,
        branch_info_available=branch_info_available,
    )


def format_summary(stats: RunStatistics) -> str:
    """Render statistics as the summary.txt text.

    The branch section is replaced by a single notice when branch data is
    unavailable; no placeholder percentage is printed then.
    """
    lines = [
        f"Bytes Analyzed                   : {stats.total_bytes}",
        f"Bytes Not Executed               : {stats.bytes_not_executed}",
        f"Percentage Executed              : {stats.percentage_executed:5.2f}",
        f"Percentage Not Executed          : {stats.percentage_not_executed:.2f}",
        f"Unreferenced Symbols             : {stats.unreferenced_symbols}",
        f"Uncovered ranges found           : {stats.uncovered_ranges}",
        "",
    ]

    covered = stats.percentage_branch_paths_covered
    if covered is None:
        lines.append("No branch information available")
    else:
        lines += [
            f"Total conditional branches found : {stats.branches_found}",
            f"Total branch paths found         : {stats.total_branch_paths}",
            f"Uncovered branch paths found     : {stats.uncovered_branch_paths}",
            f"   {stats.branches_always_taken} branches always taken",
            f"   {stats.branches_never_taken} branches never taken",
            f"   {stats.branch_paths_not_executed} branch paths not executed",
            f"Percentage branch paths covered  : {covered:4.2f}",
        ]

    return "\n".join(lines) + "\n"


def write_summary_report(
    file_name: str,
    set_name: str,
    output_directory: Path,
    symbols: DesiredSymbols,
    branch_info_available: bool,
) -> RunStatistics:
    """Compute statistics and write them to output_directory/set_name/file_name.

    A file that cannot be opened is logged and skipped; the statistics are
    returned either way.

    Raises:
        OutputDirectoryError: If the set directory cannot be created
    """
    stats = compute_run_statistics(symbols, set_name, branch_info_available)

    stream = ensure_and_open(output_directory, set_name, file_name)
    if stream is None:
        return stats

    try:
        stream.write(format_summary(stats))
    finally:
        close_stream(stream)

    logger.debug("Wrote {} for set {}", file_name, set_name)
    return stats
