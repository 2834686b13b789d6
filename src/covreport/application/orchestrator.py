"""Run orchestrator: every report of every format, then the summary.

The only place concrete formatters are named. Runs are sequential and
fail fast: a fatal error aborts the run with no retry.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from loguru import logger

from covreport.application import names
from covreport.application.console import render_statistics
from covreport.application.context import ReportContext
from covreport.application.engine import ReportEngine
from covreport.application.formatters.html import HtmlFormatter
from covreport.application.formatters.text import TextFormatter
from covreport.application.statistics import write_summary_report
from covreport.domain.ports.formatter import FormatterProtocol

if TYPE_CHECKING:
    from covreport.domain.model.configuration import ReportConfig
    from covreport.domain.model.desired_symbols import DesiredSymbols
    from covreport.domain.model.run_statistics import RunStatistics

FormatterFactory = Callable[[ReportContext], FormatterProtocol]

DEFAULT_FORMATTERS: tuple[FormatterFactory, ...] = (TextFormatter, HtmlFormatter)


def _run_engine(engine: ReportEngine, verbose: bool) -> None:
    """Run every per-format report in fixed order."""
    drivers = {
        names.INDEX: engine.write_index,
        names.ANNOTATED: engine.write_annotated_report,
        names.BRANCH: engine.write_branch_report,
        names.COVERAGE: engine.write_coverage_report,
        names.SIZES: engine.write_size_report,
        names.SYMBOL_SUMMARY: engine.write_symbol_summary_report,
    }

    for report in names.REPORT_SEQUENCE:
        report_name = report + engine.report_extension
        logger.log("INFO" if verbose else "DEBUG", "Generate {}", report_name)
        drivers[report](report_name)


def generate_reports(
    set_name: str,
    symbols: DesiredSymbols,
    config: ReportConfig,
    *,
    formatters: Sequence[FormatterFactory] | None = None,
) -> RunStatistics:
    """Generate all reports of one symbol set.

    One engine per format runs index, annotated, branch, uncovered, sizes
    and symbolSummary in that order. The set's summary.txt is written once, last.

    Args:
        set_name: Symbol set to report
        symbols: Read-only symbol view
        config: Run configuration
        formatters: Formatter factories (default: text, then HTML)

    Returns:
        Aggregate statistics written to summary.txt.

    Raises:
        OutputDirectoryError: If an output directory cannot be created
        ReportOpenError: If an annotated listing cannot be opened
        UnknownSymbolSetError: If set_name is not in symbols
    """
    context = ReportContext(set_name=set_name, symbols=symbols, config=config)
    factories = DEFAULT_FORMATTERS if formatters is None else tuple(formatters)

    for factory in factories:
        engine = ReportEngine(factory(context), context)
        _run_engine(engine, config.verbose)

    stats = write_summary_report(
        names.SUMMARY_FILE,
        set_name,
        config.output_directory,
        symbols,
        config.branch_info_available,
    )

    if config.verbose:
        logger.info("\n{}", render_statistics(stats, set_name))

    return stats
