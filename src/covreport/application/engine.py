"""Report engine: walks one symbol set and drives a formatter.

One engine exists per output format. Every driver opens its own file(s)
through the formatter hooks and closes them on every exit path. A failed
open skips the report, except for the annotated listing which raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from covreport.application.classifier import annotate_instruction
from covreport.application.names import no_range_name
from covreport.application.normalizer import format_source_line
from covreport.domain.exceptions import ReportOpenError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from covreport.application.context import ReportContext
    from covreport.domain.model.symbol import SymbolInformation
    from covreport.domain.ports.formatter import FormatterProtocol


class ReportEngine:
    """Format-independent report drivers.

    Holds the formatter through FormatterProtocol only; concrete formats
    are chosen by the orchestrator.

    Example:
        engine = ReportEngine(TextFormatter(context), context)
        engine.write_annotated_report("annotated.txt")
    """

    def __init__(self, formatter: FormatterProtocol, context: ReportContext) -> None:
        """Initialize engine.

        Args:
            formatter: Output format to drive
            context: Symbol set, symbols and configuration
        """
        self._formatter = formatter
        self._context = context

    @property
    def report_extension(self) -> str:
        """Extension of the driven format."""
        return self._formatter.report_extension

    def _symbols(self) -> Iterator[tuple[str, SymbolInformation]]:
        """Symbols of the set in set order."""
        symbols = self._context.symbols
        for name in symbols.symbols_for_set(self._context.set_name):
            yield name, symbols.symbol(name)

    def write_index(self, file_name: str) -> None:
        """Write the landing page. Content belongs to the formatter."""
        self._formatter.write_index(file_name)

    def write_annotated_report(self, file_name: str) -> int:
        """Write the annotated listing of every partially covered symbol.

        Never referenced and fully covered symbols are skipped.

        Returns:
            Number of symbols listed.

        Raises:
            ReportOpenError: If the file cannot be opened
        """
        formatter = self._formatter
        stream = formatter.open_annotated_file(file_name)
        if stream is None:
            raise ReportOpenError(file_name)

        listed = 0
        try:
            for _, info in self._symbols():
                detail = info.coverage
                if detail is None or detail.is_fully_covered:
                    continue

                formatter.annotated_start(stream)
                for instruction in info.instructions:
                    annotation = annotate_instruction(
                        instruction,
                        info.unified_coverage_map,
                        info.base_address,
                        detail,
                    )
                    line = format_source_line(instruction.line, annotation.text)
                    formatter.put_annotated_line(stream, annotation.state, line, annotation.range_id)
                formatter.annotated_end(stream)
                listed += 1
        finally:
            formatter.close_annotated_file(stream)

        return listed

    def write_branch_report(self, file_name: str) -> int:
        """Write one numbered entry per uncovered branch.

        Without branches in the set, or without branch instrumentation, the
        formatter writes its "no branch data" variant and nothing else.

        Returns:
            Number of entries written (0 if skipped).
        """
        formatter = self._formatter
        counters = self._context.symbols.counters_for_set(self._context.set_name)
        has_branches = counters.branches_found != 0 and self._context.config.branch_info_available

        stream = formatter.open_branch_file(file_name, has_branches)
        if stream is None:
            return 0

        count = 0
        try:
            if has_branches:
                for name, info in self._symbols():
                    if info.coverage is None:
                        continue
                    for branch in info.coverage.uncovered_branches:
                        count += 1
                        formatter.put_branch_entry(stream, count, name, info, branch)
        finally:
            formatter.close_branch_file(stream, has_branches)

        return count

    def write_coverage_report(self, file_name: str) -> int:
        """Write uncovered ranges, and never referenced symbols to a companion file.

        Both kinds of entry share one counter, so numbers are unique across
        the two files.

        Returns:
            Final counter value (0 if skipped).
        """
        formatter = self._formatter
        no_range_stream = formatter.open_no_range_file(no_range_name(file_name))
        if no_range_stream is None:
            return 0

        count = 0
        try:
            stream = formatter.open_coverage_file(file_name)
            if stream is None:
                return 0

            try:
                for name, info in self._symbols():
                    if info.coverage is None:
                        formatter.put_coverage_no_range(stream, no_range_stream, count, name)
                        count += 1
                        continue
                    for coverage_range in info.coverage.uncovered_ranges:
                        formatter.put_coverage_line(stream, count, name, info, coverage_range)
                        count += 1
            finally:
                formatter.close_coverage_file(stream)
        finally:
            formatter.close_no_range_file(no_range_stream)

        return count

    def write_size_report(self, file_name: str) -> int:
        """Write the size of every uncovered range.

        Returns:
            Number of entries written (0 if skipped).
        """
        formatter = self._formatter
        stream = formatter.open_size_file(file_name)
        if stream is None:
            return 0

        count = 0
        try:
            for name, info in self._symbols():
                if info.coverage is None:
                    continue
                for coverage_range in info.coverage.uncovered_ranges:
                    formatter.put_size_line(stream, count, name, coverage_range)
                    count += 1
        finally:
            formatter.close_size_file(stream)

        return count

    def write_symbol_summary_report(self, file_name: str) -> int:
        """Write one summary entry per symbol, whatever its coverage.

        Returns:
            Number of entries written (0 if skipped).
        """
        formatter = self._formatter
        stream = formatter.open_symbol_summary_file(file_name)
        if stream is None:
            return 0

        count = 0
        try:
            for name, info in self._symbols():
                formatter.put_symbol_summary_line(stream, count, name, info)
                count += 1
        finally:
            formatter.close_symbol_summary_file(stream)

        return count
