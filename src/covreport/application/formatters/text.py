"""Plain text formatter.

Fixed-width text files, one block per entry, separated by rule lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from covreport.application import names
from covreport.application.formatters._base import BaseFormatter

if TYPE_CHECKING:
    from covreport.domain.model.coverage_range import CoverageRange
    from covreport.domain.model.enums import AnnotationState
    from covreport.domain.model.symbol import SymbolInformation

RULE = "=" * 70
ENTRY_RULE = "=" * 44
NO_BRANCH_DATA = "No branch information available"


def _write(stream: TextIO, text: str = "") -> None:
    """Write line to stream."""
    print(text, file=stream)


def _field(label: str, value: object) -> str:
    """Format 'label : value' with aligned colons."""
    return f"{label:<27}: {value}"


class TextFormatter(BaseFormatter):
    """Plain text reports (.txt).

    The text listing ignores the annotation state: the annotation suffix is
    already part of the formatted line.
    """

    @property
    def report_extension(self) -> str:
        return ".txt"

    def write_index(self, file_name: str) -> None:
        """Write project header and the list of report files."""
        stream = self.open_file(file_name)
        if stream is None:
            return

        config = self._context.config
        try:
            _write(stream, RULE)
            _write(stream, f"{config.project_name} Coverage Report")
            _write(stream, RULE)
            _write(stream, _field("Symbol Set", self._context.set_name))
            _write(stream, _field("Generated", f"{config.timestamp:%Y-%m-%d %H:%M:%S}"))
            _write(stream)
            _write(stream, "Reports:")
            for report, description in names.DESCRIPTIONS.items():
                _write(stream, f"  {report + self.report_extension:<22}{description}")
            _write(stream, f"  {names.SUMMARY_FILE:<22}Aggregate statistics")
        finally:
            self.close_file(stream)

    # Annotated listing

    def annotated_start(self, stream: TextIO) -> None:
        _write(stream, RULE)

    def annotated_end(self, stream: TextIO) -> None:
        _write(stream)

    def put_annotated_line(self, stream: TextIO, state: AnnotationState, line: str, range_id: int) -> None:
        _write(stream, line)

    # Branch report

    def open_branch_file(self, file_name: str, has_branches: bool) -> TextIO | None:
        stream = self.open_file(file_name)
        if stream is not None and not has_branches:
            _write(stream, NO_BRANCH_DATA)
        return stream

    def put_branch_entry(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        offset = coverage_range.low_address - info.base_address
        _write(stream, ENTRY_RULE)
        _write(stream, _field("Index", count))
        _write(stream, _field("Symbol", f"{symbol_name} (0x{offset:x})"))
        _write(stream, _field("Line", coverage_range.low_source_line))
        _write(stream, _field("Size in Bytes", coverage_range.size_in_bytes))
        _write(stream, _field("Reason", coverage_range.reason.label))

    # Coverage report

    def put_coverage_line(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        _write(stream, ENTRY_RULE)
        _write(stream, _field("Index", count))
        _write(stream, _field("Symbol", symbol_name))
        _write(stream, _field("Starting Line", coverage_range.low_source_line))
        _write(stream, _field("Ending Line", coverage_range.high_source_line))
        _write(stream, _field("Starting Address", f"0x{coverage_range.low_address:08x}"))
        _write(stream, _field("Ending Address", f"0x{coverage_range.high_address:08x}"))
        _write(stream, _field("Size in Bytes", coverage_range.size_in_bytes))
        _write(stream, _field("Size in Instructions", coverage_range.instruction_count))
        _write(stream, _field("Reason", coverage_range.reason.label))

    def put_coverage_no_range(self, stream: TextIO, no_range_stream: TextIO, count: int, symbol_name: str) -> None:
        _write(no_range_stream, ENTRY_RULE)
        _write(no_range_stream, _field("Index", count))
        _write(no_range_stream, _field("Symbol", symbol_name))
        _write(no_range_stream, _field("Reason", "NEVER REFERENCED"))

    # Size report

    def open_size_file(self, file_name: str) -> TextIO | None:
        stream = self.open_file(file_name)
        if stream is not None:
            _write(stream, f"{'Index':<8}{'Size':>8}  {'Symbol':<32}Line")
        return stream

    def put_size_line(self, stream: TextIO, count: int, symbol_name: str, coverage_range: CoverageRange) -> None:
        _write(
            stream,
            f"{count:<8}{coverage_range.size_in_bytes:>8}  {symbol_name:<32}{coverage_range.low_source_line}",
        )

    # Symbol summary report

    def put_symbol_summary_line(self, stream: TextIO, count: int, symbol_name: str, info: SymbolInformation) -> None:
        stats = info.stats
        covered = stats.percent_branches_covered

        _write(stream, ENTRY_RULE)
        _write(stream, _field("Index", count))
        _write(stream, _field("Symbol", symbol_name))
        _write(stream, _field("Source File", info.source_file or "unknown"))
        _write(stream, _field("Referenced", "yes" if info.was_referenced else "no"))
        _write(stream, _field("Size in Bytes", stats.size_in_bytes))
        _write(stream, _field("Size in Instructions", stats.size_in_instructions))
        _write(stream, _field("Uncovered Bytes", f"{stats.uncovered_bytes} ({stats.percent_uncovered_bytes:.2f}%)"))
        _write(
            stream,
            _field(
                "Uncovered Instructions",
                f"{stats.uncovered_instructions} ({stats.percent_uncovered_instructions:.2f}%)",
            ),
        )
        _write(stream, _field("Uncovered Ranges", stats.uncovered_ranges))
        _write(stream, _field("Branches", stats.branches_total))
        _write(stream, _field("Branches Always Taken", stats.branches_always_taken))
        _write(stream, _field("Branches Never Taken", stats.branches_never_taken))
        _write(stream, _field("Branches Not Executed", stats.branches_not_executed))
        _write(stream, _field("Percentage Branches Covered", "N/A" if covered is None else f"{covered:.2f}"))
