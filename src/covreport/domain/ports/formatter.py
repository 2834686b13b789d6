"""Formatter protocol: per-format rendering of report entries.

The report engine decides WHEN entries are emitted and with WHAT data.
A formatter decides HOW they look and where the files go. Each output
format (plain text, HTML, ...) implements this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from covreport.domain.model.coverage_range import CoverageRange
    from covreport.domain.model.enums import AnnotationState
    from covreport.domain.model.symbol import SymbolInformation


class FormatterProtocol(Protocol):
    """Contract for output formats.

    Open hooks return None when the file could not be opened; the engine
    then skips the report (or raises, for the annotated listing).
    Close hooks accept None and already closed streams.
    """

    @property
    def report_extension(self) -> str:
        """File extension including the dot (e.g. ".txt")."""
        ...

    def write_index(self, file_name: str) -> None:
        """Write the landing page of this format."""
        ...

    # Annotated listing

    def open_annotated_file(self, file_name: str) -> TextIO | None:
        """Open annotated listing file and write its header."""
        ...

    def close_annotated_file(self, stream: TextIO | None) -> None:
        """Write annotated listing footer and close."""
        ...

    def annotated_start(self, stream: TextIO) -> None:
        """Start the listing block of one symbol."""
        ...

    def put_annotated_line(self, stream: TextIO, state: AnnotationState, line: str, range_id: int) -> None:
        """Write one formatted listing line."""
        ...

    def annotated_end(self, stream: TextIO) -> None:
        """End the listing block of one symbol."""
        ...

    # Branch report

    def open_branch_file(self, file_name: str, has_branches: bool) -> TextIO | None:
        """Open branch report; without branches, write the "no branch data" variant."""
        ...

    def close_branch_file(self, stream: TextIO | None, has_branches: bool) -> None:
        """Write branch report footer and close."""
        ...

    def put_branch_entry(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        """Write one uncovered branch."""
        ...

    # Coverage (uncovered ranges) report

    def open_coverage_file(self, file_name: str) -> TextIO | None:
        """Open uncovered-range report."""
        ...

    def close_coverage_file(self, stream: TextIO | None) -> None:
        """Write uncovered-range report footer and close."""
        ...

    def open_no_range_file(self, file_name: str) -> TextIO | None:
        """Open companion file listing never referenced symbols."""
        ...

    def close_no_range_file(self, stream: TextIO | None) -> None:
        """Write companion file footer and close."""
        ...

    def put_coverage_line(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        """Write one uncovered range."""
        ...

    def put_coverage_no_range(self, stream: TextIO, no_range_stream: TextIO, count: int, symbol_name: str) -> None:
        """Write one never referenced symbol."""
        ...

    # Size report

    def open_size_file(self, file_name: str) -> TextIO | None:
        """Open size report."""
        ...

    def close_size_file(self, stream: TextIO | None) -> None:
        """Write size report footer and close."""
        ...

    def put_size_line(self, stream: TextIO, count: int, symbol_name: str, coverage_range: CoverageRange) -> None:
        """Write the size of one uncovered range."""
        ...

    # Symbol summary report

    def open_symbol_summary_file(self, file_name: str) -> TextIO | None:
        """Open symbol summary report."""
        ...

    def close_symbol_summary_file(self, stream: TextIO | None) -> None:
        """Write symbol summary footer and close."""
        ...

    def put_symbol_summary_line(self, stream: TextIO, count: int, symbol_name: str, info: SymbolInformation) -> None:
        """Write the summary of one symbol."""
        ...
