"""Base formatter with default file handling.

Provides the open/close hooks of FormatterProtocol: every file goes
to <output directory>/<set name>/<file name>. Concrete formats inherit
and add headers, footers and entry rendering.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

from covreport.infrastructure.files import close_stream, ensure_and_open

if TYPE_CHECKING:
    from covreport.application.context import ReportContext
    from covreport.domain.model.coverage_range import CoverageRange
    from covreport.domain.model.enums import AnnotationState
    from covreport.domain.model.symbol import SymbolInformation


class BaseFormatter(ABC):
    """Base class for formatters implementing FormatterProtocol.

    Concrete formatters must implement the report_extension property,
    write_index() and every put_*() method. Open/close hooks and the
    annotated start/end markers have working defaults.

    Example:
        class CsvFormatter(BaseFormatter):
            @property
            def report_extension(self) -> str:
                return ".csv"
            ...
    """

    def __init__(self, context: ReportContext) -> None:
        """Initialize formatter.

        Args:
            context: Symbol set, symbols and configuration being reported
        """
        self._context = context

    @property
    @abstractmethod
    def report_extension(self) -> str:
        """File extension including the dot."""

    @property
    def context(self) -> ReportContext:
        """Context this formatter renders."""
        return self._context

    def open_file(self, file_name: str) -> TextIO | None:
        """Open a report file in the set directory.

        Returns:
            Open stream, or None if opening failed (logged).

        Raises:
            OutputDirectoryError: If the set directory cannot be created
        """
        return ensure_and_open(
            self._context.config.output_directory,
            self._context.set_name,
            file_name,
        )

    def close_file(self, stream: TextIO | None) -> None:
        """Close a report file. None and closed streams are ignored."""
        close_stream(stream)

    @abstractmethod
    def write_index(self, file_name: str) -> None:
        """Write the landing page of this format."""

    # Annotated listing

    def open_annotated_file(self, file_name: str) -> TextIO | None:
        return self.open_file(file_name)

    def close_annotated_file(self, stream: TextIO | None) -> None:
        self.close_file(stream)

    def annotated_start(self, stream: TextIO) -> None:
        """Start the listing block of one symbol (no marker by default)."""

    def annotated_end(self, stream: TextIO) -> None:
        """End the listing block of one symbol (no marker by default)."""

    @abstractmethod
    def put_annotated_line(self, stream: TextIO, state: AnnotationState, line: str, range_id: int) -> None:
        """Write one formatted listing line."""

    # Branch report

    def open_branch_file(self, file_name: str, has_branches: bool) -> TextIO | None:
        return self.open_file(file_name)

    def close_branch_file(self, stream: TextIO | None, has_branches: bool) -> None:
        self.close_file(stream)

    @abstractmethod
    def put_branch_entry(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        """Write one uncovered branch."""

    # Coverage report

    def open_coverage_file(self, file_name: str) -> TextIO | None:
        return self.open_file(file_name)

    def close_coverage_file(self, stream: TextIO | None) -> None:
        self.close_file(stream)

    def open_no_range_file(self, file_name: str) -> TextIO | None:
        return self.open_file(file_name)

    def close_no_range_file(self, stream: TextIO | None) -> None:
        self.close_file(stream)

    @abstractmethod
    def put_coverage_line(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        """Write one uncovered range."""

    @abstractmethod
    def put_coverage_no_range(self, stream: TextIO, no_range_stream: TextIO, count: int, symbol_name: str) -> None:
        """Write one never referenced symbol."""

    # Size report

    def open_size_file(self, file_name: str) -> TextIO | None:
        return self.open_file(file_name)

    def close_size_file(self, stream: TextIO | None) -> None:
        self.close_file(stream)

    @abstractmethod
    def put_size_line(self, stream: TextIO, count: int, symbol_name: str, coverage_range: CoverageRange) -> None:
        """Write the size of one uncovered range."""

    # Symbol summary report

    def open_symbol_summary_file(self, file_name: str) -> TextIO | None:
        return self.open_file(file_name)

    def close_symbol_summary_file(self, stream: TextIO | None) -> None:
        self.close_file(stream)

    @abstractmethod
    def put_symbol_summary_line(self, stream: TextIO, count: int, symbol_name: str, info: SymbolInformation) -> None:
        """Write the summary of one symbol."""
