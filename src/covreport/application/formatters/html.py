"""HTML formatter.

Standalone pages with an inline stylesheet. All symbol names and source
text are escaped with html.escape.
"""

from __future__ import annotations

import html
from typing import TYPE_CHECKING, TextIO

from covreport.application import names
from covreport.application.formatters._base import BaseFormatter
from covreport.domain.model.enums import AnnotationState

if TYPE_CHECKING:
    from collections.abc import Sequence

    from covreport.domain.model.coverage_range import CoverageRange
    from covreport.domain.model.symbol import SymbolInformation

STYLE = """
body { font-family: sans-serif; margin: 1.5em; }
table { border-collapse: collapse; }
th, td { border: 1px solid #bbb; padding: 2px 8px; text-align: left; }
th { background: #eee; }
td.num { text-align: right; }
pre.listing { font-family: monospace; line-height: 1.2; }
.never-executed { background: #f8d0d0; }
.always-taken { background: #f8ecc0; }
.never-taken { background: #d8e4f8; }
.executed { color: #333; }
.source { color: #777; }
"""

STATE_CLASSES = {
    AnnotationState.SOURCE: "source",
    AnnotationState.EXECUTED: "executed",
    AnnotationState.NEVER_EXECUTED: "never-executed",
    AnnotationState.BRANCH_ALWAYS_TAKEN: "always-taken",
    AnnotationState.BRANCH_NEVER_TAKEN: "never-taken",
}

BRANCH_COLUMNS = ("Index", "Symbol", "Offset", "Line", "Size in Bytes", "Reason")
COVERAGE_COLUMNS = (
    "Index",
    "Symbol",
    "Starting Line",
    "Ending Line",
    "Starting Address",
    "Ending Address",
    "Size in Bytes",
    "Size in Instructions",
    "Reason",
)
NO_RANGE_COLUMNS = ("Index", "Symbol")
SIZE_COLUMNS = ("Index", "Size in Bytes", "Symbol", "Line")
SYMBOL_SUMMARY_COLUMNS = (
    "Index",
    "Symbol",
    "Source File",
    "Size in Bytes",
    "Size in Instructions",
    "Uncovered Bytes",
    "Uncovered Instructions",
    "Uncovered Ranges",
    "Branches",
    "Always Taken",
    "Never Taken",
    "Not Executed",
    "Branches Covered (%)",
)


def _cell(value: object) -> str:
    """Table cell; numbers are right aligned."""
    if isinstance(value, int):
        return f'<td class="num">{value}</td>'
    return f"<td>{html.escape(str(value))}</td>"


def _row(values: Sequence[object]) -> str:
    """Table row of escaped cells."""
    return "<tr>" + "".join(_cell(v) for v in values) + "</tr>\n"


def _header_row(columns: Sequence[str]) -> str:
    """Table header row."""
    return "<tr>" + "".join(f"<th>{html.escape(c)}</th>" for c in columns) + "</tr>\n"


class HtmlFormatter(BaseFormatter):
    """HTML reports (.html).

    Every report is a page holding one table, except the annotated listing
    (a preformatted block per symbol) and the "no branch data" branch page.
    """

    @property
    def report_extension(self) -> str:
        return ".html"

    def _page_start(self, stream: TextIO, title: str) -> None:
        """Write document head and page heading."""
        config = self._context.config
        project = html.escape(config.project_name)
        stream.write("<!DOCTYPE html>\n<html>\n<head>\n<meta charset=\"utf-8\">\n")
        stream.write(f"<title>{project}: {html.escape(title)}</title>\n")
        stream.write(f"<style>{STYLE}</style>\n</head>\n<body>\n")
        stream.write(f"<h1>{project} Coverage Report</h1>\n")
        stream.write(
            f"<h2>{html.escape(title)}: {html.escape(self._context.set_name)}</h2>\n"
            f"<p>Generated {config.timestamp:%Y-%m-%d %H:%M:%S}</p>\n"
        )

    def _page_end(self, stream: TextIO) -> None:
        """Close document."""
        stream.write("</body>\n</html>\n")

    def _open_table_page(self, file_name: str, title: str, columns: Sequence[str]) -> TextIO | None:
        """Open file and write page head plus table header."""
        stream = self.open_file(file_name)
        if stream is not None:
            self._page_start(stream, title)
            stream.write("<table>\n")
            stream.write(_header_row(columns))
        return stream

    def _close_table_page(self, stream: TextIO | None) -> None:
        """Write table and page end, then close."""
        if stream is not None and not stream.closed:
            stream.write("</table>\n")
            self._page_end(stream)
        self.close_file(stream)

    def write_index(self, file_name: str) -> None:
        """Write links to every report of this format."""
        stream = self.open_file(file_name)
        if stream is None:
            return

        try:
            self._page_start(stream, "Index")
            stream.write("<ul>\n")
            for report, description in names.DESCRIPTIONS.items():
                target = html.escape(report + self.report_extension)
                stream.write(f'<li><a href="{target}">{html.escape(description)}</a></li>\n')
            stream.write(f'<li><a href="{names.SUMMARY_FILE}">Aggregate statistics</a></li>\n')
            stream.write("</ul>\n")
            self._page_end(stream)
        finally:
            self.close_file(stream)

    # Annotated listing

    def open_annotated_file(self, file_name: str) -> TextIO | None:
        stream = self.open_file(file_name)
        if stream is not None:
            self._page_start(stream, names.DESCRIPTIONS[names.ANNOTATED])
        return stream

    def close_annotated_file(self, stream: TextIO | None) -> None:
        if stream is not None and not stream.closed:
            self._page_end(stream)
        self.close_file(stream)

    def annotated_start(self, stream: TextIO) -> None:
        stream.write('<hr>\n<pre class="listing">\n')

    def annotated_end(self, stream: TextIO) -> None:
        stream.write("</pre>\n")

    def put_annotated_line(self, stream: TextIO, state: AnnotationState, line: str, range_id: int) -> None:
        css = STATE_CLASSES[state]
        data = f' data-range="{range_id}"' if range_id else ""
        stream.write(f'<span class="{css}"{data}>{html.escape(line)}</span>\n')

    # Branch report

    def open_branch_file(self, file_name: str, has_branches: bool) -> TextIO | None:
        if has_branches:
            return self._open_table_page(file_name, names.DESCRIPTIONS[names.BRANCH], BRANCH_COLUMNS)

        stream = self.open_file(file_name)
        if stream is not None:
            self._page_start(stream, names.DESCRIPTIONS[names.BRANCH])
            stream.write("<p>No branch information available</p>\n")
        return stream

    def close_branch_file(self, stream: TextIO | None, has_branches: bool) -> None:
        if has_branches:
            self._close_table_page(stream)
            return
        if stream is not None and not stream.closed:
            self._page_end(stream)
        self.close_file(stream)

    def put_branch_entry(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        offset = coverage_range.low_address - info.base_address
        stream.write(
            _row(
                (
                    count,
                    symbol_name,
                    f"0x{offset:x}",
                    coverage_range.low_source_line,
                    coverage_range.size_in_bytes,
                    coverage_range.reason.label,
                )
            )
        )

    # Coverage report

    def open_coverage_file(self, file_name: str) -> TextIO | None:
        return self._open_table_page(file_name, names.DESCRIPTIONS[names.COVERAGE], COVERAGE_COLUMNS)

    def close_coverage_file(self, stream: TextIO | None) -> None:
        self._close_table_page(stream)

    def open_no_range_file(self, file_name: str) -> TextIO | None:
        return self._open_table_page(file_name, "Never referenced symbols", NO_RANGE_COLUMNS)

    def close_no_range_file(self, stream: TextIO | None) -> None:
        self._close_table_page(stream)

    def put_coverage_line(
        self,
        stream: TextIO,
        count: int,
        symbol_name: str,
        info: SymbolInformation,
        coverage_range: CoverageRange,
    ) -> None:
        stream.write(
            _row(
                (
                    count,
                    symbol_name,
                    coverage_range.low_source_line,
                    coverage_range.high_source_line,
                    f"0x{coverage_range.low_address:08x}",
                    f"0x{coverage_range.high_address:08x}",
                    coverage_range.size_in_bytes,
                    coverage_range.instruction_count,
                    coverage_range.reason.label,
                )
            )
        )

    def put_coverage_no_range(self, stream: TextIO, no_range_stream: TextIO, count: int, symbol_name: str) -> None:
        no_range_stream.write(_row((count, symbol_name)))

    # Size report

    def open_size_file(self, file_name: str) -> TextIO | None:
        return self._open_table_page(file_name, names.DESCRIPTIONS[names.SIZES], SIZE_COLUMNS)

    def close_size_file(self, stream: TextIO | None) -> None:
        self._close_table_page(stream)

    def put_size_line(self, stream: TextIO, count: int, symbol_name: str, coverage_range: CoverageRange) -> None:
        stream.write(_row((count, coverage_range.size_in_bytes, symbol_name, coverage_range.low_source_line)))

    # Symbol summary report

    def open_symbol_summary_file(self, file_name: str) -> TextIO | None:
        return self._open_table_page(
            file_name,
            names.DESCRIPTIONS[names.SYMBOL_SUMMARY],
            SYMBOL_SUMMARY_COLUMNS,
        )

    def close_symbol_summary_file(self, stream: TextIO | None) -> None:
        self._close_table_page(stream)

    def put_symbol_summary_line(self, stream: TextIO, count: int, symbol_name: str, info: SymbolInformation) -> None:
        stats = info.stats
        covered = stats.percent_branches_covered
        stream.write(
            _row(
                (
                    count,
                    symbol_name,
                    info.source_file or "unknown",
                    stats.size_in_bytes,
                    stats.size_in_instructions,
                    stats.uncovered_bytes,
                    stats.uncovered_instructions,
                    stats.uncovered_ranges,
                    stats.branches_total,
                    stats.branches_always_taken,
                    stats.branches_never_taken,
                    stats.branches_not_executed,
                    "N/A" if covered is None else f"{covered:.2f}",
                )
            )
        )
