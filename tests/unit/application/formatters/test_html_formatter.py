"""Tests for application/formatters/html.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from covreport.application.context import ReportContext
from covreport.application.formatters.html import HtmlFormatter
from covreport.domain.model.coverage_range import CoverageRanges
from covreport.domain.model.enums import AnnotationState
from covreport.domain.model.symbol import SymbolStats
from tests.factories import DEFAULT_SET, make_config, make_span, make_symbol, make_symbols


@pytest.fixture
def formatter(tmp_path: Path) -> HtmlFormatter:
    """Formatter writing into tmp_path/libfoo."""
    symbols = make_symbols(make_symbol("main"))
    return HtmlFormatter(ReportContext(set_name=DEFAULT_SET, symbols=symbols, config=make_config(tmp_path)))


def _read(tmp_path: Path, file_name: str) -> str:
    return (tmp_path / DEFAULT_SET / file_name).read_text(encoding="utf-8")


class TestPages:
    """Tests for page structure."""

    def test_extension(self, formatter: HtmlFormatter) -> None:
        assert formatter.report_extension == ".html"

    def test_index_links_reports(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        formatter.write_index("index.html")
        page = _read(tmp_path, "index.html")

        assert page.startswith("<!DOCTYPE html>")
        assert page.endswith("</body>\n</html>\n")
        assert "<h1>demo Coverage Report</h1>" in page
        assert "Generated 2024-01-02 03:04:05" in page
        assert '<a href="annotated.html">' in page
        assert '<a href="symbolSummary.html">' in page
        assert '<a href="summary.txt">' in page

    def test_table_page_is_complete(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        stream = formatter.open_size_file("sizes.html")
        formatter.close_size_file(stream)
        page = _read(tmp_path, "sizes.html")

        assert page.count("<table>") == 1
        assert page.count("</table>") == 1
        assert "<th>Size in Bytes</th>" in page
        assert page.endswith("</html>\n")


class TestAnnotated:
    """Tests for the annotated listing hooks."""

    def test_lines_carry_state_and_range(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        stream = formatter.open_annotated_file("annotated.html")
        assert stream is not None
        formatter.annotated_start(stream)
        formatter.put_annotated_line(stream, AnnotationState.NEVER_EXECUTED, "cmp r0, #0", 2)
        formatter.put_annotated_line(stream, AnnotationState.SOURCE, "if (a < b)", 0)
        formatter.annotated_end(stream)
        formatter.close_annotated_file(stream)
        page = _read(tmp_path, "annotated.html")

        assert '<span class="never-executed" data-range="2">cmp r0, #0</span>' in page
        assert '<span class="source">if (a &lt; b)</span>' in page
        assert page.count('<pre class="listing">') == 1
        assert page.endswith("</html>\n")


class TestBranchReport:
    """Tests for the branch report hooks."""

    def test_no_branch_variant(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        stream = formatter.open_branch_file("branch.html", has_branches=False)
        formatter.close_branch_file(stream, has_branches=False)
        page = _read(tmp_path, "branch.html")

        assert "<p>No branch information available</p>" in page
        assert "<table>" not in page
        assert page.endswith("</html>\n")

    def test_entry_row(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        info = make_symbol("main")
        branch = CoverageRanges.from_spans([make_span(0x1008, 0x100B, line="x.c:4")]).ranges[0]

        stream = formatter.open_branch_file("branch.html", has_branches=True)
        assert stream is not None
        formatter.put_branch_entry(stream, 1, "main", info, branch)
        formatter.close_branch_file(stream, has_branches=True)
        page = _read(tmp_path, "branch.html")

        assert '<td class="num">1</td><td>main</td><td>0x8</td><td>x.c:4</td>' in page
        assert "</table>" in page


class TestEscaping:
    """Symbol names and source text are escaped."""

    def test_symbol_names(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        info = make_symbol("operator<<")
        uncovered = CoverageRanges.from_spans([make_span(0x1000, line='s = "<b>" & t')]).ranges[0]

        stream = formatter.open_coverage_file("uncovered.html")
        assert stream is not None
        formatter.put_coverage_line(stream, 0, "operator<<", info, uncovered)
        formatter.close_coverage_file(stream)
        page = _read(tmp_path, "uncovered.html")

        assert "<td>operator&lt;&lt;</td>" in page
        assert "s = &quot;&lt;b&gt;&quot; &amp; t" in page
        assert "operator<<" not in page

    def test_set_name_in_heading(self, tmp_path: Path) -> None:
        set_name = "a&b"
        symbols = make_symbols(make_symbol("main"), set_name=set_name)
        formatter = HtmlFormatter(ReportContext(set_name=set_name, symbols=symbols, config=make_config(tmp_path)))

        formatter.write_index("index.html")

        page = (tmp_path / set_name / "index.html").read_text(encoding="utf-8")
        assert "Index: a&amp;b" in page


class TestCoverageReport:
    """Tests for the coverage report hooks."""

    def test_no_range_row_goes_to_companion(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        no_range = formatter.open_no_range_file("no_range_uncovered.html")
        stream = formatter.open_coverage_file("uncovered.html")
        assert stream is not None
        assert no_range is not None
        formatter.put_coverage_no_range(stream, no_range, 0, "unused")
        formatter.close_coverage_file(stream)
        formatter.close_no_range_file(no_range)

        assert "unused" not in _read(tmp_path, "uncovered.html")
        companion = _read(tmp_path, "no_range_uncovered.html")
        assert '<td class="num">0</td><td>unused</td>' in companion
        assert "Never referenced symbols" in companion


class TestSymbolSummary:
    """Tests for the symbol summary hooks."""

    def test_row(self, formatter: HtmlFormatter, tmp_path: Path) -> None:
        stats = SymbolStats(size_in_bytes=16, size_in_instructions=4, branches_executed=3, branches_always_taken=1)
        info = make_symbol("main", stats=stats, source_file="main.c")

        stream = formatter.open_symbol_summary_file("symbolSummary.html")
        assert stream is not None
        formatter.put_symbol_summary_line(stream, 0, "main", info)
        formatter.close_symbol_summary_file(stream)
        page = _read(tmp_path, "symbolSummary.html")

        assert "<td>main.c</td>" in page
        assert "<td>75.00</td>" in page
