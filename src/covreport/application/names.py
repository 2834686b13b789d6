"""Report file names shared by the engine and every formatter."""

from typing import Final

INDEX: Final = "index"
ANNOTATED: Final = "annotated"
BRANCH: Final = "branch"
COVERAGE: Final = "uncovered"
SIZES: Final = "sizes"
SYMBOL_SUMMARY: Final = "symbolSummary"

NO_RANGE_PREFIX: Final = "no_range_"
SUMMARY_FILE: Final = "summary.txt"

# Per-format reports in generation order (index first)
REPORT_SEQUENCE: Final = (INDEX, ANNOTATED, BRANCH, COVERAGE, SIZES, SYMBOL_SUMMARY)

DESCRIPTIONS: Final = {
    ANNOTATED: "Annotated assembly listing",
    BRANCH: "Uncovered branches",
    COVERAGE: "Uncovered ranges",
    SIZES: "Uncovered range sizes",
    SYMBOL_SUMMARY: "Symbol summary",
}


def no_range_name(file_name: str) -> str:
    """Companion file name for never referenced symbols."""
    return f"{NO_RANGE_PREFIX}{file_name}"
