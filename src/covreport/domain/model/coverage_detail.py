"""Paired uncovered ranges and uncovered branches of one symbol."""

from __future__ import annotations

from dataclasses import dataclass

from covreport.domain.exceptions import UnpairedCoverageError
from covreport.domain.model.coverage_range import CoverageRanges


@dataclass(frozen=True, slots=True)
class CoverageDetail:
    """Uncovered byte ranges and uncovered branches, always together.

    A symbol without CoverageDetail was never referenced by any analyzed
    executable. A symbol whose detail has both collections empty is fully
    covered.

    Attributes:
        uncovered_ranges: Byte ranges never executed
        uncovered_branches: Branches with an unseen outcome
    """

    uncovered_ranges: CoverageRanges
    uncovered_branches: CoverageRanges

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.uncovered_ranges is None or self.uncovered_branches is None:
            raise UnpairedCoverageError()

    @classmethod
    def from_pair(
        cls,
        uncovered_ranges: CoverageRanges | None,
        uncovered_branches: CoverageRanges | None,
        *,
        symbol_name: str | None = None,
    ) -> CoverageDetail | None:
        """Combine two separately supplied collections.

        Returns:
            None if both are absent (symbol never referenced).

        Raises:
            UnpairedCoverageError: If exactly one collection is absent.
        """
        if uncovered_ranges is None and uncovered_branches is None:
            return None
        if uncovered_ranges is None or uncovered_branches is None:
            raise UnpairedCoverageError(symbol_name)
        return cls(uncovered_ranges=uncovered_ranges, uncovered_branches=uncovered_branches)

    @property
    def is_fully_covered(self) -> bool:
        """True if nothing is uncovered."""
        return self.uncovered_ranges.is_empty and self.uncovered_branches.is_empty
