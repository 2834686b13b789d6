"""Uncovered address ranges and their sequential identifiers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from covreport.domain.model.enums import UncoveredReason


@dataclass(frozen=True, slots=True)
class CoverageRange:
    """Contiguous address interval recorded as uncovered.

    Immutable value object with FAIL-FIRST validation.

    Attributes:
        low_address: First address of the interval (inclusive)
        high_address: Last address of the interval (inclusive)
        range_id: Sequential identifier, 1-based, in discovery order
        reason: Why the interval is uncovered
        instruction_count: Number of instructions inside the interval
        low_source_line: Source line at low_address ("" if unknown)
        high_source_line: Source line at high_address ("" if unknown)
    """

    low_address: int
    high_address: int
    range_id: int
    reason: UncoveredReason = UncoveredReason.NOT_EXECUTED
    instruction_count: int = 0
    low_source_line: str = ""
    high_source_line: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.low_address < 0:
            raise ValueError(f"low_address must be >= 0, got {self.low_address}")
        if self.high_address < self.low_address:
            raise ValueError(
                f"high_address ({self.high_address:#x}) must be >= low_address ({self.low_address:#x})"
            )
        if self.range_id < 1:
            raise ValueError(f"range_id must be >= 1, got {self.range_id}")
        if self.instruction_count < 0:
            raise ValueError(f"instruction_count must be >= 0, got {self.instruction_count}")

    @property
    def size_in_bytes(self) -> int:
        """Number of bytes covered by the interval."""
        return self.high_address - self.low_address + 1

    def contains(self, address: int) -> bool:
        """Check if address lies inside the interval."""
        return self.low_address <= address <= self.high_address


@dataclass(frozen=True, slots=True)
class CoverageSpan:
    """Builder input for CoverageRanges.from_spans (id not yet assigned)."""

    low_address: int
    high_address: int
    reason: UncoveredReason = UncoveredReason.NOT_EXECUTED
    instruction_count: int = 0
    low_source_line: str = ""
    high_source_line: str = ""


@dataclass(frozen=True, slots=True)
class CoverageRanges:
    """Ordered set of uncovered ranges for one symbol.

    Ids are sequential from 1 in discovery order. An empty collection
    means the symbol was analyzed and nothing is uncovered.

    Attributes:
        ranges: Ranges in discovery order
    """

    ranges: tuple[CoverageRange, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for expected, coverage_range in enumerate(self.ranges, start=1):
            if coverage_range.range_id != expected:
                raise ValueError(
                    f"range ids must be sequential from 1, got {coverage_range.range_id} at position {expected}"
                )

    @classmethod
    def from_spans(cls, spans: Iterable[CoverageSpan]) -> CoverageRanges:
        """Build ranges, assigning ids in iteration order."""
        return cls(
            ranges=tuple(
                CoverageRange(
                    low_address=span.low_address,
                    high_address=span.high_address,
                    range_id=range_id,
                    reason=span.reason,
                    instruction_count=span.instruction_count,
                    low_source_line=span.low_source_line,
                    high_source_line=span.high_source_line,
                )
                for range_id, span in enumerate(spans, start=1)
            )
        )

    @classmethod
    def empty(cls) -> CoverageRanges:
        """Create empty ranges (fully covered symbol)."""
        return cls()

    def get_id(self, address: int) -> int:
        """Identifier of the first range containing address.

        Returns:
            Range id, or 0 if no range contains the address.
        """
        for coverage_range in self.ranges:
            if coverage_range.contains(address):
                return coverage_range.range_id
        return 0

    @property
    def is_empty(self) -> bool:
        """True if no range was recorded."""
        return not self.ranges

    def __iter__(self) -> Iterator[CoverageRange]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)
