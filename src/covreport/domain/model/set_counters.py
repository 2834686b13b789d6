"""Counters aggregated over one symbol set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SetCounters:
    """Branch and range counters for one symbol set.

    Computed by the symbol analysis, consumed by reports.

    Attributes:
        branches_found: Conditional branches found
        branches_always_taken: Branches always taken
        branches_never_taken: Branches never taken
        branches_not_executed: Branches never reached
        unreferenced_symbols: Symbols no executable referenced
        uncovered_ranges: Uncovered ranges found
    """

    branches_found: int = 0
    branches_always_taken: int = 0
    branches_never_taken: int = 0
    branches_not_executed: int = 0
    unreferenced_symbols: int = 0
    uncovered_ranges: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in self.__slots__:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    @classmethod
    def empty(cls) -> SetCounters:
        """Create counters with everything zero."""
        return cls()
