"""Aggregate statistics of one symbol set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """Byte and branch-path totals summarizing a report run.

    Derived on every run, never persisted.

    Attributes:
        total_bytes: Bytes analyzed
        bytes_not_executed: Bytes never executed
        branches_found: Conditional branches found
        branches_always_taken: Branches always taken
        branches_never_taken: Branches never taken
        branches_not_executed: Branches never reached
        unreferenced_symbols: Symbols no executable referenced
        uncovered_ranges: Uncovered ranges found
        branch_info_available: Executables carried branch instrumentation
    """

    total_bytes: int
    bytes_not_executed: int
    branches_found: int = 0
    branches_always_taken: int = 0
    branches_never_taken: int = 0
    branches_not_executed: int = 0
    unreferenced_symbols: int = 0
    uncovered_ranges: int = 0
    branch_info_available: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.total_bytes < 0:
            raise ValueError(f"total_bytes must be >= 0, got {self.total_bytes}")
        if not 0 <= self.bytes_not_executed <= self.total_bytes:
            raise ValueError(
                f"bytes_not_executed must be in [0, {self.total_bytes}], got {self.bytes_not_executed}"
            )
        if self.branches_found < 0:
            raise ValueError(f"branches_found must be >= 0, got {self.branches_found}")

    @property
    def percentage_not_executed(self) -> float:
        """Percentage of bytes never executed.

        0.0 when no bytes were analyzed, so an empty set reads as fully
        executed.
        """
        if self.total_bytes == 0:
            return 0.0
        return 100.0 * self.bytes_not_executed / self.total_bytes

    @property
    def percentage_executed(self) -> float:
        """Percentage of bytes executed."""
        return 100.0 - self.percentage_not_executed

    @property
    def has_branch_data(self) -> bool:
        """True if branch percentages can be reported."""
        return self.branches_found > 0 and self.branch_info_available

    @property
    def total_branch_paths(self) -> int:
        """Two paths per conditional branch."""
        return self.branches_found * 2

    @property
    def branch_paths_not_executed(self) -> int:
        """Paths lost because the branch was never reached."""
        return self.branches_not_executed * 2

    @property
    def uncovered_branch_paths(self) -> int:
        """Paths never seen."""
        return self.branches_always_taken + self.branches_never_taken + self.branch_paths_not_executed

    @property
    def percentage_branch_paths_covered(self) -> float | None:
        """Percentage of branch paths seen. None without branch data."""
        if not self.has_branch_data:
            return None
        return 100.0 - 100.0 * self.uncovered_branch_paths / self.total_branch_paths
