"""Per-symbol analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from covreport.domain.model.coverage_detail import CoverageDetail
    from covreport.domain.model.instruction import Instruction
    from covreport.domain.ports.coverage_map import CoverageMapProtocol


@dataclass(frozen=True, slots=True)
class SymbolStats:
    """Coverage counters of one symbol.

    Attributes:
        size_in_bytes: Symbol size in bytes
        size_in_instructions: Number of instructions in the symbol
        uncovered_bytes: Bytes never executed
        uncovered_instructions: Instructions never executed
        uncovered_ranges: Number of uncovered ranges
        branches_executed: Branches with both outcomes seen
        branches_always_taken: Branches whose jump was always taken
        branches_never_taken: Branches whose jump was never taken
        branches_not_executed: Branches never reached
    """

    size_in_bytes: int
    size_in_instructions: int = 0
    uncovered_bytes: int = 0
    uncovered_instructions: int = 0
    uncovered_ranges: int = 0
    branches_executed: int = 0
    branches_always_taken: int = 0
    branches_never_taken: int = 0
    branches_not_executed: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in self.__slots__:
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.uncovered_bytes > self.size_in_bytes:
            raise ValueError(
                f"uncovered_bytes ({self.uncovered_bytes}) must be <= size_in_bytes ({self.size_in_bytes})"
            )
        if self.uncovered_instructions > self.size_in_instructions:
            raise ValueError(
                f"uncovered_instructions ({self.uncovered_instructions}) must be <= "
                f"size_in_instructions ({self.size_in_instructions})"
            )

    @property
    def branches_total(self) -> int:
        """All conditional branches in the symbol."""
        return (
            self.branches_executed
            + self.branches_always_taken
            + self.branches_never_taken
            + self.branches_not_executed
        )

    @property
    def percent_uncovered_bytes(self) -> float:
        """Percentage of bytes never executed. 0.0 for an empty symbol."""
        if self.size_in_bytes == 0:
            return 0.0
        return 100.0 * self.uncovered_bytes / self.size_in_bytes

    @property
    def percent_uncovered_instructions(self) -> float:
        """Percentage of instructions never executed. 0.0 for no instructions."""
        if self.size_in_instructions == 0:
            return 0.0
        return 100.0 * self.uncovered_instructions / self.size_in_instructions

    @property
    def percent_branches_covered(self) -> float | None:
        """Percentage of branches with both outcomes seen. None without branches."""
        if self.branches_total == 0:
            return None
        return 100.0 * self.branches_executed / self.branches_total


@dataclass(frozen=True, slots=True)
class SymbolInformation:
    """Everything known about one analyzed symbol.

    Borrowed read-only by the report engine.

    Attributes:
        name: Symbol name (unique key)
        instructions: Disassembly lines in address order
        base_address: Load address of the symbol
        stats: Coverage counters
        unified_coverage_map: Merged coverage map (None if never loaded)
        coverage: Uncovered ranges/branches (None if never referenced)
        source_file: Source file the symbol comes from (None if unknown)
    """

    name: str
    instructions: tuple[Instruction, ...]
    base_address: int
    stats: SymbolStats
    unified_coverage_map: CoverageMapProtocol | None = None
    coverage: CoverageDetail | None = None
    source_file: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.base_address < 0:
            raise ValueError(f"base_address must be >= 0, got {self.base_address}")
        # a referenced symbol was loaded by some executable, so it has a map
        if self.coverage is not None and self.unified_coverage_map is None:
            raise ValueError(f"symbol '{self.name}' has coverage detail but no unified coverage map")

    @property
    def size_in_bytes(self) -> int:
        """Symbol size in bytes."""
        return self.stats.size_in_bytes

    @property
    def was_referenced(self) -> bool:
        """True if any analyzed executable referenced the symbol."""
        return self.coverage is not None
