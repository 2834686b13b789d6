"""In-memory unified coverage map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CoverageMap:
    """Immutable coverage map satisfying CoverageMapProtocol.

    Offsets outside [0, size) are never executed and never branches.

    Attributes:
        size: Symbol size in bytes (must be >= 0)
        executed: Offsets executed at least once
        branches: Offsets that start a conditional branch
        taken: Branch offsets whose jump path was seen
        not_taken: Branch offsets whose fall-through path was seen
    """

    size: int
    executed: frozenset[int] = frozenset()
    branches: frozenset[int] = frozenset()
    taken: frozenset[int] = frozenset()
    not_taken: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        for name in ("executed", "branches", "taken", "not_taken"):
            outside = {o for o in getattr(self, name) if not 0 <= o < self.size}
            if outside:
                raise ValueError(f"{name} offsets outside [0, {self.size}): {sorted(outside)}")
        stray = (self.taken | self.not_taken) - self.branches
        if stray:
            raise ValueError(f"taken/not_taken offsets must be branches: {sorted(stray)}")

    def was_executed(self, offset: int) -> bool:
        """Check if the byte at offset was executed."""
        return offset in self.executed

    def is_branch(self, offset: int) -> bool:
        """Check if offset starts a conditional branch instruction."""
        return offset in self.branches

    def was_always_taken(self, offset: int) -> bool:
        """Jump path seen, fall-through never seen."""
        return self.is_branch(offset) and offset in self.taken and offset not in self.not_taken

    def was_never_taken(self, offset: int) -> bool:
        """Fall-through seen, jump path never seen."""
        return self.is_branch(offset) and offset in self.not_taken and offset not in self.taken
