"""Coverage map protocol: read-only per-symbol execution facts."""

from __future__ import annotations

from typing import Protocol


class CoverageMapProtocol(Protocol):
    """Contract for a unified coverage map.

    Built elsewhere (merging every analyzed executable). The report engine
    only queries it. All offsets are relative to the symbol base address.
    """

    def was_executed(self, offset: int) -> bool:
        """Check if the byte at offset was executed."""
        ...

    def is_branch(self, offset: int) -> bool:
        """Check if offset starts a conditional branch instruction."""
        ...

    def was_always_taken(self, offset: int) -> bool:
        """Check if the branch at offset was taken every time."""
        ...

    def was_never_taken(self, offset: int) -> bool:
        """Check if the branch at offset was never taken."""
        ...
