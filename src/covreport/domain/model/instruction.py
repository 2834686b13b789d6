"""Disassembled instruction value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Instruction:
    """One line of a symbol's disassembly listing.

    Attributes:
        address: Absolute address of the line (must be >= 0)
        line: Raw source/disassembly text
        is_instruction: True for real instructions, False for labels/comments
    """

    address: int
    line: str
    is_instruction: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.address < 0:
            raise ValueError(f"address must be >= 0, got {self.address}")
        if self.line is None:
            raise TypeError("line must not be None")
