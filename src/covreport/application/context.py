"""Context shared by the report engine and its formatter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from covreport.domain.model.configuration import ReportConfig
    from covreport.domain.model.desired_symbols import DesiredSymbols


@dataclass(frozen=True, slots=True)
class ReportContext:
    """One symbol set rendered under one configuration.

    Attributes:
        set_name: Symbol set being reported
        symbols: Borrowed read-only symbol view
        config: Run configuration
    """

    set_name: str
    symbols: DesiredSymbols
    config: ReportConfig

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.set_name:
            raise ValueError("set_name must not be empty")
        # Raises UnknownSymbolSetError for a set the view does not hold
        self.symbols.symbols_for_set(self.set_name)
