"""Read-only view of every symbol to report on."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from covreport.domain.exceptions import UnknownSymbolError, UnknownSymbolSetError
from covreport.domain.model.set_counters import SetCounters
from covreport.domain.model.symbol import SymbolInformation


@dataclass(frozen=True, slots=True)
class DesiredSymbols:
    """Symbols grouped into named sets, with per-set counters.

    Immutable: mappings are wrapped in MappingProxyType, set membership
    is stored as tuples. Drivers may only read from it.

    Attributes:
        symbols: Symbol name → SymbolInformation
        sets: Set name → ordered symbol names (order is report order)
        counters: Set name → SetCounters (missing set = all zero)
    """

    symbols: Mapping[str, SymbolInformation]
    sets: Mapping[str, tuple[str, ...]]
    counters: Mapping[str, SetCounters] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants and freeze mappings. FAIL-FIRST."""
        for key, info in self.symbols.items():
            if key != info.name:
                raise ValueError(f"symbol key '{key}' does not match name '{info.name}'")

        for set_name, names in self.sets.items():
            missing = [n for n in names if n not in self.symbols]
            if missing:
                raise ValueError(f"set '{set_name}' references unknown symbols: {missing}")

        unknown = set(self.counters) - set(self.sets)
        if unknown:
            raise ValueError(f"counters for unknown sets: {sorted(unknown)}")

        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))
        object.__setattr__(
            self,
            "sets",
            MappingProxyType({k: tuple(v) for k, v in self.sets.items()}),
        )
        object.__setattr__(self, "counters", MappingProxyType(dict(self.counters)))

    @classmethod
    def single_set(
        cls,
        set_name: str,
        symbols: Sequence[SymbolInformation],
        counters: SetCounters | None = None,
    ) -> DesiredSymbols:
        """Build a view holding one set, ordered as given."""
        return cls(
            symbols={s.name: s for s in symbols},
            sets={set_name: tuple(s.name for s in symbols)},
            counters={set_name: counters or SetCounters.empty()},
        )

    def symbols_for_set(self, set_name: str) -> tuple[str, ...]:
        """Ordered symbol names of a set.

        Raises:
            UnknownSymbolSetError: If set_name is not known
        """
        try:
            return self.sets[set_name]
        except KeyError:
            raise UnknownSymbolSetError(set_name) from None

    def symbol(self, name: str) -> SymbolInformation:
        """Look up a symbol by name.

        Raises:
            UnknownSymbolError: If name is not known
        """
        try:
            return self.symbols[name]
        except KeyError:
            raise UnknownSymbolError(name) from None

    def counters_for_set(self, set_name: str) -> SetCounters:
        """Counters of a set (all zero if none were supplied).

        Raises:
            UnknownSymbolSetError: If set_name is not known
        """
        if set_name not in self.sets:
            raise UnknownSymbolSetError(set_name)
        return self.counters.get(set_name, SetCounters.empty())

    @property
    def set_names(self) -> tuple[str, ...]:
        """All set names."""
        return tuple(self.sets)
