"""Tests for domain/model/desired_symbols.py."""

import pytest

from covreport.domain.exceptions import UnknownSymbolError, UnknownSymbolSetError
from covreport.domain.model.desired_symbols import DesiredSymbols
from covreport.domain.model.set_counters import SetCounters
from tests.factories import make_symbol


class TestDesiredSymbolsLookup:
    """Tests for lookups."""

    def test_symbols_for_set_keeps_order(self) -> None:
        a, b, c = make_symbol("a"), make_symbol("b"), make_symbol("c")
        symbols = DesiredSymbols(
            symbols={"a": a, "b": b, "c": c},
            sets={"lib": ("c", "a", "b")},
        )
        assert symbols.symbols_for_set("lib") == ("c", "a", "b")

    def test_symbol_lookup(self) -> None:
        info = make_symbol("a")
        symbols = DesiredSymbols.single_set("lib", [info])
        assert symbols.symbol("a") is info

    def test_counters_default_to_zero(self) -> None:
        symbols = DesiredSymbols(symbols={}, sets={"lib": ()})
        assert symbols.counters_for_set("lib") == SetCounters.empty()

    def test_counters_supplied(self) -> None:
        counters = SetCounters(branches_found=3)
        symbols = DesiredSymbols.single_set("lib", [make_symbol("a")], counters)
        assert symbols.counters_for_set("lib").branches_found == 3

    def test_unknown_set_raises(self) -> None:
        symbols = DesiredSymbols(symbols={}, sets={})
        with pytest.raises(UnknownSymbolSetError, match="missing"):
            symbols.symbols_for_set("missing")
        with pytest.raises(KeyError):
            symbols.counters_for_set("missing")

    def test_unknown_symbol_raises(self) -> None:
        symbols = DesiredSymbols(symbols={}, sets={})
        with pytest.raises(UnknownSymbolError, match="nope"):
            symbols.symbol("nope")

    def test_set_names(self) -> None:
        symbols = DesiredSymbols(symbols={}, sets={"a": (), "b": ()})
        assert symbols.set_names == ("a", "b")


class TestDesiredSymbolsImmutability:
    """Tests for read-only views."""

    def test_symbols_mapping_is_read_only(self) -> None:
        symbols = DesiredSymbols.single_set("lib", [make_symbol("a")])
        with pytest.raises(TypeError):
            symbols.symbols["b"] = make_symbol("b")  # type: ignore[index]

    def test_source_dict_changes_do_not_leak(self) -> None:
        source = {"a": make_symbol("a")}
        symbols = DesiredSymbols(symbols=source, sets={"lib": ("a",)})
        source["b"] = make_symbol("b")
        assert "b" not in symbols.symbols


class TestDesiredSymbolsFailFirst:
    """Tests for FAIL-FIRST validation."""

    def test_key_name_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="does not match"):
            DesiredSymbols(symbols={"x": make_symbol("a")}, sets={})

    def test_set_with_unknown_symbol_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown symbols"):
            DesiredSymbols(symbols={}, sets={"lib": ("ghost",)})

    def test_counters_for_unknown_set_raise(self) -> None:
        with pytest.raises(ValueError, match="counters for unknown sets"):
            DesiredSymbols(symbols={}, sets={}, counters={"lib": SetCounters()})

    def test_negative_counter_raises(self) -> None:
        with pytest.raises(ValueError, match="branches_found must be >= 0"):
            SetCounters(branches_found=-1)
