"""Tests for domain/model/symbol.py."""

import pytest

from covreport.domain.model.instruction import Instruction
from covreport.domain.model.symbol import SymbolInformation, SymbolStats
from tests.factories import make_coverage_map, make_symbol


class TestSymbolStats:
    """Tests for SymbolStats."""

    def test_branches_total(self) -> None:
        stats = SymbolStats(
            size_in_bytes=10,
            branches_executed=3,
            branches_always_taken=1,
            branches_never_taken=2,
            branches_not_executed=4,
        )
        assert stats.branches_total == 10

    def test_percent_uncovered_bytes(self) -> None:
        stats = SymbolStats(size_in_bytes=8, uncovered_bytes=2)
        assert stats.percent_uncovered_bytes == 25.0

    def test_percentages_with_zero_totals(self) -> None:
        stats = SymbolStats(size_in_bytes=0)
        assert stats.percent_uncovered_bytes == 0.0
        assert stats.percent_uncovered_instructions == 0.0
        assert stats.percent_branches_covered is None

    def test_percent_branches_covered(self) -> None:
        stats = SymbolStats(size_in_bytes=4, branches_executed=3, branches_never_taken=1)
        assert stats.percent_branches_covered == 75.0

    def test_negative_counter_raises(self) -> None:
        with pytest.raises(ValueError, match="uncovered_ranges must be >= 0"):
            SymbolStats(size_in_bytes=4, uncovered_ranges=-1)

    def test_uncovered_bytes_exceed_size_raises(self) -> None:
        with pytest.raises(ValueError, match="uncovered_bytes"):
            SymbolStats(size_in_bytes=4, uncovered_bytes=5)

    def test_uncovered_instructions_exceed_total_raises(self) -> None:
        with pytest.raises(ValueError, match="uncovered_instructions"):
            SymbolStats(size_in_bytes=4, size_in_instructions=1, uncovered_instructions=2)


class TestSymbolInformation:
    """Tests for SymbolInformation."""

    def test_referenced_symbol(self) -> None:
        info = make_symbol("foo", size=12)
        assert info.was_referenced
        assert info.size_in_bytes == 12

    def test_unreferenced_symbol(self) -> None:
        info = make_symbol("foo", referenced=False)
        assert not info.was_referenced
        assert info.unified_coverage_map is None

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            SymbolInformation(name="", instructions=(), base_address=0, stats=SymbolStats(size_in_bytes=0))

    def test_coverage_without_map_raises(self) -> None:
        referenced = make_symbol("foo")
        with pytest.raises(ValueError, match="no unified coverage map"):
            SymbolInformation(
                name="foo",
                instructions=(),
                base_address=0,
                stats=SymbolStats(size_in_bytes=4),
                coverage=referenced.coverage,
            )

    def test_map_without_coverage_is_allowed(self) -> None:
        info = make_symbol("foo", referenced=False, coverage_map=make_coverage_map(4))
        assert info.unified_coverage_map is not None
        assert not info.was_referenced


class TestInstruction:
    """Tests for Instruction."""

    def test_defaults_to_real_instruction(self) -> None:
        assert Instruction(address=0, line="nop").is_instruction

    def test_negative_address_raises(self) -> None:
        with pytest.raises(ValueError, match="address must be >= 0"):
            Instruction(address=-1, line="nop")
