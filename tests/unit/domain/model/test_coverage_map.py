"""Tests for domain/model/coverage_map.py."""

import pytest

from covreport.domain.model.coverage_map import CoverageMap
from covreport.domain.ports.coverage_map import CoverageMapProtocol
from tests.factories import make_coverage_map


class TestCoverageMapQueries:
    """Tests for coverage queries."""

    def test_executed(self) -> None:
        coverage_map = make_coverage_map(4, not_executed=[2])
        assert coverage_map.was_executed(0)
        assert not coverage_map.was_executed(2)

    def test_offset_outside_map_never_executed(self) -> None:
        coverage_map = make_coverage_map(4)
        assert not coverage_map.was_executed(4)
        assert not coverage_map.was_executed(-1)
        assert not coverage_map.is_branch(100)

    def test_always_taken(self) -> None:
        coverage_map = make_coverage_map(8, always_taken=[4])
        assert coverage_map.is_branch(4)
        assert coverage_map.was_always_taken(4)
        assert not coverage_map.was_never_taken(4)

    def test_never_taken(self) -> None:
        coverage_map = make_coverage_map(8, never_taken=[4])
        assert coverage_map.was_never_taken(4)
        assert not coverage_map.was_always_taken(4)

    def test_both_outcomes_seen(self) -> None:
        coverage_map = make_coverage_map(8, branches=[4])
        assert coverage_map.is_branch(4)
        assert not coverage_map.was_always_taken(4)
        assert not coverage_map.was_never_taken(4)

    def test_satisfies_protocol(self) -> None:
        coverage_map: CoverageMapProtocol = make_coverage_map(1)
        assert coverage_map.was_executed(0)


class TestCoverageMapFailFirst:
    """Tests for FAIL-FIRST validation in CoverageMap."""

    def test_negative_size_raises(self) -> None:
        with pytest.raises(ValueError, match="size must be >= 0"):
            CoverageMap(size=-1)

    def test_offset_outside_size_raises(self) -> None:
        with pytest.raises(ValueError, match="executed offsets outside"):
            CoverageMap(size=2, executed=frozenset({2}))

    def test_taken_must_be_branch(self) -> None:
        with pytest.raises(ValueError, match="must be branches"):
            CoverageMap(size=4, taken=frozenset({1}))
