"""Tests for spatial_dilemma.domain.strategy module."""

from __future__ import annotations

import pytest

from spatial_dilemma.domain.strategy import Strategy


class TestStrategy:
    def test_exactly_two_variants(self) -> None:
        assert {s.value for s in Strategy} == {"C", "D"}

    def test_from_marker(self) -> None:
        assert Strategy.from_marker("C") is Strategy.COOPERATE
        assert Strategy.from_marker("D") is Strategy.DEFECT

    @pytest.mark.parametrize("marker", ["c", "d", "X", "", "CD", " "])
    def test_from_marker_rejects_other_values(self, marker: str) -> None:
        with pytest.raises(ValueError, match="invalid strategy marker"):
            Strategy.from_marker(marker)

    def test_marker_property(self) -> None:
        assert Strategy.COOPERATE.marker == "C"
        assert Strategy.DEFECT.marker == "D"
