"""Tests for spatial_dilemma.config.types module."""

from __future__ import annotations

import pytest

from spatial_dilemma.config.types import (
    SimulationConfig,
    SweepConfig,
    validate_payoff,
    validate_steps,
)


class TestValidators:
    @pytest.mark.parametrize("payoff", [0, 0.0, 1, 1.85, 10.0])
    def test_accepts_payoff(self, payoff: float) -> None:
        validate_payoff(payoff)

    @pytest.mark.parametrize("payoff", [-0.01, float("nan"), float("inf"), True, "1.5", None])
    def test_rejects_payoff(self, payoff: object) -> None:
        with pytest.raises(ValueError, match="payoff"):
            validate_payoff(payoff)  # type: ignore[arg-type]

    @pytest.mark.parametrize("steps", [-1, 1.0, False, "3"])
    def test_rejects_steps(self, steps: object) -> None:
        with pytest.raises(ValueError, match="steps"):
            validate_steps(steps)  # type: ignore[arg-type]

    def test_accepts_zero_steps(self) -> None:
        validate_steps(0)


class TestSimulationConfig:
    def test_defaults(self) -> None:
        config = SimulationConfig()
        assert config.payoff == 1.85
        assert config.steps == 80
        assert config.output_stem == "Prisoners"
        assert config.write_metrics is True
        assert config.render_images is True

    @pytest.mark.parametrize("stem", ["", "../escape", "a b", "x/y"])
    def test_rejects_unsafe_stem(self, stem: str) -> None:
        with pytest.raises(ValueError, match="output_stem"):
            SimulationConfig(output_stem=stem)

    def test_rejects_zero_fps(self) -> None:
        with pytest.raises(ValueError, match="fps"):
            SimulationConfig(fps=0)

    def test_rejects_negative_payoff(self) -> None:
        with pytest.raises(ValueError, match="payoff"):
            SimulationConfig(payoff=-1.0)


class TestSweepConfig:
    def test_work_units(self) -> None:
        config = SweepConfig(payoff_values=(1.0, 2.0, 3.0), steps=10)
        assert config.work_units(n_cells=25) == 25 * 10 * 3

    def test_zero_steps_counts_one_generation(self) -> None:
        assert SweepConfig(payoff_values=(1.0,), steps=0).work_units(4) == 4

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            SweepConfig(payoff_values=())

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="distinct"):
            SweepConfig(payoff_values=(1.5, 1.5))

    def test_rejects_negative_payoff(self) -> None:
        with pytest.raises(ValueError, match="payoff"):
            SweepConfig(payoff_values=(1.0, -2.0))
