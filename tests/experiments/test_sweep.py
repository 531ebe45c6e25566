"""Tests for spatial_dilemma.experiments.sweep module."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq
import pytest

from spatial_dilemma.config.types import SweepConfig
from spatial_dilemma.domain.grid import Grid
from spatial_dilemma.domain.strategy import Strategy
from spatial_dilemma.experiments import sweep
from spatial_dilemma.experiments.sweep import run_payoff_sweep
from spatial_dilemma.io.schemas import PAYOFF_SWEEP_SCHEMA


def _single_defector() -> Grid:
    return Grid.uniform(width=3, height=3, strategy=Strategy.COOPERATE).replace(
        1, 1, Strategy.DEFECT
    )


class TestRunPayoffSweep:
    def test_one_result_per_payoff(self, tmp_path: Path) -> None:
        config = SweepConfig(payoff_values=(0.0, 2.0), steps=3)
        results = run_payoff_sweep(_single_defector(), config, out_dir=tmp_path)

        assert [r.payoff for r in results] == [0.0, 2.0]
        low, high = results
        assert low.final_cooperator_fraction == 1.0
        assert low.fixed_point_at == 1
        assert high.final_cooperators == 0
        assert high.fixed_point_at == 1
        assert low.run_id == "sweep_b0_n3"

    def test_writes_sweep_table(self, tmp_path: Path) -> None:
        config = SweepConfig(payoff_values=(0.0, 2.0), steps=3)
        run_payoff_sweep(_single_defector(), config, out_dir=tmp_path, stem="grid")

        table = pq.read_table(tmp_path / "logs" / "payoff_sweep.parquet")
        assert table.schema.names == PAYOFF_SWEEP_SCHEMA.names
        assert table.column("payoff").to_pylist() == [0.0, 2.0]
        assert table.column("run_id").to_pylist() == ["grid_b0_n3", "grid_b2_n3"]
        mean_scores = table.column("final_mean_score").to_pylist()
        assert mean_scores[0] == pytest.approx(40 / 9)
        assert mean_scores[1] == 0.0

    def test_near_equal_payoffs_get_distinct_run_ids(self, tmp_path: Path) -> None:
        config = SweepConfig(payoff_values=(1.0000001, 1.0000002), steps=1)
        run_payoff_sweep(_single_defector(), config, out_dir=tmp_path)
        run_ids = pq.read_table(tmp_path / "logs" / "payoff_sweep.parquet").column("run_id")
        assert len(set(run_ids.to_pylist())) == 2

    def test_zero_steps_reports_initial_grid(self, tmp_path: Path) -> None:
        config = SweepConfig(payoff_values=(1.5,), steps=0)
        (result,) = run_payoff_sweep(_single_defector(), config, out_dir=tmp_path)
        assert result.final_cooperators == 8
        assert result.fixed_point_at is None

    def test_rejects_oversized_workload(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(sweep, "MAX_SWEEP_WORK_UNITS", 10)
        config = SweepConfig(payoff_values=(1.0, 2.0), steps=3)
        with pytest.raises(ValueError, match="safety threshold"):
            run_payoff_sweep(_single_defector(), config, out_dir=tmp_path)
