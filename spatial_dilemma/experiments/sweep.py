"""Payoff sweep orchestration: one unrendered run per ``b`` value."""

from __future__ import annotations

import logging
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from spatial_dilemma.config.constants import MAX_SWEEP_WORK_UNITS
from spatial_dilemma.config.types import SimulationResult, SweepConfig
from spatial_dilemma.domain.grid import Grid
from spatial_dilemma.domain.strategy import Strategy
from spatial_dilemma.io import paths
from spatial_dilemma.io.schemas import PAYOFF_SWEEP_SCHEMA, SWEEP_SCHEMA_VERSION
from spatial_dilemma.simulation.engine import deterministic_run_id, iter_generations
from spatial_dilemma.simulation.step import strategy_changes

logger = logging.getLogger(__name__)


def run_payoff_sweep(
    initial: Grid,
    config: SweepConfig,
    out_dir: Path,
    stem: str = "sweep",
) -> list[SimulationResult]:
    """Evolve *initial* once per payoff value and persist one summary row each."""
    n_cells = initial.width * initial.height
    if config.work_units(n_cells) > MAX_SWEEP_WORK_UNITS:
        raise ValueError("sweep workload exceeds safety threshold; reduce payoffs/steps/grid size")

    out_dir = Path(out_dir)
    paths.logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    results: list[SimulationResult] = []
    rows: list[dict[str, int | str | float | None]] = []
    for payoff in config.payoff_values:
        run_id = deterministic_run_id(stem, payoff, config.steps)
        previous: Grid | None = None
        fixed_point_at: int | None = None
        final_mean_score = 0.0
        final_grid = initial
        for generation in iter_generations(initial, payoff, config.steps):
            if (
                fixed_point_at is None
                and previous is not None
                and strategy_changes(previous, generation.grid) == 0
            ):
                fixed_point_at = generation.index - 1
            previous = generation.grid
            final_grid = generation.grid
            final_mean_score = sum(sum(row) for row in generation.scores) / n_cells

        cooperators = final_grid.count(Strategy.COOPERATE)
        result = SimulationResult(
            run_id=run_id,
            payoff=float(payoff),
            steps=config.steps,
            final_cooperators=cooperators,
            final_cooperator_fraction=cooperators / n_cells,
            fixed_point_at=fixed_point_at,
        )
        results.append(result)
        rows.append(
            {
                "schema_version": SWEEP_SCHEMA_VERSION,
                "run_id": run_id,
                "payoff": result.payoff,
                "steps": config.steps,
                "grid_width": initial.width,
                "grid_height": initial.height,
                "final_cooperators": cooperators,
                "final_cooperator_fraction": result.final_cooperator_fraction,
                "final_mean_score": final_mean_score,
                "fixed_point_at": fixed_point_at,
            }
        )
        logger.info(
            "sweep b=%g: final cooperator fraction %.4f", payoff, result.final_cooperator_fraction
        )

    pq.write_table(
        pa.Table.from_pylist(rows, schema=PAYOFF_SWEEP_SCHEMA), paths.payoff_sweep_path(out_dir)
    )
    return results
