"""Simulation engine: generation driver, per-generation metrics, and Parquet persistence."""

from spatial_dilemma.simulation.engine import (
    FrameSink,
    deterministic_run_id,
    iter_generations,
    run_and_record,
    run_simulation,
)
from spatial_dilemma.simulation.persistence import flush_metric_columns
from spatial_dilemma.simulation.step import (
    compute_generation_metrics,
    same_strategy_adjacency_fraction,
    strategy_changes,
)

__all__ = [
    "FrameSink",
    "compute_generation_metrics",
    "deterministic_run_id",
    "flush_metric_columns",
    "iter_generations",
    "run_and_record",
    "run_simulation",
    "same_strategy_adjacency_fraction",
    "strategy_changes",
]
