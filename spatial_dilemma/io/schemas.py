"""Parquet schema definitions for run artifacts.

Arrow schemas used for persisting per-generation metrics and payoff sweeps
are centralised here so that every module works against the same column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

# ---------------------------------------------------------------------------
# Schema version constants
# ---------------------------------------------------------------------------

RUN_PAYLOAD_SCHEMA_VERSION = 1
SWEEP_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Per-generation metrics
# ---------------------------------------------------------------------------

GENERATION_METRIC_NAMES = [
    "cooperators",
    "defectors",
    "cooperator_fraction",
    "mean_score",
    "max_score",
    "strategy_changes",
    "same_strategy_adjacency_fraction",
]

GENERATION_METRICS_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("generation", pa.int64()),
        ("cooperators", pa.int64()),
        ("defectors", pa.int64()),
        ("cooperator_fraction", pa.float64()),
        ("mean_score", pa.float64()),
        ("max_score", pa.float64()),
        ("strategy_changes", pa.int64()),
        ("same_strategy_adjacency_fraction", pa.float64()),
    ]
)

# ---------------------------------------------------------------------------
# Payoff sweep
# ---------------------------------------------------------------------------

PAYOFF_SWEEP_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("payoff", pa.float64()),
        ("steps", pa.int64()),
        ("grid_width", pa.int64()),
        ("grid_height", pa.int64()),
        ("final_cooperators", pa.int64()),
        ("final_cooperator_fraction", pa.float64()),
        ("final_mean_score", pa.float64()),
        ("fixed_point_at", pa.int64()),
    ]
)
