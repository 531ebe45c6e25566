"""Experiments layer: payoff sweeps over a fixed initial grid."""

from spatial_dilemma.experiments.sweep import run_payoff_sweep

__all__ = [
    "run_payoff_sweep",
]
