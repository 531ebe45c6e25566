"""Configuration dataclasses for single runs and payoff sweeps.

All frozen dataclasses that parameterise the generation driver, the
renderer hand-off, and payoff sweeps live here.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from spatial_dilemma.config.constants import (
    DEFAULT_FPS,
    DEFAULT_OUTPUT_STEM,
    DEFAULT_PAYOFF,
    DEFAULT_STEPS,
    MAX_SWEEP_WORK_UNITS,
)

__all__ = [
    "MAX_SWEEP_WORK_UNITS",
    "SimulationConfig",
    "SimulationResult",
    "SweepConfig",
    "validate_payoff",
    "validate_steps",
]

_SAFE_STEM_RE = re.compile(r"^[A-Za-z0-9_\-]+$")

# ---------------------------------------------------------------------------
# Shared validators
# ---------------------------------------------------------------------------


def validate_payoff(payoff: float) -> None:
    """Reject a defection-advantage factor that is negative or not finite."""
    if isinstance(payoff, bool) or not isinstance(payoff, (int, float)):
        raise ValueError(f"payoff must be a real number, got {payoff!r}")
    if not math.isfinite(payoff):
        raise ValueError("payoff must be finite")
    if payoff < 0:
        raise ValueError("payoff must be >= 0")


def validate_steps(steps: int) -> None:
    """Reject a generation count that is negative or not an integer."""
    if isinstance(steps, bool) or not isinstance(steps, int):
        raise ValueError(f"steps must be an integer, got {steps!r}")
    if steps < 0:
        raise ValueError("steps must be >= 0")


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one evolved payoff value."""

    run_id: str
    payoff: float
    steps: int
    final_cooperators: int
    final_cooperator_fraction: float
    fixed_point_at: int | None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime knobs for one recorded run."""

    payoff: float = DEFAULT_PAYOFF
    steps: int = DEFAULT_STEPS
    output_stem: str = DEFAULT_OUTPUT_STEM
    fps: int = DEFAULT_FPS
    write_metrics: bool = True
    render_images: bool = True

    def __post_init__(self) -> None:
        validate_payoff(self.payoff)
        validate_steps(self.steps)
        if not _SAFE_STEM_RE.match(self.output_stem):
            raise ValueError(f"Unsafe output_stem for filename: {self.output_stem!r}")
        if self.fps < 1:
            raise ValueError("fps must be >= 1")


@dataclass(frozen=True)
class SweepConfig:
    """Payoff sweep parameters: one unrendered run per payoff value."""

    payoff_values: tuple[float, ...] = (1.0, 1.5, 1.85, 2.0, 2.5)
    steps: int = DEFAULT_STEPS

    def __post_init__(self) -> None:
        if not self.payoff_values:
            raise ValueError("payoff_values must not be empty")
        for payoff in self.payoff_values:
            validate_payoff(payoff)
        if len(set(self.payoff_values)) != len(self.payoff_values):
            raise ValueError("payoff_values must include distinct values")
        validate_steps(self.steps)

    def work_units(self, n_cells: int) -> int:
        """Total cell updates the sweep would perform on a grid of *n_cells*."""
        return n_cells * max(self.steps, 1) * len(self.payoff_values)
