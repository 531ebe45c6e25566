"""Configuration layer: constants and typed config dataclasses."""

from spatial_dilemma.config.constants import (
    CANVAS_SIZE_PX,
    COOPERATE_MARKER,
    DEFAULT_FPS,
    DEFAULT_OUTPUT_STEM,
    DEFAULT_PAYOFF,
    DEFAULT_STEPS,
    DEFECT_MARKER,
    FLUSH_THRESHOLD,
    MAX_SWEEP_WORK_UNITS,
    RENDER_DPI,
    SCORE_FLOOR,
)
from spatial_dilemma.config.types import (
    SimulationConfig,
    SimulationResult,
    SweepConfig,
    validate_payoff,
    validate_steps,
)

__all__ = [
    "CANVAS_SIZE_PX",
    "COOPERATE_MARKER",
    "DEFAULT_FPS",
    "DEFAULT_OUTPUT_STEM",
    "DEFAULT_PAYOFF",
    "DEFAULT_STEPS",
    "DEFECT_MARKER",
    "FLUSH_THRESHOLD",
    "MAX_SWEEP_WORK_UNITS",
    "RENDER_DPI",
    "SCORE_FLOOR",
    "SimulationConfig",
    "SimulationResult",
    "SweepConfig",
    "validate_payoff",
    "validate_steps",
]
