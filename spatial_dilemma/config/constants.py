"""Centralized domain constants for spatial dilemma runs.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

COOPERATE_MARKER = "C"
"""Input/output character for a cooperating cell."""

DEFECT_MARKER = "D"
"""Input/output character for a defecting cell."""

DEFAULT_PAYOFF = 1.85
"""Default defection-advantage factor ``b``."""

DEFAULT_STEPS = 80
"""Default number of generations to evolve."""

SCORE_FLOOR = 0.0
"""Initial running maximum in the best-neighbor search.

A neighbor must score strictly above this value to be chosen by the
ordinary tie-break; neighborhoods where nobody clears it fall back to the
last cell scoring at least this value.
"""

CANVAS_SIZE_PX = 1000
"""Edge length in pixels of every rendered frame (square canvas)."""

RENDER_DPI = 100
"""Figure dpi used to convert ``CANVAS_SIZE_PX`` into inches."""

DEFAULT_FPS = 10
"""Default animation frame rate."""

DEFAULT_OUTPUT_STEM = "Prisoners"
"""File stem of the final still image and the animation."""

FLUSH_THRESHOLD = 4_096
"""Flush generation-metric rows to Parquet once this in-memory row count is reached."""

MAX_SWEEP_WORK_UNITS = 200_000_000
"""Safety cap on total cell updates (cells x generations x payoffs) in one sweep."""
