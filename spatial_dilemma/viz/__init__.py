"""Visualization layer: themes, generation frames, animations, and sweep plots."""

from spatial_dilemma.viz.render import (
    GenerationRenderer,
    build_strategy_array,
    draw_generation,
    render_payoff_sweep,
)
from spatial_dilemma.viz.theme import (
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DEFAULT_THEME",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "GenerationRenderer",
    "Theme",
    "build_strategy_array",
    "draw_generation",
    "get_theme",
    "render_payoff_sweep",
]
