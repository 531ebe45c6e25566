"""Visualization theme presets for generation renderers.

Themes are frozen dataclasses that group all styling constants together so
palettes can be swapped via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass

from spatial_dilemma.config.constants import CANVAS_SIZE_PX, RENDER_DPI


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    cooperate_color: str = "#0000FF"
    defect_color: str = "#FF0000"
    canvas_size_px: int = CANVAS_SIZE_PX
    dpi: int = RENDER_DPI

    # Sweep plot
    sweep_line_color: str = "tab:blue"

    def __post_init__(self) -> None:
        if self.canvas_size_px < 1:
            raise ValueError("canvas_size_px must be >= 1")
        if self.dpi < 1:
            raise ValueError("dpi must be >= 1")

    @property
    def canvas_inches(self) -> float:
        return self.canvas_size_px / self.dpi


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    cooperate_color="#1f77b4",
    defect_color="#d62728",
    sweep_line_color="#1f77b4",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
