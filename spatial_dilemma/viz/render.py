"""Matplotlib-based rendering of generations and payoff sweeps."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pyarrow.parquet as pq  # noqa: E402
from matplotlib import animation  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.image import AxesImage  # noqa: E402

from spatial_dilemma.domain.grid import Grid  # noqa: E402
from spatial_dilemma.domain.strategy import Strategy  # noqa: E402
from spatial_dilemma.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

COOPERATE_INDEX = 0
DEFECT_INDEX = 1

# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def build_strategy_array(grid: Grid) -> np.ndarray:
    """Return (H, W) int array: 0 for cooperators, 1 for defectors."""
    array = np.full((grid.height, grid.width), COOPERATE_INDEX, dtype=np.uint8)
    for row, col in grid.positions():
        if grid.cells[row][col] is Strategy.DEFECT:
            array[row, col] = DEFECT_INDEX
    return array


def _strategy_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 2-color colormap (cooperate, defect)."""
    cmap = ListedColormap([theme.cooperate_color, theme.defect_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _new_canvas(theme: Theme) -> tuple[plt.Figure, plt.Axes]:
    """Square figure of ``theme.canvas_size_px`` pixels with one full-bleed axes."""
    fig = plt.figure(figsize=(theme.canvas_inches, theme.canvas_inches), dpi=theme.dpi)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.set_axis_off()
    return fig, ax


def draw_generation(ax: plt.Axes, frame: np.ndarray, theme: Theme = DEFAULT_THEME) -> AxesImage:
    """Fill *ax* with one rectangle per cell, stretched to cover the canvas.

    Rows run top to bottom and columns left to right, so cell ``(row, col)``
    occupies the ``col``-th slot horizontally and the ``row``-th vertically.
    """
    cmap, norm = _strategy_cmap(theme)
    h, w = frame.shape
    img = ax.imshow(
        frame,
        cmap=cmap,
        norm=norm,
        origin="upper",
        aspect="auto",
        interpolation="nearest",
        extent=(0, w, h, 0),
    )
    ax.set_xlim(0, w)
    ax.set_ylim(h, 0)
    return img


# ---------------------------------------------------------------------------
# GenerationRenderer
# ---------------------------------------------------------------------------


class GenerationRenderer:
    """Collect one frame per generation, then write a still and an animation."""

    def __init__(self, theme: Theme = DEFAULT_THEME) -> None:
        self.theme = theme
        self._frames: list[np.ndarray] = []

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    def add(self, grid: Grid) -> None:
        """Append *grid* as the next frame; all frames must share one shape."""
        frame = build_strategy_array(grid)
        if self._frames and frame.shape != self._frames[0].shape:
            raise ValueError(
                f"frame shape {frame.shape} does not match {self._frames[0].shape}"
            )
        self._frames.append(frame)

    def _require_frames(self) -> None:
        if not self._frames:
            raise ValueError("No frames to render; add at least one generation")

    def save_still(self, output_path: Path) -> None:
        """Write the most recent frame as a PNG."""
        self._require_frames()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig, ax = _new_canvas(self.theme)
        draw_generation(ax, self._frames[-1], self.theme)
        fig.savefig(output_path, dpi=self.theme.dpi)
        plt.close(fig)

    def save_animation(self, output_path: Path, fps: int) -> None:
        """Write every collected frame, in order, as a GIF."""
        self._require_frames()
        if fps < 1:
            raise ValueError("fps must be >= 1")
        output_path = Path(output_path)
        if output_path.suffix.lower() != ".gif":
            raise ValueError(f"animation output must be a .gif file, got {output_path.name!r}")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig, ax = _new_canvas(self.theme)
        img = draw_generation(ax, self._frames[0], self.theme)
        frames = self._frames

        def update(frame_index: int) -> tuple[Any, ...]:
            img.set_data(frames[frame_index])
            return (img,)

        anim = animation.FuncAnimation(
            fig, update, frames=len(frames), interval=max(1, int(1000 / fps)), blit=False
        )
        anim.save(output_path, writer=animation.PillowWriter(fps=fps), dpi=self.theme.dpi)
        plt.close(fig)


# ---------------------------------------------------------------------------
# render_payoff_sweep
# ---------------------------------------------------------------------------


def render_payoff_sweep(
    sweep_path: Path,
    output_path: Path,
    theme: Theme = DEFAULT_THEME,
) -> None:
    """Plot final cooperator fraction against the payoff ``b``."""
    table = pq.read_table(sweep_path, columns=["payoff", "final_cooperator_fraction"])
    if table.num_rows == 0:
        raise ValueError(f"No sweep rows found in {sweep_path}")
    payoffs = np.asarray(table.column("payoff").to_pylist(), dtype=float)
    fractions = np.asarray(table.column("final_cooperator_fraction").to_pylist(), dtype=float)
    order = np.argsort(payoffs)

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.plot(payoffs[order], fractions[order], marker="o", color=theme.sweep_line_color)
    ax.set_xlabel("Defection advantage b")
    ax.set_ylabel("Final cooperator fraction")
    ax.set_ylim(-0.02, 1.02)
    ax.set_title("Cooperation vs. payoff")
    fig.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, bbox_inches="tight")
    plt.close(fig)
