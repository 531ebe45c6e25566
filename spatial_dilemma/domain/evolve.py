"""Imitate-the-best strategy update.

Every cell adopts the strategy of the highest-scoring cell in its clipped
3x3 neighborhood (itself included), reading a fully scored generation.
"""

from __future__ import annotations

from spatial_dilemma.config.constants import SCORE_FLOOR
from spatial_dilemma.domain.grid import Generation, Grid
from spatial_dilemma.domain.strategy import Strategy


def best_neighbor(generation: Generation, row: int, col: int) -> tuple[int, int]:
    """Return the position whose strategy ``(row, col)`` adopts next.

    The running maximum starts at ``SCORE_FLOOR``. Only a strictly greater
    score replaces the current best, so among equal maxima the first cell in
    scan order wins. When no cell clears the floor, the last cell scoring at
    least ``SCORE_FLOOR`` is chosen; failing that, the cell itself.
    """
    best_score = SCORE_FLOOR
    best: tuple[int, int] | None = None
    fallback: tuple[int, int] | None = None
    for nr, nc in generation.neighborhood(row, col):
        score = generation.scores[nr][nc]
        if score > best_score:
            best_score = score
            best = (nr, nc)
        if score >= SCORE_FLOOR:
            fallback = (nr, nc)
    if best is not None:
        return best
    if fallback is not None:
        return fallback
    return row, col


def next_strategy(generation: Generation, row: int, col: int) -> Strategy:
    """Strategy cell ``(row, col)`` holds in the next generation."""
    nr, nc = best_neighbor(generation, row, col)
    return generation.grid.cells[nr][nc]


def evolve_grid(generation: Generation) -> Grid:
    """Build the next generation's grid; *generation* is only read."""
    grid = generation.grid
    return Grid(
        width=grid.width,
        height=grid.height,
        cells=tuple(
            tuple(next_strategy(generation, row, col) for col in range(grid.width))
            for row in range(grid.height)
        ),
    )
