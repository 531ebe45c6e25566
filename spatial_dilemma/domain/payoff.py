"""Neighborhood payoff scoring.

Each cell plays against every member of its clipped 3x3 neighborhood,
itself included:

=========  =========  ============
self       other      contribution
=========  =========  ============
C          C          +1
C          D          0
D          C          +b
D          D          0
=========  =========  ============

A cooperator always collects +1 from itself, so exactly 1 is subtracted
from a cooperator's total afterwards. A defector's self-contribution is 0
and receives no correction.
"""

from __future__ import annotations

from spatial_dilemma.domain.grid import Generation, Grid, ScoreLayer, neighborhood
from spatial_dilemma.domain.strategy import Strategy

COOPERATOR_SELF_CORRECTION = 1.0


def _contribution(own: Strategy, other: Strategy, payoff: float) -> float:
    if other is not Strategy.COOPERATE:
        return 0.0
    return 1.0 if own is Strategy.COOPERATE else payoff


def score_cell(grid: Grid, row: int, col: int, payoff: float) -> float:
    """Score one in-range cell against its clipped neighborhood."""
    own = grid.cells[row][col]
    total = 0.0
    for nr, nc in neighborhood(grid.height, grid.width, row, col):
        total += _contribution(own, grid.cells[nr][nc], payoff)
    if own is Strategy.COOPERATE:
        total -= COOPERATOR_SELF_CORRECTION
    return total


def score_grid(grid: Grid, payoff: float) -> ScoreLayer:
    """Compute the complete score layer for *grid*."""
    return tuple(
        tuple(score_cell(grid, row, col, payoff) for col in range(grid.width))
        for row in range(grid.height)
    )


def score_generation(grid: Grid, payoff: float, index: int = 0) -> Generation:
    """Score every cell of *grid* and freeze the result as a generation."""
    return Generation(index=index, grid=grid, scores=score_grid(grid, payoff))
