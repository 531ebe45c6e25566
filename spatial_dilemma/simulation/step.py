"""Per-generation metric computation helpers for the generation driver."""

from __future__ import annotations

from spatial_dilemma.domain.grid import Generation, Grid
from spatial_dilemma.domain.strategy import Strategy


def strategy_changes(previous: Grid, current: Grid) -> int:
    """Count cells whose strategy differs between two same-shaped grids."""
    if (previous.width, previous.height) != (current.width, current.height):
        raise ValueError("grids must share dimensions")
    return sum(
        1
        for prev_row, curr_row in zip(previous.cells, current.cells, strict=True)
        for before, after in zip(prev_row, curr_row, strict=True)
        if before is not after
    )


def same_strategy_adjacency_fraction(grid: Grid) -> float:
    """Fraction of orthogonally adjacent cell pairs sharing a strategy.

    Pairs are counted once and never wrap around the edges. Returns NaN for
    a 1x1 grid, which has no pairs.
    """
    same = 0
    total = 0
    for row, col in grid.positions():
        strategy = grid.cells[row][col]
        for nr, nc in ((row + 1, col), (row, col + 1)):
            if not grid.in_bounds(nr, nc):
                continue
            total += 1
            if grid.cells[nr][nc] is strategy:
                same += 1
    if total == 0:
        return float("nan")
    return same / total


def compute_generation_metrics(
    generation: Generation, previous: Grid | None
) -> dict[str, float | int | None]:
    """Compute summary metric values for one scored generation."""
    grid = generation.grid
    n_cells = grid.width * grid.height
    cooperators = grid.count(Strategy.COOPERATE)
    flat_scores = [score for row in generation.scores for score in row]
    return {
        "cooperators": cooperators,
        "defectors": n_cells - cooperators,
        "cooperator_fraction": cooperators / n_cells,
        "mean_score": sum(flat_scores) / n_cells,
        "max_score": max(flat_scores),
        "strategy_changes": None if previous is None else strategy_changes(previous, grid),
        "same_strategy_adjacency_fraction": same_strategy_adjacency_fraction(grid),
    }
