"""Domain layer: strategies, bounded grid, payoff scoring, and strategy update."""

from spatial_dilemma.domain.evolve import best_neighbor, evolve_grid, next_strategy
from spatial_dilemma.domain.grid import Generation, Grid, ScoreLayer, neighborhood
from spatial_dilemma.domain.payoff import score_cell, score_generation, score_grid
from spatial_dilemma.domain.strategy import Strategy

__all__ = [
    "Generation",
    "Grid",
    "ScoreLayer",
    "Strategy",
    "best_neighbor",
    "evolve_grid",
    "neighborhood",
    "next_strategy",
    "score_cell",
    "score_generation",
    "score_grid",
]
