"""Tests for spatial_dilemma.domain.grid module."""

from __future__ import annotations

import pytest

from spatial_dilemma.domain.grid import Generation, Grid, neighborhood
from spatial_dilemma.domain.strategy import Strategy

C = Strategy.COOPERATE
D = Strategy.DEFECT


class TestGridConstruction:
    def test_from_rows_infers_dimensions(self) -> None:
        grid = Grid.from_rows([[C, D, C], [D, D, C]])
        assert grid.height == 2
        assert grid.width == 3
        assert grid.strategy_at(1, 2) is C

    def test_uniform(self) -> None:
        grid = Grid.uniform(width=4, height=2, strategy=D)
        assert grid.count(D) == 8
        assert grid.count(C) == 0

    def test_rejects_ragged_rows(self) -> None:
        with pytest.raises(ValueError, match="row 1 has 2 cells"):
            Grid.from_rows([[C, C, C], [C, C]])

    def test_rejects_row_count_mismatch(self) -> None:
        with pytest.raises(ValueError, match="expected 3 rows"):
            Grid(width=1, height=3, cells=((C,), (C,)))

    def test_rejects_non_strategy_values(self) -> None:
        with pytest.raises(ValueError, match="non-strategy"):
            Grid.from_rows([[C, "D"]])  # type: ignore[list-item]

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            Grid.from_rows([])

    def test_replace_returns_new_grid(self) -> None:
        grid = Grid.uniform(width=3, height=3, strategy=C)
        changed = grid.replace(1, 1, D)
        assert grid.strategy_at(1, 1) is C
        assert changed.strategy_at(1, 1) is D
        assert changed.count(D) == 1

    def test_replace_out_of_bounds(self) -> None:
        grid = Grid.uniform(width=2, height=2, strategy=C)
        with pytest.raises(ValueError, match="outside"):
            grid.replace(2, 0, D)

    def test_to_markers(self) -> None:
        grid = Grid.from_rows([[C, D], [D, C]])
        assert grid.to_markers() == ["CD", "DC"]

    def test_positions_are_row_major(self) -> None:
        grid = Grid.uniform(width=2, height=2, strategy=C)
        assert list(grid.positions()) == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_equality_by_value(self) -> None:
        assert Grid.from_rows([[C, D]]) == Grid.from_rows([[C, D]])
        assert Grid.from_rows([[C, D]]) != Grid.from_rows([[D, C]])


class TestNeighborhood:
    def test_corner_edge_interior_sizes(self) -> None:
        height, width = 4, 5
        for row in range(height):
            for col in range(width):
                size = len(list(neighborhood(height, width, row, col)))
                on_row_edge = row in (0, height - 1)
                on_col_edge = col in (0, width - 1)
                if on_row_edge and on_col_edge:
                    assert size == 4
                elif on_row_edge or on_col_edge:
                    assert size == 6
                else:
                    assert size == 9

    def test_single_cell_grid(self) -> None:
        assert list(neighborhood(1, 1, 0, 0)) == [(0, 0)]

    def test_single_row_grid(self) -> None:
        assert list(neighborhood(1, 4, 0, 0)) == [(0, 0), (0, 1)]
        assert list(neighborhood(1, 4, 0, 2)) == [(0, 1), (0, 2), (0, 3)]

    def test_scan_order_includes_self(self) -> None:
        assert list(neighborhood(3, 3, 1, 1)) == [
            (0, 0),
            (0, 1),
            (0, 2),
            (1, 0),
            (1, 1),
            (1, 2),
            (2, 0),
            (2, 1),
            (2, 2),
        ]

    def test_no_wraparound(self) -> None:
        cells = set(neighborhood(5, 5, 0, 4))
        assert cells == {(0, 3), (0, 4), (1, 3), (1, 4)}


class TestGeneration:
    def test_score_at(self) -> None:
        grid = Grid.from_rows([[C, D]])
        generation = Generation(index=0, grid=grid, scores=((0.0, 1.5),))
        assert generation.score_at(0, 1) == 1.5

    def test_rejects_mismatched_scores(self) -> None:
        grid = Grid.from_rows([[C, D]])
        with pytest.raises(ValueError, match="grid shape"):
            Generation(index=0, grid=grid, scores=((0.0,),))

    def test_rejects_negative_index(self) -> None:
        grid = Grid.from_rows([[C]])
        with pytest.raises(ValueError, match="index"):
            Generation(index=-1, grid=grid, scores=((0.0,),))
