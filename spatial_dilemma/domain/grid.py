"""Bounded rectangular strategy grid and its scored generation snapshot.

Coordinates are ``(row, col)`` throughout: ``row`` indexes the lines of the
input file (top to bottom), ``col`` the characters of a line (left to right).
The grid never wraps; neighborhoods are clipped at the edges.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from spatial_dilemma.domain.strategy import Strategy

ScoreLayer = tuple[tuple[float, ...], ...]
"""Row-major per-cell scores matching a grid's shape."""


@dataclass(frozen=True)
class Grid:
    """Immutable ``height`` x ``width`` matrix of strategies."""

    width: int
    height: int
    cells: tuple[tuple[Strategy, ...], ...]

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.height < 1:
            raise ValueError("height must be >= 1")
        if len(self.cells) != self.height:
            raise ValueError(f"expected {self.height} rows, got {len(self.cells)}")
        for row_index, row in enumerate(self.cells):
            if len(row) != self.width:
                raise ValueError(
                    f"row {row_index} has {len(row)} cells, expected {self.width}"
                )
            for strategy in row:
                if not isinstance(strategy, Strategy):
                    raise ValueError(f"row {row_index} holds a non-strategy value {strategy!r}")

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Strategy]]) -> Grid:
        """Build a grid from nested rows; dimensions come from the data."""
        cells = tuple(tuple(row) for row in rows)
        height = len(cells)
        width = len(cells[0]) if cells else 0
        return cls(width=width, height=height, cells=cells)

    @classmethod
    def uniform(cls, width: int, height: int, strategy: Strategy) -> Grid:
        return cls(
            width=width,
            height=height,
            cells=tuple(tuple(strategy for _ in range(width)) for _ in range(height)),
        )

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def strategy_at(self, row: int, col: int) -> Strategy:
        return self.cells[row][col]

    def positions(self) -> Iterator[tuple[int, int]]:
        """Yield every ``(row, col)`` in row-major order."""
        for row in range(self.height):
            for col in range(self.width):
                yield row, col

    def count(self, strategy: Strategy) -> int:
        return sum(row.count(strategy) for row in self.cells)

    def replace(self, row: int, col: int, strategy: Strategy) -> Grid:
        """Return a copy with one cell changed."""
        if not self.in_bounds(row, col):
            raise ValueError(f"({row}, {col}) is outside a {self.height}x{self.width} grid")
        rows = [list(r) for r in self.cells]
        rows[row][col] = strategy
        return Grid.from_rows(rows)

    def to_markers(self) -> list[str]:
        """Render each row as a string of strategy markers."""
        return ["".join(strategy.marker for strategy in row) for row in self.cells]


def neighborhood(height: int, width: int, row: int, col: int) -> Iterator[tuple[int, int]]:
    """Yield the clipped 3x3 block around ``(row, col)``, self included.

    Scan order is rows ascending, then columns ascending. Positions outside
    the grid are skipped entirely.
    """
    for nr in range(row - 1, row + 2):
        if nr < 0 or nr >= height:
            continue
        for nc in range(col - 1, col + 2):
            if 0 <= nc < width:
                yield nr, nc


@dataclass(frozen=True)
class Generation:
    """A strategy grid together with the scores computed for it."""

    index: int
    grid: Grid
    scores: ScoreLayer

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("index must be >= 0")
        if len(self.scores) != self.grid.height or any(
            len(row) != self.grid.width for row in self.scores
        ):
            raise ValueError("scores must match the grid shape")

    def score_at(self, row: int, col: int) -> float:
        return self.scores[row][col]

    def neighborhood(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        return neighborhood(self.grid.height, self.grid.width, row, col)
