"""Text grid format reader and writer.

Format::

    <rows> <cols>
    CCDCC
    CDDDC
    ...

The header holds the number of rows (lines that follow) and then the number
of columns (characters per line). Each of the next ``rows`` lines supplies
one ``C``/``D`` marker per column. Content past ``cols`` characters and
lines past ``rows`` are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from spatial_dilemma.domain.grid import Grid
from spatial_dilemma.domain.strategy import Strategy


def _parse_header(header: str) -> tuple[int, int]:
    tokens = header.split()
    if len(tokens) != 2:
        raise ValueError(f"line 1: expected '<rows> <cols>', got {header!r}")
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError as exc:
        raise ValueError(f"line 1: grid dimensions must be integers, got {header!r}") from exc
    if rows < 1 or cols < 1:
        raise ValueError(f"line 1: grid dimensions must be >= 1, got {rows}x{cols}")
    return rows, cols


def parse_grid(lines: Iterable[str]) -> Grid:
    """Parse header plus marker lines into a grid."""
    raw = [line.rstrip("\r\n") for line in lines]
    if not any(line.strip() for line in raw):
        raise ValueError("grid description is empty")
    rows, cols = _parse_header(raw[0])

    body = raw[1:]
    if len(body) < rows:
        raise ValueError(f"expected {rows} grid lines after the header, got {len(body)}")

    cells: list[tuple[Strategy, ...]] = []
    for offset, line in enumerate(body[:rows]):
        line_number = offset + 2
        if len(line) < cols:
            raise ValueError(f"line {line_number}: expected {cols} markers, got {len(line)}")
        try:
            cells.append(tuple(Strategy.from_marker(ch) for ch in line[:cols]))
        except ValueError as exc:
            raise ValueError(f"line {line_number}: {exc}") from exc
    return Grid(width=cols, height=rows, cells=tuple(cells))


def load_grid(path: Path) -> Grid:
    """Read a grid description file."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_grid(text.splitlines())


def format_grid(grid: Grid) -> str:
    """Serialize *grid* in the format accepted by :func:`parse_grid`."""
    return "\n".join([f"{grid.height} {grid.width}", *grid.to_markers()]) + "\n"
