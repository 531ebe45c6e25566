"""I/O layer: grid file format, output paths, and Parquet schemas."""

from spatial_dilemma.io.loader import format_grid, load_grid, parse_grid
from spatial_dilemma.io.paths import resolve_within_base

__all__ = [
    "format_grid",
    "load_grid",
    "parse_grid",
    "resolve_within_base",
]
