"""Path construction helpers for run output directories.

Centralises the directory/file naming conventions used by the generation
driver, the payoff sweep, and the renderer hand-off.
"""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Resolve *path* and ensure it stays within the trusted *base_dir*.

    Raises :exc:`ValueError` if the resolved path escapes the base directory.
    """
    candidate = path if path.is_absolute() else base_dir / path
    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()
    if resolved != base_resolved and base_resolved not in resolved.parents:
        raise ValueError(f"Path escapes base_dir: {path}")
    return resolved


def runs_dir(out_dir: Path) -> Path:
    """Return path to the run-payload subdirectory within an output directory."""
    return out_dir / "runs"


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def generation_metrics_path(out_dir: Path) -> Path:
    """Return path to the per-generation metrics Parquet file."""
    return logs_dir(out_dir) / "generation_metrics.parquet"


def payoff_sweep_path(out_dir: Path) -> Path:
    """Return path to the payoff sweep Parquet file."""
    return logs_dir(out_dir) / "payoff_sweep.parquet"


def run_payload_path(out_dir: Path, run_id: str) -> Path:
    return runs_dir(out_dir) / f"{run_id}.json"


def still_image_path(out_dir: Path, stem: str) -> Path:
    """Return path to the final-generation PNG."""
    return out_dir / f"{stem}.png"


def animation_path(out_dir: Path, stem: str) -> Path:
    """Return path to the all-generations GIF."""
    return out_dir / f"{stem}.gif"
