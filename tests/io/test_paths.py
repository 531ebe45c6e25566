"""Tests for spatial_dilemma.io.paths module."""

from __future__ import annotations

from pathlib import Path

import pytest

from spatial_dilemma.io import paths


def test_output_layout(tmp_path: Path) -> None:
    assert paths.generation_metrics_path(tmp_path) == (
        tmp_path / "logs" / "generation_metrics.parquet"
    )
    assert paths.payoff_sweep_path(tmp_path) == tmp_path / "logs" / "payoff_sweep.parquet"
    assert paths.run_payload_path(tmp_path, "abc") == tmp_path / "runs" / "abc.json"
    assert paths.still_image_path(tmp_path, "Prisoners") == tmp_path / "Prisoners.png"
    assert paths.animation_path(tmp_path, "Prisoners") == tmp_path / "Prisoners.gif"


def test_resolve_within_base_accepts_relative(tmp_path: Path) -> None:
    resolved = paths.resolve_within_base(Path("sub/file.png"), tmp_path)
    assert resolved == (tmp_path / "sub" / "file.png").resolve()


def test_resolve_within_base_rejects_escape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="escapes"):
        paths.resolve_within_base(Path("../outside.png"), tmp_path)
