"""Generation driver: score, evolve, record, and hand frames to a renderer."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

import pyarrow.parquet as pq

from spatial_dilemma.config.constants import FLUSH_THRESHOLD
from spatial_dilemma.config.types import (
    SimulationConfig,
    SimulationResult,
    validate_payoff,
    validate_steps,
)
from spatial_dilemma.domain.evolve import evolve_grid
from spatial_dilemma.domain.grid import Generation, Grid
from spatial_dilemma.domain.payoff import score_generation
from spatial_dilemma.domain.strategy import Strategy
from spatial_dilemma.io import paths
from spatial_dilemma.io.schemas import RUN_PAYLOAD_SCHEMA_VERSION
from spatial_dilemma.simulation.persistence import flush_metric_columns, new_metric_columns
from spatial_dilemma.simulation.step import compute_generation_metrics

logger = logging.getLogger(__name__)


class FrameSink(Protocol):
    """Renderer collaborator fed one strategy grid per generation, in order."""

    def add(self, grid: Grid) -> None: ...

    def save_still(self, output_path: Path) -> None: ...

    def save_animation(self, output_path: Path, fps: int) -> None: ...


def deterministic_run_id(stem: str, payoff: float, steps: int) -> str:
    """Build a reproducible run ID stable across runs for identical inputs.

    The payoff is encoded with its shortest round-tripping ``repr`` so that
    distinct floats never share an ID.
    """
    payoff_label = repr(float(payoff))
    if payoff_label.endswith(".0"):
        payoff_label = payoff_label[:-2]
    payoff_label = payoff_label.replace(".", "p").replace("-", "m").replace("+", "")
    return f"{stem}_b{payoff_label}_n{steps}"


def iter_generations(initial: Grid, payoff: float, steps: int) -> Iterator[Generation]:
    """Yield scored generations 0..steps in order.

    Each generation is scored in full before any cell of the next one is
    decided; the next grid is built fresh from that frozen snapshot.
    """
    validate_payoff(payoff)
    validate_steps(steps)
    return _generations(initial, payoff, steps)


def _generations(initial: Grid, payoff: float, steps: int) -> Iterator[Generation]:
    grid = initial
    for index in range(steps + 1):
        generation = score_generation(grid, payoff, index=index)
        yield generation
        if index < steps:
            grid = evolve_grid(generation)


def run_simulation(initial: Grid, payoff: float, steps: int) -> list[Grid]:
    """Return the strategy grids of generations 0..steps."""
    return [generation.grid for generation in iter_generations(initial, payoff, steps)]


def run_and_record(
    initial: Grid,
    config: SimulationConfig,
    out_dir: Path,
    renderer: FrameSink | None = None,
    source: Path | None = None,
) -> SimulationResult:
    """Run one configured simulation and persist its artifacts under *out_dir*.

    Writes ``logs/generation_metrics.parquet`` (when ``write_metrics``) and
    ``runs/<run_id>.json``. When a *renderer* is supplied, every generation's
    grid is streamed to it and, if ``render_images`` is set, the final still
    and the animation are saved.
    """
    out_dir = Path(out_dir)
    paths.logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    paths.runs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    run_id = deterministic_run_id(config.output_stem, config.payoff, config.steps)
    metrics_path = paths.generation_metrics_path(out_dir)
    logger.info(
        "run %s: %dx%d grid, b=%g, %d generations",
        run_id,
        initial.height,
        initial.width,
        config.payoff,
        config.steps,
    )

    metric_writer: pq.ParquetWriter | None = None
    metric_columns = new_metric_columns()
    previous: Grid | None = None
    fixed_point_at: int | None = None
    last_metrics: dict[str, float | int | None] = {}

    try:
        for generation in iter_generations(initial, config.payoff, config.steps):
            step_metrics = compute_generation_metrics(generation, previous)
            last_metrics = step_metrics
            if fixed_point_at is None and step_metrics["strategy_changes"] == 0:
                fixed_point_at = generation.index - 1
            logger.debug(
                "run %s generation %d: cooperator_fraction=%.4f",
                run_id,
                generation.index,
                step_metrics["cooperator_fraction"],
            )

            if config.write_metrics:
                metric_columns["run_id"].append(run_id)
                metric_columns["generation"].append(generation.index)
                for key, value in step_metrics.items():
                    metric_columns[key].append(value)
                if len(metric_columns["run_id"]) >= FLUSH_THRESHOLD:
                    metric_writer = flush_metric_columns(
                        metric_columns=metric_columns,
                        metrics_path=metrics_path,
                        metric_writer=metric_writer,
                    )

            if renderer is not None:
                renderer.add(generation.grid)
            previous = generation.grid

        if config.write_metrics:
            metric_writer = flush_metric_columns(
                metric_columns=metric_columns,
                metrics_path=metrics_path,
                metric_writer=metric_writer,
            )
    finally:
        if metric_writer is not None:
            metric_writer.close()

    final_grid = previous if previous is not None else initial
    outputs: dict[str, str] = {}
    if config.write_metrics:
        outputs["generation_metrics"] = str(metrics_path)
    if renderer is not None and config.render_images:
        still_path = paths.still_image_path(out_dir, config.output_stem)
        gif_path = paths.animation_path(out_dir, config.output_stem)
        renderer.save_still(still_path)
        renderer.save_animation(gif_path, fps=config.fps)
        outputs["still"] = str(still_path)
        outputs["animation"] = str(gif_path)

    result = SimulationResult(
        run_id=run_id,
        payoff=float(config.payoff),
        steps=config.steps,
        final_cooperators=final_grid.count(Strategy.COOPERATE),
        final_cooperator_fraction=float(last_metrics.get("cooperator_fraction") or 0.0),
        fixed_point_at=fixed_point_at,
    )

    run_payload = {
        "run_id": run_id,
        "final_grid": final_grid.to_markers(),
        "outputs": outputs,
        "metadata": {
            "payoff": result.payoff,
            "steps": config.steps,
            "grid_width": initial.width,
            "grid_height": initial.height,
            "initial_cooperators": initial.count(Strategy.COOPERATE),
            "final_cooperators": result.final_cooperators,
            "final_cooperator_fraction": result.final_cooperator_fraction,
            "fixed_point_at": fixed_point_at,
            "source": None if source is None else str(source),
            "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
        },
    }
    paths.run_payload_path(out_dir, run_id).write_text(
        json.dumps(run_payload, ensure_ascii=False, indent=2)
    )
    logger.info(
        "run %s finished: %d/%d cooperators",
        run_id,
        result.final_cooperators,
        initial.width * initial.height,
    )
    return result
