"""CLI entrypoint for single runs and payoff sweeps.

This module owns CLI argument parsing and mode dispatch. All domain logic
lives in the extracted modules:

- ``spatial_dilemma.io.loader``          – grid text format
- ``spatial_dilemma.config``             – configuration dataclasses
- ``spatial_dilemma.simulation.engine``  – generation driver and recording
- ``spatial_dilemma.experiments.sweep``  – payoff sweeps
- ``spatial_dilemma.viz``                – frame, animation, and sweep rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from spatial_dilemma.config.constants import (
    DEFAULT_FPS,
    DEFAULT_OUTPUT_STEM,
    DEFAULT_PAYOFF,
    DEFAULT_STEPS,
)
from spatial_dilemma.config.types import SimulationConfig, SweepConfig
from spatial_dilemma.experiments.sweep import run_payoff_sweep
from spatial_dilemma.io import paths
from spatial_dilemma.io.loader import load_grid
from spatial_dilemma.simulation.engine import run_and_record
from spatial_dilemma.viz.render import GenerationRenderer, render_payoff_sweep
from spatial_dilemma.viz.theme import get_theme

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _parse_payoff_values(raw: object) -> tuple[float, ...]:
    """Parse a comma-delimited string or JSON list of payoff values."""
    if isinstance(raw, (list, tuple)):
        parts: list[object] = list(raw)
    else:
        parts = [part.strip() for part in _coerce_str(raw, "payoff_values").split(",")]
        parts = [part for part in parts if part]
    if not parts:
        raise ValueError("payoff_values must not be empty")
    return tuple(_coerce_float(part, "payoff_values") for part in parts)


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_path(
    cli_val: Path | None,
    key: str,
    file_cfg: dict[str, object],
    default: Path | None,
    config_dir: Path,
) -> Path | None:
    """CLI > file > default for a path; file values must stay under *config_dir*.

    Relative paths in the config file are read relative to the file itself.
    """
    if cli_val is not None:
        return Path(cli_val)
    if key in file_cfg:
        return paths.resolve_within_base(Path(_coerce_str(file_cfg[key], key)), config_dir)
    return default


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Evolve a spatial Prisoner's Dilemma grid and render it"
    )
    parser.add_argument(
        "grid_file",
        type=Path,
        nargs="?",
        default=None,
        help="Grid description: '<rows> <cols>' header, then one C/D line per row",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "--payoff", "-b", type=float, default=None, help="Defection advantage b (single runs)"
    )
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--output-stem", type=str, default=None)
    parser.add_argument("--fps", type=int, default=None, help="GIF frame rate (single runs)")
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Theme preset name (default, paper)",
    )
    parser.add_argument("--render", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--metrics",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write per-generation metrics (single runs)",
    )
    parser.add_argument(
        "--sweep",
        type=str,
        default=None,
        metavar="B1,B2,...",
        help="Run a payoff sweep over these b values instead of a single rendered run",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must hold a JSON object: {args.config}")
    config_dir = Path(args.config).parent if args.config is not None else Path(".")

    try:
        grid_file = _get_path(args.grid_file, "grid_file", file_cfg, None, config_dir)
        if grid_file is None:
            parser.error("a grid file is required (positional argument or 'grid_file')")
        payoff = _coerce_float(_get_val(args.payoff, "payoff", file_cfg, DEFAULT_PAYOFF), "payoff")
        steps = _coerce_int(_get_val(args.steps, "steps", file_cfg, DEFAULT_STEPS), "steps")
        out_dir = _get_path(args.out_dir, "out_dir", file_cfg, None, config_dir) or Path(".")
        output_stem = _coerce_str(
            _get_val(args.output_stem, "output_stem", file_cfg, DEFAULT_OUTPUT_STEM),
            "output_stem",
        )
        fps = _coerce_int(_get_val(args.fps, "fps", file_cfg, DEFAULT_FPS), "fps")
        theme = get_theme(_coerce_str(_get_val(args.theme, "theme", file_cfg, "default"), "theme"))
        render_images = _coerce_bool(
            _get_val(args.render, "render_images", file_cfg, True), "render_images"
        )
        write_metrics = _coerce_bool(
            _get_val(args.metrics, "write_metrics", file_cfg, True), "write_metrics"
        )
        sweep_raw = _get_val(args.sweep, "payoff_values", file_cfg, None)
        payoff_values = None if sweep_raw is None else _parse_payoff_values(sweep_raw)
        initial = load_grid(grid_file)
        logger.info("loaded %dx%d grid from %s", initial.height, initial.width, grid_file)
    except FileNotFoundError as exc:
        parser.error(f"Grid file not found: {exc.filename}")
    except ValueError as exc:
        parser.error(str(exc))

    if payoff_values is not None:
        single_run_only = [
            key
            for cli_val, key in (
                (args.payoff, "payoff"),
                (args.fps, "fps"),
                (args.metrics, "write_metrics"),
            )
            if cli_val is not None or key in file_cfg
        ]
        if single_run_only:
            parser.error(f"not used by payoff sweeps: {', '.join(single_run_only)}")
        try:
            sweep_config = SweepConfig(payoff_values=payoff_values, steps=steps)
        except ValueError as exc:
            parser.error(str(exc))
        results = run_payoff_sweep(initial, sweep_config, out_dir=out_dir, stem=output_stem)
        sweep_path = paths.payoff_sweep_path(out_dir)
        summary: dict[str, object] = {
            "mode": "payoff_sweep",
            "grid_file": str(grid_file),
            "steps": steps,
            "sweep_table": str(sweep_path),
            "results": [asdict(r) for r in results],
        }
        if render_images:
            plot_path = out_dir / f"{output_stem}_sweep.png"
            render_payoff_sweep(sweep_path, plot_path, theme=theme)
            summary["sweep_plot"] = str(plot_path)
    else:
        try:
            sim_config = SimulationConfig(
                payoff=payoff,
                steps=steps,
                output_stem=output_stem,
                fps=fps,
                write_metrics=write_metrics,
                render_images=render_images,
            )
        except ValueError as exc:
            parser.error(str(exc))
        renderer = GenerationRenderer(theme=theme) if render_images else None
        result = run_and_record(
            initial, sim_config, out_dir=out_dir, renderer=renderer, source=grid_file
        )
        summary = {
            "mode": "single",
            "grid_file": str(grid_file),
            "grid_height": initial.height,
            "grid_width": initial.width,
            **asdict(result),
        }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
