"""CLI entrypoint for simulation runs.

This module owns CLI argument parsing only. All domain logic lives in the
extracted modules:

- ``soliton.config``             – constants and configuration dataclasses
- ``soliton.domain``             – field, reactions, seeding, network builder
- ``soliton.simulation.engine``  – the per-step update
- ``soliton.simulation.runner``  – ``run_simulation`` driver loop
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from pathlib import Path

from soliton.config.constants import (
    BACKGROUND_CONCENTRATION,
    DIFFUSION_FACTOR,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_SPECIES,
    NUM_STEPS,
    PROGRESS_INTERVAL,
    REACTION_ORDER,
    REACTION_RATE,
    SEED_BLOCK_HALF_WIDTH,
    SEED_BLOCKS,
    SOURCE_HALF_WIDTH,
)
from soliton.config.types import SimulationConfig
from soliton.simulation.runner import run_simulation

Coercer = Callable[[object, str], object]

DEFAULT_OUT_DIR = "data"

# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def _coerce_bool(raw: object, key: str) -> bool:
    """Accept real booleans or on/off style words from a JSON config."""
    if isinstance(raw, bool):
        return raw
    word = raw.strip().lower() if isinstance(raw, str) else None
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"{key} must be a boolean value, got {raw!r}")


def _coerce_int(raw: object, key: str) -> int:
    """Accept ints, integral floats and numeric strings; booleans are rejected."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc


def _coerce_float(raw: object, key: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be a float value, got {raw!r}")
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a float value, got {raw!r}") from exc


def _optional(coerce: Coercer, absent_word: str) -> Coercer:
    """Wrap ``coerce`` so ``None`` or ``absent_word`` (any case) map to ``None``."""

    def coerce_optional(raw: object, key: str) -> object:
        if raw is None or (isinstance(raw, str) and raw.strip().lower() == absent_word):
            return None
        return coerce(raw, key)

    return coerce_optional


_coerce_optional_int = _optional(_coerce_int, "none")
_coerce_optional_float = _optional(_coerce_float, "random")

# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------

_CONFIG_FIELDS: dict[str, tuple[Coercer, object]] = {
    "width": (_coerce_int, GRID_WIDTH),
    "height": (_coerce_int, GRID_HEIGHT),
    "species": (_coerce_int, NUM_SPECIES),
    "diffusion_factor": (_coerce_float, DIFFUSION_FACTOR),
    "background_concentration": (_coerce_float, BACKGROUND_CONCENTRATION),
    "reaction_order": (_coerce_int, REACTION_ORDER),
    "reaction_rate": (_coerce_optional_float, REACTION_RATE),
    "source_half_width": (_coerce_optional_int, SOURCE_HALF_WIDTH),
    "steps": (_coerce_int, NUM_STEPS),
    "sim_seed": (_coerce_int, 0),
    "seed_blocks": (_coerce_int, SEED_BLOCKS),
    "seed_block_half_width": (_coerce_int, SEED_BLOCK_HALF_WIDTH),
    "write_frames": (_coerce_bool, True),
    "frame_interval": (_coerce_int, 1),
    "progress_interval": (_coerce_int, PROGRESS_INTERVAL),
}
"""SimulationConfig field -> (coercer, built-in default). Argparse dests share the names."""


def _resolve_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Build a SimulationConfig with CLI > config file > default precedence.

    Raises ``ValueError`` for unknown config-file keys, uncoercible values and
    any value the config dataclasses reject.
    """
    unknown = sorted(set(file_cfg) - set(_CONFIG_FIELDS) - {"out_dir"})
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")

    values: dict[str, object] = {}
    for key, (coerce, default) in _CONFIG_FIELDS.items():
        cli_val = getattr(args, key)
        raw = cli_val if cli_val is not None else file_cfg.get(key, default)
        values[key] = coerce(raw, key)
    return SimulationConfig(**values)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a multi-species Gray-Scott reaction-diffusion simulation"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--species", type=int, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--diffusion-factor", type=float, default=None)
    parser.add_argument("--background-concentration", type=float, default=None)
    parser.add_argument("--reaction-order", type=int, default=None)
    parser.add_argument(
        "--reaction-rate",
        type=str,
        default=None,
        help="Rate constant for generated reactions, or 'random' for log-uniform rates",
    )
    parser.add_argument(
        "--source-half-width",
        type=str,
        default=None,
        help="Half-width of the central source/sink window, or 'none' to disable",
    )
    parser.add_argument("--sim-seed", type=int, default=None)
    parser.add_argument("--seed-blocks", type=int, default=None)
    parser.add_argument("--seed-block-half-width", type=int, default=None)
    parser.add_argument("--write-frames", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--frame-interval", type=int, default=None)
    parser.add_argument("--progress-interval", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single simulation run.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
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
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = _resolve_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    out_dir = args.out_dir or Path(str(file_cfg.get("out_dir", DEFAULT_OUT_DIR)))

    result = run_simulation(config, out_dir)
    summary = {
        "out_dir": str(out_dir),
        "steps_completed": result.steps_completed,
        "frames_written": result.frames_written,
        "dropped_frames": result.dropped_frames,
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
