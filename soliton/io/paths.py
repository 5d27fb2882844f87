"""Path construction helpers for simulation output directories.

Centralises the directory/file naming conventions used by the driver and
the frame sink.
"""

from __future__ import annotations

from pathlib import Path


def frames_dir(out_dir: Path) -> Path:
    """Return path to the rendered-frames subdirectory within an output directory."""
    return out_dir / "frames"


def frame_filename(step: int) -> str:
    """Return the zero-padded PNG filename for a step number."""
    return f"step{step:05d}.png"


def frame_path(out_dir: Path, step: int) -> Path:
    """Return path to the PNG frame for a step number."""
    return frames_dir(out_dir) / frame_filename(step)


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def species_log_path(out_dir: Path) -> Path:
    """Return path to the per-step species statistics Parquet file."""
    return logs_dir(out_dir) / "species_log.parquet"


def run_metadata_path(out_dir: Path) -> Path:
    """Return path to the run metadata JSON file."""
    return out_dir / "run.json"
