"""Driver loop: step a simulation, render frames, and persist run artifacts.

Frame persistence is best-effort. A sink failure is logged and counted but
never skips or alters a simulation step, so a run with lost frames evolves
exactly like one without.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import pyarrow.parquet as pq

from soliton.config.constants import FLUSH_THRESHOLD
from soliton.config.types import RunResult, SimulationConfig
from soliton.io.paths import frames_dir, logs_dir, run_metadata_path, species_log_path
from soliton.io.schemas import RUN_PAYLOAD_SCHEMA_VERSION
from soliton.simulation.context import Simulation
from soliton.simulation.persistence import (
    append_species_rows,
    flush_species_columns,
    new_species_columns,
)
from soliton.viz.render import field_to_rgb
from soliton.viz.sink import FrameSink, PngFrameSink

logger = logging.getLogger(__name__)


def run_simulation(
    config: SimulationConfig,
    out_dir: Path,
    sink: FrameSink | None = None,
) -> RunResult:
    """Run ``config.steps`` steps and write frames, species log and run metadata.

    ``sink`` defaults to PNG files under ``<out_dir>/frames`` when
    ``config.write_frames`` is set; an explicit sink is always used.
    """
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    if sink is None and config.write_frames:
        sink = PngFrameSink(frames_dir(out_dir))

    logger.info(
        "Starting simulation: width=%d height=%d species=%d diffusion_factor=%s "
        "background_concentration=%s reaction_order=%d",
        config.width,
        config.height,
        config.species,
        config.diffusion_factor,
        config.background_concentration,
        config.reaction_order,
    )
    simulation = Simulation.create(config)
    logger.info("Registered %d reactions", len(simulation.network))

    columns = new_species_columns()
    writer: pq.ParquetWriter | None = None
    log_path = species_log_path(out_dir)
    frames_written = 0
    dropped_frames = 0

    try:
        for _ in range(config.steps):
            step_number = simulation.step_count
            simulation.advance()

            if append_species_rows(columns, step_number, simulation.field) >= FLUSH_THRESHOLD:
                writer = flush_species_columns(columns, writer, log_path)

            if sink is not None and step_number % config.frame_interval == 0:
                image = field_to_rgb(simulation.field, exclude_half_width=config.source_half_width)
                try:
                    sink.write(step_number, image)
                except OSError as exc:
                    dropped_frames += 1
                    logger.warning("Dropped frame for step %d: %s", step_number, exc)
                else:
                    frames_written += 1

            if step_number % config.progress_interval == 0:
                logger.info("Completed step %d", step_number)

        writer = flush_species_columns(columns, writer, log_path)
    finally:
        if writer is not None:
            writer.close()

    result = RunResult(
        steps_completed=simulation.step_count,
        frames_written=frames_written,
        dropped_frames=dropped_frames,
        final_species_totals=tuple(float(t) for t in simulation.field.species_totals()),
    )
    payload = {
        "config": asdict(config),
        "result": asdict(result),
        "n_reactions": len(simulation.network),
        "schema_version": RUN_PAYLOAD_SCHEMA_VERSION,
    }
    run_metadata_path(out_dir).write_text(json.dumps(payload, ensure_ascii=False, indent=2))
    logger.info(
        "Simulation complete: %d steps, %d frames dropped", result.steps_completed, dropped_frames
    )
    return result
