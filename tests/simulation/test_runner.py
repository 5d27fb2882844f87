"""Tests for soliton.simulation.runner module."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import numpy as np
import pyarrow.parquet as pq
import pytest

from soliton.config.types import SimulationConfig
from soliton.io.paths import frame_path, run_metadata_path, species_log_path
from soliton.simulation.runner import run_simulation


def _small_config(**overrides: object) -> SimulationConfig:
    params: dict[str, object] = {
        "width": 12,
        "height": 10,
        "species": 6,
        "steps": 4,
        "seed_blocks": 2,
        "seed_block_half_width": 1,
        "source_half_width": 1,
    }
    params.update(overrides)
    return SimulationConfig(**params)  # type: ignore[arg-type]


class _RecordingSink:
    def __init__(self) -> None:
        self.steps: list[int] = []
        self.images: list[np.ndarray] = []

    def write(self, step: int, image: np.ndarray) -> Path:
        self.steps.append(step)
        self.images.append(image)
        return Path(f"frame-{step}")


class _FailingSink:
    def __init__(self) -> None:
        self.calls = 0

    def write(self, step: int, image: np.ndarray) -> Path:
        self.calls += 1
        raise OSError("disk full")


class TestRunSimulation:
    def test_writes_png_frames(self, tmp_path: Path) -> None:
        result = run_simulation(_small_config(), tmp_path)
        assert result.steps_completed == 4
        assert result.frames_written == 4
        assert result.dropped_frames == 0
        for step in range(4):
            assert frame_path(tmp_path, step).exists()

    def test_species_log_rows(self, tmp_path: Path) -> None:
        run_simulation(_small_config(write_frames=False), tmp_path)
        table = pq.read_table(species_log_path(tmp_path))
        assert table.num_rows == 4 * 6
        assert sorted(set(table.column("step").to_pylist())) == [0, 1, 2, 3]
        assert table.column("species").to_pylist()[:6] == list(range(6))

    def test_species_log_matches_final_totals(self, tmp_path: Path) -> None:
        result = run_simulation(_small_config(write_frames=False), tmp_path)
        table = pq.read_table(species_log_path(tmp_path))
        last = table.slice(table.num_rows - 6).column("total").to_pylist()
        assert np.allclose(last, result.final_species_totals)

    def test_run_metadata(self, tmp_path: Path) -> None:
        config = _small_config(write_frames=False)
        result = run_simulation(config, tmp_path)
        payload = json.loads(run_metadata_path(tmp_path).read_text())
        assert payload["schema_version"] == 1
        assert payload["n_reactions"] == 18
        assert payload["config"] == json.loads(json.dumps(asdict(config)))
        assert payload["result"]["steps_completed"] == result.steps_completed

    def test_no_frames_when_disabled(self, tmp_path: Path) -> None:
        result = run_simulation(_small_config(write_frames=False), tmp_path)
        assert result.frames_written == 0
        assert not (tmp_path / "frames").exists()

    def test_explicit_sink_receives_frames(self, tmp_path: Path) -> None:
        sink = _RecordingSink()
        result = run_simulation(_small_config(write_frames=False), tmp_path, sink=sink)
        assert sink.steps == [0, 1, 2, 3]
        assert result.frames_written == 4
        assert all(image.shape == (10, 12, 3) for image in sink.images)
        assert all(image.dtype == np.uint8 for image in sink.images)

    def test_frame_interval(self, tmp_path: Path) -> None:
        sink = _RecordingSink()
        run_simulation(_small_config(steps=5, frame_interval=2), tmp_path, sink=sink)
        assert sink.steps == [0, 2, 4]

    def test_failing_sink_does_not_alter_run(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        sink = _FailingSink()
        with caplog.at_level(logging.WARNING, logger="soliton.simulation.runner"):
            failed = run_simulation(_small_config(), tmp_path / "failed", sink=sink)
        clean = run_simulation(_small_config(write_frames=False), tmp_path / "clean")

        assert sink.calls == 4
        assert failed.dropped_frames == 4
        assert failed.frames_written == 0
        assert failed.steps_completed == clean.steps_completed
        assert failed.final_species_totals == clean.final_species_totals
        assert "Dropped frame for step 0" in caplog.text

    def test_reproducible(self, tmp_path: Path) -> None:
        a = run_simulation(_small_config(write_frames=False), tmp_path / "a")
        b = run_simulation(_small_config(write_frames=False), tmp_path / "b")
        assert a == b

    def test_non_oserror_from_sink_propagates(self, tmp_path: Path) -> None:
        class _BrokenSink:
            def write(self, step: int, image: np.ndarray) -> Path:
                raise RuntimeError("bad sink")

        with pytest.raises(RuntimeError, match="bad sink"):
            run_simulation(_small_config(write_frames=False), tmp_path, sink=_BrokenSink())
