"""Frame sinks that persist rendered RGB frames."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import matplotlib.image as mpimg
import numpy as np

from soliton.io.paths import frame_filename


class FrameSink(Protocol):
    """Anything that can persist one rendered frame.

    Implementations report a failed write by raising ``OSError`` (or a
    subclass). The driver logs and counts such failures as dropped frames and
    keeps stepping; any other exception is treated as a bug and ends the run.
    """

    def write(self, step: int, image: np.ndarray) -> Path: ...


class PngFrameSink:
    """Write each frame as ``stepNNNNN.png`` inside ``frames_dir``."""

    def __init__(self, frames_dir: Path) -> None:
        self.frames_dir = Path(frames_dir)

    def write(self, step: int, image: np.ndarray) -> Path:
        self.frames_dir.mkdir(parents=True, exist_ok=True)
        path = self.frames_dir / frame_filename(step)
        mpimg.imsave(path, image, format="png")
        return path
