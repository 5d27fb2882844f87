"""Map a concentration field onto an RGB frame.

Species are folded onto three colour channels by index (``z % 3``), each
channel is normalised to its dynamic range outside the source/sink window,
raised to a power for contrast, and quantised to 8 bits. The source/sink
window itself is drawn black so it does not dominate the range.
"""

from __future__ import annotations

import numpy as np

from soliton.config.constants import RENDER_EXPONENT, SOURCE_HALF_WIDTH
from soliton.domain.field import ConcentrationField, source_window


def channel_sums(values: np.ndarray) -> np.ndarray:
    """Sum species into RGB channels: channel c holds species c, c+3, c+6, ..."""
    width, height, _ = values.shape
    channels = np.zeros((width, height, 3), dtype=np.float64)
    for c in range(3):
        channels[..., c] = values[..., c::3].sum(axis=2)
    return channels


def _quantize(intensity: np.ndarray) -> np.ndarray:
    """Scale [0, 1] to 0..255 with ``floor(v * 256)`` capped at 255."""
    return np.minimum(np.floor(intensity * 256.0), 255.0).astype(np.uint8)


def field_to_rgb(
    field: ConcentrationField,
    exclude_half_width: int | None = SOURCE_HALF_WIDTH,
    exponent: float = RENDER_EXPONENT,
) -> np.ndarray:
    """Render ``field`` as a ``(height, width, 3)`` uint8 image (row = y, column = x)."""
    channels = channel_sums(field.values)
    mask = np.ones(channels.shape[:2], dtype=bool)
    if exclude_half_width is not None:
        xs, ys = source_window(field.width, field.height, exclude_half_width)
        mask[xs, ys] = False
    sample = channels[mask] if mask.any() else channels.reshape(-1, 3)

    mins = sample.min(axis=0)
    ranges = sample.max(axis=0) - mins
    intensity = np.zeros_like(channels)
    for c in range(3):
        # A flat channel has no dynamic range to spread; leave it dark.
        if ranges[c] > 0.0:
            scaled = np.clip((channels[..., c] - mins[c]) / ranges[c], 0.0, 1.0)
            intensity[..., c] = scaled**exponent
    intensity[~mask] = 0.0
    return _quantize(intensity).transpose(1, 0, 2)
