"""Initial field state: uniform background plus random noise blocks."""

from __future__ import annotations

import numpy as np

from soliton.config.constants import SEED_BLOCK_HALF_WIDTH, SEED_BLOCKS
from soliton.domain.field import ConcentrationField


def seed_field(
    field: ConcentrationField,
    background_concentration: float,
    rng: np.random.Generator,
    num_blocks: int = SEED_BLOCKS,
    block_half_width: int = SEED_BLOCK_HALF_WIDTH,
) -> list[tuple[int, int]]:
    """Fill ``field`` with background and overwrite random square blocks with noise.

    Each block is centred on a uniformly random (x, y); every cell within
    ``block_half_width`` on both axes (wrapped) and every species gets an
    independent draw from [0, 1).

    Returns the block centres in the order they were drawn.
    """
    if num_blocks < 0:
        raise ValueError("num_blocks must be >= 0")
    if block_half_width < 0:
        raise ValueError("block_half_width must be >= 0")
    if block_half_width > min(field.width, field.height):
        raise ValueError("block_half_width must not exceed the field width or height")

    field.fill_all(background_concentration)
    values = field.values
    centres: list[tuple[int, int]] = []
    for _ in range(num_blocks):
        cx = int(rng.integers(field.width))
        cy = int(rng.integers(field.height))
        centres.append((cx, cy))
        for dx in range(-block_half_width, block_half_width + 1):
            x = field.wrap_x(cx + dx)
            for dy in range(-block_half_width, block_half_width + 1):
                y = field.wrap_y(cy + dy)
                values[x, y, :] = rng.random(field.species)
    return centres
