"""Tests for soliton.domain.seeding module."""

from __future__ import annotations

import numpy as np
import pytest

from soliton.domain.field import ConcentrationField
from soliton.domain.seeding import seed_field


def _block_mask(
    field: ConcentrationField, centres: list[tuple[int, int]], half_width: int
) -> np.ndarray:
    mask = np.zeros((field.width, field.height), dtype=bool)
    for cx, cy in centres:
        for dx in range(-half_width, half_width + 1):
            for dy in range(-half_width, half_width + 1):
                mask[(cx + dx) % field.width, (cy + dy) % field.height] = True
    return mask


class TestSeedField:
    def test_no_blocks_is_pure_background(self) -> None:
        field = ConcentrationField(6, 5, 3)
        centres = seed_field(field, 0.01, np.random.default_rng(0), num_blocks=0)
        assert centres == []
        assert np.all(field.values == 0.01)

    def test_overwrites_previous_state(self) -> None:
        field = ConcentrationField(4, 4, 2)
        field.values[...] = 0.7
        seed_field(field, 0.25, np.random.default_rng(0), num_blocks=0)
        assert np.all(field.values == 0.25)

    def test_cells_outside_blocks_equal_background(self) -> None:
        field = ConcentrationField(30, 20, 4)
        centres = seed_field(field, 0.01, np.random.default_rng(3), num_blocks=5)
        mask = _block_mask(field, centres, 2)
        assert np.all(field.values[~mask] == 0.01)

    def test_cells_inside_blocks_in_unit_interval(self) -> None:
        field = ConcentrationField(30, 20, 4)
        centres = seed_field(field, 0.01, np.random.default_rng(3), num_blocks=5)
        inside = field.values[_block_mask(field, centres, 2)]
        assert inside.size > 0
        assert np.all(inside >= 0.0)
        assert np.all(inside < 1.0)

    def test_block_shape_and_wrap(self) -> None:
        field = ConcentrationField(10, 10, 2)
        centres = seed_field(
            field, 5.0, np.random.default_rng(1), num_blocks=1, block_half_width=1
        )
        mask = _block_mask(field, centres, 1)
        assert mask.sum() == 9
        # Background of 5.0 is outside [0, 1), so noise cells are exactly the block.
        noisy = np.all(field.values != 5.0, axis=2)
        assert np.array_equal(noisy, mask)

    def test_block_wraps_around_edges(self) -> None:
        field = ConcentrationField(3, 3, 1)
        seed_field(field, 5.0, np.random.default_rng(0), num_blocks=1, block_half_width=2)
        assert np.all(field.values < 1.0)

    def test_same_seed_is_reproducible(self) -> None:
        a = ConcentrationField(12, 12, 3)
        b = ConcentrationField(12, 12, 3)
        seed_field(a, 0.01, np.random.default_rng(42))
        seed_field(b, 0.01, np.random.default_rng(42))
        assert np.array_equal(a.values, b.values)

    def test_default_block_count(self) -> None:
        field = ConcentrationField(50, 50, 2)
        centres = seed_field(field, 0.01, np.random.default_rng(0))
        assert len(centres) == 100
        assert all(0 <= x < 50 and 0 <= y < 50 for x, y in centres)

    @pytest.mark.parametrize(
        "kwargs",
        [{"num_blocks": -1}, {"block_half_width": -1}, {"block_half_width": 5}],
    )
    def test_rejects_invalid_arguments(self, kwargs: dict[str, int]) -> None:
        field = ConcentrationField(4, 4, 1)
        with pytest.raises(ValueError):
            seed_field(field, 0.01, np.random.default_rng(0), **kwargs)
