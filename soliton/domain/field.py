"""Dense periodic concentration field.

All three axes (x, y, species) are periodic. Coordinates are normalized with
a two-branch wrap that assumes offsets are at most one period out of range;
callers must not pass coordinates further out than that.
"""

from __future__ import annotations

import numpy as np


def wrap(c: int, n: int) -> int:
    """Wrap coordinate ``c`` into ``[0, n)`` assuming ``|c| <= n``."""
    if c < 0:
        return c + n
    if c >= n:
        return c - n
    return c


class ConcentrationField:
    """Per-species concentrations on a toroidal ``width x height`` lattice.

    Storage is a float64 array of shape ``(width, height, species)`` indexed
    as ``values[x, y, z]``. The update policy keeps values in [0, 1] but the
    field itself never clamps.
    """

    def __init__(self, width: int, height: int, species: int) -> None:
        if width < 1 or height < 1 or species < 1:
            raise ValueError("field dimensions must be >= 1")
        self._values = np.zeros((width, height, species), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._values.shape[0]

    @property
    def height(self) -> int:
        return self._values.shape[1]

    @property
    def species(self) -> int:
        return self._values.shape[2]

    @property
    def shape(self) -> tuple[int, int, int]:
        return (self.width, self.height, self.species)

    @property
    def values(self) -> np.ndarray:
        """Backing array, mutated in place by the engine."""
        return self._values

    def wrap_x(self, x: int) -> int:
        return wrap(x, self.width)

    def wrap_y(self, y: int) -> int:
        return wrap(y, self.height)

    def wrap_z(self, z: int) -> int:
        return wrap(z, self.species)

    def get(self, x: int, y: int, z: int) -> float:
        return float(self._values[self.wrap_x(x), self.wrap_y(y), self.wrap_z(z)])

    def set(self, x: int, y: int, z: int, value: float) -> None:
        self._values[self.wrap_x(x), self.wrap_y(y), self.wrap_z(z)] = value

    def fill_all(self, value: float) -> None:
        """Overwrite every cell with ``value``."""
        self._values.fill(value)

    def snapshot(self) -> np.ndarray:
        """Return an independent copy of the concentrations."""
        return self._values.copy()

    def species_totals(self) -> np.ndarray:
        """Sum of each species over the whole lattice, shape ``(species,)``."""
        return self._values.sum(axis=(0, 1))


def source_window(width: int, height: int, half_width: int) -> tuple[slice, slice]:
    """Return the (x, y) slices of the inclusive centre window.

    The window spans ``[c - half_width, c + half_width]`` on each axis around
    ``(width // 2, height // 2)`` and is clipped to the lattice. The source/sink
    pass and the renderer share it.
    """
    cx, cy = width // 2, height // 2
    xs = slice(max(0, cx - half_width), min(width - 1, cx + half_width) + 1)
    ys = slice(max(0, cy - half_width), min(height - 1, cy + half_width) + 1)
    return xs, ys
