"""Centralized domain constants for reaction-diffusion runs.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 200
"""Default lattice width in cells."""

GRID_HEIGHT = 200
"""Default lattice height in cells."""

NUM_SPECIES = 50
"""Default number of chemical species tracked per cell."""

NUM_STEPS = 1_000
"""Default number of simulation steps."""

DIFFUSION_FACTOR = 0.5
"""Fraction of a cell's concentration handed to its four neighbors per step."""

BACKGROUND_CONCENTRATION = 0.01
"""Uniform initial concentration before seeding noise blocks."""

REACTION_ORDER = 6
"""Depletion-avoidance divisor applied to every reaction volume."""

SOURCE_HALF_WIDTH = 10
"""Half-width of the central source/sink window."""

SEED_BLOCKS = 100
"""Number of random noise blocks written by the seeder."""

SEED_BLOCK_HALF_WIDTH = 2
"""Half-width of each seeded noise block (5x5 cells at the default)."""

REACTION_RATE = 1e5
"""Rate constant used by the prime-offset network builder."""

OFFSET_PRIMES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
"""Species offsets used by the prime-offset network builder."""

RENDER_EXPONENT = 3.0
"""Power applied to normalized channel intensities when rendering frames."""

PROGRESS_INTERVAL = 100
"""Log a progress line every this many steps."""

FLUSH_THRESHOLD = 8_192
"""Flush species log rows to Parquet once this in-memory row count is reached."""
