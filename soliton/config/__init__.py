"""Configuration layer: constants and typed config dataclasses."""

from soliton.config.constants import (
    BACKGROUND_CONCENTRATION,
    DIFFUSION_FACTOR,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_SPECIES,
    NUM_STEPS,
    OFFSET_PRIMES,
    PROGRESS_INTERVAL,
    REACTION_ORDER,
    REACTION_RATE,
    RENDER_EXPONENT,
    SEED_BLOCK_HALF_WIDTH,
    SEED_BLOCKS,
    SOURCE_HALF_WIDTH,
)
from soliton.config.types import (
    ChemistryConfig,
    FieldConfig,
    RunConfig,
    RunResult,
    SimulationConfig,
)

__all__ = [
    "BACKGROUND_CONCENTRATION",
    "ChemistryConfig",
    "DIFFUSION_FACTOR",
    "FLUSH_THRESHOLD",
    "FieldConfig",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "NUM_SPECIES",
    "NUM_STEPS",
    "OFFSET_PRIMES",
    "PROGRESS_INTERVAL",
    "REACTION_ORDER",
    "REACTION_RATE",
    "RENDER_EXPONENT",
    "RunConfig",
    "RunResult",
    "SEED_BLOCKS",
    "SEED_BLOCK_HALF_WIDTH",
    "SOURCE_HALF_WIDTH",
    "SimulationConfig",
]
