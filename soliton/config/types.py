"""Configuration dataclasses for reaction-diffusion runs.

All frozen dataclasses that parameterise the lattice, the chemistry and the
driver loop live here. Validation happens in ``__post_init__`` so an illegal
configuration is rejected before any stepping begins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from soliton.config.constants import (
    BACKGROUND_CONCENTRATION,
    DIFFUSION_FACTOR,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_SPECIES,
    NUM_STEPS,
    OFFSET_PRIMES,
    PROGRESS_INTERVAL,
    REACTION_ORDER,
    REACTION_RATE,
    SEED_BLOCK_HALF_WIDTH,
    SEED_BLOCKS,
    SOURCE_HALF_WIDTH,
)

if TYPE_CHECKING:
    from soliton.simulation.engine import StepParams

__all__ = [
    "FieldConfig",
    "ChemistryConfig",
    "RunConfig",
    "RunResult",
    "SimulationConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one simulation run."""

    steps_completed: int
    frames_written: int
    dropped_frames: int
    final_species_totals: tuple[float, ...]


# ---------------------------------------------------------------------------
# Component configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldConfig:
    """Lattice dimensions: width, height and number of species."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    species: int = NUM_SPECIES

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("field dimensions must be >= 1")
        if self.species < 1:
            raise ValueError("species must be >= 1")


@dataclass(frozen=True)
class ChemistryConfig:
    """Per-simulation scalar chemistry knobs."""

    diffusion_factor: float = DIFFUSION_FACTOR
    background_concentration: float = BACKGROUND_CONCENTRATION
    reaction_order: int = REACTION_ORDER
    reaction_rate: float | None = REACTION_RATE
    """Rate constant for generated reactions; ``None`` draws a random rate per reaction."""
    source_half_width: int | None = SOURCE_HALF_WIDTH
    """Half-width of the central source/sink window; ``None`` disables it."""

    def __post_init__(self) -> None:
        if not 0.0 <= self.diffusion_factor <= 1.0:
            raise ValueError("diffusion_factor must be in [0.0, 1.0]")
        if not 0.0 <= self.background_concentration <= 1.0:
            raise ValueError("background_concentration must be in [0.0, 1.0]")
        if self.reaction_order < 1:
            raise ValueError("reaction_order must be >= 1")
        if self.reaction_order // 2 > len(OFFSET_PRIMES):
            raise ValueError(
                f"reaction_order must be <= {2 * len(OFFSET_PRIMES) + 1} "
                f"({len(OFFSET_PRIMES)} offset primes available)"
            )
        if self.reaction_rate is not None and self.reaction_rate <= 0.0:
            raise ValueError("reaction_rate must be > 0")
        if self.source_half_width is not None and self.source_half_width < 0:
            raise ValueError("source_half_width must be >= 0")


@dataclass(frozen=True)
class RunConfig:
    """Driver-loop settings: step count, seeding and output cadence."""

    steps: int = NUM_STEPS
    sim_seed: int = 0
    seed_blocks: int = SEED_BLOCKS
    seed_block_half_width: int = SEED_BLOCK_HALF_WIDTH
    write_frames: bool = True
    frame_interval: int = 1
    progress_interval: int = PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
        if self.seed_blocks < 0:
            raise ValueError("seed_blocks must be >= 0")
        if self.seed_block_half_width < 0:
            raise ValueError("seed_block_half_width must be >= 0")
        if self.frame_interval < 1:
            raise ValueError("frame_interval must be >= 1")
        if self.progress_interval < 1:
            raise ValueError("progress_interval must be >= 1")


# ---------------------------------------------------------------------------
# Composite config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Complete parameter set for one simulation run."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    species: int = NUM_SPECIES
    diffusion_factor: float = DIFFUSION_FACTOR
    background_concentration: float = BACKGROUND_CONCENTRATION
    reaction_order: int = REACTION_ORDER
    reaction_rate: float | None = REACTION_RATE
    source_half_width: int | None = SOURCE_HALF_WIDTH
    steps: int = NUM_STEPS
    sim_seed: int = 0
    seed_blocks: int = SEED_BLOCKS
    seed_block_half_width: int = SEED_BLOCK_HALF_WIDTH
    write_frames: bool = True
    frame_interval: int = 1
    progress_interval: int = PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        self.to_components()
        if self.seed_block_half_width > min(self.width, self.height):
            raise ValueError("seed_block_half_width must not exceed the field width or height")

    @classmethod
    def from_components(
        cls,
        field: FieldConfig | None = None,
        chemistry: ChemistryConfig | None = None,
        run: RunConfig | None = None,
    ) -> "SimulationConfig":
        """Compose SimulationConfig from reusable sub-config components."""
        field = field or FieldConfig()
        chemistry = chemistry or ChemistryConfig()
        run = run or RunConfig()
        return cls(
            width=field.width,
            height=field.height,
            species=field.species,
            diffusion_factor=chemistry.diffusion_factor,
            background_concentration=chemistry.background_concentration,
            reaction_order=chemistry.reaction_order,
            reaction_rate=chemistry.reaction_rate,
            source_half_width=chemistry.source_half_width,
            steps=run.steps,
            sim_seed=run.sim_seed,
            seed_blocks=run.seed_blocks,
            seed_block_half_width=run.seed_block_half_width,
            write_frames=run.write_frames,
            frame_interval=run.frame_interval,
            progress_interval=run.progress_interval,
        )

    def to_components(self) -> tuple[FieldConfig, ChemistryConfig, RunConfig]:
        """Decompose SimulationConfig into reusable sub-config components."""
        return (
            FieldConfig(width=self.width, height=self.height, species=self.species),
            ChemistryConfig(
                diffusion_factor=self.diffusion_factor,
                background_concentration=self.background_concentration,
                reaction_order=self.reaction_order,
                reaction_rate=self.reaction_rate,
                source_half_width=self.source_half_width,
            ),
            RunConfig(
                steps=self.steps,
                sim_seed=self.sim_seed,
                seed_blocks=self.seed_blocks,
                seed_block_half_width=self.seed_block_half_width,
                write_frames=self.write_frames,
                frame_interval=self.frame_interval,
                progress_interval=self.progress_interval,
            ),
        )

    def step_params(self) -> StepParams:
        """Return the engine parameters for this configuration."""
        from soliton.simulation.engine import StepParams

        return StepParams(
            reaction_order=self.reaction_order,
            diffusion_factor=self.diffusion_factor,
            source_half_width=self.source_half_width,
        )
