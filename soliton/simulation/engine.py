"""Per-step reaction-diffusion update.

One step runs three passes over the field, in order:

A. source/sink: a fixed window around the lattice centre is forced to
   species 0 = 1.0 and every other species = 0.0.
B. reactions: every reaction is evaluated against the pre-pass concentrations
   and its volume accumulated into a delta buffer, committed once.
C. diffusion: each cell hands ``diffusion_factor`` of its concentration
   equally to its four von Neumann neighbors (periodic), buffered and
   committed once. Species never mix, so every species slice is independent.

Both B and C read a snapshot and write a buffer, so neither pass depends on
the order in which cells or reactions are visited.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from soliton.config.constants import SOURCE_HALF_WIDTH
from soliton.domain.field import ConcentrationField, source_window
from soliton.domain.reactions import DualPairReaction, Reaction, ReactionNetwork


@dataclass(frozen=True)
class StepParams:
    """Engine parameters for one step."""

    reaction_order: int
    diffusion_factor: float
    source_half_width: int | None = SOURCE_HALF_WIDTH
    """``None`` disables the source/sink pass."""

    def __post_init__(self) -> None:
        if self.reaction_order < 1:
            raise ValueError("reaction_order must be >= 1")
        if not 0.0 <= self.diffusion_factor <= 1.0:
            raise ValueError("diffusion_factor must be in [0.0, 1.0]")
        if self.source_half_width is not None and self.source_half_width < 0:
            raise ValueError("source_half_width must be >= 0")


def apply_source_sink(field: ConcentrationField, half_width: int | None) -> None:
    """Pass A: resupply species 0 and drain every other species in the centre window."""
    if half_width is None:
        return
    xs, ys = source_window(field.width, field.height, half_width)
    values = field.values
    values[xs, ys, 0] = 1.0
    values[xs, ys, 1:] = 0.0


def reaction_volume(
    concentrations: np.ndarray, reaction: Reaction, reaction_order: int
) -> np.ndarray:
    """Clamped reaction extent for concentrations indexed by species on the last axis.

    Kinetics are product-squared autocatalytic (Gray-Scott shape) with an
    explicit enzyme factor; the dual-pair variant multiplies in the second
    pair. The raw volume is then limited so that no reactant drops below zero
    and no product rises above one, each bound divided by ``reaction_order``.
    """
    c = concentrations
    substrate = c[..., reaction.substrate]
    product = c[..., reaction.product]

    volume = product * product
    volume = volume * (c[..., reaction.enzyme] * reaction.rate)
    volume = volume * substrate
    if isinstance(reaction, DualPairReaction):
        substrate2 = c[..., reaction.substrate2]
        product2 = c[..., reaction.product2]
        volume = volume * (product2 * product2)
        volume = volume * substrate2

    volume = np.minimum(volume, substrate / reaction_order)
    volume = np.minimum(volume, (1.0 - product) / reaction_order)
    if isinstance(reaction, DualPairReaction):
        volume = np.minimum(volume, substrate2 / reaction_order)
        volume = np.minimum(volume, (1.0 - product2) / reaction_order)
    return np.maximum(volume, 0.0)


def react(field: ConcentrationField, network: ReactionNetwork, reaction_order: int) -> np.ndarray:
    """Pass B: apply every reaction at every cell against one snapshot.

    Returns the committed delta buffer.
    """
    if reaction_order < 1:
        raise ValueError("reaction_order must be >= 1")
    values = field.values
    delta = np.zeros_like(values)
    for reaction in network:
        volume = reaction_volume(values, reaction, reaction_order)
        delta[..., reaction.substrate] -= volume
        delta[..., reaction.product] += volume
        if isinstance(reaction, DualPairReaction):
            delta[..., reaction.substrate2] -= volume
            delta[..., reaction.product2] += volume
    values += delta
    return delta


def diffuse(field: ConcentrationField, diffusion_factor: float) -> np.ndarray:
    """Pass C: von Neumann radius-1 diffusion with periodic wrap.

    Returns the committed delta buffer. Its sum over any species slice is zero
    up to floating-point error.
    """
    values = field.values
    outflow = values * diffusion_factor
    share = outflow / 4.0
    delta = -outflow
    delta += np.roll(share, 1, axis=0)
    delta += np.roll(share, -1, axis=0)
    delta += np.roll(share, 1, axis=1)
    delta += np.roll(share, -1, axis=1)
    values += delta
    return delta


def step(field: ConcentrationField, network: ReactionNetwork, params: StepParams) -> None:
    """Advance ``field`` by one time unit: source/sink, reactions, diffusion."""
    apply_source_sink(field, params.source_half_width)
    react(field, network, params.reaction_order)
    diffuse(field, params.diffusion_factor)
