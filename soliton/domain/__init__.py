"""Domain layer: concentration field, reactions, seeding and network generation."""

from soliton.domain.field import ConcentrationField, source_window, wrap
from soliton.domain.network_builder import build_prime_offset_network, random_rate
from soliton.domain.reactions import (
    DualPairReaction,
    Reaction,
    ReactionNetwork,
    SinglePairReaction,
)
from soliton.domain.seeding import seed_field

__all__ = [
    "ConcentrationField",
    "DualPairReaction",
    "Reaction",
    "ReactionNetwork",
    "SinglePairReaction",
    "build_prime_offset_network",
    "random_rate",
    "seed_field",
    "source_window",
    "wrap",
]
