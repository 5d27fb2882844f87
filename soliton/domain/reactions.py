"""Reaction records and the append-only reaction network.

A reaction is either single-pair (substrate -> product) or dual-pair
(substrate + substrate2 -> product + product2), always catalysed by an
enzyme species. Species indices are wrapped onto the species axis at
registration time so the engine never re-validates them.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeAlias

from soliton.domain.field import wrap


@dataclass(frozen=True)
class SinglePairReaction:
    """substrate -> product, catalysed by enzyme."""

    substrate: int
    product: int
    enzyme: int
    rate: float

    @property
    def is_dual(self) -> bool:
        return False

    def reactants(self) -> tuple[int, ...]:
        """Species consumed by this reaction."""
        return (self.substrate,)


@dataclass(frozen=True)
class DualPairReaction:
    """substrate + substrate2 -> product + product2, catalysed by enzyme."""

    substrate: int
    substrate2: int
    product: int
    product2: int
    enzyme: int
    rate: float

    @property
    def is_dual(self) -> bool:
        return True

    def reactants(self) -> tuple[int, ...]:
        """Species consumed by this reaction."""
        return (self.substrate, self.substrate2)


Reaction: TypeAlias = SinglePairReaction | DualPairReaction


class ReactionNetwork:
    """Ordered, append-only collection of reactions over ``n_species`` species."""

    def __init__(self, n_species: int) -> None:
        if n_species < 1:
            raise ValueError("n_species must be >= 1")
        self.n_species = n_species
        self._reactions: list[Reaction] = []

    def register(
        self,
        substrate: int,
        substrate2: int | None,
        product: int,
        product2: int | None,
        enzyme: int,
        rate: float,
    ) -> Reaction:
        """Append a reaction; pass ``None`` for both second-pair slots for a single pair.

        Duplicate and self-referential reactions are legal.
        """
        if (substrate2 is None) != (product2 is None):
            raise ValueError("substrate2 and product2 must both be given or both be None")
        n = self.n_species
        reaction: Reaction
        if substrate2 is None or product2 is None:
            reaction = SinglePairReaction(
                substrate=wrap(substrate, n),
                product=wrap(product, n),
                enzyme=wrap(enzyme, n),
                rate=float(rate),
            )
        else:
            reaction = DualPairReaction(
                substrate=wrap(substrate, n),
                substrate2=wrap(substrate2, n),
                product=wrap(product, n),
                product2=wrap(product2, n),
                enzyme=wrap(enzyme, n),
                rate=float(rate),
            )
        self._reactions.append(reaction)
        return reaction

    def for_each(self, visitor: Callable[[Reaction], None]) -> None:
        """Call ``visitor`` on every reaction in registration order."""
        for reaction in self._reactions:
            visitor(reaction)

    def __iter__(self) -> Iterator[Reaction]:
        return iter(self._reactions)

    def __len__(self) -> int:
        return len(self._reactions)

    def reactant_participation(self) -> Counter[int]:
        """Count, per species, the reactions that consume it."""
        counts: Counter[int] = Counter()
        for reaction in self._reactions:
            counts.update(reaction.reactants())
        return counts

    def recommended_reaction_order(self) -> int:
        """Largest reactant-participation count of any species (at least 1).

        This is a heuristic safety margin, not a guarantee: a ``reaction_order``
        below it lets a species consumed by many reactions be over-depleted in
        one step.
        """
        counts = self.reactant_participation()
        if not counts:
            return 1
        return max(counts.values())
