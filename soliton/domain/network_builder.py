"""Procedural reaction-network generator built on the registration interface.

Every species participates in reactions of the form

    s(i) + s(i + p) -[s(i + 2p)]-> s(i + 3p) + s(i + 4p)

for a run of distinct primes ``p``, alternating the offset sign after each
prime. Using prime offsets avoids short loops where a species regenerates
itself within a couple of reactions.
"""

from __future__ import annotations

import numpy as np

from soliton.config.constants import OFFSET_PRIMES, REACTION_RATE
from soliton.domain.reactions import ReactionNetwork


def random_rate(rng: np.random.Generator) -> float:
    """Draw a log-uniform rate constant in [0.01, 0.1)."""
    return float(10.0 ** (rng.random() - 2.0))


def build_prime_offset_network(
    network: ReactionNetwork,
    reaction_order: int,
    rate: float | None = REACTION_RATE,
    rng: np.random.Generator | None = None,
    primes: tuple[int, ...] = OFFSET_PRIMES,
) -> int:
    """Register prime-offset dual-pair reactions for every species.

    Each reaction names two reactants, so ``reaction_order // 2`` primes give
    every species ``reaction_order`` reactant participations (rounded down to
    an even count). ``rate=None`` draws a random rate per reaction from ``rng``.

    Returns the number of reactions registered.
    """
    if reaction_order < 1:
        raise ValueError("reaction_order must be >= 1")
    n_primes = reaction_order // 2
    if n_primes > len(primes):
        raise ValueError(f"reaction_order needs {n_primes} primes, only {len(primes)} available")
    if rate is None and rng is None:
        raise ValueError("rng is required when rate is None")

    n = network.n_species
    registered = 0
    sign = 1
    for prime in primes[:n_primes]:
        step = prime * sign
        for z in range(n):
            reaction_rate = rate if rate is not None else random_rate(rng)  # type: ignore[arg-type]
            network.register(
                substrate=z,
                substrate2=(z + step) % n,
                product=(z + 3 * step) % n,
                product2=(z + 4 * step) % n,
                enzyme=(z + 2 * step) % n,
                rate=reaction_rate,
            )
            registered += 1
        sign = -sign
    return registered
