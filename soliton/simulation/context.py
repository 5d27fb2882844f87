"""Explicitly owned simulation state: field, network, parameters, RNG and step counter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from soliton.config.types import SimulationConfig
from soliton.domain.field import ConcentrationField
from soliton.domain.network_builder import build_prime_offset_network
from soliton.domain.reactions import ReactionNetwork
from soliton.domain.seeding import seed_field
from soliton.simulation.engine import StepParams, step

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """One independent reaction-diffusion run."""

    field: ConcentrationField
    network: ReactionNetwork
    params: StepParams
    rng: np.random.Generator
    step_count: int = 0

    @classmethod
    def create(cls, config: SimulationConfig) -> Simulation:
        """Build the network, seed the field and return a ready-to-step simulation."""
        rng = np.random.default_rng(config.sim_seed)
        field = ConcentrationField(config.width, config.height, config.species)
        network = ReactionNetwork(config.species)
        build_prime_offset_network(
            network,
            reaction_order=config.reaction_order,
            rate=config.reaction_rate,
            rng=rng,
        )
        seed_field(
            field,
            config.background_concentration,
            rng,
            num_blocks=config.seed_blocks,
            block_half_width=config.seed_block_half_width,
        )
        simulation = cls(field=field, network=network, params=config.step_params(), rng=rng)
        simulation.check_reaction_order()
        return simulation

    def check_reaction_order(self) -> bool:
        """Warn when ``reaction_order`` is below the network's reactant participation.

        Returns True when the configured order is at least the recommended one.
        """
        recommended = self.network.recommended_reaction_order()
        if self.params.reaction_order < recommended:
            logger.warning(
                "reaction_order=%d is below the maximum reactant participation %d; "
                "concentrations may go negative",
                self.params.reaction_order,
                recommended,
            )
            return False
        return True

    def advance(self) -> int:
        """Run one step and return the number of completed steps."""
        step(self.field, self.network, self.params)
        self.step_count += 1
        return self.step_count
