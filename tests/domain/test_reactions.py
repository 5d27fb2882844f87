"""Tests for soliton.domain.reactions module."""

from __future__ import annotations

import pytest

from soliton.domain.reactions import DualPairReaction, ReactionNetwork, SinglePairReaction


class TestRegister:
    def test_single_pair(self) -> None:
        network = ReactionNetwork(5)
        reaction = network.register(0, None, 1, None, 2, 0.5)
        assert reaction == SinglePairReaction(substrate=0, product=1, enzyme=2, rate=0.5)
        assert not reaction.is_dual

    def test_dual_pair(self) -> None:
        network = ReactionNetwork(5)
        reaction = network.register(0, 1, 2, 3, 4, 1.0)
        assert reaction == DualPairReaction(
            substrate=0, substrate2=1, product=2, product2=3, enzyme=4, rate=1.0
        )
        assert reaction.is_dual

    def test_indices_are_wrapped(self) -> None:
        network = ReactionNetwork(5)
        reaction = network.register(-1, 7, 5, -5, 6, 1.0)
        assert isinstance(reaction, DualPairReaction)
        assert reaction.substrate == 4
        assert reaction.substrate2 == 2
        assert reaction.product == 0
        assert reaction.product2 == 0
        assert reaction.enzyme == 1

    def test_minus_one_is_an_index_not_absence(self) -> None:
        network = ReactionNetwork(4)
        reaction = network.register(0, -1, 1, -1, 2, 1.0)
        assert isinstance(reaction, DualPairReaction)
        assert reaction.substrate2 == 3
        assert reaction.product2 == 3

    @pytest.mark.parametrize("s2, p2", [(1, None), (None, 1)])
    def test_half_second_pair_rejected(self, s2: int | None, p2: int | None) -> None:
        network = ReactionNetwork(4)
        with pytest.raises(ValueError):
            network.register(0, s2, 2, p2, 3, 1.0)
        assert len(network) == 0

    def test_duplicates_and_self_reference_are_legal(self) -> None:
        network = ReactionNetwork(3)
        network.register(1, None, 1, None, 1, 1.0)
        network.register(1, None, 1, None, 1, 1.0)
        assert len(network) == 2

    def test_rejects_empty_species_axis(self) -> None:
        with pytest.raises(ValueError):
            ReactionNetwork(0)


class TestIteration:
    def test_for_each_in_registration_order(self) -> None:
        network = ReactionNetwork(10)
        for s in (3, 1, 2):
            network.register(s, None, 0, None, 0, 1.0)
        seen: list[int] = []
        network.for_each(lambda r: seen.append(r.substrate))
        assert seen == [3, 1, 2]
        assert [r.substrate for r in network] == [3, 1, 2]


class TestReactionOrderHeuristic:
    def test_empty_network_recommends_one(self) -> None:
        assert ReactionNetwork(3).recommended_reaction_order() == 1

    def test_counts_reactant_participation(self) -> None:
        network = ReactionNetwork(6)
        network.register(0, None, 1, None, 2, 1.0)
        network.register(0, 3, 4, 5, 2, 1.0)
        network.register(3, None, 0, None, 2, 1.0)
        counts = network.reactant_participation()
        assert counts[0] == 2
        assert counts[3] == 2
        assert counts[1] == 0
        assert network.recommended_reaction_order() == 2
