"""
Integration tests for whole games.

Tests:
- Sengoku setup
- Bot-vs-bot games run to completion
- Invariants hold at every step
- Seeded games replay identically
"""

from collections import Counter

import pytest

from ..bots import HeuristicBot, RandomPolicy, run_opponent_turn
from ..catalog import CatalogValidationError
from ..config import RuleConfig
from ..engine_core.reducer import advance_phase
from ..engine_core.scoring import judge_winner
from ..engine_core.setup import StartingDeckSpec, initialize
from ..engine_core.state import Side, TurnPhase, Winner
from ..games.sengoku import SENGOKU_STARTING_DECK, create_sengoku_game, load_sengoku_catalog

MAX_STEPS = 1000


def bot_step(state, policy):
    """Advance one phase, letting the policy decide for the active side."""
    if state.phase == TurnPhase.ACTION:
        return advance_phase(state, policy.select_action_card(state).card_id)
    if state.phase == TurnPhase.BUY:
        return advance_phase(state, policy.select_purchase(state).card_id)
    return advance_phase(state)


def play_out(state, policy):
    """Play both sides with the same policy until the game ends."""
    for _ in range(MAX_STEPS):
        if state.ended:
            return state
        state = run_opponent_turn(state, policy, side=state.active_side)
    raise AssertionError("game did not end")


class TestSengokuSetup:
    """Tests for the initial state."""

    def test_initial_state(self, sengoku_game):
        state = sengoku_game
        assert state.phase == TurnPhase.DRAW
        assert state.active_side == Side.PLAYER
        assert state.turn_number == 1
        assert not state.ended
        assert state.winner == Winner.UNDECIDED
        assert state.history[0] == "Game started (seed 42)"

    def test_starting_decks(self, sengoku_game):
        for side in Side:
            player = sengoku_game.get_player(side)
            assert player.deck.count == 10
            assert player.hand.is_empty
            assert Counter(player.deck.cards) == Counter({"RICE_SMALL": 7, "VP_VILLAGE": 3})

    def test_supply_counts(self, sengoku_game):
        supply = sengoku_game.supply
        assert len(supply) == 15
        assert supply["VP_COUNTRY"].remaining == 12
        assert supply["RICE_MEDIUM"].remaining == 10
        assert supply["CHR_KENSHIN"].remaining == 10

    def test_same_seed_same_decks(self):
        first = create_sengoku_game(seed=5)
        second = create_sengoku_game(seed=5)
        assert first.players == second.players

    def test_seeds_shuffle_differently(self):
        decks = {create_sengoku_game(seed=seed).get_player(Side.PLAYER).deck.cards for seed in range(6)}
        assert len(decks) > 1

    def test_unknown_starting_card(self):
        deck = StartingDeckSpec.of([("RICE_SMALL", 7), ("KOKU", 3)])
        with pytest.raises(CatalogValidationError) as exc:
            initialize(load_sengoku_catalog(), deck, seed=1)
        assert any("KOKU" in e for e in exc.value.errors)

    def test_supply_subset(self):
        state = initialize(
            load_sengoku_catalog(),
            SENGOKU_STARTING_DECK,
            seed=1,
            supply_ids=["RICE_SMALL", "RICE_MEDIUM", "VP_VILLAGE"],
        )
        assert list(state.supply) == ["RICE_SMALL", "RICE_MEDIUM", "VP_VILLAGE"]

    def test_cpu_moves_first(self):
        state = initialize(load_sengoku_catalog(), SENGOKU_STARTING_DECK, seed=1, first_side=Side.CPU)
        assert state.active_side == Side.CPU
        state = run_opponent_turn(state)
        assert state.active_side == Side.PLAYER
        assert state.turn_number == 1


class TestFullGames:
    """Bot-vs-bot games."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_heuristic_game_ends(self, seed):
        state = play_out(create_sengoku_game(seed=seed), HeuristicBot())

        assert state.ended
        assert state.winner == judge_winner(state)
        assert state.winner != Winner.UNDECIDED
        assert state.turn_number <= state.rules.max_turns

    def test_random_game_ends(self):
        state = play_out(create_sengoku_game(seed=9), RandomPolicy(seed=9))
        assert state.ended

    def test_short_game(self, short_rules):
        state = play_out(create_sengoku_game(seed=4, rules=short_rules), HeuristicBot())
        assert state.ended
        assert state.turn_number == 3

    def test_seeded_games_replay_identically(self):
        first = play_out(create_sengoku_game(seed=21), HeuristicBot())
        second = play_out(create_sengoku_game(seed=21), HeuristicBot())

        assert first.history == second.history
        assert first.players == second.players
        assert first.winner == second.winner


class TestInvariants:
    """Invariants checked after every single phase transition."""

    @pytest.mark.parametrize("policy", [HeuristicBot(), RandomPolicy(seed=13)])
    def test_invariants_hold(self, policy):
        state = create_sengoku_game(seed=17)
        initial_piles = {card_id: pile.remaining for card_id, pile in state.supply.items()}

        for _ in range(MAX_STEPS):
            if state.ended:
                break
            before = state
            side = before.active_side
            phase = before.phase
            state = bot_step(before, policy)

            bought = (
                sum(p.remaining for p in before.supply.values())
                - sum(p.remaining for p in state.supply.values())
            )
            assert bought in (0, 1)
            if bought:
                assert phase == TurnPhase.BUY

            # No card created or destroyed except by purchase
            assert state.get_player(side).card_count == before.get_player(side).card_count + bought
            assert state.get_player(side.other) == before.get_player(side.other)

            for s in Side:
                assert state.get_player(s).rice_this_turn >= 0

            if phase == TurnPhase.CLEANUP:
                assert state.get_player(side).rice_this_turn == 0
                assert not state.get_player(side).has_bought
                if not state.ended:
                    assert state.active_side == side.other
                    assert state.phase == TurnPhase.DRAW

            for card_id, pile in state.supply.items():
                assert pile.remaining <= before.supply[card_id].remaining
                assert 0 <= pile.remaining <= initial_piles[card_id]

            assert state.get_player(side).knowledge >= before.get_player(side).knowledge

        assert state.ended

    def test_rules_travel_with_state(self):
        rules = RuleConfig(hand_size=4, max_turns=5)
        state = create_sengoku_game(seed=2, rules=rules)
        state = advance_phase(state)
        assert state.rules is rules
        assert state.get_player(Side.PLAYER).hand.count == 4
