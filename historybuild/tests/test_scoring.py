"""
Tests for victory point scoring and the winner comparator.
"""

from ..engine_core.scoring import compute_victory_points, judge_winner, score_table
from ..engine_core.state import PlayerState, Side, Winner


class TestVictoryPoints:
    """Tests for compute_victory_points."""

    def test_two_cards_in_discard(self, make_state):
        """Two 2-point cards in discard score 4."""
        state = make_state(player=PlayerState.create(discard=["VP_SHRINE", "VP_SHRINE"]))
        assert compute_victory_points(state, Side.PLAYER) == 4

    def test_counts_every_zone(self, make_state):
        player = PlayerState.create(
            deck=["VP_VILLAGE"],
            hand=["VP_SHRINE"],
            discard=["VP_COUNTRY"],
            played=["VP_VILLAGE", "RICE_SMALL"],
        )
        state = make_state(player=player)
        assert compute_victory_points(state, Side.PLAYER) == 1 + 2 + 6 + 1

    def test_non_victory_cards_score_zero(self, make_state):
        player = PlayerState.create(hand=["RICE_SMALL", "CHR_KENSHIN", "EVT_GIFT"])
        assert compute_victory_points(make_state(player=player), Side.PLAYER) == 0

    def test_unknown_ids_score_zero(self, make_state):
        player = PlayerState.create(discard=["VP_VILLAGE", "LOST_CARD"])
        assert compute_victory_points(make_state(player=player), Side.PLAYER) == 1

    def test_idempotent(self, make_state):
        state = make_state(player=PlayerState.create(discard=["VP_COUNTRY", "VP_VILLAGE"]))
        assert compute_victory_points(state, Side.PLAYER) == compute_victory_points(state, Side.PLAYER)

    def test_only_counts_own_cards(self, make_state):
        state = make_state(
            player=PlayerState.create(discard=["VP_VILLAGE"]),
            cpu=PlayerState.create(discard=["VP_COUNTRY"]),
        )
        assert score_table(state) == {Side.PLAYER: 1, Side.CPU: 6}


class TestJudgeWinner:
    """Tests for the comparator."""

    def test_higher_score_wins(self, make_state):
        state = make_state(player=PlayerState.create(discard=["VP_SHRINE"]))
        assert judge_winner(state) == Winner.PLAYER

    def test_cpu_wins(self, make_state):
        state = make_state(cpu=PlayerState.create(hand=["VP_VILLAGE"]))
        assert judge_winner(state) == Winner.CPU

    def test_equal_scores_draw(self, make_state):
        state = make_state(
            player=PlayerState.create(discard=["VP_SHRINE"]),
            cpu=PlayerState.create(deck=["VP_VILLAGE", "VP_VILLAGE"]),
        )
        assert judge_winner(state) == Winner.DRAW
