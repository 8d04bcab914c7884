"""
Tests for the presentation snapshot models.
"""

import json

from ..api.schemas import GameSnapshot
from ..engine_core.reducer import advance_phase
from ..engine_core.state import PlayerState, Side, TurnPhase


class TestGameSnapshot:
    """Tests for GameSnapshot.from_state."""

    def test_basic_fields(self, sengoku_game):
        snapshot = GameSnapshot.from_state(sengoku_game)

        assert snapshot.viewer == "player"
        assert snapshot.phase == "draw"
        assert snapshot.active_side == "player"
        assert snapshot.turn_number == 1
        assert not snapshot.ended
        assert snapshot.winner is None
        assert len(snapshot.supply) == 15

    def test_hand_visible_only_to_viewer(self, sengoku_game):
        state = advance_phase(sengoku_game)
        snapshot = GameSnapshot.from_state(state)

        me, opponent = snapshot.players
        assert me.is_viewer and me.side == "player"
        assert me.hand == list(state.get_player(Side.PLAYER).hand.cards)
        assert me.zones.hand == 5
        assert me.zones.deck == 5
        assert opponent.hand == []
        assert opponent.zones.deck == 10

    def test_cpu_viewer(self, sengoku_game):
        snapshot = GameSnapshot.from_state(sengoku_game, viewer=Side.CPU)
        assert [p.is_viewer for p in snapshot.players] == [False, True]

    def test_victory_points_and_counters(self, make_state):
        player = PlayerState.create(discard=["VP_SHRINE"], rice_this_turn=3, knowledge=2)
        snapshot = GameSnapshot.from_state(make_state(player=player, phase=TurnPhase.BUY))

        me = snapshot.players[0]
        assert me.victory_points == 2
        assert me.rice == 3
        assert me.knowledge == 2

    def test_affordable_flags(self, make_state):
        player = PlayerState.create(rice_this_turn=2)
        state = make_state(player=player, supply={"RICE_SMALL": 1, "VP_VILLAGE": 0, "VP_SHRINE": 3, "RICE_MEDIUM": 3})

        flags = {pile.card.card_id: pile.affordable for pile in GameSnapshot.from_state(state).supply}

        assert flags == {
            "RICE_SMALL": True,
            "VP_VILLAGE": False,
            "VP_SHRINE": False,
            "RICE_MEDIUM": False,
        }

    def test_ended_game_reports_winner(self, make_state):
        state = make_state(
            cpu=PlayerState.create(discard=["VP_VILLAGE"]),
            phase=TurnPhase.CLEANUP,
            active_side=Side.CPU,
            turn_number=24,
        )
        snapshot = GameSnapshot.from_state(advance_phase(state))

        assert snapshot.ended
        assert snapshot.winner == "cpu"
        assert not any(p.is_current_turn for p in snapshot.players)

    def test_serializes_to_json(self, sengoku_game):
        data = json.loads(GameSnapshot.from_state(sengoku_game).model_dump_json())
        assert data["supply"][0]["card"]["card_id"] == "RICE_SMALL"
        assert data["recent_changes"] == ["Game started (seed 42)"]
