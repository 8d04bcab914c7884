"""
Tests for the human-vs-automa game loop.
"""

from ..bots import FirstLegalPolicy
from ..engine_core.setup import initialize
from ..engine_core.state import PlayerState, Side, TurnPhase, Winner
from ..games.sengoku import SENGOKU_STARTING_DECK, load_sengoku_catalog
from ..session import GameLoop, LoopState


class TestGameLoop:
    """Tests for stepping through a human turn."""

    def test_starts_waiting_for_human(self, sengoku_game):
        loop = GameLoop(sengoku_game)
        assert loop.loop_state == LoopState.WAITING_HUMAN_ACTION
        assert loop.is_human_turn
        assert loop.state is sengoku_game

    def test_proceed_advances_one_phase(self, sengoku_game):
        loop = GameLoop(sengoku_game)

        result = loop.proceed()

        assert result.success
        assert result.state.phase == TurnPhase.RESOURCE
        assert result.state.get_player(Side.PLAYER).hand.count == 5
        assert result.changes == ["player drew 5 card(s)"]
        assert loop.state is result.state

    def test_play_refused_outside_action(self, sengoku_game):
        loop = GameLoop(sengoku_game)

        result = loop.play_action_card("CHR_KENSHIN")

        assert not result.success
        assert result.errors
        assert loop.state is sengoku_game

    def test_buy_refused_outside_buy(self, sengoku_game):
        loop = GameLoop(sengoku_game)
        loop.proceed()
        loop.proceed()
        assert loop.state.phase == TurnPhase.ACTION

        result = loop.buy_card("RICE_SMALL")

        assert not result.success
        assert loop.state.phase == TurnPhase.ACTION

    def test_buy_card(self, make_state):
        player = PlayerState.create(rice_this_turn=2)
        loop = GameLoop(make_state(player=player, phase=TurnPhase.BUY))

        result = loop.buy_card("VP_VILLAGE")

        assert result.success
        assert result.state.phase == TurnPhase.CLEANUP
        assert result.state.get_player(Side.PLAYER).discard.cards == ("VP_VILLAGE",)

    def test_play_action_card(self, make_state):
        player = PlayerState.create(hand=["CHR_KENSHIN"])
        loop = GameLoop(make_state(player=player, phase=TurnPhase.ACTION))

        result = loop.play_action_card("CHR_KENSHIN")

        assert result.success
        assert result.state.get_player(Side.PLAYER).knowledge == 1

    def test_cleanup_runs_automa(self, sengoku_game):
        loop = GameLoop(sengoku_game, policy=FirstLegalPolicy())
        for _ in range(4):
            loop.proceed()
        assert loop.state.phase == TurnPhase.CLEANUP

        result = loop.proceed()

        assert result.success
        assert result.state.active_side == Side.PLAYER
        assert result.state.phase == TurnPhase.DRAW
        assert result.state.turn_number == 2
        assert result.state.get_player(Side.CPU).turns_taken == 1
        assert any(line.startswith("cpu") for line in result.changes)
        assert loop.loop_state == LoopState.WAITING_HUMAN_ACTION

    def test_automa_moves_first(self):
        state = initialize(load_sengoku_catalog(), SENGOKU_STARTING_DECK, seed=3, first_side=Side.CPU)

        loop = GameLoop(state)

        assert loop.is_human_turn
        assert loop.state.phase == TurnPhase.DRAW
        assert loop.state.get_player(Side.CPU).turns_taken == 1

    def test_human_as_cpu_side(self, sengoku_game):
        loop = GameLoop(sengoku_game, human_side=Side.CPU)
        assert loop.state.active_side == Side.CPU
        assert loop.state.get_player(Side.PLAYER).turns_taken == 1


class TestGameOver:
    """Tests for the end of a looped game."""

    def play_to_end(self, loop):
        result = None
        for _ in range(500):
            result = loop.proceed()
            if result.state.ended:
                return result
        raise AssertionError("game did not end")

    def test_game_reaches_end(self, sengoku_game):
        loop = GameLoop(sengoku_game)

        result = self.play_to_end(loop)

        assert result.loop_state == LoopState.GAME_OVER
        assert result.winner in (Winner.PLAYER, Winner.CPU, Winner.DRAW)

    def test_calls_refused_after_end(self, sengoku_game):
        loop = GameLoop(sengoku_game)
        self.play_to_end(loop)
        final = loop.state

        for result in (loop.proceed(), loop.play_action_card("CHR_KENSHIN"), loop.buy_card("RICE_SMALL")):
            assert not result.success
            assert result.loop_state == LoopState.GAME_OVER
        assert loop.state is final
