"""
Game Loop - Drives a human-vs-automa game one step at a time.

The loop:
1. Human advances DRAW and RESOURCE
2. Human picks a card to play (or skips) in ACTION
3. Human picks a card to buy (or skips) in BUY
4. Human ends the turn in CLEANUP
5. Automa plays its whole turn
6. Repeat until the game ends

Front ends talk to the loop, never to the reducer directly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..bots.heuristic_bot import HeuristicBot, run_opponent_turn
from ..bots.policy import BotPolicy
from ..engine_core.reducer import advance_phase
from ..engine_core.state import GameState, Side, TurnPhase, Winner

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    WAITING_HUMAN_ACTION = "waiting_human_action"
    RUNNING_AUTOMA = "running_automa"
    GAME_OVER = "game_over"


@dataclass
class TurnResult:
    """
    Result of one loop call.

    changes holds every history line produced by the call, the
    automa's turn included.
    """
    success: bool
    state: GameState
    loop_state: LoopState

    changes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    # Game over info
    winner: Winner | None = None


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(create_sengoku_game(seed=7))

        loop.proceed()                    # DRAW
        loop.proceed()                    # RESOURCE
        loop.play_action_card("CHR_KENSHIN")
        loop.buy_card("RICE_MEDIUM")
        result = loop.proceed()           # CLEANUP, then the automa moves
    """

    def __init__(
        self,
        state: GameState,
        human_side: Side = Side.PLAYER,
        policy: BotPolicy | None = None,
    ):
        self.human_side = human_side
        self.policy = policy or HeuristicBot()
        self.state = state
        self.loop_state = LoopState.WAITING_HUMAN_ACTION

        # The automa may move first
        if not state.ended and state.active_side != human_side:
            self.state = self._run_automa(state)
        self._refresh_loop_state()

    @property
    def is_human_turn(self) -> bool:
        return not self.state.ended and self.state.active_side == self.human_side

    def proceed(self) -> TurnResult:
        """
        Advance the current phase without choosing a card.

        In ACTION and BUY this skips the decision.
        """
        return self._step(None, expected_phase=None)

    def play_action_card(self, card_id: str) -> TurnResult:
        """Play a person/event card from hand (ACTION phase only)."""
        return self._step(card_id, expected_phase=TurnPhase.ACTION)

    def buy_card(self, card_id: str) -> TurnResult:
        """Buy a card from the supply (BUY phase only)."""
        return self._step(card_id, expected_phase=TurnPhase.BUY)

    def _step(self, card_id: str | None, expected_phase: TurnPhase | None) -> TurnResult:
        refusal = self._check_turn(expected_phase)
        if refusal:
            return TurnResult(
                success=False,
                state=self.state,
                loop_state=self.loop_state,
                errors=[refusal],
            )

        before = self.state
        state = advance_phase(before, card_id)

        if not state.ended and state.active_side != self.human_side:
            state = self._run_automa(state)

        self.state = state
        self._refresh_loop_state()

        return TurnResult(
            success=True,
            state=state,
            loop_state=self.loop_state,
            changes=list(state.history[len(before.history):]),
            winner=state.winner if state.ended else None,
        )

    def _check_turn(self, expected_phase: TurnPhase | None) -> str | None:
        if self.state.ended:
            return "Game is over"
        if self.state.active_side != self.human_side:
            return f"Not {self.human_side.value}'s turn"
        if expected_phase is not None and self.state.phase != expected_phase:
            return f"Cannot do that during {self.state.phase.name}"
        return None

    def _run_automa(self, state: GameState) -> GameState:
        self.loop_state = LoopState.RUNNING_AUTOMA
        logger.debug("Running automa turn %d", state.turn_number)
        return run_opponent_turn(state, self.policy, side=self.human_side.other)

    def _refresh_loop_state(self) -> None:
        if self.state.ended:
            self.loop_state = LoopState.GAME_OVER
        else:
            self.loop_state = LoopState.WAITING_HUMAN_ACTION
