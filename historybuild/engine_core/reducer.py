"""
Reducer - The five-phase turn state machine.

DRAW -> RESOURCE -> ACTION -> BUY -> CLEANUP -> (other side) DRAW

Design principles:
- Pure function: (state, action) -> new_state
- Decision phases (ACTION, BUY) accept an optional card id and
  degrade to a plain phase advance when the choice is absent or illegal
- End of game is only evaluated inside CLEANUP
- Once a game has ended every action is refused
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable
import logging

from ..catalog.cards import CardType
from .action import Action, ActionType, ActionResult
from .action_generator import can_buy, can_play
from .effect_resolver import apply_effects, draw_up_to
from .scoring import judge_winner, score_table
from .state import GameState, Side, TurnPhase, Winner

logger = logging.getLogger(__name__)

PhaseHandler = Callable[[GameState, Action], ActionResult]


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            error, code = validation_error
            return ActionResult.failure(error, error_code=code)

        handler = self._get_handler(state.phase)
        if not handler:
            return ActionResult.failure(
                f"No handler for phase: {state.phase}",
                error_code="NO_HANDLER",
            )

        result = handler(state, action)
        if result.success and result.new_state is not None:
            result.new_state = result.new_state.with_log(*result.state_changes)
            logger.debug("%s", "; ".join(result.state_changes))
        return result

    def _validate_action(self, state: GameState, action: Action) -> tuple[str, str] | None:
        """
        Validate that an action fits the current state.

        Returns (message, code) if refused, None if accepted. Bad card
        choices are not refused here; they become no-op advances.
        """
        if state.ended:
            return "Game is over - no actions allowed", "GAME_OVER"

        if action.action_type == ActionType.PLAY_CARD and state.phase != TurnPhase.ACTION:
            return f"Cannot play a card during {state.phase.name}", "WRONG_PHASE"

        if action.action_type == ActionType.BUY_CARD and state.phase != TurnPhase.BUY:
            return f"Cannot buy a card during {state.phase.name}", "WRONG_PHASE"

        return None

    def _get_handler(self, phase: TurnPhase) -> PhaseHandler | None:
        """Get the handler function for a phase."""
        handlers = {
            TurnPhase.DRAW: self._handle_draw,
            TurnPhase.RESOURCE: self._handle_resource,
            TurnPhase.ACTION: self._handle_action,
            TurnPhase.BUY: self._handle_buy,
            TurnPhase.CLEANUP: self._handle_cleanup,
        }
        return handlers.get(phase)

    def _handle_draw(self, state: GameState, action: Action) -> ActionResult:
        """Refill the active hand up to the hand size."""
        side = state.active_side
        before = state.active_player.hand.count
        new_state = draw_up_to(state, side, state.rules.hand_size)
        drawn = new_state.active_player.hand.count - before

        return ActionResult.success_with_state(
            new_state._copy_with(phase=TurnPhase.RESOURCE),
            changes=[f"{side.value} drew {drawn} card(s)"],
        )

    def _handle_resource(self, state: GameState, action: Action) -> ActionResult:
        """Auto-play every resource card in hand, in hand order."""
        side = state.active_side
        player = state.active_player

        resource_ids: list[str] = []
        remaining: list[str] = []
        for card_id in player.hand.cards:
            card = state.get_card(card_id)
            if card is not None and card.card_type == CardType.RESOURCE:
                resource_ids.append(card_id)
            else:
                remaining.append(card_id)

        new_player = player._copy_with(
            hand=player.hand.cleared().extend(remaining),
            played=player.played.extend(resource_ids),
        )
        new_state = state.with_player(side, new_player)

        for card_id in resource_ids:
            new_state = apply_effects(new_state, side, state.catalog.require(card_id).effects)

        rice = new_state.active_player.rice_this_turn
        return ActionResult.success_with_state(
            new_state._copy_with(phase=TurnPhase.ACTION),
            changes=[f"{side.value} played {len(resource_ids)} resource card(s), rice now {rice}"],
        )

    def _handle_action(self, state: GameState, action: Action) -> ActionResult:
        """Play the chosen person/event card, or skip."""
        side = state.active_side
        card_id = action.card_id
        next_phase = state._copy_with(phase=TurnPhase.BUY)

        if card_id is None:
            return ActionResult.success_with_state(next_phase, changes=[f"{side.value} played no action"])

        if state.active_player.has_played_action:
            return ActionResult.success_with_state(
                next_phase,
                changes=[f"{side.value} already played an action this turn; action skipped"],
            )

        if not can_play(state, card_id):
            return ActionResult.success_with_state(
                next_phase,
                changes=[f"{side.value} could not play {card_id}; action skipped"],
            )

        card = state.catalog.require(card_id)
        player = state.active_player
        new_player = player._copy_with(
            hand=player.hand.remove(card_id),
            played=player.played.add(card_id),
            has_played_action=True,
        )
        new_state = apply_effects(state.with_player(side, new_player), side, card.effects)

        return ActionResult.success_with_state(
            new_state._copy_with(phase=TurnPhase.BUY),
            changes=[f"{side.value} played {card.name}"],
        )

    def _handle_buy(self, state: GameState, action: Action) -> ActionResult:
        """Buy the chosen supply card if stocked and affordable, or skip."""
        side = state.active_side
        card_id = action.card_id
        next_phase = state._copy_with(phase=TurnPhase.CLEANUP)

        if card_id is None:
            return ActionResult.success_with_state(next_phase, changes=[f"{side.value} bought nothing"])

        if state.active_player.has_bought:
            return ActionResult.success_with_state(
                next_phase,
                changes=[f"{side.value} already bought this turn; purchase skipped"],
            )

        if not can_buy(state, card_id):
            return ActionResult.success_with_state(
                next_phase,
                changes=[f"{side.value} could not buy {card_id}; purchase skipped"],
            )

        pile = state.supply[card_id]
        player = state.active_player
        new_player = player._copy_with(
            rice_this_turn=player.rice_this_turn - pile.card.cost,
            discard=player.discard.add(card_id),
            has_bought=True,
        )
        new_state = state.with_player(side, new_player).with_pile(card_id, pile.take_one())

        return ActionResult.success_with_state(
            new_state._copy_with(phase=TurnPhase.CLEANUP),
            changes=[f"{side.value} bought {pile.card.name} ({pile.remaining - 1} left)"],
        )

    def _handle_cleanup(self, state: GameState, action: Action) -> ActionResult:
        """Discard hand and play area, reset the turn, pass control, check for game end."""
        side = state.active_side
        player = state.active_player

        new_player = player._copy_with(
            discard=player.discard.extend(player.hand.cards + player.played.cards),
            hand=player.hand.cleared(),
            played=player.played.cleared(),
            rice_this_turn=0,
            turns_taken=player.turns_taken + 1,
            has_played_action=False,
            has_bought=False,
        )

        next_side = side.other
        turn_number = state.turn_number
        if next_side == state.first_side:
            turn_number += 1

        new_state = state.with_player(side, new_player)._copy_with(
            active_side=next_side,
            turn_number=turn_number,
        )
        changes = [f"{side.value} ended turn; {next_side.value} to move (turn {turn_number})"]

        reason = evaluate_game_end(new_state)
        if reason:
            winner = judge_winner(new_state)
            scores = score_table(new_state)
            logger.info(
                "Game over (%s): %s wins, player %d - cpu %d",
                reason, winner.value, scores[Side.PLAYER], scores[Side.CPU],
            )
            changes.append(f"Game over ({reason}): {winner.value}")
            return ActionResult.success_with_state(
                new_state._copy_with(ended=True, winner=winner),
                changes=changes,
            )

        return ActionResult.success_with_state(
            new_state._copy_with(phase=TurnPhase.DRAW, ended=False, winner=Winner.UNDECIDED),
            changes=changes,
        )


def evaluate_game_end(state: GameState) -> str | None:
    """
    Check the end-of-game conditions.

    Returns a short reason if the game should end, None otherwise.
    """
    if state.turn_number >= state.rules.max_turns:
        return "turn limit"

    for card_id, pile in state.supply.items():
        if pile.card.card_type == CardType.VICTORY and pile.is_empty:
            return f"victory pile {card_id} empty"

    depleted = state.depleted_piles()
    if len(depleted) >= state.rules.depleted_piles_to_end:
        return f"{len(depleted)} supply piles empty"

    return None


def apply_action(state: GameState, action: Action) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    return Reducer().apply(state, action)


def advance_phase(state: GameState, chosen_id: str | None = None) -> GameState:
    """
    Run the current phase and return the next state.

    chosen_id is read as a hand card in ACTION and a supply card in
    BUY, and ignored in the other phases. An ended game is returned
    unchanged.
    """
    if state.phase == TurnPhase.ACTION:
        action = Action.play_card(chosen_id)
    elif state.phase == TurnPhase.BUY:
        action = Action.buy_card(chosen_id)
    else:
        action = Action.advance()

    result = apply_action(state, action)
    if not result.success:
        return state
    return result.new_state


def play_turn(
    state: GameState,
    action_card_id: str | None = None,
    buy_card_id: str | None = None,
) -> GameState:
    """
    Run the active side's turn from its current phase through CLEANUP
    with pre-decided choices.
    """
    side = state.active_side
    while not state.ended and state.active_side == side:
        if state.phase == TurnPhase.ACTION:
            state = advance_phase(state, action_card_id)
        elif state.phase == TurnPhase.BUY:
            state = advance_phase(state, buy_card_id)
        else:
            state = advance_phase(state)
    return state
