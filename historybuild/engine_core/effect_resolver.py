"""
Effect Resolver - Applies primitive effect lists to one side.

The resolver is a mechanical executor:
- Effects apply strictly in list order; a draw changes the hand before
  a later discard looks at it
- Only the acting side's PlayerState is touched
- No affordability or legality checks (that is the reducer's job)
- Never raises; running out of cards just stops a draw or discard early

Every call returns a new GameState.
"""

from __future__ import annotations
from typing import Callable, Iterable
import logging

from ..catalog.effect_dsl import Effect, EffectKind
from .state import GameState, Side

logger = logging.getLogger(__name__)

EffectHandler = Callable[[GameState, Side, Effect], GameState]


def apply_effects(state: GameState, side: Side, effects: Iterable[Effect]) -> GameState:
    """Apply effects in order and return the resulting state."""
    for effect in effects:
        state = apply_effect(state, side, effect)
    return state


def apply_effect(state: GameState, side: Side, effect: Effect) -> GameState:
    """Apply a single effect to one side."""
    handler = _HANDLERS.get(effect.kind)
    if handler is None:
        return state
    logger.debug("%s resolves %s", side.value, effect)
    return handler(state, side, effect)


# ============================================================================
# Card movement helpers (also used by the DRAW phase)
# ============================================================================

def reshuffle_discard_into_deck(state: GameState, side: Side) -> GameState:
    """Shuffle the discard pile to become the new deck."""
    player = state.get_player(side)
    shuffled, state = state.shuffle(player.discard.cards)
    player = player._copy_with(
        deck=player.deck.extend(shuffled),
        discard=player.discard.cleared(),
    )
    logger.debug("%s reshuffles %d cards into deck", side.value, len(shuffled))
    return state.with_player(side, player)


def draw_one(state: GameState, side: Side) -> tuple[GameState, bool]:
    """
    Draw the top card of the deck into hand.

    Reshuffles the discard pile if the deck is empty. Returns
    (new state, whether a card was drawn).
    """
    player = state.get_player(side)
    if player.deck.is_empty:
        if player.discard.is_empty:
            return state, False
        state = reshuffle_discard_into_deck(state, side)
        player = state.get_player(side)

    drawn, new_deck = player.deck.take_front(1)
    player = player._copy_with(deck=new_deck, hand=player.hand.extend(drawn))
    return state.with_player(side, player), True


def draw_cards(state: GameState, side: Side, count: int) -> GameState:
    """Draw up to count cards, stopping silently when nothing is left."""
    for _ in range(count):
        state, drew = draw_one(state, side)
        if not drew:
            break
    return state


def draw_up_to(state: GameState, side: Side, hand_size: int) -> GameState:
    """Draw until the hand holds hand_size cards or nothing is left."""
    missing = hand_size - state.get_player(side).hand.count
    return draw_cards(state, side, missing)


# ============================================================================
# Effect handlers
# ============================================================================

def _add_rice(state: GameState, side: Side, effect: Effect) -> GameState:
    player = state.get_player(side)
    return state.with_player(
        side, player._copy_with(rice_this_turn=player.rice_this_turn + effect.amount)
    )


def _add_knowledge(state: GameState, side: Side, effect: Effect) -> GameState:
    player = state.get_player(side)
    return state.with_player(
        side, player._copy_with(knowledge=player.knowledge + effect.amount)
    )


def _draw(state: GameState, side: Side, effect: Effect) -> GameState:
    return draw_cards(state, side, effect.amount)


def _discard(state: GameState, side: Side, effect: Effect) -> GameState:
    player = state.get_player(side)
    discarded, new_hand = player.hand.take_front(effect.amount)
    return state.with_player(
        side,
        player._copy_with(hand=new_hand, discard=player.discard.extend(discarded)),
    )


def _acquire(state: GameState, side: Side, effect: Effect) -> GameState:
    # Rewards from effects do not touch the supply; only BUY does
    if effect.card_id is None:
        return state
    player = state.get_player(side)
    return state.with_player(side, player._copy_with(discard=player.discard.add(effect.card_id)))


def _trash_self(state: GameState, side: Side, effect: Effect) -> GameState:
    # The card being resolved is the last one moved into played
    player = state.get_player(side)
    _, new_played = player.played.pop_last()
    return state.with_player(side, player._copy_with(played=new_played))


def _add_victory(state: GameState, side: Side, effect: Effect) -> GameState:
    # Victory points are recomputed from ownership by scoring
    return state


_HANDLERS: dict[EffectKind, EffectHandler] = {
    EffectKind.ADD_RICE: _add_rice,
    EffectKind.ADD_KNOWLEDGE: _add_knowledge,
    EffectKind.DRAW: _draw,
    EffectKind.DISCARD: _discard,
    EffectKind.ACQUIRE: _acquire,
    EffectKind.TRASH_SELF: _trash_self,
    EffectKind.ADD_VICTORY: _add_victory,
}
