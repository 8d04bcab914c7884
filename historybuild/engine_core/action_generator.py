"""
Action Generator - Legal choices for the decision phases.

Used by:
1. The reducer, to decide whether a chosen card is a legal play/buy
2. Bots, to enumerate candidates
3. Front ends, to enable or grey out cards without duplicating rules

The affordability rule lives only here.
"""

from __future__ import annotations

from ..catalog.cards import CardDefinition
from .action import Action
from .state import GameState, PlayerState, TurnPhase


def can_afford(player: PlayerState, card: CardDefinition) -> bool:
    """Enough rice for the cost and enough knowledge for the requirement."""
    return (
        player.rice_this_turn >= card.cost
        and player.knowledge >= card.knowledge_required
    )


def can_buy(state: GameState, card_id: str | None) -> bool:
    """Affordable for the active side, the pile still has stock, and nothing bought yet this turn."""
    if card_id is None or state.active_player.has_bought:
        return False
    pile = state.supply.get(card_id)
    if pile is None or pile.is_empty:
        return False
    return can_afford(state.active_player, pile.card)


def can_play(state: GameState, card_id: str | None) -> bool:
    """The card is in the active hand, is a person or event, and no action was played yet."""
    if card_id is None or state.active_player.has_played_action:
        return False
    if not state.active_player.hand.contains(card_id):
        return False
    card = state.get_card(card_id)
    return card is not None and card.card_type.is_action


def playable_card_ids(state: GameState) -> list[str]:
    """Distinct playable hand cards, in hand order."""
    seen: list[str] = []
    for card_id in state.active_player.hand.cards:
        if card_id not in seen and can_play(state, card_id):
            seen.append(card_id)
    return seen


def affordable_card_ids(state: GameState) -> list[str]:
    """Supply piles the active side can buy right now, in supply order."""
    return [card_id for card_id in state.supply if can_buy(state, card_id)]


def legal_actions(state: GameState) -> list[Action]:
    """
    Every legal action for the current phase.

    Decision phases always include the "skip" option (card_id=None).
    """
    if state.ended:
        return []

    if state.phase == TurnPhase.ACTION:
        return [Action.play_card(None)] + [
            Action.play_card(card_id) for card_id in playable_card_ids(state)
        ]

    if state.phase == TurnPhase.BUY:
        return [Action.buy_card(None)] + [
            Action.buy_card(card_id) for card_id in affordable_card_ids(state)
        ]

    return [Action.advance()]
