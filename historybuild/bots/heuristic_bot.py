"""
Heuristic Bot - The automa opponent.

The bot:
- Plays the best-scoring person/event card in the ACTION phase
- Buys the best-ranked affordable supply card in the BUY phase
- Advances DRAW, RESOURCE and CLEANUP without deciding anything

The bot does NOT:
- Look ahead or search
- Model the human's hand
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import logging

from ..catalog.cards import CardDefinition
from ..engine_core.action_generator import affordable_card_ids, playable_card_ids
from ..engine_core.reducer import advance_phase
from ..engine_core.state import GameState, Side, TurnPhase
from .evaluator import CardEvaluator
from .policy import BotDecision, BotPolicy

logger = logging.getLogger(__name__)


@dataclass
class HeuristicBot(BotPolicy):
    """
    Automa with fixed card-scoring heuristics.

    Usage:
        bot = HeuristicBot()
        decision = bot.select_purchase(state)
        state = advance_phase(state, decision.card_id)
    """
    evaluator: CardEvaluator = field(default_factory=CardEvaluator)

    def select_action_card(self, state: GameState) -> BotDecision:
        """Play the hand card with the highest effect score, ties to higher cost."""
        if state.phase != TurnPhase.ACTION:
            raise ValueError(f"Action choice requested during {state.phase.name}")
        candidates = [state.catalog.require(card_id) for card_id in playable_card_ids(state)]
        return self._pick(candidates, self.evaluator.action_key, "play")

    def select_purchase(self, state: GameState) -> BotDecision:
        """Buy the affordable card in the highest tier, ties to higher cost."""
        if state.phase != TurnPhase.BUY:
            raise ValueError(f"Purchase choice requested during {state.phase.name}")
        candidates = [state.supply[card_id].card for card_id in affordable_card_ids(state)]
        return self._pick(candidates, self.evaluator.purchase_key, "buy")

    def _pick(
        self,
        candidates: list[CardDefinition],
        key: Callable[[CardDefinition], tuple[float, int]],
        verb: str,
    ) -> BotDecision:
        if not candidates:
            return BotDecision(card_id=None, explanation=f"Nothing to {verb}")

        scored = [(card, key(card)) for card in candidates]
        # Stable sort keeps hand/supply order among exact ties
        scored.sort(key=lambda x: x[1], reverse=True)
        best, best_key = scored[0]

        return BotDecision(
            card_id=best.id,
            explanation=f"Chose to {verb} {best.name} (score {best_key[0]:g}, cost {best.cost})",
            evaluated_cards=len(candidates),
            best_score=best_key[0],
            evaluation_details={card.id: k[0] for card, k in scored},
        )


def run_opponent_turn(
    state: GameState,
    policy: BotPolicy | None = None,
    side: Side = Side.CPU,
) -> GameState:
    """
    Drive the phase machine through the opponent's whole turn.

    Starts from whatever phase the state is in and stops when the game
    ends or control passes to the other side. Returns the state
    unchanged if it is not the opponent's turn.
    """
    bot = policy or HeuristicBot()

    while not state.ended and state.active_side == side:
        if state.phase == TurnPhase.ACTION:
            decision = bot.select_action_card(state)
        elif state.phase == TurnPhase.BUY:
            decision = bot.select_purchase(state)
        else:
            state = advance_phase(state)
            continue

        logger.debug("%s (%s): %s", side.value, bot.get_name(), decision.explanation)
        state = advance_phase(state, decision.card_id)

    return state
