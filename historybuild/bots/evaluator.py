"""
Card Evaluator - Scores candidate cards for bot decisions.

Action cards are scored by a weighted sum over their effects:
knowledge gains weigh most, then draws, then rice.

Purchases are ranked by tier:
victory > knowledge-granting > resource > anything else.

Both rankings break ties by higher cost.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..catalog.cards import CardDefinition, CardType
from ..catalog.effect_dsl import EffectKind


@dataclass
class EvaluationWeights:
    """
    Weights for the card evaluator.

    Higher values = more importance.
    """
    # Action card effect weights (per point of amount)
    knowledge: float = 10.0
    draw: float = 5.0
    rice: float = 1.0

    # Purchase tiers
    victory_tier: float = 4.0
    knowledge_tier: float = 3.0
    resource_tier: float = 2.0
    other_tier: float = 1.0


class CardEvaluator:
    """Scores cards with fixed weights."""

    def __init__(self, weights: EvaluationWeights | None = None):
        self.weights = weights or EvaluationWeights()

    def score_action_card(self, card: CardDefinition) -> float:
        return (
            card.amount_of(EffectKind.ADD_KNOWLEDGE) * self.weights.knowledge
            + card.amount_of(EffectKind.DRAW) * self.weights.draw
            + card.amount_of(EffectKind.ADD_RICE) * self.weights.rice
        )

    def purchase_tier(self, card: CardDefinition) -> float:
        if card.card_type == CardType.VICTORY:
            return self.weights.victory_tier
        if card.has_effect(EffectKind.ADD_KNOWLEDGE):
            return self.weights.knowledge_tier
        if card.card_type == CardType.RESOURCE:
            return self.weights.resource_tier
        return self.weights.other_tier

    def action_key(self, card: CardDefinition) -> tuple[float, int]:
        """Sort key for action candidates (higher is better)."""
        return self.score_action_card(card), card.cost

    def purchase_key(self, card: CardDefinition) -> tuple[float, int]:
        """Sort key for purchase candidates (higher is better)."""
        return self.purchase_tier(card), card.cost
