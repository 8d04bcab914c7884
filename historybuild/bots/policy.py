"""
Bot Policy - Interface for bot decision-making.

A BotPolicy looks at a game state in one of the two decision phases
and returns a decision:
- ACTION: which person/event card to play (or none)
- BUY: which supply card to buy (or none)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
import random

from ..engine_core.action_generator import affordable_card_ids, playable_card_ids

if TYPE_CHECKING:
    from ..engine_core.state import GameState


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    card_id None means "skip this phase".
    """
    card_id: str | None
    explanation: str = ""

    # Evaluation details (for debugging)
    evaluated_cards: int = 0
    best_score: float = 0.0
    evaluation_details: dict[str, Any] = field(default_factory=dict)


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    Implementations only pick among legal candidates; the reducer
    still re-checks every choice.
    """

    @abstractmethod
    def select_action_card(self, state: GameState) -> BotDecision:
        """Pick a hand card to play in the ACTION phase."""
        pass

    @abstractmethod
    def select_purchase(self, state: GameState) -> BotDecision:
        """Pick a supply card to buy in the BUY phase."""
        pass

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """
    Random policy - picks uniformly among legal choices, skip included.

    Used for:
    - Fuzzing the engine with varied games
    - Baseline comparison
    """

    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def select_action_card(self, state: GameState) -> BotDecision:
        options: list[str | None] = [None, *playable_card_ids(state)]
        return BotDecision(
            card_id=self.rng.choice(options),
            explanation="Selected randomly",
            evaluated_cards=len(options),
        )

    def select_purchase(self, state: GameState) -> BotDecision:
        options: list[str | None] = [None, *affordable_card_ids(state)]
        return BotDecision(
            card_id=self.rng.choice(options),
            explanation="Selected randomly",
            evaluated_cards=len(options),
        )


class FirstLegalPolicy(BotPolicy):
    """
    First-legal policy - always takes the first legal card.

    Used for deterministic testing.
    """

    def select_action_card(self, state: GameState) -> BotDecision:
        playable = playable_card_ids(state)
        return BotDecision(
            card_id=playable[0] if playable else None,
            explanation="Selected first playable card",
            evaluated_cards=len(playable),
        )

    def select_purchase(self, state: GameState) -> BotDecision:
        affordable = affordable_card_ids(state)
        return BotDecision(
            card_id=affordable[0] if affordable else None,
            explanation="Selected first affordable card",
            evaluated_cards=len(affordable),
        )
