"""
Action System - Actions, payloads, and results.

Every transition of the phase machine is driven by an Action:
- ADVANCE: run the current phase with no decision
- PLAY_CARD: ACTION phase with a chosen hand card
- BUY_CARD: BUY phase with a chosen supply card

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    ADVANCE = "advance"
    PLAY_CARD = "play_card"
    BUY_CARD = "buy_card"


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action.

    card_id is a hand card for PLAY_CARD and a supply pile for BUY_CARD.
    """
    card_id: str | None = None


@dataclass(frozen=True)
class Action:
    """A complete action to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @property
    def card_id(self) -> str | None:
        return self.payload.card_id

    @classmethod
    def advance(cls) -> Action:
        """Factory for a no-decision phase advance."""
        return cls(action_type=ActionType.ADVANCE)

    @classmethod
    def play_card(cls, card_id: str | None) -> Action:
        """Factory for playing a person/event card in the ACTION phase."""
        return cls(action_type=ActionType.PLAY_CARD, payload=ActionPayload(card_id=card_id))

    @classmethod
    def buy_card(cls, card_id: str | None) -> Action:
        """Factory for buying a supply card in the BUY phase."""
        return cls(action_type=ActionType.BUY_CARD, payload=ActionPayload(card_id=card_id))


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether the action was accepted
    - New state (if accepted)
    - Errors (if refused)
    - Human-readable changes (for UI/logging)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
