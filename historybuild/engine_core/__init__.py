"""
Engine Core - Deterministic game state management and effect resolution.

The engine is the runtime that:
1. Creates a GameState from a catalog and starting deck
2. Advances it through the five turn phases
3. Resolves card effects
4. Scores the result
"""

from .state import GameState, PlayerState, SupplyPile, Side, TurnPhase, Winner, Zone
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action, advance_phase, play_turn, evaluate_game_end
from .action_generator import (
    can_afford,
    can_buy,
    can_play,
    playable_card_ids,
    affordable_card_ids,
    legal_actions,
)
from .effect_resolver import apply_effect, apply_effects
from .scoring import compute_victory_points, judge_winner
from .setup import StartingDeckSpec, initialize

__all__ = [
    "GameState",
    "PlayerState",
    "SupplyPile",
    "Side",
    "TurnPhase",
    "Winner",
    "Zone",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "advance_phase",
    "play_turn",
    "evaluate_game_end",
    "can_afford",
    "can_buy",
    "can_play",
    "playable_card_ids",
    "affordable_card_ids",
    "legal_actions",
    "apply_effect",
    "apply_effects",
    "compute_victory_points",
    "judge_winner",
    "StartingDeckSpec",
    "initialize",
]
