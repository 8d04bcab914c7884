"""
Bots module - Automa AI implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- CardEvaluator: Scores candidate cards
- HeuristicBot: The default automa opponent
- run_opponent_turn: Plays a full automa turn
"""

from .policy import BotPolicy, BotDecision, RandomPolicy, FirstLegalPolicy
from .evaluator import CardEvaluator, EvaluationWeights
from .heuristic_bot import HeuristicBot, run_opponent_turn

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
    "CardEvaluator",
    "EvaluationWeights",
    "HeuristicBot",
    "run_opponent_turn",
]
