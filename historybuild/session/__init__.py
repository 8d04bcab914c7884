"""
Session module - Human-vs-automa game driver.

Provides:
- GameLoop: Steps the human through a turn and runs the automa
- TurnResult: What happened in one step
"""

from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "GameLoop",
    "LoopState",
    "TurnResult",
]
