"""
History Build - Deck-Building Card Game Engine

A deterministic rules engine for a two-player deck-building game
(human vs. automa). The engine provides:
- An immutable state model
- A five-phase turn state machine
- A generic effect interpreter
- Victory point scoring
- A heuristic automa opponent
"""

__version__ = "0.1.0"
