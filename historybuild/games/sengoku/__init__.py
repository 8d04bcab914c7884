"""
Sengoku - The bundled mini deck.

Rice bags fund purchases, warlords and events build knowledge and
card draw, and villages, castle towns and provinces score points.
"""

from .setup import (
    SENGOKU_STARTING_DECK,
    create_sengoku_game,
    load_sengoku_catalog,
)

__all__ = [
    "SENGOKU_STARTING_DECK",
    "create_sengoku_game",
    "load_sengoku_catalog",
]
