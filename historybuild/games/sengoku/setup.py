"""
Sengoku Game Setup - The bundled Sengoku-era mini deck.

The card list ships in the legacy dialect and is converted once per
process. Each side starts with 7 Small Rice Bags and 3 Villages.
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path

from ...catalog.cards import CardCatalog
from ...catalog.legacy import load_legacy_catalog_file
from ...config import RuleConfig
from ...engine_core.setup import StartingDeckSpec, initialize
from ...engine_core.state import GameState

CARDS_FILE = Path(__file__).with_name("cards.json")
ERA = "Sengoku"

SENGOKU_STARTING_DECK = StartingDeckSpec.of([
    ("RICE_SMALL", 7),
    ("VP_VILLAGE", 3),
])


@lru_cache(maxsize=1)
def load_sengoku_catalog() -> CardCatalog:
    """Load and convert the bundled card list (cached)."""
    return load_legacy_catalog_file(CARDS_FILE, era=ERA)


def create_sengoku_game(
    seed: int | None = None,
    rules: RuleConfig | None = None,
) -> GameState:
    """
    Set up a new Sengoku game.

    Args:
        seed: Seed for deterministic shuffling
        rules: Rule overrides (HISTORYBUILD_* environment values if None)

    Returns:
        Initial GameState ready for the first DRAW phase
    """
    return initialize(
        load_sengoku_catalog(),
        SENGOKU_STARTING_DECK,
        seed=seed,
        rules=rules,
    )
