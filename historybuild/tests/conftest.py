"""
Pytest fixtures for historybuild tests.
"""

import random

import pytest

from ..catalog import CardCatalog, load_catalog
from ..config import RuleConfig
from ..engine_core.state import GameState, PlayerState, Side, SupplyPile, TurnPhase
from ..games.sengoku import create_sengoku_game


# A small catalog that exercises every effect primitive
TEST_CARDS = [
    {"id": "RICE_SMALL", "name": "Small Rice Bag", "type": "resource", "cost": 0,
     "effects": [{"addRice": 1}]},
    {"id": "RICE_MEDIUM", "name": "Rice Bale", "type": "resource", "cost": 3,
     "effects": [{"addRice": 2}]},
    {"id": "SCROLL", "name": "Scroll", "type": "resource", "cost": 4,
     "effects": [{"addKnowledge": 1}]},
    {"id": "CHR_KENSHIN", "name": "Uesugi Kenshin", "type": "person", "cost": 4,
     "knowledgeRequired": 1, "effects": [{"addKnowledge": 1}, {"addRice": 1}]},
    {"id": "CHR_SCOUT", "name": "Scout", "type": "person", "cost": 3,
     "effects": [{"draw": 2}, {"discard": 1}]},
    {"id": "EVT_HARVEST", "name": "Harvest", "type": "event", "cost": 2,
     "effects": [{"addRice": 2}]},
    {"id": "EVT_GIFT", "name": "Gift of Rice", "type": "event", "cost": 3,
     "effects": [{"gain": "RICE_MEDIUM"}, {"trashSelf": True}]},
    {"id": "VP_VILLAGE", "name": "Village", "type": "victory", "cost": 2,
     "effects": [{"addVictory": 1}]},
    {"id": "VP_SHRINE", "name": "Shrine", "type": "victory", "cost": 2,
     "knowledgeRequired": 1, "effects": [{"addVictory": 2}]},
    {"id": "VP_COUNTRY", "name": "Province", "type": "victory", "cost": 8,
     "knowledgeRequired": 3, "effects": [{"addVictory": 6}]},
]


def build_state(
    catalog: CardCatalog,
    player: PlayerState | None = None,
    cpu: PlayerState | None = None,
    phase: TurnPhase = TurnPhase.DRAW,
    supply: dict[str, int] | None = None,
    seed: int = 0,
    **fields,
) -> GameState:
    """
    Hand-build a state.

    supply maps card id -> remaining copies; every catalog card gets a
    pile of 10 when omitted.
    """
    counts = supply if supply is not None else {card.id: 10 for card in catalog}
    piles = {
        card_id: SupplyPile(card=catalog.require(card_id), remaining=n, initial=max(n, 10))
        for card_id, n in counts.items()
    }
    return GameState(
        catalog=catalog,
        players={
            Side.PLAYER: player or PlayerState(),
            Side.CPU: cpu or PlayerState(),
        },
        supply=piles,
        phase=phase,
        random_state=random.Random(seed).getstate(),
        **fields,
    )


@pytest.fixture
def card_list() -> list[dict]:
    """Raw card list in the current dialect (fresh copy per test)."""
    return [dict(card) for card in TEST_CARDS]


@pytest.fixture
def catalog(card_list) -> CardCatalog:
    """The small test catalog."""
    return load_catalog(card_list)


@pytest.fixture
def make_state(catalog):
    """Factory for hand-built states on the test catalog."""
    def _make(**kwargs) -> GameState:
        return build_state(catalog, **kwargs)
    return _make


@pytest.fixture
def sengoku_game() -> GameState:
    """A seeded Sengoku game at turn 1, DRAW phase."""
    return create_sengoku_game(seed=42)


@pytest.fixture
def short_rules() -> RuleConfig:
    """Rules for quick games."""
    return RuleConfig(max_turns=3)
