"""
Game Setup - Creates the initial game state.

This module handles:
- Stocking the supply from the catalog
- Building and shuffling each side's starting deck
- Seeding the random source for deterministic replays

Hands start empty; the first DRAW phase deals them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable
import logging
import random

from ..catalog.cards import CardCatalog
from ..catalog.validation import CatalogValidationError
from ..config import RuleConfig
from .state import GameState, PlayerState, Side, SupplyPile, TurnPhase, Winner, Zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StartingDeckSpec:
    """Card ids and copy counts every side starts with."""
    entries: tuple[tuple[str, int], ...]

    @classmethod
    def of(cls, entries: Iterable[tuple[str, int]]) -> StartingDeckSpec:
        return cls(entries=tuple(entries))

    def card_ids(self) -> list[str]:
        """Expand to a flat id list in entry order."""
        cards: list[str] = []
        for card_id, count in self.entries:
            cards.extend([card_id] * count)
        return cards


def initialize(
    catalog: CardCatalog,
    starting_deck: StartingDeckSpec,
    *,
    seed: int | None = None,
    rules: RuleConfig | None = None,
    supply_ids: Iterable[str] | None = None,
    first_side: Side = Side.PLAYER,
) -> GameState:
    """
    Set up a new game.

    Args:
        catalog: Loaded card catalog
        starting_deck: Cards each side starts with
        seed: Seed for deterministic shuffling (random if None)
        rules: Rule overrides (HISTORYBUILD_* environment values if None)
        supply_ids: Limit the supply to these cards (whole catalog if None)
        first_side: Side that moves first

    Returns:
        Initial GameState in DRAW phase, turn 1

    Raises CatalogValidationError if the deck or supply names unknown cards.
    """
    game_rules = rules or RuleConfig.from_env()

    errors = [
        f"Starting deck references unknown card '{card_id}'"
        for card_id, _ in starting_deck.entries
        if card_id not in catalog
    ]
    selected = list(supply_ids) if supply_ids is not None else catalog.ids
    errors.extend(
        f"Supply references unknown card '{card_id}'"
        for card_id in selected
        if card_id not in catalog
    )
    if errors:
        raise CatalogValidationError(errors)

    if seed is None:
        seed = random.randrange(2**32)
    rng = random.Random(seed)

    state = GameState(
        catalog=catalog,
        players={side: PlayerState() for side in Side},
        supply=_create_supply(catalog, selected, game_rules),
        phase=TurnPhase.DRAW,
        active_side=first_side,
        first_side=first_side,
        turn_number=1,
        ended=False,
        winner=Winner.UNDECIDED,
        rules=game_rules,
        random_state=rng.getstate(),
    )

    for side in Side:
        shuffled, state = state.shuffle(starting_deck.card_ids())
        player = state.get_player(side)._copy_with(deck=Zone(name="deck", cards=shuffled))
        state = state.with_player(side, player)

    logger.info(
        "New game: seed=%s, %d supply piles, %d-card starting decks",
        seed, len(state.supply), len(starting_deck.card_ids()),
    )
    return state.with_log(f"Game started (seed {seed})")


def _create_supply(
    catalog: CardCatalog,
    card_ids: list[str],
    rules: RuleConfig,
) -> dict[str, SupplyPile]:
    """Create one pile per card, sized by card type."""
    supply: dict[str, SupplyPile] = {}
    for card_id in card_ids:
        card = catalog.require(card_id)
        count = rules.supply_count_for(card.card_type.value)
        supply[card_id] = SupplyPile(card=card, remaining=count, initial=count)
    return supply
