"""
Card definitions and the catalog container.

Cards are immutable and referenced by id everywhere else in the
engine. The catalog is built once per process by the loaders in
validation.py / legacy.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Iterable

from .effect_dsl import Effect, EffectKind, total_amount


class CardType(Enum):
    """The four card types."""
    RESOURCE = "resource"
    PERSON = "person"
    EVENT = "event"
    VICTORY = "victory"

    @property
    def is_action(self) -> bool:
        """Person and event cards can be played in the ACTION phase."""
        return self in (CardType.PERSON, CardType.EVENT)


@dataclass(frozen=True)
class CardDefinition:
    """A catalog entry."""
    id: str
    name: str
    card_type: CardType
    cost: int = 0
    knowledge_required: int = 0
    effects: tuple[Effect, ...] = ()
    text: str = ""
    image: str = ""

    @property
    def victory_value(self) -> int:
        """Total ADD_VICTORY amount carried by this card."""
        return total_amount(self.effects, EffectKind.ADD_VICTORY)

    def amount_of(self, kind: EffectKind) -> int:
        return total_amount(self.effects, kind)

    def has_effect(self, kind: EffectKind) -> bool:
        return any(e.kind == kind for e in self.effects)


@dataclass(frozen=True)
class CardCatalog:
    """
    Immutable id -> CardDefinition mapping.

    Iteration follows load order, which also fixes supply order.
    """
    cards: tuple[CardDefinition, ...] = ()
    _by_id: dict[str, CardDefinition] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        object.__setattr__(self, "_by_id", {card.id: card for card in self.cards})

    @classmethod
    def of(cls, cards: Iterable[CardDefinition]) -> CardCatalog:
        return cls(cards=tuple(cards))

    def get(self, card_id: str) -> CardDefinition | None:
        return self._by_id.get(card_id)

    def require(self, card_id: str) -> CardDefinition:
        """Get a card, raising KeyError for unknown ids."""
        card = self._by_id.get(card_id)
        if card is None:
            raise KeyError(f"Unknown card id: {card_id}")
        return card

    @property
    def ids(self) -> list[str]:
        return [card.id for card in self.cards]

    def by_type(self, card_type: CardType) -> list[CardDefinition]:
        return [card for card in self.cards if card.card_type == card_type]

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def __iter__(self) -> Iterator[CardDefinition]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)
