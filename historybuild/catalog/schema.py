"""
Pydantic schemas for the declarative card list.

These models define the one canonical card shape accepted at load
time. Malformed entries (unknown fields, wrong types, negative costs,
effects with zero or several keys) are rejected here so the engine
never has to probe for alternate field names at read sites.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from .cards import CardDefinition, CardType
from .effect_dsl import Effect, EffectKind


class EffectModel(BaseModel):
    """One primitive effect: exactly one key must be set."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    add_rice: Optional[int] = Field(None, alias="addRice", ge=0)
    add_knowledge: Optional[int] = Field(None, alias="addKnowledge", ge=0)
    draw: Optional[int] = Field(None, ge=0)
    discard: Optional[int] = Field(None, ge=0)
    gain: Optional[str] = Field(None, min_length=1)
    trash_self: Optional[bool] = Field(None, alias="trashSelf")
    add_victory: Optional[int] = Field(None, alias="addVictory", ge=0)

    @model_validator(mode="after")
    def _exactly_one_key(self) -> "EffectModel":
        present = [name for name, value in self._values() if value is not None]
        if len(present) != 1:
            raise ValueError(
                f"effect must set exactly one key, got {len(present)}: {present}"
            )
        if self.trash_self is False:
            raise ValueError("trashSelf must be true when present")
        return self

    def _values(self) -> list[tuple[str, object]]:
        return [
            (EffectKind.ADD_RICE.value, self.add_rice),
            (EffectKind.ADD_KNOWLEDGE.value, self.add_knowledge),
            (EffectKind.DRAW.value, self.draw),
            (EffectKind.DISCARD.value, self.discard),
            (EffectKind.ACQUIRE.value, self.gain),
            (EffectKind.TRASH_SELF.value, self.trash_self),
            (EffectKind.ADD_VICTORY.value, self.add_victory),
        ]

    def to_effect(self) -> Effect:
        """Convert to the runtime Effect."""
        for key, value in self._values():
            if value is None:
                continue
            kind = EffectKind(key)
            if kind == EffectKind.ACQUIRE:
                return Effect(kind=kind, card_id=value)
            if kind == EffectKind.TRASH_SELF:
                return Effect(kind=kind)
            return Effect(kind=kind, amount=value)
        raise ValueError("empty effect")  # unreachable after validation


class CardModel(BaseModel):
    """A card entry in the current (flat effect list) dialect."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type: Literal["resource", "person", "event", "victory"]
    cost: int = Field(ge=0)
    knowledge_required: int = Field(0, alias="knowledgeRequired", ge=0)
    effects: list[EffectModel] = Field(default_factory=list)
    text: str = ""
    image: str = ""

    def to_definition(self) -> CardDefinition:
        return CardDefinition(
            id=self.id,
            name=self.name,
            card_type=CardType(self.type),
            cost=self.cost,
            knowledge_required=self.knowledge_required,
            effects=tuple(e.to_effect() for e in self.effects),
            text=self.text,
            image=self.image,
        )


CARD_LIST_ADAPTER = TypeAdapter(list[CardModel])


def card_to_dict(card: CardDefinition) -> dict:
    """Serialize a CardDefinition back to the current dialect."""
    return {
        "id": card.id,
        "name": card.name,
        "type": card.card_type.value,
        "cost": card.cost,
        "knowledgeRequired": card.knowledge_required,
        "effects": [e.to_dict() for e in card.effects],
        "text": card.text,
        "image": card.image,
    }
