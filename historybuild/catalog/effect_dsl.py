"""
Effect DSL - Flat primitive effects.

A card's effect list is an ordered sequence of primitives. Each
primitive does exactly one thing:
- ADD_RICE / ADD_KNOWLEDGE: counter increments
- DRAW / DISCARD: move cards between deck, hand and discard
- ACQUIRE: put a card id into the discard pile
- TRASH_SELF: remove the card being played from the play area
- ADD_VICTORY: static victory value, read only by scoring

Wire format is a one-key mapping per effect, e.g. {"addRice": 2},
{"gain": "RICE_MEDIUM"} or {"trashSelf": true}.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


class EffectKind(Enum):
    """Primitive effect types. Values are the wire keys."""
    ADD_RICE = "addRice"
    ADD_KNOWLEDGE = "addKnowledge"
    DRAW = "draw"
    DISCARD = "discard"
    ACQUIRE = "gain"
    TRASH_SELF = "trashSelf"
    ADD_VICTORY = "addVictory"


@dataclass(frozen=True)
class Effect:
    """
    A single primitive effect.

    amount is used by counter/count kinds, card_id only by ACQUIRE.
    """
    kind: EffectKind
    amount: int = 0
    card_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the one-key wire form."""
        if self.kind == EffectKind.ACQUIRE:
            return {self.kind.value: self.card_id}
        if self.kind == EffectKind.TRASH_SELF:
            return {self.kind.value: True}
        return {self.kind.value: self.amount}

    def __str__(self) -> str:
        if self.kind == EffectKind.ACQUIRE:
            return f"gain {self.card_id}"
        if self.kind == EffectKind.TRASH_SELF:
            return "trash self"
        return f"{self.kind.value} {self.amount}"


# ============================================================================
# Factory functions
# ============================================================================

def add_rice(amount: int) -> Effect:
    return Effect(kind=EffectKind.ADD_RICE, amount=amount)


def add_knowledge(amount: int) -> Effect:
    return Effect(kind=EffectKind.ADD_KNOWLEDGE, amount=amount)


def draw(count: int) -> Effect:
    return Effect(kind=EffectKind.DRAW, amount=count)


def discard(count: int) -> Effect:
    return Effect(kind=EffectKind.DISCARD, amount=count)


def acquire(card_id: str) -> Effect:
    return Effect(kind=EffectKind.ACQUIRE, card_id=card_id)


def trash_self() -> Effect:
    return Effect(kind=EffectKind.TRASH_SELF)


def add_victory(amount: int) -> Effect:
    return Effect(kind=EffectKind.ADD_VICTORY, amount=amount)


def total_amount(effects: tuple[Effect, ...] | list[Effect], kind: EffectKind) -> int:
    """Sum the amounts of every effect of one kind."""
    return sum(e.amount for e in effects if e.kind == kind)
