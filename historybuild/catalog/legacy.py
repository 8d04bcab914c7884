"""
Legacy card dialect converter.

Older card lists describe each effect as a trigger/effect/value record
with an optional condition, and call person cards "character". This
module maps them onto the current flat effect list:

- type "character"      -> "person"
- requiredKnowledge     -> knowledgeRequired
- addRice, addKnowledge, draw, addVictory -> same-named primitives
- discount, trashFromHand -> dropped
- any effect with a condition -> dropped

Triggers (onPlay / onBuy / endGame) are not representable and are
ignored. Conversion is lossy: every dropped effect is
logged and reported.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional
import json
import logging

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .cards import CardCatalog
from .validation import CatalogValidationError, format_pydantic_errors, load_catalog

logger = logging.getLogger(__name__)

LegacyCardType = Literal["resource", "character", "event", "victory"]

# Legacy effect name -> current wire key
DIRECT_EFFECTS = {
    "addRice": "addRice",
    "addKnowledge": "addKnowledge",
    "draw": "draw",
    "addVictory": "addVictory",
}


class LegacyEffectCondition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    resource: Literal["rice", "knowledge"]
    operator: Literal[">=", "<=", "==", ">", "<"]
    value: int


class LegacyCardEffect(BaseModel):
    model_config = ConfigDict(extra="forbid")

    trigger: Literal["onPlay", "onBuy", "endGame"]
    effect: Literal["addRice", "addKnowledge", "draw", "discount", "addVictory", "trashFromHand"]
    value: Optional[int] = None
    targetType: Optional[LegacyCardType] = None
    condition: Optional[LegacyEffectCondition] = None


class LegacyCard(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = Field(min_length=1)
    era: str = ""
    name: str = Field(min_length=1)
    type: LegacyCardType
    cost: int = Field(ge=0)
    requiredKnowledge: Optional[int] = Field(None, ge=0)
    effects: list[LegacyCardEffect] = Field(default_factory=list)
    text: str = ""
    image: str = ""


LEGACY_LIST_ADAPTER = TypeAdapter(list[LegacyCard])


@dataclass
class LegacyConversion:
    """Converted card dicts (current dialect) plus a note per dropped effect."""
    cards: list[dict[str, Any]] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)


def convert_legacy_cards(
    data: list[dict[str, Any]],
    era: str | None = None,
) -> LegacyConversion:
    """
    Convert a legacy card list to the current dialect.

    Args:
        data: Raw legacy card dicts
        era: Keep only cards of this era (case-insensitive); None keeps all

    Raises CatalogValidationError if the legacy records are malformed.
    """
    try:
        legacy_cards = LEGACY_LIST_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise CatalogValidationError(format_pydantic_errors(e, data)) from e

    conversion = LegacyConversion()
    for legacy in legacy_cards:
        if era is not None and legacy.era.lower() != era.lower():
            continue
        conversion.cards.append(_convert_card(legacy, conversion.dropped))
    return conversion


def _convert_card(legacy: LegacyCard, dropped: list[str]) -> dict[str, Any]:
    effects: list[dict[str, Any]] = []
    for le in legacy.effects:
        if le.condition is not None:
            note = (
                f"{legacy.id}: dropped conditional {le.effect} "
                f"(if {le.condition.resource} {le.condition.operator} {le.condition.value})"
            )
        elif le.effect in DIRECT_EFFECTS:
            effects.append({DIRECT_EFFECTS[le.effect]: le.value or 0})
            continue
        else:
            # TODO: map discount onto a cost-modifier primitive once the effect list has one
            note = f"{legacy.id}: dropped unsupported {le.effect}"
        logger.warning("Legacy conversion %s", note)
        dropped.append(note)

    return {
        "id": legacy.id,
        "name": legacy.name,
        "type": "person" if legacy.type == "character" else legacy.type,
        "cost": legacy.cost,
        "knowledgeRequired": legacy.requiredKnowledge or 0,
        "effects": effects,
        "text": legacy.text,
        "image": legacy.image,
    }


def load_legacy_catalog(data: list[dict[str, Any]], era: str | None = None) -> CardCatalog:
    """Convert a legacy card list and load it as a CardCatalog."""
    return load_catalog(convert_legacy_cards(data, era=era).cards)


def load_legacy_catalog_file(path: str | Path, era: str | None = None) -> CardCatalog:
    """Load a legacy JSON card list from disk."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_legacy_catalog(data, era=era)
