"""Card catalog - card/effect types, schema and loaders."""

from .effect_dsl import (
    Effect,
    EffectKind,
    add_rice,
    add_knowledge,
    draw,
    discard,
    acquire,
    trash_self,
    add_victory,
)
from .cards import CardDefinition, CardCatalog, CardType
from .validation import (
    CatalogValidationError,
    validate_catalog,
    load_catalog,
    load_catalog_file,
)
from .legacy import convert_legacy_cards, load_legacy_catalog, load_legacy_catalog_file

__all__ = [
    "Effect",
    "EffectKind",
    "add_rice",
    "add_knowledge",
    "draw",
    "discard",
    "acquire",
    "trash_self",
    "add_victory",
    "CardDefinition",
    "CardCatalog",
    "CardType",
    "CatalogValidationError",
    "validate_catalog",
    "load_catalog",
    "load_catalog_file",
    "convert_legacy_cards",
    "load_legacy_catalog",
    "load_legacy_catalog_file",
]
