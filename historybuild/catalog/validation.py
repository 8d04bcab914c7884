"""
Catalog Validation - Load-time checks for card lists.

Validates that:
1. Every entry matches the canonical card schema
2. Card ids are unique
3. References are valid (gain targets exist in the catalog)

Raises CatalogValidationError with every problem found, not just the
first one.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any
import json
import logging

from pydantic import ValidationError

from .cards import CardCatalog, CardType
from .effect_dsl import EffectKind
from .schema import CARD_LIST_ADAPTER

logger = logging.getLogger(__name__)


class CatalogValidationError(Exception):
    """Raised when a card list cannot be turned into a catalog."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            f"Catalog validation failed with {len(errors)} error(s): " + "; ".join(errors[:5])
        )


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def format_pydantic_errors(exc: ValidationError, raw: Any) -> list[str]:
    """Turn pydantic errors into 'card[3] (ID).field: message' lines."""
    messages = []
    for err in exc.errors():
        loc = list(err["loc"])
        prefix = ""
        if loc and isinstance(loc[0], int):
            index = loc.pop(0)
            card_id = None
            if isinstance(raw, list) and index < len(raw) and isinstance(raw[index], dict):
                card_id = raw[index].get("id")
            prefix = f"card[{index}]" + (f" ({card_id})" if card_id else "")
        path = ".".join(str(part) for part in loc)
        where = ".".join(part for part in (prefix, path) if part) or "catalog"
        messages.append(f"{where}: {err['msg']}")
    return messages


def validate_catalog(catalog: CardCatalog) -> ValidationResult:
    """
    Check catalog-wide invariants.

    Schema problems are caught earlier by pydantic; this covers what
    a single entry cannot know about: duplicates and references.
    """
    errors: list[str] = []
    warnings: list[str] = []

    seen: set[str] = set()
    for card in catalog:
        if card.id in seen:
            errors.append(f"Duplicate card id '{card.id}'")
        seen.add(card.id)

    for card in catalog:
        for effect in card.effects:
            if effect.kind == EffectKind.ACQUIRE and effect.card_id not in seen:
                errors.append(
                    f"Card '{card.id}' gains unknown card '{effect.card_id}'"
                )

    if not catalog.by_type(CardType.RESOURCE):
        warnings.append("No resource cards defined - nobody can earn rice")
    if not catalog.by_type(CardType.VICTORY):
        warnings.append("No victory cards defined - every game ends in a draw")

    return ValidationResult(valid=len(errors) == 0, errors=errors, warnings=warnings)


def load_catalog(data: list[dict[str, Any]]) -> CardCatalog:
    """
    Build a CardCatalog from a card list in the current dialect.

    Raises CatalogValidationError on any schema or reference problem.
    """
    try:
        models = CARD_LIST_ADAPTER.validate_python(data)
    except ValidationError as e:
        raise CatalogValidationError(format_pydantic_errors(e, data)) from e

    catalog = CardCatalog.of(model.to_definition() for model in models)
    return _checked(catalog)


def load_catalog_file(path: str | Path) -> CardCatalog:
    """Load a JSON card list in the current dialect."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return load_catalog(data)


def _checked(catalog: CardCatalog) -> CardCatalog:
    result = validate_catalog(catalog)
    for warning in result.warnings:
        logger.warning("Catalog warning: %s", warning)
    if not result.valid:
        raise CatalogValidationError(result.errors)
    logger.debug("Loaded catalog with %d cards", len(catalog))
    return catalog
