"""
Configuration - Rule constants and environment overrides.

Defaults follow the Sengoku mini-deck rules. Any value can be
overridden per game by passing a RuleConfig to initialize(), or
process-wide through environment variables.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import os

HISTORYBUILD_MAX_TURNS = os.getenv("HISTORYBUILD_MAX_TURNS")
HISTORYBUILD_HAND_SIZE = os.getenv("HISTORYBUILD_HAND_SIZE")
HISTORYBUILD_LOG_LEVEL = os.getenv("HISTORYBUILD_LOG_LEVEL", "WARNING")

DEFAULT_HAND_SIZE = 5
DEFAULT_MAX_TURNS = 25
DEFAULT_DEPLETED_PILES_TO_END = 3

# Stocked copies per supply pile, keyed by card type value
DEFAULT_SUPPLY_COUNTS: dict[str, int] = {
    "resource": 10,
    "person": 10,
    "event": 10,
    "victory": 12,
}


@dataclass(frozen=True)
class RuleConfig:
    """
    Tunable game rules.

    Stored on every GameState so the phase machine never reads
    globals mid-game.
    """
    hand_size: int = DEFAULT_HAND_SIZE
    max_turns: int = DEFAULT_MAX_TURNS
    depleted_piles_to_end: int = DEFAULT_DEPLETED_PILES_TO_END
    supply_counts: dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_SUPPLY_COUNTS)
    )

    def supply_count_for(self, card_type: str) -> int:
        """Initial pile size for a card type (10 if unlisted)."""
        return self.supply_counts.get(card_type, 10)

    @classmethod
    def from_env(cls) -> RuleConfig:
        """Build a RuleConfig honouring HISTORYBUILD_* overrides."""
        return cls(
            hand_size=int(HISTORYBUILD_HAND_SIZE) if HISTORYBUILD_HAND_SIZE else DEFAULT_HAND_SIZE,
            max_turns=int(HISTORYBUILD_MAX_TURNS) if HISTORYBUILD_MAX_TURNS else DEFAULT_MAX_TURNS,
        )


def configure_logging(level: str | int | None = None) -> None:
    """
    Attach a basic stderr handler for the historybuild loggers.

    Never called on import; front ends opt in.
    """
    resolved = level if level is not None else HISTORYBUILD_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = getattr(logging, resolved.upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("historybuild").setLevel(resolved)
