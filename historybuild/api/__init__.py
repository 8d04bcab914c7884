"""
API module - Presentation models for front ends.

Snapshots are plain pydantic models, so any transport can serialize
them with model_dump() / model_dump_json().
"""

from .schemas import CardInfo, GameSnapshot, PlayerInfo, SupplyPileInfo, ZoneCounts

__all__ = [
    "CardInfo",
    "GameSnapshot",
    "PlayerInfo",
    "SupplyPileInfo",
    "ZoneCounts",
]
