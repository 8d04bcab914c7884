"""
Pydantic Schemas - Read-only snapshots of a game for front ends.

A snapshot is built for one viewer: the viewer's own hand is listed
card by card, the opponent's hand only as a count. Affordability flags
on supply piles come from the engine's own rule so front ends never
re-implement it.
"""

from typing import Optional
from pydantic import BaseModel, Field

from ..engine_core.action_generator import can_afford
from ..engine_core.scoring import compute_victory_points
from ..engine_core.state import GameState, Side, SupplyPile


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    card_id: str
    name: str
    card_type: str = Field(description="resource, person, event, victory")
    cost: int = 0
    knowledge_required: int = 0
    text: str = ""
    image: str = ""

    model_config = {"from_attributes": True}


class ZoneCounts(BaseModel):
    """Card counts per zone."""
    deck: int = 0
    hand: int = 0
    discard: int = 0
    played: int = 0


class PlayerInfo(BaseModel):
    """One side as seen by the viewer."""
    side: str
    is_viewer: bool
    is_current_turn: bool = False
    zones: ZoneCounts = Field(default_factory=ZoneCounts)
    hand: list[str] = Field(default_factory=list, description="Only filled for the viewer")
    played: list[str] = Field(default_factory=list)
    rice: int = 0
    knowledge: int = 0
    victory_points: int = 0


class SupplyPileInfo(BaseModel):
    """A supply pile and whether the viewer could buy it right now."""
    card: CardInfo
    remaining: int
    initial: int
    affordable: bool = False


# =============================================================================
# Snapshot
# =============================================================================

class GameSnapshot(BaseModel):
    """Everything a front end needs to render one frame."""
    viewer: str
    phase: str
    active_side: str
    turn_number: int
    ended: bool = False
    winner: Optional[str] = None
    players: list[PlayerInfo] = Field(default_factory=list)
    supply: list[SupplyPileInfo] = Field(default_factory=list)
    recent_changes: list[str] = Field(default_factory=list)

    @classmethod
    def from_state(
        cls,
        state: GameState,
        viewer: Side = Side.PLAYER,
        recent: int = 10,
    ) -> "GameSnapshot":
        viewer_player = state.get_player(viewer)
        return cls(
            viewer=viewer.value,
            phase=state.phase.value,
            active_side=state.active_side.value,
            turn_number=state.turn_number,
            ended=state.ended,
            winner=state.winner.value if state.ended else None,
            players=[_player_info(state, side, viewer) for side in Side],
            supply=[
                _pile_info(pile, affordable=can_afford(viewer_player, pile.card) and not pile.is_empty)
                for pile in state.supply.values()
            ],
            recent_changes=list(state.history[-recent:]) if recent > 0 else [],
        )


def card_info(card) -> CardInfo:
    return CardInfo(
        card_id=card.id,
        name=card.name,
        card_type=card.card_type.value,
        cost=card.cost,
        knowledge_required=card.knowledge_required,
        text=card.text,
        image=card.image,
    )


def _player_info(state: GameState, side: Side, viewer: Side) -> PlayerInfo:
    player = state.get_player(side)
    return PlayerInfo(
        side=side.value,
        is_viewer=side == viewer,
        is_current_turn=not state.ended and state.active_side == side,
        zones=ZoneCounts(
            deck=player.deck.count,
            hand=player.hand.count,
            discard=player.discard.count,
            played=player.played.count,
        ),
        hand=list(player.hand.cards) if side == viewer else [],
        played=list(player.played.cards),
        rice=player.rice_this_turn,
        knowledge=player.knowledge,
        victory_points=compute_victory_points(state, side),
    )


def _pile_info(pile: SupplyPile, affordable: bool) -> SupplyPileInfo:
    return SupplyPileInfo(
        card=card_info(pile.card),
        remaining=pile.remaining,
        initial=pile.initial,
        affordable=affordable,
    )
