"""
Game State - Immutable snapshot of a game.

Design principles:
- Immutable: every change returns a new value, nothing is mutated in place
- Replayable: shuffling draws from a random state stored on the snapshot
- Self-contained: the catalog and rules travel with the state
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping
import random

from ..catalog.cards import CardCatalog, CardDefinition
from ..config import RuleConfig


class Side(Enum):
    """The two competing sides. PLAYER is the human and moves first."""
    PLAYER = "player"
    CPU = "cpu"

    @property
    def other(self) -> Side:
        return Side.CPU if self == Side.PLAYER else Side.PLAYER


class TurnPhase(Enum):
    """The five fixed phases of a turn."""
    DRAW = "draw"
    RESOURCE = "resource"
    ACTION = "action"
    BUY = "buy"
    CLEANUP = "cleanup"


class Winner(Enum):
    """Outcome of a game. UNDECIDED while the game is running."""
    PLAYER = "player"
    CPU = "cpu"
    DRAW = "draw"
    UNDECIDED = "undecided"


@dataclass(frozen=True)
class Zone:
    """
    An ordered pile of card ids.

    Used for deck (front is the top), hand, discard and play area.
    """
    name: str
    cards: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.cards)

    @property
    def is_empty(self) -> bool:
        return len(self.cards) == 0

    def add(self, card_id: str) -> Zone:
        """Return new zone with card added at the end."""
        return Zone(name=self.name, cards=self.cards + (card_id,))

    def extend(self, card_ids: Iterable[str]) -> Zone:
        return Zone(name=self.name, cards=self.cards + tuple(card_ids))

    def remove(self, card_id: str) -> Zone:
        """Return new zone with the first copy of card_id removed."""
        if card_id not in self.cards:
            return self
        idx = self.cards.index(card_id)
        return Zone(name=self.name, cards=self.cards[:idx] + self.cards[idx + 1:])

    def contains(self, card_id: str) -> bool:
        return card_id in self.cards

    def take_front(self, n: int) -> tuple[tuple[str, ...], Zone]:
        """Return (up to n cards from the front, remaining zone)."""
        n = max(0, n)
        return self.cards[:n], Zone(name=self.name, cards=self.cards[n:])

    def pop_last(self) -> tuple[str | None, Zone]:
        """Return (last card or None, zone without it)."""
        if not self.cards:
            return None, self
        return self.cards[-1], Zone(name=self.name, cards=self.cards[:-1])

    def cleared(self) -> Zone:
        return Zone(name=self.name)


@dataclass(frozen=True)
class PlayerState:
    """
    One side's cards and counters.

    rice_this_turn, has_played_action and has_bought reset every
    CLEANUP. knowledge persists for the whole game.
    """
    deck: Zone = field(default_factory=lambda: Zone(name="deck"))
    hand: Zone = field(default_factory=lambda: Zone(name="hand"))
    discard: Zone = field(default_factory=lambda: Zone(name="discard"))
    played: Zone = field(default_factory=lambda: Zone(name="played"))

    rice_this_turn: int = 0
    knowledge: int = 0
    turns_taken: int = 0

    has_played_action: bool = False
    has_bought: bool = False

    @classmethod
    def create(
        cls,
        deck: Iterable[str] = (),
        hand: Iterable[str] = (),
        discard: Iterable[str] = (),
        played: Iterable[str] = (),
        **counters: Any,
    ) -> PlayerState:
        """Build a player from plain id lists."""
        return cls(
            deck=Zone(name="deck", cards=tuple(deck)),
            hand=Zone(name="hand", cards=tuple(hand)),
            discard=Zone(name="discard", cards=tuple(discard)),
            played=Zone(name="played", cards=tuple(played)),
            **counters,
        )

    def all_cards(self) -> tuple[str, ...]:
        """Every card this side owns: deck + hand + discard + played."""
        return self.deck.cards + self.hand.cards + self.discard.cards + self.played.cards

    @property
    def card_count(self) -> int:
        return len(self.all_cards())

    def _copy_with(self, **kwargs: Any) -> PlayerState:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class SupplyPile:
    """A purchasable pile: the card plus how many copies remain."""
    card: CardDefinition
    remaining: int
    initial: int

    @property
    def is_empty(self) -> bool:
        return self.remaining <= 0

    def take_one(self) -> SupplyPile:
        """Return the pile with one copy removed (never below zero)."""
        return SupplyPile(card=self.card, remaining=max(0, self.remaining - 1), initial=self.initial)


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer, which returns a
    brand-new GameState for every transition.
    """
    catalog: CardCatalog
    players: Mapping[Side, PlayerState]
    supply: Mapping[str, SupplyPile] = field(default_factory=dict)

    phase: TurnPhase = TurnPhase.DRAW
    active_side: Side = Side.PLAYER
    first_side: Side = Side.PLAYER
    turn_number: int = 1

    ended: bool = False
    winner: Winner = Winner.UNDECIDED

    rules: RuleConfig = field(default_factory=RuleConfig)

    # random.Random.getstate() tuple; advanced by every shuffle
    random_state: Any = None

    # Human-readable log of transitions (never read by the rules)
    history: tuple[str, ...] = ()

    def __post_init__(self):
        # Each state owns read-only copies of its mappings
        object.__setattr__(self, "players", MappingProxyType(dict(self.players)))
        object.__setattr__(self, "supply", MappingProxyType(dict(self.supply)))

    @property
    def active_player(self) -> PlayerState:
        return self.players[self.active_side]

    def get_player(self, side: Side) -> PlayerState:
        return self.players[side]

    def get_card(self, card_id: str) -> CardDefinition | None:
        return self.catalog.get(card_id)

    def with_player(self, side: Side, player: PlayerState) -> GameState:
        """Return new state with one side's player replaced."""
        new_players = dict(self.players)
        new_players[side] = player
        return self._copy_with(players=new_players)

    def with_pile(self, card_id: str, pile: SupplyPile) -> GameState:
        """Return new state with one supply pile replaced."""
        new_supply = dict(self.supply)
        new_supply[card_id] = pile
        return self._copy_with(supply=new_supply)

    def with_log(self, *lines: str) -> GameState:
        return self._copy_with(history=self.history + tuple(lines))

    def depleted_piles(self) -> list[str]:
        return [card_id for card_id, pile in self.supply.items() if pile.is_empty]

    def shuffle(self, card_ids: Iterable[str]) -> tuple[tuple[str, ...], GameState]:
        """
        Shuffle card ids with the state's random source.

        Returns (shuffled ids, state with the advanced random state).
        """
        rng = random.Random()
        if self.random_state is not None:
            rng.setstate(self.random_state)
        cards = list(card_ids)
        rng.shuffle(cards)
        return tuple(cards), self._copy_with(random_state=rng.getstate())

    def _copy_with(self, **kwargs: Any) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)
