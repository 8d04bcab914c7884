"""
Scoring - Victory points and winner resolution.

Victory points are never stored on the state. They are recomputed
from card ownership: the sum of every owned card's addVictory effects
across deck, hand, discard and played. Cards missing from the catalog
count as zero.
"""

from __future__ import annotations

from .state import GameState, Side, Winner


def compute_victory_points(state: GameState, side: Side) -> int:
    """Total victory points a side currently owns."""
    total = 0
    for card_id in state.get_player(side).all_cards():
        card = state.get_card(card_id)
        if card is None:
            continue
        total += card.victory_value
    return total


def score_table(state: GameState) -> dict[Side, int]:
    """Victory points for both sides."""
    return {side: compute_victory_points(state, side) for side in Side}


def judge_winner(state: GameState) -> Winner:
    """Higher score wins; equal scores are a draw."""
    player_points = compute_victory_points(state, Side.PLAYER)
    cpu_points = compute_victory_points(state, Side.CPU)

    if player_points > cpu_points:
        return Winner.PLAYER
    if cpu_points > player_points:
        return Winner.CPU
    return Winner.DRAW
