"""
Card game setup - deterministic dealing.

Hands are dealt from a StreamContext, so the same seed and nonce always
produce the same game.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .cards import HAND_SIZE, Hand, HandEntry
from .state import DEFAULT_MAX_ROUNDS, CardState

if TYPE_CHECKING:
    from ...engine_core.stream import StreamContext


MIN_RANK = 1
MAX_RANK = 9


def _rank(stream: StreamContext, salt: int) -> int:
    return MIN_RANK + stream.draw(salt) % (MAX_RANK - MIN_RANK + 1)


def deal_hand(stream: StreamContext, player: int) -> Hand:
    """Deal HAND_SIZE entries with ranks in [MIN_RANK, MAX_RANK]."""
    entries = []
    for slot in range(HAND_SIZE):
        salt = (player << 16) | (slot << 4)
        entries.append(HandEntry(
            north=_rank(stream, salt),
            east=_rank(stream, salt | 1),
            south=_rank(stream, salt | 2),
            west=_rank(stream, salt | 3),
        ))
    return Hand(entries=tuple(entries))


def deal_game(stream: StreamContext, max_rounds: int = DEFAULT_MAX_ROUNDS) -> CardState:
    """
    Create a new game: empty board, two fresh hands, player 0 to move.

    Args:
        stream: Source of ranks; advanced by 4 * HAND_SIZE * 2 draws
        max_rounds: Rounds before the game ends (at most HAND_SIZE)
    """
    if not 1 <= max_rounds <= HAND_SIZE:
        raise ValueError(f"max_rounds must be in [1, {HAND_SIZE}], got {max_rounds}")
    hands = (deal_hand(stream, 0), deal_hand(stream, 1))
    return CardState(hands=hands, max_rounds=max_rounds)
