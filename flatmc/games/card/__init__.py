"""
Card Capture - 4x4 placement game with side-rank captures.

Each player holds five cards with four ranked sides. Placing a card
next to an opponent's card captures it when the touching side ranks
higher. Score is the capture difference between the two players.

This module contains:
- Card and hand definitions
- Immutable game state and the place-card action
- The adapter used by the search engine
- Deterministic dealing
"""

from .cards import HAND_SIZE, Card, Color, Hand, HandEntry
from .state import BOARD_SIZE, CardState, PlaceCard, board_counts, empty_board, winner
from .adapter import CardAdapter
from .setup import deal_game, deal_hand

__all__ = [
    "HAND_SIZE",
    "BOARD_SIZE",
    "Card",
    "Color",
    "Hand",
    "HandEntry",
    "CardState",
    "PlaceCard",
    "board_counts",
    "empty_board",
    "winner",
    "CardAdapter",
    "deal_game",
    "deal_hand",
]
