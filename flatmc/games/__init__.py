"""
Games module - Reference adapters.

Each game has its own subpackage with its state model and a GameAdapter
implementation. GAMES maps registry names to adapter classes.
"""

from .card import CardAdapter
from .nim import NimAdapter

GAMES = {
    NimAdapter.name: NimAdapter,
    CardAdapter.name: CardAdapter,
}

__all__ = [
    "GAMES",
    "CardAdapter",
    "NimAdapter",
]
