"""
Engine Core - Deterministic flat Monte-Carlo search.

The engine:
1. Enumerates legal actions through a GameAdapter (bounded buffer)
2. Scales the rollout budget by difficulty
3. Draws playout seeds from a StreamContext
4. Runs depth-capped playouts per candidate
5. Returns the candidate with the best integer average
"""

from .adapter import ActionBuffer, GameAdapter
from .config import SearchConfig
from .stream import StreamContext, splitmix64
from .rollout import playout
from .search import (
    ActionStats,
    MonteCarloSearch,
    NoLegalMoves,
    SearchReport,
    scaled_iterations,
    truncating_div,
)

__all__ = [
    "ActionBuffer",
    "GameAdapter",
    "SearchConfig",
    "StreamContext",
    "splitmix64",
    "playout",
    "ActionStats",
    "MonteCarloSearch",
    "NoLegalMoves",
    "SearchReport",
    "scaled_iterations",
    "truncating_div",
]
