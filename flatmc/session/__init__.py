"""
Session module - Playing complete games.

Match drives two policies through a game from a start state to the end,
recording every move.
"""

from .match import Match, MatchResult, MoveRecord

__all__ = [
    "Match",
    "MatchResult",
    "MoveRecord",
]
