"""
Nim - take one or two stones; taking the last stone wins.

Reference game for validating optimal play: from a pile of 3 the only
winning move is to take one.
"""

from .adapter import NimAction, NimAdapter, NimState

__all__ = [
    "NimAction",
    "NimAdapter",
    "NimState",
]
