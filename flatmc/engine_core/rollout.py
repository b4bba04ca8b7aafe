"""
Rollout simulator - one random continuation of a game.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any

from .stream import MASK64

if TYPE_CHECKING:
    from .adapter import GameAdapter


# Added to the seed after every ply so successive choices within one
# rollout differ. Not drawn from the shared stream.
SEED_STEP = 0x9E37_79B9


def playout(
    adapter: GameAdapter,
    start_state: Any,
    me: Any,
    seed: int,
    max_depth: int,
) -> int:
    """
    Play random moves from start_state and score the result for `me`.

    Stops at a terminal state, after max_depth plies, or when the adapter
    has no random action to offer. A depth cutoff is scored with whatever
    the adapter returns for non-terminal states.
    """
    state = start_state
    depth = 0
    while not adapter.is_terminal(state) and depth < max_depth:
        action = adapter.random_action(state, seed)
        if action is None:
            break
        state = adapter.apply(state, action)
        depth += 1
        seed = (seed + SEED_STEP) & MASK64
    return adapter.score(state, me)
