"""
Pytest fixtures for flatmc tests.
"""

import pytest

from ..engine_core.adapter import ActionBuffer, GameAdapter
from ..engine_core.config import SearchConfig
from ..engine_core.stream import StreamContext
from ..games.card import CardAdapter, CardState, Hand, HandEntry, deal_game
from ..games.nim import NimAdapter


TEST_SEED = 0xDEAD_BEEF_CAFE_BABE


class WideAdapter(GameAdapter):
    """
    One-move game with `width` actions 0..width-1.

    Taking action k ends the game with score k for player 0, so the best
    action is always the highest one the engine gets to see.
    """

    name = "wide"

    def __init__(self, width: int):
        self.width = width

    def list_actions(self, state, capacity):
        buf = ActionBuffer(capacity)
        if state is not None:
            return buf
        for k in range(self.width):
            if not buf.append(k):
                break
        return buf

    def apply(self, state, action):
        return action

    def is_terminal(self, state):
        return state is not None

    def current_player(self, state):
        return 0

    def score(self, state, for_player):
        if state is None:
            return 0
        return state if for_player == 0 else -state

    def random_action(self, state, seed):
        actions = self.list_actions(state, self.width)
        return actions[seed % len(actions)] if actions else None

    def encode_state(self, state):
        return {"taken": state}

    def decode_state(self, data):
        return data.get("taken")

    def encode_action(self, action):
        return {"k": action}

    def decode_action(self, data):
        return int(data["k"])


class ScriptedAdapter(GameAdapter):
    """
    One-move game whose rollout outcomes are scripted per action.

    score() pops the next scripted outcome for the action that led to the
    leaf, in the order the engine runs its rollouts.
    """

    name = "scripted"

    def __init__(self, scripts: dict):
        self.order = list(scripts)
        self.scripts = {action: list(outcomes) for action, outcomes in scripts.items()}

    def list_actions(self, state, capacity):
        buf = ActionBuffer(capacity)
        if state == "root":
            for action in self.order:
                buf.append(action)
        return buf

    def apply(self, state, action):
        return ("leaf", action)

    def is_terminal(self, state):
        return state != "root"

    def current_player(self, state):
        return 0

    def score(self, state, for_player):
        _, action = state
        return self.scripts[action].pop(0)

    def random_action(self, state, seed):
        return None

    def encode_state(self, state):
        return {"state": list(state) if isinstance(state, tuple) else state}

    def decode_state(self, data):
        return data["state"]

    def encode_action(self, action):
        return {"action": action}

    def decode_action(self, data):
        return data["action"]


@pytest.fixture
def nim_adapter() -> NimAdapter:
    return NimAdapter()


@pytest.fixture
def card_adapter() -> CardAdapter:
    return CardAdapter()


@pytest.fixture
def config() -> SearchConfig:
    """Default engine configuration."""
    return SearchConfig(seed=TEST_SEED)


@pytest.fixture
def small_config() -> SearchConfig:
    """Cheap configuration for card game searches."""
    return SearchConfig(base_iterations=16, max_playout_depth=10, seed=TEST_SEED)


@pytest.fixture
def stream() -> StreamContext:
    """Fresh recording stream."""
    return StreamContext(TEST_SEED, record=True)


@pytest.fixture
def dealt_state() -> CardState:
    """A freshly dealt card game."""
    return deal_game(StreamContext(7))


def make_hand(*ranks) -> Hand:
    """Hand from (north, east, south, west) tuples, padded with 1-rank cards."""
    entries = [HandEntry(*r) for r in ranks]
    while len(entries) < 5:
        entries.append(HandEntry(1, 1, 1, 1))
    return Hand(entries=tuple(entries))
