"""
Suggestion Service - dispatcher between callers and the search engine.

The service:
1. Looks up the adapter for a game
2. Decodes the submitted state
3. Runs the search with the shared stream
4. Hashes the input state for auditing
5. Publishes a Suggested event

This layer is framework-agnostic; the FastAPI app is a thin wrapper.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import hashlib
import json
import logging

from ..engine_core.adapter import GameAdapter
from ..engine_core.config import SearchConfig
from ..engine_core.search import MonteCarloSearch, NoLegalMoves
from ..engine_core.stream import StreamContext
from ..games import GAMES


logger = logging.getLogger(__name__)


class UnknownGame(KeyError):
    """No adapter is registered under the requested name."""

    def __str__(self) -> str:
        return f"Unknown game: {self.args[0]}"


def canonical_json(data: Any) -> str:
    """Deterministic JSON text: sorted keys, no whitespace."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"))


def state_hash(encoded_state: dict[str, Any]) -> str:
    """BLAKE2b-256 hex digest of an encoded state."""
    return hashlib.blake2b(
        canonical_json(encoded_state).encode("utf-8"),
        digest_size=32,
    ).hexdigest()


@dataclass
class SuggestedEvent:
    """Notification published for every successful suggestion."""
    game: str
    state_hash: str
    difficulty: int
    iterations: int
    action: dict[str, Any]
    nonce: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "game": self.game,
            "state_hash": self.state_hash,
            "difficulty": self.difficulty,
            "iterations": self.iterations,
            "action": self.action,
            "nonce": self.nonce,
        }


@dataclass
class SuggestionService:
    """
    Main suggestion service.

    All engines share one StreamContext, so the nonce keeps advancing
    across calls and across games. Calls must be serialized by the caller.

    Usage:
        service = SuggestionService()
        event = service.suggest_move("nim", {"pile": 3, "to_move": 0}, 95)
        print(event.action)  # {"take": 1}
    """
    config: SearchConfig = field(default_factory=SearchConfig.from_env)
    stream: StreamContext | None = None
    adapters: dict[str, GameAdapter] = field(default_factory=dict)

    # Published notifications, oldest first
    events: list[SuggestedEvent] = field(default_factory=list)

    _engines: dict[str, MonteCarloSearch] = field(default_factory=dict)

    def __post_init__(self):
        if self.stream is None:
            self.stream = StreamContext(self.config.seed)
        if not self.adapters:
            self.adapters = {name: adapter_cls() for name, adapter_cls in GAMES.items()}

    def list_games(self) -> list[str]:
        return sorted(self.adapters)

    def get_adapter(self, game: str) -> GameAdapter:
        try:
            return self.adapters[game]
        except KeyError:
            raise UnknownGame(game) from None

    def engine_for(self, game: str) -> MonteCarloSearch:
        engine = self._engines.get(game)
        if engine is None:
            engine = MonteCarloSearch(self.get_adapter(game), self.config, self.stream)
            self._engines[game] = engine
        return engine

    def suggest_move(
        self,
        game: str,
        state_data: dict[str, Any],
        difficulty: int,
    ) -> SuggestedEvent:
        """
        Suggest a move for an encoded state.

        Raises:
            UnknownGame: game is not registered
            ValueError: state_data or difficulty is invalid
            NoLegalMoves: the state is terminal or offers no action
        """
        engine = self.engine_for(game)
        adapter = engine.adapter
        state = adapter.decode_state(state_data)

        action = engine.suggest(state, difficulty)
        if action is None:
            raise NoLegalMoves(f"No legal moves for {game} state")

        event = SuggestedEvent(
            game=game,
            state_hash=state_hash(adapter.encode_state(state)),
            difficulty=difficulty,
            iterations=engine.scaled_iterations(difficulty),
            action=adapter.encode_action(action),
            nonce=self.stream.nonce,
        )
        self.events.append(event)
        logger.info(
            "suggested %s for %s state %s (difficulty=%d)",
            event.action, game, event.state_hash[:12], difficulty,
        )
        return event

    def reset_stream(self, nonce: int = 0) -> None:
        """Rewind the shared nonce (genesis/test setup only)."""
        self.stream.reset(nonce)
