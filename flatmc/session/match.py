"""
Match - plays a complete game between two policies.

The loop:
1. Ask the policy of the player to move for a decision
2. Apply the chosen action through the adapter
3. Record the move
4. Repeat until the state is terminal or the turn limit is hit
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
import logging

from ..engine_core.search import NoLegalMoves

if TYPE_CHECKING:
    from ..bots.policy import BotPolicy
    from ..engine_core.adapter import GameAdapter


logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 1000


@dataclass
class MoveRecord:
    """One move of a match."""
    turn: int
    player: Any
    action: Any
    explanation: str = ""


@dataclass
class MatchResult:
    """
    Result of a match.

    `finished` is False when the match stopped before a terminal state
    (a policy had no move, or max_turns was reached).
    """
    final_state: Any
    moves: list[MoveRecord] = field(default_factory=list)
    scores: dict[Any, int] = field(default_factory=dict)
    finished: bool = False
    stop_reason: str = ""

    @property
    def winner(self) -> Any | None:
        """Player with the strictly highest score, if any."""
        if not self.scores:
            return None
        best = max(self.scores.values())
        leaders = [p for p, s in self.scores.items() if s == best]
        return leaders[0] if len(leaders) == 1 else None


class Match:
    """
    The match driver.

    Usage:
        match = Match(adapter, {0: MonteCarloBot(search), 1: RandomPolicy(seed=7)})
        result = match.play(start_state)
        print(result.winner, len(result.moves))
    """

    def __init__(
        self,
        adapter: GameAdapter,
        policies: dict[Any, BotPolicy],
        max_turns: int = DEFAULT_MAX_TURNS,
    ):
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {max_turns}")
        self.adapter = adapter
        self.policies = policies
        self.max_turns = max_turns

    def play(self, start_state: Any) -> MatchResult:
        adapter = self.adapter
        state = start_state
        moves: list[MoveRecord] = []
        stop_reason = ""

        for turn in range(self.max_turns):
            if adapter.is_terminal(state):
                break
            player = adapter.current_player(state)
            policy = self.policies.get(player)
            if policy is None:
                raise KeyError(f"No policy for player {player!r}")

            try:
                decision = policy.select_action(adapter, state)
            except NoLegalMoves:
                stop_reason = f"player {player!r} has no legal move"
                logger.info("match stopped at turn %d: %s", turn, stop_reason)
                break

            state = adapter.apply(state, decision.action)
            moves.append(MoveRecord(
                turn=turn,
                player=player,
                action=decision.action,
                explanation=decision.explanation,
            ))
            logger.debug("turn %d: player %r -> %r", turn, player, decision.action)
        else:
            if not adapter.is_terminal(state):
                stop_reason = f"turn limit {self.max_turns} reached"

        finished = adapter.is_terminal(state)
        return MatchResult(
            final_state=state,
            moves=moves,
            scores={p: adapter.score(state, p) for p in self.policies},
            finished=finished,
            stop_reason="" if finished else stop_reason,
        )
