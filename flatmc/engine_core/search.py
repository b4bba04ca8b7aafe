"""
Search Engine - flat Monte-Carlo move selection.

For every legal action at the root the engine runs a difficulty-scaled
number of random playouts and keeps the action with the best integer
average. There is no tree: each candidate is evaluated independently
and nothing is reused between calls.

Determinism rules:
- Seeds come only from the StreamContext, drawn in a fixed order
  (outer loop over actions, inner loop over simulations)
- Integer arithmetic only; averages truncate toward zero
- Ties go to the first action in enumeration order
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any
import logging

from .config import SearchConfig
from .rollout import playout
from .stream import StreamContext

if TYPE_CHECKING:
    from .adapter import GameAdapter


logger = logging.getLogger(__name__)

MIN_DIFFICULTY = 0
MAX_DIFFICULTY = 100


class NoLegalMoves(ValueError):
    """Raised by callers that need a move when the engine has none to offer."""


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounded toward zero (Python's // floors)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def scaled_iterations(base_iterations: int, difficulty: int) -> int:
    """
    Map difficulty 0..100 to a rollout budget.

    0 -> half the base, 50 -> the base, 100 -> two and a half times it.
    """
    base = max(base_iterations, 1)
    return max(1, base * (50 + 2 * difficulty) // 100)


@dataclass
class ActionStats:
    """Rollout totals for one root candidate."""
    index: int
    action: Any
    total: int = 0
    average: int = 0


@dataclass
class SearchReport:
    """
    Outcome of one search.

    `action` is None when the state is terminal or has no legal actions;
    the remaining fields are then left at their defaults.
    """
    action: Any = None
    best_index: int | None = None
    best_average: int | None = None
    difficulty: int = 0
    iterations: int = 0
    sims_per_action: int = 0
    candidates: int = 0
    at_capacity: bool = False
    stats: list[ActionStats] = field(default_factory=list)

    @property
    def has_move(self) -> bool:
        return self.best_index is not None


class MonteCarloSearch:
    """
    Flat Monte-Carlo suggestor for one adapter.

    Usage:
        search = MonteCarloSearch(NimAdapter(), SearchConfig(), StreamContext(seed))
        action = search.suggest(state, difficulty=80)
        if action is None:
            ...  # game over, nothing to suggest

    The stream is borrowed, not owned: several engines may share one
    StreamContext so the nonce keeps counting across calls.
    """

    def __init__(
        self,
        adapter: GameAdapter,
        config: SearchConfig | None = None,
        stream: StreamContext | None = None,
    ):
        self.adapter = adapter
        self.config = config or SearchConfig()
        self.stream = stream if stream is not None else StreamContext(self.config.seed)

    def scaled_iterations(self, difficulty: int) -> int:
        """Rollout budget for difficulty, before the per-candidate floor."""
        _check_difficulty(difficulty)
        return scaled_iterations(self.config.base_iterations, difficulty)

    def suggest(self, state: Any, difficulty: int) -> Any | None:
        """Best action for the player to move, or None if there is none."""
        return self.evaluate(state, difficulty).action

    def evaluate(self, state: Any, difficulty: int) -> SearchReport:
        """
        Run the search and return the chosen action with its statistics.

        Steps:
        1. Terminal state -> empty report
        2. Enumerate up to max_actions candidates
        3. Budget = max(scaled iterations, candidates)
        4. Evaluate every candidate with the same number of playouts
        5. First strictly best average wins
        """
        _check_difficulty(difficulty)
        adapter = self.adapter
        report = SearchReport(difficulty=difficulty)

        if adapter.is_terminal(state):
            logger.debug("search skipped: terminal state")
            return report

        actions = adapter.list_actions(state, self.config.max_actions)
        n = len(actions)
        if n == 0:
            logger.debug("search skipped: no legal actions")
            return report

        iterations = max(scaled_iterations(self.config.base_iterations, difficulty), n)
        sims_per_action = max(1, iterations // n)
        me = adapter.current_player(state)
        max_depth = self.config.max_playout_depth

        report.iterations = iterations
        report.sims_per_action = sims_per_action
        report.candidates = n
        report.at_capacity = actions.is_full
        if actions.is_full:
            logger.debug("action buffer full at %d; later actions ignored", n)

        for i, action in enumerate(actions):
            total = 0
            for j in range(sims_per_action):
                seed = self.stream.draw((i << 32) | j)
                next_state = adapter.apply(state, action)
                total += playout(adapter, next_state, me, seed, max_depth)

            average = truncating_div(total, sims_per_action)
            report.stats.append(ActionStats(index=i, action=action, total=total, average=average))

            if report.best_average is None or average > report.best_average:
                report.best_average = average
                report.best_index = i

        report.action = actions[report.best_index]
        logger.debug(
            "search chose candidate %d/%d (avg=%d, sims=%d, difficulty=%d)",
            report.best_index, n, report.best_average, sims_per_action, difficulty,
        )
        return report


def _check_difficulty(difficulty: int) -> None:
    if not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY:
        raise ValueError(
            f"difficulty must be in [{MIN_DIFFICULTY}, {MAX_DIFFICULTY}], got {difficulty}"
        )
