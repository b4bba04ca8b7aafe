"""
Monte-Carlo Bot - BotPolicy backed by the flat Monte-Carlo search.

The bot does NOT:
- Build or reuse a search tree
- Remember anything between moves
- Use wall-clock budgets (difficulty alone sets the effort)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
import logging

from .policy import BotDecision, BotPolicy
from ..engine_core.search import MAX_DIFFICULTY, MIN_DIFFICULTY, MonteCarloSearch, NoLegalMoves

if TYPE_CHECKING:
    from ..engine_core.adapter import GameAdapter


logger = logging.getLogger(__name__)


@dataclass
class MonteCarloBot(BotPolicy):
    """
    Automa driven by rollouts.

    Usage:
        bot = MonteCarloBot(search=MonteCarloSearch(adapter, config, stream), difficulty=80)
        decision = bot.select_action(adapter, state)
        print(decision.explanation)
    """
    search: MonteCarloSearch
    difficulty: int = 50

    def __post_init__(self):
        if not MIN_DIFFICULTY <= self.difficulty <= MAX_DIFFICULTY:
            raise ValueError(
                f"difficulty must be in [{MIN_DIFFICULTY}, {MAX_DIFFICULTY}], got {self.difficulty}"
            )

    def select_action(self, adapter: GameAdapter, state: Any) -> BotDecision:
        if adapter.name != self.search.adapter.name:
            raise ValueError(
                f"{self.get_name()} searches {self.search.adapter.name}, not {adapter.name}"
            )

        report = self.search.evaluate(state, self.difficulty)
        if not report.has_move:
            raise NoLegalMoves("No legal actions available")
        logger.debug("%s picked %r", self.get_name(), report.action)

        return BotDecision(
            action=report.action,
            explanation=(
                f"Best average {report.best_average} over {report.sims_per_action} "
                f"rollouts each for {report.candidates} candidates"
            ),
            evaluated_actions=report.candidates,
            best_score=report.best_average,
            evaluation_details={
                "difficulty": report.difficulty,
                "iterations": report.iterations,
                "sims_per_action": report.sims_per_action,
                "at_capacity": report.at_capacity,
                "averages": [s.average for s in report.stats],
            },
        )

    def get_name(self) -> str:
        return f"MonteCarloBot(d={self.difficulty})"
