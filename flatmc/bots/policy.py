"""
Bot Policy - Interface for bot decision-making.

A BotPolicy takes an adapter and a state and returns a decision.
Decisions include:
- Which action to take
- An explanation (for logs and the CLI)
- Evaluation details from the search, when there was one
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..engine_core.search import NoLegalMoves
from ..engine_core.stream import StreamContext

if TYPE_CHECKING:
    from ..engine_core.adapter import GameAdapter


# Capacity baseline policies use when they enumerate actions themselves
POLICY_CAPACITY = 128


@dataclass
class BotDecision:
    """
    A decision made by a bot.

    Contains:
    - The action to take
    - Explanation (for UI/debugging)
    - How many candidates were looked at and the best average found
    """
    action: Any
    explanation: str = ""

    # Evaluation details (for debugging)
    evaluated_actions: int = 0
    best_score: int | None = None
    evaluation_details: dict[str, Any] = field(default_factory=dict)


class BotPolicy(ABC):
    """
    Abstract base class for bot policies.

    A policy defines how a bot selects actions.
    Implementations range from baselines to the Monte-Carlo search.
    """

    @abstractmethod
    def select_action(self, adapter: GameAdapter, state: Any) -> BotDecision:
        """
        Select an action for the player to move.

        Args:
            adapter: Rules of the game being played
            state: Current game state

        Returns:
            BotDecision with the selected action

        Raises:
            NoLegalMoves: if the state offers no action
        """

    def get_name(self) -> str:
        """Get the bot's name/identifier."""
        return self.__class__.__name__


class RandomPolicy(BotPolicy):
    """
    Random policy - lets the adapter pick with a seed from its own stream.

    Used for:
    - Baseline comparison
    - Opponents in matches

    The choice is whatever random_action() does with the seed; it is not
    guaranteed to be uniform.
    """

    def __init__(self, seed: int = 0, stream: StreamContext | None = None):
        self.stream = stream if stream is not None else StreamContext(seed)

    def select_action(self, adapter: GameAdapter, state: Any) -> BotDecision:
        action = None
        if not adapter.is_terminal(state):
            action = adapter.random_action(state, self.stream.draw())
        if action is None:
            raise NoLegalMoves("No legal actions available")

        return BotDecision(
            action=action,
            explanation="Selected pseudo-randomly",
            evaluated_actions=1,
        )


class FirstLegalPolicy(BotPolicy):
    """
    First-legal policy - always selects the first enumerated action.

    Used for:
    - Deterministic testing
    - Baseline comparison
    """

    def select_action(self, adapter: GameAdapter, state: Any) -> BotDecision:
        actions = adapter.list_actions(state, POLICY_CAPACITY)
        if adapter.is_terminal(state) or not actions:
            raise NoLegalMoves("No legal actions available")

        return BotDecision(
            action=actions[0],
            explanation="Selected first legal action",
            evaluated_actions=1,
        )
