"""
Game Adapter - The capability set a game must expose to be searchable.

An adapter bundles the rules of one game:
- Enumerating legal actions into a bounded ActionBuffer
- Applying an action to produce a successor state
- Terminality, turn ownership and scoring
- A deterministic pseudo-random action for playouts

Adapters are trusted. The engine never checks that apply() receives a
legal action or that is_terminal() and list_actions() agree.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterator, TypeVar


StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")
PlayerT = TypeVar("PlayerT")


class ActionBuffer(Generic[ActionT]):
    """
    Fixed-capacity ordered sequence of actions.

    Once the buffer is full, further appends are dropped and report False.
    Dropping is the truncation policy: only the first `capacity` actions
    an adapter discovers are ever considered.
    """

    __slots__ = ("capacity", "_items")

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"ActionBuffer capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[ActionT] = []

    def append(self, action: ActionT) -> bool:
        """Store action if there is room. Returns False when it was dropped."""
        if len(self._items) >= self.capacity:
            return False
        self._items.append(action)
        return True

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ActionT]:
        return iter(self._items)

    def __getitem__(self, index: int) -> ActionT:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"ActionBuffer(capacity={self.capacity}, count={len(self._items)})"


class GameAdapter(ABC, Generic[StateT, ActionT, PlayerT]):
    """
    Abstract base class for searchable games.

    All rule methods are pure functions of their inputs. States are
    never mutated in place; apply() returns a new state.
    """

    name: str = "game"

    @abstractmethod
    def list_actions(self, state: StateT, capacity: int) -> ActionBuffer[ActionT]:
        """
        Enumerate legal actions for the player to move.

        Args:
            state: State to enumerate from
            capacity: Maximum number of actions to keep

        Returns:
            ActionBuffer in deterministic adapter order; empty once the
            game has reached its terminal condition
        """

    @abstractmethod
    def apply(self, state: StateT, action: ActionT) -> StateT:
        """Return the successor state. The input state is left untouched."""

    @abstractmethod
    def is_terminal(self, state: StateT) -> bool:
        """True iff no further actions should be searched."""

    @abstractmethod
    def current_player(self, state: StateT) -> PlayerT:
        """Player whose turn it is."""

    @abstractmethod
    def score(self, state: StateT, for_player: PlayerT) -> int:
        """
        Signed value of state for `for_player`; higher is better.

        Zero-sum at terminal states. Non-terminal states may return a
        heuristic, commonly 0.
        """

    @abstractmethod
    def random_action(self, state: StateT, seed: int) -> ActionT | None:
        """
        Pick one legal action as a pure function of (state, seed).

        Returns None iff list_actions() would be empty. The choice is
        pseudo-random, not necessarily uniform.
        """

    # -------------------------------------------------------------------------
    # Serialization hooks (service and API boundary)
    # -------------------------------------------------------------------------

    @abstractmethod
    def encode_state(self, state: StateT) -> dict[str, Any]:
        """Canonical JSON-compatible form of state."""

    @abstractmethod
    def decode_state(self, data: dict[str, Any]) -> StateT:
        """Rebuild a state from encode_state() output. Raises ValueError."""

    @abstractmethod
    def encode_action(self, action: ActionT) -> dict[str, Any]:
        """JSON-compatible form of action."""

    @abstractmethod
    def decode_action(self, data: dict[str, Any]) -> ActionT:
        """Rebuild an action from encode_action() output. Raises ValueError."""
