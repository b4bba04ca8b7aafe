"""
Take-1-or-2 pile game.

Two players alternately remove one or two stones from a pile; whoever
takes the last stone wins. Small enough that the best move is known,
which makes it the reference for checking that the search plays well.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...engine_core.adapter import ActionBuffer, GameAdapter


class NimAction(Enum):
    TAKE_1 = 1
    TAKE_2 = 2


@dataclass(frozen=True)
class NimState:
    pile: int
    to_move: int = 0  # player 0 or 1

    def to_dict(self) -> dict[str, Any]:
        return {"pile": self.pile, "to_move": self.to_move}


class NimAdapter(GameAdapter[NimState, NimAction, int]):
    """Rules of the pile game."""

    name = "nim"

    def list_actions(self, state: NimState, capacity: int) -> ActionBuffer[NimAction]:
        buf: ActionBuffer[NimAction] = ActionBuffer(capacity)
        if state.pile == 0:
            return buf
        buf.append(NimAction.TAKE_1)
        if state.pile >= 2:
            buf.append(NimAction.TAKE_2)
        return buf

    def apply(self, state: NimState, action: NimAction) -> NimState:
        return NimState(
            pile=max(0, state.pile - action.value),
            to_move=1 - state.to_move,
        )

    def is_terminal(self, state: NimState) -> bool:
        return state.pile == 0

    def current_player(self, state: NimState) -> int:
        return state.to_move

    def score(self, state: NimState, for_player: int) -> int:
        if not self.is_terminal(state):
            return 0
        # The player who just moved took the last stone
        winner = 1 - state.to_move
        return 1 if winner == for_player else -1

    def random_action(self, state: NimState, seed: int) -> NimAction | None:
        if state.pile == 0:
            return None
        if state.pile == 1:
            return NimAction.TAKE_1
        return NimAction.TAKE_1 if seed & 1 == 0 else NimAction.TAKE_2

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def encode_state(self, state: NimState) -> dict[str, Any]:
        return state.to_dict()

    def decode_state(self, data: dict[str, Any]) -> NimState:
        try:
            pile = int(data["pile"])
            to_move = int(data.get("to_move", 0))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid nim state: {e}") from e
        if pile < 0:
            raise ValueError(f"pile must be non-negative, got {pile}")
        if to_move not in (0, 1):
            raise ValueError(f"to_move must be 0 or 1, got {to_move}")
        return NimState(pile=pile, to_move=to_move)

    def encode_action(self, action: NimAction) -> dict[str, Any]:
        return {"take": action.value}

    def decode_action(self, data: dict[str, Any]) -> NimAction:
        try:
            return NimAction(int(data["take"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid nim action: {e}") from e
