"""
Card capture adapter.

Rules:
- Players alternate placing a card from their hand on an empty cell
- Each side of the placed card is compared with the facing side of the
  neighbouring card; a strictly higher rank captures the neighbour
- A capture recolors the neighbour, moves one point from the previous
  owner (never below zero) to the mover
- The round counter increases when the turn wraps back to player 0;
  the game ends after max_rounds rounds
"""

from __future__ import annotations
from typing import Any

from ...engine_core.adapter import ActionBuffer, GameAdapter
from .cards import Color
from .state import BOARD_SIZE, CardState, PlaceCard, set_cell


# Capacity used when random_action enumerates internally
RANDOM_ACTION_CAPACITY = 128

# (dx, dy, side of the placed card, facing side of the neighbour)
NEIGHBOURS = (
    (0, -1, "top", "bottom"),
    (1, 0, "right", "left"),
    (0, 1, "bottom", "top"),
    (-1, 0, "left", "right"),
)


class CardAdapter(GameAdapter[CardState, PlaceCard, int]):
    """Rules of the 4x4 card capture game."""

    name = "card"

    def list_actions(self, state: CardState, capacity: int) -> ActionBuffer[PlaceCard]:
        buf: ActionBuffer[PlaceCard] = ActionBuffer(capacity)
        if state.round >= state.max_rounds:
            return buf

        unused = state.hand_of(state.player_turn).unused_indices()
        for x, y in state.empty_cells():
            for idx in unused:
                buf.append(PlaceCard(hand_index=idx, x=x, y=y))
                if buf.is_full:
                    return buf
        return buf

    def apply(self, state: CardState, action: PlaceCard) -> CardState:
        mover = state.player_turn
        color = Color.for_player(mover)
        hand = state.hand_of(mover)
        placed = hand.entries[action.hand_index].to_card(color)

        board = set_cell(state.board, action.x, action.y, placed)
        scores = list(state.scores)

        for dx, dy, side, facing in NEIGHBOURS:
            nx, ny = action.x + dx, action.y + dy
            if not (0 <= nx < BOARD_SIZE and 0 <= ny < BOARD_SIZE):
                continue
            neighbour = board[nx][ny]
            # same-color neighbours are skipped: a move never scores off its own cards
            if neighbour is None or neighbour.color == color:
                continue
            if getattr(placed, side) > getattr(neighbour, facing):
                if neighbour.color is not None:
                    previous = 0 if neighbour.color == Color.BLUE else 1
                    scores[previous] = max(0, scores[previous] - 1)
                scores[mover] += 1
                board = set_cell(board, nx, ny, neighbour.with_color(color))

        hands = list(state.hands)
        hands[mover] = hand.mark_used(action.hand_index)

        if mover == 0:
            next_turn, next_round = 1, state.round
        else:
            next_turn, next_round = 0, state.round + 1

        return state._copy_with(
            board=board,
            scores=(scores[0], scores[1]),
            hands=(hands[0], hands[1]),
            player_turn=next_turn,
            round=next_round,
        )

    def is_terminal(self, state: CardState) -> bool:
        return state.round >= state.max_rounds

    def current_player(self, state: CardState) -> int:
        return state.player_turn

    def score(self, state: CardState, for_player: int) -> int:
        mine = state.scores[for_player]
        theirs = state.scores[1 - for_player]
        return mine - theirs

    def random_action(self, state: CardState, seed: int) -> PlaceCard | None:
        actions = self.list_actions(state, RANDOM_ACTION_CAPACITY)
        if not actions:
            return None
        return actions[seed % len(actions)]

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def encode_state(self, state: CardState) -> dict[str, Any]:
        return state.to_dict()

    def decode_state(self, data: dict[str, Any]) -> CardState:
        try:
            return CardState.from_dict(data)
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid card state: {e!r}") from e

    def encode_action(self, action: PlaceCard) -> dict[str, Any]:
        return action.to_dict()

    def decode_action(self, data: dict[str, Any]) -> PlaceCard:
        try:
            action = PlaceCard(
                hand_index=int(data["hand_index"]),
                x=int(data["x"]),
                y=int(data["y"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid card action: {e!r}") from e
        if not (0 <= action.x < BOARD_SIZE and 0 <= action.y < BOARD_SIZE):
            raise ValueError(f"cell ({action.x}, {action.y}) is off the board")
        return action
