"""
Card game state - compact, immutable snapshot used by the search.

All fields are explicit; nothing is bit-packed. Replacing a field
returns a new state, so copies can be taken freely during search.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any

from .cards import Card, Color, Hand


BOARD_SIZE = 4
DEFAULT_MAX_ROUNDS = 5

# board[x][y]; x is the column, y the row (y=0 is the top row)
Board = tuple[tuple[Card | None, ...], ...]


def empty_board() -> Board:
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


def set_cell(board: Board, x: int, y: int, card: Card | None) -> Board:
    """Return a new board with one cell replaced."""
    column = list(board[x])
    column[y] = card
    columns = list(board)
    columns[x] = tuple(column)
    return tuple(columns)


@dataclass(frozen=True)
class PlaceCard:
    """Play the hand entry at `hand_index` onto cell (x, y)."""
    hand_index: int
    x: int
    y: int

    def to_dict(self) -> dict[str, Any]:
        return {"hand_index": self.hand_index, "x": self.x, "y": self.y}


@dataclass(frozen=True)
class CardState:
    """
    A card game in progress.

    `scores` counts captures per player; `round` increments each time the
    turn wraps back to player 0. The game ends when round reaches
    max_rounds.
    """
    hands: tuple[Hand, Hand]
    board: Board = field(default_factory=empty_board)
    scores: tuple[int, int] = (0, 0)
    player_turn: int = 0
    round: int = 0
    max_rounds: int = DEFAULT_MAX_ROUNDS

    def cell(self, x: int, y: int) -> Card | None:
        return self.board[x][y]

    def empty_cells(self) -> list[tuple[int, int]]:
        """Empty cells in enumeration order (x outer, y inner)."""
        return [
            (x, y)
            for x in range(BOARD_SIZE)
            for y in range(BOARD_SIZE)
            if self.board[x][y] is None
        ]

    def hand_of(self, player: int) -> Hand:
        return self.hands[player]

    def _copy_with(self, **changes: Any) -> CardState:
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "board": [
                [card.to_dict() if card else None for card in column]
                for column in self.board
            ],
            "scores": list(self.scores),
            "player_turn": self.player_turn,
            "round": self.round,
            "max_rounds": self.max_rounds,
            "hands": [hand.to_dict() for hand in self.hands],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CardState:
        board_data = data.get("board")
        if board_data is None:
            board = empty_board()
        else:
            if len(board_data) != BOARD_SIZE or any(len(c) != BOARD_SIZE for c in board_data):
                raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
            board = tuple(
                tuple(Card.from_dict(cell) if cell else None for cell in column)
                for column in board_data
            )

        hands = tuple(Hand.from_dict(h) for h in data["hands"])
        if len(hands) != 2:
            raise ValueError(f"expected 2 hands, got {len(hands)}")

        scores = tuple(int(s) for s in data.get("scores", (0, 0)))
        if len(scores) != 2:
            raise ValueError(f"expected 2 scores, got {len(scores)}")

        player_turn = int(data.get("player_turn", 0))
        if player_turn not in (0, 1):
            raise ValueError(f"player_turn must be 0 or 1, got {player_turn}")

        return cls(
            hands=hands,
            board=board,
            scores=scores,
            player_turn=player_turn,
            round=int(data.get("round", 0)),
            max_rounds=int(data.get("max_rounds", DEFAULT_MAX_ROUNDS)),
        )


def board_counts(state: CardState) -> dict[Color, int]:
    """Number of cards of each color on the board."""
    counts = {Color.BLUE: 0, Color.RED: 0}
    for column in state.board:
        for card in column:
            if card is not None and card.color is not None:
                counts[card.color] += 1
    return counts


def winner(state: CardState) -> Color | None:
    """Color owning more cards on the board; None for a draw."""
    counts = board_counts(state)
    if counts[Color.BLUE] > counts[Color.RED]:
        return Color.BLUE
    if counts[Color.RED] > counts[Color.BLUE]:
        return Color.RED
    return None
