"""
Card definitions for the capture game.

A card has four ranks, one per side. Once on the board it carries the
color of the player who currently owns it.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


HAND_SIZE = 5


class Color(Enum):
    """Owner colors. Player 0 plays blue, player 1 plays red."""
    BLUE = "blue"
    RED = "red"

    @classmethod
    def for_player(cls, player: int) -> Color:
        return cls.BLUE if player == 0 else cls.RED


def _require_mapping(data: Any, what: str) -> None:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")


@dataclass(frozen=True)
class Card:
    """A card placed on the board."""
    top: int
    right: int
    bottom: int
    left: int
    color: Color | None = None

    def with_color(self, color: Color) -> Card:
        return replace(self, color=color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "left": self.left,
            "color": self.color.value if self.color else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Card:
        _require_mapping(data, "card")
        color = data.get("color")
        return cls(
            top=int(data["top"]),
            right=int(data["right"]),
            bottom=int(data["bottom"]),
            left=int(data["left"]),
            color=Color(color) if color is not None else None,
        )


@dataclass(frozen=True)
class HandEntry:
    """One card in a player's hand, with its ranks and whether it was played."""
    north: int
    east: int
    south: int
    west: int
    used: bool = False

    def to_card(self, color: Color) -> Card:
        return Card(
            top=self.north,
            right=self.east,
            bottom=self.south,
            left=self.west,
            color=color,
        )

    def mark_used(self) -> HandEntry:
        return replace(self, used=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "north": self.north,
            "east": self.east,
            "south": self.south,
            "west": self.west,
            "used": self.used,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HandEntry:
        _require_mapping(data, "hand entry")
        return cls(
            north=int(data["north"]),
            east=int(data["east"]),
            south=int(data["south"]),
            west=int(data["west"]),
            used=bool(data.get("used", False)),
        )


@dataclass(frozen=True)
class Hand:
    """Exactly HAND_SIZE entries; played entries stay in place, marked used."""
    entries: tuple[HandEntry, ...]

    def __post_init__(self):
        if len(self.entries) != HAND_SIZE:
            raise ValueError(f"A hand holds {HAND_SIZE} entries, got {len(self.entries)}")

    def unused_indices(self) -> list[int]:
        return [i for i, entry in enumerate(self.entries) if not entry.used]

    def mark_used(self, index: int) -> Hand:
        entries = list(self.entries)
        entries[index] = entries[index].mark_used()
        return Hand(entries=tuple(entries))

    def to_dict(self) -> dict[str, Any]:
        return {"entries": [e.to_dict() for e in self.entries]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Hand:
        _require_mapping(data, "hand")
        return cls(entries=tuple(HandEntry.from_dict(e) for e in data["entries"]))
