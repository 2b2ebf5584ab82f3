"""
Core types shared by every game engine.

- Position: a grid cell
- Direction: a unit step on the grid
- Status / Difficulty / Mode / Mark: small enumerations carried in snapshots
- Stats: win/loss/draw counters for the board game
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple, Optional, Type, TypeVar

E = TypeVar("E", bound=Enum)


class Position(NamedTuple):
    """A grid cell. Bounds are [0, grid_size) on both axes."""

    x: int
    y: int


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """
        Parse a direction name ("up", "LEFT") or a single-key alias
        (w/a/s/d).

        Raises:
            ValueError: if the name matches no direction.
        """
        key = name.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_ALIASES = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class Status(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    DRAW = "draw"
    GAME_OVER = "game_over"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Mode(Enum):
    HUMAN = "human"
    AI = "ai"


class Mark(IntEnum):
    """
    Board cell values (int8-compatible):
        0 = empty
        1 = X (human, moves first)
        2 = O (computer in AI mode)
    """

    EMPTY = 0
    X = 1
    O = 2

    @property
    def other(self) -> "Mark":
        if self is Mark.EMPTY:
            return Mark.EMPTY
        return Mark(3 - self)  # Toggle 1↔2


class Stats(NamedTuple):
    """Session outcome counters, seen from the X player's side."""

    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    def record(self, winner: Optional[Mark]) -> "Stats":
        """Return new counters with one finished game added (None = draw)."""
        if winner is None or winner is Mark.EMPTY:
            return self._replace(draws=self.draws + 1)
        if winner is Mark.X:
            return self._replace(wins=self.wins + 1)
        return self._replace(losses=self.losses + 1)


def coerce(enum_cls: Type[E], value: object) -> Optional[E]:
    """
    Map a member, a member value or a member name onto ``enum_cls``.

    Returns None for anything else so engines can ignore malformed commands.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        if enum_cls is Direction:
            try:
                return Direction.parse(value)
            except ValueError:
                return None
        key = value.strip()
        for member in enum_cls:
            if member.value == key.lower() or member.name == key.upper():
                return member
        return None
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None
