"""Directions and the immutable snake body."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from torus_snake.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing the other way."""
    return _OPPOSITES[direction]


class Snake:
    """A snake represented as an ordered tuple of ``(x, y)`` segments.

    The head is ``body[0]``; the tail is ``body[-1]``. Instances are never
    mutated: the tick engine builds a new snake for every committed move.
    """

    __slots__ = ("body",)

    def __init__(self, body: Iterable[Position]) -> None:
        segments = tuple((int(x), int(y)) for x, y in body)
        if not segments:
            raise ValueError("Snake length must be at least 1.")
        self.body: tuple[Position, ...] = segments

    @classmethod
    def spawn(
        cls,
        head_x: int,
        head_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> Snake:
        """Lay out a straight snake trailing behind *direction*."""
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        return cls((head_x - dx * i, head_y - dy * i) for i in range(length))

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        """Return the tail coordinate."""
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, position: object) -> bool:
        return position in self.body

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snake):
            return NotImplemented
        return self.body == other.body

    def __hash__(self) -> int:
        return hash(self.body)

    def __repr__(self) -> str:
        return f"Snake({list(self.body)!r})"

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
