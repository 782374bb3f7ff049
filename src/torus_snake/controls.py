"""Abstract input commands and the single-slot direction buffer."""

from __future__ import annotations

import enum

from torus_snake.snake import Direction, opposite


class Command(str, enum.Enum):
    """Commands delivered by the input-mapping layer."""

    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    TOGGLE_PAUSE = "pause"
    RESTART = "restart"

    @property
    def direction(self) -> Direction | None:
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS: dict[Command, Direction] = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


def propose_direction(current: Direction, requested: Direction) -> bool:
    """Return whether *requested* may follow the committed *current*."""
    return requested != opposite(current)


class DirectionBuffer:
    """Holds the committed direction and at most one pending change.

    Proposals are validated against the direction applied on the last
    tick, not against an earlier pending proposal, so a quick double
    key-press between ticks can never fold the snake back onto itself.
    """

    def __init__(self, committed: Direction = Direction.RIGHT) -> None:
        self.committed = committed
        self.pending = committed

    def propose(self, requested: Direction) -> bool:
        """Buffer *requested* for the next tick if it is not a reversal."""
        if not propose_direction(self.committed, requested):
            return False
        self.pending = requested
        return True

    def commit(self) -> Direction:
        """Apply the pending direction; called exactly once per tick."""
        self.committed = self.pending
        return self.committed

    def reset(self, direction: Direction = Direction.RIGHT) -> None:
        self.committed = direction
        self.pending = direction
