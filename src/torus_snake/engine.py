"""Pure tick transition: direction + state in, outcome out."""

from __future__ import annotations

from dataclasses import dataclass

from torus_snake.food import Food, FoodPlacer
from torus_snake.grid import Grid, Position
from torus_snake.snake import Direction, Snake


@dataclass(frozen=True)
class Moved:
    """The head advanced one cell.

    ``food`` is the food in play after the move: the same object when
    nothing was eaten, a freshly placed one when ``ate`` is true, or
    ``None`` if the snake now covers every cell.
    """

    snake: Snake
    food: Food | None
    ate: bool = False


@dataclass(frozen=True)
class Collided:
    """The head would have entered a cell the body still occupies."""

    position: Position


Outcome = Moved | Collided


class TickEngine:
    """Single-snake transition function on a toroidal grid.

    :meth:`advance` never mutates its inputs and performs no I/O; the only
    state it touches is the random source of the food placer.
    """

    def __init__(self, grid: Grid, placer: FoodPlacer) -> None:
        self.grid = grid
        self.placer = placer

    def next_head(self, snake: Snake, direction: Direction) -> Position:
        """Compute the wrapped head position one step along *direction*."""
        dx, dy = direction.value
        x, y = snake.head
        return self.grid.wrap(x + dx, y + dy)

    def advance(
        self, snake: Snake, direction: Direction, food: Food | None,
    ) -> Outcome:
        """Advance the snake by one tick in the committed *direction*."""
        new_head = self.next_head(snake, direction)
        will_grow = food is not None and new_head == food.position

        # The tail cell is vacated in this same step unless the snake grows,
        # so only then may the head move onto it.
        blocked = set(snake.body)
        if not will_grow:
            blocked.discard(snake.tail)
        if new_head in blocked:
            return Collided(new_head)

        if will_grow:
            grown = Snake((new_head, *snake.body))
            new_food = self.placer.spawn(self.grid.occupied(grown))
            return Moved(grown, new_food, ate=True)

        return Moved(Snake((new_head, *snake.body[:-1])), food)
