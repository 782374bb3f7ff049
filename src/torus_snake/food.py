"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from dataclasses import dataclass

import numpy as np

from torus_snake.grid import Grid, Position

logger = logging.getLogger(__name__)

FRUITS: tuple[str, ...] = ("🍎", "🍒", "🍌", "🍇", "🍊", "🍉", "🍓", "🥝")


@dataclass(frozen=True)
class Food:
    """A single food item. The label is cosmetic only."""

    position: Position
    label: str = FRUITS[0]

    def to_dict(self) -> dict:
        return {"position": list(self.position), "label": self.label}


class FoodPlacer:
    """Places food on free cells of the grid.

    Draws uniformly random cells and rejects occupied ones. After
    *max_attempts* rejections it scans the grid for free cells instead, so
    placement always terminates even when the snake covers most of the
    board.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 0:
            raise ValueError("max_attempts must be >= 0.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = (
            max_attempts if max_attempts is not None else grid.cell_count
        )

    def place_food(self, occupied: Collection[Position]) -> Position | None:
        """Return a random cell not in *occupied*, or ``None`` if none exist."""
        size = self.grid.size
        for _ in range(self.max_attempts):
            x, y = self.rng.integers(0, size, size=2).tolist()
            if (x, y) not in occupied:
                return x, y

        free = self.grid.free_cells(occupied)
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        logger.warning(
            "Rejection sampling gave up after %d attempts; "
            "choosing among %d free cells.",
            self.max_attempts,
            len(free),
        )
        return free[int(self.rng.integers(len(free)))]

    def random_label(self) -> str:
        return FRUITS[int(self.rng.integers(len(FRUITS)))]

    def spawn(self, occupied: Collection[Position]) -> Food | None:
        """Place a new food item with a freshly drawn label."""
        position = self.place_food(occupied)
        if position is None:
            return None
        return Food(position=position, label=self.random_label())
