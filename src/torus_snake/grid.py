"""Toroidal grid model for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

Position = tuple[int, int]


class Grid:
    """Square N×N grid whose edges wrap around to the opposite edge.

    Coordinates use ``(x, y)`` ordering: ``x`` is the column and ``y`` the
    row, so the NumPy mask built by :meth:`free_cells` is indexed
    ``[y, x]``.
    """

    def __init__(self, size: int = 20) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def contains(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def wrap(self, x: int, y: int) -> Position:
        """Wrap coordinates around the grid edges."""
        return x % self.size, y % self.size

    @staticmethod
    def occupied(snake: Iterable[Position]) -> frozenset[Position]:
        """Return the set of cells covered by the given body segments."""
        return frozenset(snake)

    def free_cells(self, occupied: Iterable[Position]) -> list[Position]:
        """Return every unoccupied cell in row-major order."""
        mask = np.ones((self.size, self.size), dtype=bool)
        for x, y in occupied:
            mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        return {"size": self.size}
