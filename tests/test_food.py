"""Tests for the food placement module."""

import numpy as np
import pytest

from torus_snake.food import FRUITS, Food, FoodPlacer
from torus_snake.grid import Grid


class _ScriptedRng:
    """Stand-in generator returning scripted draws."""

    def __init__(self, draws):
        self._draws = list(draws)
        self.calls = 0

    def integers(self, low, high=None, size=None):
        self.calls += 1
        value = self._draws.pop(0) if self._draws else 0
        if size is not None:
            return np.array(value)
        return value


class TestFoodPlacerInit:
    def test_default_attempts_scale_with_grid(self):
        placer = FoodPlacer(Grid(size=5))
        assert placer.max_attempts == 25

    def test_negative_attempts_rejected(self):
        with pytest.raises(ValueError, match="max_attempts"):
            FoodPlacer(Grid(size=5), max_attempts=-1)


class TestPlaceFood:
    def test_never_on_occupied_cell(self):
        grid = Grid(size=5)
        placer = FoodPlacer(grid, rng=np.random.default_rng(3))
        occupied = {(x, y) for x in range(5) for y in range(4)}
        for _ in range(50):
            pos = placer.place_food(occupied)
            assert pos not in occupied
            assert grid.contains(*pos)

    def test_rejection_redraws(self):
        rng = _ScriptedRng([(1, 1), (1, 1), (2, 3)])
        placer = FoodPlacer(Grid(size=5), rng=rng)
        assert placer.place_food({(1, 1)}) == (2, 3)
        assert rng.calls == 3

    def test_falls_back_to_scan_after_attempts(self):
        grid = Grid(size=4)
        occupied = {(x, y) for x in range(4) for y in range(4)} - {(2, 3)}
        rng = _ScriptedRng([(0, 0), (0, 0), 0])
        placer = FoodPlacer(grid, rng=rng, max_attempts=2)
        assert placer.place_food(occupied) == (2, 3)

    def test_zero_attempts_scans_immediately(self):
        grid = Grid(size=4)
        placer = FoodPlacer(grid, rng=np.random.default_rng(0), max_attempts=0)
        assert placer.place_food({(0, 0)}) in grid.free_cells({(0, 0)})

    def test_full_grid_returns_none(self):
        grid = Grid(size=4)
        occupied = {(x, y) for x in range(4) for y in range(4)}
        placer = FoodPlacer(grid, rng=np.random.default_rng(0), max_attempts=5)
        assert placer.place_food(occupied) is None

    def test_deterministic_with_seed(self):
        a = FoodPlacer(Grid(), rng=np.random.default_rng(42))
        b = FoodPlacer(Grid(), rng=np.random.default_rng(42))
        assert [a.place_food(set()) for _ in range(5)] == [
            b.place_food(set()) for _ in range(5)
        ]


class TestSpawn:
    def test_spawn_draws_label(self):
        placer = FoodPlacer(Grid(size=5), rng=np.random.default_rng(1))
        food = placer.spawn(set())
        assert isinstance(food, Food)
        assert food.label in FRUITS

    def test_spawn_full_grid(self):
        grid = Grid(size=4)
        occupied = {(x, y) for x in range(4) for y in range(4)}
        assert FoodPlacer(grid, max_attempts=0).spawn(occupied) is None

    def test_to_dict(self):
        food = Food((3, 4), "🍒")
        assert food.to_dict() == {"position": [3, 4], "label": "🍒"}
