"""Tests for the FoodSpawner module."""

import logging

import numpy as np
import pytest

from snake_arcade.food import FoodSpawner
from snake_arcade.grid import Grid
from snake_arcade.snake import Point


def _all_cells(size: int) -> list[Point]:
    return [Point(x, y) for x in range(size) for y in range(size)]


class TestFoodSpawnerInit:
    def test_default(self):
        spawner = FoodSpawner(Grid(5))
        assert spawner.max_attempts == 64

    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError, match="non-negative"):
            FoodSpawner(Grid(5), max_attempts=-1)


class TestFoodSpawning:
    def test_spawn_in_bounds(self):
        grid = Grid(5)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(42))
        food = spawner.spawn([])
        assert isinstance(food, Point)
        assert grid.in_bounds(food.x, food.y)

    def test_never_returns_occupied(self):
        grid = Grid(6)
        occupied = _all_cells(6)[::2]
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        for _ in range(200):
            assert spawner.spawn(occupied) not in occupied

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_last_free_cell(self, seed):
        grid = Grid(4)
        free = Point(2, 3)
        occupied = [p for p in _all_cells(4) if p != free]
        spawner = FoodSpawner(grid, rng=np.random.default_rng(seed))
        assert spawner.spawn(occupied) == free

    def test_last_free_cell_via_scan(self):
        grid = Grid(4)
        free = Point(0, 1)
        occupied = [p for p in _all_cells(4) if p != free]
        spawner = FoodSpawner(grid, rng=np.random.default_rng(7), max_attempts=0)
        assert spawner.spawn(occupied) == free

    def test_full_grid_returns_none(self, caplog):
        spawner = FoodSpawner(Grid(4), rng=np.random.default_rng(0))
        with caplog.at_level(logging.WARNING, logger="snake_arcade.food"):
            assert spawner.spawn(_all_cells(4)) is None
        assert "No empty cells" in caplog.text

    def test_spawn_deterministic(self):
        """Same seed produces same food positions."""
        assert self._spawn_with_seed(42) == self._spawn_with_seed(42)

    @staticmethod
    def _spawn_with_seed(seed: int) -> list[Point]:
        spawner = FoodSpawner(Grid(10), rng=np.random.default_rng(seed))
        return [spawner.spawn([Point(5, 5)]) for _ in range(5)]
