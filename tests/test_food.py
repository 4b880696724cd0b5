"""Tests for the FoodSpawner module."""

import numpy as np

from grid_snake.food import FoodSpawner
from grid_snake.grid import Grid, Position


class TestFoodSpawner:
    def test_starts_without_food(self):
        spawner = FoodSpawner(Grid(size=5))
        assert spawner.position is None
        assert spawner.to_dict() == {"position": None}

    def test_spawn_avoids_occupied(self):
        grid = Grid(size=4)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        occupied = {Position(x, y) for x in range(4) for y in range(3)}
        for _ in range(20):
            pos = spawner.spawn(occupied)
            assert pos not in occupied
            assert pos.y == 3

    def test_is_at(self):
        spawner = FoodSpawner(Grid(size=4), rng=np.random.default_rng(1))
        pos = spawner.spawn(set())
        assert spawner.is_at(pos)
        assert not spawner.is_at(Position(-1, -1))

    def test_spawn_deterministic(self):
        a = FoodSpawner(Grid(), rng=np.random.default_rng(9)).spawn(set())
        b = FoodSpawner(Grid(), rng=np.random.default_rng(9)).spawn(set())
        assert a == b

    def test_to_dict(self):
        spawner = FoodSpawner(Grid(size=4), rng=np.random.default_rng(2))
        pos = spawner.spawn(set())
        assert spawner.to_dict() == {"position": [pos.x, pos.y]}
