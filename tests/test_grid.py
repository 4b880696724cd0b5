"""Tests for the Grid module."""

import numpy as np
import pytest

from grid_snake.grid import Grid, GridFullError, Position


class TestPosition:
    def test_equality_by_value(self):
        assert Position(1, 2) == Position(1, 2)
        assert Position(1, 2) != Position(2, 1)

    def test_hashable(self):
        assert len({Position(0, 0), Position(0, 0), Position(1, 0)}) == 2

    def test_to_list(self):
        assert Position(3, 4).to_list() == [3, 4]


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cell_count == 400

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(size=3)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(size=5)
        assert grid.in_bounds(Position(0, 0))
        assert grid.in_bounds(Position(4, 4))
        assert not grid.in_bounds(Position(-1, 0))
        assert not grid.in_bounds(Position(0, -1))
        assert not grid.in_bounds(Position(5, 0))
        assert not grid.in_bounds(Position(0, 5))


class TestRandomCell:
    def test_result_in_bounds(self):
        grid = Grid(size=5)
        rng = np.random.default_rng(0)
        for _ in range(50):
            assert grid.in_bounds(grid.random_cell_excluding(set(), rng))

    def test_only_free_cell_is_chosen(self):
        grid = Grid(size=4)
        free = Position(2, 3)
        excluded = {
            Position(x, y) for x in range(4) for y in range(4)
        } - {free}
        rng = np.random.default_rng(1)
        assert grid.random_cell_excluding(excluded, rng) == free

    def test_never_returns_excluded(self):
        grid = Grid(size=4)
        excluded = {Position(x, 0) for x in range(4)}
        rng = np.random.default_rng(2)
        for _ in range(100):
            assert grid.random_cell_excluding(excluded, rng) not in excluded

    def test_accepts_plain_tuples(self):
        grid = Grid(size=4)
        excluded = [(x, y) for x in range(4) for y in range(4) if (x, y) != (0, 0)]
        rng = np.random.default_rng(3)
        assert grid.random_cell_excluding(excluded, rng) == Position(0, 0)

    def test_full_grid_raises(self):
        grid = Grid(size=4)
        excluded = {Position(x, y) for x in range(4) for y in range(4)}
        with pytest.raises(GridFullError):
            grid.random_cell_excluding(excluded, np.random.default_rng(0))

    def test_out_of_bounds_exclusions_ignored_for_fullness(self):
        grid = Grid(size=4)
        excluded = {
            Position(x, y) for x in range(4) for y in range(4)
        } - {Position(1, 1)}
        excluded.add(Position(-1, 0))
        rng = np.random.default_rng(4)
        assert grid.random_cell_excluding(excluded, rng) == Position(1, 1)

    def test_deterministic_with_seed(self):
        grid = Grid(size=20)
        a = grid.random_cell_excluding(set(), np.random.default_rng(42))
        b = grid.random_cell_excluding(set(), np.random.default_rng(42))
        assert a == b


class TestGridSerialization:
    def test_to_dict(self):
        assert Grid(size=7).to_dict() == {"size": 7}
