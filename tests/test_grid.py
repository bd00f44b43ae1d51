"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_arcade.grid import BoundaryMode, Grid
from snake_arcade.snake import Point


class TestGridInit:
    def test_default_size(self):
        grid = Grid()
        assert grid.field_size == 16
        assert grid.cell_count == 256

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(3)

    def test_boundary_mode_values(self):
        assert BoundaryMode("leading_edge") == BoundaryMode.LEADING_EDGE
        assert BoundaryMode("strict") == BoundaryMode.STRICT


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(4)
        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(3, 3)
        assert not grid.in_bounds(4, 0)
        assert not grid.in_bounds(0, -1)


class TestGridOccupancy:
    def test_occupancy_is_indexed_y_x(self):
        grid = Grid(4)
        mask = grid.occupancy([Point(1, 2)])
        assert mask.shape == (4, 4)
        assert mask[2, 1]
        assert mask.sum() == 1

    def test_out_of_bounds_points_ignored(self):
        grid = Grid(4)
        mask = grid.occupancy([Point(4, 0), Point(-1, 2)])
        assert not np.any(mask)

    def test_free_cells_all(self):
        grid = Grid(4)
        free = grid.free_cells([])
        assert len(free) == 16
        assert free[0] == Point(0, 0)
        assert free[1] == Point(1, 0)

    def test_free_cells_excludes_occupied(self):
        grid = Grid(4)
        occupied = [Point(0, 0), Point(3, 3)]
        free = grid.free_cells(occupied)
        assert len(free) == 14
        assert all(p not in occupied for p in free)
        assert all(isinstance(p, Point) for p in free)

    def test_to_dict(self):
        assert Grid(8).to_dict() == {"field_size": 8}
