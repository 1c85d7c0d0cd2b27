"""Tests for the Grid module."""

import pytest

from smooth_snake.grid import Grid


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.rows == 20
        assert grid.cols == 28
        assert grid.size == 560

    def test_custom_dimensions(self):
        grid = Grid(rows=8, cols=10)
        assert grid.rows == 8
        assert grid.cols == 10
        assert grid.size == 80

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(rows=3, cols=4)
        with pytest.raises(ValueError, match="at least 4"):
            Grid(rows=4, cols=3)


class TestGridBounds:
    def test_in_bounds(self):
        grid = Grid(rows=5, cols=5)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((4, 4))
        assert not grid.in_bounds((-1, 0))
        assert not grid.in_bounds((0, 5))
        assert not grid.in_bounds((5, 0))

    def test_non_square_bounds(self):
        grid = Grid(rows=4, cols=6)
        assert grid.in_bounds((3, 5))
        assert not grid.in_bounds((4, 5))
        assert not grid.in_bounds((3, 6))


class TestGridCells:
    def test_cells_row_major(self):
        grid = Grid(rows=4, cols=4)
        cells = list(grid.cells())
        assert len(cells) == 16
        assert cells[0] == (0, 0)
        assert cells[1] == (0, 1)
        assert cells[-1] == (3, 3)

    def test_free_cells(self):
        grid = Grid(rows=4, cols=4)
        assert len(grid.free_cells([])) == 16
        free = grid.free_cells([(0, 0), (1, 1)])
        assert len(free) == 14
        assert (0, 0) not in free
        assert (1, 1) not in free

    def test_free_cells_ignores_out_of_bounds(self):
        grid = Grid(rows=4, cols=4)
        assert len(grid.free_cells([(-1, 0), (4, 4)])) == 16
