import random

import pytest

from neon_snake.grid import Direction, Grid


class TestDirection:
    """Tests for the Direction enum."""

    def test_opposites(self):
        assert Direction.UP.opposite is Direction.DOWN
        assert Direction.DOWN.opposite is Direction.UP
        assert Direction.LEFT.opposite is Direction.RIGHT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_step_uses_screen_coordinates(self):
        assert Direction.UP.step((5, 5)) == (5, 4)
        assert Direction.DOWN.step((5, 5)) == (5, 6)
        assert Direction.LEFT.step((5, 5)) == (4, 5)
        assert Direction.RIGHT.step((5, 5)) == (6, 5)


class TestGrid:
    """Tests for the Grid model."""

    @pytest.mark.parametrize("cell", [(0, 0), (19, 19), (0, 19), (10, 3)])
    def test_in_bounds(self, cell):
        assert Grid(20).in_bounds(cell)

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (20, 0), (0, 20), (25, -3)])
    def test_out_of_bounds(self, cell):
        assert not Grid(20).in_bounds(cell)

    def test_random_cell_stays_on_board(self):
        grid = Grid(5, rng=random.Random(7))
        seen = {grid.random_cell() for _ in range(500)}
        assert all(grid.in_bounds(cell) for cell in seen)
        # 500 draws over 25 cells should reach every one of them.
        assert len(seen) == 25

    def test_cells_covers_board_once(self):
        grid = Grid(4)
        cells = list(grid.cells())
        assert len(cells) == len(grid) == 16
        assert len(set(cells)) == 16

    def test_center(self):
        assert Grid(20).center() == (10, 10)
        assert Grid(30).center() == (15, 15)

    def test_rejects_empty_grid(self):
        with pytest.raises(ValueError):
            Grid(0)
