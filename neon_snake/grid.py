import random
from enum import Enum


class Direction(Enum):
    """Unit movement vectors in screen coordinates (y grows downwards)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self):
        return self.value[0]

    @property
    def dy(self):
        return self.value[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))

    def step(self, cell):
        """Return the cell one step away from cell in this direction."""
        return (cell[0] + self.dx, cell[1] + self.dy)


class Grid:
    """Square board of size x size cells addressed as (x, y)."""

    def __init__(self, size, rng=None):
        if size < 1:
            raise ValueError("grid size must be positive")
        self.size = size
        self.rng = rng or random.Random()

    def in_bounds(self, cell):
        """Return True if cell lies on the board."""
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def random_cell(self):
        """Return a uniformly random cell on the board."""
        return (self.rng.randrange(self.size), self.rng.randrange(self.size))

    def cells(self):
        """Yield every cell row by row."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def center(self):
        """Return the middle cell of the board."""
        return (self.size // 2, self.size // 2)

    def __len__(self):
        return self.size * self.size
