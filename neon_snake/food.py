import logging

from .config import FOOD_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food on a random cell the snake does not cover."""

    def __init__(self, grid, max_attempts=FOOD_MAX_ATTEMPTS):
        self.grid = grid
        self.max_attempts = max_attempts

    def place(self, snake):
        """Return a free cell, or None when the snake fills the whole board."""
        occupied = snake.occupied_cells()
        for _ in range(self.max_attempts):
            pos = self.grid.random_cell()
            if pos not in occupied:
                return pos

        # Crowded board: pick among the remaining free cells directly.
        free = [cell for cell in self.grid.cells() if cell not in occupied]
        if not free:
            logger.warning("No free cell left for food (snake length %d)", len(snake))
            return None
        logger.debug("Food placed by scan after %d misses", self.max_attempts)
        return self.grid.rng.choice(free)
