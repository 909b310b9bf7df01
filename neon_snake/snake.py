import logging

from .config import START_LENGTH
from .grid import Direction

logger = logging.getLogger(__name__)


class Snake:
    """Snake body as a list of cells, head first.

    Intents from the input source land in a single pending slot and are only
    committed by the next advance(), so several key presses between two ticks
    collapse into the last accepted one.
    """

    def __init__(self, cells, direction=None):
        if not cells:
            raise ValueError("a snake needs at least one segment")
        self.body = [tuple(cell) for cell in cells]
        self.direction = direction
        self.pending_direction = None

    @classmethod
    def initial(cls, grid, length=START_LENGTH):
        """Create a horizontal snake centred on the grid, moving right."""
        head_x, head_y = grid.center()
        if length < 1 or head_x - length + 1 < 0:
            raise ValueError("start length does not fit within the grid")
        return cls([(head_x - i, head_y) for i in range(length)], Direction.RIGHT)

    @property
    def head(self):
        return self.body[0]

    @property
    def tail(self):
        return self.body[-1]

    def set_pending_direction(self, direction):
        """Buffer a turn for the next advance; reversing onto the neck is refused."""
        if self.direction is not None and direction == self.direction.opposite:
            logger.debug("Rejected reversal %s while moving %s", direction.name, self.direction.name)
            return False
        self.pending_direction = direction
        return True

    def advance(self):
        """Move one cell and return the new head."""
        if self.pending_direction is not None:
            self.direction = self.pending_direction
            self.pending_direction = None
        if self.direction is None:
            raise ValueError("snake has no direction to advance in")

        new_head = self.direction.step(self.head)
        self.body.insert(0, new_head)
        self.body.pop()
        return new_head

    def mark_for_growth(self):
        """Grow by one segment.

        The tail is duplicated in place; the next advance drops the copy
        instead of a real segment, which keeps the old tail where it is.
        """
        self.body.append(self.tail)

    def occupied_cells(self):
        """Return the set of cells covered by the body."""
        return set(self.body)

    def __len__(self):
        return len(self.body)

    def __iter__(self):
        return iter(self.body)

    def __contains__(self, cell):
        return cell in self.body

    def __repr__(self):
        direction = self.direction.name if self.direction else None
        return f"<Snake head={self.head} length={len(self)} direction={direction}>"
