from enum import Enum


class CollisionKind(Enum):
    WALL = "wall"
    SELF = "self"


def check_collision(grid, head, snake):
    """Classify the freshly advanced head, or return None when the move is safe.

    Runs after Snake.advance(), so the tail cell vacated on this tick is no
    longer part of the body. A tail duplicated by a growth event still is.
    """
    if not grid.in_bounds(head):
        return CollisionKind.WALL
    if head in snake.body[1:]:
        return CollisionKind.SELF
    return None
