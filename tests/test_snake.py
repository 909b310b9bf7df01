import pytest

from neon_snake.grid import Direction, Grid
from neon_snake.snake import Snake


def start_snake():
    return Snake([(10, 10), (9, 10), (8, 10)], Direction.RIGHT)


class TestInitialLayout:
    """Tests for Snake.initial."""

    def test_initial_snake_on_twenty_grid(self):
        snake = Snake.initial(Grid(20))
        assert snake.body == [(10, 10), (9, 10), (8, 10)]
        assert snake.direction is Direction.RIGHT

    def test_initial_snake_scales_with_grid(self):
        snake = Snake.initial(Grid(30))
        assert snake.head == (15, 15)
        assert len(snake) == 3

    def test_initial_snake_must_fit(self):
        with pytest.raises(ValueError):
            Snake.initial(Grid(2), length=3)


class TestAdvance:
    """Tests for Snake.advance and growth."""

    def test_advance_moves_head_and_drops_tail(self):
        snake = start_snake()
        head = snake.advance()
        assert head == (11, 10)
        assert snake.body == [(11, 10), (10, 10), (9, 10)]

    def test_five_advances_without_turning(self):
        snake = start_snake()
        for _ in range(5):
            snake.advance()
        assert snake.head == (15, 10)
        assert len(snake) == 3

    def test_advance_commits_pending_direction(self):
        snake = start_snake()
        snake.set_pending_direction(Direction.UP)
        assert snake.advance() == (10, 9)
        assert snake.direction is Direction.UP
        assert snake.pending_direction is None

    def test_advance_without_direction_raises(self):
        snake = Snake([(3, 3)])
        with pytest.raises(ValueError):
            snake.advance()

    def test_growth_counts_immediately_and_keeps_tail_on_next_move(self):
        snake = start_snake()
        snake.mark_for_growth()
        assert len(snake) == 4
        snake.advance()
        assert snake.body == [(11, 10), (10, 10), (9, 10), (8, 10)]
        snake.advance()
        assert snake.body == [(12, 10), (11, 10), (10, 10), (9, 10)]

    def test_segments_stay_adjacent_after_growth(self):
        snake = start_snake()
        snake.mark_for_growth()
        snake.advance()
        for a, b in zip(snake.body, snake.body[1:]):
            assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1

    def test_occupied_cells(self):
        snake = start_snake()
        assert snake.occupied_cells() == {(10, 10), (9, 10), (8, 10)}
        assert (9, 10) in snake
        assert (11, 10) not in snake


class TestPendingDirection:
    """Tests for intent buffering and the reversal guard."""

    def test_reverse_of_committed_direction_is_rejected(self):
        snake = start_snake()
        assert snake.set_pending_direction(Direction.LEFT) is False
        assert snake.advance() == (11, 10)

    def test_latest_intent_overwrites_earlier_one(self):
        snake = start_snake()
        snake.set_pending_direction(Direction.UP)
        snake.set_pending_direction(Direction.DOWN)
        assert snake.advance() == (10, 11)

    def test_guard_checks_committed_not_pending_direction(self):
        snake = start_snake()
        assert snake.set_pending_direction(Direction.UP)
        # LEFT reverses the committed RIGHT, even though UP is pending.
        assert snake.set_pending_direction(Direction.LEFT) is False
        assert snake.advance() == (10, 9)

    def test_turn_then_reverse_over_two_ticks(self):
        snake = start_snake()
        snake.set_pending_direction(Direction.UP)
        snake.advance()
        assert snake.set_pending_direction(Direction.LEFT)
        assert snake.advance() == (9, 9)

    def test_any_intent_accepted_before_first_move(self):
        snake = Snake([(5, 5), (4, 5)])
        assert snake.set_pending_direction(Direction.LEFT)
        assert snake.advance() == (4, 5)
