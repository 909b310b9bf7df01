import json
import random

import pytest

from neon_snake.clock import FrameTimer, GameClock
from neon_snake.grid import Grid
from neon_snake.storage import HighScoreStore


class TestHighScoreStore:
    """Tests for the JSON high score file."""

    def test_missing_file_reads_zero(self, tmp_path):
        assert HighScoreStore(str(tmp_path / "none.json")).load() == 0

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "scores.json"
        store = HighScoreStore(str(path))
        store.save(120)
        assert store.load() == 120
        assert json.loads(path.read_text()) == {"snakeHighScore": 120}

    def test_corrupt_file_reads_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("{not json")
        assert HighScoreStore(str(path)).load() == 0

    def test_unexpected_shape_reads_zero(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("[1, 2, 3]")
        assert HighScoreStore(str(path)).load() == 0

    def test_negative_value_clamped(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text('{"snakeHighScore": -5}')
        assert HighScoreStore(str(path)).load() == 0

    def test_failed_write_is_not_fatal(self, tmp_path):
        store = HighScoreStore(str(tmp_path / "missing" / "scores.json"))
        store.save(10)
        assert store.load() == 0

    @pytest.mark.parametrize("raw", ["Infinity", "-Infinity", "1e999", "NaN"])
    def test_non_finite_value_reads_zero(self, tmp_path, raw):
        path = tmp_path / "scores.json"
        path.write_text('{"snakeHighScore": %s}' % raw)
        store = HighScoreStore(str(path))
        assert store.load() == 0
        clock = GameClock(Grid(20, rng=random.Random(1)), FrameTimer(), store=store)
        assert clock.high_score == 0
