import os
import random

import pytest

# Headless pygame for renderer and audio tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from neon_snake.clock import FrameTimer, GameClock, GameListener  # noqa: E402
from neon_snake.grid import Grid  # noqa: E402


class RecordingListener(GameListener):
    """Collects every notification a GameClock emits, in order."""

    def __init__(self):
        self.events = []

    def on_game_started(self):
        self.events.append(("started",))

    def on_score_changed(self, score):
        self.events.append(("score", score))

    def on_high_score_changed(self, score):
        self.events.append(("high_score", score))

    def on_food_eaten(self):
        self.events.append(("eaten",))

    def on_game_over(self, final_score, collision):
        self.events.append(("game_over", final_score, collision))

    def named(self, name):
        return [e for e in self.events if e[0] == name]


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw(self, snake, food):
        self.frames.append((list(snake.body), food))


@pytest.fixture
def grid():
    return Grid(20, rng=random.Random(1234))


@pytest.fixture
def timer():
    return FrameTimer()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def game(grid, timer, listener, renderer):
    return GameClock(grid, timer, renderer=renderer, listeners=[listener])
