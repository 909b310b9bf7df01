"""Neon Snake: a tick-driven snake arcade game built on pygame."""

from .clock import ClockState, FrameTimer, GameClock, GameListener, GameSession, Speed
from .collision import CollisionKind, check_collision
from .food import FoodSpawner
from .grid import Direction, Grid
from .snake import Snake

__version__ = "1.1.0"

__all__ = [
    "ClockState",
    "CollisionKind",
    "Direction",
    "FoodSpawner",
    "FrameTimer",
    "GameClock",
    "GameListener",
    "GameSession",
    "Grid",
    "Snake",
    "Speed",
    "check_collision",
]
