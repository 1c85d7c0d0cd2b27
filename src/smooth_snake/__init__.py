"""Smooth Snake — fixed-timestep game engine."""

from smooth_snake.clock import GameClock
from smooth_snake.config import GameConfig
from smooth_snake.controls import InputEvent, InputMapper
from smooth_snake.engine import GameEngine, GameOverReason, GameState, Snapshot
from smooth_snake.food import FoodSpawner
from smooth_snake.grid import Grid
from smooth_snake.session import GameSession
from smooth_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "FoodSpawner",
    "GameClock",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GameSession",
    "GameState",
    "Grid",
    "InputEvent",
    "InputMapper",
    "Snake",
    "Snapshot",
]
