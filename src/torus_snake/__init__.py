"""Torus Snake: tick-driven snake engine on a wrap-around grid."""

from torus_snake.config import GameConfig
from torus_snake.controls import Command, DirectionBuffer, propose_direction
from torus_snake.engine import Collided, Moved, TickEngine
from torus_snake.food import Food, FoodPlacer
from torus_snake.grid import Grid
from torus_snake.persistence import InMemoryHighScoreStore, JsonHighScoreStore
from torus_snake.session import SessionController, SessionState, Snapshot
from torus_snake.snake import Direction, Snake, opposite

__all__ = [
    "Collided",
    "Command",
    "Direction",
    "DirectionBuffer",
    "Food",
    "FoodPlacer",
    "GameConfig",
    "Grid",
    "InMemoryHighScoreStore",
    "JsonHighScoreStore",
    "Moved",
    "SessionController",
    "SessionState",
    "Snake",
    "Snapshot",
    "TickEngine",
    "opposite",
    "propose_direction",
]
