"""Grid Snake — core game engine."""

from grid_snake.config import EngineConfig
from grid_snake.engine import GameEngine, GameModel
from grid_snake.events import Event, RunState
from grid_snake.grid import Grid, GridFullError, Position
from grid_snake.session import GameSession
from grid_snake.snake import Direction, Snake

__all__ = [
    "Direction",
    "EngineConfig",
    "Event",
    "GameEngine",
    "GameModel",
    "GameSession",
    "Grid",
    "GridFullError",
    "Position",
    "RunState",
    "Snake",
]
