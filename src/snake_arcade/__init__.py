"""Snake Arcade: a fixed-timestep snake game."""

from snake_arcade.config import GameConfig, Palette
from snake_arcade.engine import GameEngine, GameState
from snake_arcade.food import FoodSpawner
from snake_arcade.grid import BoundaryMode, Grid
from snake_arcade.snake import CommandQueue, Direction, Point, Snake

__all__ = [
    "BoundaryMode",
    "CommandQueue",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Grid",
    "Palette",
    "Point",
    "Snake",
]
