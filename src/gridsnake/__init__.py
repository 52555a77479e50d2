# src/gridsnake/__init__.py
"""Snake on a wrap-around grid."""

from gridsnake.config import Config, UP, DOWN, LEFT, RIGHT
from gridsnake.world import GridWorld
from gridsnake.food import FoodManager, GridFullError
from gridsnake.ticker import Ticker
from gridsnake.game import GameState, new_game_state, update

__all__ = [
    "Config", "UP", "DOWN", "LEFT", "RIGHT",
    "GridWorld", "FoodManager", "GridFullError",
    "Ticker", "GameState", "new_game_state", "update",
]
