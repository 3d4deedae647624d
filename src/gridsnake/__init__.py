# src/gridsnake/__init__.py
"""Grid snake: simulation core plus a small pygame front end."""

from src.gridsnake.engine import SimulationEngine
from src.gridsnake.food import FoodPlacer
from src.gridsnake.game import SnakeGame
from src.gridsnake.state import Direction, GameState, GameStateView, RunState, TickOutcome

__all__ = [
    "Direction",
    "FoodPlacer",
    "GameState",
    "GameStateView",
    "RunState",
    "SimulationEngine",
    "SnakeGame",
    "TickOutcome",
]
