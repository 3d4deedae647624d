# engine.py
from __future__ import annotations
import logging
from typing import Optional

from .errors import GridFullError
from .food import FoodPlacer
from .state import Cell, Direction, GameState, TickOutcome

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Advances a GameState by exactly one grid step per tick()."""

    def __init__(self, placer: Optional[FoodPlacer] = None):
        self.placer = placer or FoodPlacer()

    def tick(self, state: GameState) -> TickOutcome:
        """
        Advance the game by one tick.
        - A pending 180° reversal is dropped, not queued.
        - Before the first direction arrives the snake stays put.
        - A fatal move (wall or body) returns GAME_OVER and leaves the
          snake exactly as it was.
        """
        # Commit direction once per tick
        if state.direction is Direction.NONE or state.pending is not state.direction.opposite:
            state.direction = state.pending

        if state.direction is Direction.NONE:
            return TickOutcome.CONTINUE  # not moving yet

        hx, hy = state.head
        nx, ny = hx + state.direction.dx, hy + state.direction.dy

        # Wall collision or wrap
        if state.config.wrap_walls:
            nx, ny = nx % state.width, ny % state.height
        elif not state.in_bounds(nx, ny):
            logger.debug("wall hit at %s", (nx, ny))
            return TickOutcome.GAME_OVER

        new_head = (nx, ny)

        # Self collision, tail included even though it is about to move
        if new_head in state.snake:
            logger.debug("self hit at %s", new_head)
            return TickOutcome.GAME_OVER

        state.snake.insert(0, new_head)

        # Eat / move
        if new_head == state.food:
            state.score += 1
            return self._replace_food(state)

        state.snake.pop()
        return TickOutcome.CONTINUE

    def place_food(self, state: GameState) -> Optional[Cell]:
        """Put fresh food on the board; None when no cell is free."""
        try:
            state.food = self.placer.place(state.width, state.height, state.snake)
        except GridFullError:
            state.food = None
        return state.food

    def _replace_food(self, state: GameState) -> TickOutcome:
        if self.place_food(state) is None:
            logger.info("board full at score %d", state.score)
            return TickOutcome.BOARD_FULL
        return TickOutcome.GREW
