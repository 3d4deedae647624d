# food.py
from __future__ import annotations
import logging
import random
from typing import Collection, Optional

import numpy as np  # type: ignore

from .errors import GridFullError
from .state import Cell

logger = logging.getLogger(__name__)


class FoodPlacer:
    """
    Picks a food cell uniformly among the cells the snake does not occupy.

    Uses rejection sampling over the whole grid while the board is sparse.
    Once occupancy passes `dense_threshold`, or sampling misses
    `max_attempts` times in a row, the free cells are enumerated from a
    numpy occupancy mask instead, so a nearly full board still terminates.
    A board with no free cell raises GridFullError.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        dense_threshold: float = 0.9,
        max_attempts: int = 1_000,
    ):
        self.rng = rng or random.Random()
        self.dense_threshold = dense_threshold
        self.max_attempts = max_attempts

    def place(self, width: int, height: int, occupied: Collection[Cell]) -> Cell:
        blocked = set(occupied)
        total = width * height
        if len(blocked) >= total and _covers_grid(blocked, width, height):
            raise GridFullError(width, height)

        if len(blocked) <= self.dense_threshold * total:
            for _ in range(self.max_attempts):
                fx = self.rng.randrange(width)
                fy = self.rng.randrange(height)
                if (fx, fy) not in blocked:
                    return (fx, fy)
            logger.debug("rejection sampling missed %d times, enumerating", self.max_attempts)

        return self._pick_free(width, height, blocked)

    def _pick_free(self, width: int, height: int, blocked: set) -> Cell:
        free_mask = np.ones((height, width), dtype=bool)
        for x, y in blocked:
            if 0 <= x < width and 0 <= y < height:
                free_mask[y, x] = False
        free = np.argwhere(free_mask)   # rows of (y, x), row-major order
        if len(free) == 0:
            raise GridFullError(width, height)
        y, x = free[self.rng.randrange(len(free))]
        return (int(x), int(y))


def _covers_grid(cells: set, width: int, height: int) -> bool:
    inside = sum(1 for x, y in cells if 0 <= x < width and 0 <= y < height)
    return inside >= width * height
