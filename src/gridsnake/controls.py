# controls.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

import pygame  # type: ignore

from .config import Difficulty
from .state import Direction

SWIPE_THRESHOLD_PX = 20

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

BUTTON_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class Command(Enum):
    QUIT = "quit"
    START = "start"
    PAUSE = "pause"
    RESTART = "restart"
    TOGGLE_GRID = "toggle_grid"
    TOGGLE_WRAP = "toggle_wrap"
    TOGGLE_SOUND = "toggle_sound"


KEY_COMMANDS = {
    pygame.K_ESCAPE: Command.QUIT,
    pygame.K_RETURN: Command.START,
    pygame.K_SPACE: Command.PAUSE,
    pygame.K_r: Command.RESTART,
    pygame.K_g: Command.TOGGLE_GRID,
    pygame.K_t: Command.TOGGLE_WRAP,
    pygame.K_m: Command.TOGGLE_SOUND,
}

KEY_DIFFICULTY = {
    pygame.K_1: Difficulty.EASY,
    pygame.K_2: Difficulty.MEDIUM,
    pygame.K_3: Difficulty.HARD,
}


def key_to_direction(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


def button_to_direction(name: str) -> Optional[Direction]:
    return BUTTON_DIRECTIONS.get(name.strip().lower())


def swipe_to_direction(
    dx: float, dy: float, threshold: float = SWIPE_THRESHOLD_PX
) -> Optional[Direction]:
    """Dominant axis of a drag; None if it is shorter than `threshold` pixels."""
    if max(abs(dx), abs(dy)) < threshold:
        return None
    if abs(dx) > abs(dy):
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class SwipeTracker:
    """Turns touch/mouse press-release pairs into swipe directions."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD_PX):
        self.threshold = threshold
        self._start: Optional[Tuple[float, float]] = None

    def press(self, x: float, y: float) -> None:
        self._start = (x, y)

    def release(self, x: float, y: float) -> Optional[Direction]:
        if self._start is None:
            return None
        sx, sy = self._start
        self._start = None
        return swipe_to_direction(x - sx, y - sy, self.threshold)
