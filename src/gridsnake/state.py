# state.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .config import GameConfig
from .errors import ConfigError

Cell = Tuple[int, int]


class Direction(Enum):
    """Unit move per tick as (dx, dy); NONE only before the first move."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    NONE = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return Direction((-self.dx, -self.dy))


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    BOARD_FULL = "board_full"

    @property
    def is_terminal(self) -> bool:
        return self in (RunState.GAME_OVER, RunState.BOARD_FULL)


class TickOutcome(Enum):
    CONTINUE = "continue"
    GREW = "grew"
    GAME_OVER = "game_over"
    BOARD_FULL = "board_full"

    @property
    def ends_run(self) -> bool:
        return self in (TickOutcome.GAME_OVER, TickOutcome.BOARD_FULL)


@dataclass(frozen=True)
class GameStateView:
    """Read-only snapshot handed to the renderer and audio cues."""
    snake: Tuple[Cell, ...]        # head first
    food: Optional[Cell]
    score: int
    run_state: RunState
    direction: Direction
    width: int
    height: int
    wrap_walls: bool


@dataclass
class GameState:
    width: int
    height: int
    config: GameConfig = field(default_factory=GameConfig)
    snake: List[Cell] = field(default_factory=list)   # head at index 0
    direction: Direction = Direction.NONE
    pending: Direction = Direction.NONE
    food: Optional[Cell] = None
    score: int = 0
    run_state: RunState = RunState.IDLE

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"grid must be at least 1x1, got {self.width}x{self.height}")
        if not self.snake:
            self.snake = [self.center]

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    @property
    def head(self) -> Cell:
        return self.snake[0]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def view(self) -> GameStateView:
        return GameStateView(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            run_state=self.run_state,
            direction=self.direction,
            width=self.width,
            height=self.height,
            wrap_walls=self.config.wrap_walls,
        )
