from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Tuple

from .errors import ConfigError

# ----- Window & grid -----
WIDTH, HEIGHT = 480, 480
CELL_SIZE = 16
HUD_HEIGHT = 28
PAD_HEIGHT = 44

# ----- Colors -----
BG        = (16, 18, 24)
GRID_LINE = (26, 29, 36)
HEAD_A    = (139, 233, 253)
HEAD_B    = (80, 227, 194)
FOOD_A    = (255, 209, 102)
FOOD_B    = (255, 123, 84)
SHINE     = (255, 255, 255, 46)
BORDER    = (0, 0, 0, 64)
TEXT      = (220, 220, 230)
BUTTON    = (44, 48, 60)

# ----- Difficulty (ms per tick) -----
class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


DIFFICULTY_INTERVALS: Dict[Difficulty, int] = {
    Difficulty.EASY: 160,
    Difficulty.MEDIUM: 100,
    Difficulty.HARD: 60,
}


def grid_size(width_px: int, height_px: int, cell_size: int = CELL_SIZE) -> Tuple[int, int]:
    """Number of (columns, rows) that fit in a canvas of the given pixel size."""
    if cell_size <= 0:
        raise ConfigError(f"cell size must be positive, got {cell_size}")
    cols, rows = width_px // cell_size, height_px // cell_size
    if cols < 1 or rows < 1:
        raise ConfigError(
            f"canvas {width_px}x{height_px}px holds no {cell_size}px cells"
        )
    return cols, rows


def validate_intervals(intervals: Mapping[Difficulty, int]) -> Dict[Difficulty, int]:
    table = {}
    for level in Difficulty:
        if level not in intervals:
            raise ConfigError(f"no tick interval for difficulty {level.value!r}")
        ms = intervals[level]
        if int(ms) <= 0:
            raise ConfigError(f"tick interval for {level.value!r} must be > 0, got {ms}")
        table[level] = int(ms)
    return table


def parse_difficulty(raw) -> Difficulty:
    try:
        return Difficulty(str(raw).strip().lower())
    except ValueError as e:
        raise ConfigError(f"unknown difficulty: {raw!r}") from e


# ----- Per-game rules (mutable while playing) -----
@dataclass
class GameConfig:
    wrap_walls: bool = False
    tick_interval_ms: int = DIFFICULTY_INTERVALS[Difficulty.MEDIUM]

    def __post_init__(self):
        if self.tick_interval_ms <= 0:
            raise ConfigError(
                f"tick_interval_ms must be > 0, got {self.tick_interval_ms}"
            )


# ----- Tunables (what you'd tweak from the command line) -----
@dataclass
class Config:
    seed: int | None = None
    difficulty: Difficulty = Difficulty.MEDIUM
    wrap_walls: bool = False
    show_grid: bool = False
    sound_on: bool = True
    highscore_path: str = "snake_highscore.json"
    width: int = WIDTH
    height: int = HEIGHT
    cell_size: int = CELL_SIZE
    verbose: bool = False

CFG = Config()
