import pytest

from src.gridsnake.config import (
    DIFFICULTY_INTERVALS, Difficulty, GameConfig, grid_size, parse_difficulty,
)
from src.gridsnake.errors import ConfigError
from src.gridsnake.state import Direction, GameState


def test_difficulty_table():
    assert DIFFICULTY_INTERVALS == {
        Difficulty.EASY: 160, Difficulty.MEDIUM: 100, Difficulty.HARD: 60,
    }
    assert parse_difficulty(" Hard ") is Difficulty.HARD
    with pytest.raises(ConfigError):
        parse_difficulty("insane")


def test_grid_size_floors_canvas():
    assert grid_size(480, 400, 16) == (30, 25)
    assert grid_size(17, 16, 16) == (1, 1)


@pytest.mark.parametrize("w,h,cell", [(15, 100, 16), (100, 0, 16), (100, 100, 0)])
def test_grid_size_rejects_empty_grids(w, h, cell):
    with pytest.raises(ConfigError):
        grid_size(w, h, cell)


@pytest.mark.parametrize("ms", [0, -1])
def test_game_config_rejects_non_positive_interval(ms):
    with pytest.raises(ConfigError):
        GameConfig(tick_interval_ms=ms)


def test_direction_helpers():
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.NONE.opposite is Direction.NONE
    assert (Direction.DOWN.dx, Direction.DOWN.dy) == (0, 1)


def test_state_defaults_to_centre_cell():
    state = GameState(width=7, height=4)
    assert state.snake == [(3, 2)]
    assert state.view().snake == ((3, 2),)
