import pygame
import pytest

from src.gridsnake.config import Difficulty
from src.gridsnake.controls import (
    KEY_COMMANDS, KEY_DIFFICULTY, Command, SwipeTracker,
    button_to_direction, key_to_direction, swipe_to_direction,
)
from src.gridsnake.state import Direction


@pytest.mark.parametrize(
    "key,expected",
    [
        (pygame.K_UP, Direction.UP),
        (pygame.K_w, Direction.UP),
        (pygame.K_DOWN, Direction.DOWN),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_LEFT, Direction.LEFT),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_RIGHT, Direction.RIGHT),
        (pygame.K_d, Direction.RIGHT),
    ],
)
def test_arrows_and_wasd(key, expected):
    assert key_to_direction(key) is expected


def test_other_keys_are_not_directions():
    assert key_to_direction(pygame.K_SPACE) is None
    assert KEY_COMMANDS[pygame.K_SPACE] is Command.PAUSE
    assert KEY_DIFFICULTY[pygame.K_3] is Difficulty.HARD


def test_buttons():
    assert button_to_direction("up") is Direction.UP
    assert button_to_direction(" Right ") is Direction.RIGHT
    assert button_to_direction("jump") is None


@pytest.mark.parametrize(
    "dx,dy,expected",
    [
        (30, 5, Direction.RIGHT),
        (-30, 5, Direction.LEFT),
        (5, 30, Direction.DOWN),
        (5, -30, Direction.UP),
        (19, -19, None),
        (0, 0, None),
        (20, 0, Direction.RIGHT),
        (25, 25, Direction.DOWN),
    ],
)
def test_swipe_dominant_axis(dx, dy, expected):
    assert swipe_to_direction(dx, dy) is expected


def test_swipe_tracker_needs_a_press():
    tracker = SwipeTracker()
    assert tracker.release(100, 100) is None
    tracker.press(100, 100)
    assert tracker.release(60, 104) is Direction.LEFT
    assert tracker.release(0, 0) is None
