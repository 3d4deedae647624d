# render.py
from __future__ import annotations
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import (
    BG, GRID_LINE, HEAD_A, HEAD_B, FOOD_A, FOOD_B, SHINE, BORDER, TEXT, BUTTON,
    HUD_HEIGHT, PAD_HEIGHT, Difficulty,
)
from .controls import BUTTON_DIRECTIONS
from .state import GameStateView, RunState

Color = Tuple[int, ...]


def body_color(index: int, length: int) -> Color:
    """Body fades from warm near the head to cool at the tail."""
    t = index / length
    return (int(20 + 200 * (1 - t)), int(120 + 80 * t), int(60 + 150 * t))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    return tuple(int(round(x + (y - x) * t)) for x, y in zip(a, b))


def overlay_text(view: GameStateView, new_record: bool = False) -> Optional[str]:
    if view.run_state is RunState.IDLE:
        return "Press Start"
    if view.run_state is RunState.PAUSED:
        return "Paused"
    if view.run_state.is_terminal:
        title = "Board Full" if view.run_state is RunState.BOARD_FULL else "Game Over"
        text = f"{title} — Score: {view.score}"
        return text + " — New Highscore!" if new_record else text
    return None


def button_layout(width: int, top: int, size: int = 32, gap: int = 8) -> Dict[str, pygame.Rect]:
    """On-screen direction pad: one row of buttons centred in the strip at `top`."""
    names = ("left", "up", "down", "right")
    row_w = len(names) * size + (len(names) - 1) * gap
    x0 = (width - row_w) // 2
    y = top + (PAD_HEIGHT - size) // 2
    return {name: pygame.Rect(x0 + i * (size + gap), y, size, size) for i, name in enumerate(names)}


class Renderer:
    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, cell_size: int):
        self.screen = screen
        self.font = font
        self.cell_size = cell_size
        self.show_grid = False
        w, h = screen.get_size()
        self.buttons = button_layout(w, h - PAD_HEIGHT)

    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        for name, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return name
        return None

    def cell_rect(self, gx: int, gy: int, inset: int = 0) -> pygame.Rect:
        cs = self.cell_size
        return pygame.Rect(gx * cs + inset, HUD_HEIGHT + gy * cs + inset, cs - 2 * inset, cs - 2 * inset)

    def draw(
        self,
        view: GameStateView,
        high_score: int,
        difficulty: Difficulty,
        new_record: bool = False,
    ) -> None:
        self.screen.fill(BG)
        if self.show_grid:
            self._draw_grid(view)
        self._draw_food(view)
        self._draw_snake(view)
        self._draw_hud(view, high_score, difficulty)
        self._draw_buttons()
        text = overlay_text(view, new_record)
        if text:
            self._draw_overlay(text)

    def _draw_grid(self, view: GameStateView) -> None:
        cs = self.cell_size
        bottom = HUD_HEIGHT + view.height * cs
        for x in range(view.width + 1):
            pygame.draw.line(self.screen, GRID_LINE, (x * cs, HUD_HEIGHT), (x * cs, bottom))
        for y in range(view.height + 1):
            py = HUD_HEIGHT + y * cs
            pygame.draw.line(self.screen, GRID_LINE, (0, py), (view.width * cs, py))

    def _draw_food(self, view: GameStateView) -> None:
        if view.food is None:
            return
        fx, fy = view.food
        pygame.draw.rect(self.screen, FOOD_B, self.cell_rect(fx, fy, inset=2))
        pygame.draw.rect(self.screen, FOOD_A, self.cell_rect(fx, fy, inset=3))
        # small shine
        shine = pygame.Surface((4, 4), pygame.SRCALPHA)
        shine.fill(SHINE)
        r = self.cell_rect(fx, fy)
        self.screen.blit(shine, (r.x + 4, r.y + 4))

    def _draw_snake(self, view: GameStateView) -> None:
        n = len(view.snake)
        border = pygame.Surface((self.cell_size, self.cell_size), pygame.SRCALPHA)
        for i, (x, y) in enumerate(view.snake):
            color = lerp_color(HEAD_A, HEAD_B, 0.5) if i == 0 else body_color(i, n)
            rect = self.cell_rect(x, y, inset=1)
            pygame.draw.rect(self.screen, color, rect)
            # subtle border
            border.fill((0, 0, 0, 0))
            pygame.draw.rect(border, BORDER, border.get_rect().inflate(-2, -2), width=1)
            self.screen.blit(border, self.cell_rect(x, y).topleft)

    def _draw_hud(self, view: GameStateView, high_score: int, difficulty: Difficulty) -> None:
        wrap = "wrap" if view.wrap_walls else "walls"
        txt = self.font.render(
            f"Score: {view.score}   Best: {high_score}   {difficulty.value}   {wrap}", True, TEXT
        )
        self.screen.blit(txt, (8, 6))

    def _draw_buttons(self) -> None:
        for name, rect in self.buttons.items():
            pygame.draw.rect(self.screen, BUTTON, rect, border_radius=6)
            dx, dy = BUTTON_DIRECTIONS[name].value
            cx, cy = rect.center
            r = rect.width // 4
            tip = (cx + dx * r, cy + dy * r)
            left = (cx - dx * r + dy * r, cy - dy * r - dx * r)
            right = (cx - dx * r - dy * r, cy - dy * r + dx * r)
            pygame.draw.polygon(self.screen, TEXT, [tip, left, right])

    def _draw_overlay(self, text: str) -> None:
        # Dim with translucent overlay
        w, h = self.screen.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.screen.blit(overlay, (0, 0))

        title = self.font.render(text, True, (240, 240, 250))
        self.screen.blit(title, title.get_rect(center=(w // 2, h // 2)))
