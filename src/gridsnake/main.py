# main.py
from __future__ import annotations
import argparse
import logging
import random
from typing import Callable, List, Optional

import pygame  # type: ignore

from .audio import AudioNotifier
from .config import CFG, HUD_HEIGHT, PAD_HEIGHT, Config, Difficulty, grid_size, parse_difficulty
from .controls import (
    KEY_COMMANDS, KEY_DIFFICULTY, Command, SwipeTracker, button_to_direction, key_to_direction,
)
from .errors import ConfigError
from .game import SnakeGame
from .highscore import HighScoreStore
from .render import Renderer

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(description="Grid snake.")
    parser.add_argument(
        "--difficulty",
        type=str,
        default=CFG.difficulty.value,
        choices=[d.value for d in Difficulty],
        help="easy=160ms, medium=100ms, hard=60ms per step",
    )
    parser.add_argument("--wrap", action="store_true", help="leave one edge, enter the opposite one")
    parser.add_argument("--grid", action="store_true", help="draw grid lines")
    parser.add_argument("--mute", action="store_true", help="start with sound off")
    parser.add_argument("--seed", type=int, default=CFG.seed, help="food placement seed")
    parser.add_argument("--size", type=int, nargs=2, default=(CFG.width, CFG.height),
                        metavar=("W", "H"), help="playfield size in pixels")
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size)
    parser.add_argument("--highscore-file", type=str, default=CFG.highscore_path)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)
    return Config(
        seed=args.seed,
        difficulty=parse_difficulty(args.difficulty),
        wrap_walls=args.wrap,
        show_grid=args.grid,
        sound_on=not args.mute,
        highscore_path=args.highscore_file,
        width=args.size[0],
        height=args.size[1],
        cell_size=args.cell_size,
        verbose=args.verbose,
    )


class App:
    """Wires the game to pygame input, drawing, sound and the high score file."""

    def __init__(self, cfg: Config, clock: Callable[[], int] = pygame.time.get_ticks):
        self.cfg = cfg
        cols, rows = grid_size(cfg.width, cfg.height, cfg.cell_size)

        pygame.init()
        self.screen = pygame.display.set_mode((cols * cfg.cell_size, rows * cfg.cell_size + HUD_HEIGHT + PAD_HEIGHT))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()

        self.game = SnakeGame(
            cols, rows,
            difficulty=cfg.difficulty,
            wrap_walls=cfg.wrap_walls,
            rng=random.Random(cfg.seed),
            clock=clock,
        )
        self.renderer = Renderer(self.screen, pygame.font.SysFont(None, 24), cfg.cell_size)
        self.renderer.show_grid = cfg.show_grid
        self.audio = AudioNotifier(enabled=cfg.sound_on)
        self.highscores = HighScoreStore(cfg.highscore_path)
        self.swipe = SwipeTracker()
        self.new_record = False

        self.game.on_tick(self.audio.on_tick)
        self.game.on_game_over(self._record_score)

    def _record_score(self, final_score: int) -> None:
        try:
            self.new_record = self.highscores.submit(final_score)
        except OSError as e:
            logger.error("could not save high score: %s", e)
            self.new_record = False
        print(f"Game over. Score: {final_score}  Best: {self.highscores.best}")

    def _restart(self) -> None:
        self.new_record = False
        self.game.restart()

    def handle_command(self, cmd: Command) -> bool:
        """Apply an app command. Returns False to quit."""
        if cmd is Command.QUIT:
            return False
        if cmd is Command.START:
            self.game.start()
        elif cmd is Command.PAUSE:
            self.game.toggle_pause()
        elif cmd is Command.RESTART:
            self._restart()
        elif cmd is Command.TOGGLE_GRID:
            self.renderer.show_grid = not self.renderer.show_grid
        elif cmd is Command.TOGGLE_WRAP:
            self.game.set_wrap_walls(not self.game.state.config.wrap_walls)
        elif cmd is Command.TOGGLE_SOUND:
            self.audio.toggle()
        return True

    def handle_input(self) -> bool:
        """Process events; buffer turns and apply commands. Return False to quit."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                direction = key_to_direction(event.key)
                if direction is not None:
                    self.game.set_pending_direction(direction)
                elif event.key in KEY_DIFFICULTY:
                    self.game.set_difficulty(KEY_DIFFICULTY[event.key])
                elif event.key in KEY_COMMANDS:
                    if not self.handle_command(KEY_COMMANDS[event.key]):
                        return False
            elif event.type == pygame.MOUSEBUTTONDOWN:
                button = self.renderer.button_at(event.pos)
                if button is not None:
                    self.game.steer(button_to_direction(button))
                else:
                    self.swipe.press(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP:
                direction = self.swipe.release(*event.pos)
                if direction is not None:
                    self.game.steer(direction)
        return True

    def run(self) -> None:
        running = True
        while running:
            # 1) input
            running = self.handle_input()
            if not running:
                break

            # 2) update (the schedule decides whether a step is due)
            self.game.update()

            # 3) render
            self.renderer.draw(self.game.view(), self.highscores.best, self.game.difficulty, self.new_record)
            pygame.display.flip()
            self.clock.tick(60)  # high FPS; movement gated by the tick schedule

        self.game.schedule.stop()
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if cfg.verbose else logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        app = App(cfg)
    except ConfigError as e:
        print(f"Invalid configuration: {e}")
        return 2
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
