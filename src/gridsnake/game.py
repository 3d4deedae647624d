# game.py
from __future__ import annotations
import logging
import random
from typing import Callable, List, Mapping, Optional

from .config import DIFFICULTY_INTERVALS, Difficulty, GameConfig, validate_intervals
from .engine import SimulationEngine
from .food import FoodPlacer
from .schedule import TickSchedule, monotonic_ms
from .state import Direction, GameState, GameStateView, RunState, TickOutcome

logger = logging.getLogger(__name__)

TickListener = Callable[[TickOutcome, GameStateView], None]
GameOverListener = Callable[[int], None]


class SnakeGame:
    """
    Run/pause/game-over lifecycle around a single GameState.

    The game owns its tick schedule. The host loop only calls update()
    every frame; ticks happen when the schedule says one is due and the
    game is RUNNING. Listeners get every tick outcome plus, once per run,
    the final score.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        difficulty: Difficulty = Difficulty.MEDIUM,
        wrap_walls: bool = False,
        intervals: Optional[Mapping[Difficulty, int]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = monotonic_ms,
    ):
        self.intervals = validate_intervals(intervals or DIFFICULTY_INTERVALS)
        self.difficulty = difficulty
        config = GameConfig(wrap_walls=wrap_walls, tick_interval_ms=self.intervals[difficulty])
        self.state = GameState(width=width, height=height, config=config)
        self.engine = SimulationEngine(FoodPlacer(rng))
        self.schedule = TickSchedule(clock)

        self._tick_listeners: List[TickListener] = []
        self._game_over_listeners: List[GameOverListener] = []
        self._reported = False

        self.reset()

    # ---------- Listeners ----------
    def on_tick(self, listener: TickListener) -> None:
        self._tick_listeners.append(listener)

    def on_game_over(self, listener: GameOverListener) -> None:
        self._game_over_listeners.append(listener)

    # ---------- Lifecycle ----------
    @property
    def run_state(self) -> RunState:
        return self.state.run_state

    def reset(self) -> None:
        """Any state -> IDLE with a one-cell snake in the middle of the grid."""
        self.schedule.stop()
        s = self.state
        s.snake = [s.center]
        s.direction = Direction.NONE
        s.pending = Direction.NONE
        s.score = 0
        s.run_state = RunState.IDLE
        self.engine.place_food(s)
        self._reported = False
        logger.info("reset: %dx%d grid, food at %s", s.width, s.height, s.food)

    def start(self) -> None:
        if self.state.run_state is not RunState.IDLE:
            return
        self.state.run_state = RunState.RUNNING
        self.schedule.start(self.state.config.tick_interval_ms)
        logger.info("started on %s (%d ms)", self.difficulty.value, self.state.config.tick_interval_ms)

    def restart(self) -> None:
        self.reset()
        self.start()

    def pause(self) -> None:
        if self.state.run_state is RunState.RUNNING:
            self.toggle_pause()

    def resume(self) -> None:
        if self.state.run_state is RunState.PAUSED:
            self.toggle_pause()

    def toggle_pause(self) -> None:
        s = self.state
        if s.run_state is RunState.RUNNING:
            s.run_state = RunState.PAUSED
            self.schedule.stop()
            logger.info("paused at score %d", s.score)
        elif s.run_state is RunState.PAUSED:
            s.run_state = RunState.RUNNING
            self.schedule.start(s.config.tick_interval_ms)
            logger.info("resumed")

    # ---------- Input & configuration ----------
    def set_pending_direction(self, direction: Direction) -> None:
        """Buffer the latest intent; tick() decides whether it is a legal turn."""
        if direction is Direction.NONE:
            return
        self.state.pending = direction

    def steer(self, direction: Direction) -> None:
        """Touch/button style input: buffer the turn and start an idle game."""
        self.set_pending_direction(direction)
        if self.state.run_state is RunState.IDLE:
            self.start()

    def set_wrap_walls(self, wrap: bool) -> None:
        self.state.config.wrap_walls = bool(wrap)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        """Switch speed; a live (unpaused) game picks it up immediately."""
        self.difficulty = difficulty
        self.state.config.tick_interval_ms = self.intervals[difficulty]
        if self.state.run_state is RunState.RUNNING:
            self.schedule.restart(self.state.config.tick_interval_ms)

    # ---------- Ticking ----------
    def update(self) -> Optional[TickOutcome]:
        """Call once per frame. Returns the outcome if a tick happened."""
        handle = self.schedule.poll()
        if handle is None:
            return None
        return self.fire(handle)

    def fire(self, handle: int) -> Optional[TickOutcome]:
        """Run one tick for a schedule handle; stale handles are ignored."""
        if not self.schedule.is_current(handle) or self.state.run_state is not RunState.RUNNING:
            logger.debug("dropped stale tick %s", handle)
            return None

        outcome = self.engine.tick(self.state)
        if outcome.ends_run:
            self.schedule.stop()
            self.state.run_state = (
                RunState.BOARD_FULL if outcome is TickOutcome.BOARD_FULL else RunState.GAME_OVER
            )
            logger.info("%s with score %d", self.state.run_state.value, self.state.score)

        view = self.state.view()
        try:
            for listener in list(self._tick_listeners):
                listener(outcome, view)
        finally:
            if self.state.run_state.is_terminal:
                self._report_final_score()
        return outcome

    def _report_final_score(self) -> None:
        if self._reported:
            return
        self._reported = True
        for listener in list(self._game_over_listeners):
            listener(self.state.score)

    def view(self) -> GameStateView:
        return self.state.view()
