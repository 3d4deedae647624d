# schedule.py
from __future__ import annotations
import itertools
import logging
import time
from typing import Callable, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class TickSchedule:
    """
    Fixed-interval, cancellable tick timer driven by polling.

    The owner calls poll() from its frame loop; poll() returns the handle of
    the running schedule when a tick is due, else None. Every start() issues
    a fresh handle and stop() drops the current one, so a handle captured
    before a stop/restart is stale and is_current() rejects it.
    """

    def __init__(self, clock: Callable[[], int] = monotonic_ms):
        self.clock = clock
        self._ids = itertools.count(1)
        self._handle: Optional[int] = None
        self._interval_ms = 0
        self._last_fire = 0

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def interval_ms(self) -> Optional[int]:
        return self._interval_ms if self.running else None

    def start(self, interval_ms: int) -> int:
        """(Re)start at `interval_ms`; the first tick is one full interval away."""
        if interval_ms <= 0:
            raise ConfigError(f"tick interval must be > 0, got {interval_ms}")
        self.stop()
        self._handle = next(self._ids)
        self._interval_ms = interval_ms
        self._last_fire = self.clock()
        logger.debug("schedule %d started every %d ms", self._handle, interval_ms)
        return self._handle

    restart = start

    def stop(self) -> None:
        """Cancel the schedule. Safe to call when already stopped."""
        if self._handle is None:
            return
        logger.debug("schedule %d stopped", self._handle)
        self._handle = None

    def is_current(self, handle: Optional[int]) -> bool:
        return handle is not None and handle == self._handle

    def poll(self) -> Optional[int]:
        """Return the live handle if a tick is due now (at most one per call)."""
        if self._handle is None:
            return None
        now = self.clock()
        if now - self._last_fire < self._interval_ms:
            return None  # not time to move yet
        # Fire once, keep the phase; whole intervals missed by a late poll are skipped
        missed = (now - self._last_fire) // self._interval_ms
        self._last_fire += missed * self._interval_ms
        return self._handle
