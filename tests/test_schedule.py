import pytest

from src.gridsnake.errors import ConfigError
from src.gridsnake.schedule import TickSchedule


def test_fires_once_per_interval(clock):
    sched = TickSchedule(clock)
    handle = sched.start(100)
    clock.advance(99)
    assert sched.poll() is None
    clock.advance(1)
    assert sched.poll() == handle
    assert sched.poll() is None
    clock.advance(100)
    assert sched.poll() == handle


def test_late_poll_fires_once_and_keeps_phase(clock):
    sched = TickSchedule(clock)
    sched.start(100)
    clock.advance(350)
    assert sched.poll() is not None
    assert sched.poll() is None
    clock.advance(49)
    assert sched.poll() is None
    clock.advance(1)
    assert sched.poll() is not None


@pytest.mark.parametrize("interval", [160, 100, 60])
def test_frame_loop_keeps_the_nominal_rate(clock, interval):
    sched = TickSchedule(clock)
    sched.start(interval)
    ticks = 0
    frame = 0
    while clock.now < 6000:
        clock.advance(16 if frame % 3 else 17)  # ~60 FPS
        frame += 1
        if sched.poll() is not None:
            ticks += 1
    assert ticks == clock.now // interval


def test_stop_is_idempotent_and_silences_polls(clock):
    sched = TickSchedule(clock)
    sched.stop()
    handle = sched.start(50)
    sched.stop()
    sched.stop()
    assert not sched.running
    assert sched.interval_ms is None
    clock.advance(1000)
    assert sched.poll() is None
    assert not sched.is_current(handle)


def test_restart_invalidates_old_handle(clock):
    sched = TickSchedule(clock)
    old = sched.start(100)
    clock.advance(40)
    new = sched.restart(60)
    assert old != new
    assert not sched.is_current(old)
    assert sched.is_current(new)
    assert sched.interval_ms == 60
    clock.advance(59)
    assert sched.poll() is None
    clock.advance(1)
    assert sched.poll() == new


@pytest.mark.parametrize("interval", [0, -10])
def test_rejects_non_positive_interval(clock, interval):
    with pytest.raises(ConfigError):
        TickSchedule(clock).start(interval)
