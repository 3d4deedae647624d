import numpy as np

from src.gridsnake import audio
from src.gridsnake.audio import AudioNotifier, tone_samples
from src.gridsnake.state import Direction, GameStateView, RunState, TickOutcome


def test_tone_is_int16_with_expected_length_and_peak():
    pcm = tone_samples(440.0, 0.1, 0.5, sample_rate=8000)
    assert pcm.dtype == np.int16
    assert pcm.shape == (800,)
    peak = int(np.abs(pcm).max())
    assert 0.45 * 32767 < peak <= 0.5 * 32767


def test_tone_channels_and_clipped_volume():
    pcm = tone_samples(880.0, 0.01, 3.0, sample_rate=1000, channels=2)
    assert pcm.shape == (10, 2)
    assert (pcm[:, 0] == pcm[:, 1]).all()
    assert int(np.abs(pcm).max()) <= 32767


def _view(state=RunState.RUNNING):
    return GameStateView(((1, 1),), None, 0, state, Direction.RIGHT, 5, 5, False)


class FakeSound:
    def __init__(self, log, name, beep):
        self.log, self.name, self.beep = log, name, beep

    def play(self):
        self.log.append((self.name, self.beep))


def test_cues_follow_tick_outcomes(monkeypatch):
    monkeypatch.setattr(AudioNotifier, "_init_mixer", lambda self: True)
    notifier = AudioNotifier()
    played = []
    monkeypatch.setattr(notifier, "_sound", lambda name, beep: FakeSound(played, name, beep))

    notifier.on_tick(TickOutcome.CONTINUE, _view())
    notifier.on_tick(TickOutcome.GREW, _view())
    notifier.on_tick(TickOutcome.GAME_OVER, _view(RunState.GAME_OVER))
    assert played == [("eat", audio.EAT_BEEP), ("game_over", audio.GAME_OVER_BEEP)]

    notifier.toggle()
    notifier.on_tick(TickOutcome.GREW, _view())
    assert len(played) == 2


def test_no_mixer_means_silence(monkeypatch):
    monkeypatch.setattr(AudioNotifier, "_init_mixer", lambda self: False)
    notifier = AudioNotifier()
    assert notifier.available is False
    notifier.on_tick(TickOutcome.GREW, _view())


def test_filling_the_board_still_sounds_the_eat_beep(monkeypatch):
    monkeypatch.setattr(AudioNotifier, "_init_mixer", lambda self: True)
    notifier = AudioNotifier()
    played = []
    monkeypatch.setattr(notifier, "_sound", lambda name, beep: FakeSound(played, name, beep))
    notifier.on_tick(TickOutcome.BOARD_FULL, _view(RunState.BOARD_FULL))
    assert played == [("eat", audio.EAT_BEEP)]
