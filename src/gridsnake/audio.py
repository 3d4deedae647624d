# audio.py
from __future__ import annotations
import logging
from typing import Dict, Tuple

import numpy as np  # type: ignore
import pygame       # type: ignore

from .state import GameStateView, TickOutcome

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22_050

# (frequency Hz, duration s, volume 0..1)
EAT_BEEP = (880.0, 0.04, 0.08)
GAME_OVER_BEEP = (180.0, 0.12, 0.25)


def tone_samples(
    freq: float,
    duration: float,
    volume: float,
    sample_rate: int = SAMPLE_RATE,
    channels: int = 1,
) -> np.ndarray:
    """
    Signed 16-bit sine wave, shape [n] for mono or [n, channels] otherwise.
    """
    n = max(int(round(duration * sample_rate)), 1)
    t = np.arange(n, dtype=np.float32) / float(sample_rate)
    wave = np.sin(2.0 * np.pi * freq * t) * float(np.clip(volume, 0.0, 1.0))
    pcm = (wave * np.iinfo(np.int16).max).astype(np.int16)
    if channels > 1:
        pcm = np.repeat(pcm[:, None], channels, axis=1)
    return pcm


class AudioNotifier:
    """
    Short beeps on eat / game over. Silently does nothing when the mixer
    cannot start (no audio device) or when sound is toggled off.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sounds: Dict[str, "pygame.mixer.Sound"] = {}
        self._available = self._init_mixer()

    def _init_mixer(self) -> bool:
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as e:
            logger.warning("sound disabled, mixer unavailable: %s", e)
            return False
        return True

    @property
    def available(self) -> bool:
        return self._available

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        return self.enabled

    def _sound(self, name: str, beep: Tuple[float, float, float]) -> "pygame.mixer.Sound":
        if name not in self._sounds:
            rate, _fmt, channels = pygame.mixer.get_init()
            samples = tone_samples(*beep, sample_rate=rate, channels=channels)
            self._sounds[name] = pygame.sndarray.make_sound(samples)
        return self._sounds[name]

    def play(self, name: str, beep: Tuple[float, float, float]) -> None:
        if not (self.enabled and self._available):
            return
        self._sound(name, beep).play()

    def on_tick(self, outcome: TickOutcome, view: GameStateView) -> None:
        if outcome in (TickOutcome.GREW, TickOutcome.BOARD_FULL):
            self.play("eat", EAT_BEEP)
        elif outcome is TickOutcome.GAME_OVER:
            self.play("game_over", GAME_OVER_BEEP)
