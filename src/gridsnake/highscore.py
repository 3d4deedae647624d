# highscore.py
from __future__ import annotations
import json
import logging
import os

logger = logging.getLogger(__name__)

KEY = "snake_highscore"


class HighScoreStore:
    """A single best score kept in a small JSON file."""

    def __init__(self, path: str):
        self.path = path
        self.best = self._load()

    def _load(self) -> int:
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                value = int(json.load(f).get(KEY, 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("ignoring unreadable high score file %s: %s", self.path, e)
            return 0
        return max(value, 0)

    def submit(self, score: int) -> bool:
        """Record `score` if it beats the best. Returns True on a new record."""
        if score <= self.best:
            return False
        self.best = score
        self.save()
        logger.info("new high score %d", score)
        return True

    def save(self) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({KEY: self.best}, f)
