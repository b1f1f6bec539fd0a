"""
Session clock: when the game started and, once it is over, when it ended.
"""

from datetime import datetime
from typing import Callable


class GameClock:
    """Tracks session start and the one-way transition to game over."""

    def __init__(self, now: Callable[[], datetime] = datetime.now):
        self._now = now
        self.started_at: datetime = now()
        self.ended_at: datetime | None = None

    @property
    def is_over(self) -> bool:
        return self.ended_at is not None

    def end(self) -> bool:
        """
        Record game over.

        Returns:
            True if this call ended the game, False if it was already over
        """
        if self.ended_at is not None:
            return False
        self.ended_at = self._now()
        return True

    def elapsed_seconds(self) -> float:
        """Seconds since start, frozen at the game-over moment."""
        until = self.ended_at or self._now()
        return (until - self.started_at).total_seconds()

    def elapsed_minutes(self) -> float:
        return self.elapsed_seconds() / 60.0
