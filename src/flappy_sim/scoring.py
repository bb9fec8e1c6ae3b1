"""Score accounting: one point per obstacle pair per pass."""

import logging
from typing import List

from .entities import ObstaclePair

logger = logging.getLogger(__name__)


class Scoreboard:
    """Non-negative point counter."""

    def __init__(self):
        self.score = 0

    def increment(self, points: int = 1) -> None:
        if points < 0:
            raise ValueError(f"Cannot add negative points: {points}")
        self.score += points

    def reset(self) -> None:
        self.score = 0


class ScoreTracker:
    """Credits pairs whose centre has moved left of the player.

    A pair pays out only while ``countable`` is set; crediting clears it and
    only a recycle sets it again, so each pass scores exactly once.
    """

    def __init__(self, scoreboard: Scoreboard):
        self.scoreboard = scoreboard

    def update(self, pairs: List[ObstaclePair], player_x: float) -> int:
        """Credit every passed pair. Returns points added this tick."""
        credited = 0
        for index, pair in enumerate(pairs):
            if pair.countable and pair.x < player_x:
                pair.countable = False
                credited += 1
                logger.debug("pair %d passed", index)
        if credited:
            self.scoreboard.increment(credited)
        return credited
