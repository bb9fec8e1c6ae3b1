"""Leftward scrolling with a fixed entity pool.

Entities that leave the left edge of the screen are moved back past the
right edge ("recycled"), so an endless course needs only a handful of
obstacle pairs and ground tiles.
"""

import logging
from typing import List

import numpy as np

from .config import GameConfig
from .entities import GroundTile, ObstaclePair

logger = logging.getLogger(__name__)


def sample_gap_factor(rng: np.random.Generator, dead_zone: float = 0.5) -> float:
    """Draw a gap shift factor from [-1, 1) excluding (-dead_zone, dead_zone).

    Upward and downward shifts are equally likely, and every shift moves the
    opening by at least ``dead_zone`` of the amplitude. A zero dead zone
    gives a plain uniform draw over [-1, 1).
    """
    magnitude = rng.uniform(dead_zone, 1.0)
    if rng.random() < 0.5:
        return float(magnitude)
    # Mirror [dz, 1) onto [-1, -dz)
    return float(-1.0 - dead_zone + magnitude)


class ObstacleScroller:
    """Moves pipes and ground left by a fixed amount per tick and wraps them.

    Each entity is tested against the left edge once per tick after moving,
    so it wraps at most once per tick no matter how far past the edge it is.
    """

    def __init__(self, config: GameConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng

    def _left_edge(self) -> float:
        return -self.config.screen_width / 2

    def _right_edge(self) -> float:
        return self.config.screen_width / 2

    def is_off_screen(self, x: float, width: float) -> bool:
        """Whether an entity's trailing edge has crossed the left edge."""
        return x + width / 2 < self._left_edge()

    def sample_gap_y(self, pair: ObstaclePair) -> float:
        factor = sample_gap_factor(self.rng, self.config.gap_dead_zone)
        return pair.initial_y + pair.amplitude * factor

    def scroll_pipes(self, pairs: List[ObstaclePair]) -> int:
        """Advance every pipe pair one tick. Returns how many recycled."""
        recycled = 0
        for index, pair in enumerate(pairs):
            pair.x -= self.config.scroll_speed
            if self.is_off_screen(pair.x, pair.width):
                self.recycle_pair(pair)
                recycled += 1
                logger.debug("recycled pair %d to x=%.1f y=%.1f", index, pair.x, pair.y)
        return recycled

    def recycle_pair(self, pair: ObstaclePair) -> None:
        """Move a pair past the right edge with a fresh opening height."""
        pair.x = self._right_edge() + pair.width / 2 + pair.displacement
        pair.y = self.sample_gap_y(pair)
        pair.countable = True

    def scroll_ground(self, tiles: List[GroundTile]) -> int:
        """Advance every ground tile one tick. Returns how many wrapped."""
        wrap = self.config.ground_tile_width * len(tiles)
        recycled = 0
        for tile in tiles:
            tile.x -= self.config.scroll_speed
            if self.is_off_screen(tile.x, tile.width):
                tile.x += wrap
                recycled += 1
        return recycled
