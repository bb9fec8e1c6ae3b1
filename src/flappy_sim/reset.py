"""World construction and round reset.

Both start from the same staggered pipe layout: pair ``i`` sits at
``pipe_start_x + i * pipe_spacing`` with a freshly sampled opening height.
"""

import logging

import numpy as np

from .config import GameConfig
from .entities import EntityStore
from .kinematics import PlayerKinematics
from .scoring import Scoreboard
from .scroller import sample_gap_factor

logger = logging.getLogger(__name__)


def initial_pair_x(config: GameConfig, index: int) -> float:
    return config.pipe_start_x + index * config.pipe_spacing


def initial_gap_y(config: GameConfig, rng: np.random.Generator) -> float:
    return config.gap_anchor_y + config.gap_amplitude * sample_gap_factor(rng, config.gap_dead_zone)


def build_world(config: GameConfig, rng: np.random.Generator) -> EntityStore:
    """Spawn the player, the pipe pool and the ground strip."""
    store = EntityStore()
    store.spawn_player(
        config.player_x, config.player_spawn_y,
        config.player_width, config.player_height,
    )

    for i in range(config.pipe_pool_size):
        store.spawn_pair(
            initial_pair_x(config, i),
            initial_gap_y(config, rng),
            width=config.pipe_recycle_width,
            displacement=config.pipe_recycle_displacement,
            amplitude=config.gap_amplitude,
            initial_y=config.gap_anchor_y,
            pipe_size=(config.pipe_width, config.pipe_height),
            gap=config.pipe_gap,
        )

    # Tiles laid edge to edge starting at the left edge of the screen
    hitbox = (
        config.ground_tile_width * config.ground_hitbox_scale,
        config.ground_tile_height * config.ground_hitbox_scale,
    )
    left = -config.screen_width / 2 + config.ground_tile_width / 2
    for i in range(config.ground_tile_count):
        store.spawn_ground_tile(
            left + i * config.ground_tile_width,
            config.ground_y,
            config.ground_tile_width,
            hitbox,
        )

    logger.debug(
        "built world: %d pipe pairs, %d ground tiles",
        len(store.pairs), len(store.ground),
    )
    return store


class ResetCoordinator:
    """Restores score, pipes and player for a new round.

    Ground tiles are left alone; they scroll continuously across rounds.
    """

    def __init__(self, config: GameConfig, rng: np.random.Generator, kinematics: PlayerKinematics):
        self.config = config
        self.rng = rng
        self.kinematics = kinematics

    def reset(self, store: EntityStore, scoreboard: Scoreboard) -> None:
        scoreboard.reset()

        for i, pair in enumerate(store.pairs):
            pair.x = initial_pair_x(self.config, i)
            pair.y = initial_gap_y(self.config, self.rng)
            pair.countable = True

        self.kinematics.reset(store.require_player())
        logger.info("round reset")
