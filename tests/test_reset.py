"""Tests for world construction and round reset."""

import pytest
from pymunk import Vec2d

from flappy_sim.kinematics import PlayerKinematics
from flappy_sim.reset import ResetCoordinator, build_world, initial_pair_x
from flappy_sim.scoring import Scoreboard


class TestBuildWorld:
    def test_pool_sizes(self, config, rng):
        world = build_world(config, rng)
        assert world.player is not None
        assert len(world.pairs) == config.pipe_pool_size
        assert len(world.ground) == config.ground_tile_count
        # Two blockers per pair plus one per ground tile
        assert len(world.blockers) == 2 * config.pipe_pool_size + config.ground_tile_count

    def test_staggered_layout(self, config, rng):
        world = build_world(config, rng)
        for i, pair in enumerate(world.pairs):
            assert pair.x == pytest.approx(config.pipe_start_x + i * config.pipe_spacing)
            assert pair.countable
            offset = abs(pair.y - config.gap_anchor_y)
            assert config.gap_dead_zone * config.gap_amplitude <= offset <= config.gap_amplitude

    def test_pairs_carry_recycle_parameters(self, config, rng):
        world = build_world(config, rng)
        for pair in world.pairs:
            assert pair.width == config.pipe_recycle_width
            assert pair.displacement == config.pipe_recycle_displacement
            assert pair.amplitude == config.gap_amplitude
            assert pair.initial_y == config.gap_anchor_y

    def test_player_at_spawn(self, config, rng):
        player = build_world(config, rng).require_player()
        assert player.position == Vec2d(config.player_x, config.player_spawn_y)
        assert player.size == (config.player_width, config.player_height)


class TestResetCoordinator:
    def test_restores_round(self, config, rng):
        world = build_world(config, rng)
        board = Scoreboard()
        board.increment(7)
        ground_before = [tile.x for tile in world.ground]

        player = world.require_player()
        player.position = Vec2d(config.player_x, -200.0)
        player.velocity = -800.0
        player.angle = -90.0
        for pair in world.pairs:
            pair.x = -300.0
            pair.countable = False
        world.ground[0].x -= 50.0
        ground_before[0] -= 50.0

        ResetCoordinator(config, rng, PlayerKinematics(config)).reset(world, board)

        assert board.score == 0
        for i, pair in enumerate(world.pairs):
            assert pair.x == pytest.approx(initial_pair_x(config, i))
            assert pair.countable
        assert player.position == Vec2d(config.player_x, config.player_spawn_y)
        assert player.velocity == 0.0
        assert player.angle == 0.0
        # Ground keeps scrolling across rounds
        assert [tile.x for tile in world.ground] == ground_before

    def test_fresh_gap_offsets(self, config, rng):
        world = build_world(config, rng)
        coordinator = ResetCoordinator(config, rng, PlayerKinematics(config))
        seen = set()
        for _ in range(10):
            coordinator.reset(world, Scoreboard())
            seen.update(round(pair.y, 6) for pair in world.pairs)
        assert len(seen) > 2
