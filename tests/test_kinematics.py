"""Tests for player kinematics."""

import pytest
from pymunk import Vec2d

from flappy_sim.config import GameConfig
from flappy_sim.entities import EntityStore
from flappy_sim.kinematics import PlayerKinematics, clamp

TICK = 1 / 60


@pytest.fixture
def player(config):
    store = EntityStore()
    return store.spawn_player(config.player_x, 0.0, config.player_width, config.player_height)


@pytest.fixture
def kinematics(config):
    return PlayerKinematics(config)


class TestClamp:
    def test_clamp(self):
        assert clamp(5.0, 0.0, 1.0) == 1.0
        assert clamp(-5.0, 0.0, 1.0) == 0.0
        assert clamp(0.5, 0.0, 1.0) == 0.5


class TestGravity:
    def test_gravity_applied_per_tick(self, kinematics, player, config):
        kinematics.step(player, TICK)
        assert player.velocity == pytest.approx(config.gravity)
        assert player.position.y == pytest.approx(config.gravity * TICK)

    def test_horizontal_position_fixed(self, kinematics, player, config):
        for _ in range(30):
            kinematics.step(player, TICK, activate=True)
        assert player.position.x == config.player_x

    def test_velocity_clamped_low(self, kinematics, player):
        player.velocity = -990.0
        kinematics.step(player, TICK)
        assert player.velocity == -1000.0

    def test_velocity_clamped_high(self, player):
        kinematics = PlayerKinematics(GameConfig(jump_speed=20000.0))
        kinematics.step(player, TICK, activate=True)
        assert player.velocity == 10000.0


class TestFlap:
    def test_flap_sets_jump_speed_exactly(self, kinematics, player, config):
        player.velocity = -500.0
        kinematics.step(player, TICK, activate=True)
        assert player.velocity == config.jump_speed
        assert player.position.y == pytest.approx(config.jump_speed * TICK)


class TestPositionBounds:
    def test_floor(self, kinematics, player, config):
        player.position = Vec2d(player.position.x, config.floor_bound + 1.0)
        player.velocity = -1000.0
        kinematics.step(player, TICK)
        assert player.position.y == config.floor_bound

    def test_ceiling(self, kinematics, player, config):
        player.position = Vec2d(player.position.x, config.ceiling_bound - 1.0)
        kinematics.step(player, 1.0, activate=True)
        assert player.position.y == config.ceiling_bound

    def test_huge_dt_stays_in_bounds(self, kinematics, player, config):
        kinematics.step(player, 1e6)
        assert config.floor_bound <= player.position.y <= config.ceiling_bound


class TestRotation:
    def test_rising_snaps_to_tilt(self, kinematics, player, config):
        player.angle = -60.0
        kinematics.step(player, TICK, activate=True)
        assert player.angle == config.jump_tilt

    def test_falling_rotates_down(self, kinematics, player, config):
        player.angle = config.jump_tilt
        kinematics.step(player, TICK)
        assert player.angle == pytest.approx(config.jump_tilt - config.rotation_rate * TICK)

    def test_rotation_clamped(self, kinematics, player, config):
        player.angle = -89.0
        kinematics.step(player, 1.0)
        assert player.angle == config.min_angle

    def test_next_angle_zero_velocity_counts_as_falling(self, kinematics):
        assert kinematics.next_angle(0.0, 0.0, 0.1) == pytest.approx(-18.0)


class TestReset:
    def test_reset_to_spawn(self, kinematics, player, config):
        player.position = Vec2d(config.player_x, 200.0)
        player.velocity = 300.0
        player.angle = 30.0
        player.frame = 2
        kinematics.reset(player)
        assert player.position == Vec2d(config.player_x, config.player_spawn_y)
        assert player.velocity == 0.0
        assert player.angle == 0.0
        assert player.frame == 0
