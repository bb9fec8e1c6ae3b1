"""Tests for the game configuration."""

import pytest

from flappy_sim.config import GameConfig, CONFIGS, PIXELS_PER_METER, SCALE


class TestGameConfig:
    def test_scale_constants(self):
        assert SCALE == pytest.approx(640.0 / 136.0)
        assert PIXELS_PER_METER == pytest.approx(6.375)

    def test_defaults(self):
        config = GameConfig()
        assert config.screen_size == (640.0, 960.0)
        assert config.jump_speed == pytest.approx(637.5)
        assert config.gravity == pytest.approx(-62.53875)
        assert config.scroll_speed == pytest.approx(6.375)
        assert config.velocity_min == -1000.0
        assert config.velocity_max == 10000.0
        assert config.post_gameover_delay_ms == 500.0
        assert config.pipe_pool_size == 2

    def test_derived_bounds(self):
        config = GameConfig()
        # Top of the ground strip and top of the screen
        assert config.floor_bound == pytest.approx(-392.0)
        assert config.ceiling_bound == pytest.approx(480.0)

    def test_derived_recycle_displacement(self):
        """Recycled pairs land one pool-length behind their crossing point."""
        config = GameConfig()
        # 2 * 480 - 640 - 208
        assert config.pipe_recycle_displacement == pytest.approx(112.0)
        crossing = -config.screen_width / 2 - config.pipe_recycle_width / 2
        landing = config.screen_width / 2 + config.pipe_recycle_width / 2 + config.pipe_recycle_displacement
        assert landing - crossing == pytest.approx(config.pipe_pool_size * config.pipe_spacing)

    def test_ground_tile_count_covers_screen_plus_one(self):
        config = GameConfig()
        assert config.ground_tile_count == 3
        wide = GameConfig(screen_width=1000.0, pipe_spacing=700.0)
        assert wide.ground_tile_count == 4

    def test_timing(self):
        config = GameConfig(fps=50, post_gameover_delay_ms=250.0)
        assert config.tick_seconds == pytest.approx(0.02)
        assert config.post_gameover_delay == pytest.approx(0.25)

    def test_validate_default(self):
        GameConfig().validate()

    def test_validate_rejects_upward_gravity(self):
        with pytest.raises(ValueError, match="gravity"):
            GameConfig(gravity=5.0).validate()

    def test_validate_lists_every_error(self):
        with pytest.raises(ValueError) as excinfo:
            GameConfig(scroll_speed=0.0, jump_speed=-1.0).validate()
        assert "scroll_speed" in str(excinfo.value)
        assert "jump_speed" in str(excinfo.value)

    def test_to_dict(self):
        d = GameConfig(jump_speed=500.0).to_dict()
        assert d["jump_speed"] == 500.0
        assert "floor_bound" not in d

    def test_to_dict_with_derived(self):
        d = GameConfig().to_dict_with_derived()
        assert d["floor_bound"] == pytest.approx(-392.0)
        assert d["ground_tile_count"] == 3

    def test_from_dict_ignores_unknown_keys(self):
        config = GameConfig.from_dict({"gap_amplitude": 100.0, "floor_bound": 0.0, "bogus": 1})
        assert config.gap_amplitude == 100.0
        assert config.floor_bound == pytest.approx(-392.0)


class TestPresets:
    def test_default_preset_matches_defaults(self):
        assert CONFIGS["default"] == GameConfig()

    @pytest.mark.parametrize("name", sorted(CONFIGS))
    def test_presets_are_valid(self, name):
        CONFIGS[name].validate()

    def test_hard_is_faster_than_easy(self):
        assert CONFIGS["hard"].scroll_speed > CONFIGS["easy"].scroll_speed
        assert CONFIGS["hard"].pipe_gap < CONFIGS["easy"].pipe_gap
