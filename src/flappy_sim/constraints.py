"""Structural checks on a GameConfig.

A config is "valid" when the simulation can run it without breaking its
own invariants: the player fits between floor and ceiling, velocity bounds
are ordered, and recycled pipes re-enter off-screen so pairs stay evenly
spaced. Playability (how hard the resulting game is) is not judged here.
"""

import logging
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import GameConfig

logger = logging.getLogger(__name__)


@dataclass
class ConstraintViolation:
    """Describes a constraint violation."""
    param: str
    message: str
    severity: str  # "error" = cannot simulate, "warning" = odd but runs


@dataclass
class ConstraintResult:
    """Result of constraint validation."""
    valid: bool
    violations: List[ConstraintViolation]

    def __bool__(self) -> bool:
        return self.valid


def check_config(config: "GameConfig") -> ConstraintResult:
    """Validate a config, logging any warnings."""
    violations: List[ConstraintViolation] = []

    def error(param: str, message: str) -> None:
        violations.append(ConstraintViolation(param, message, "error"))

    def warning(param: str, message: str) -> None:
        violations.append(ConstraintViolation(param, message, "warning"))

    # Screen and timing
    if config.screen_width <= 0 or config.screen_height <= 0:
        error("screen_size", f"Screen size {config.screen_size} must be positive")
    lo, hi = config.FPS_RANGE
    if not (lo <= config.fps <= hi):
        error("fps", f"fps {config.fps} outside [{lo}, {hi}]")
    if config.max_delta <= 0:
        error("max_delta", f"max_delta {config.max_delta} must be positive")

    # Kinematics
    if config.gravity >= 0:
        error("gravity", f"Gravity {config.gravity} must be negative (downward)")
    if config.jump_speed <= 0:
        error("jump_speed", f"Jump speed {config.jump_speed} must be positive")
    if config.velocity_min >= config.velocity_max:
        error(
            "velocity_min",
            f"velocity_min {config.velocity_min} >= velocity_max {config.velocity_max}",
        )
    elif not (config.velocity_min <= config.jump_speed <= config.velocity_max):
        warning(
            "jump_speed",
            f"Jump speed {config.jump_speed} is clipped by the velocity bounds",
        )
    if config.min_angle > config.max_angle:
        error("min_angle", f"min_angle {config.min_angle} > max_angle {config.max_angle}")
    if config.rotation_rate < 0:
        error("rotation_rate", f"Rotation rate {config.rotation_rate} must be >= 0")
    if config.floor_bound >= config.ceiling_bound:
        error(
            "ground_y",
            f"Floor bound {config.floor_bound} is not below ceiling {config.ceiling_bound}",
        )
    if config.player_width <= 0 or config.player_height <= 0:
        error("player_size", "Player size must be positive")
    if config.animation_frames < 1 or config.animation_frame_seconds <= 0:
        error("animation_frames", "Animation needs at least one frame and a positive frame time")

    # Scrolling
    if config.scroll_speed <= 0:
        error("scroll_speed", f"Scroll speed {config.scroll_speed} must be positive")
    if config.pipe_pool_size < 1:
        error("pipe_pool_size", f"Pipe pool size {config.pipe_pool_size} must be >= 1")
    if config.pipe_width <= 0 or config.pipe_height <= 0:
        error("pipe_size", "Pipe size must be positive")
    if config.pipe_gap <= 0:
        error("pipe_gap", f"Pipe gap {config.pipe_gap} must be positive")
    if config.pipe_spacing <= 0:
        error("pipe_spacing", f"Pipe spacing {config.pipe_spacing} must be positive")
    elif config.pipe_recycle_displacement < 0:
        error(
            "pipe_spacing",
            f"Pool of {config.pipe_pool_size} pairs spaced {config.pipe_spacing} "
            f"cannot span the screen; recycled pipes would appear on-screen",
        )
    if config.gap_amplitude < 0:
        error("gap_amplitude", f"Gap amplitude {config.gap_amplitude} must be >= 0")
    lo, hi = config.GAP_DEAD_ZONE_RANGE
    if not (lo <= config.gap_dead_zone < hi):
        error("gap_dead_zone", f"Dead zone {config.gap_dead_zone} outside [{lo}, {hi})")
    if config.ground_tile_width <= 0 or config.ground_tile_height <= 0:
        error("ground_tile", "Ground tile size must be positive")
    if config.post_gameover_delay_ms < 0:
        error(
            "post_gameover_delay_ms",
            f"Delay {config.post_gameover_delay_ms} must be >= 0",
        )

    # Gap reachability
    gap_top = config.gap_anchor_y + config.gap_amplitude + config.pipe_gap / 2
    gap_bottom = config.gap_anchor_y - config.gap_amplitude - config.pipe_gap / 2
    if gap_top > config.ceiling_bound or gap_bottom < config.floor_bound:
        warning(
            "gap_amplitude",
            f"Gap range [{gap_bottom:.1f}, {gap_top:.1f}] leaves the playable band",
        )
    if config.pipe_gap < config.player_height:
        warning(
            "pipe_gap",
            f"Pipe gap {config.pipe_gap:.1f} is narrower than the player",
        )

    for v in violations:
        if v.severity == "warning":
            logger.warning("config %s: %s", v.param, v.message)

    errors = [v for v in violations if v.severity == "error"]
    return ConstraintResult(valid=len(errors) == 0, violations=violations)
