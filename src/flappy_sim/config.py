"""Configuration for the side-scrolling avoider simulation.

All values are fixed per session. Defaults are derived from the reference
screen layout: a 640x960 window showing a 136-unit wide game world, with
one "metre" worth 30 world units at that scale.

World coordinates are centred on the screen with y pointing up, so the
visible region spans [-screen_width/2, screen_width/2] horizontally and
[-screen_height/2, screen_height/2] vertically.
"""

import math
from dataclasses import dataclass, fields
from typing import Tuple, Dict, Any, ClassVar


SCREEN_WIDTH = 640.0
SCREEN_HEIGHT = 960.0

# Unscaled art is authored for a 136-unit wide world
GAME_WIDTH = 136.0
SCALE = SCREEN_WIDTH / GAME_WIDTH
PIXELS_PER_METER = 30.0 / SCALE

PLAYER_HEIGHT = 12.0 * SCALE


@dataclass
class GameConfig:
    """Fixed parameter table for one simulation session.

    Speeds and gravity follow the tick model: ``gravity`` and
    ``scroll_speed`` are applied once per tick, while ``velocity`` is in
    world units per second and is integrated with the tick's elapsed time.
    """

    # === SCREEN ===
    screen_width: float = SCREEN_WIDTH
    screen_height: float = SCREEN_HEIGHT
    fps: int = 60

    # === PLAYER KINEMATICS ===
    gravity: float = -9.81 * PIXELS_PER_METER  # Velocity change per tick, negative = down
    jump_speed: float = 100.0 * PIXELS_PER_METER  # Upward velocity set by a flap (units/s)
    velocity_min: float = -1000.0
    velocity_max: float = 10000.0

    jump_tilt: float = 30.0  # Degrees, snapped to while rising
    rotation_rate: float = 180.0  # Degrees per second while falling
    min_angle: float = -90.0
    max_angle: float = 30.0

    player_x: float = -75.0
    player_spawn_y: float = 0.0
    player_width: float = 16.0 * SCALE
    player_height: float = PLAYER_HEIGHT

    # Flap animation (sprite-sheet frames)
    animation_frame_seconds: float = 0.15
    animation_frames: int = 3

    # === SCROLLING ===
    scroll_speed: float = 1.0 * PIXELS_PER_METER  # Units per tick

    # Pipes
    pipe_pool_size: int = 2
    pipe_width: float = 104.0
    pipe_height: float = 640.0
    pipe_gap: float = PLAYER_HEIGHT * 3.25  # Vertical opening between blockers
    pipe_spacing: float = 480.0
    pipe_start_x: float = SCREEN_WIDTH + 52.0
    gap_amplitude: float = 40.0 * PIXELS_PER_METER
    gap_dead_zone: float = 0.5  # Fraction of amplitude never sampled around the anchor
    gap_anchor_y: float = 0.0

    # Ground
    ground_tile_width: float = 336.0
    ground_tile_height: float = 112.0
    ground_y: float = -112.0 * 4.0
    ground_hitbox_scale: float = 1.2

    # === GAME FLOW ===
    post_gameover_delay_ms: float = 500.0
    max_delta: float = 0.25  # Largest dt a variable clock will report (s)

    # Bounds used by validate()
    FPS_RANGE: ClassVar[Tuple[int, int]] = (1, 1000)
    GAP_DEAD_ZONE_RANGE: ClassVar[Tuple[float, float]] = (0.0, 1.0)

    # === DERIVED VALUES ===

    @property
    def tick_seconds(self) -> float:
        """Length of one fixed tick."""
        return 1.0 / self.fps

    @property
    def screen_size(self) -> Tuple[float, float]:
        return self.screen_width, self.screen_height

    @property
    def floor_bound(self) -> float:
        """Lowest player centre height: top of the ground strip."""
        return self.ground_y + self.ground_tile_height / 2

    @property
    def ceiling_bound(self) -> float:
        """Highest player centre height: top edge of the screen."""
        return self.screen_height / 2

    @property
    def pipe_recycle_width(self) -> float:
        """Width used for the off-screen test of a pipe pair.

        Twice the drawn width so a pair is well clear of the edge before it
        wraps.
        """
        return self.pipe_width * 2

    @property
    def pipe_recycle_displacement(self) -> float:
        """Extra offset past the right edge for a recycled pair.

        Chosen so the pair lands one pool-length behind its crossing point,
        which keeps all pairs ``pipe_spacing`` apart.
        """
        return (
            self.pipe_pool_size * self.pipe_spacing
            - self.screen_width
            - self.pipe_recycle_width
        )

    @property
    def ground_tile_count(self) -> int:
        """Tiles needed to cover the screen plus one spare for wrapping."""
        return int(math.ceil(self.screen_width / self.ground_tile_width)) + 1

    @property
    def post_gameover_delay(self) -> float:
        """Post-game-over input guard in seconds."""
        return self.post_gameover_delay_ms / 1000.0

    def validate(self) -> None:
        """Check structural preconditions, raising ValueError on errors.

        Warnings are logged but do not fail validation.
        """
        from .constraints import check_config

        result = check_config(self)
        if not result:
            errors = [v for v in result.violations if v.severity == "error"]
            details = "; ".join(f"{v.param}: {v.message}" for v in errors)
            raise ValueError(f"Invalid game config: {details}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configurable fields to a flat dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_dict_with_derived(self) -> Dict[str, Any]:
        """Convert to dictionary including derived values."""
        return {
            **self.to_dict(),
            "floor_bound": self.floor_bound,
            "ceiling_bound": self.ceiling_bound,
            "pipe_recycle_displacement": self.pipe_recycle_displacement,
            "ground_tile_count": self.ground_tile_count,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameConfig":
        """Create from dictionary, ignoring unknown and derived keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})


# Predefined configurations
CONFIGS = {
    # Reference feel
    "default": GameConfig(),

    # Wider openings, slower scroll
    "easy": GameConfig(
        scroll_speed=0.8 * PIXELS_PER_METER,
        pipe_gap=PLAYER_HEIGHT * 4.0,
        gap_amplitude=30.0 * PIXELS_PER_METER,
    ),

    # Narrow openings, faster scroll, larger gap swings
    "hard": GameConfig(
        scroll_speed=1.3 * PIXELS_PER_METER,
        pipe_gap=PLAYER_HEIGHT * 2.75,
        gap_dead_zone=0.7,
    ),

    # Low gravity, gentle flap
    "moon": GameConfig(
        gravity=-1.62 * PIXELS_PER_METER,
        jump_speed=40.0 * PIXELS_PER_METER,
        rotation_rate=90.0,
    ),
}
