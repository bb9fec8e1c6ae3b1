"""Vertical player kinematics: gravity, flap, rotation.

Gravity is applied as a fixed velocity change per tick, and the resulting
velocity (units per second) is integrated with the tick's elapsed time.
Every quantity is clamped rather than validated, so dt spikes and runaway
velocities are absorbed silently.
"""

from pymunk import Vec2d

from .config import GameConfig
from .entities import Player


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class PlayerKinematics:
    """Integrates the player's height, vertical velocity and tilt."""

    def __init__(self, config: GameConfig):
        self.config = config

    def step(self, player: Player, dt: float, activate: bool = False) -> None:
        """Advance the player by one Running tick.

        Args:
            player: Player to mutate in place.
            dt: Elapsed seconds for this tick.
            activate: Whether a flap was pressed this tick. A flap replaces
                the gravity step, so velocity equals the jump speed right
                after the tick.
        """
        c = self.config

        if activate:
            velocity = c.jump_speed
        else:
            velocity = player.velocity + c.gravity
        player.velocity = clamp(velocity, c.velocity_min, c.velocity_max)

        y = player.position.y + player.velocity * dt
        player.position = Vec2d(player.position.x, clamp(y, c.floor_bound, c.ceiling_bound))

        player.angle = self.next_angle(player.angle, player.velocity, dt)

    def next_angle(self, angle: float, velocity: float, dt: float) -> float:
        """Nose snaps up while rising and swings down while falling."""
        c = self.config
        if velocity > 0:
            angle = c.jump_tilt
        else:
            angle -= c.rotation_rate * dt
        return clamp(angle, c.min_angle, c.max_angle)

    def reset(self, player: Player) -> None:
        """Put the player back on its spawn point at rest."""
        player.position = Vec2d(self.config.player_x, self.config.player_spawn_y)
        player.velocity = 0.0
        player.angle = 0.0
        player.frame = 0
