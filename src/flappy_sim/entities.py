"""Game entities: player, obstacle pairs, blockers and ground tiles.

Entities are plain records held in arenas on an ``EntityStore`` and refer
to each other by integer index. An obstacle pair owns its two blockers by
index, and a blocker points back at its owner the same way, so there is no
shared ownership between parent and child.

Positions are pymunk ``Vec2d`` values and collision volumes are pymunk
``BB`` boxes in centred, y-up world coordinates.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

from pymunk import BB, Vec2d


def box_at(x: float, y: float, width: float, height: float) -> BB:
    """Axis-aligned box of the given size centred on (x, y)."""
    half_w = width / 2
    half_h = height / 2
    return BB(x - half_w, y - half_h, x + half_w, y + half_h)


class BlockerKind(Enum):
    """What a blocker belongs to."""
    PIPE_TOP = auto()
    PIPE_BOTTOM = auto()
    GROUND = auto()


@dataclass
class Player:
    """The bird. Horizontal position never changes after spawn."""
    position: Vec2d
    size: Tuple[float, float]
    velocity: float = 0.0  # Vertical, units/s
    angle: float = 0.0  # Degrees, positive = nose up
    frame: int = 0  # Flap animation frame

    @property
    def bounds(self) -> BB:
        return box_at(self.position.x, self.position.y, *self.size)


@dataclass
class Blocker:
    """Solid rectangle attached to a pair or ground tile.

    ``offset`` is relative to the owner's position. ``flipped`` marks the
    top pipe, which is drawn upside down but still collides as an upright
    box.
    """
    kind: BlockerKind
    owner: int
    size: Tuple[float, float]
    offset: Vec2d = Vec2d(0.0, 0.0)
    flipped: bool = False


@dataclass
class ObstaclePair:
    """A top/bottom pipe pair scrolling as one unit.

    ``y`` is the centre of the opening. ``countable`` is set while a score
    credit is still owed for the current pass.
    """
    x: float
    y: float
    width: float  # Extent used for the off-screen test
    displacement: float  # Extra offset past the right edge on recycle
    amplitude: float  # Maximum random shift of the opening
    initial_y: float  # Anchor the random shift is applied to
    countable: bool = True
    blockers: Tuple[int, int] = (-1, -1)  # (top, bottom) indices

    @property
    def position(self) -> Vec2d:
        return Vec2d(self.x, self.y)


@dataclass
class GroundTile:
    """One segment of the scrolling floor strip."""
    x: float
    y: float
    width: float
    blocker: int = -1

    @property
    def position(self) -> Vec2d:
        return Vec2d(self.x, self.y)


class EntityStore:
    """Arena storage for every simulated entity.

    Exactly one player exists once ``spawn_player`` has been called. Pairs
    and ground tiles are created at startup and then only repositioned.
    """

    def __init__(self):
        self.player: Optional[Player] = None
        self.pairs: List[ObstaclePair] = []
        self.ground: List[GroundTile] = []
        self.blockers: List[Blocker] = []

    def require_player(self) -> Player:
        """Return the player, failing loudly if none was spawned."""
        if self.player is None:
            raise RuntimeError("EntityStore has no player; spawn_player() was never called")
        return self.player

    def spawn_player(self, x: float, y: float, width: float, height: float) -> Player:
        if self.player is not None:
            raise RuntimeError("EntityStore already holds a player")
        self.player = Player(position=Vec2d(x, y), size=(width, height))
        return self.player

    def _add_blocker(self, blocker: Blocker) -> int:
        self.blockers.append(blocker)
        return len(self.blockers) - 1

    def spawn_pair(
        self,
        x: float,
        y: float,
        *,
        width: float,
        displacement: float,
        amplitude: float,
        initial_y: float,
        pipe_size: Tuple[float, float],
        gap: float,
    ) -> int:
        """Create a pipe pair and its two blockers. Returns the pair index."""
        index = len(self.pairs)
        offset_y = pipe_size[1] / 2 + gap / 2
        top = self._add_blocker(Blocker(
            BlockerKind.PIPE_TOP, index, pipe_size,
            offset=Vec2d(0.0, offset_y), flipped=True,
        ))
        bottom = self._add_blocker(Blocker(
            BlockerKind.PIPE_BOTTOM, index, pipe_size,
            offset=Vec2d(0.0, -offset_y),
        ))
        self.pairs.append(ObstaclePair(
            x=x, y=y,
            width=width,
            displacement=displacement,
            amplitude=amplitude,
            initial_y=initial_y,
            countable=True,
            blockers=(top, bottom),
        ))
        return index

    def spawn_ground_tile(
        self, x: float, y: float, width: float, hitbox: Tuple[float, float]
    ) -> int:
        """Create a ground tile and its blocker. Returns the tile index."""
        index = len(self.ground)
        blocker = self._add_blocker(Blocker(BlockerKind.GROUND, index, hitbox))
        self.ground.append(GroundTile(x=x, y=y, width=width, blocker=blocker))
        return index

    def owner_position(self, blocker: Blocker) -> Vec2d:
        if blocker.kind is BlockerKind.GROUND:
            return self.ground[blocker.owner].position
        return self.pairs[blocker.owner].position

    def blocker_bounds(self, index: int) -> BB:
        """World-space box of a blocker (rotation ignored)."""
        blocker = self.blockers[index]
        center = self.owner_position(blocker) + blocker.offset
        return box_at(center.x, center.y, *blocker.size)

    def blocking_order(self) -> Iterator[int]:
        """Blocker indices in collision-test order.

        Pairs in pool order with top before bottom, then ground tiles.
        """
        for pair in self.pairs:
            yield from pair.blockers
        for tile in self.ground:
            yield tile.blocker
