"""Axis-aligned collision between the player and blockers.

Blockers are always treated as upright rectangles, including the top pipe
which is drawn rotated by 180 degrees.
"""

from dataclasses import dataclass
from typing import Optional

from pymunk import BB

from .entities import BlockerKind, EntityStore


def overlaps(a: BB, b: BB) -> bool:
    """Strict AABB intersection: any positive-area overlap on both axes.

    Boxes that only share an edge do not overlap.
    """
    return (
        a.left < b.right and b.left < a.right
        and a.bottom < b.top and b.bottom < a.top
    )


@dataclass(frozen=True)
class Collision:
    """The first blocker the player was found touching."""
    blocker: int
    kind: BlockerKind
    owner: int


class CollisionDetector:
    """Tests the player's box against every blocker, stopping at the first hit."""

    def check(self, store: EntityStore) -> Optional[Collision]:
        """Return the first collision in blocking order, or None."""
        player_box = store.require_player().bounds
        for index in store.blocking_order():
            if overlaps(player_box, store.blocker_bounds(index)):
                blocker = store.blockers[index]
                return Collision(blocker=index, kind=blocker.kind, owner=blocker.owner)
        return None
