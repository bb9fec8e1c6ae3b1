"""flappy-sim: gameplay simulation core for a side-scrolling avoider.

A bird falls under gravity and flaps through the openings of scrolling pipe
pairs. The core is tick-driven and renderer-agnostic: front-ends push two
input signals (activate, confirm) and pull read-only snapshots. A pygame
front-end and a Gymnasium environment are built on top of it.
"""

from .config import GameConfig, CONFIGS
from .constraints import ConstraintResult, ConstraintViolation, check_config
from .clock import Clock, Timer
from .entities import EntityStore, Player, ObstaclePair, Blocker, BlockerKind, GroundTile
from .kinematics import PlayerKinematics
from .scroller import ObstacleScroller, sample_gap_factor
from .collision import Collision, CollisionDetector, overlaps
from .scoring import Scoreboard, ScoreTracker
from .state_machine import GamePhase, GameStateMachine, InvalidTransitionError, Transition
from .reset import ResetCoordinator, build_world
from .signals import InputSignals
from .simulation import Simulation, Snapshot, TickResult

__all__ = [
    "GameConfig",
    "CONFIGS",
    "ConstraintResult",
    "ConstraintViolation",
    "check_config",
    "Clock",
    "Timer",
    "EntityStore",
    "Player",
    "ObstaclePair",
    "Blocker",
    "BlockerKind",
    "GroundTile",
    "PlayerKinematics",
    "ObstacleScroller",
    "sample_gap_factor",
    "Collision",
    "CollisionDetector",
    "overlaps",
    "Scoreboard",
    "ScoreTracker",
    "GamePhase",
    "GameStateMachine",
    "InvalidTransitionError",
    "Transition",
    "ResetCoordinator",
    "build_world",
    "InputSignals",
    "Simulation",
    "Snapshot",
    "TickResult",
]
