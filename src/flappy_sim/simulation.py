"""Tick-driven simulation core.

``Simulation`` is the explicit context for one game session: it owns the
entity store, scoreboard, phase machine, timers and random generator, and
runs every component in a fixed order on each ``update``:

1. clock (elapsed time for the tick)
2. input-driven phase changes (start, restart after game over)
3. player kinematics and pipe scrolling (RUNNING only)
4. ground scrolling (every phase)
5. collision test and scoring (RUNNING only), then GAME_OVER on a hit
6. round reset, if one was requested this tick

Front-ends push ``InputSignals`` in and pull ``Snapshot`` objects out; they
never touch entities directly.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, List, Tuple

import numpy as np
from pymunk import BB

from .clock import Clock, Timer
from .collision import Collision, CollisionDetector
from .config import GameConfig
from .entities import EntityStore, Player
from .kinematics import PlayerKinematics
from .reset import ResetCoordinator, build_world
from .scoring import Scoreboard, ScoreTracker
from .scroller import ObstacleScroller
from .signals import InputSignals, NO_INPUT
from .state_machine import GamePhase, GameStateMachine, Transition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairSnapshot:
    x: float
    y: float
    countable: bool
    top: BB
    bottom: BB


@dataclass(frozen=True)
class GroundSnapshot:
    x: float
    y: float
    width: float
    bounds: BB


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything a renderer or agent needs."""
    phase: GamePhase
    score: int
    player_position: Tuple[float, float]
    player_velocity: float
    player_angle: float
    player_frame: int
    player_bounds: BB
    pairs: Tuple[PairSnapshot, ...]
    ground: Tuple[GroundSnapshot, ...]
    game_over_ui_visible: bool


@dataclass
class TickResult:
    """What happened during one ``update``."""
    dt: float
    scored: int = 0
    collision: Optional[Collision] = None
    transitions: List[Transition] = field(default_factory=list)
    reset: bool = False


class Simulation:
    """One game session: entities plus the per-tick update order."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Clock] = None,
    ):
        """Build a fresh world in the PAUSED phase.

        Args:
            config: Game constants. Uses defaults if None. Validated here;
                a structurally broken config raises ValueError.
            rng: Generator for gap offsets. A seeded one makes runs
                reproducible. Uses an unseeded generator if None.
            clock: Tick clock. Defaults to a variable clock that takes the
                host's measured delta, clamped to ``config.max_delta``.
        """
        self.config = config or GameConfig()
        self.config.validate()

        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock or Clock.variable(max_delta=self.config.max_delta)

        self.kinematics = PlayerKinematics(self.config)
        self.scroller = ObstacleScroller(self.config, self.rng)
        self.collisions = CollisionDetector()
        self.scoreboard = Scoreboard()
        self.score_tracker = ScoreTracker(self.scoreboard)
        self.state = GameStateMachine(self.config.post_gameover_delay)
        self.resetter = ResetCoordinator(self.config, self.rng, self.kinematics)
        self.animation_timer = Timer(self.config.animation_frame_seconds, repeating=True)

        self.store: EntityStore = build_world(self.config, self.rng)
        self.tick_count = 0

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.scoreboard.score

    @property
    def player(self) -> Player:
        return self.store.require_player()

    def _check_structure(self) -> Player:
        player = self.store.require_player()
        if len(self.store.pairs) != self.config.pipe_pool_size:
            raise RuntimeError(
                f"Expected {self.config.pipe_pool_size} pipe pairs, "
                f"found {len(self.store.pairs)}"
            )
        return player

    def update(self, dt: Optional[float] = None, signals: InputSignals = NO_INPUT) -> TickResult:
        """Advance the simulation by one tick.

        Args:
            dt: Measured seconds since the last update. May be None with a
                fixed clock.
            signals: Edge-triggered input for this tick.

        Returns:
            TickResult describing scoring, collision, phase changes and
            whether the round was reset.
        """
        player = self._check_structure()
        store = self.store

        dt = self.clock.tick(dt)
        result = TickResult(dt=dt)

        signals = self.state.handle_input(signals, dt)

        if self.state.is_running:
            self.kinematics.step(player, dt, activate=signals.activate)
            self.scroller.scroll_pipes(store.pairs)

        self.scroller.scroll_ground(store.ground)

        if self.state.phase is not GamePhase.GAME_OVER:
            self._animate(player, dt)

        if self.state.is_running:
            result.collision = self.collisions.check(store)
            result.scored = self.score_tracker.update(store.pairs, player.position.x)
            if result.collision is not None:
                logger.info(
                    "collision with %s %d at score %d",
                    result.collision.kind.name, result.collision.owner, self.score,
                )
                self.state.report_collision()

        if self.state.take_pending_reset():
            self.resetter.reset(store, self.scoreboard)
            self.animation_timer.reset()
            result.reset = True

        result.transitions = self.state.drain_transitions()
        self.tick_count += 1
        return result

    def _animate(self, player: Player, dt: float) -> None:
        self.animation_timer.tick(dt)
        if self.animation_timer.just_finished:
            frames = self.config.animation_frames
            player.frame = (player.frame + self.animation_timer.times_finished) % frames

    def snapshot(self) -> Snapshot:
        store = self.store
        player = store.require_player()

        pairs = tuple(
            PairSnapshot(
                x=pair.x,
                y=pair.y,
                countable=pair.countable,
                top=store.blocker_bounds(pair.blockers[0]),
                bottom=store.blocker_bounds(pair.blockers[1]),
            )
            for pair in store.pairs
        )
        ground = tuple(
            GroundSnapshot(
                x=tile.x,
                y=tile.y,
                width=tile.width,
                bounds=store.blocker_bounds(tile.blocker),
            )
            for tile in store.ground
        )
        return Snapshot(
            phase=self.state.phase,
            score=self.scoreboard.score,
            player_position=(player.position.x, player.position.y),
            player_velocity=player.velocity,
            player_angle=player.angle,
            player_frame=player.frame,
            player_bounds=player.bounds,
            pairs=pairs,
            ground=ground,
            game_over_ui_visible=self.state.game_over_ui_visible,
        )
