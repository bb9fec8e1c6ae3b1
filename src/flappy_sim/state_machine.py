"""Game phase state machine.

Three phases and exactly three legal edges::

    PAUSED --(activate | confirm)--> RUNNING
    RUNNING --(collision)----------> GAME_OVER
    GAME_OVER --(confirm after delay)--> PAUSED  (+ pending reset)

Requesting any other edge is a programming error and raises
``InvalidTransitionError``.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import FrozenSet, List, Tuple

from .clock import Timer
from .signals import InputSignals, NO_INPUT

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    PAUSED = auto()
    RUNNING = auto()
    GAME_OVER = auto()


ALLOWED_TRANSITIONS: FrozenSet[Tuple[GamePhase, GamePhase]] = frozenset({
    (GamePhase.PAUSED, GamePhase.RUNNING),
    (GamePhase.RUNNING, GamePhase.GAME_OVER),
    (GamePhase.GAME_OVER, GamePhase.PAUSED),
})


class InvalidTransitionError(RuntimeError):
    """Raised when code asks for a phase change outside the transition table."""


@dataclass(frozen=True)
class Transition:
    source: GamePhase
    target: GamePhase


class GameStateMachine:
    """Owns the current phase, the post-game-over guard and the reset flag."""

    def __init__(self, post_gameover_delay: float):
        """Create a machine in the PAUSED phase.

        Args:
            post_gameover_delay: Seconds after entering GAME_OVER during
                which confirm input is ignored.
        """
        self.phase = GamePhase.PAUSED
        self.post_gameover_timer = Timer(post_gameover_delay)
        self.game_over_ui_visible = False
        self.pending_reset = False
        self.transitions: List[Transition] = []  # Since the last drain

    @property
    def is_running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    def can_transition(self, target: GamePhase) -> bool:
        return (self.phase, target) in ALLOWED_TRANSITIONS

    def transition(self, target: GamePhase) -> Transition:
        """Move to ``target``, applying the entry/exit effects of each phase."""
        if not self.can_transition(target):
            raise InvalidTransitionError(
                f"Illegal phase transition {self.phase.name} -> {target.name}"
            )
        change = Transition(self.phase, target)
        self.phase = target

        if target is GamePhase.GAME_OVER:
            self.post_gameover_timer.reset()
            self.game_over_ui_visible = True
        elif change.source is GamePhase.GAME_OVER:
            self.game_over_ui_visible = False

        self.transitions.append(change)
        logger.info("phase %s -> %s", change.source.name, change.target.name)
        return change

    def handle_input(self, signals: InputSignals, dt: float) -> InputSignals:
        """Apply input-driven transitions for this tick.

        Returns the signals still available to the rest of the tick. Leaving
        GAME_OVER consumes the input so the same press cannot also start the
        next round.
        """
        if self.phase is GamePhase.PAUSED:
            if signals.activate or signals.confirm:
                self.transition(GamePhase.RUNNING)
            return signals

        if self.phase is GamePhase.GAME_OVER:
            self.post_gameover_timer.tick(dt)
            if signals.confirm and self.post_gameover_timer.finished:
                self.transition(GamePhase.PAUSED)
                self.pending_reset = True
                return NO_INPUT
            return signals

        return signals

    def report_collision(self) -> Transition:
        """A collision while RUNNING ends the round."""
        return self.transition(GamePhase.GAME_OVER)

    def take_pending_reset(self) -> bool:
        """Consume the single-slot reset request."""
        pending = self.pending_reset
        self.pending_reset = False
        return pending

    def drain_transitions(self) -> List[Transition]:
        drained = self.transitions
        self.transitions = []
        return drained
