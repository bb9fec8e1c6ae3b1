"""Interactive pygame front-end.

Maps keyboard, mouse and touch to the simulation's two input signals,
runs the host loop and draws snapshots. The simulation itself never sees
pygame events.
"""

import logging
from typing import Optional

import numpy as np
import pygame

from .config import GameConfig
from .gym_env import state_vector
from .policies import BasePolicy
from .render import SceneRenderer
from .signals import InputSignals, NO_INPUT
from .simulation import Simulation, TickResult
from .state_machine import GamePhase

logger = logging.getLogger(__name__)


# Keys that both flap and confirm, and keys that only confirm
ACTIVATE_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
CONFIRM_ONLY_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER)


def signals_from_event(event: pygame.event.Event) -> InputSignals:
    """Translate one pygame event into edge-triggered signals."""
    if event.type == pygame.KEYDOWN:
        if event.key in ACTIVATE_KEYS:
            return InputSignals(activate=True, confirm=True)
        if event.key in CONFIRM_ONLY_KEYS:
            return InputSignals(confirm=True)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return InputSignals(activate=True, confirm=True)
    elif event.type == pygame.FINGERDOWN:
        return InputSignals(activate=True, confirm=True)
    return NO_INPUT


class FlappyEngine:
    """Window, host loop and input mapping around a Simulation.

    Handles:
    - Host loop at the configured frame rate
    - Keyboard / mouse / touch input
    - Optional scripted autopilot
    - Pygame rendering
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        autopilot: Optional[BasePolicy] = None,
    ):
        """Initialize the front-end.

        Args:
            config: Game configuration. Uses defaults if None.
            seed: Seed for gap offsets. Random if None.
            autopilot: Policy that supplies flaps instead of the player.
        """
        self.config = config or GameConfig()

        pygame.init()
        self.screen = pygame.display.set_mode(
            (int(self.config.screen_width), int(self.config.screen_height))
        )
        pygame.display.set_caption("Flappy Sim")
        self.clock = pygame.time.Clock()

        self.simulation = Simulation(self.config, rng=np.random.default_rng(seed))
        self.renderer = SceneRenderer(self.config)
        self.autopilot = autopilot

        self.running = False
        self.best_score = 0

    def handle_events(self) -> InputSignals:
        """Drain the pygame queue into this frame's signals."""
        signals = NO_INPUT
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            else:
                signals = signals | signals_from_event(event)
        return signals

    def autopilot_signals(self) -> InputSignals:
        """Ask the autopilot for a flap; it also restarts after game over."""
        if self.autopilot is None:
            return NO_INPUT
        if self.simulation.phase is not GamePhase.RUNNING:
            return InputSignals(confirm=True)
        obs = state_vector(self.simulation.snapshot(), self.config)
        return InputSignals(activate=bool(self.autopilot(obs)))

    def update(self, dt: float, signals: InputSignals) -> TickResult:
        result = self.simulation.update(dt, signals)
        if result.collision is not None:
            score = self.simulation.score
            if score > self.best_score:
                self.best_score = score
            logger.info("round over: score=%d best=%d", score, self.best_score)
        if result.reset and self.autopilot is not None:
            self.autopilot.reset()
        return result

    def render(self) -> None:
        self.renderer.draw(self.screen, self.simulation.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        """Main game loop."""
        self.running = True
        logger.info("starting game loop at %d fps", self.config.fps)

        while self.running:
            signals = self.handle_events() | self.autopilot_signals()
            dt = self.clock.tick(self.config.fps) / 1000.0
            self.update(dt, signals)
            self.render()

        pygame.quit()
