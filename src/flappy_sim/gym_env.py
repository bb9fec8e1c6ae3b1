"""Gymnasium environment wrapper for the simulation.

Provides the standard Gym API for scripted agents and RL training. Each
episode is one round: reset starts the round, and the episode terminates
on the first collision.
"""

import numpy as np
import gymnasium
from gymnasium import spaces
from typing import Optional, Dict, Any

import pygame

from .clock import Clock
from .config import GameConfig
from .render import SceneRenderer
from .signals import InputSignals
from .simulation import Simulation, Snapshot
from .state_machine import GamePhase


STATE_SIZE = 8


def state_vector(snapshot: Snapshot, config: GameConfig) -> np.ndarray:
    """Encode a snapshot as a float32 state vector.

    Layout:
        [0] player height
        [1] player vertical velocity
        [2] player angle (degrees)
        [3] horizontal distance to the next pipe pair
        [4] next opening height relative to the player
        [5] horizontal distance to the pair after that
        [6] its opening height relative to the player
        [7] score

    A pair counts as "next" until its trailing edge is behind the player.
    Missing pairs are reported one screen width away at the player's height.
    """
    state = np.zeros(STATE_SIZE, dtype=np.float32)
    px, py = snapshot.player_position
    state[0] = py
    state[1] = snapshot.player_velocity
    state[2] = snapshot.player_angle

    player_left = px - config.player_width / 2
    ahead = sorted(
        (p for p in snapshot.pairs if p.x + config.pipe_width / 2 > player_left),
        key=lambda p: p.x,
    )
    for slot in range(2):
        if slot < len(ahead):
            state[3 + 2 * slot] = ahead[slot].x - px
            state[4 + 2 * slot] = ahead[slot].y - py
        else:
            state[3 + 2 * slot] = config.screen_width
            state[4 + 2 * slot] = 0.0

    state[7] = float(snapshot.score)
    return state


class FlappyEnv(gymnasium.Env):
    """Gymnasium wrapper for one round of the avoider game.

    Observation space: Box(8,) float32, see ``state_vector``.

    Action space: Discrete(2) - 0 = do nothing, 1 = flap.

    Reward = weighted sum of raw signals (stored in info['reward_signals']):
        pass:  pipe pairs passed this step
        death: 1.0 on the collision step
        step:  1.0 every step
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        max_episode_steps: int = 5000,
        reward_weights: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.config = config or GameConfig()
        self.config.validate()
        self.render_mode = render_mode
        self.max_episode_steps = max_episode_steps
        self.metadata = {**self.metadata, "render_fps": self.config.fps}

        self.reward_weights = reward_weights or {
            "pass": 1.0,
            "death": -1.0,
            "step": 0.01,
        }

        self.action_space = spaces.Discrete(2)
        self.observation_space = spaces.Box(
            low=-np.inf, high=np.inf, shape=(STATE_SIZE,), dtype=np.float32,
        )

        self._renderer = SceneRenderer(self.config)
        self._surface = None
        self._display = None
        if render_mode is not None:
            # Caller sets SDL_VIDEODRIVER for headless
            if not pygame.get_init():
                pygame.init()
            size = (int(self.config.screen_width), int(self.config.screen_height))
            self._surface = pygame.Surface(size)
            if render_mode == "human":
                self._display = pygame.display.set_mode(size)
                pygame.display.set_caption("FlappyEnv")

        self._sim: Optional[Simulation] = None
        self._episode_steps = 0

    @property
    def simulation(self) -> Optional[Simulation]:
        return self._sim

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)

        self._sim = Simulation(
            self.config,
            rng=self.np_random,
            clock=Clock.fixed(self.config.tick_seconds),
        )
        # Leave the menu without flapping
        self._sim.update(signals=InputSignals(confirm=True))
        self._episode_steps = 0

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), self._get_info()

    def step(self, action):
        assert self._sim is not None, "Must call reset() before step()"

        if isinstance(action, np.ndarray):
            action = action.item()
        signals = InputSignals(activate=bool(int(action)))

        result = self._sim.update(signals=signals)
        self._episode_steps += 1

        reward_signals = {
            "pass": float(result.scored),
            "death": 1.0 if result.collision is not None else 0.0,
            "step": 1.0,
        }
        reward = sum(
            self.reward_weights.get(k, 0.0) * v
            for k, v in reward_signals.items()
        )

        terminated = self._sim.phase is GamePhase.GAME_OVER
        truncated = self._episode_steps >= self.max_episode_steps

        info = self._get_info()
        info["reward_signals"] = reward_signals

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, info

    def _get_obs(self):
        return state_vector(self._sim.snapshot(), self.config)

    def _get_info(self) -> Dict[str, Any]:
        snapshot = self._sim.snapshot()
        return {
            "score": snapshot.score,
            "phase": snapshot.phase.name,
            "episode_steps": self._episode_steps,
            "player_position": snapshot.player_position,
        }

    def _render_frame(self) -> np.ndarray:
        """Render the current state to an (H, W, 3) uint8 array."""
        self._renderer.draw(self._surface, self._sim.snapshot(), show_hud=False)
        # surfarray gives (W, H, 3); transpose to (H, W, 3)
        array = pygame.surfarray.array3d(self._surface)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)

    def render(self):
        if self._sim is None or self.render_mode is None:
            return None
        if self.render_mode == "rgb_array":
            return self._render_frame()
        if self.render_mode == "human" and self._display:
            self._renderer.draw(self._display, self._sim.snapshot())
            pygame.event.pump()
            pygame.display.flip()
        return None

    def close(self):
        if self._display:
            pygame.display.quit()
            self._display = None
