"""Scripted policies for driving the game without a human.

Each policy takes a state vector (see ``gym_env.state_vector``) and returns
a FlappyEnv action: 0 = do nothing, 1 = flap.
"""

import numpy as np
from typing import Optional


class BasePolicy:
    """Base class for scripted policies."""

    name: str = "base"

    def __call__(self, obs: np.ndarray) -> int:
        return self.act(obs)

    def act(self, obs: np.ndarray) -> int:
        raise NotImplementedError

    def reset(self):
        """Called at the start of each episode."""
        pass


class RandomPolicy(BasePolicy):
    """Flap at random with a fixed probability per step.

    Dies quickly, good baseline.
    """

    name = "random"

    def __init__(self, flap_probability: float = 0.1, rng: Optional[np.random.Generator] = None):
        self.flap_probability = flap_probability
        self.rng = rng or np.random.default_rng()

    def act(self, obs):
        return int(self.rng.random() < self.flap_probability)


class GapFollowerPolicy(BasePolicy):
    """Flap whenever the player is falling below the next opening.

    ``margin`` is how far below the opening centre the player may sink
    before flapping; a flap then carries it back up through the centre.
    """

    name = "gap_follower"

    def __init__(self, margin: float = 25.0):
        self.margin = margin

    def act(self, obs):
        velocity = obs[1]
        gap_dy = obs[4]  # Opening height minus player height
        return int(gap_dy - self.margin > 0 and velocity <= 0)


POLICIES = {
    "random": RandomPolicy,
    "gap_follower": GapFollowerPolicy,
}
