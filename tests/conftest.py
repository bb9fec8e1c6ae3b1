"""Pytest configuration and shared fixtures."""

import os

# Ensure headless pygame for all tests
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import numpy as np
import pytest

from flappy_sim.config import GameConfig
from flappy_sim.simulation import Simulation

TICK = 1 / 60

@pytest.fixture
def config():
    """Default game configuration."""
    return GameConfig()

@pytest.fixture
def rng():
    """Seeded generator so gap offsets are reproducible."""
    return np.random.default_rng(1234)

@pytest.fixture
def sim(config, rng):
    """Fresh simulation in the PAUSED phase."""
    return Simulation(config, rng=rng)
