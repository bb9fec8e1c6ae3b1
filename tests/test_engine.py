"""Tests for the interactive front-end."""

import logging
import os

import pygame
import pytest

# Use dummy video driver for headless testing
os.environ['SDL_VIDEODRIVER'] = 'dummy'

from flappy_sim.config import GameConfig
from flappy_sim.engine import FlappyEngine, signals_from_event
from flappy_sim.policies import BasePolicy
from flappy_sim.signals import InputSignals, NO_INPUT
from flappy_sim.state_machine import GamePhase

TICK = 1 / 60


class AlwaysFlap(BasePolicy):
    name = "always"

    def __init__(self):
        self.resets = 0

    def act(self, obs):
        return 1

    def reset(self):
        self.resets += 1


@pytest.fixture
def engine():
    e = FlappyEngine(GameConfig(), seed=0)
    yield e
    pygame.quit()


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestSignalMapping:
    @pytest.mark.parametrize("key", [pygame.K_SPACE, pygame.K_UP, pygame.K_w])
    def test_activate_keys(self, key):
        assert signals_from_event(_key(key)) == InputSignals(activate=True, confirm=True)

    @pytest.mark.parametrize("key", [pygame.K_RETURN, pygame.K_KP_ENTER])
    def test_confirm_keys(self, key):
        assert signals_from_event(_key(key)) == InputSignals(confirm=True)

    def test_left_click(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
        assert signals_from_event(event).activate

    def test_right_click_ignored(self):
        event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0))
        assert signals_from_event(event) == NO_INPUT

    def test_touch(self):
        event = pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, touch_id=0, finger_id=0)
        assert signals_from_event(event) == InputSignals(activate=True, confirm=True)

    def test_other_keys_ignored(self):
        assert signals_from_event(_key(pygame.K_a)) == NO_INPUT


class TestFlappyEngine:
    def test_initialization(self, engine):
        assert engine.simulation.phase is GamePhase.PAUSED
        assert engine.best_score == 0
        assert engine.autopilot is None

    def test_handle_events_merges_signals(self, engine):
        pygame.event.clear()
        pygame.event.post(_key(pygame.K_RETURN))
        pygame.event.post(_key(pygame.K_SPACE))
        signals = engine.handle_events()
        assert signals == InputSignals(activate=True, confirm=True)

    def test_escape_stops_loop(self, engine):
        engine.running = True
        pygame.event.clear()
        pygame.event.post(_key(pygame.K_ESCAPE))
        engine.handle_events()
        assert not engine.running

    def test_space_starts_round(self, engine):
        engine.update(TICK, InputSignals(activate=True, confirm=True))
        assert engine.simulation.phase is GamePhase.RUNNING

    def test_best_score_tracked(self, engine, caplog):
        sim = engine.simulation
        sim.scoreboard.increment(4)
        engine.update(TICK, InputSignals(confirm=True))
        pair = sim.store.pairs[0]
        pair.x = sim.player.position.x
        pair.y = sim.player.position.y - sim.config.pipe_height / 2

        with caplog.at_level(logging.INFO, logger="flappy_sim.engine"):
            result = engine.update(TICK, NO_INPUT)

        assert result.collision is not None
        assert engine.best_score >= 4
        assert "round over" in caplog.text

    def test_render(self, engine):
        engine.render()


class TestAutopilot:
    def test_no_autopilot(self, engine):
        assert engine.autopilot_signals() == NO_INPUT

    def test_autopilot_starts_and_flaps(self):
        policy = AlwaysFlap()
        engine = FlappyEngine(GameConfig(), seed=0, autopilot=policy)
        assert engine.autopilot_signals() == InputSignals(confirm=True)
        engine.update(TICK, engine.autopilot_signals())
        assert engine.autopilot_signals() == InputSignals(activate=True)
        pygame.quit()

    def test_autopilot_reset_on_restart(self):
        policy = AlwaysFlap()
        engine = FlappyEngine(GameConfig(), seed=0, autopilot=policy)
        sim = engine.simulation
        engine.update(TICK, InputSignals(confirm=True))
        pair = sim.store.pairs[0]
        pair.x = sim.player.position.x
        pair.y = sim.player.position.y - sim.config.pipe_height / 2
        engine.update(TICK, NO_INPUT)
        assert sim.phase is GamePhase.GAME_OVER

        for _ in range(3):
            engine.update(0.25, NO_INPUT)
        engine.update(TICK, engine.autopilot_signals())

        assert sim.phase is GamePhase.PAUSED
        assert policy.resets == 1
        pygame.quit()
