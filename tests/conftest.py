"""
Pytest fixtures for the shooter tests.

Everything here runs headless: no window is opened, surfaces are
plain in-memory pygame Surfaces.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from pixelstrike.config import H, W
from pixelstrike.controls import InputState
from pixelstrike.loop import FrameScheduler, GameLoop
from pixelstrike.presenter import Presenter
from pixelstrike.state import GameState


class RecordingPresenter(Presenter):
    """Presenter that remembers every notification it got."""

    def __init__(self):
        self.events = []

    def on_session_started(self):
        self.events.append(("started",))

    def on_score_changed(self, score):
        self.events.append(("score", score))

    def on_game_over(self, final_score):
        self.events.append(("game_over", final_score))

    @property
    def scores(self):
        return [e[1] for e in self.events if e[0] == "score"]


@pytest.fixture
def state():
    """A running session with a seeded random source."""
    s = GameState.create(seed=1234)
    s.reset()
    return s


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def surface():
    return pygame.Surface((W, H))


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def controls():
    return InputState()


@pytest.fixture
def game(scheduler, surface, controls, presenter):
    return GameLoop(GameState.create(seed=99), scheduler, surface, controls, presenter)
