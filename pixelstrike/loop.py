"""Game loop driver: one simulation step plus one render per display frame."""

import logging
from enum import Enum

from pixelstrike import render, simulation
from pixelstrike.presenter import Presenter

logger = logging.getLogger(__name__)


class LoopPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class FrameScheduler:
    """Queue of callbacks to run on the next display frame.

    The host calls :meth:`run_pending` once per frame. Callbacks queued
    while it runs wait for the following frame, so a callback that
    re-requests itself runs exactly once per frame.
    """

    def __init__(self):
        self._queue = []

    def request_frame(self, callback):
        self._queue.append(callback)

    @property
    def pending(self):
        return len(self._queue)

    def run_pending(self):
        """Run the callbacks queued so far; returns how many ran."""
        due, self._queue = self._queue, []
        for callback in due:
            callback()
        return len(due)


class GameLoop:
    """Owns the session state and drives it through Idle/Running/Ended."""

    def __init__(self, state, scheduler, surface, controls, presenter=None):
        self.state = state
        self.scheduler = scheduler
        self.surface = surface
        self.controls = controls
        self.presenter = presenter or Presenter()
        self._phase = LoopPhase.IDLE
        self._tick_scheduled = False

    @property
    def phase(self):
        return self._phase

    @property
    def running(self):
        return self.state.running

    def start(self):
        """Begin a new session from Idle or Ended.

        Restarting a running session resets it without starting a
        second tick chain.
        """
        if self._phase is LoopPhase.RUNNING:
            logger.info("Restarting running session")
        self.state.reset()
        self._phase = LoopPhase.RUNNING
        self.presenter.on_session_started()
        self.presenter.on_score_changed(self.state.score)
        logger.info("Session started")
        if not self._tick_scheduled:
            self._schedule()

    def tick(self):
        self._tick_scheduled = False
        if not self.state.running:
            return

        impact_score = simulation.step(self.state, self.controls.snapshot(), self.presenter)
        if impact_score is not None:
            self.game_over(impact_score)
        render.draw(self.surface, self.state)

        if self.state.running:
            self._schedule()

    def game_over(self, final_score=None):
        """Running -> Ended. The pending tick chain stops on its own.

        ``final_score`` defaults to the current score.
        """
        if self._phase is not LoopPhase.RUNNING:
            return
        if final_score is None:
            final_score = self.state.score
        self.state.running = False
        self._phase = LoopPhase.ENDED
        logger.info(f"Game over: score {final_score} after {self.state.frames} frames")
        self.presenter.on_game_over(final_score)

    def _schedule(self):
        self._tick_scheduled = True
        self.scheduler.request_frame(self.tick)
