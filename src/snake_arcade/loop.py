# loop.py
"""
Fixed-timestep driver.

Frames arrive at whatever rate the display manages; the snake moves at
`session.tick_ms`. Elapsed time is collected in an accumulator and drained
in whole ticks, so a frame can run zero, one or several ticks while the
renderer is still called exactly once.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

from .session import GameSession
from .state import Session

logger = logging.getLogger(__name__)


class FixedStepLoop:
    def __init__(self, session: GameSession, max_frame_ms: Optional[int] = None):
        self.session = session
        self.max_frame_ms = max_frame_ms if max_frame_ms is not None else session.cfg.max_frame_ms
        self.accumulator = 0.0
        self.last_time: Optional[float] = None
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def frame(self, now_ms: float) -> int:
        """Account for one displayed frame. Returns how many ticks ran."""
        if self.last_time is None:
            self.last_time = now_ms
            return 0

        delta = max(0.0, now_ms - self.last_time)
        self.last_time = now_ms

        if self.session.mode is not Session.PLAYING:
            # no catch-up burst after pause / menus
            self.accumulator = 0.0
            return 0

        # clamp long stalls (window drag, debugger) to a bounded catch-up
        self.accumulator += min(delta, self.max_frame_ms)

        ticks = 0
        while self.accumulator >= self.session.tick_ms:
            interval = self.session.tick_ms
            self.session.tick()
            self.accumulator -= interval
            ticks += 1
            if self.session.mode is not Session.PLAYING:
                self.accumulator = 0.0
                break
        return ticks

    def run(self, clock: Callable[[], float], on_frame: Callable[[], bool]) -> int:
        """
        Drive frames until cancelled or `on_frame` returns False.
        `on_frame` is called once per frame after the ticks (render, flip,
        frame-rate cap). Returns the number of frames run.
        """
        frames = 0
        while not self.cancelled:
            self.frame(clock())
            frames += 1
            if not on_frame():
                break
        logger.debug("loop stopped after %d frames", frames)
        return frames
