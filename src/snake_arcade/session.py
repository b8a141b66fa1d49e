# session.py
from __future__ import annotations
import logging
from typing import Optional

import numpy as np  # type: ignore

from .config import Config
from .engine import StepResult, new_game_state, same_axis, step_game
from .state import Coord, GameState, Overlay, Session, Snapshot
from .storage import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)

IDLE_OVERLAY = Overlay("Snake", "Press Space to start")
PAUSED_OVERLAY = Overlay("Paused", "Press Space to resume")


class GameSession:
    """
    Owns one player's game: the entity state, the session mode and the
    high score. Input handlers only ever write the pending direction or
    the mode; `tick()` is the only thing that moves the snake.
    """

    def __init__(self, cfg: Optional[Config] = None, store: Optional[HighScoreStore] = None):
        self.cfg = cfg if cfg is not None else Config()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = np.random.default_rng(self.cfg.seed)

        self.mode = Session.IDLE
        self.mystery = self.cfg.mystery
        self.state: Optional[GameState] = None
        self.high_score = self.store.load()
        self.overlay: Optional[Overlay] = IDLE_OVERLAY
        self.last_result: Optional[StepResult] = None

    # ----- transitions -----
    def start(self) -> None:
        if self.mode not in (Session.IDLE, Session.GAME_OVER):
            logger.debug("start ignored in %s", self.mode.name)
            return
        self.state = new_game_state(self.cfg, self.rng)
        self.last_result = None
        self.overlay = None
        self.mode = Session.PLAYING
        logger.info("session started (mystery=%s)", self.mystery)

    def pause(self) -> None:
        if self.mode is not Session.PLAYING:
            logger.debug("pause ignored in %s", self.mode.name)
            return
        self.mode = Session.PAUSED
        self.overlay = PAUSED_OVERLAY

    def resume(self) -> None:
        if self.mode is not Session.PAUSED:
            logger.debug("resume ignored in %s", self.mode.name)
            return
        self.mode = Session.PLAYING
        self.overlay = None

    def toggle_pause(self) -> None:
        if self.mode in (Session.IDLE, Session.GAME_OVER):
            self.start()
        elif self.mode is Session.PLAYING:
            self.pause()
        elif self.mode is Session.PAUSED:
            self.resume()

    def end(self) -> None:
        if self.mode is not Session.PLAYING:
            return
        assert self.state is not None
        self.mode = Session.GAME_OVER
        score = self.state.score

        if score > self.high_score:
            self.high_score = score
            self.store.save(score)
            self.overlay = Overlay("Game Over", f"New record: {score}!")
            logger.info("game over, new record %d", score)
        else:
            self.overlay = Overlay("Game Over", f"Score: {score}")
            logger.info("game over, score %d (best %d)", score, self.high_score)

    # ----- input -----
    def set_direction(self, direction: Coord) -> bool:
        """Write the pending direction. Returns False when the turn is refused."""
        if self.mode is not Session.PLAYING:
            return False
        assert self.state is not None
        # no 180° turns, and nothing to do for the current axis
        if same_axis(direction, self.state.direction):
            return False
        self.state.pending = direction
        return True

    def toggle_mystery(self) -> None:
        self.mystery = not self.mystery
        if not self.mystery and self.state is not None:
            self.state.special = None
        logger.info("mystery mode %s", "on" if self.mystery else "off")

    # ----- update -----
    @property
    def tick_ms(self) -> int:
        if self.state is None:
            return self.cfg.base_tick_ms
        return self.state.tick_ms

    def tick(self) -> Optional[StepResult]:
        if self.mode is not Session.PLAYING:
            return None
        assert self.state is not None
        result = step_game(self.state, self.cfg, self.rng, mystery=self.mystery)
        self.last_result = result
        if result.fatal:
            logger.debug("fatal collision: %s", result.value)
            self.end()
        return result

    # ----- presentation -----
    def snapshot(self) -> Snapshot:
        st = self.state
        special = None
        if st is not None and st.special is not None:
            special = (st.special.position, st.special.value)
        return Snapshot(
            snake=tuple(st.snake) if st is not None else (),
            food=st.food if st is not None else None,
            special=special,
            score=st.score if st is not None else 0,
            high_score=self.high_score,
            mode=self.mode,
            overlay=self.overlay,
            mystery=self.mystery,
            grid_size=self.cfg.grid_size,
        )
