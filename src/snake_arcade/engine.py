# engine.py
from __future__ import annotations
from enum import Enum
import logging

import numpy as np  # type: ignore

from .config import Config, RIGHT
from .placement import place_food, place_special
from .state import Coord, GameState, Grid, SpecialItem

logger = logging.getLogger(__name__)


class StepResult(Enum):
    MOVED = "moved"
    FOOD = "food"
    SPECIAL = "special"
    WALL = "wall"
    SELF = "self"

    @property
    def fatal(self) -> bool:
        return self in (StepResult.WALL, StepResult.SELF)


# ---------- Helpers ----------
def is_opposite(a: Coord, b: Coord) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def same_axis(a: Coord, b: Coord) -> bool:
    """True when both directions move along x, or both along y."""
    return (a[0] != 0) == (b[0] != 0)


# ---------- State ----------
def new_game_state(cfg: Config, rng: np.random.Generator) -> GameState:
    mid = cfg.grid_size // 2
    snake = [
        (mid, mid),
        (mid - 1, mid),
        (mid - 2, mid),
    ]
    food = place_food(snake, Grid(cfg.grid_size), rng, cfg)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        score=0,
        tick_ms=cfg.base_tick_ms,
    )


# ---------- Mystery items ----------
def refresh_special(state: GameState, cfg: Config, rng: np.random.Generator) -> None:
    """
    Re-evaluate the special item after the score changed.

    - an item whose window the score has moved past is dropped immediately
    - with no item on the board, the first unused window containing the
      score spawns one
    """
    if state.special is not None and state.score >= state.special.clear_at:
        logger.debug("special item %d went stale at score %d", state.special.value, state.score)
        state.special = None

    if state.special is not None:
        return

    for idx, window in enumerate(cfg.mystery_windows):
        if idx in state.fired_windows:
            continue
        if window.lo <= state.score < window.hi:
            pos = place_special(state.snake, state.food, Grid(cfg.grid_size), rng, cfg)
            state.special = SpecialItem(position=pos, value=window.value, clear_at=window.hi)
            state.fired_windows.add(idx)
            logger.debug("special item %d spawned at %s", window.value, pos)
            return


# ---------- Update ----------
def step_game(state: GameState, cfg: Config, rng: np.random.Generator, mystery: bool = False) -> StepResult:
    """
    Advance the game by exactly one tick.
    Fatal collisions are reported through the result; the state is left
    as it was before the move in that case.
    """
    grid = Grid(cfg.grid_size)

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.snake[0]
    dx, dy = state.direction
    new_head = (hx + dx, hy + dy)

    # Wall collision
    if not grid.contains(new_head):
        return StepResult.WALL

    # Self collision; the tail cell is vacated this tick unless we grow
    if new_head in state.snake[:-1]:
        return StepResult.SELF

    state.snake.insert(0, new_head)

    special = state.special
    if mystery and special is not None and new_head == special.position:
        state.score = special.value
        state.special = None
        state.snake.pop()
        state.food = place_food(state.snake, grid, rng, cfg)
        return StepResult.SPECIAL

    if new_head == state.food:
        state.score += cfg.food_score
        avoid = [special.position] if special is not None else []
        state.food = place_food(state.snake, grid, rng, cfg, avoid)
        state.tick_ms = max(cfg.min_tick_ms, state.tick_ms - cfg.speed_step_ms)
        if mystery:
            refresh_special(state, cfg, rng)
        return StepResult.FOOD

    state.snake.pop()
    return StepResult.MOVED
