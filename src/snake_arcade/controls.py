# controls.py
from __future__ import annotations
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .session import GameSession
from .state import Coord

SWIPE_THRESHOLD_PX = 30


class Command(Enum):
    TOGGLE_PAUSE = "toggle_pause"
    TOGGLE_MYSTERY = "toggle_mystery"
    TOGGLE_THEME = "toggle_theme"
    QUIT = "quit"


KEYMAP = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
    pygame.K_SPACE: Command.TOGGLE_PAUSE,
    pygame.K_m: Command.TOGGLE_MYSTERY,
    pygame.K_t: Command.TOGGLE_THEME,
    pygame.K_ESCAPE: Command.QUIT,
}


def key_to_command(key: int) -> Optional[Union[Coord, Command]]:
    return KEYMAP.get(key)


class SwipeTracker:
    """Turns a drag into a direction once it moves past the threshold."""

    def __init__(self, threshold: float = SWIPE_THRESHOLD_PX):
        self.threshold = threshold
        self.anchor: Optional[Tuple[float, float]] = None

    def begin(self, x: float, y: float) -> None:
        self.anchor = (x, y)

    def end(self) -> None:
        self.anchor = None

    def move(self, x: float, y: float) -> Optional[Coord]:
        if self.anchor is None:
            return None
        dx = x - self.anchor[0]
        dy = y - self.anchor[1]

        if abs(dx) > abs(dy):
            if dx > self.threshold:
                direction = RIGHT
            elif dx < -self.threshold:
                direction = LEFT
            else:
                return None
        else:
            if dy > self.threshold:
                direction = DOWN
            elif dy < -self.threshold:
                direction = UP
            else:
                return None

        return direction


def _apply_swipe(session: GameSession, swipe: SwipeTracker, x: float, y: float) -> None:
    direction = swipe.move(x, y)
    # re-anchor only on an accepted turn so a long drag can chain turns
    if direction is not None and session.set_direction(direction):
        swipe.begin(x, y)


def handle_input(
    session: GameSession,
    events: Iterable[pygame.event.Event],
    swipe: SwipeTracker,
    window_size: Tuple[int, int],
) -> Optional[Command]:
    """
    Apply input events to the session. Session commands are handled here;
    the last app-level command (theme toggle, quit) is returned to the caller.
    """
    app_cmd: Optional[Command] = None
    for event in events:
        if event.type == pygame.QUIT:
            return Command.QUIT

        if event.type == pygame.KEYDOWN:
            cmd = key_to_command(event.key)
            if cmd is None:
                continue
            if cmd is Command.TOGGLE_PAUSE:
                session.toggle_pause()
            elif cmd is Command.TOGGLE_MYSTERY:
                session.toggle_mystery()
            elif isinstance(cmd, Command):
                app_cmd = cmd
                if cmd is Command.QUIT:
                    return cmd
            else:
                session.set_direction(cmd)

        # touch-emulated mouse events are handled through the finger events
        elif event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False):
            swipe.begin(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and not getattr(event, "touch", False):
            swipe.end()
        elif event.type == pygame.MOUSEMOTION and not getattr(event, "touch", False):
            if event.buttons[0]:
                _apply_swipe(session, swipe, *event.pos)

        elif event.type == pygame.FINGERDOWN:
            swipe.begin(event.x * window_size[0], event.y * window_size[1])
        elif event.type == pygame.FINGERUP:
            swipe.end()
        elif event.type == pygame.FINGERMOTION:
            _apply_swipe(session, swipe, event.x * window_size[0], event.y * window_size[1])
    return app_cmd
