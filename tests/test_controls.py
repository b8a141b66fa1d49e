"""
Tests for controls.py - key mapping, swipes and event dispatch.
"""

import pygame

from snake_arcade.config import UP, DOWN, LEFT, RIGHT
from snake_arcade.controls import Command, SwipeTracker, handle_input, key_to_command
from snake_arcade.session import GameSession
from snake_arcade.state import Session

WINDOW = (600, 600)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


class TestKeymap:
    def test_arrows_and_wasd(self):
        assert key_to_command(pygame.K_UP) == UP
        assert key_to_command(pygame.K_w) == UP
        assert key_to_command(pygame.K_s) == DOWN
        assert key_to_command(pygame.K_a) == LEFT
        assert key_to_command(pygame.K_RIGHT) == RIGHT

    def test_commands(self):
        assert key_to_command(pygame.K_SPACE) is Command.TOGGLE_PAUSE
        assert key_to_command(pygame.K_m) is Command.TOGGLE_MYSTERY
        assert key_to_command(pygame.K_ESCAPE) is Command.QUIT

    def test_unmapped_key(self):
        assert key_to_command(pygame.K_F1) is None


class TestSwipeTracker:
    def test_small_moves_are_ignored(self):
        swipe = SwipeTracker()
        swipe.begin(100, 100)
        assert swipe.move(120, 110) is None

    def test_horizontal_and_vertical(self):
        swipe = SwipeTracker()
        swipe.begin(100, 100)
        assert swipe.move(140, 105) == RIGHT
        assert swipe.move(95, 60) == UP
        assert swipe.move(60, 100) == LEFT
        assert swipe.move(100, 140) == DOWN

    def test_move_does_not_re_anchor(self):
        swipe = SwipeTracker()
        swipe.begin(100, 100)
        swipe.move(140, 100)
        assert swipe.anchor == (100, 100)

    def test_no_anchor_no_swipe(self):
        swipe = SwipeTracker()
        assert swipe.move(500, 500) is None
        swipe.begin(0, 0)
        swipe.end()
        assert swipe.move(500, 0) is None


class TestHandleInput:
    def test_space_starts_then_pauses(self, cfg, store):
        s = GameSession(cfg, store)
        handle_input(s, [key(pygame.K_SPACE)], SwipeTracker(), WINDOW)
        assert s.mode is Session.PLAYING
        handle_input(s, [key(pygame.K_SPACE)], SwipeTracker(), WINDOW)
        assert s.mode is Session.PAUSED

    def test_direction_key_sets_pending(self, session):
        handle_input(session, [key(pygame.K_UP)], SwipeTracker(), WINDOW)
        assert session.state.pending == UP

    def test_mystery_key(self, session):
        handle_input(session, [key(pygame.K_m)], SwipeTracker(), WINDOW)
        assert session.mystery is True

    def test_app_commands_are_returned(self, session):
        assert handle_input(session, [key(pygame.K_t)], SwipeTracker(), WINDOW) is Command.TOGGLE_THEME
        assert handle_input(session, [key(pygame.K_ESCAPE)], SwipeTracker(), WINDOW) is Command.QUIT
        assert handle_input(session, [pygame.event.Event(pygame.QUIT)], SwipeTracker(), WINDOW) is Command.QUIT

    def test_mouse_drag_turns(self, session):
        events = [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1),
            pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 360), rel=(0, 60), buttons=(1, 0, 0)),
        ]
        handle_input(session, events, SwipeTracker(), WINDOW)
        assert session.state.pending == DOWN

    def test_finger_swipe_turns(self, session):
        events = [
            pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5, touch_id=0, finger_id=0),
            pygame.event.Event(pygame.FINGERMOTION, x=0.5, y=0.4, touch_id=0, finger_id=0),
        ]
        handle_input(session, events, SwipeTracker(), WINDOW)
        assert session.state.pending == UP

    def test_accepted_swipe_re_anchors(self, session):
        swipe = SwipeTracker()
        events = [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1),
            pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 250), rel=(0, -50), buttons=(1, 0, 0)),
        ]
        handle_input(session, events, swipe, WINDOW)
        assert session.state.pending == UP
        assert swipe.anchor == (300, 250)

    def test_refused_swipe_keeps_anchor(self, session):
        """A drag along the current axis is refused and the start point stays put."""
        swipe = SwipeTracker()
        events = [
            pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(300, 300), button=1),
            pygame.event.Event(pygame.MOUSEMOTION, pos=(250, 300), rel=(-50, 0), buttons=(1, 0, 0)),
        ]
        handle_input(session, events, swipe, WINDOW)
        assert session.state.pending == RIGHT
        assert swipe.anchor == (300, 300)

        # the drag keeps going downward from the same start point
        events = [
            pygame.event.Event(pygame.MOUSEMOTION, pos=(290, 360), rel=(40, 60), buttons=(1, 0, 0)),
        ]
        handle_input(session, events, swipe, WINDOW)
        assert session.state.pending == DOWN
