import os

# headless pygame for the whole test run
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from snake_arcade.config import Config  # noqa: E402
from snake_arcade.session import GameSession  # noqa: E402
from snake_arcade.storage import MemoryHighScoreStore  # noqa: E402


@pytest.fixture
def cfg():
    return Config(seed=1234)


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def session(cfg, store):
    """A started session with food parked away from the snake's path."""
    s = GameSession(cfg, store)
    s.start()
    s.state.food = (3, 3)
    return s
