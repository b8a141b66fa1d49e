"""Grid snake arcade: fixed-timestep engine plus a pygame front end."""

from .config import Config, MysteryWindow, UP, DOWN, LEFT, RIGHT
from .engine import StepResult, new_game_state, step_game
from .loop import FixedStepLoop
from .session import GameSession
from .state import GameState, Session, Snapshot, SpecialItem
from .storage import FileHighScoreStore, MemoryHighScoreStore

__all__ = [
    "Config", "MysteryWindow", "UP", "DOWN", "LEFT", "RIGHT",
    "StepResult", "new_game_state", "step_game",
    "FixedStepLoop",
    "GameSession",
    "GameState", "Session", "Snapshot", "SpecialItem",
    "FileHighScoreStore", "MemoryHighScoreStore",
]
