# storage.py
"""High-score persistence: a single integer, nothing else."""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

HIGHSCORE_ENV = "SNAKE_ARCADE_HIGHSCORE"
DEFAULT_HIGHSCORE_FILE = Path.home() / ".snake_arcade" / "highscore"


class HighScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class FileHighScoreStore:
    """Stores the high score as plain text. Unreadable files count as 0."""

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            env_path = os.environ.get(HIGHSCORE_ENV)
            path = Path(env_path) if env_path else DEFAULT_HIGHSCORE_FILE
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
            return max(0, int(text.strip() or "0"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("could not read high score from %s: %s", self.path, exc)
            return 0

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            logger.warning("could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    def __init__(self, value: int = 0):
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
