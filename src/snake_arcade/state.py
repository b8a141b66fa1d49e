# state.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Set, Tuple

Coord = Tuple[int, int]


class Session(Enum):
    """Session modes; entity state is rebuilt on every move into PLAYING."""
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameover"


# ---------- Grid ----------
@dataclass(frozen=True)
class Grid:
    size: int

    def contains(self, cell: Coord) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def cells(self) -> Iterator[Coord]:
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def inset_cells(self, margin: int) -> Iterator[Coord]:
        """Cells at least `margin` away from every edge."""
        for y in range(margin, self.size - margin):
            for x in range(margin, self.size - margin):
                yield (x, y)


# ---------- Entities ----------
@dataclass
class SpecialItem:
    position: Coord
    value: int
    clear_at: int       # score at which the item is stale and removed


@dataclass
class GameState:
    snake: List[Coord]             # head at index 0
    direction: Coord
    pending: Coord
    food: Coord
    score: int
    tick_ms: int                   # current step interval
    special: Optional[SpecialItem] = None
    fired_windows: Set[int] = field(default_factory=set)   # mystery windows already used

    @property
    def head(self) -> Coord:
        return self.snake[0]


# ---------- Presentation ----------
@dataclass(frozen=True)
class Overlay:
    title: str
    message: str


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""
    snake: Tuple[Coord, ...]
    food: Optional[Coord]
    special: Optional[Tuple[Coord, int]]
    score: int
    high_score: int
    mode: Session
    overlay: Optional[Overlay]
    mystery: bool
    grid_size: int
