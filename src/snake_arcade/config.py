from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

# ----- Window -----
WINDOW_SIZE = 600
FPS = 60

# ----- Palettes (light / dark) -----
THEMES: Dict[str, Dict[str, Tuple[int, int, int]]] = {
    "light": {
        "bg":      (245, 245, 247),
        "grid":    (229, 229, 234),
        "snake":   (52, 199, 89),
        "food":    (255, 59, 48),
        "special": (175, 82, 222),
        "text":    (29, 29, 31),
    },
    "dark": {
        "bg":      (20, 20, 24),
        "grid":    (38, 38, 44),
        "snake":   (80, 200, 80),
        "food":    (200, 70, 70),
        "special": (180, 110, 230),
        "text":    (220, 220, 230),
    },
}

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Base tick interval per device class (ms) -----
DEVICE_TICK_MS = {
    "desktop": 100,
    "touch": 120,
}


@dataclass(frozen=True)
class MysteryWindow:
    """Score range [lo, hi) that arms one special item worth `value`."""
    lo: int
    hi: int
    value: int


DEFAULT_MYSTERY_WINDOWS = (
    MysteryWindow(10, 11, 13),
    MysteryWindow(50, 70, 66),
    MysteryWindow(70, 79, 77),
    MysteryWindow(79, 100, 99),
)


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: int | None = None
    grid_size: int = 20
    device: str = "desktop"
    min_tick_ms: int = 50
    speed_step_ms: int = 1
    food_score: int = 10
    max_frame_ms: int = 250
    mystery: bool = False
    mystery_windows: Tuple[MysteryWindow, ...] = field(default=DEFAULT_MYSTERY_WINDOWS)

    # placement policy
    safe_margin: int = 3
    p_safe: float = 0.85
    p_near: float = 0.12
    placement_retries: int = 100

    def __post_init__(self):
        if self.device not in DEVICE_TICK_MS:
            raise ValueError(f"Unknown device class: {self.device}")
        if self.safe_margin < 2:
            raise ValueError("safe_margin must be at least 2")
        if self.grid_size < 2 * self.safe_margin + 1:
            raise ValueError(
                f"grid_size {self.grid_size} too small for safe_margin {self.safe_margin}"
            )
        if not (0.0 < self.p_safe and 0.0 <= self.p_near and self.p_safe + self.p_near < 1.0):
            raise ValueError("tier probabilities must leave a non-zero edge share")
        if not (0 < self.min_tick_ms <= self.base_tick_ms):
            raise ValueError("min_tick_ms must be in (0, base tick]")
        for w in self.mystery_windows:
            if w.lo >= w.hi:
                raise ValueError(f"empty mystery window: {w}")

    @property
    def base_tick_ms(self) -> int:
        return DEVICE_TICK_MS[self.device]
