# placement.py
"""
Food / special-item placement.

Coordinates are biased toward the interior of the board. Each axis is drawn
independently from three tiers:

  A  (p_safe)            uniform in the safe zone, >= safe_margin from both edges
  B  (p_near)            the near-edge band, distance 2 .. safe_margin - 1
  C  (1 - p_safe - p_near) the ring just inside the wall, distance 1

Distance 0 (the wall ring) is never produced by the sampler.
"""
from __future__ import annotations
import logging
from typing import Iterable, List, Optional

import numpy as np  # type: ignore

from .config import Config
from .state import Coord, Grid

logger = logging.getLogger(__name__)


def near_edge_band(size: int, margin: int) -> List[int]:
    low = list(range(2, margin))
    high = [size - 1 - d for d in range(2, margin)]
    return low + high


def sample_axis(rng: np.random.Generator, size: int, cfg: Config) -> int:
    k = cfg.safe_margin
    roll = rng.random()
    if roll < cfg.p_safe:
        return int(rng.integers(k, size - k))
    if roll < cfg.p_safe + cfg.p_near:
        band = near_edge_band(size, k)
        if band:
            return band[int(rng.integers(len(band)))]
    # outermost non-wall ring
    return 1 if rng.random() < 0.5 else size - 2


def sample_coord(rng: np.random.Generator, size: int, cfg: Config) -> Coord:
    return (sample_axis(rng, size, cfg), sample_axis(rng, size, cfg))


def _pick_free(rng: np.random.Generator, grid: Grid, blocked: set, margins: Iterable[int]) -> Optional[Coord]:
    """Uniform pick among free cells, trying each inset margin in turn."""
    for margin in margins:
        free = [c for c in grid.inset_cells(margin) if c not in blocked]
        if free:
            return free[int(rng.integers(len(free)))]
    return None


def _search(rng: np.random.Generator, grid: Grid, blocked: set, cfg: Config) -> Optional[Coord]:
    for _ in range(cfg.placement_retries):
        cand = sample_coord(rng, grid.size, cfg)
        if cand not in blocked:
            return cand
    return None


def place_food(
    snake: List[Coord], grid: Grid, rng: np.random.Generator, cfg: Config, avoid: Iterable[Coord] = ()
) -> Coord:
    blocked = set(snake)
    blocked.update(avoid)
    cell = _search(rng, grid, blocked, cfg)
    if cell is not None:
        return cell

    logger.debug("food search exhausted after %d tries, scanning free cells", cfg.placement_retries)
    cell = _pick_free(rng, grid, blocked, (cfg.safe_margin, 1, 0))
    if cell is not None:
        return cell

    # board is full: any inset cell will do
    k = cfg.safe_margin
    return (int(rng.integers(k, grid.size - k)), int(rng.integers(k, grid.size - k)))


def place_special(
    snake: List[Coord], food: Coord, grid: Grid, rng: np.random.Generator, cfg: Config
) -> Coord:
    blocked = set(snake)
    blocked.add(food)
    cell = _search(rng, grid, blocked, cfg)
    if cell is not None:
        return cell

    logger.debug("special item search exhausted after %d tries", cfg.placement_retries)
    cell = _pick_free(rng, grid, blocked, (0,))
    if cell is not None:
        return cell
    return (int(rng.integers(grid.size)), int(rng.integers(grid.size)))
