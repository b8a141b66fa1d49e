"""
Tests for placement.py - interior-biased sampling and exclusion rules.
"""

from collections import Counter

import numpy as np
import pytest

from snake_arcade.config import Config
from snake_arcade.placement import (
    near_edge_band,
    place_food,
    place_special,
    sample_axis,
    sample_coord,
)
from snake_arcade.state import Grid


class TestConfigValidation:
    def test_grid_too_small_for_margin(self):
        with pytest.raises(ValueError):
            Config(grid_size=6, safe_margin=3)

    def test_margin_must_leave_a_band(self):
        with pytest.raises(ValueError):
            Config(safe_margin=1)

    def test_edge_share_must_be_positive(self):
        with pytest.raises(ValueError):
            Config(p_safe=0.5, p_near=0.5)

    def test_unknown_device(self):
        with pytest.raises(ValueError):
            Config(device="toaster")


class TestGrid:
    def test_contains(self):
        grid = Grid(20)
        assert grid.contains((0, 0))
        assert grid.contains((19, 19))
        assert not grid.contains((20, 5))
        assert not grid.contains((5, -1))

    def test_inset_cells(self):
        cells = list(Grid(5).inset_cells(2))
        assert cells == [(2, 2)]


class TestAxisSampling:
    def test_near_edge_band(self):
        assert near_edge_band(20, 3) == [2, 17]
        assert near_edge_band(20, 4) == [2, 3, 17, 16]
        assert near_edge_band(20, 2) == []

    def test_wall_ring_never_sampled(self, rng):
        cfg = Config()
        values = [sample_axis(rng, 20, cfg) for _ in range(20_000)]
        assert min(values) >= 1
        assert max(values) <= 18

    def test_interior_is_favoured_but_edges_reachable(self, rng):
        cfg = Config()
        counts = Counter(sample_axis(rng, 20, cfg) for _ in range(20_000))
        inside = sum(n for v, n in counts.items() if 3 <= v < 17)
        assert inside / 20_000 > 0.8
        # residual, non-zero probability next to the wall
        assert counts[1] > 0
        assert counts[18] > 0
        assert counts[2] > 0
        assert counts[17] > 0

    def test_axes_sampled_independently(self, rng):
        cfg = Config()
        coords = {sample_coord(rng, 20, cfg) for _ in range(5_000)}
        xs = {x for x, _ in coords}
        ys = {y for _, y in coords}
        assert len(xs) > 10
        assert len(ys) > 10


class TestPlaceFood:
    def test_food_avoids_snake(self, rng):
        cfg = Config()
        grid = Grid(20)
        snake = [(x, 10) for x in range(3, 17)]
        for _ in range(500):
            assert place_food(snake, grid, rng, cfg) not in snake

    def test_food_avoids_extra_cells(self, rng):
        cfg = Config()
        grid = Grid(20)
        snake = [(10, 10), (9, 10), (8, 10)]
        for _ in range(200):
            assert place_food(snake, grid, rng, cfg, avoid=[(5, 5)]) != (5, 5)

    def test_near_full_board_terminates_on_free_cell(self, rng):
        """Only a wall cell is left: the fallback scan still finds it."""
        cfg = Config(placement_retries=10)
        grid = Grid(20)
        snake = [c for c in grid.cells() if c != (0, 0)]
        assert place_food(snake, grid, rng, cfg) == (0, 0)

    def test_full_board_still_terminates(self, rng):
        cfg = Config(placement_retries=10)
        grid = Grid(20)
        snake = list(grid.cells())
        x, y = place_food(snake, grid, rng, cfg)
        assert 3 <= x < 17 and 3 <= y < 17

    def test_seeded_placement_is_reproducible(self):
        cfg = Config()
        grid = Grid(20)
        snake = [(10, 10), (9, 10), (8, 10)]
        a = [place_food(snake, grid, np.random.default_rng(7), cfg) for _ in range(3)]
        b = [place_food(snake, grid, np.random.default_rng(7), cfg) for _ in range(3)]
        assert a == b


class TestPlaceSpecial:
    def test_special_avoids_snake_and_food(self, rng):
        cfg = Config()
        grid = Grid(20)
        snake = [(10, 10), (9, 10), (8, 10)]
        food = (11, 10)
        for _ in range(500):
            cell = place_special(snake, food, grid, rng, cfg)
            assert cell != food
            assert cell not in snake

    def test_last_free_cell_is_used(self, rng):
        cfg = Config(placement_retries=5)
        grid = Grid(20)
        snake = [c for c in grid.cells() if c not in ((5, 5), (6, 6))]
        assert place_special(snake, (5, 5), grid, rng, cfg) == (6, 6)

    def test_full_board_falls_back_to_any_cell(self, rng):
        cfg = Config(placement_retries=5)
        grid = Grid(20)
        snake = [c for c in grid.cells() if c != (5, 5)]
        assert grid.contains(place_special(snake, (5, 5), grid, rng, cfg))
