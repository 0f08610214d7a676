"""
Tests for domain.food - food placement.
"""

import os
import sys

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.food import empty_cells, pick_food


class TestEmptyCells:
    """Tests for empty_cells()."""

    def test_row_major_order(self):
        """Free cells are listed row by row, x ascending within a row."""
        cells = empty_cells(3, 2, [(0, 0)])
        assert cells == [(1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]

    def test_empty_snake_lists_every_cell(self):
        assert len(empty_cells(4, 3, [])) == 12


class TestPickFood:
    """Tests for pick_food()."""

    def test_index_is_floor_of_fraction(self):
        """The rng fraction selects floor(rng() * free_count)."""
        snake = [(0, 0)]
        assert pick_food(3, 2, snake, rng=lambda: 0) == (1, 0)
        assert pick_food(3, 2, snake, rng=lambda: 0.5) == (0, 1)
        assert pick_food(3, 2, snake, rng=lambda: 0.99) == (2, 1)

    def test_returns_none_when_no_empty_cells(self):
        """A fully covered board has nowhere to put food."""
        food = pick_food(2, 2, [(0, 0), (1, 0), (0, 1), (1, 1)])
        assert food is None

    def test_never_on_snake(self):
        """Food is always placed on a free cell."""
        snake = [(x, 0) for x in range(5)] + [(4, y) for y in range(1, 5)]
        for _ in range(50):
            assert pick_food(5, 5, snake) not in snake

    def test_out_of_range_fraction_is_clamped(self):
        """An rng returning 1.0 still picks the last free cell."""
        assert pick_food(3, 2, [(0, 0)], rng=lambda: 1.0) == (2, 1)

    def test_non_callable_rng_falls_back_to_default(self):
        """A missing rng uses the process-wide generator."""
        food = pick_food(3, 3, [(1, 1)], rng=None)
        assert food is not None and food != (1, 1)
