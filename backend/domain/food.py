"""
Food placement over the free cells of the board.
"""

import logging
import math
import random
from typing import Callable, Iterable, List, Optional

from .game_state import Point

logger = logging.getLogger(__name__)

Rng = Callable[[], float]


def empty_cells(width: int, height: int, snake: Iterable[Point]) -> List[Point]:
    """Return every cell not covered by the snake, row by row (y outer, x inner)."""
    occupied = set(snake)
    return [
        (x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in occupied
    ]


def pick_food(
    width: int,
    height: int,
    snake: Iterable[Point],
    rng: Optional[Rng] = None,
) -> Optional[Point]:
    """
    Pick a free cell for the next piece of food.

    Args:
        width, height: board dimensions
        snake: occupied cells
        rng: callable returning a float in [0, 1); defaults to random.random

    Returns:
        The chosen (x, y), or None when the snake covers the whole board.
    """
    cells = empty_cells(width, height, snake)
    if not cells:
        logger.debug("No free cell left on %dx%d board", width, height)
        return None

    random_fraction = rng if callable(rng) else random.random
    index = math.floor(random_fraction() * len(cells))
    return cells[min(max(index, 0), len(cells) - 1)]
