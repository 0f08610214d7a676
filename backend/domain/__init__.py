"""
Domain entities and rules for the snake simulation core.

This module contains the pure state-transition core, independent of any
driver, rendering or input device concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, DIRECTION_ORDER, DIRECTION_VECTORS,
    KEY_ALIASES, RUNNING, GAME_OVER, DEFAULT_WIDTH, DEFAULT_HEIGHT,
)
from .game_state import GameState, Point
from .food import pick_food, empty_cells
from .snake import next_head, is_out_of_bounds, collision_body, will_collide
from .engine import (
    normalize_direction,
    is_opposite,
    create_initial_state,
    queue_direction,
    step,
    restart,
)

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'DIRECTION_ORDER',
    'DIRECTION_VECTORS', 'KEY_ALIASES', 'RUNNING', 'GAME_OVER',
    'DEFAULT_WIDTH', 'DEFAULT_HEIGHT',
    'GameState', 'Point',
    'pick_food', 'empty_cells',
    'next_head', 'is_out_of_bounds', 'collision_body', 'will_collide',
    'normalize_direction', 'is_opposite', 'create_initial_state',
    'queue_direction', 'step', 'restart',
]
