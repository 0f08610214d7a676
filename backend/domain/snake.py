"""
Movement and collision primitives shared by the step function and players.
"""

from typing import Sequence, Tuple

from .constants import DIRECTION_VECTORS
from .game_state import GameState, Point


def next_head(head: Point, direction: str) -> Point:
    """Return the cell one unit from head in the given direction."""
    dx, dy = DIRECTION_VECTORS[direction]
    return (head[0] + dx, head[1] + dy)


def is_out_of_bounds(point: Point, width: int, height: int) -> bool:
    x, y = point
    return x < 0 or x >= width or y < 0 or y >= height


def collision_body(snake: Sequence[Point], eats_food: bool) -> Tuple[Point, ...]:
    """
    Cells the next head may not enter this step.

    When eating, the tail stays put so the whole body counts; otherwise the
    tail is about to vacate its cell and entering it is legal.
    """
    if eats_food:
        return tuple(snake)
    return tuple(snake[:-1])


def eats_food_at(state: GameState, point: Point) -> bool:
    return state.food is not None and point == state.food


def will_collide(state: GameState, direction: str) -> bool:
    """
    One-step lookahead: would moving in direction end the game?

    Uses the same wall and body rules as step() without building a new state.
    """
    head = next_head(state.head, direction)
    if is_out_of_bounds(head, state.width, state.height):
        return True
    return head in collision_body(state.snake, eats_food_at(state, head))
