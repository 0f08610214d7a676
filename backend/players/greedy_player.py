"""
Greedy autoplay - heads for the food along the shortest safe step.
"""

from typing import List

from domain.constants import DIRECTION_ORDER
from domain.engine import is_opposite
from domain.game_state import GameState
from domain.snake import next_head, will_collide
from .base import Player


def safe_directions(state: GameState) -> List[str]:
    """
    Directions that survive one more step, in encounter order.

    A reversal into the neck is never a candidate for a snake longer
    than one segment.
    """
    safe: List[str] = []
    for direction in DIRECTION_ORDER:
        if len(state.snake) > 1 and is_opposite(direction, state.direction):
            continue
        if not will_collide(state, direction):
            safe.append(direction)
    return safe


def distance_to_food(state: GameState, direction: str) -> int:
    """Manhattan distance from the head after moving in direction to the food (0 without food)."""
    if state.food is None:
        return 0
    x, y = next_head(state.head, direction)
    return abs(x - state.food[0]) + abs(y - state.food[1])


def pick_auto_direction(state: GameState) -> str:
    """
    Choose the safe direction closest to the food.

    Ties go to the committed direction, then to encounter order. With no
    safe option the committed direction is returned unchanged.
    """
    safe = safe_directions(state)
    if not safe:
        return state.direction

    # sorted() is stable, so equal keys keep encounter order
    ranked = sorted(
        safe,
        key=lambda d: (distance_to_food(state, d), d != state.direction),
    )
    return ranked[0]


class GreedyPlayer(Player):
    """
    Autoplay that always takes the greedy step towards the food.

    It only guarantees one step of safety; it can still trap itself.
    """

    def get_move(self, game_state: GameState) -> str:
        return pick_auto_direction(game_state)
