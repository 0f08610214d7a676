"""
State transitions for the snake simulation core.

Every function here takes a GameState and returns a GameState; inputs are
never mutated. Inapplicable requests (unknown keys, stepping a finished
game) return the input state unchanged instead of raising.
"""

import logging
from typing import Any, Optional

from .constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    GAME_OVER,
    INITIAL_DIRECTION,
    INITIAL_LENGTH,
    KEY_ALIASES,
    MIN_HEIGHT,
    MIN_WIDTH,
    OPPOSITES,
    RUNNING,
    VALID_MOVES,
)
from .food import Rng, pick_food
from .game_state import GameState
from .snake import collision_body, eats_food_at, is_out_of_bounds, next_head

logger = logging.getLogger(__name__)


def normalize_direction(value: Any) -> Optional[str]:
    """Map a direction name or raw key name to a direction, or None to ignore it."""
    if not isinstance(value, str) or not value:
        return None
    if value in VALID_MOVES:
        return value
    return KEY_ALIASES.get(value)


def is_opposite(a: str, b: str) -> bool:
    return OPPOSITES.get(a) == b


def _validate_board(width: Any, height: Any) -> None:
    for name, value, minimum in (("width", width, MIN_WIDTH), ("height", height, MIN_HEIGHT)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Board {name} must be an integer, got {value!r}")
        if value < minimum:
            raise ValueError(f"Board {name} must be at least {minimum}, got {value}")


def create_initial_state(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    rng: Optional[Rng] = None,
) -> GameState:
    """
    Build a fresh game: a 3-segment snake centred on the board, heading right.

    Raises:
        ValueError: if the board is too small to hold the initial snake.
    """
    _validate_board(width, height)

    start_x = width // 2
    start_y = height // 2
    snake = tuple((start_x - i, start_y) for i in range(INITIAL_LENGTH))

    return GameState(
        width=width,
        height=height,
        snake=snake,
        direction=INITIAL_DIRECTION,
        pending_direction=None,
        food=pick_food(width, height, snake, rng),
        score=0,
        status=RUNNING,
    )


def queue_direction(state: GameState, value: Any) -> GameState:
    """
    Request a turn for the next step.

    A reversal is checked against the pending direction when one exists, so
    two opposite inputs within one tick cannot both apply.
    """
    requested = normalize_direction(value)
    if requested is None or state.status != RUNNING:
        return state

    base = state.pending_direction or state.direction
    if len(state.snake) > 1 and is_opposite(requested, base):
        return state

    if requested == state.pending_direction:
        return state
    return state.evolve(pending_direction=requested)


def _game_over(state: GameState, direction: str, reason: str) -> GameState:
    logger.debug("Game over (%s) at %s, score %d", reason, state.head, state.score)
    return state.evolve(direction=direction, pending_direction=None, status=GAME_OVER)


def step(state: GameState, rng: Optional[Rng] = None) -> GameState:
    """
    Advance the game by one tick.

    Order matters: whether the snake eats is decided before the collision
    body is built, because a growing snake keeps its tail cell.
    """
    if state.status != RUNNING:
        return state

    direction = state.pending_direction or state.direction
    head = next_head(state.head, direction)

    if is_out_of_bounds(head, state.width, state.height):
        return _game_over(state, direction, "wall")

    eats_food = eats_food_at(state, head)
    if head in collision_body(state.snake, eats_food):
        return _game_over(state, direction, "self")

    if eats_food:
        snake = (head,) + state.snake
        food = pick_food(state.width, state.height, snake, rng)
        score = state.score + 1
    else:
        snake = (head,) + state.snake[:-1]
        food = state.food
        score = state.score

    return GameState(
        width=state.width,
        height=state.height,
        snake=snake,
        direction=direction,
        pending_direction=None,
        food=food,
        score=score,
        status=RUNNING,
    )


def restart(state: GameState, rng: Optional[Rng] = None) -> GameState:
    """Start over on a board of the same size; everything else is discarded."""
    return create_initial_state(width=state.width, height=state.height, rng=rng)
