"""
GameState entity - an immutable snapshot of the game at a point in time.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

from .constants import RUNNING, VALID_MOVES, VALID_STATUSES

Point = Tuple[int, int]


def _to_point(raw: Sequence[int]) -> Point:
    x, y = raw
    return (int(x), int(y))


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of a single-snake game.

    States are never mutated; every transition builds a new instance.
    The body is held as a tuple so two states can never share a mutable
    segment list.

    Attributes:
        width, height: board dimensions, preserved across restart
        snake: tuple of (x, y) from head at index 0 to tail at the end
        direction: committed direction (direction of the last move)
        pending_direction: queued direction applied on the next step
        food: (x, y) of the food, or None when the board is full
        score: number of food items eaten
        status: 'running' or 'game_over'
    """

    width: int
    height: int
    snake: Tuple[Point, ...]
    direction: str
    pending_direction: Optional[str] = None
    food: Optional[Point] = None
    score: int = 0
    status: str = RUNNING

    def __post_init__(self):
        # Accept any sequence of pairs but always store a tuple of tuples.
        object.__setattr__(self, "snake", tuple(_to_point(p) for p in self.snake))
        if self.food is not None:
            object.__setattr__(self, "food", _to_point(self.food))

    @property
    def head(self) -> Point:
        """Return the head position (first element)."""
        return self.snake[0]

    @property
    def is_running(self) -> bool:
        return self.status == RUNNING

    def evolve(self, **changes) -> "GameState":
        """Return a copy of this state with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation; points become [x, y] lists."""
        return {
            "width": self.width,
            "height": self.height,
            "snake": [list(p) for p in self.snake],
            "direction": self.direction,
            "pending_direction": self.pending_direction,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "status": self.status,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameState":
        """
        Rebuild a state from the output of to_dict().

        Raises:
            ValueError: if required keys are missing or values are invalid.
        """
        try:
            snake = [_to_point(p) for p in data["snake"]]
            food = data.get("food")
            state = cls(
                width=int(data["width"]),
                height=int(data["height"]),
                snake=snake,
                direction=data["direction"],
                pending_direction=data.get("pending_direction"),
                food=_to_point(food) if food is not None else None,
                score=int(data.get("score", 0)),
                status=data.get("status", RUNNING),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid game state data: {e}") from e

        if not state.snake:
            raise ValueError("Invalid game state data: snake must not be empty")
        if state.direction not in VALID_MOVES:
            raise ValueError(f"Invalid game state data: unknown direction {state.direction!r}")
        if state.pending_direction is not None and state.pending_direction not in VALID_MOVES:
            raise ValueError(
                f"Invalid game state data: unknown pending direction {state.pending_direction!r}"
            )
        if state.status not in VALID_STATUSES:
            raise ValueError(f"Invalid game state data: unknown status {state.status!r}")
        return state

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        H = snake head
        Rows run top to bottom (y = 0 first) with x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.snake):
            if not (0 <= x < self.width and 0 <= y < self.height):
                continue
            board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height} status={self.status}, "
            f"head={self.head if self.snake else None}, length={len(self.snake)}, "
            f"food={self.food}, score={self.score}>"
        )
