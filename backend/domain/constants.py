"""
Game constants and lookup tables for the snake simulation core.
"""

from types import MappingProxyType

# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_MOVES = frozenset({UP, DOWN, LEFT, RIGHT})

# Encounter order used wherever candidates are scanned
DIRECTION_ORDER = (UP, DOWN, LEFT, RIGHT)

# Unit displacement per direction; y grows downward
DIRECTION_VECTORS = MappingProxyType({
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
})

OPPOSITES = MappingProxyType({
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
})

# Raw key names accepted as directional input
KEY_ALIASES = MappingProxyType({
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "w": UP,
    "W": UP,
    "s": DOWN,
    "S": DOWN,
    "a": LEFT,
    "A": LEFT,
    "d": RIGHT,
    "D": RIGHT,
})

# Game status
RUNNING = "running"
GAME_OVER = "game_over"
VALID_STATUSES = frozenset({RUNNING, GAME_OVER})

# Board settings
DEFAULT_WIDTH = 16
DEFAULT_HEIGHT = 16
INITIAL_LENGTH = 3
INITIAL_DIRECTION = RIGHT

# Smallest board that fits the initial snake: head at width // 2 needs
# two free cells to its left.
MIN_WIDTH = 4
MIN_HEIGHT = 1
