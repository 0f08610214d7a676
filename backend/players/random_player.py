"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from domain.food import Rng
from domain.game_state import GameState
from .base import Player
from .greedy_player import safe_directions


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.

    The randomness source is injectable (a callable returning a float in
    [0, 1)) so runs can be reproduced.
    """

    def __init__(self, name: Optional[str] = None, rng: Optional[Rng] = None):
        super().__init__(name)
        self.rng = rng if callable(rng) else random.random

    def get_move(self, game_state: GameState) -> str:
        valid_moves = safe_directions(game_state)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction

        index = int(self.rng() * len(valid_moves))
        return valid_moves[min(index, len(valid_moves) - 1)]
