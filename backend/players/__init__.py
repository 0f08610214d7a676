"""
Player implementations for the snake simulation.

This module contains the player abstractions and implementations
that choose the direction queued before each step.
"""

from .base import Player
from .greedy_player import GreedyPlayer, pick_auto_direction, safe_directions
from .random_player import RandomPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'GreedyPlayer',
    'RandomPlayer',
    'pick_auto_direction',
    'safe_directions',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
