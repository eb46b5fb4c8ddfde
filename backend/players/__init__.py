"""
Player implementations for the snake simulation.

This module contains the input-source abstraction that feeds direction
requests to the game, and a random autopilot.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
