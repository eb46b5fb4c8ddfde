"""
Domain entities for the toroidal snake simulation.

This module contains the game core, independent of any window, input
device or clock.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    INITIAL_SPEED, MAX_SPEED,
    State, HitTarget, TERMINAL_STATES,
)
from .geometry import Position, Direction, step
from .snake import Snake
from .game_state import GameState
from .game import Game

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'INITIAL_SPEED', 'MAX_SPEED',
    'State', 'HitTarget', 'TERMINAL_STATES',
    'Position', 'Direction', 'step',
    'Snake',
    'GameState',
    'Game',
]
