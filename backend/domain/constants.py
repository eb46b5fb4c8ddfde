"""
Game constants for the snake simulation.
"""

from enum import Enum

from .geometry import Direction

# Movement directions
UP = Direction(0, -1)
DOWN = Direction(0, 1)
LEFT = Direction(-1, 0)
RIGHT = Direction(1, 0)
VALID_MOVES = (UP, DOWN, LEFT, RIGHT)

# Speed ramp, in tiles per second
INITIAL_SPEED = 5
MAX_SPEED = 30


class State(Enum):
    START = "start"
    RUNNING = "running"
    PAUSED = "paused"
    LOSS = "loss"
    WIN = "win"
    QUIT = "quit"


# States the game only leaves through reset()
TERMINAL_STATES = frozenset({State.LOSS, State.WIN, State.QUIT})


class HitTarget(Enum):
    """What the head ran into during one movement batch."""
    NONE = "none"
    SNAKE = "snake"
    FOOD = "food"
