"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, Optional, Tuple

from .constants import State
from .geometry import Direction, Position


class GameState:
    """
    A read-only snapshot of the simulation, handed to players and drivers.

    Attributes:
        state: current State of the state machine
        parts: tuple of (x, y) from tail to head
        food: position of the food, or None when there is none
        speed: tiles per second
        direction: the direction the next step will take
        width, height: board dimensions
    """

    __slots__ = ("state", "parts", "food", "speed", "direction", "width", "height")

    def __init__(
        self,
        state: State,
        parts: Tuple[Position, ...],
        food: Optional[Position],
        speed: int,
        direction: Direction,
        width: int,
        height: int,
    ):
        self.state = state
        self.parts = tuple(parts)
        self.food = food
        self.speed = speed
        self.direction = direction
        self.width = width
        self.height = height

    @property
    def head(self) -> Position:
        return self.parts[-1]

    @property
    def length(self) -> int:
        return len(self.parts)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the snapshot into plain JSON-friendly values.
        """
        return {
            "state": self.state.value,
            "parts": [list(p) for p in self.parts],
            "food": list(self.food) if self.food is not None else None,
            "speed": self.speed,
            "direction": list(self.direction),
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        food = tuple(self.food) if self.food is not None else None
        return (
            f"<GameState state={self.state.value}, length={len(self.parts)}, "
            f"head={tuple(self.head)}, food={food}, speed={self.speed}>"
        )
