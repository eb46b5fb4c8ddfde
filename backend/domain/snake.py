"""
Snake entity for the game engine.
"""

from collections import deque
from itertools import islice
from typing import Iterable, List

from .geometry import Position


class Snake:
    """
    Represents the snake body on the board.

    Attributes:
        positions: deque of (x, y) from tail at index 0 to head at the end
    """

    def __init__(self, positions: Iterable[Position]):
        self.positions = deque(Position(*p) for p in positions)

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def head(self) -> Position:
        """Return the head position (last element)."""
        if not self.positions:
            raise IndexError("Snake has no segments")
        return self.positions[-1]

    @property
    def tail(self) -> Position:
        """Return the tail position (first element)."""
        return self.positions[0]

    def contains(self, position: Position, skip_tail: int = 0, skip_head: int = 0) -> bool:
        """
        Check whether `position` is occupied by the body.

        Args:
            position: Tile to look for
            skip_tail: Number of segments to ignore at the tail end
            skip_head: Number of segments to ignore at the head end

        Returns:
            True if one of the remaining segments sits on `position`
        """
        end = len(self.positions) - skip_head
        if end <= skip_tail:
            return False
        return position in islice(self.positions, skip_tail, end)

    def advance(self, new_head: Position) -> None:
        self.positions.append(new_head)

    def trim(self, count: int) -> None:
        """Drop `count` segments from the tail."""
        for _ in range(count):
            self.positions.popleft()

    def grow_tail(self, new_tail: Position) -> None:
        self.positions.appendleft(new_tail)

    def to_list(self) -> List[Position]:
        return list(self.positions)
