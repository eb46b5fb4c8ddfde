"""
Grid value types and toroidal movement for the snake simulation.
"""

from typing import NamedTuple


class Position(NamedTuple):
    """A tile on the board. (0, 0) is the top-left corner."""
    x: int
    y: int


class Direction(NamedTuple):
    """A unit step on the board. Up is negative y."""
    dx: int
    dy: int

    def opposite(self) -> "Direction":
        return Direction(-self.dx, -self.dy)

    @property
    def is_vertical(self) -> bool:
        return self.dy != 0


def step(position: Position, direction: Direction, width: int, height: int) -> Position:
    """
    Return the tile one step away from `position` in `direction`.

    The board has no edges: leaving one side re-enters from the opposite
    side, so the result always lies in [0, width) x [0, height).
    """
    return Position(
        (position.x + direction.dx) % width,
        (position.y + direction.dy) % height,
    )


def unwrap_delta(delta: int, size: int) -> int:
    """
    Collapse a one-tile delta measured across the seam back to -1/+1.

    Two adjacent tiles on opposite edges differ by size - 1 along that axis.
    """
    if delta == size - 1:
        return -1
    if delta == -(size - 1):
        return 1
    return delta
