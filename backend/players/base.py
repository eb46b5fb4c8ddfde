"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState
from domain.geometry import Direction


class Player:
    """
    Base class/interface for input sources.

    A player looks at a snapshot of the game once per frame and may request
    a new direction for the snake.
    """

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return a direction request given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of UP, DOWN, LEFT, RIGHT, or None to keep going straight
        """
        raise NotImplementedError
