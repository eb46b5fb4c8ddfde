"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import VALID_MOVES
from domain.game_state import GameState
from domain.geometry import Direction, step
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids running into its own body.

    Turning around is never offered, and the tail tile counts as free since
    it moves away on the same step.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        head = game_state.head
        body = game_state.parts[1:]
        current = game_state.direction

        candidates = [d for d in VALID_MOVES if d != current.opposite()]

        safe_moves: List[Direction] = []
        for move in candidates:
            target = step(head, move, game_state.width, game_state.height)
            if target == game_state.food:
                return move
            if target in body:
                continue
            safe_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not safe_moves:
            return self._rng.choice(candidates)

        return self._rng.choice(safe_moves)
