"""
Tests for the player implementations.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, Position, State, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import Player, RandomPlayer


def make_state(parts, direction=RIGHT, food=None, width=10, height=10):
    return GameState(
        state=State.RUNNING,
        parts=tuple(Position(*p) for p in parts),
        food=Position(*food) if food else None,
        speed=5,
        direction=direction,
        width=width,
        height=height,
    )


class TestPlayer:
    """Tests for the Player interface."""

    def test_base_player_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Player().get_move(make_state([(5, 5)]))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_returns_valid_move(self):
        """RandomPlayer.get_move() returns one of the four directions."""
        player = RandomPlayer(seed=1)
        assert player.get_move(make_state([(5, 5)])) in VALID_MOVES

    def test_never_reverses(self):
        """The direction opposite to travel is never chosen."""
        player = RandomPlayer(seed=2)
        state = make_state([(4, 5), (5, 5)], direction=RIGHT)
        for _ in range(50):
            assert player.get_move(state) != LEFT

    def test_avoids_own_body(self):
        """Moves into the body are skipped when a safe move exists."""
        player = RandomPlayer(seed=3)
        # Head at (1, 1) travelling RIGHT; UP and RIGHT are body, DOWN is free
        body = [(3, 1), (2, 1), (2, 0), (1, 0), (0, 0), (0, 1), (1, 1)]
        state = make_state(body, direction=RIGHT)
        for _ in range(50):
            assert player.get_move(state) == DOWN

    def test_wraps_when_checking_safety(self):
        """Safety checks look across the board edge."""
        player = RandomPlayer(seed=4)
        # Head on the right edge moving UP; (0, 5) across the seam is body
        body = [(1, 5), (0, 5), (0, 6), (9, 6), (9, 5)]
        state = make_state(body, direction=UP)
        for _ in range(50):
            assert player.get_move(state) in (UP, LEFT)

    def test_takes_adjacent_food(self):
        """Food next to the head is taken."""
        player = RandomPlayer(seed=5)
        state = make_state([(5, 5)], direction=RIGHT, food=(5, 4))
        assert player.get_move(state) == UP

    def test_trapped_player_still_moves(self):
        """With no safe move a non-reversing move is still returned."""
        player = RandomPlayer(seed=6)
        body = [(5, 5), (1, 0), (2, 1), (1, 2), (0, 1), (1, 1)]
        state = make_state(body, direction=UP)
        move = player.get_move(state)
        assert move in (UP, LEFT, RIGHT)

    def test_seed_makes_choices_repeatable(self):
        """Two players with the same seed make the same choices."""
        state = make_state([(5, 5)])
        a = RandomPlayer(seed=42)
        b = RandomPlayer(seed=42)
        assert [a.get_move(state) for _ in range(20)] == [b.get_move(state) for _ in range(20)]
