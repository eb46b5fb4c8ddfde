"""
Tests for main.py - the headless driver.

These tests run whole games on a simulated clock.
"""

import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import run_simulation, main
from domain import Game, State, RIGHT
from players import Player, RandomPlayer


class StraightPlayer(Player):
    """Never asks for a turn."""

    def __init__(self):
        self.calls = 0

    def get_move(self, game_state):
        self.calls += 1
        return None


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("SNAKE_FIELD_WIDTH", "SNAKE_FIELD_HEIGHT", "SNAKE_SEED",
                 "SNAKE_FRAME_MS", "SNAKE_MAX_FRAMES", "SNAKE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep load_dotenv() from finding a stray .env file
    monkeypatch.chdir(tmp_path)


class TestRunSimulation:
    """Tests for run_simulation()."""

    def test_starts_game_and_plays_frames(self):
        """The driver starts a fresh game and stops after max_frames."""
        game = Game(4, 4, seed=0)
        player = StraightPlayer()
        result = run_simulation(game, player, frame_ms=200, max_frames=10)

        assert player.calls == 10
        assert result["state"] == "running"
        assert result["frames"] == 10
        assert result["elapsed_ms"] == 2000
        assert result["score"] == result["length"] - 1
        assert game.state == State.RUNNING

    def test_stops_on_loss(self):
        """The driver stops as soon as the game is over."""
        game = Game(5, 5, seed=0)
        game.toggle_pause(0)
        game.set_board([(2, 1), (1, 1), (1, 0), (0, 0), (0, 1)], RIGHT, food=(4, 4))

        result = run_simulation(game, StraightPlayer(), frame_ms=200, max_frames=100)
        assert result["state"] == "loss"
        assert result["frames"] == 1
        assert result["length"] == 5

    def test_resumes_paused_game(self):
        """A paused game is resumed at the starting clock value."""
        game = Game(6, 6, seed=0)
        game.toggle_pause(0)
        game.set_board([(0, 0)], RIGHT, food=(5, 5))
        game.toggle_pause(0)
        assert game.state == State.PAUSED

        result = run_simulation(game, StraightPlayer(), frame_ms=200, max_frames=2, start_ms=1000)
        assert result["state"] == "running"
        assert game.parts == [(2, 0)]

    def test_finished_game_is_not_replayed(self):
        """A game already over plays no frames."""
        game = Game(5, 5, seed=0)
        game.quit()
        result = run_simulation(game, StraightPlayer(), frame_ms=16, max_frames=10)
        assert result["state"] == "quit"
        assert result["frames"] == 0

    def test_rejects_non_positive_frame(self):
        with pytest.raises(ValueError):
            run_simulation(Game(5, 5), StraightPlayer(), frame_ms=0)

    def test_seeded_runs_are_repeatable(self):
        """Same seeds give the same game."""
        results = []
        for _ in range(2):
            game = Game(8, 8, seed=11)
            results.append(run_simulation(game, RandomPlayer(seed=11), frame_ms=33, max_frames=500))
        assert results[0] == results[1]


class TestMain:
    """Tests for the command line entry point."""

    def test_main_with_arguments(self, capsys):
        result = main(["--width", "8", "--height", "6", "--seed", "3", "--max-frames", "50"])
        assert result["frames"] <= 50
        assert result["state"] in ("running", "loss", "win")
        assert "Simulation Result Summary" in capsys.readouterr().out

    def test_main_reads_defaults_from_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_MAX_FRAMES", "7")
        monkeypatch.setenv("SNAKE_SEED", "5")
        result = main([])
        assert result["frames"] <= 7
