import argparse
import json
import logging
from typing import Any, Dict, Optional

from config import load_settings
from domain import Game, State, TERMINAL_STATES
from players import Player, RandomPlayer

logger = logging.getLogger(__name__)


def run_simulation(
    game: Game,
    player: Player,
    frame_ms: int = 16,
    max_frames: int = 20000,
    start_ms: int = 0,
) -> Dict[str, Any]:
    """
    Plays one game on a simulated clock.

    Each frame the clock advances by `frame_ms`, the player may request a
    direction, and the game is updated, the same order a windowed main loop
    uses (poll input, then update). The game is started from START or PAUSED
    before the first frame.

    Args:
        game: The game to drive.
        player: Input source asked for a move every frame.
        frame_ms: Simulated milliseconds per frame.
        max_frames: Upper bound on frames before giving up.
        start_ms: Clock value at the first frame.

    Returns:
        A dictionary summarizing the run (final state, length, score, speed,
        frames played and simulated time).
    """
    if frame_ms <= 0:
        raise ValueError(f"frame_ms must be positive, got {frame_ms}")

    now_ms = start_ms
    if game.state in (State.START, State.PAUSED):
        game.toggle_pause(now_ms)

    frames = 0
    while frames < max_frames and game.state not in TERMINAL_STATES:
        now_ms += frame_ms
        frames += 1

        move = player.get_move(game.snapshot())
        if move is not None:
            game.try_change_direction(move)
        game.update(now_ms)

    length = len(game.parts)
    logger.info(
        "Finished after %d frames (%d ms): state=%s length=%d speed=%d",
        frames, now_ms - start_ms, game.state.value, length, game.speed,
    )
    return {
        "state": game.state.value,
        "length": length,
        "score": length - 1,
        "speed": game.speed,
        "frames": frames,
        "elapsed_ms": now_ms - start_ms,
    }


# -------------------------------
# Example Usage (Main Entry Point)
# -------------------------------
def main(argv: Optional[list] = None) -> Dict[str, Any]:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="Run a headless toroidal snake game with a random autopilot."
    )
    parser.add_argument("--width", type=int, default=settings.field_width,
                        help="Width of the board in tiles")
    parser.add_argument("--height", type=int, default=settings.field_height,
                        help="Height of the board in tiles")
    parser.add_argument("--seed", type=int, default=settings.seed,
                        help="Seed for food placement and the autopilot")
    parser.add_argument("--frame-ms", type=int, default=settings.frame_ms,
                        help="Simulated milliseconds per frame")
    parser.add_argument("--max-frames", type=int, default=settings.max_frames,
                        help="Maximum number of frames to play")
    parser.add_argument("--log-level", type=str, default=settings.log_level,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(message)s",
    )

    game = Game(args.width, args.height, seed=args.seed)
    player = RandomPlayer(seed=args.seed)
    logger.info("Playing on a %dx%d board (seed=%s)", args.width, args.height, args.seed)

    result = run_simulation(game, player, frame_ms=args.frame_ms, max_frames=args.max_frames)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
