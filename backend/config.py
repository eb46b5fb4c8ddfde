"""
Runtime settings for the headless snake driver.

Values come from the environment, optionally seeded from a .env file.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Default board matches a 480x480 window of 12px tiles
DEFAULT_FIELD_WIDTH = 40
DEFAULT_FIELD_HEIGHT = 40
DEFAULT_FRAME_MS = 16
DEFAULT_MAX_FRAMES = 20000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class Settings:
    field_width: int = DEFAULT_FIELD_WIDTH
    field_height: int = DEFAULT_FIELD_HEIGHT
    seed: Optional[int] = None
    frame_ms: int = DEFAULT_FRAME_MS
    max_frames: int = DEFAULT_MAX_FRAMES
    log_level: str = DEFAULT_LOG_LEVEL


def _get_int(name: str, default: Optional[int], minimum: int = 1) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env_file: Optional path to a .env file. Variables already set in the
                  environment take precedence over the file.

    Returns:
        The resolved Settings

    Raises:
        ValueError: if a variable is set to something unusable
    """
    load_dotenv(env_file)

    return Settings(
        field_width=_get_int("SNAKE_FIELD_WIDTH", DEFAULT_FIELD_WIDTH),
        field_height=_get_int("SNAKE_FIELD_HEIGHT", DEFAULT_FIELD_HEIGHT),
        seed=_get_int("SNAKE_SEED", None, minimum=0),
        frame_ms=_get_int("SNAKE_FRAME_MS", DEFAULT_FRAME_MS),
        max_frames=_get_int("SNAKE_MAX_FRAMES", DEFAULT_MAX_FRAMES),
        log_level=(os.getenv("SNAKE_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper(),
    )
