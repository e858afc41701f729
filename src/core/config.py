"""
RouletteSpin - Configuration
============================

Central configuration from environment variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path


ROOT_DIR = Path(__file__).parent.parent.parent
LOGS_DIR = Path(os.getenv("ROULETTE_LOGS_DIR", str(ROOT_DIR / "logs")))

LOGS_DIR.mkdir(parents=True, exist_ok=True)


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_env_float(key: str, default: float) -> float:
    """Get environment variable as float with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as bool (1/true/yes/on)."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Config:
    """Roulette renderer configuration from environment variables."""

    # Canvas
    CANVAS_WIDTH: int = _get_env_int("ROULETTE_CANVAS_WIDTH", 400)
    CANVAS_HEIGHT: int = _get_env_int("ROULETTE_CANVAS_HEIGHT", 400)

    # Timing (frames)
    FRAME_DELAY_MS: int = _get_env_int("ROULETTE_FRAME_DELAY_MS", 50)
    SPIN_FRAMES: int = _get_env_int("ROULETTE_SPIN_FRAMES", 60)
    DECELERATION_FRAMES: int = _get_env_int("ROULETTE_DECELERATION_FRAMES", 30)
    SETTLE_FRAMES: int = _get_env_int("ROULETTE_SETTLE_FRAMES", 20)

    # Motion (radians per frame)
    WHEEL_SPEED: float = _get_env_float("ROULETTE_WHEEL_SPEED", 0.12)
    BALL_SPEED: float = _get_env_float("ROULETTE_BALL_SPEED", 0.30)
    DECELERATION_CURVE: str = os.getenv("ROULETTE_DECELERATION_CURVE", "linear")

    # GIF encoding
    PALETTE_COLORS: int = _get_env_int("ROULETTE_PALETTE_COLORS", 256)
    OPTIMIZE_GIF: bool = _get_env_bool("ROULETTE_OPTIMIZE_GIF", False)


config = Config()
