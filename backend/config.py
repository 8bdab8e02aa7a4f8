"""
Runtime configuration for the terminal snake game.

Values come from the environment (a local .env file is loaded first) and
can be overridden from the command line:

    SNAKE_WIDTH, SNAKE_HEIGHT      board size including the wall (default 42x22)
    SNAKE_BASE_SPEED               starting ticks per second (default 4)
    SNAKE_NUM_APPLES               apples kept on the board (default 1)
    SNAKE_BOUNDARY                 'wrap' or 'solid' (default wrap)
    SNAKE_LOG_LEVEL                logging level name (default WARNING)
    SNAKE_LOG_FILE                 write logs to this file instead of stderr
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from domain.constants import (
    BOUNDARY_POLICIES, WRAP, MIN_DIMENSION,
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_BASE_SPEED, DEFAULT_NUM_APPLES,
)

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class GameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    base_speed: int = DEFAULT_BASE_SPEED
    num_apples: int = DEFAULT_NUM_APPLES
    boundary: str = WRAP
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    def validate(self) -> "GameConfig":
        """
        Check the configuration values.

        Raises:
            ValueError: If any value is out of range
        """
        if self.width < MIN_DIMENSION or self.height < MIN_DIMENSION:
            raise ValueError(
                f"Board must be at least {MIN_DIMENSION}x{MIN_DIMENSION}, "
                f"got {self.width}x{self.height}."
            )
        if self.base_speed < 1:
            raise ValueError(f"Base speed must be at least 1, got {self.base_speed}.")
        if self.num_apples < 1:
            raise ValueError(f"Number of apples must be at least 1, got {self.num_apples}.")
        if self.num_apples > (self.width - 2) * (self.height - 2) - 1:
            raise ValueError(
                f"{self.num_apples} apples do not fit on a {self.width}x{self.height} board."
            )
        if self.boundary not in BOUNDARY_POLICIES:
            available = ", ".join(sorted(BOUNDARY_POLICIES))
            raise ValueError(f"Unknown boundary policy '{self.boundary}'. Available: {available}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'.")
        return self


def _get_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from None


def load_config(env: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Build a GameConfig from environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        A validated GameConfig

    Raises:
        ValueError: If a variable is malformed or out of range
    """
    if env is None:
        env = os.environ

    config = GameConfig(
        width=_get_int(env, "SNAKE_WIDTH", DEFAULT_WIDTH),
        height=_get_int(env, "SNAKE_HEIGHT", DEFAULT_HEIGHT),
        base_speed=_get_int(env, "SNAKE_BASE_SPEED", DEFAULT_BASE_SPEED),
        num_apples=_get_int(env, "SNAKE_NUM_APPLES", DEFAULT_NUM_APPLES),
        boundary=(env.get("SNAKE_BOUNDARY") or WRAP).strip().lower(),
        log_level=(env.get("SNAKE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
        log_file=(env.get("SNAKE_LOG_FILE") or "").strip() or None,
    )
    return config.validate()


def setup_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    The terminal belongs to curses while a game runs, so a log file is the
    only way to see INFO/DEBUG output during play.
    """
    kwargs = {"level": level.upper(), "format": LOG_FORMAT}
    if log_file:
        kwargs["filename"] = log_file
    logging.basicConfig(**kwargs)
