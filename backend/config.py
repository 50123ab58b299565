"""
Process configuration.

Board size and tick interval are read once at startup from the environment
(a local .env file is honoured) and can be overridden by command line flags.

Environment variables:
    SNAKE_BOARD_WIDTH: board width in cells (default 17)
    SNAKE_BOARD_HEIGHT: board height in cells (default 17)
    SNAKE_TICK_MS: tick interval in milliseconds (default 180)
    SNAKE_LOG_LEVEL: logging level for the CLI (default WARNING)
    SNAKE_LOG_FILE: write CLI logs to this file (the curses UI otherwise discards them)
"""

import os
from typing import Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_HEIGHT, DEFAULT_TICK_MS, DEFAULT_WIDTH
from domain.game_config import GameConfig

DEFAULT_LOG_LEVEL = "WARNING"


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    return os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[str]:
    return os.getenv("SNAKE_LOG_FILE") or None


def load_config(
    width: Optional[int] = None,
    height: Optional[int] = None,
    tick_ms: Optional[int] = None,
) -> GameConfig:
    """
    Build a GameConfig from explicit overrides, falling back to the environment.

    Raises:
        ValueError: if any value is malformed
    """
    load_dotenv()

    return GameConfig(
        width=width if width is not None else _int_from_env("SNAKE_BOARD_WIDTH", DEFAULT_WIDTH),
        height=height if height is not None else _int_from_env("SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT),
        tick_ms=tick_ms if tick_ms is not None else _int_from_env("SNAKE_TICK_MS", DEFAULT_TICK_MS),
    )
