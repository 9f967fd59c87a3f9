"""
Runtime settings for the Snake game.

Values come from the environment (a local .env file is loaded first) with
in-code defaults. The board size is fixed and is not a setting.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.errors import ConfigurationError

DEFAULT_TICK_MS = 200
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FILE = "snake.log"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass
class Settings:
    tick_ms: int = DEFAULT_TICK_MS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str = DEFAULT_LOG_FILE
    seed: Optional[int] = None

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


def load_settings(
    tick_ms: Optional[int] = None,
    log_level: Optional[str] = None,
    seed: Optional[int] = None,
) -> Settings:
    """
    Build Settings from explicit overrides, then environment, then defaults.

    Raises:
        ConfigurationError: if the tick interval is not a positive integer
            or the log level is unknown.
    """
    load_dotenv()

    if tick_ms is None:
        raw = os.getenv("SNAKE_TICK_MS", str(DEFAULT_TICK_MS))
        try:
            tick_ms = int(raw)
        except ValueError:
            raise ConfigurationError(f"SNAKE_TICK_MS must be an integer, got {raw!r}")
    if tick_ms <= 0:
        raise ConfigurationError(f"Tick interval must be positive, got {tick_ms} ms")

    log_level = (log_level or os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigurationError(f"Unknown log level: {log_level}")

    return Settings(
        tick_ms=tick_ms,
        log_level=log_level,
        log_file=os.getenv("SNAKE_LOG_FILE", DEFAULT_LOG_FILE),
        seed=seed,
    )


def configure_logging(settings: Settings):
    """Send logs to a file; curses owns the terminal while the game runs."""
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        filename=settings.log_file,
    )
