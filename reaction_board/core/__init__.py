"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    DATABASE_URL,
    DB_RESET,
    LEADERBOARD_TZ,
    LOG_LEVEL,
    REACTION_BOARD_URL,
    SERVER_HOST,
    SERVER_PORT,
)
from .database import build_engine, engine, get_session
from .logging import configure_logging
from .time import TimeFilter, as_utc, utcnow, window_start

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "LEADERBOARD_TZ",
    "LOG_LEVEL",
    "REACTION_BOARD_URL",
    "SERVER_HOST",
    "SERVER_PORT",
    "TimeFilter",
    "as_utc",
    "build_engine",
    "configure_logging",
    "engine",
    "get_session",
    "utcnow",
    "window_start",
]
