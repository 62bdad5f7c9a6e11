"""Application settings and environment helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv(override=False)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer") from exc


def _env_zone(name: str) -> Optional[ZoneInfo]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise RuntimeError(f"{name} must be an IANA time zone name, got {raw!r}") from exc


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


PROJECT_ROOT = Path(__file__).resolve().parents[2]


# Server ----------------------------------------------------------------------
SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = _env_int("SERVER_PORT", 2022)


# Storage ---------------------------------------------------------------------
DATABASE_URL = os.getenv("DATABASE_URL") or ""
DB_RESET = _env_bool("DB_RESET", False)


# CORS ------------------------------------------------------------------------
# FRONTEND_ORIGIN can contain a comma-separated list for multi-domain deploys.
_frontend_origins = _split_csv(os.getenv("FRONTEND_ORIGIN"))
_additional_origins = _split_csv(os.getenv("ADDITIONAL_ALLOWED_ORIGINS"))

_local_dev_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

ALLOWED_CORS_ORIGINS = _unique(
    [
        *_frontend_origins,
        *_additional_origins,
        *_local_dev_origins,
    ]
)


# Runtime behaviour -----------------------------------------------------------
# Unset means "the server's local zone".
LEADERBOARD_TZ = _env_zone("LEADERBOARD_TZ")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

REACTION_BOARD_URL = os.getenv(
    "REACTION_BOARD_URL", f"http://{SERVER_HOST}:{SERVER_PORT}"
)


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "DATABASE_URL",
    "DB_RESET",
    "LEADERBOARD_TZ",
    "LOG_LEVEL",
    "PROJECT_ROOT",
    "REACTION_BOARD_URL",
    "SERVER_HOST",
    "SERVER_PORT",
]
