"""Database model exports."""

from .attempt import (
    MAX_REACTION_TIME_MS,
    NAME_MAX_LENGTH,
    Attempt,
    AttemptCreate,
    AttemptRead,
    LeaderboardEntry,
)

__all__ = [
    "Attempt",
    "AttemptCreate",
    "AttemptRead",
    "LeaderboardEntry",
    "MAX_REACTION_TIME_MS",
    "NAME_MAX_LENGTH",
]
