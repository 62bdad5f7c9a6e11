"""Service layer helpers."""

from .leaderboard import (
    DEFAULT_LIMIT,
    assign_ranks,
    get_leaderboard,
    get_personal_best,
    submit_reaction_time,
)

__all__ = [
    "DEFAULT_LIMIT",
    "assign_ranks",
    "get_leaderboard",
    "get_personal_best",
    "submit_reaction_time",
]
