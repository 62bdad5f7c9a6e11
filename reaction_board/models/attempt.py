"""Database model and data contracts for reaction-time attempts."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Optional

from pydantic import StrictBool, StrictFloat, field_validator
from sqlalchemy import DateTime, Index
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import as_utc, utcnow

NAME_MAX_LENGTH = 50
# Largest value a 32-bit INTEGER column holds.
MAX_REACTION_TIME_MS = 2**31 - 1


class Attempt(SQLModel, table=True):
    """One recorded reaction-time trial, valid or false start.

    Rows are append-only: nothing in the application updates or deletes them.
    """

    __tablename__ = "reaction_times"
    __table_args__ = (
        Index("ix_reaction_times_ranking", "is_false_start", "created_at", "reaction_time_ms"),
    )

    id: Optional[int] = ORMField(default=None, primary_key=True)
    participant_name: str = ORMField(max_length=NAME_MAX_LENGTH, index=True)
    reaction_time_ms: int
    is_false_start: bool = False
    created_at: datetime = ORMField(
        default_factory=utcnow, sa_type=DateTime(timezone=True), nullable=False
    )


class AttemptCreate(SQLModel):
    """Submission payload, validated before the store is touched."""

    participant_name: str = ORMField(min_length=1, max_length=NAME_MAX_LENGTH)
    reaction_time_ms: StrictFloat = ORMField(gt=0, le=MAX_REACTION_TIME_MS)
    is_false_start: StrictBool

    @field_validator("reaction_time_ms")
    @classmethod
    def _finite_time(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("reaction_time_ms must be a finite number")
        return value


class _UTCRead(SQLModel):
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_at_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class AttemptRead(_UTCRead):
    id: int
    participant_name: str
    reaction_time_ms: int
    is_false_start: bool


class LeaderboardEntry(_UTCRead):
    """Ranked leaderboard row; computed per query and never stored."""

    id: int
    participant_name: str
    reaction_time_ms: int
    rank: int


__all__ = [
    "Attempt",
    "AttemptCreate",
    "AttemptRead",
    "LeaderboardEntry",
    "MAX_REACTION_TIME_MS",
    "NAME_MAX_LENGTH",
]
