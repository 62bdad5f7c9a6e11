"""Leaderboard queries and attempt submission."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo

from sqlmodel import Session, select

from ..core.time import TimeFilter, window_start
from ..models import Attempt, AttemptCreate, LeaderboardEntry

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

# Fastest first; equal times fall back to the earlier, then lower-id attempt.
_RANKING_ORDER = (
    Attempt.reaction_time_ms.asc(),
    Attempt.created_at.asc(),
    Attempt.id.asc(),
)


def assign_ranks(attempts: Iterable[Attempt]) -> List[LeaderboardEntry]:
    """Number already sorted and truncated attempts 1..n by position."""

    return [
        LeaderboardEntry(
            id=attempt.id,
            participant_name=attempt.participant_name,
            reaction_time_ms=attempt.reaction_time_ms,
            created_at=attempt.created_at,
            rank=position,
        )
        for position, attempt in enumerate(attempts, start=1)
    ]


def get_leaderboard(
    session: Session,
    time_filter: TimeFilter = TimeFilter.ALL_TIME,
    limit: int = DEFAULT_LIMIT,
    now: Optional[datetime] = None,
    tz: Optional[ZoneInfo] = None,
) -> List[LeaderboardEntry]:
    """Return the ``limit`` fastest valid attempts inside ``time_filter``.

    False starts never qualify. Ranks are positional and assigned after the
    limit, so they always run from 1 to the number of rows returned.
    """

    if limit < 1:
        raise ValueError("limit must be a positive integer")

    statement = select(Attempt).where(Attempt.is_false_start == False)  # noqa: E712
    lower_bound = window_start(time_filter, now, tz)
    if lower_bound is not None:
        statement = statement.where(Attempt.created_at >= lower_bound)
    statement = statement.order_by(*_RANKING_ORDER).limit(limit)

    return assign_ranks(session.exec(statement).all())


def get_personal_best(session: Session, participant_name: str) -> Optional[Attempt]:
    """Fastest valid attempt for an exact, case-sensitive participant name."""

    statement = (
        select(Attempt)
        .where(
            Attempt.participant_name == participant_name,
            Attempt.is_false_start == False,  # noqa: E712
        )
        .order_by(*_RANKING_ORDER)
        .limit(1)
    )
    return session.exec(statement).first()


def submit_reaction_time(session: Session, payload: AttemptCreate) -> Attempt:
    """Append one attempt and return it with its assigned id and timestamp."""

    attempt = Attempt(
        participant_name=payload.participant_name,
        reaction_time_ms=max(1, round(payload.reaction_time_ms)),
        is_false_start=payload.is_false_start,
    )
    session.add(attempt)
    session.commit()
    session.refresh(attempt)

    logger.info(
        "Recorded attempt id=%s participant=%r time_ms=%s false_start=%s",
        attempt.id,
        attempt.participant_name,
        attempt.reaction_time_ms,
        attempt.is_false_start,
    )
    return attempt


__all__ = [
    "DEFAULT_LIMIT",
    "assign_ranks",
    "get_leaderboard",
    "get_personal_best",
    "submit_reaction_time",
]
