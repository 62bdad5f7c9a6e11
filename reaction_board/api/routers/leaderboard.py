"""Leaderboard endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlmodel import Session

from ...core import TimeFilter, get_session
from ...models import NAME_MAX_LENGTH, AttemptCreate, AttemptRead, LeaderboardEntry
from ...services.leaderboard import (
    DEFAULT_LIMIT,
    get_leaderboard as svc_get_leaderboard,
    get_personal_best as svc_get_personal_best,
    submit_reaction_time as svc_submit_reaction_time,
)

router = APIRouter(tags=["leaderboard"])


@router.post(
    "/reaction-times",
    operation_id="submitReactionTime",
    response_model=AttemptRead,
    status_code=201,
)
def submit_reaction_time(body: AttemptCreate, session: Session = Depends(get_session)):
    """Record one reaction-time attempt."""

    return svc_submit_reaction_time(session, body)


@router.get(
    "/leaderboard",
    operation_id="getLeaderboard",
    response_model=List[LeaderboardEntry],
)
def get_leaderboard(
    time_filter: TimeFilter = Query(..., alias="filter"),
    limit: int = Query(DEFAULT_LIMIT, gt=0),
    session: Session = Depends(get_session),
):
    """Fastest valid attempts for a time window, ranked from 1."""

    return svc_get_leaderboard(session, time_filter, limit)


@router.get(
    "/personal-best/{participant_name:path}",
    operation_id="getPersonalBest",
    response_model=Optional[AttemptRead],
)
def get_personal_best(
    participant_name: str = Path(..., min_length=1, max_length=NAME_MAX_LENGTH),
    session: Session = Depends(get_session),
):
    """Fastest valid attempt for one participant, or ``null``."""

    return svc_get_personal_best(session, participant_name)


__all__ = ["router"]
