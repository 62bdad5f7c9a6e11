"""HTTP client for the leaderboard API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter

from ..core.time import TimeFilter
from ..models import AttemptRead, LeaderboardEntry

_ENTRIES = TypeAdapter(List[LeaderboardEntry])


class ReactionBoardClient:
    """Typed wrapper over the four endpoints.

    Errors are not handled here: transport failures raise ``httpx.HTTPError``
    subclasses and non-2xx answers raise ``httpx.HTTPStatusError``.
    """

    def __init__(self, http: httpx.Client) -> None:
        self.http = http

    @classmethod
    def connect(cls, base_url: str, timeout: float = 20) -> "ReactionBoardClient":
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self.http.close()

    def healthcheck(self) -> Dict[str, Any]:
        r = self.http.get("/healthcheck")
        r.raise_for_status()
        return r.json()

    def submit_reaction_time(
        self, participant_name: str, reaction_time_ms: float, is_false_start: bool = False
    ) -> AttemptRead:
        r = self.http.post(
            "/reaction-times",
            json={
                "participant_name": participant_name,
                "reaction_time_ms": reaction_time_ms,
                "is_false_start": is_false_start,
            },
        )
        r.raise_for_status()
        return AttemptRead.model_validate(r.json())

    def get_leaderboard(
        self, time_filter: TimeFilter = TimeFilter.ALL_TIME, limit: int = 10
    ) -> List[LeaderboardEntry]:
        r = self.http.get(
            "/leaderboard", params={"filter": time_filter.value, "limit": limit}
        )
        r.raise_for_status()
        return _ENTRIES.validate_python(r.json())

    def get_personal_best(self, participant_name: str) -> Optional[AttemptRead]:
        r = self.http.get(f"/personal-best/{quote(participant_name, safe='')}")
        r.raise_for_status()
        payload = r.json()
        return AttemptRead.model_validate(payload) if payload is not None else None


__all__ = ["ReactionBoardClient"]
