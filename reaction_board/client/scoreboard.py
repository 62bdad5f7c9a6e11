"""Client-side leaderboard view state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

from ..core.time import TimeFilter
from ..models import AttemptRead, LeaderboardEntry
from .api import ReactionBoardClient
from .game import GameState, ReactionGame

logger = logging.getLogger(__name__)


@dataclass
class Scoreboard:
    """What the player sees next to the game.

    Remote failures are logged and leave the previously loaded data on
    display; loading flags always return to idle.
    """

    client: ReactionBoardClient
    time_filter: TimeFilter = TimeFilter.ALL_TIME
    limit: int = 10
    leaderboard: List[LeaderboardEntry] = field(default_factory=list)
    personal_best: Optional[AttemptRead] = None
    is_loading_leaderboard: bool = False
    is_submitting: bool = False

    def load_leaderboard(self) -> None:
        self.is_loading_leaderboard = True
        try:
            self.leaderboard = self.client.get_leaderboard(self.time_filter, self.limit)
        except httpx.HTTPError as exc:
            logger.warning("Failed to load leaderboard: %s", exc)
        finally:
            self.is_loading_leaderboard = False

    def load_personal_best(self, participant_name: str) -> None:
        name = participant_name.strip()
        if not name:
            self.personal_best = None
            return
        try:
            self.personal_best = self.client.get_personal_best(name)
        except httpx.HTTPError as exc:
            logger.warning("Failed to load personal best for %r: %s", name, exc)

    def set_filter(self, time_filter: TimeFilter) -> None:
        self.time_filter = time_filter
        self.load_leaderboard()

    def submit(self, game: ReactionGame, participant_name: str) -> Optional[AttemptRead]:
        """Submit a finished round, refresh both views and reset the game.

        Returns ``None`` without contacting the server when there is nothing
        to submit, and on failure, in which case the game is left as it was.
        """

        name = participant_name.strip()
        reaction_time = game.reaction_time_ms
        if not name or reaction_time is None or game.state is not GameState.FINISHED:
            return None

        self.is_submitting = True
        try:
            created = self.client.submit_reaction_time(name, reaction_time, False)
        except httpx.HTTPError as exc:
            logger.warning("Failed to submit score: %s", exc)
            return None
        finally:
            self.is_submitting = False

        self.load_leaderboard()
        self.load_personal_best(name)
        game.reset()
        return created


__all__ = ["Scoreboard"]
