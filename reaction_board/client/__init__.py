"""Reaction game client: state machine, timer and API access."""

from .api import ReactionBoardClient
from .game import GameState, ReactionGame
from .scoreboard import Scoreboard
from .timer import RoundTimer

__all__ = [
    "GameState",
    "ReactionBoardClient",
    "ReactionGame",
    "RoundTimer",
    "Scoreboard",
]
