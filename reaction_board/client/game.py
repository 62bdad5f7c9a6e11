"""Reaction game state machine.

One click drives every transition::

    waiting --click--> ready --timer--> green --click--> finished
    ready --click--> false_start
    finished | false_start --click--> waiting

The delay before green is a single ``RoundTimer`` owned by the game. It is
cancelled whenever the game leaves ``ready``, and a timer that is no longer
the current one cannot change state.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from enum import Enum
from typing import Callable, Optional

from .timer import RoundTimer, TimerFactory

logger = logging.getLogger(__name__)

MIN_DELAY_SEC = 2.0
MAX_DELAY_SEC = 5.0


class GameState(str, Enum):
    WAITING = "waiting"
    READY = "ready"
    GREEN = "green"
    FINISHED = "finished"
    FALSE_START = "false_start"


class ReactionGame:
    def __init__(
        self,
        *,
        timer_factory: TimerFactory = RoundTimer,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
        on_change: Optional[Callable[[GameState], None]] = None,
        min_delay: float = MIN_DELAY_SEC,
        max_delay: float = MAX_DELAY_SEC,
    ) -> None:
        if not 0 <= min_delay <= max_delay:
            raise ValueError("delay bounds must satisfy 0 <= min_delay <= max_delay")
        self._timer_factory = timer_factory
        self._clock = clock
        self._rng = rng or random.Random()
        self._on_change = on_change
        self._min_delay = min_delay
        self._max_delay = max_delay

        # The timer fires on its own thread.
        self._lock = threading.RLock()
        self._state = GameState.WAITING
        self._timer: Optional[RoundTimer] = None
        self._green_at: Optional[float] = None
        self._reaction_time_ms: Optional[int] = None

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def reaction_time_ms(self) -> Optional[int]:
        """Measured time of the last finished round, else ``None``."""
        return self._reaction_time_ms

    def click(self) -> GameState:
        with self._lock:
            if self._state is GameState.WAITING:
                self._start_round()
            elif self._state is GameState.READY:
                self._release_timer()
                self._transition(GameState.FALSE_START)
            elif self._state is GameState.GREEN:
                elapsed = self._clock() - (self._green_at or 0.0)
                self._reaction_time_ms = max(1, round(elapsed * 1000))
                self._transition(GameState.FINISHED)
            else:
                self.reset()
            return self._state

    def reset(self) -> None:
        """Abandon whatever round is in progress and return to ``waiting``."""
        with self._lock:
            self._release_timer()
            self._green_at = None
            self._reaction_time_ms = None
            if self._state is not GameState.WAITING:
                self._transition(GameState.WAITING)

    def _start_round(self) -> None:
        self._reaction_time_ms = None
        self._green_at = None
        delay = self._rng.uniform(self._min_delay, self._max_delay)
        timer: Optional[RoundTimer] = None

        def fire() -> None:
            self._turn_green(timer)

        timer = self._timer_factory(delay, fire)
        self._timer = timer
        self._transition(GameState.READY)
        logger.debug("Round armed, green in %.2fs", delay)
        timer.start()

    def _turn_green(self, timer: Optional[RoundTimer]) -> None:
        with self._lock:
            if timer is not self._timer or self._state is not GameState.READY:
                logger.debug("Ignoring stale green timer in state %s", self._state.value)
                return
            self._timer = None
            self._green_at = self._clock()
            self._transition(GameState.GREEN)

    def _release_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _transition(self, new_state: GameState) -> None:
        self._state = new_state
        if self._on_change is not None:
            self._on_change(new_state)


__all__ = ["GameState", "MAX_DELAY_SEC", "MIN_DELAY_SEC", "ReactionGame"]
