"""Schedule-once, cancellable timer used to turn the light green."""

from __future__ import annotations

import threading
from typing import Callable, Optional


class RoundTimer:
    """Runs ``callback`` once after ``delay`` seconds unless cancelled first.

    A timer can only be started once. ``cancel`` is idempotent and safe to
    call from the callback thread.
    """

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self._callback = callback
        self._thread: Optional[threading.Timer] = None
        self._done = threading.Event()

    @property
    def active(self) -> bool:
        return self._thread is not None and not self._done.is_set()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("RoundTimer already started")
        self._thread = threading.Timer(self.delay, self._fire)
        self._thread.daemon = True
        self._thread.start()

    def cancel(self) -> None:
        self._done.set()
        if self._thread is not None:
            self._thread.cancel()

    def _fire(self) -> None:
        if self._done.is_set():
            return
        self._done.set()
        self._callback()


TimerFactory = Callable[[float, Callable[[], None]], RoundTimer]


__all__ = ["RoundTimer", "TimerFactory"]
