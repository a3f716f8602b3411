"""Wall-clock stopwatch with microsecond resolution."""

from __future__ import annotations

import time
from typing import Optional


class Timer:
    """A stopwatch that starts on creation and records its elapsed time when stopped.

    The ``microseconds``, ``milliseconds`` and ``seconds`` readings are fixed at
    the last call to :meth:`stop`; they read zero until the timer has been stopped.
    """

    def __init__(self) -> None:
        self._start_ns = 0
        self._end_ns = 0
        self._running = False
        self._elapsed_us = 0
        self.start()

    def __repr__(self) -> str:
        state = "running" if self._running else "stopped"
        return f"Timer({state}, {self._elapsed_us}us)"

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> Optional[bool]:
        self.stop()
        return None

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Begin timing from now."""
        self._start_ns = time.perf_counter_ns()
        self._running = True

    def stop(self) -> None:
        """Stop timing and record the elapsed time."""
        self._end_ns = time.perf_counter_ns()
        self._running = False
        self._elapsed_us = self._elapsed_ns() // 1000

    def _elapsed_ns(self) -> int:
        if self._running:
            return time.perf_counter_ns() - self._start_ns
        return self._end_ns - self._start_ns

    def elapsed(self) -> float:
        """Return seconds elapsed so far if running, or between start and stop otherwise."""
        return self._elapsed_ns() / 1_000_000_000

    def microseconds(self) -> int:
        """Whole microseconds recorded at the last stop."""
        return self._elapsed_us

    def milliseconds(self) -> float:
        """Milliseconds recorded at the last stop."""
        return self._elapsed_us / 1000.0

    def seconds(self) -> float:
        """Seconds recorded at the last stop."""
        return self._elapsed_us / 1_000_000.0