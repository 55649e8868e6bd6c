"""
Wall-clock timing for solver runs.

A backend times its whole run plus named phases ('scale', 'elimination',
'iterations') and stores the breakdown in ``Result.timing``.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Timer for one solver run, with named phases.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('elimination'):
            ...
        timer.stop()
        timer.result()
        # {'total_seconds': 0.004, 'elimination': 0.003}

    or as a context manager:

        with Timer() as timer:
            solution = lu_doolittle(A)
        timer.elapsed

    A phase entered more than once accumulates. Phases are not required to
    be disjoint.
    """

    def __init__(self):
        self._started_at: float | None = None
        self._total: float | None = None
        self._phases: dict[str, float] = {}

    @property
    def running(self) -> bool:
        return self._started_at is not None and self._total is None

    @property
    def elapsed(self) -> float:
        """Seconds from start() to stop(), or to now while running."""
        if self._started_at is None:
            raise RuntimeError("Timer has not been started")
        if self._total is not None:
            return self._total
        return time.perf_counter() - self._started_at

    def start(self) -> None:
        self._started_at = time.perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the block to phase ``name``."""
        began = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + time.perf_counter() - began

    def result(self) -> dict[str, float]:
        """
        Timing breakdown: 'total_seconds' plus one entry per phase.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._phases}

    def __enter__(self) -> 'Timer':
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
