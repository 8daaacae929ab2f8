"""Wall-clock stopwatch for engine running time.

Running time is real elapsed time, not simulated time: it is measured with a
monotonic clock between the moment the engine leaves OFF and the moment it
returns to OFF. It has nothing to do with the seconds an operator passes to
``simulate``; the two diverge whenever the operator pauses between commands.

Components:
    RunningClock: Accumulating stopwatch with explicit flush points.

Example:
    >>> ticks = iter([10.0, 12.5, 20.0])
    >>> clock = RunningClock(clock=lambda: next(ticks))
    >>> clock.start()            # t = 10.0
    >>> _ = clock.flush()        # t = 12.5
    >>> float(clock.total)
    2.5
    >>> _ = clock.stop()         # t = 20.0
    >>> float(clock.total)
    10.0
"""

import time
from collections.abc import Callable

from wap7sim.unit import Second

_ZERO_TIME = Second(0.0)


class RunningClock:
    """Stopwatch that accumulates elapsed wall-clock time across runs.

    The accumulated total is never reset: starting the clock again after a
    stop keeps adding to the same total.

    Attributes:
        _clock (Callable[[], float]): Monotonic time source in seconds.
        _total (Second): Time flushed into the total so far.
        _mark (float | None): Reading taken at the last start or flush,
            None while stopped.
    """

    _total: Second
    _mark: float | None

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Create a stopped clock with a zero total.

        Args:
            clock: Time source returning seconds. Must never go backwards.
        """
        self._clock = clock
        self._total = _ZERO_TIME
        self._mark = None

    @property
    def running(self) -> bool:
        """True between ``start()`` and ``stop()``."""
        return self._mark is not None

    @property
    def total(self) -> Second:
        """Time accumulated up to the last flush."""
        return self._total

    @property
    def total_seconds(self) -> int:
        """Accumulated total truncated to whole seconds."""
        return int(self._total)

    def start(self) -> None:
        """Begin measuring from now. Has no effect if already running."""
        if self._mark is None:
            self._mark = self._clock()

    def flush(self) -> Second:
        """Add the time elapsed since the last mark to the total.

        Returns:
            Second: The updated total. Unchanged when the clock is stopped.
        """
        if self._mark is not None:
            now = self._clock()
            self._total = self._total + Second(max(0.0, now - self._mark))
            self._mark = now
        return self._total

    def stop(self) -> Second:
        """Flush and stop measuring. Returns the updated total."""
        total = self.flush()
        self._mark = None
        return total
