"""Real-time measurement utilities.

Exports:
    RunningClock: Accumulating monotonic stopwatch for engine running time
"""

from .timer import RunningClock

__all__ = ["RunningClock"]
