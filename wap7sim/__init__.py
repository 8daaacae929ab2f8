"""WAP-7 electric locomotive simulator.

A single-unit discrete-event model of an electric locomotive's control
surface: pantograph, engine power state, throttle and brakes, driven from a
line-oriented command console.

Package Layout:
    • locomotive: Power state machine, physics and status snapshots
    • console: Command dispatcher, rich rendering and the interactive loop
    • analysis: Per-command trip journal, pandas summary, matplotlib chart
    • state: Generic validated state machine
    • timer: Monotonic running-time stopwatch
    • unit: Type-safe distance, time and voltage units
    • config: Simulation constants
    • errors: Typed precondition failures

Quick Start:
    >>> from wap7sim import Locomotive
    >>> loco = Locomotive()
    >>> loco.raise_pantograph()
    >>> loco.start_engine()
    >>> loco.increase_throttle()
    >>> loco.compact_status()
    '[Running] 10 km/h T:1/8'

Time:
    Distance advances only by ``simulate_movement(seconds)``. Running time is
    real wall-clock time spent out of OFF. The two never influence each other.
"""

from .errors import (
    AlreadyRaisedError,
    AlreadyStartedError,
    InvalidStateForPantographLowerError,
    InvalidStateForThrottleError,
    LocomotiveError,
    NoPowerToStartError,
    ThrottleAtMaximumError,
    ThrottleReductionError,
)
from .locomotive import Locomotive, LocomotiveStatus, PowerState, display_label

__version__ = "2.0.0"

__all__ = [
    "Locomotive",
    "LocomotiveStatus",
    "PowerState",
    "display_label",
    "LocomotiveError",
    "AlreadyRaisedError",
    "InvalidStateForPantographLowerError",
    "NoPowerToStartError",
    "AlreadyStartedError",
    "InvalidStateForThrottleError",
    "ThrottleAtMaximumError",
    "ThrottleReductionError",
]
