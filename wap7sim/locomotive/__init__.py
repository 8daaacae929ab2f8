"""Locomotive model: power states, physics and the control state machine.

Exports:
    Locomotive: The WAP-7 unit and its operations
    LocomotiveStatus: Immutable status snapshot
    PowerState: Power state enumeration
    display_label: Cab label of a power state
"""

from .engine import Locomotive
from .physics import distance_travelled, speed_for_throttle, throttle_for_speed
from .power_state import PowerState, display_label
from .status import LocomotiveStatus

__all__ = [
    "Locomotive",
    "LocomotiveStatus",
    "PowerState",
    "display_label",
    "distance_travelled",
    "speed_for_throttle",
    "throttle_for_speed",
]
