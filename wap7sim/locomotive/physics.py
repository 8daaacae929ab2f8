"""Speed and distance arithmetic for the locomotive model.

Speeds are whole km/h and distances whole metres. The distance covered in a
simulated interval is ``speed * hours * 1000`` computed in floating point
and truncated toward zero, so a 30 km/h run for 60 s covers exactly 500 m
and a 10 km/h run for 1 s covers 2 m (2.77... truncated).
"""

from wap7sim.config import MAX_SPEED_KMH, THROTTLE_STEP_KMH
from wap7sim.unit import Hour, Kilometer, Meter, Time


def speed_for_throttle(level: int) -> int:
    """Return the commanded speed in km/h for throttle notch ``level``."""
    return min(level * THROTTLE_STEP_KMH, MAX_SPEED_KMH)


def throttle_for_speed(speed_kmh: int, level: int) -> int:
    """Return the throttle notch consistent with ``speed_kmh`` after braking.

    The notch never rises: it is capped by the highest notch whose commanded
    speed does not exceed the current speed.
    """
    return min(level, speed_kmh // THROTTLE_STEP_KMH)


def distance_travelled(speed_kmh: int, duration: Time) -> Meter:
    """Distance covered at a constant ``speed_kmh`` over ``duration``.

    Args:
        speed_kmh: Speed in km/h.
        duration: Simulated interval.

    Returns:
        Meter: Whole metres travelled, truncated toward zero.

    Example:
        >>> from wap7sim.unit import Second
        >>> int(distance_travelled(30, Second(60)))
        500
    """
    travelled = Kilometer(speed_kmh * duration.to(Hour))
    return Meter(int(travelled))
