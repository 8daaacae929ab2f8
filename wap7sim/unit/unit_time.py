"""Time units for simulated durations and engine running time.

Durations are stored in seconds. ``Hour`` exists mainly so that a duration
can be expressed in hours when it is multiplied by a speed in km/h.

Classes:
    Second: SI base unit for time.
    Minute: 60 seconds.
    Hour: 3600 seconds.

Example:
    >>> Second(60).to(Hour)
    0.016666666666666666
    >>> float(Minute(2))
    120.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Second(UnitFloat):
    """Time unit: Second (SI base unit for time)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "s"


class Minute(Second):
    """Time unit: Minute (60 seconds)."""

    SCALE_TO_SI = 60.0
    SYMBOL = "min"


class Hour(Second):
    """Time unit: Hour (3600 seconds)."""

    SCALE_TO_SI = 3600.0
    SYMBOL = "h"


Time = Second | Minute | Hour
