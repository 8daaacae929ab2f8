"""Distance units for track distance travelled.

All lengths are stored in metres. The odometer of the locomotive reports
whole metres; ``Kilometer`` is used when a distance is first obtained as
speed (km/h) times time (h).

Classes:
    Meter: SI base unit for length.
    Kilometer: 1000 metres.

Example:
    >>> float(Kilometer(0.5))
    500.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Distance unit: Meter (SI base unit for length)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Distance unit: Kilometer (1000 metres)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"
