"""Type-safe units for locomotive quantities.

Unit families:
    - Distance: Meter (root), Kilometer
    - Time: Second (root), Minute, Hour
    - Voltage: Volt (root), Kilovolt

Values are stored in SI and only combine with values of their own family.

Example:
    >>> from wap7sim.unit import Hour, Kilometer, Second
    >>> hours = Second(60).to(Hour)
    >>> int(Kilometer(30 * hours))
    500
"""

from .unit_base import Unit
from .unit_distance import Kilometer, Meter
from .unit_float import UnitFloat
from .unit_time import Hour, Minute, Second, Time
from .unit_voltage import Kilovolt, Volt

__all__ = [
    "Unit",
    "UnitFloat",
    "Meter",
    "Kilometer",
    "Second",
    "Minute",
    "Hour",
    "Time",
    "Volt",
    "Kilovolt",
]
