"""Electrical potential units for the overhead line supply.

The WAP-7 draws single-phase 25 kV AC from the catenary through its
pantograph. Voltages are stored in volts.

Classes:
    Volt: SI base unit for electric potential.
    Kilovolt: 1000 volts.

Example:
    >>> Kilovolt(25).to(Volt)
    25000.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Volt(UnitFloat):
    """Potential unit: Volt (SI)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "V"


class Kilovolt(Volt):
    """Potential unit: Kilovolt (1000 volts)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "kV"
