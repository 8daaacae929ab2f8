"""Float-backed units with automatic SI conversion.

``UnitFloat`` is a ``float`` subclass that stores its value in SI units and
remembers which unit it was created in. Values of the same family can be
added, subtracted and compared; scaling by a plain number keeps the unit;
values from different families refuse to mix.

Example:
    >>> class Meter(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "m"
    >>> class Kilometer(Meter):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    >>> float(Kilometer(0.5))
    500.0
    >>> Kilometer(0.5).to(Meter)
    500.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Number, Unit


class UnitFloat(float, Unit):
    """Base class for float units stored in SI.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor converting the native scale to SI.
        IS_FAMILY_ROOT (ClassVar[bool]): Root marker, overridden by subclasses.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a unit value from a number given in the unit's native scale.

        Args:
            value: Numeric value in this unit (e.g. kilometres for Kilometer).

        Returns:
            UnitFloat: Instance holding ``value * SCALE_TO_SI``.
        """
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value already expressed in SI."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the plain value expressed in ``unit_type``'s scale.

        Args:
            unit_type: Target unit of the same family.

        Returns:
            float: ``SI value / unit_type.SCALE_TO_SI``.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    # -------------------------------- Arithmetic --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a plain number.

        Raises:
            TypeError: If ``k`` is not an ``int`` or ``float`` (units included).
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError(f"Cannot scale {type(self).__name__} by {type(k).__name__}")

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError(f"Cannot divide {type(self).__name__} by {type(k).__name__}")

    # -------------------------------- Comparison --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Return ``"<value> <symbol>"`` in the unit's native scale (``"25.0 kV"``)."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
