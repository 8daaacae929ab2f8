"""Base unit family machinery for locomotive quantities.

Every physical quantity handled by the simulator (length, duration, speed,
line voltage) belongs to a unit family. A family is anchored on a root class
marked with ``IS_FAMILY_ROOT``; every subclass inherits that root through its
MRO. Arithmetic and comparisons are only permitted inside one family, so a
speed can never be silently added to a distance.

Classes:
    Unit: Base class carrying the family bookkeeping.

Example:
    >>> class Volt(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Kilovolt(Volt):
    ...     pass  # ROOT is Volt
    >>> Kilovolt.ROOT is Volt
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types in the simulator.

    Concrete quantities should inherit from ``UnitFloat`` rather than from
    this class directly.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Display symbol.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the class as a family root.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the family root of a newly defined unit class.

        The root is the class itself when it sets ``IS_FAMILY_ROOT``, else
        the nearest ancestor that does, else the class itself.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def same_family(cls, unit_type: type) -> bool:
        """Return True when ``unit_type`` shares this class's unit family."""
        return getattr(unit_type, "ROOT", None) is cls.ROOT

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Raise TypeError unless ``unit_type`` is in the same unit family.

        Args:
            unit_type: The other unit type taking part in the operation.

        Raises:
            TypeError: If the two types belong to different families.
        """
        if not cls.same_family(unit_type):
            other = getattr(unit_type, "ROOT", unit_type)
            msg = f"Incompatible units: {cls.ROOT.__name__} and {other.__name__}"
            raise TypeError(msg)
