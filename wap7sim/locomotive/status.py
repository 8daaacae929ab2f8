"""Immutable status snapshots of the locomotive."""

from dataclasses import asdict, dataclass
from typing import Any

from .power_state import PowerState, display_label


@dataclass(frozen=True)
class LocomotiveStatus:
    """Snapshot of every observable field of the locomotive.

    Attributes:
        power_state (PowerState): Operating mode.
        speed_kmh (int): Current speed.
        throttle_level (int): Current throttle notch.
        throttle_max (int): Highest throttle notch.
        pantograph_up (bool): Whether the pantograph touches the catenary.
        voltage_v (int): Line voltage available to the unit.
        distance_m (int): Cumulative simulated distance.
        running_time_s (int): Cumulative wall-clock seconds spent out of OFF,
            as of the last flush of the running clock.
    """

    power_state: PowerState
    speed_kmh: int
    throttle_level: int
    throttle_max: int
    pantograph_up: bool
    voltage_v: int
    distance_m: int
    running_time_s: int

    @property
    def state_label(self) -> str:
        return display_label(self.power_state)

    @property
    def pantograph_label(self) -> str:
        return "Up" if self.pantograph_up else "Down"

    def full_line(self) -> str:
        """Render every field on one line, as shown by ``status``."""
        return (
            f"State: {self.state_label} | Speed: {self.speed_kmh} km/h | "
            f"Throttle: {self.throttle_level}/{self.throttle_max} | "
            f"Pantograph: {self.pantograph_label} | Voltage: {self.voltage_v} V | "
            f"Distance: {self.distance_m} m | Runtime: {self.running_time_s} s"
        )

    def compact_line(self) -> str:
        """Render state, speed and throttle only, e.g. ``[Running] 30 km/h T:3/8``."""
        return (
            f"[{self.state_label}] {self.speed_kmh} km/h "
            f"T:{self.throttle_level}/{self.throttle_max}"
        )

    def to_record(self) -> dict[str, Any]:
        """Return the snapshot as a flat dict with the state as its label."""
        record = asdict(self)
        record["power_state"] = self.state_label
        return record
