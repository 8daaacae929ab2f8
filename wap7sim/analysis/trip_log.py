"""Per-command trip journal and its summary statistics.

The journal records the locomotive's status after every dispatched command
of one session. It lives only in memory: it can be turned into a DataFrame,
summarised, or charted, but nothing is read back by a later run.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from wap7sim.locomotive import LocomotiveStatus

COLUMNS = [
    "step",
    "command",
    "power_state",
    "speed_kmh",
    "throttle_level",
    "pantograph_up",
    "voltage_v",
    "distance_m",
    "running_time_s",
]


@dataclass(frozen=True)
class TripEntry:
    """One journal row: the command text and the status right after it."""

    step: int
    command: str
    status: LocomotiveStatus

    def to_record(self) -> dict[str, Any]:
        record = self.status.to_record()
        record["step"] = self.step
        record["command"] = self.command
        return {column: record[column] for column in COLUMNS}


class TripLog:
    """In-memory journal of a simulation session."""

    def __init__(self):
        self.entries: list[TripEntry] = []

    def __len__(self) -> int:
        return len(self.entries)

    def record(self, command: str, status: LocomotiveStatus) -> TripEntry:
        """Append the status observed after ``command``."""
        entry = TripEntry(step=len(self.entries) + 1, command=command.strip(), status=status)
        self.entries.append(entry)
        return entry

    def to_frame(self) -> pd.DataFrame:
        """Return the journal as a DataFrame indexed by step."""
        frame = pd.DataFrame([entry.to_record() for entry in self.entries], columns=COLUMNS)
        return frame.set_index("step")

    def summary(self) -> dict[str, Any]:
        """Summarise the trip.

        Returns:
            Dictionary with the number of commands, maximum and mean speed
            over the recorded steps, final distance and running time, and the
            number of steps that ended in each power state.
        """
        if not self.entries:
            return {
                "commands": 0,
                "max_speed_kmh": 0,
                "mean_speed_kmh": 0.0,
                "distance_m": 0,
                "running_time_s": 0,
                "state_counts": {},
            }

        speeds = np.array([entry.status.speed_kmh for entry in self.entries])
        last = self.entries[-1].status
        states = self.to_frame()["power_state"].value_counts()
        return {
            "commands": len(self.entries),
            "max_speed_kmh": int(speeds.max()),
            "mean_speed_kmh": float(np.round(speeds.mean(), 2)),
            "distance_m": last.distance_m,
            "running_time_s": last.running_time_s,
            "state_counts": {str(state): int(count) for state, count in states.items()},
        }
