"""Power states of the locomotive and their cab display labels."""

from enum import Enum, auto


class PowerState(Enum):
    """Operating mode of the locomotive.

    States:
        OFF: Engine shut down. Initial state; the only state in which the
            pantograph may be lowered.
        IDLE: Engine started, standing still.
        RUNNING: Throttle open, moving at the commanded speed.
        BRAKING: Service brake applied, still moving.
        ERROR: Reserved for fault injection. No operation enters it.

    State Transitions:
        Normal flow: OFF → IDLE → RUNNING → BRAKING → IDLE → OFF
        Emergency: RUNNING/BRAKING → IDLE
    """

    OFF = auto()
    IDLE = auto()
    RUNNING = auto()
    BRAKING = auto()
    ERROR = auto()

    def __str__(self) -> str:
        return display_label(self)


_DISPLAY_LABELS = {
    PowerState.OFF: "Off",
    PowerState.IDLE: "Idle",
    PowerState.RUNNING: "Running",
    PowerState.BRAKING: "Braking",
    PowerState.ERROR: "Error",
}


def display_label(state: PowerState) -> str:
    """Return the cab display label of ``state`` (``"Running"`` for RUNNING)."""
    return _DISPLAY_LABELS[state]
