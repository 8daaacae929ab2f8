"""Precondition failures raised by locomotive operations.

Every error here is local and recoverable: the operation refused to run and
left the locomotive unchanged (except ``set_throttle``, which keeps the
notches it already applied). Each error records the name of the operation
that refused and the offending state or value, so the console can render a
single descriptive line.

Operations that silently ignore unmet preconditions (stop, brake, emergency
stop, simulate) never raise any of these.
"""

from enum import Enum


class LocomotiveError(Exception):
    """Base class for refused locomotive operations.

    Attributes:
        operation (str): Name of the refused operation.
        reason (str): Human-readable explanation, also the exception message.
    """

    operation: str = ""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason

    def describe(self) -> str:
        """Return ``"<operation>: <reason>"`` for display."""
        return f"{self.operation}: {self.reason}"


class AlreadyRaisedError(LocomotiveError):
    """The pantograph is already up."""

    operation = "raise_pantograph"

    def __init__(self):
        super().__init__("Pantograph already raised")


class InvalidStateForPantographLowerError(LocomotiveError):
    """The pantograph can only be lowered with the engine off."""

    operation = "lower_pantograph"

    def __init__(self, state: Enum):
        self.state = state
        super().__init__(f"Cannot lower pantograph while engine is {state}")


class NoPowerToStartError(LocomotiveError):
    """The engine cannot start without line voltage."""

    operation = "start_engine"

    def __init__(self, voltage_v: int = 0):
        self.voltage_v = voltage_v
        super().__init__("Cannot start engine: pantograph not raised")


class AlreadyStartedError(LocomotiveError):
    """The engine is not off."""

    operation = "start_engine"

    def __init__(self, state: Enum):
        self.state = state
        super().__init__(f"Engine already started: {state}")


class InvalidStateForThrottleError(LocomotiveError):
    """Throttle can only be opened while idling or running."""

    operation = "increase_throttle"

    def __init__(self, state: Enum):
        self.state = state
        super().__init__(f"Cannot increase throttle in state: {state}")


class ThrottleAtMaximumError(LocomotiveError):
    """The throttle is already in the top notch."""

    operation = "increase_throttle"

    def __init__(self, level: int, maximum: int):
        self.level = level
        self.maximum = maximum
        super().__init__(f"Throttle already at maximum ({maximum})")


class ThrottleReductionError(LocomotiveError):
    """A lower throttle notch was requested; only braking reduces throttle."""

    operation = "set_throttle"

    def __init__(self, level: int, target: int):
        self.level = level
        self.target = target
        super().__init__("Use brake to reduce throttle/speed")
