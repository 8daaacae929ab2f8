"""Command dispatcher for the locomotive console.

Turns one line of operator input into one locomotive operation and returns
the outcome as a ``CommandResult`` value. The dispatcher never prints;
rendering is left to the caller.

Outcomes:
    SUCCESS: The command ran (lenient no-ops included).
    FAILURE: The locomotive refused the operation (a ``LocomotiveError``).
    INVALID: The input could not be understood. Not an engine failure.

Vocabulary:
    pantograph [up|raise|down|lower], start, stop, throttle [n], brake,
    emergency, simulate <seconds>, status, help, verbose, exit
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto

from wap7sim.config import MAX_SIMULATION_SECONDS
from wap7sim.errors import LocomotiveError
from wap7sim.locomotive import Locomotive

from .log import toggle_verbose

logger = logging.getLogger(__name__)

INVALID_COMMAND = "Invalid command. Type 'help' for available commands."


class ResultKind(Enum):
    SUCCESS = auto()
    FAILURE = auto()
    INVALID = auto()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one dispatched command.

    Attributes:
        kind (ResultKind): Success, engine failure or invalid input.
        message (str): Text to show the operator.
        command (str | None): Command word, None for unrecognised input.
        error (LocomotiveError | None): The refusal, for FAILURE results.
        terminate (bool): True when the session should end.
    """

    kind: ResultKind
    message: str
    command: str | None = None
    error: LocomotiveError | None = None
    terminate: bool = False

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @classmethod
    def success(cls, command: str, message: str, terminate: bool = False) -> "CommandResult":
        return cls(ResultKind.SUCCESS, message, command, terminate=terminate)

    @classmethod
    def failure(cls, command: str, error: LocomotiveError) -> "CommandResult":
        return cls(ResultKind.FAILURE, error.reason, command, error=error)

    @classmethod
    def invalid(cls, message: str, command: str | None = None) -> "CommandResult":
        return cls(ResultKind.INVALID, message, command)


class CommandDispatcher:
    """Maps operator commands onto an owned ``Locomotive``.

    Args:
        locomotive: The unit being driven. The dispatcher holds a reference
            and is the only caller of its operations during a session.
        on_verbose: Called by ``verbose``; returns True when verbose logging
            is now on.
    """

    def __init__(
        self,
        locomotive: Locomotive,
        on_verbose: Callable[[], bool] = toggle_verbose,
    ):
        self.locomotive = locomotive
        self._on_verbose = on_verbose
        self._handlers: dict[str, Callable[[list[str]], CommandResult]] = {
            "pantograph": self._pantograph,
            "start": self._start,
            "stop": self._stop,
            "throttle": self._throttle,
            "brake": self._brake,
            "emergency": self._emergency,
            "simulate": self._simulate,
            "status": self._status,
            "help": self._help,
            "verbose": self._verbose,
            "exit": self._exit,
        }

    @property
    def commands(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def dispatch(self, line: str) -> CommandResult:
        """Parse ``line`` and run the command it names.

        Input is case-insensitive and split on whitespace. Arguments beyond
        the ones a command uses are ignored.
        """
        parts = line.strip().lower().split()
        if not parts:
            return CommandResult.invalid(INVALID_COMMAND)

        command, args = parts[0], parts[1:]
        handler = self._handlers.get(command)
        if handler is None:
            return CommandResult.invalid(INVALID_COMMAND)

        try:
            return handler(args)
        except LocomotiveError as e:
            logger.warning("Engine error: %s", e.reason)
            return CommandResult.failure(command, e)

    # ----------------------------------------------------------------- handlers
    def _pantograph(self, args: list[str]) -> CommandResult:
        if not args:
            position = "UP" if self.locomotive.pantograph_up else "DOWN"
            return CommandResult.success("pantograph", f"Pantograph is {position}")

        match args[0]:
            case "up" | "raise":
                self.locomotive.raise_pantograph()
                return CommandResult.success("pantograph", "Pantograph raised. Power available.")
            case "down" | "lower":
                self.locomotive.lower_pantograph()
                return CommandResult.success("pantograph", "Pantograph lowered. Power disconnected.")
            case _:
                return CommandResult.invalid(
                    "Invalid pantograph command. Use 'up' or 'down'.", "pantograph"
                )

    def _start(self, args: list[str]) -> CommandResult:
        self.locomotive.start_engine()
        return CommandResult.success("start", "Engine started successfully.")

    def _stop(self, args: list[str]) -> CommandResult:
        self.locomotive.stop_engine()
        return CommandResult.success("stop", "Engine stopped.")

    def _throttle(self, args: list[str]) -> CommandResult:
        loco = self.locomotive
        if not args:
            loco.increase_throttle()
            return CommandResult.success("throttle", f"Throttle increased. {loco.compact_status()}")

        try:
            target = int(args[0])
        except ValueError:
            return CommandResult.invalid("Invalid throttle level. Use a number.", "throttle")

        if target == loco.throttle_level:
            return CommandResult.success("throttle", f"Throttle already at {target}.")
        loco.set_throttle(target)
        return CommandResult.success(
            "throttle", f"Throttle set to {target}. {loco.compact_status()}"
        )

    def _brake(self, args: list[str]) -> CommandResult:
        self.locomotive.apply_brakes()
        return CommandResult.success("brake", f"Brakes applied. {self.locomotive.compact_status()}")

    def _emergency(self, args: list[str]) -> CommandResult:
        self.locomotive.emergency_stop()
        return CommandResult.success("emergency", "EMERGENCY STOP EXECUTED! Engine halted.")

    def _simulate(self, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult.invalid("Please specify simulation time in seconds.", "simulate")
        try:
            seconds = int(args[0])
        except ValueError:
            return CommandResult.invalid("Invalid time value. Use a number in seconds.", "simulate")
        if seconds > MAX_SIMULATION_SECONDS:
            return CommandResult.invalid("Invalid time value. Use a number in seconds.", "simulate")
        if seconds <= 0:
            return CommandResult.invalid("Please specify a positive time value.", "simulate")

        self.locomotive.simulate_movement(seconds)
        return CommandResult.success(
            "simulate",
            f"Simulated {seconds}s of movement. {self.locomotive.compact_status()}",
        )

    def _status(self, args: list[str]) -> CommandResult:
        return CommandResult.success("status", self.locomotive.status().full_line())

    def _help(self, args: list[str]) -> CommandResult:
        return CommandResult.success("help", "")

    def _verbose(self, args: list[str]) -> CommandResult:
        enabled = self._on_verbose()
        message = "Verbose logging enabled." if enabled else "Verbose logging disabled."
        return CommandResult.success("verbose", message)

    def _exit(self, args: list[str]) -> CommandResult:
        final = self.locomotive.status().full_line()
        return CommandResult.success(
            "exit", f"Exiting simulation. Final status:\n{final}", terminate=True
        )
