"""WAP-7 electric locomotive control model.

This module implements the locomotive as a state machine over its power
state, together with the quantities the cab controls act on: pantograph,
line voltage, throttle notch, speed, odometer and running-time counter.

Core Architecture:
    State Machine Integration:
        • Power state transitions validated by ``StateMachine``
        • Entering OFF and leaving OFF carry effects (running clock, reset)
        • Self-loops (RUNNING → RUNNING, BRAKING → BRAKING) listed explicitly

    Two Independent Clocks:
        • Simulated time: seconds passed to ``simulate_movement`` drive the
          odometer and nothing else
        • Wall-clock time: a monotonic ``RunningClock`` measures how long the
          engine has been out of OFF, flushed on ``stop_engine`` and ``status``

Operation Contracts:
    Strict operations raise a ``LocomotiveError`` subclass when their
    preconditions are unmet and change nothing:
        • raise_pantograph, lower_pantograph, start_engine, increase_throttle

    Lenient operations silently do nothing when their preconditions are unmet
    and never raise:
        • stop_engine, apply_brakes, emergency_stop, simulate_movement

Example Usage:
    >>> loco = Locomotive()
    >>> loco.raise_pantograph()
    >>> loco.start_engine()
    >>> loco.set_throttle(3)
    3
    >>> loco.simulate_movement(60)
    >>> loco.distance_m
    500
    >>> loco.compact_status()
    '[Running] 30 km/h T:3/8'
"""

import logging
import time
from collections.abc import Callable

from wap7sim.config import (
    MAX_SIMULATION_SECONDS,
    MAX_THROTTLE,
    STANDARD_BRAKE_DECELERATION_KMH,
    STANDARD_VOLTAGE,
)
from wap7sim.errors import (
    AlreadyRaisedError,
    AlreadyStartedError,
    InvalidStateForPantographLowerError,
    InvalidStateForThrottleError,
    NoPowerToStartError,
    ThrottleAtMaximumError,
    ThrottleReductionError,
)
from wap7sim.state import Action, StateGraph, StateMachine
from wap7sim.timer import RunningClock
from wap7sim.unit import Second, Time, Volt

from .physics import distance_travelled, speed_for_throttle, throttle_for_speed
from .power_state import PowerState
from .status import LocomotiveStatus

logger = logging.getLogger(__name__)


class Locomotive:
    """Single WAP-7 unit: pantograph, power state, throttle and brakes.

    One instance models one simulation run. It is created OFF with the
    pantograph down and every counter at zero, and is mutated only through
    its public operations.

    Invariants (after every operation):
        • ``voltage_v == 25000`` exactly when the pantograph is up, else 0
        • ``speed_kmh == 0`` implies the power state is OFF or IDLE
        • ``speed_kmh == min(throttle_level * 10, 140)`` after a throttle change
        • ``distance_m`` and ``running_time_s`` never decrease

    Attributes:
        _state_machine (StateMachine): Validated power state transitions.
        _speed_kmh (int): Current speed.
        _throttle_level (int): Current notch, 0 to ``MAX_THROTTLE``.
        _pantograph_up (bool): Pantograph position.
        _distance_m (int): Odometer, whole metres.
        _running_clock (RunningClock): Wall-clock time out of OFF.
    """

    _state_machine: StateMachine

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """Create a locomotive in the OFF state.

        Args:
            clock: Monotonic time source for running-time accounting, in
                seconds. Tests inject a fake clock here.
        """
        self._speed_kmh = 0
        self._throttle_level = 0
        self._pantograph_up = False
        self._distance_m = 0
        self._running_clock = RunningClock(clock)

        self.init_state_machine(
            PowerState.OFF,
            {
                PowerState.OFF: [Action(PowerState.IDLE, self.enter_started)],
                PowerState.IDLE: [
                    Action(PowerState.RUNNING),
                    Action(PowerState.OFF, self.enter_off),
                ],
                PowerState.RUNNING: [
                    Action(PowerState.RUNNING),
                    Action(PowerState.BRAKING),
                    Action(PowerState.IDLE),
                    Action(PowerState.OFF, self.enter_off),
                ],
                PowerState.BRAKING: [
                    Action(PowerState.BRAKING),
                    Action(PowerState.IDLE),
                    Action(PowerState.OFF, self.enter_off),
                ],
                PowerState.ERROR: [Action(PowerState.OFF, self.enter_off)],
            },
        )

    # ----------------------------------------------------------------- state machine
    def init_state_machine(self, initial: PowerState, graph: StateGraph) -> None:
        self._state_machine = StateMachine(initial, graph)

    def transition_to(self, state: PowerState) -> None:
        self._state_machine.request_transition(state)

    @property
    def power_state(self) -> PowerState:
        """Current power state."""
        return self._state_machine.current

    def enter_started(self) -> None:
        """Effect of OFF → IDLE: begin measuring running time."""
        self._running_clock.start()

    def enter_off(self) -> None:
        """Effect of any → OFF: bank running time and zero speed and throttle."""
        self._running_clock.stop()
        self._speed_kmh = 0
        self._throttle_level = 0

    # ----------------------------------------------------------------- readings
    @property
    def speed_kmh(self) -> int:
        return self._speed_kmh

    @property
    def throttle_level(self) -> int:
        return self._throttle_level

    @property
    def pantograph_up(self) -> bool:
        return self._pantograph_up

    @property
    def voltage_v(self) -> int:
        """Line voltage, derived from the pantograph position."""
        if self._pantograph_up:
            return int(STANDARD_VOLTAGE.to(Volt))
        return 0

    @property
    def distance_m(self) -> int:
        return self._distance_m

    @property
    def running_time_s(self) -> int:
        """Running time as of the last flush, in whole seconds."""
        return self._running_clock.total_seconds

    # ----------------------------------------------------------------- pantograph
    def raise_pantograph(self) -> None:
        """Raise the pantograph onto the catenary.

        Raises:
            AlreadyRaisedError: If the pantograph is already up.
        """
        if self._pantograph_up:
            raise AlreadyRaisedError()
        self._pantograph_up = True
        logger.info("Pantograph raised, voltage: %dV", self.voltage_v)

    def lower_pantograph(self) -> None:
        """Lower the pantograph, disconnecting line power.

        Raises:
            InvalidStateForPantographLowerError: If the engine is not OFF.
        """
        if self.power_state != PowerState.OFF:
            raise InvalidStateForPantographLowerError(self.power_state)
        self._pantograph_up = False
        logger.info("Pantograph lowered")

    # ----------------------------------------------------------------- engine
    def start_engine(self) -> None:
        """Start the engine: OFF → IDLE, and start the running clock.

        Raises:
            AlreadyStartedError: If the engine is not OFF.
            NoPowerToStartError: If the pantograph is down.
        """
        if self.power_state != PowerState.OFF:
            raise AlreadyStartedError(self.power_state)
        if not self._pantograph_up:
            raise NoPowerToStartError(self.voltage_v)
        self.transition_to(PowerState.IDLE)
        logger.info("Engine started")

    def stop_engine(self) -> None:
        """Shut the engine down. Does nothing when already OFF.

        Banks the running time, then resets speed and throttle to zero. The
        pantograph stays where it is.
        """
        if self.power_state == PowerState.OFF:
            return
        self.transition_to(PowerState.OFF)
        logger.info("Engine stopped. Total running time: %d seconds", self.running_time_s)

    # ----------------------------------------------------------------- throttle
    def increase_throttle(self) -> None:
        """Open the throttle by one notch and set speed from the new notch.

        Raises:
            InvalidStateForThrottleError: If the engine is neither IDLE nor RUNNING.
            ThrottleAtMaximumError: If the throttle is already in the top notch.
        """
        if self.power_state not in (PowerState.IDLE, PowerState.RUNNING):
            raise InvalidStateForThrottleError(self.power_state)
        if self._throttle_level >= MAX_THROTTLE:
            raise ThrottleAtMaximumError(self._throttle_level, MAX_THROTTLE)

        self._throttle_level += 1
        self._speed_kmh = speed_for_throttle(self._throttle_level)
        self.transition_to(PowerState.RUNNING)
        logger.info("Throttle increased to %d, speed: %dkm/h", self._throttle_level, self._speed_kmh)

    def set_throttle(self, target: int) -> int:
        """Move the throttle up to notch ``target`` one notch at a time.

        Notches already applied are kept if a later one fails.

        Args:
            target: Desired notch.

        Returns:
            int: Number of notches applied (0 when already at ``target``).

        Raises:
            ThrottleReductionError: If ``target`` is below the current notch.
            InvalidStateForThrottleError: As for ``increase_throttle``.
            ThrottleAtMaximumError: When ``target`` exceeds the top notch,
                after the throttle has reached it.
        """
        current = self._throttle_level
        if target < current:
            raise ThrottleReductionError(current, target)
        for _ in range(target - current):
            self.increase_throttle()
        return target - current

    # ----------------------------------------------------------------- brakes
    def apply_brakes(self) -> None:
        """Apply the service brake once. Does nothing when standing still.

        Sheds ``STANDARD_BRAKE_DECELERATION_KMH`` and lowers the throttle to
        match the new speed. Reaching zero leaves the unit IDLE with the
        throttle closed.
        """
        if self._speed_kmh <= 0:
            return
        self.transition_to(PowerState.BRAKING)
        self._speed_kmh = max(0, self._speed_kmh - STANDARD_BRAKE_DECELERATION_KMH)
        self._throttle_level = throttle_for_speed(self._speed_kmh, self._throttle_level)

        if self._speed_kmh == 0:
            self.transition_to(PowerState.IDLE)
            self._throttle_level = 0
        logger.info("Brakes applied, speed: %dkm/h, throttle: %d", self._speed_kmh, self._throttle_level)

    def emergency_stop(self) -> None:
        """Halt at once and go straight to IDLE. Does nothing when standing still."""
        if self._speed_kmh <= 0:
            return
        logger.warning("EMERGENCY STOP INITIATED")
        self._speed_kmh = 0
        self._throttle_level = 0
        self.transition_to(PowerState.IDLE)
        logger.info("Emergency stop completed, engine is now idle")

    # ----------------------------------------------------------------- movement
    def simulate_movement(self, seconds: int | Time) -> None:
        """Advance the odometer by ``seconds`` of travel at the current speed.

        Only RUNNING and BRAKING move the unit; in any other state, or for a
        duration that is not positive or exceeds ``MAX_SIMULATION_SECONDS``,
        nothing happens. Speed is held constant over
        the interval and the running clock is not touched.

        Args:
            seconds: Simulated duration, as whole seconds or a time unit.
        """
        if self.power_state not in (PowerState.RUNNING, PowerState.BRAKING):
            return
        span = float(seconds) if isinstance(seconds, Time) else seconds
        if not 0 < span <= MAX_SIMULATION_SECONDS:
            logger.debug("Ignored simulation interval outside 1..%d seconds", MAX_SIMULATION_SECONDS)
            return
        duration = seconds if isinstance(seconds, Time) else Second(seconds)
        travelled = distance_travelled(self._speed_kmh, duration)
        self._distance_m += int(travelled)
        logger.debug(
            "Simulated movement: %dm in %ss at %dkm/h",
            int(travelled),
            f"{duration.to(Second):g}",
            self._speed_kmh,
        )

    # ----------------------------------------------------------------- status
    def snapshot(self) -> LocomotiveStatus:
        """Return the current fields without flushing the running clock."""
        return LocomotiveStatus(
            power_state=self.power_state,
            speed_kmh=self._speed_kmh,
            throttle_level=self._throttle_level,
            throttle_max=MAX_THROTTLE,
            pantograph_up=self._pantograph_up,
            voltage_v=self.voltage_v,
            distance_m=self.distance_m,
            running_time_s=self.running_time_s,
        )

    def status(self) -> LocomotiveStatus:
        """Flush the running clock and return a full snapshot."""
        self._running_clock.flush()
        return self.snapshot()

    def compact_status(self) -> str:
        """One-line state, speed and throttle, e.g. ``[Idle] 0 km/h T:0/8``."""
        return self.snapshot().compact_line()
