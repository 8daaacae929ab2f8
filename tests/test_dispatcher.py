"""
Tests for the command dispatcher.
"""

import unittest

from wap7sim.console.dispatcher import INVALID_COMMAND, CommandDispatcher, ResultKind
from wap7sim.errors import (
    AlreadyRaisedError,
    NoPowerToStartError,
    ThrottleAtMaximumError,
    ThrottleReductionError,
)
from wap7sim.locomotive import Locomotive, PowerState


def make_dispatcher(toggles=None) -> CommandDispatcher:
    states = iter(toggles or [True, False])
    return CommandDispatcher(Locomotive(clock=lambda: 0.0), on_verbose=lambda: next(states))


def running_dispatcher(level: int = 0) -> CommandDispatcher:
    dispatcher = make_dispatcher()
    dispatcher.dispatch("pantograph up")
    dispatcher.dispatch("start")
    if level:
        dispatcher.dispatch(f"throttle {level}")
    return dispatcher


class TestParsing(unittest.TestCase):
    """Test input parsing and invalid input."""

    def test_unknown_command(self):
        result = make_dispatcher().dispatch("fly")
        self.assertEqual(result.kind, ResultKind.INVALID)
        self.assertEqual(result.message, INVALID_COMMAND)
        self.assertIsNone(result.command)

    def test_blank_line_is_invalid(self):
        result = make_dispatcher().dispatch("   ")
        self.assertEqual(result.kind, ResultKind.INVALID)

    def test_case_and_whitespace_insensitive(self):
        dispatcher = make_dispatcher()
        result = dispatcher.dispatch("  PANTOGRAPH   Up  ")
        self.assertTrue(result.ok)
        self.assertTrue(dispatcher.locomotive.pantograph_up)

    def test_vocabulary(self):
        self.assertEqual(
            set(make_dispatcher().commands),
            {"pantograph", "start", "stop", "throttle", "brake", "emergency",
             "simulate", "status", "help", "verbose", "exit"},
        )


class TestPantographCommands(unittest.TestCase):
    """Test the pantograph command."""

    def test_query_position(self):
        dispatcher = make_dispatcher()
        self.assertEqual(dispatcher.dispatch("pantograph").message, "Pantograph is DOWN")
        dispatcher.dispatch("pantograph raise")
        self.assertEqual(dispatcher.dispatch("pantograph").message, "Pantograph is UP")

    def test_raise_and_lower(self):
        dispatcher = make_dispatcher()
        self.assertEqual(
            dispatcher.dispatch("pantograph up").message, "Pantograph raised. Power available."
        )
        self.assertEqual(
            dispatcher.dispatch("pantograph lower").message,
            "Pantograph lowered. Power disconnected.",
        )
        self.assertFalse(dispatcher.locomotive.pantograph_up)

    def test_raise_twice_is_failure(self):
        dispatcher = make_dispatcher()
        dispatcher.dispatch("pantograph up")
        with self.assertLogs("wap7sim.console.dispatcher", level="WARNING") as logs:
            result = dispatcher.dispatch("pantograph up")
        self.assertEqual(result.kind, ResultKind.FAILURE)
        self.assertEqual(result.command, "pantograph")
        self.assertIsInstance(result.error, AlreadyRaisedError)
        self.assertEqual(result.message, "Pantograph already raised")
        self.assertIn("Engine error: Pantograph already raised", logs.output[0])

    def test_bad_argument(self):
        result = make_dispatcher().dispatch("pantograph sideways")
        self.assertEqual(result.kind, ResultKind.INVALID)
        self.assertEqual(result.message, "Invalid pantograph command. Use 'up' or 'down'.")


class TestEngineCommands(unittest.TestCase):
    """Test start, stop, throttle, brake and emergency."""

    def test_start_without_pantograph(self):
        result = make_dispatcher().dispatch("start")
        self.assertEqual(result.kind, ResultKind.FAILURE)
        self.assertIsInstance(result.error, NoPowerToStartError)

    def test_start_and_stop(self):
        dispatcher = make_dispatcher()
        dispatcher.dispatch("pantograph up")
        self.assertEqual(dispatcher.dispatch("start").message, "Engine started successfully.")
        self.assertEqual(dispatcher.dispatch("stop").message, "Engine stopped.")
        self.assertEqual(dispatcher.dispatch("stop").message, "Engine stopped.")
        self.assertEqual(dispatcher.locomotive.power_state, PowerState.OFF)

    def test_throttle_single_step(self):
        result = running_dispatcher().dispatch("throttle")
        self.assertEqual(result.message, "Throttle increased. [Running] 10 km/h T:1/8")

    def test_throttle_to_level(self):
        dispatcher = running_dispatcher(1)
        result = dispatcher.dispatch("throttle 3")
        self.assertEqual(result.message, "Throttle set to 3. [Running] 30 km/h T:3/8")
        self.assertEqual(dispatcher.dispatch("throttle 3").message, "Throttle already at 3.")

    def test_throttle_down_is_refused(self):
        dispatcher = running_dispatcher(3)
        result = dispatcher.dispatch("throttle 1")
        self.assertEqual(result.kind, ResultKind.FAILURE)
        self.assertIsInstance(result.error, ThrottleReductionError)
        self.assertEqual(result.message, "Use brake to reduce throttle/speed")
        self.assertEqual(dispatcher.locomotive.throttle_level, 3)

    def test_throttle_past_maximum(self):
        dispatcher = running_dispatcher(3)
        result = dispatcher.dispatch("throttle 12")
        self.assertIsInstance(result.error, ThrottleAtMaximumError)
        self.assertEqual(dispatcher.locomotive.throttle_level, 8)

    def test_throttle_not_a_number(self):
        result = running_dispatcher().dispatch("throttle fast")
        self.assertEqual(result.kind, ResultKind.INVALID)
        self.assertEqual(result.message, "Invalid throttle level. Use a number.")

    def test_brake(self):
        result = running_dispatcher(3).dispatch("brake")
        self.assertEqual(result.message, "Brakes applied. [Braking] 20 km/h T:2/8")

    def test_emergency(self):
        dispatcher = running_dispatcher(5)
        result = dispatcher.dispatch("emergency")
        self.assertEqual(result.message, "EMERGENCY STOP EXECUTED! Engine halted.")
        self.assertEqual(dispatcher.locomotive.power_state, PowerState.IDLE)


class TestSimulateCommand(unittest.TestCase):
    """Test the simulate command and its argument validation."""

    def test_simulate(self):
        dispatcher = running_dispatcher(3)
        result = dispatcher.dispatch("simulate 60")
        self.assertEqual(result.message, "Simulated 60s of movement. [Running] 30 km/h T:3/8")
        self.assertEqual(dispatcher.locomotive.distance_m, 500)

    def test_invalid_durations(self):
        dispatcher = running_dispatcher(3)
        cases = {
            "simulate": "Please specify simulation time in seconds.",
            "simulate soon": "Invalid time value. Use a number in seconds.",
            "simulate 0": "Please specify a positive time value.",
            "simulate -5": "Please specify a positive time value.",
            "simulate 2147483648": "Invalid time value. Use a number in seconds.",
            f"simulate {10**400}": "Invalid time value. Use a number in seconds.",
        }
        for line, message in cases.items():
            with self.subTest(line=line):
                result = dispatcher.dispatch(line)
                self.assertEqual(result.kind, ResultKind.INVALID)
                self.assertEqual(result.message, message)
        self.assertEqual(dispatcher.locomotive.distance_m, 0)

    def test_longest_duration_accepted(self):
        dispatcher = running_dispatcher(3)
        result = dispatcher.dispatch("simulate 2147483647")
        self.assertTrue(result.ok)
        self.assertEqual(dispatcher.locomotive.distance_m, 17895697058)


class TestSystemCommands(unittest.TestCase):
    """Test status, help, verbose and exit."""

    def test_status(self):
        result = make_dispatcher().dispatch("status")
        self.assertEqual(
            result.message,
            "State: Off | Speed: 0 km/h | Throttle: 0/8 | Pantograph: Down | "
            "Voltage: 0 V | Distance: 0 m | Runtime: 0 s",
        )

    def test_help(self):
        result = make_dispatcher().dispatch("help")
        self.assertTrue(result.ok)
        self.assertEqual(result.command, "help")

    def test_verbose_toggles(self):
        dispatcher = make_dispatcher([True, False])
        self.assertEqual(dispatcher.dispatch("verbose").message, "Verbose logging enabled.")
        self.assertEqual(dispatcher.dispatch("verbose").message, "Verbose logging disabled.")

    def test_exit_terminates_with_final_status(self):
        result = running_dispatcher(2).dispatch("exit")
        self.assertTrue(result.terminate)
        first, second = result.message.split("\n")
        self.assertEqual(first, "Exiting simulation. Final status:")
        self.assertTrue(second.startswith("State: Running | Speed: 20 km/h"))

    def test_only_exit_terminates(self):
        dispatcher = running_dispatcher()
        for line in ("status", "help", "brake", "fly", "start"):
            self.assertFalse(dispatcher.dispatch(line).terminate)


if __name__ == '__main__':
    unittest.main()
