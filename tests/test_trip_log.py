"""
Tests for the trip journal, summary and chart.
"""

import os
import tempfile
import unittest

from wap7sim.analysis import TripLog, plot_trip
from wap7sim.locomotive import Locomotive


def recorded_trip() -> TripLog:
    loco = Locomotive(clock=lambda: 0.0)
    log = TripLog()
    steps = [
        ("pantograph up", loco.raise_pantograph),
        ("start", loco.start_engine),
        ("throttle 3", lambda: loco.set_throttle(3)),
        ("simulate 60", lambda: loco.simulate_movement(60)),
        ("brake", loco.apply_brakes),
        ("emergency", loco.emergency_stop),
    ]
    for command, operation in steps:
        operation()
        log.record(command, loco.snapshot())
    return log


class TestTripLog(unittest.TestCase):
    """Test journal recording and analysis."""

    def test_record_numbers_steps(self):
        log = recorded_trip()
        self.assertEqual(len(log), 6)
        self.assertEqual([e.step for e in log.entries], [1, 2, 3, 4, 5, 6])
        self.assertEqual(log.entries[2].command, "throttle 3")

    def test_to_frame(self):
        df = recorded_trip().to_frame()
        self.assertEqual(df.index.name, "step")
        self.assertEqual(list(df["speed_kmh"]), [0, 0, 30, 30, 20, 0])
        self.assertEqual(list(df["power_state"]), ["Off", "Idle", "Running", "Running", "Braking", "Idle"])
        self.assertEqual(df.loc[4, "distance_m"], 500)

    def test_summary(self):
        summary = recorded_trip().summary()
        self.assertEqual(summary["commands"], 6)
        self.assertEqual(summary["max_speed_kmh"], 30)
        self.assertAlmostEqual(summary["mean_speed_kmh"], 13.33)
        self.assertEqual(summary["distance_m"], 500)
        self.assertEqual(summary["state_counts"], {"Running": 2, "Idle": 2, "Off": 1, "Braking": 1})

    def test_empty_summary(self):
        summary = TripLog().summary()
        self.assertEqual(summary["commands"], 0)
        self.assertEqual(summary["state_counts"], {})

    def test_empty_frame_has_columns(self):
        df = TripLog().to_frame()
        self.assertIn("speed_kmh", df.columns)
        self.assertEqual(len(df), 0)


class TestPlotTrip(unittest.TestCase):
    """Test chart output."""

    def test_writes_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "trip.png")
            self.assertEqual(plot_trip(recorded_trip(), path), path)
            self.assertGreater(os.path.getsize(path), 0)

    def test_empty_log_rejected(self):
        with self.assertRaises(ValueError):
            plot_trip(TripLog(), "unused.png")


if __name__ == '__main__':
    unittest.main()
