"""
Tests for the running-time stopwatch.
"""

import unittest

from wap7sim.timer import RunningClock


class TickingClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestRunningClock(unittest.TestCase):
    """Test start, flush and stop accounting."""

    def setUp(self):
        self.source = TickingClock()
        self.clock = RunningClock(clock=self.source)

    def test_starts_stopped_at_zero(self):
        self.assertFalse(self.clock.running)
        self.assertEqual(self.clock.total_seconds, 0)

    def test_flush_while_stopped_is_noop(self):
        self.source.now = 50.0
        self.clock.flush()
        self.assertEqual(float(self.clock.total), 0.0)

    def test_flush_adds_elapsed(self):
        self.clock.start()
        self.source.now = 2.5
        self.assertEqual(float(self.clock.flush()), 2.5)
        self.source.now = 4.0
        self.clock.flush()
        self.assertEqual(float(self.clock.total), 4.0)

    def test_stop_then_restart_accumulates(self):
        self.clock.start()
        self.source.now = 3.0
        self.clock.stop()
        self.source.now = 100.0
        self.clock.start()
        self.source.now = 101.9
        self.clock.stop()
        self.assertEqual(self.clock.total_seconds, 4)
        self.assertFalse(self.clock.running)

    def test_second_start_keeps_original_mark(self):
        self.clock.start()
        self.source.now = 5.0
        self.clock.start()
        self.source.now = 6.0
        self.clock.stop()
        self.assertEqual(float(self.clock.total), 6.0)


if __name__ == '__main__':
    unittest.main()
