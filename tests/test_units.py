"""
Tests for the unit system and locomotive physics helpers.
"""

import unittest

from wap7sim.locomotive import distance_travelled, speed_for_throttle, throttle_for_speed
from wap7sim.unit import (
    Hour,
    Kilometer,
    Kilovolt,
    Meter,
    Minute,
    Second,
    Volt,
)


class TestUnits(unittest.TestCase):
    """Test conversions and family checks."""

    def test_si_storage(self):
        self.assertEqual(float(Kilometer(2.5)), 2500.0)
        self.assertEqual(float(Minute(2)), 120.0)
        self.assertEqual(Kilovolt(25).to(Volt), 25000.0)

    def test_conversion(self):
        self.assertEqual(Meter(1500).to(Kilometer), 1.5)
        self.assertEqual(Hour(1).to(Second), 3600.0)

    def test_same_family_arithmetic(self):
        total = Meter(500) + Kilometer(1)
        self.assertIsInstance(total, Meter)
        self.assertEqual(float(total), 1500.0)
        self.assertTrue(Second(59) < Minute(1))
        self.assertEqual(Minute(1), Second(60))

    def test_cross_family_rejected(self):
        with self.assertRaises(TypeError):
            Meter(1) + Second(1)
        with self.assertRaises(TypeError):
            Volt(1) < Meter(1)
        with self.assertRaises(TypeError):
            Meter(1).to(Second)

    def test_scaling(self):
        self.assertEqual(float(Meter(10) * 3), 30.0)
        self.assertEqual(float(2 * Meter(10)), 20.0)
        self.assertEqual(float(Meter(10) / 4), 2.5)
        with self.assertRaises(TypeError):
            Meter(10) * Second(2)

    def test_hashable(self):
        self.assertEqual(len({Second(1), Second(1)}), 1)

    def test_str(self):
        self.assertEqual(str(Kilovolt(25)), "25.0 kV")
        self.assertEqual(str(Meter(500)), "500.0 m")


class TestPhysics(unittest.TestCase):
    """Test speed and distance helpers."""

    def test_speed_for_throttle(self):
        self.assertEqual([speed_for_throttle(n) for n in range(9)], [0, 10, 20, 30, 40, 50, 60, 70, 80])
        self.assertEqual(speed_for_throttle(20), 140)

    def test_throttle_for_speed_never_rises(self):
        self.assertEqual(throttle_for_speed(70, 8), 7)
        self.assertEqual(throttle_for_speed(25, 2), 2)
        self.assertEqual(throttle_for_speed(0, 5), 0)

    def test_distance_travelled(self):
        self.assertEqual(int(distance_travelled(30, Second(60))), 500)
        self.assertEqual(int(distance_travelled(10, Second(1))), 2)
        self.assertEqual(int(distance_travelled(80, Hour(1))), 80000)
        self.assertIsInstance(distance_travelled(0, Second(10)), Meter)


if __name__ == '__main__':
    unittest.main()
