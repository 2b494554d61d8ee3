"""
Tests for speed/time/distance and wind component helpers
"""
import unittest

from flight_time_calculator.core.navigation import (
    normalize_angle,
    parse_number,
    solve_triangle,
    wind_components,
)


class TestParseNumber(unittest.TestCase):
    """Number parsing for navigation inputs"""

    def test_values(self):
        """Comma separator accepted; empty, text and infinity rejected"""
        self.assertEqual(parse_number("1,5"), 1.5)
        self.assertEqual(parse_number(" 120 "), 120.0)
        self.assertIsNone(parse_number(""))
        self.assertIsNone(parse_number(None))
        self.assertIsNone(parse_number("abc"))
        self.assertIsNone(parse_number("inf"))


class TestSolveTriangle(unittest.TestCase):
    """Speed, distance and time"""

    def test_solve_speed(self):
        """Speed is distance over time"""
        result = solve_triangle('speed', distance="120", time="1:30")
        self.assertEqual(result.label, "Speed (kt)")
        self.assertEqual(result.unit, "kt")
        self.assertAlmostEqual(result.value, 80.0)

    def test_solve_distance(self):
        """Distance is speed times time"""
        result = solve_triangle('distance', speed="100", time=":45")
        self.assertEqual(result.unit, "NM")
        self.assertAlmostEqual(result.value, 75.0)

    def test_solve_time(self):
        """Time is distance over speed"""
        result = solve_triangle('time', speed="120", distance="60")
        self.assertEqual(result.unit, "hr")
        self.assertAlmostEqual(result.value, 0.5)

    def test_missing_or_invalid_inputs(self):
        """Missing values or zero divisors give None"""
        self.assertIsNone(solve_triangle('speed', distance="120", time="0"))
        self.assertIsNone(solve_triangle('speed', distance="120", time="1:75"))
        self.assertIsNone(solve_triangle('speed', time="1:00"))
        self.assertIsNone(solve_triangle('distance', speed="100"))
        self.assertIsNone(solve_triangle('time', speed="0", distance="10"))

    def test_unknown_quantity(self):
        """Unknown quantities raise ValueError"""
        with self.assertRaises(ValueError):
            solve_triangle('altitude', speed="100")


class TestWind(unittest.TestCase):
    """Runway wind components"""

    def test_normalize_angle(self):
        """Angles fold into [-180, 180]"""
        self.assertEqual(normalize_angle(270), -90)
        self.assertEqual(normalize_angle(-270), 90)
        self.assertEqual(normalize_angle(190), -170)
        self.assertEqual(normalize_angle(360), 0)
        self.assertEqual(normalize_angle(45), 45)

    def test_headwind_from_the_right(self):
        """Wind 30 degrees right of the runway"""
        result = wind_components("360", "030", "20")
        self.assertAlmostEqual(result.delta, 30)
        self.assertAlmostEqual(result.headwind, 17.3205, places=3)
        self.assertAlmostEqual(result.crosswind, 10.0)
        self.assertEqual(result.headwind_label, "Headwind")
        self.assertEqual(result.crosswind_label, "Crosswind (Right)")
        self.assertIsNone(result.gust_headwind)

    def test_tailwind_with_gust(self):
        """Wind from behind gives a tailwind, gusts included"""
        result = wind_components("090", "270", "10", "15")
        self.assertAlmostEqual(result.headwind, -10.0)
        self.assertAlmostEqual(result.gust_headwind, -15.0)
        self.assertEqual(result.headwind_label, "Tailwind")

    def test_crosswind_from_the_left(self):
        """Negative crosswind blows from the left"""
        result = wind_components("180", "090", "12")
        self.assertAlmostEqual(result.crosswind, -12.0)
        self.assertEqual(result.crosswind_label, "Crosswind (Left)")

    def test_missing_input(self):
        """Missing or malformed inputs give None"""
        self.assertIsNone(wind_components("", "030", "20"))
        self.assertIsNone(wind_components("360", "030", "fast"))


if __name__ == "__main__":
    unittest.main()
