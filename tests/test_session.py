"""
Tests for the calculator session state
"""
import unittest

from flight_time_calculator.core.session import TimeCalculator


class TestTimeCalculator(unittest.TestCase):
    """Expression plus manual adjustments"""

    def test_expression_plus_manual_adjustments(self):
        """Button nudges add to the parsed total"""
        calc = TimeCalculator()
        calc.set_expression("1:30")
        calc.add_hours(1)
        calc.add_minutes(-15)
        self.assertEqual(calc.total_minutes, 135)
        self.assertTrue(calc.is_valid)

    def test_render_modes(self):
        """Each display mode renders the combined total"""
        calc = TimeCalculator("2:15")
        self.assertEqual(calc.render('hhmm'), "2:15")
        self.assertEqual(calc.render('decimal_exact'), "2.25h")
        self.assertEqual(calc.render('decimal_exact', 1), "2.3h")
        self.assertEqual(calc.render('decimal_tenths'), "2.3h")
        self.assertEqual(calc.render('verbose'), "2 hours 15 minutes")

    def test_render_unknown_mode(self):
        """Unknown modes raise ValueError"""
        with self.assertRaises(ValueError):
            TimeCalculator().render('seconds')

    def test_secondary_line_skips_primary_mode(self):
        """The secondary line lists the other numeric forms"""
        calc = TimeCalculator("2:15")
        self.assertEqual(calc.secondary_line('hhmm'), "Decimal (N.NN) 2.25h | Decimal (N.N) 2.3h")
        self.assertEqual(calc.secondary_line('decimal_tenths'), "HH:MM 2:15 | Decimal (N.NN) 2.25h")
        self.assertEqual(calc.secondary_line('verbose'),
                         "HH:MM 2:15 | Decimal (N.NN) 2.25h | Decimal (N.N) 2.3h")

    def test_secondary_line_custom_labels(self):
        """Labels can be overridden"""
        calc = TimeCalculator(":30")
        line = calc.secondary_line('hhmm', labels={'decimal_exact': 'Dec', 'decimal_tenths': 'Tenths'})
        self.assertEqual(line, "Dec 0.50h | Tenths 0.5h")

    def test_invalid_expression_keeps_manual_minutes(self):
        """An invalid expression still shows the manual adjustment"""
        calc = TimeCalculator("abc")
        calc.add_minutes(30)
        self.assertEqual(calc.total_minutes, 30)
        self.assertFalse(calc.is_valid)

    def test_reset(self):
        """Reset clears expression and adjustment"""
        calc = TimeCalculator("1:00", manual_minutes=15)
        calc.reset()
        self.assertEqual(calc.expression, "")
        self.assertEqual(calc.total_minutes, 0)
        self.assertTrue(calc.is_valid)

    def test_set_expression_none(self):
        """None is treated as an empty expression"""
        calc = TimeCalculator("1")
        calc.set_expression(None)
        self.assertEqual(calc.expression, "")


if __name__ == "__main__":
    unittest.main()
