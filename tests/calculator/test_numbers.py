"""
Unit tests for calculator number parsing and display formatting.

Run (with venv activated):
  python -m unittest tests.calculator.test_numbers -v
  pytest tests/calculator/ -v
"""
import math
import unittest

from pocketcalc.projects.calculator.core.numbers import (
    format_display,
    number_to_string,
    parse_number,
    to_exponential,
)


class TestParseNumber(unittest.TestCase):
    """Lenient prefix parsing of display strings."""

    def test_integer_and_decimal(self):
        self.assertEqual(parse_number("42"), 42.0)
        self.assertEqual(parse_number("3.25"), 3.25)

    def test_trailing_decimal_point(self):
        self.assertEqual(parse_number("0."), 0.0)
        self.assertEqual(parse_number("7."), 7.0)

    def test_negative(self):
        self.assertEqual(parse_number("-5"), -5.0)

    def test_exponent_form(self):
        self.assertEqual(parse_number("1e+21"), 1e21)
        self.assertEqual(parse_number("5e-7"), 5e-7)

    def test_infinity(self):
        self.assertEqual(parse_number("Infinity"), math.inf)
        self.assertEqual(parse_number("-Infinity"), -math.inf)

    def test_trailing_junk_ignored(self):
        self.assertEqual(parse_number("Infinity."), math.inf)
        self.assertEqual(parse_number("12.5."), 12.5)

    def test_no_numeric_prefix_is_nan(self):
        self.assertTrue(math.isnan(parse_number("NaN")))
        self.assertTrue(math.isnan(parse_number("NaN5")))
        self.assertTrue(math.isnan(parse_number("")))


class TestNumberToString(unittest.TestCase):
    """Browser-style number printing."""

    def test_integral_values_have_no_fraction(self):
        self.assertEqual(number_to_string(8.0), "8")
        self.assertEqual(number_to_string(-5.0), "-5")
        self.assertEqual(number_to_string(100.0), "100")

    def test_negative_zero_prints_as_zero(self):
        self.assertEqual(number_to_string(-0.0), "0")

    def test_fractions(self):
        self.assertEqual(number_to_string(0.05), "0.05")
        self.assertEqual(number_to_string(2.5), "2.5")
        self.assertEqual(number_to_string(0.1 + 0.2), "0.30000000000000004")

    def test_small_values_switch_to_exponent(self):
        self.assertEqual(number_to_string(0.000001), "0.000001")
        self.assertEqual(number_to_string(5e-7), "5e-7")
        self.assertEqual(number_to_string(1.5e-7), "1.5e-7")

    def test_large_values_switch_to_exponent(self):
        self.assertEqual(number_to_string(1e20), "100000000000000000000")
        self.assertEqual(number_to_string(1e21), "1e+21")
        self.assertEqual(number_to_string(-2.5e22), "-2.5e+22")

    def test_non_finite(self):
        self.assertEqual(number_to_string(math.inf), "Infinity")
        self.assertEqual(number_to_string(-math.inf), "-Infinity")
        self.assertEqual(number_to_string(math.nan), "NaN")


class TestToExponential(unittest.TestCase):

    def test_rounds_mantissa_to_three_digits(self):
        self.assertEqual(to_exponential(1234567890123.0), "1.235e+12")

    def test_negative_exponent(self):
        self.assertEqual(to_exponential(0.30000000000000004), "3.000e-1")

    def test_rounding_carries_into_exponent(self):
        self.assertEqual(to_exponential(99999.0), "1.000e+5")

    def test_negative_value(self):
        self.assertEqual(to_exponential(-123456.0), "-1.235e+5")

    def test_zero(self):
        self.assertEqual(to_exponential(0.0), "0.000e+0")

    def test_non_finite(self):
        self.assertEqual(to_exponential(math.inf), "Infinity")
        self.assertEqual(to_exponential(math.nan), "NaN")


class TestFormatDisplay(unittest.TestCase):

    def test_short_display_unchanged(self):
        self.assertEqual(format_display("0"), "0")
        self.assertEqual(format_display("123456789012"), "123456789012")
        self.assertEqual(format_display("Infinity"), "Infinity")

    def test_long_display_uses_exponent(self):
        self.assertEqual(format_display("1234567890123"), "1.235e+12")
        self.assertEqual(format_display("0.30000000000000004"), "3.000e-1")

    def test_long_non_numeric_display(self):
        self.assertEqual(format_display("NaN1234567890"), "NaN")


if __name__ == "__main__":
    unittest.main()
