"""Tests for unit conversion utilities."""

import unittest

from bodyfat_estimator.units import (
    cm_to_ft_in,
    cm_to_in,
    format_for_input,
    ft_in_to_cm,
    in_to_cm,
    kg_to_lbs,
    lbs_to_kg,
    parse_number,
)


class TestWeight(unittest.TestCase):
    def test_kg_to_lbs(self):
        self.assertAlmostEqual(kg_to_lbs(100), 220.462)

    def test_round_trip(self):
        for kg in range(30, 301, 7):
            back = lbs_to_kg(kg_to_lbs(kg))
            self.assertLess(abs(back - kg) / kg, 1e-6, f"Failed for kg={kg}")


class TestLength(unittest.TestCase):
    def test_in_to_cm(self):
        self.assertAlmostEqual(in_to_cm(10), 25.4)

    def test_round_trip(self):
        for cm in range(20, 251, 9):
            back = in_to_cm(cm_to_in(cm))
            self.assertLess(abs(back - cm) / cm, 1e-6, f"Failed for cm={cm}")

    def test_cm_to_ft_in(self):
        # 180 cm = 70.87 in = 5 ft 10.9 in
        self.assertEqual(cm_to_ft_in(180), (5, 10.9))

    def test_cm_to_ft_in_remainder_can_round_to_twelve(self):
        self.assertEqual(cm_to_ft_in(182.8), (5, 12.0))

    def test_ft_in_to_cm(self):
        self.assertAlmostEqual(ft_in_to_cm(5, 10), 177.8)

    def test_ft_in_to_cm_missing_part(self):
        self.assertIsNone(ft_in_to_cm(None, 10))
        self.assertIsNone(ft_in_to_cm(5, None))


class TestFormatForInput(unittest.TestCase):
    def test_drops_trailing_zeros(self):
        self.assertEqual(format_for_input(80.0), "80")
        self.assertEqual(format_for_input(176.43), "176.4")

    def test_decimals(self):
        self.assertEqual(format_for_input(5.0, 0), "5")
        self.assertEqual(format_for_input(7.874, 2), "7.87")

    def test_negative_zero(self):
        self.assertEqual(format_for_input(-0.04), "0")
        self.assertEqual(format_for_input(-0.0), "0")

    def test_missing(self):
        self.assertEqual(format_for_input(None), "")
        self.assertEqual(format_for_input(float("nan")), "")


class TestParseNumber(unittest.TestCase):
    def test_comma_decimal(self):
        self.assertEqual(parse_number("15,5"), 15.5)

    def test_whitespace(self):
        self.assertEqual(parse_number(" 80 "), 80.0)

    def test_invalid(self):
        self.assertIsNone(parse_number(""))
        self.assertIsNone(parse_number("abc"))
        self.assertIsNone(parse_number("1,2,3"))
        self.assertIsNone(parse_number("inf"))
        self.assertIsNone(parse_number("nan"))


if __name__ == "__main__":
    unittest.main()
