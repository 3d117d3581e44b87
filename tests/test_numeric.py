import math
import unittest

from fusion_mcp.core.numeric import to_integer, to_number


class TestToNumber(unittest.TestCase):
    def test_absent_and_blank_use_default(self):
        self.assertEqual(to_number(None, 5), 5)
        self.assertEqual(to_number("", 5), 5)
        self.assertEqual(to_number("   ", 5), 5)

    def test_numeric_strings_convert(self):
        self.assertEqual(to_number("12.5"), 12.5)
        self.assertEqual(to_number(" -3 "), -3.0)

    def test_unconvertible_uses_default(self):
        self.assertEqual(to_number("abc", 7), 7)
        self.assertEqual(to_number([1, 2], 7), 7)
        self.assertEqual(to_number({"a": 1}, 7), 7)

    def test_non_finite_uses_default(self):
        self.assertEqual(to_number("nan", 1), 1)
        self.assertEqual(to_number(float("inf"), 1), 1)
        self.assertEqual(to_number("-Infinity", 1), 1)

    def test_clamps_into_range(self):
        self.assertEqual(to_number(500, 0, 0, 100), 100)
        self.assertEqual(to_number("-20", 0, 0, 100), 0)
        self.assertEqual(to_number(42, 0, 0, 100), 42)

    def test_never_outside_range_or_nan(self):
        inputs = [None, "", " ", "1e400", "-1e400", "3.7", -8, 10**20, "x", True, 0, "0.0"]
        for value in inputs:
            with self.subTest(value=value):
                out = to_number(value, 2.0, -10.0, 10.0)
                self.assertFalse(math.isnan(out))
                self.assertGreaterEqual(out, -10.0)
                self.assertLessEqual(out, 10.0)


class TestToInteger(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(to_integer(None), 1)
        self.assertEqual(to_integer("oops", 4), 4)

    def test_rounds_half_away_from_zero(self):
        self.assertEqual(to_integer(2.5, 0, -100, 100), 3)
        self.assertEqual(to_integer(-2.5, 0, -100, 100), -3)
        self.assertEqual(to_integer("7.4", 0, 0, 100), 7)

    def test_clamps_before_rounding(self):
        self.assertEqual(to_integer(5000), 1000)
        self.assertEqual(to_integer(-5), 1)
        self.assertIsInstance(to_integer("12"), int)

    def test_none_default_passthrough(self):
        self.assertIsNone(to_integer("x", None, 0, 10))


if __name__ == "__main__":
    unittest.main()
