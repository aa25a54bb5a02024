import random
import unittest

from ctl import INT32_MAX, INT32_MIN, extended_gcd, gcd
from ctl.int32 import trunc_divmod


class GcdTests(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(gcd(713, 552), 23)
        self.assertEqual(gcd(552, 713), 23)
        self.assertEqual(gcd(713, 0), 713)
        self.assertEqual(gcd(0, 713), 713)
        self.assertEqual(gcd(11253, 2607), 33)

    def test_sign_follows_last_remainder(self):
        self.assertEqual(gcd(-552, -713), -23)
        self.assertEqual(gcd(-11253, 2607), -33)
        self.assertEqual(gcd(-713, 0), -713)

    def test_divides_both_operands(self):
        rng = random.Random(1234)
        for _ in range(500):
            a = rng.randint(-100000, 100000) or 1
            b = rng.randint(-100000, 100000) or 1
            g = gcd(a, b)
            self.assertEqual(a % g, 0)
            self.assertEqual(b % g, 0)

    def test_zero_zero_is_a_domain_error(self):
        with self.assertRaises(ValueError):
            gcd(0, 0)

    def test_rejects_out_of_range_and_non_integers(self):
        with self.assertRaises(OverflowError):
            gcd(INT32_MAX + 1, 3)
        with self.assertRaises(TypeError):
            gcd(1.5, 3)


class ExtendedGcdTests(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(extended_gcd(161, 28), (7, -1, 6))
        self.assertEqual(extended_gcd(713, 552), (23, 7, -9))
        self.assertEqual(extended_gcd(11253, 2607), (33, 19, -82))

    def test_zero_second_operand_returns_magnitude(self):
        self.assertEqual(extended_gcd(713, 0), (713, 1, 0))
        self.assertEqual(extended_gcd(-713, 0), (713, 1, 0))

    def test_magnitude_of_int32_min_overflows(self):
        with self.assertRaises(OverflowError):
            extended_gcd(INT32_MIN, 0)

    def test_zero_first_operand(self):
        self.assertEqual(extended_gcd(0, 713), (713, 0, 1))

    def test_coefficients_refer_to_original_order(self):
        self.assertEqual(extended_gcd(552, 713), (23, -9, 7))
        self.assertEqual(extended_gcd(-552, -713), (-23, -9, 7))

    def test_bezout_identity(self):
        rng = random.Random(99)
        for _ in range(500):
            a = rng.randint(-46000, 46000) or 1
            b = rng.randint(-46000, 46000) or 1
            g, s, t = extended_gcd(a, b)
            self.assertEqual(a * s + b * t, g)
            self.assertEqual(g, gcd(a, b))

    def test_zero_zero_is_a_domain_error(self):
        with self.assertRaises(ValueError):
            extended_gcd(0, 0)


class TruncDivmodTests(unittest.TestCase):
    def test_rounds_toward_zero(self):
        self.assertEqual(trunc_divmod(7, 2), (3, 1))
        self.assertEqual(trunc_divmod(-7, 2), (-3, -1))
        self.assertEqual(trunc_divmod(7, -2), (-3, 1))
        self.assertEqual(trunc_divmod(-7, -2), (3, -1))


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
