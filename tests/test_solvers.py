"""
Unit tests for implied rate recovery.

Round-trips a sample of rates through level_payment and back through
implied_annual_rate, and checks the argument validation.

Version: 0.1.0
Status: Active
"""

import unittest

from emi_amortization.annuity import level_payment
from emi_amortization.schedule import calculate_amortization
from emi_amortization.solvers import implied_annual_rate


class TestImpliedAnnualRate(unittest.TestCase):

    def test_recovers_rate_from_unrounded_payment(self):
        for rate in (0.75, 6.0, 8.5, 13.25, 36.0):
            for term in (12, 60, 360):
                with self.subTest(rate=rate, term=term):
                    emi = level_payment(250_000, rate, term)
                    self.assertAlmostEqual(implied_annual_rate(250_000, emi, term), rate, places=6)

    def test_recovers_rate_from_rounded_schedule_emi(self):
        result = calculate_amortization(100_000, 8.5, 1)
        rate = implied_annual_rate(100_000, result.monthly_emi, result.tenure_months)
        self.assertAlmostEqual(rate, 8.5, places=2)

    def test_payment_not_covering_principal_raises(self):
        with self.assertRaises(ValueError):
            implied_annual_rate(120_000, 10_000, 12)
        with self.assertRaises(ValueError):
            implied_annual_rate(120_000, 9_000, 12)

    def test_payment_beyond_search_bracket_raises(self):
        with self.assertRaises(ValueError):
            implied_annual_rate(1_000, 5_000, 12)

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            implied_annual_rate(0, 100, 12)
        with self.assertRaises(ValueError):
            implied_annual_rate(1_000, 0, 12)
        with self.assertRaises(ValueError):
            implied_annual_rate(1_000, 100, 0)


if __name__ == '__main__':
    unittest.main()
