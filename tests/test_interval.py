from __future__ import annotations

import math
import unittest
from decimal import Decimal

import numpy as np

from axisfit import ChartDataError, Interval, IntervalTicker


class IntervalTests(unittest.TestCase):
    def test_rejects_empty_reversed_and_unbounded_ranges(self) -> None:
        for lo, hi in ((1.0, 1.0), (2.0, 1.0), (0.0, math.inf), (-math.inf, 0.0), (math.nan, 1.0)):
            with self.subTest(lo=lo, hi=hi):
                with self.assertRaises(ValueError):
                    Interval(lo, hi)

    def test_basic_measures(self) -> None:
        interval = Interval(2.0, 6.0)
        self.assertEqual(interval.size(), 4.0)
        self.assertEqual(interval.center(), 4.0)
        self.assertEqual(interval.t(3.0), 0.25)
        self.assertEqual(interval.as_tuple(), (2.0, 6.0))
        self.assertEqual(repr(interval), "2.0..6.0")

    def test_from_values_skips_missing_entries(self) -> None:
        interval = Interval.from_values([3, None, Decimal("-1.5"), np.nan, 2])
        self.assertEqual(interval.as_tuple(), (-1.5, 3.0))

    def test_from_values_needs_two_distinct_finite_values(self) -> None:
        with self.assertRaises(ValueError):
            Interval.from_values([])
        with self.assertRaises(ValueError):
            Interval.from_values([5.0, 5.0])
        with self.assertRaises(ValueError):
            Interval.from_values([1.0, math.inf])

    def test_from_values_rejects_text_input(self) -> None:
        with self.assertRaises(ChartDataError):
            Interval.from_values("1, 2, 3")

    def test_extend_and_include_zero_return_new_intervals(self) -> None:
        interval = Interval(2.0, 5.0)
        self.assertEqual(interval.include_zero(), Interval(0.0, 5.0))
        self.assertEqual(interval.extend_to(9.0), Interval(2.0, 9.0))
        self.assertEqual(interval.extend_to(3.0), interval)
        self.assertEqual(interval.as_tuple(), (2.0, 5.0))
        with self.assertRaises(ValueError):
            interval.extend_to(math.nan)

    def test_equal_by_value_but_unhashable(self) -> None:
        self.assertEqual(Interval(0.0, 1.0), Interval(0.0, 1.0))
        with self.assertRaises(TypeError):
            hash(Interval(0.0, 1.0))

    def test_scale_center(self) -> None:
        self.assertEqual(Interval(0.0, 10.0).scale_center(2.0), Interval(-5.0, 15.0))

    def test_to_rounded_moves_max_past_itself(self) -> None:
        self.assertEqual(Interval(0.0, 100.0).to_rounded(), Interval(0.0, 120.0))
        self.assertEqual(Interval(0.5, 9.3).to_rounded(), Interval(0.0, 10.0))

    def test_to_rounded_rejects_overflowing_size(self) -> None:
        with self.assertRaises(ValueError):
            Interval(-1e308, 1e308).to_rounded()

    def test_setters_keep_the_invariant(self) -> None:
        interval = Interval(0.0, 10.0)
        self.assertIs(interval.set_max(20.0), interval)
        self.assertEqual(interval.max, 20.0)
        with self.assertRaises(ValueError):
            interval.set_min(20.0)
        with self.assertRaises(ValueError):
            interval.set_max(-1.0)
        self.assertEqual(interval.as_tuple(), (0.0, 20.0))

    def test_ticker_wraps_interval(self) -> None:
        interval = Interval(0.0, 1.0)
        ticker = interval.ticker(pixels_per_tick=30.0)
        self.assertIsInstance(ticker, IntervalTicker)
        self.assertIs(ticker.interval, interval)
        self.assertEqual(ticker.pixels_per_tick, 30.0)


if __name__ == "__main__":
    unittest.main()
