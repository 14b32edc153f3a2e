from __future__ import annotations

import unittest
from decimal import Decimal

import numpy as np

from axisfit.adapters import coerce_values, normalize_points
from axisfit.errors import ChartDataError


class NormalizeTests(unittest.TestCase):
    def test_coerce_decimal_and_missing(self) -> None:
        values = coerce_values([Decimal("1.5"), None, 3])
        self.assertEqual(values.dtype, np.float64)
        self.assertEqual(values[0], 1.5)
        self.assertTrue(np.isnan(values[1]))
        self.assertEqual(values[2], 3.0)

    def test_coerce_generator(self) -> None:
        values = coerce_values(v * 2 for v in range(3))
        self.assertEqual(values.tolist(), [0.0, 2.0, 4.0])

    def test_coerce_rejects_text_and_2d_arrays(self) -> None:
        with self.assertRaises(ChartDataError):
            coerce_values("123")
        with self.assertRaises(ChartDataError):
            coerce_values(np.zeros((2, 2)))
        with self.assertRaises(ChartDataError) as ctx:
            coerce_values([1.0, "abc"], label="heights")
        self.assertIn("heights", str(ctx.exception))

    def test_coerce_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        values = coerce_values(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(values.dtype, np.float64)
        self.assertEqual(values.tolist(), [1.0, 2.0, 3.0])

    def test_coerce_pandas_series(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        values = coerce_values(pd.Series([1, None, 3], dtype="float64"))
        self.assertEqual(values[0], 1.0)
        self.assertTrue(np.isnan(values[1]))

    def test_points_drop_incomplete_pairs(self) -> None:
        x, y = normalize_points([(0, 1), (1, None), (2, 5)])
        self.assertEqual(x.tolist(), [0.0, 2.0])
        self.assertEqual(y.tolist(), [1.0, 5.0])

    def test_points_from_array(self) -> None:
        x, y = normalize_points(np.asarray([[0.0, 1.0], [2.0, 3.0]]))
        self.assertEqual(x.tolist(), [0.0, 2.0])
        self.assertEqual(y.tolist(), [1.0, 3.0])

    def test_points_from_dataframe(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"name": ["a", "b"], "x": [1, 2], "y": [3.0, 4.0]})
        x, y = normalize_points(df)
        self.assertEqual(x.tolist(), [1.0, 2.0])
        self.assertEqual(y.tolist(), [3.0, 4.0])

    def test_points_errors(self) -> None:
        with self.assertRaises(ChartDataError):
            normalize_points([])
        with self.assertRaises(ChartDataError):
            normalize_points([(1, 2, 3)])
        with self.assertRaises(ChartDataError):
            normalize_points([(None, 1), (2, float("nan"))])


if __name__ == "__main__":
    unittest.main()
