from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from chartscale.adapters.normalize import normalize_points, normalize_xy
from chartscale.errors import PlotDataError


class NormalizeTests(unittest.TestCase):
    def test_missing_values_are_masked(self) -> None:
        series = normalize_xy([1.0, None, Decimal("2.5"), float("inf")], name="s")
        self.assertEqual(series.x.tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertTrue(np.array_equal(series.mask, np.asarray([True, False, True, False])))
        self.assertEqual(series.name, "s")
        fx, fy = series.finite_points()
        self.assertEqual(fx.tolist(), [0.0, 2.0])
        self.assertEqual(fy.tolist(), [1.0, 2.5])

    def test_integer_arrays_become_float64(self) -> None:
        series = normalize_xy(np.asarray([1, 2, 3], dtype=np.int64), x=np.asarray([10, 20, 30]))
        self.assertEqual(series.y.dtype, np.float64)
        self.assertEqual(series.x.tolist(), [10.0, 20.0, 30.0])

    def test_points_as_mappings_and_pairs(self) -> None:
        series = normalize_points([{"x": 1, "y": 2}, (3, 4)])
        self.assertEqual(series.x.tolist(), [1.0, 3.0])
        self.assertEqual(series.y.tolist(), [2.0, 4.0])

    def test_pandas_series_input(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")
        series = normalize_xy(pd.Series([1, 2, 3]))
        self.assertEqual(series.y.tolist(), [1.0, 2.0, 3.0])

    def test_torch_tensor_input(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")
        series = normalize_xy(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(series.y.tolist(), [1.0, 2.0, 3.0])

    def test_invalid_inputs(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(None)
        with self.assertRaises(PlotDataError):
            normalize_xy([])
        with self.assertRaises(PlotDataError):
            normalize_xy([1.0, 2.0], x=[1.0])
        with self.assertRaises(PlotDataError):
            normalize_xy([[1.0, 2.0], [3.0, 4.0]])
        with self.assertRaises(PlotDataError):
            normalize_xy("123")
        with self.assertRaises(PlotDataError):
            normalize_xy(["a", "b"])
        with self.assertRaises(PlotDataError):
            normalize_points([{"x": 1}])
        with self.assertRaises(PlotDataError):
            normalize_points([(1, 2, 3)])


if __name__ == "__main__":
    unittest.main()
