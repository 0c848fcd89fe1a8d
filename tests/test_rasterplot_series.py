from __future__ import annotations

from decimal import Decimal
import importlib.util
import unittest

import numpy as np

from rasterplot import DataSeries, PlotDataError, Point
from rasterplot.adapters.normalize import normalize_xy
from rasterplot.scales import DataLimits


HAS_PANDAS = importlib.util.find_spec("pandas") is not None
HAS_TORCH = importlib.util.find_spec("torch") is not None


class DataSeriesTests(unittest.TestCase):
    def test_point_is_immutable_value(self) -> None:
        p = Point(1.0, 2.0)
        self.assertEqual(p, Point(1.0, 2.0))
        with self.assertRaises(AttributeError):
            p.x = 3.0  # type: ignore[misc]

    def test_default_name_and_empty(self) -> None:
        series = DataSeries()
        self.assertEqual(series.name, "Data")
        self.assertTrue(series.is_empty())
        self.assertEqual(len(series), 0)

    def test_get_range_is_exact_and_unpadded(self) -> None:
        series = DataSeries("s")
        series.add_point(1.0, 5.0)
        series.add_point(3.0, -2.0)
        series.add_point(2.0, 0.0)
        self.assertEqual(series.get_range(), DataLimits(xmin=1.0, xmax=3.0, ymin=-2.0, ymax=5.0))

    def test_empty_range_reports_zeros(self) -> None:
        self.assertEqual(DataSeries().get_range(), DataLimits(0.0, 0.0, 0.0, 0.0))

    def test_get_range_skips_non_finite_samples(self) -> None:
        series = DataSeries()
        series.add_points([(0, 4), (1, float("nan")), (float("inf"), 2), (3, -1)])
        self.assertEqual(len(series), 4)
        self.assertEqual(series.get_range(), DataLimits(xmin=0.0, xmax=3.0, ymin=-1.0, ymax=4.0))
        self.assertTrue(series.has_finite_points())

    def test_series_without_finite_samples(self) -> None:
        series = DataSeries()
        series.add_point(float("nan"), 1.0)
        self.assertFalse(series.is_empty())
        self.assertFalse(series.has_finite_points())
        self.assertEqual(series.get_range(), DataLimits(0.0, 0.0, 0.0, 0.0))

    def test_add_points_keeps_insertion_order(self) -> None:
        series = DataSeries()
        series.add_point(5, 5)
        series.add_points([Point(1, 1), (0, 2)])
        self.assertEqual(series.points, (Point(5.0, 5.0), Point(1.0, 1.0), Point(0.0, 2.0)))

    def test_set_points_replaces_sequence(self) -> None:
        series = DataSeries()
        series.add_points([(0, 0), (1, 1)])
        series.set_points([(9, 9)])
        self.assertEqual(series.points, (Point(9.0, 9.0),))

    def test_copy_is_independent(self) -> None:
        series = DataSeries("orig")
        series.add_point(0, 0)
        clone = series.copy()
        series.add_point(1, 1)
        series.name = "renamed"
        self.assertEqual(len(clone), 1)
        self.assertEqual(clone.name, "orig")

    def test_from_xy_drops_non_finite_pairs(self) -> None:
        series = DataSeries.from_xy(np.asarray([0.0, 1.0, 2.0]), [1.0, float("nan"), 3.0], name="xy")
        self.assertEqual(series.name, "xy")
        self.assertEqual(series.points, (Point(0.0, 1.0), Point(2.0, 3.0)))

    def test_from_xy_rejects_length_mismatch(self) -> None:
        with self.assertRaises(PlotDataError):
            DataSeries.from_xy([0, 1, 2], [0, 1])


class NormalizeTests(unittest.TestCase):
    def test_normalize_decimal_and_mask(self) -> None:
        x_arr, y_arr, mask = normalize_xy([Decimal("1.5"), None, 3])
        self.assertTrue(np.array_equal(x_arr, np.asarray([0.0, 1.0, 2.0])))
        self.assertEqual(y_arr[0], 1.5)
        self.assertTrue(np.isnan(y_arr[1]))
        self.assertEqual(mask.tolist(), [True, False, True])

    def test_normalize_rejects_empty(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy([], x=[])

    def test_normalize_rejects_non_numeric(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(["a", "b"], x=[0, 1])

    def test_normalize_rejects_two_dimensional_input(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(np.zeros((2, 2)))
        with self.assertRaises(PlotDataError):
            normalize_xy([[1, 2], [3, 4]])

    def test_normalize_rejects_all_non_finite(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy([float("nan"), float("inf")])

    def test_normalize_rejects_unsupported_type(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy("123")

    @unittest.skipUnless(HAS_PANDAS, "pandas not installed")
    def test_normalize_pandas_dataframe_single_numeric_column(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"label": ["a", "b", "c"], "value": [1, 2, 3]})
        x_arr, y_arr, mask = normalize_xy(frame, x=pd.Series([10.0, 20.0, 30.0]))
        self.assertEqual(y_arr.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(x_arr.tolist(), [10.0, 20.0, 30.0])
        self.assertTrue(bool(np.all(mask)))

    @unittest.skipUnless(HAS_PANDAS, "pandas not installed")
    def test_normalize_pandas_rejects_ambiguous_frame(self) -> None:
        import pandas as pd

        frame = pd.DataFrame({"a": [1, 2], "b": [3, 4]})
        with self.assertRaises(PlotDataError):
            normalize_xy(frame)

    @unittest.skipUnless(HAS_TORCH, "torch not installed")
    def test_normalize_torch_tensor(self) -> None:
        import torch

        _, y_arr, _ = normalize_xy(torch.tensor([1.0, 2.0, 3.0]))
        self.assertEqual(y_arr.dtype, np.float64)
        self.assertEqual(y_arr.tolist(), [1.0, 2.0, 3.0])


if __name__ == "__main__":
    unittest.main()
