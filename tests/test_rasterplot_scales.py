from __future__ import annotations

import unittest

import numpy as np

from rasterplot import DataSeries
from rasterplot.scales import (
    CoordinateMapper,
    DataLimits,
    aggregate_limits,
    combined_limits,
    format_tick,
    pad_limits,
    tick_values,
)


def _series(*points: tuple[float, float]) -> DataSeries:
    series = DataSeries()
    series.add_points(points)
    return series


class RangeAggregatorTests(unittest.TestCase):
    def test_pads_five_percent_of_span_on_both_ends(self) -> None:
        limits = aggregate_limits([_series((0, 0), (10, 20))])
        assert limits is not None
        self.assertAlmostEqual(limits.xmin, -0.5)
        self.assertAlmostEqual(limits.xmax, 10.5)
        self.assertAlmostEqual(limits.ymin, -1.0)
        self.assertAlmostEqual(limits.ymax, 21.0)

    def test_merges_every_non_empty_series(self) -> None:
        series = [_series((0, 5), (1, 6)), DataSeries(), _series((-4, 1), (2, 2))]
        raw = combined_limits(series)
        self.assertEqual(raw, DataLimits(xmin=-4.0, xmax=2.0, ymin=1.0, ymax=6.0))
        padded = aggregate_limits(series)
        assert padded is not None
        self.assertLess(padded.xmin, raw.xmin)
        self.assertGreater(padded.xmax, raw.xmax)
        self.assertAlmostEqual(padded.x_span, raw.x_span * 1.1)
        self.assertAlmostEqual(padded.y_span, raw.y_span * 1.1)

    def test_zero_span_uses_fixed_half_unit_padding(self) -> None:
        limits = aggregate_limits([_series((2, 3))])
        self.assertEqual(limits, DataLimits(xmin=1.5, xmax=2.5, ymin=2.5, ymax=3.5))

    def test_zero_span_on_one_axis_only(self) -> None:
        limits = aggregate_limits([_series((1, 0), (1, 10))])
        assert limits is not None
        self.assertEqual((limits.xmin, limits.xmax), (0.5, 1.5))
        self.assertAlmostEqual(limits.ymin, -0.5)
        self.assertAlmostEqual(limits.ymax, 10.5)

    def test_no_series_or_all_empty_yields_none(self) -> None:
        self.assertIsNone(aggregate_limits([]))
        self.assertIsNone(aggregate_limits([DataSeries(), DataSeries("b")]))

    def test_zero_span_at_large_magnitude_still_widens(self) -> None:
        stamp = 1.7e18
        limits = aggregate_limits([_series((stamp, 3.0))])
        assert limits is not None
        self.assertLess(limits.xmin, stamp)
        self.assertGreater(limits.xmax, stamp)
        self.assertEqual((limits.ymin, limits.ymax), (2.5, 3.5))
        mapper = CoordinateMapper(limits=limits, plot_x0=60, plot_y0=40, plot_w=700, plot_h=500)
        px, py = mapper.map_point(stamp, 3.0)
        self.assertAlmostEqual(px, 410.0)
        self.assertAlmostEqual(py, 290.0)

    def test_pad_limits_always_orders_bounds(self) -> None:
        for value in (0.0, -3.0, 1e16, -9.5e17, 1e300):
            with self.subTest(value=value):
                padded = pad_limits(DataLimits(value, value, value, value))
                self.assertGreater(padded.xmax, padded.xmin)
                self.assertGreater(padded.ymax, padded.ymin)

    def test_non_finite_samples_are_ignored(self) -> None:
        series = [
            _series((0, 0), (1, float("nan")), (2, 1)),
            _series((float("inf"), 5), (-1, float("-inf"))),
        ]
        self.assertEqual(combined_limits(series), DataLimits(xmin=0.0, xmax=2.0, ymin=0.0, ymax=1.0))
        self.assertIsNone(aggregate_limits([_series((float("nan"), 1))]))


class CoordinateMapperTests(unittest.TestCase):
    def setUp(self) -> None:
        self.mapper = CoordinateMapper(
            limits=DataLimits(xmin=0.0, xmax=10.0, ymin=0.0, ymax=20.0),
            plot_x0=60,
            plot_y0=40,
            plot_w=700,
            plot_h=500,
        )

    def test_corners_and_center(self) -> None:
        self.assertEqual(self.mapper.map_point(0.0, 0.0), (60.0, 540.0))
        self.assertEqual(self.mapper.map_point(10.0, 20.0), (760.0, 40.0))
        self.assertEqual(self.mapper.map_point(5.0, 10.0), (410.0, 290.0))

    def test_monotonic_directions(self) -> None:
        x_a, y_a = self.mapper.map_point(1.0, 1.0)
        x_b, y_b = self.mapper.map_point(2.0, 2.0)
        self.assertGreater(x_b, x_a)
        self.assertLess(y_b, y_a)

    def test_unmap_inverts_map_for_arbitrary_layouts(self) -> None:
        rng = np.random.default_rng(7)
        for _ in range(25):
            xmin, ymin = rng.uniform(-100, 100, size=2)
            limits = DataLimits(
                xmin=float(xmin),
                xmax=float(xmin + rng.uniform(0.1, 50)),
                ymin=float(ymin),
                ymax=float(ymin + rng.uniform(0.1, 50)),
            )
            mapper = CoordinateMapper(
                limits=limits,
                plot_x0=float(rng.integers(0, 100)),
                plot_y0=float(rng.integers(0, 100)),
                plot_w=float(rng.integers(10, 900)),
                plot_h=float(rng.integers(10, 700)),
            )
            x = float(rng.uniform(limits.xmin, limits.xmax))
            y = float(rng.uniform(limits.ymin, limits.ymax))
            px, py = mapper.map_point(x, y)
            ux, uy = mapper.unmap_point(px, py)
            self.assertAlmostEqual(ux, x, places=6)
            self.assertAlmostEqual(uy, y, places=6)

    def test_map_arrays_matches_scalar_path(self) -> None:
        xs = np.asarray([0.0, 2.5, 7.0])
        ys = np.asarray([20.0, 3.0, -1.0])
        px, py = self.mapper.map_arrays(xs, ys)
        for i in range(xs.size):
            sx, sy = self.mapper.map_point(float(xs[i]), float(ys[i]))
            self.assertAlmostEqual(float(px[i]), sx)
            self.assertAlmostEqual(float(py[i]), sy)

    def test_rejects_zero_span(self) -> None:
        with self.assertRaises(ValueError):
            CoordinateMapper(limits=DataLimits(1.0, 1.0, 0.0, 1.0), plot_x0=0, plot_y0=0, plot_w=10, plot_h=10)


class TickTests(unittest.TestCase):
    def test_tick_values_cover_both_ends(self) -> None:
        self.assertEqual(tick_values(0.0, 10.0), [0.0, 2.0, 4.0, 6.0, 8.0, 10.0])

    def test_tick_values_rejects_non_positive_intervals(self) -> None:
        with self.assertRaises(ValueError):
            tick_values(0.0, 1.0, 0)

    def test_format_tick_uses_one_decimal(self) -> None:
        self.assertEqual(format_tick(1.26), "1.3")
        self.assertEqual(format_tick(-3.0), "-3.0")
        self.assertEqual(format_tick(1.7000000000000002), "1.7")

    def test_format_tick_normalizes_negative_zero(self) -> None:
        self.assertEqual(format_tick(-0.04), "0.0")


if __name__ == "__main__":
    unittest.main()
