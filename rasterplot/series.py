from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Iterable

import numpy as np

from rasterplot.adapters.normalize import normalize_xy
from rasterplot.scales import DataLimits


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


def _as_point(value: Point | tuple[float, float]) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


@dataclass
class DataSeries:
    """A named, ordered run of samples; order defines line connectivity."""

    name: str = "Data"
    _points: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._points = [_as_point(p) for p in self._points]

    @classmethod
    def from_xy(cls, x: Any, y: Any, *, name: str = "Data") -> "DataSeries":
        x_arr, y_arr, mask = normalize_xy(y, x=x)
        series = cls(name=name)
        series._points = [Point(float(xv), float(yv)) for xv, yv in zip(x_arr[mask], y_arr[mask], strict=True)]
        return series

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def add_point(self, x: float, y: float) -> None:
        self._points.append(Point(float(x), float(y)))

    def add_points(self, points: Iterable[Point | tuple[float, float]]) -> None:
        self._points.extend(_as_point(p) for p in points)

    def set_points(self, points: Iterable[Point | tuple[float, float]]) -> None:
        self._points = [_as_point(p) for p in points]

    def is_empty(self) -> bool:
        return not self._points

    def __len__(self) -> int:
        return len(self._points)

    def xy_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        xs = np.fromiter((p.x for p in self._points), dtype=np.float64, count=len(self._points))
        ys = np.fromiter((p.y for p in self._points), dtype=np.float64, count=len(self._points))
        return xs, ys

    def finite_xy(self) -> tuple[np.ndarray, np.ndarray]:
        """Coordinate arrays restricted to samples where both x and y are finite."""
        xs, ys = self.xy_arrays()
        mask = np.isfinite(xs) & np.isfinite(ys)
        return xs[mask], ys[mask]

    def has_finite_points(self) -> bool:
        return any(math.isfinite(p.x) and math.isfinite(p.y) for p in self._points)

    def get_range(self) -> DataLimits:
        """Exact, unpadded extent of the finite samples.

        Samples with a NaN or infinite coordinate are ignored; a series with no
        finite sample reports all zeros.
        """
        xs, ys = self.finite_xy()
        if not xs.size:
            return DataLimits(xmin=0.0, xmax=0.0, ymin=0.0, ymax=0.0)
        return DataLimits(
            xmin=float(np.min(xs)),
            xmax=float(np.max(xs)),
            ymin=float(np.min(ys)),
            ymax=float(np.max(ys)),
        )

    def copy(self) -> "DataSeries":
        # Point is frozen, so instances can be shared.
        return DataSeries(name=self.name, _points=list(self._points))
