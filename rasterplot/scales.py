from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from rasterplot.series import DataSeries


PADDING_RATIO = 0.05
ZERO_SPAN_PADDING = 0.5
TICK_INTERVALS = 5


@dataclass(frozen=True)
class DataLimits:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def x_span(self) -> float:
        return self.xmax - self.xmin

    @property
    def y_span(self) -> float:
        return self.ymax - self.ymin


UNIT_LIMITS = DataLimits(xmin=0.0, xmax=1.0, ymin=0.0, ymax=1.0)


def _widen(lo: float, hi: float, ratio: float) -> tuple[float, float]:
    pad = (hi - lo) * ratio
    if pad == 0.0:
        pad = ZERO_SPAN_PADDING
    lo, hi = lo - pad, hi + pad
    if not hi > lo:
        # pad is below the float spacing at this magnitude
        lo, hi = float(np.nextafter(lo, -np.inf)), float(np.nextafter(hi, np.inf))
    return lo, hi


def pad_limits(raw: DataLimits, ratio: float = PADDING_RATIO) -> DataLimits:
    """Grow ``raw`` by ``ratio`` of each span, or by 0.5 on an axis with zero span.

    The result always has ``xmax > xmin`` and ``ymax > ymin`` for finite input.
    """
    xmin, xmax = _widen(raw.xmin, raw.xmax, ratio)
    ymin, ymax = _widen(raw.ymin, raw.ymax, ratio)
    return DataLimits(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax)


def combined_limits(series: Iterable["DataSeries"]) -> DataLimits | None:
    """Tight bounding box over the finite samples of every series, or None."""
    mins_x: list[float] = []
    maxs_x: list[float] = []
    mins_y: list[float] = []
    maxs_y: list[float] = []
    for entry in series:
        if not entry.has_finite_points():
            continue
        limits = entry.get_range()
        mins_x.append(limits.xmin)
        maxs_x.append(limits.xmax)
        mins_y.append(limits.ymin)
        maxs_y.append(limits.ymax)
    if not mins_x:
        return None
    return DataLimits(xmin=min(mins_x), xmax=max(maxs_x), ymin=min(mins_y), ymax=max(maxs_y))


def aggregate_limits(series: Iterable["DataSeries"], ratio: float = PADDING_RATIO) -> DataLimits | None:
    raw = combined_limits(series)
    if raw is None:
        return None
    return pad_limits(raw, ratio=ratio)


@dataclass(frozen=True)
class CoordinateMapper:
    """Affine data-to-pixel transform over the plotting rectangle.

    Pixel rows grow downward, so the y axis is flipped. Outputs are floats and
    are neither rounded nor clipped; the drawing surface owns rasterization.
    """

    limits: DataLimits
    plot_x0: float
    plot_y0: float
    plot_w: float
    plot_h: float

    def __post_init__(self) -> None:
        if not self.limits.x_span > 0 or not self.limits.y_span > 0:
            raise ValueError("data limits must have a positive span on both axes")
        if self.plot_w <= 0 or self.plot_h <= 0:
            raise ValueError("plot rectangle width/height must be > 0")

    @property
    def sx(self) -> float:
        return self.plot_w / self.limits.x_span

    @property
    def sy(self) -> float:
        return self.plot_h / self.limits.y_span

    def map_point(self, x: float, y: float) -> tuple[float, float]:
        px = self.plot_x0 + (x - self.limits.xmin) * self.sx
        py = self.plot_y0 + self.plot_h - (y - self.limits.ymin) * self.sy
        return px, py

    def map_arrays(self, xs: np.ndarray, ys: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        px = self.plot_x0 + (np.asarray(xs, dtype=np.float64) - self.limits.xmin) * self.sx
        py = self.plot_y0 + self.plot_h - (np.asarray(ys, dtype=np.float64) - self.limits.ymin) * self.sy
        return px, py

    def unmap_point(self, px: float, py: float) -> tuple[float, float]:
        x = self.limits.xmin + (px - self.plot_x0) / self.sx
        y = self.limits.ymin + (self.plot_y0 + self.plot_h - py) / self.sy
        return x, y


def tick_values(vmin: float, vmax: float, intervals: int = TICK_INTERVALS) -> list[float]:
    if intervals <= 0:
        raise ValueError("intervals must be > 0")
    step = (vmax - vmin) / intervals
    return [vmin + i * step for i in range(intervals + 1)]


def format_tick(value: float) -> str:
    if not np.isfinite(value):
        return str(value)
    out = f"{value:.1f}"
    if out == "-0.0":
        out = "0.0"
    return out
