from __future__ import annotations

import math
from typing import Callable

import numpy as np

from rasterplot.config import PlotConfig
from rasterplot.plot import Plot
from rasterplot.series import DataSeries

DEMO_SAMPLES = 100
TAN_CLIP = 5.0


def _wave(name: str, fn: Callable[[np.ndarray], np.ndarray], *, clip: float | None = None) -> DataSeries:
    x = np.linspace(0.0, 2.0 * math.pi, DEMO_SAMPLES, dtype=np.float64)
    y = fn(x)
    series = DataSeries(name=name)
    for xv, yv in zip(x.tolist(), y.tolist(), strict=True):
        if clip is not None and not (-clip < yv < clip):
            continue
        series.add_point(xv, yv)
    return series


def simple_plot(config: PlotConfig | None = None) -> Plot:
    plot = Plot(config=config) if config is not None else Plot()
    series = DataSeries(name="Data")
    series.set_points([(float(v), float(v * v)) for v in range(6)])
    plot.add_series(series)
    plot.config.title = plot.config.title or "Simple Plot: y = x²"
    return plot


def sine_wave(config: PlotConfig | None = None) -> Plot:
    plot = Plot(config=config) if config is not None else Plot()
    cfg = plot.config
    cfg.title = cfg.title or "Sine Wave"
    cfg.x_label = cfg.x_label or "x (radians)"
    cfg.y_label = cfg.y_label or "sin(x)"
    if config is None:
        cfg.line_width = 3.0
    plot.add_series(_wave("sin(x)", np.sin))
    return plot


def multiple_series(config: PlotConfig | None = None) -> Plot:
    plot = Plot(config=config) if config is not None else Plot()
    cfg = plot.config
    cfg.title = cfg.title or "Trigonometric Functions"
    cfg.x_label = cfg.x_label or "x (radians)"
    cfg.y_label = cfg.y_label or "y"
    if config is None:
        cfg.line_width = 2.5
    plot.add_series(_wave("sin(x)", np.sin))
    plot.add_series(_wave("cos(x)", np.cos))
    # samples near the asymptotes are dropped
    plot.add_series(_wave("0.5*tan(x)", lambda x: 0.5 * np.tan(x), clip=TAN_CLIP))
    return plot


DEMOS: dict[str, Callable[[PlotConfig | None], Plot]] = {
    "simple": simple_plot,
    "sine": sine_wave,
    "multiple": multiple_series,
}
