from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np

from rasterplot.config import PlotConfig
from rasterplot.errors import PlotDataError
from rasterplot.plot import Plot
from rasterplot.series import DataSeries, Point

LOGGER = logging.getLogger(__name__)


def linspace(start: float, end: float, count: int) -> list[Point]:
    """``count`` evenly spaced points from ``start`` to ``end`` with y fixed at 0."""
    if count <= 0:
        return []
    if count == 1:
        return [Point(float(start), 0.0)]
    xs = np.linspace(float(start), float(end), int(count), dtype=np.float64)
    return [Point(float(x), 0.0) for x in xs.tolist()]


def quick_plot(
    x: Any,
    y: Any,
    filename: str | Path,
    title: str = "",
    *,
    config: PlotConfig | None = None,
) -> bool:
    """Render a single default-styled line plot of ``y`` over ``x`` to a PNG file.

    Returns False without writing anything when the inputs are empty, differ in
    length or are not numeric.
    """
    try:
        series = DataSeries.from_xy(x, y, name="Data")
    except PlotDataError as exc:
        LOGGER.warning("quick_plot rejected input: %s", exc)
        return False

    plot = Plot(config=config) if config is not None else Plot()
    plot.add_series(series)
    if title:
        plot.config.title = title
    return plot.save_to_file(filename)
