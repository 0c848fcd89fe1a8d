from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from rasterplot.config import PlotConfig
from rasterplot.raster.surface import DrawingSurface
from rasterplot.scales import TICK_INTERVALS, CoordinateMapper, DataLimits, format_tick, tick_values
from rasterplot.series import DataSeries


# ARGB: blue, red, green, orange, purple
PALETTE: tuple[int, ...] = (
    0xFF0000FF,
    0xFFFF0000,
    0xFF00AA00,
    0xFFFF8800,
    0xFF8800FF,
)

GRID_DIVISIONS = 10
GRID_LINE_WIDTH = 1.0
AXIS_LINE_WIDTH = 2.0
TICK_LENGTH = 5.0
TICK_FONT_PX = 12.0
TITLE_FONT_PX = 18.0
AXIS_LABEL_FONT_PX = 14.0
X_TICK_LABEL_GAP = 8.0
Y_TICK_LABEL_GAP = 10.0
TITLE_BOTTOM = 25.0
X_LABEL_BOTTOM_GAP = 10.0
Y_LABEL_RIGHT_EDGE = 15.0


@dataclass(frozen=True)
class RenderContext:
    config: PlotConfig
    limits: DataLimits
    mapper: CoordinateMapper
    surface: DrawingSurface
    series: tuple[DataSeries, ...]
    palette: tuple[int, ...] = PALETTE

    @property
    def plot_rect(self) -> tuple[int, int, int, int]:
        return self.config.plot_rect()


Layer = Callable[[RenderContext], None]


def series_color(index: int, palette: Sequence[int], default: int) -> int:
    if not palette:
        return default
    return palette[index % len(palette)]


def draw_background(ctx: RenderContext) -> None:
    cfg = ctx.config
    ctx.surface.fill_rect(0, 0, cfg.width, cfg.height, cfg.background_color)


def draw_grid(ctx: RenderContext) -> None:
    if not ctx.config.show_grid:
        return
    x0, y0, plot_w, plot_h = ctx.plot_rect
    color = ctx.config.grid_color
    for i in range(GRID_DIVISIONS + 1):
        gx = x0 + (i * plot_w // GRID_DIVISIONS)
        ctx.surface.draw_line(gx, y0, gx, y0 + plot_h, color, GRID_LINE_WIDTH)
    for i in range(GRID_DIVISIONS + 1):
        gy = y0 + (i * plot_h // GRID_DIVISIONS)
        ctx.surface.draw_line(x0, gy, x0 + plot_w, gy, color, GRID_LINE_WIDTH)


def draw_axes(ctx: RenderContext) -> None:
    x0, y0, plot_w, plot_h = ctx.plot_rect
    color = ctx.config.axis_color
    surface = ctx.surface
    axis_y = y0 + plot_h

    surface.draw_line(x0, axis_y, x0 + plot_w, axis_y, color, AXIS_LINE_WIDTH)
    surface.draw_line(x0, y0, x0, axis_y, color, AXIS_LINE_WIDTH)

    x_ticks = tick_values(ctx.limits.xmin, ctx.limits.xmax, TICK_INTERVALS)
    for i, value in enumerate(x_ticks):
        tx = x0 + (i * plot_w // TICK_INTERVALS)
        surface.draw_line(tx, axis_y, tx, axis_y + TICK_LENGTH, color, AXIS_LINE_WIDTH)
        label = format_tick(value)
        w, _ = surface.measure_text(label, TICK_FONT_PX)
        surface.draw_text(tx - w / 2.0, axis_y + X_TICK_LABEL_GAP, label, color, TICK_FONT_PX)

    y_ticks = tick_values(ctx.limits.ymin, ctx.limits.ymax, TICK_INTERVALS)
    for i, value in enumerate(y_ticks):
        ty = axis_y - (i * plot_h // TICK_INTERVALS)
        surface.draw_line(x0 - TICK_LENGTH, ty, x0, ty, color, AXIS_LINE_WIDTH)
        label = format_tick(value)
        w, h = surface.measure_text(label, TICK_FONT_PX)
        surface.draw_text(x0 - w - Y_TICK_LABEL_GAP, ty - h / 2.0, label, color, TICK_FONT_PX)


def finite_runs(xs: np.ndarray, ys: np.ndarray) -> list[slice]:
    """Maximal index ranges whose samples have finite x and y."""
    finite = np.isfinite(xs) & np.isfinite(ys)
    edges = np.flatnonzero(np.diff(np.concatenate(([False], finite, [False])).astype(np.int8)))
    return [slice(int(start), int(stop)) for start, stop in zip(edges[::2], edges[1::2])]


def draw_series(ctx: RenderContext) -> None:
    cfg = ctx.config
    for index, entry in enumerate(ctx.series):
        if entry.is_empty():
            continue
        color = series_color(index, ctx.palette, cfg.line_color)
        xs, ys = entry.xy_arrays()
        # a NaN or infinite sample breaks the line
        for run in finite_runs(xs, ys):
            px, py = ctx.mapper.map_arrays(xs[run], ys[run])
            points = list(zip(px.tolist(), py.tolist()))
            if len(points) > 1:
                ctx.surface.stroke_path(points, color, cfg.line_width, antialias=True)
            if cfg.show_points:
                for cx, cy in points:
                    ctx.surface.fill_circle(cx, cy, cfg.point_radius, color, antialias=True)


def draw_labels(ctx: RenderContext) -> None:
    cfg = ctx.config
    surface = ctx.surface
    color = cfg.axis_color

    if cfg.title:
        w, h = surface.measure_text(cfg.title, TITLE_FONT_PX)
        surface.draw_text((cfg.width - w) / 2.0, max(2.0, TITLE_BOTTOM - h), cfg.title, color, TITLE_FONT_PX)

    if cfg.x_label:
        w, h = surface.measure_text(cfg.x_label, AXIS_LABEL_FONT_PX)
        surface.draw_text(
            (cfg.width - w) / 2.0,
            cfg.height - X_LABEL_BOTTOM_GAP - h,
            cfg.x_label,
            color,
            AXIS_LABEL_FONT_PX,
        )

    if cfg.y_label:
        w, h = surface.measure_text(cfg.y_label, AXIS_LABEL_FONT_PX, rotate_deg=90)
        surface.draw_text(
            max(0.0, Y_LABEL_RIGHT_EDGE - w),
            (cfg.height - h) / 2.0,
            cfg.y_label,
            color,
            AXIS_LABEL_FONT_PX,
            rotate_deg=90,
        )


DEFAULT_LAYERS: tuple[Layer, ...] = (
    draw_background,
    draw_grid,
    draw_axes,
    draw_series,
    draw_labels,
)
