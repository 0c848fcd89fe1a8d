from __future__ import annotations

import math

import numpy as np

from rasterplot.raster.canvas import RGBA, blend_coverage, draw_hline, draw_pixel, draw_vline


def draw_line(
    dst: np.ndarray,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    color: RGBA,
    width: float = 1.0,
    *,
    antialias: bool = False,
) -> None:
    if antialias:
        _draw_aa_segment(dst, x0, y0, x1, y1, color=color, width=width)
        return
    thickness = max(1, int(round(width)))
    if y0 == y1:
        top = math.floor(y0 - thickness / 2.0 + 0.5)
        for row in range(top, top + thickness):
            draw_hline(dst, int(round(x0)), int(round(x1)), row, color)
        return
    if x0 == x1:
        left = math.floor(x0 - thickness / 2.0 + 0.5)
        for col in range(left, left + thickness):
            draw_vline(dst, col, int(round(y0)), int(round(y1)), color)
        return
    _draw_line_segment(dst, int(round(x0)), int(round(y0)), int(round(x1)), int(round(y1)), color=color, width=thickness)


def draw_polyline(
    dst: np.ndarray,
    xs: np.ndarray,
    ys: np.ndarray,
    color: RGBA,
    width: float = 1.0,
    *,
    antialias: bool = True,
) -> None:
    if xs.size < 2:
        return
    if not antialias:
        for i in range(xs.size - 1):
            draw_line(dst, float(xs[i]), float(ys[i]), float(xs[i + 1]), float(ys[i + 1]), color, width)
        return
    # Coverage is accumulated as a max over segments so shared joints are not blended twice.
    half = max(0.5, float(width) / 2.0)
    pad = int(math.ceil(half)) + 1
    x_lo = int(math.floor(float(np.min(xs)))) - pad
    y_lo = int(math.floor(float(np.min(ys)))) - pad
    x_hi = int(math.ceil(float(np.max(xs)))) + pad
    y_hi = int(math.ceil(float(np.max(ys)))) + pad
    x_lo, y_lo = max(x_lo, 0), max(y_lo, 0)
    x_hi, y_hi = min(x_hi, dst.shape[1]), min(y_hi, dst.shape[0])
    if x_lo >= x_hi or y_lo >= y_hi:
        return
    coverage = np.zeros((y_hi - y_lo, x_hi - x_lo), dtype=np.float32)
    for i in range(xs.size - 1):
        _accumulate_segment(coverage, x_lo, y_lo, float(xs[i]), float(ys[i]), float(xs[i + 1]), float(ys[i + 1]), half)
    blend_coverage(dst, x_lo, y_lo, coverage, color)


def _draw_aa_segment(dst: np.ndarray, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: float) -> None:
    draw_polyline(dst, np.asarray([x0, x1], dtype=np.float64), np.asarray([y0, y1], dtype=np.float64), color, width)


def _accumulate_segment(
    coverage: np.ndarray,
    ox: int,
    oy: int,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    half: float,
) -> None:
    pad = int(math.ceil(half)) + 1
    h, w = coverage.shape
    c0 = max(0, int(math.floor(min(x0, x1))) - pad - ox)
    c1 = min(w, int(math.ceil(max(x0, x1))) + pad - ox)
    r0 = max(0, int(math.floor(min(y0, y1))) - pad - oy)
    r1 = min(h, int(math.ceil(max(y0, y1))) + pad - oy)
    if c0 >= c1 or r0 >= r1:
        return
    # Distance from each pixel centre to the segment.
    px = np.arange(c0, c1, dtype=np.float32)[None, :] + ox + 0.5
    py = np.arange(r0, r1, dtype=np.float32)[:, None] + oy + 0.5
    dx = x1 - x0
    dy = y1 - y0
    length_sq = dx * dx + dy * dy
    if length_sq <= 1e-12:
        t = np.zeros((r1 - r0, c1 - c0), dtype=np.float32)
    else:
        t = np.clip(((px - x0) * dx + (py - y0) * dy) / length_sq, 0.0, 1.0)
    dist = np.hypot(px - (x0 + t * dx), py - (y0 + t * dy))
    seg_cov = np.clip(half + 0.5 - dist, 0.0, 1.0)
    region = coverage[r0:r1, c0:c1]
    np.maximum(region, seg_cov, out=region)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, width: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, width=width)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, width: int) -> None:
    radius = max(0, width // 2)
    for yy in range(y - radius, y + radius + 1):
        for xx in range(x - radius, x + radius + 1):
            draw_pixel(dst, xx, yy, color)
