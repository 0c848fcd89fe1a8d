from __future__ import annotations

import math

import numpy as np

from rasterplot.raster.canvas import RGBA, blend_coverage


def fill_circle(dst: np.ndarray, cx: float, cy: float, radius: float, color: RGBA, *, antialias: bool = True) -> None:
    if radius <= 0:
        return
    x0 = int(math.floor(cx - radius)) - 1
    y0 = int(math.floor(cy - radius)) - 1
    x1 = int(math.ceil(cx + radius)) + 1
    y1 = int(math.ceil(cy + radius)) + 1
    px = np.arange(x0, x1, dtype=np.float32)[None, :] + 0.5
    py = np.arange(y0, y1, dtype=np.float32)[:, None] + 0.5
    dist = np.hypot(px - cx, py - cy)
    if antialias:
        coverage = np.clip(radius + 0.5 - dist, 0.0, 1.0)
    else:
        coverage = (dist <= radius).astype(np.float32)
    blend_coverage(dst, x0, y0, coverage, color)
