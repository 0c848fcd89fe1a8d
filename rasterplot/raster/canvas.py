from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[...] = np.asarray(color, dtype=np.uint8)
    return canvas


def _source_over(patch: np.ndarray, alpha: np.ndarray, color: RGBA) -> None:
    """Composite ``color`` over ``patch`` in place with per-pixel source alpha in [0, 1]."""
    src_rgb = np.asarray(color[:3], dtype=np.float32)
    dst_rgb = patch[..., :3].astype(np.float32)
    dst_alpha = patch[..., 3].astype(np.float32) / 255.0
    out_alpha = alpha + dst_alpha * (1.0 - alpha)
    weight_dst = (dst_alpha * (1.0 - alpha))[..., None]
    out_rgb = src_rgb * alpha[..., None] + dst_rgb * weight_dst
    out_rgb /= np.where(out_alpha > 1e-6, out_alpha, 1.0)[..., None]
    patch[..., :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    patch[..., 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)


def _paint(region: np.ndarray, color: RGBA) -> None:
    if color[3] == 255:
        region[...] = np.asarray(color, dtype=np.uint8)
        return
    alpha = np.full(region.shape[:-1], color[3] / 255.0, dtype=np.float32)
    _source_over(region, alpha, color)


def blend_coverage(dst: np.ndarray, x0: int, y0: int, coverage: np.ndarray, color: RGBA) -> None:
    """Source-over blend of ``color`` weighted by a [0, 1] coverage patch at (x0, y0)."""
    h, w = coverage.shape
    xa, ya = max(0, x0), max(0, y0)
    xb, yb = min(dst.shape[1], x0 + w), min(dst.shape[0], y0 + h)
    if xa >= xb or ya >= yb:
        return
    cov = coverage[ya - y0 : yb - y0, xa - x0 : xb - x0]
    if not np.any(cov > 0):
        return
    _source_over(dst[ya:yb, xa:xb], (color[3] / 255.0) * cov.astype(np.float32), color)


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if 0 <= y < dst.shape[0] and 0 <= x < dst.shape[1]:
        _paint(dst[y : y + 1, x : x + 1], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Fill the half-open pixel rectangle [x0, x1) x [y0, y1)."""
    xa, xb = max(0, min(x0, x1)), min(dst.shape[1], max(x0, x1))
    ya, yb = max(0, min(y0, y1)), min(dst.shape[0], max(y0, y1))
    if xa < xb and ya < yb:
        _paint(dst[ya:yb, xa:xb], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    """Inclusive run from x0 to x1 on row y."""
    fill_rect(dst, min(x0, x1), y, max(x0, x1) + 1, y + 1, color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    """Inclusive run from y0 to y1 on column x."""
    fill_rect(dst, x, min(y0, y1), x + 1, max(y0, y1) + 1, color)
