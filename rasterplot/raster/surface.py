from __future__ import annotations

from typing import Callable, Protocol, Sequence

import numpy as np

from rasterplot.config import argb_to_rgba
from rasterplot.errors import SurfaceError
from rasterplot.raster.canvas import fill_rect, new_canvas
from rasterplot.raster.draw_lines import draw_line, draw_polyline
from rasterplot.raster.draw_markers import fill_circle
from rasterplot.raster.draw_text import DEFAULT_FONT_FAMILY, draw_text, text_size


class DrawingSurface(Protocol):
    """Primitive drawing operations the renderer relies on.

    Coordinates are pixel space (origin top-left, y down). Colors are ARGB ints.
    Text is placed by the top-left corner of its ink box; ``rotate_deg`` turns
    counter-clockwise in quarter steps.
    """

    @property
    def width(self) -> int:
        ...

    @property
    def height(self) -> int:
        ...

    def clear(self) -> None:
        ...

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float, color: int) -> None:
        ...

    def draw_line(
        self, x0: float, y0: float, x1: float, y1: float, color: int, width: float = 1.0, *, antialias: bool = False
    ) -> None:
        ...

    def stroke_path(
        self, points: Sequence[tuple[float, float]], color: int, width: float = 1.0, *, antialias: bool = True
    ) -> None:
        ...

    def fill_circle(self, cx: float, cy: float, radius: float, color: int, *, antialias: bool = True) -> None:
        ...

    def draw_text(self, x: float, y: float, text: str, color: int, font_size_px: float, *, rotate_deg: int = 0) -> None:
        ...

    def measure_text(self, text: str, font_size_px: float, *, rotate_deg: int = 0) -> tuple[int, int]:
        ...

    def snapshot(self) -> np.ndarray:
        ...


SurfaceFactory = Callable[[int, int], DrawingSurface]


class RasterSurface:
    """numpy RGBA raster backed by the primitives in ``rasterplot.raster``."""

    def __init__(self, width: int, height: int, *, font_family: str = DEFAULT_FONT_FAMILY) -> None:
        if width <= 0 or height <= 0:
            raise SurfaceError(f"invalid surface size: {width}x{height}")
        try:
            self._pixels = new_canvas(width, height, color=(0, 0, 0, 0))
        except (MemoryError, ValueError) as exc:
            raise SurfaceError(f"could not allocate {width}x{height} surface: {exc}") from exc
        self._font_family = font_family

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    def clear(self) -> None:
        self._pixels[:, :] = 0

    def fill_rect(self, x0: float, y0: float, x1: float, y1: float, color: int) -> None:
        fill_rect(self._pixels, int(round(x0)), int(round(y0)), int(round(x1)), int(round(y1)), argb_to_rgba(color))

    def draw_line(
        self, x0: float, y0: float, x1: float, y1: float, color: int, width: float = 1.0, *, antialias: bool = False
    ) -> None:
        draw_line(self._pixels, x0, y0, x1, y1, argb_to_rgba(color), width, antialias=antialias)

    def stroke_path(
        self, points: Sequence[tuple[float, float]], color: int, width: float = 1.0, *, antialias: bool = True
    ) -> None:
        if len(points) < 2:
            return
        xs = np.asarray([p[0] for p in points], dtype=np.float64)
        ys = np.asarray([p[1] for p in points], dtype=np.float64)
        draw_polyline(self._pixels, xs, ys, argb_to_rgba(color), width, antialias=antialias)

    def fill_circle(self, cx: float, cy: float, radius: float, color: int, *, antialias: bool = True) -> None:
        fill_circle(self._pixels, cx, cy, radius, argb_to_rgba(color), antialias=antialias)

    def draw_text(self, x: float, y: float, text: str, color: int, font_size_px: float, *, rotate_deg: int = 0) -> None:
        draw_text(
            self._pixels,
            int(round(x)),
            int(round(y)),
            text,
            argb_to_rgba(color),
            font_family=self._font_family,
            font_size_px=font_size_px,
            rotate_deg=rotate_deg,
        )

    def measure_text(self, text: str, font_size_px: float, *, rotate_deg: int = 0) -> tuple[int, int]:
        return text_size(text, font_family=self._font_family, font_size_px=font_size_px, rotate_deg=rotate_deg)

    def snapshot(self) -> np.ndarray:
        return self._pixels.copy()


def create_surface(width: int, height: int) -> DrawingSurface:
    return RasterSurface(width, height)
