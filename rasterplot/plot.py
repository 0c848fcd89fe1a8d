from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from rasterplot.config import PlotConfig
from rasterplot.errors import PlotRenderError, SurfaceError
from rasterplot.export import save_png
from rasterplot.layers import DEFAULT_LAYERS, PALETTE, Layer, RenderContext
from rasterplot.raster.surface import DrawingSurface, SurfaceFactory, create_surface
from rasterplot.scales import UNIT_LIMITS, CoordinateMapper, DataLimits, aggregate_limits
from rasterplot.series import DataSeries

LOGGER = logging.getLogger(__name__)


class Plot:
    """A configurable chart of one or more series rendered onto a drawing surface.

    The aggregated data range is memoized behind a dirty flag: adding or
    clearing series and replacing the config invalidate it. The surface is
    created lazily and recreated whenever its size no longer matches the
    configured canvas. A Plot is not safe for concurrent use; callers must
    serialize access.
    """

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        *,
        config: PlotConfig | None = None,
        surface_factory: SurfaceFactory = create_surface,
        layers: Sequence[Layer] = DEFAULT_LAYERS,
        palette: Sequence[int] = PALETTE,
    ) -> None:
        self._config = config.copy() if config is not None else PlotConfig()
        if config is None:
            self._config.width = width
            self._config.height = height
        self._series: list[DataSeries] = []
        self._surface: DrawingSurface | None = None
        self._surface_factory = surface_factory
        self._layers = tuple(layers)
        self._palette = tuple(palette)
        self._limits = UNIT_LIMITS
        self._dirty = True

    @property
    def config(self) -> PlotConfig:
        return self._config

    def get_config(self) -> PlotConfig:
        return self._config

    def set_config(self, config: PlotConfig) -> None:
        self._config = config.copy()
        self._surface = None
        self._dirty = True

    @property
    def series(self) -> tuple[DataSeries, ...]:
        return tuple(self._series)

    @property
    def is_dirty(self) -> bool:
        return self._dirty

    def add_series(self, series: DataSeries) -> None:
        self._series.append(series.copy())
        self._dirty = True

    def clear_series(self) -> None:
        self._series.clear()
        self._dirty = True

    def data_range(self) -> DataLimits:
        """Padded range over all series.

        With no non-empty series the last computed range is kept (the unit
        range before anything has been plotted).
        """
        if self._dirty:
            limits = aggregate_limits(self._series)
            if limits is not None:
                self._limits = limits
                LOGGER.debug("data range recomputed: %s", limits)
            self._dirty = False
        return self._limits

    def get_surface(self) -> DrawingSurface | None:
        return self._setup_surface()

    def _setup_surface(self) -> DrawingSurface | None:
        cfg = self._config
        surface = self._surface
        if surface is not None and surface.width == cfg.width and surface.height == cfg.height:
            return surface
        self._surface = None
        try:
            surface = self._surface_factory(cfg.width, cfg.height)
        except SurfaceError as exc:
            LOGGER.warning("surface allocation failed: %s", exc)
            return None
        LOGGER.debug("allocated %dx%d drawing surface", cfg.width, cfg.height)
        self._surface = surface
        return surface

    def render(self) -> bool:
        return self._render() is not None

    def _render(self) -> DrawingSurface | None:
        surface = self._setup_surface()
        if surface is None:
            return None
        limits = self.data_range()
        plot_x0, plot_y0, plot_w, plot_h = self._config.plot_rect()
        mapper = CoordinateMapper(limits=limits, plot_x0=plot_x0, plot_y0=plot_y0, plot_w=plot_w, plot_h=plot_h)
        ctx = RenderContext(
            config=self._config,
            limits=limits,
            mapper=mapper,
            surface=surface,
            series=tuple(self._series),
            palette=self._palette,
        )
        surface.clear()
        for layer in self._layers:
            layer(ctx)
        return surface

    def to_rgba(self) -> np.ndarray:
        surface = self._render()
        if surface is None:
            raise PlotRenderError("plot could not be rendered")
        return surface.snapshot()

    def save_to_file(self, filename: str | Path) -> bool:
        surface = self._render()
        if surface is None:
            return False
        return save_png(surface.snapshot(), filename)
