from rasterplot.api import linspace, quick_plot
from rasterplot.config import PlotConfig, argb_to_rgba, load_plot_config, parse_color
from rasterplot.errors import PlotConfigError, PlotDataError, PlotExportError, PlotRenderError, SurfaceError
from rasterplot.layers import DEFAULT_LAYERS, PALETTE, RenderContext
from rasterplot.plot import Plot
from rasterplot.raster.surface import DrawingSurface, RasterSurface
from rasterplot.scales import CoordinateMapper, DataLimits
from rasterplot.series import DataSeries, Point

__all__ = [
    "CoordinateMapper",
    "DEFAULT_LAYERS",
    "DataLimits",
    "DataSeries",
    "DrawingSurface",
    "PALETTE",
    "Plot",
    "PlotConfig",
    "PlotConfigError",
    "PlotDataError",
    "PlotExportError",
    "PlotRenderError",
    "Point",
    "RasterSurface",
    "RenderContext",
    "SurfaceError",
    "argb_to_rgba",
    "linspace",
    "load_plot_config",
    "parse_color",
    "quick_plot",
]
