from __future__ import annotations


class PlotDataError(ValueError):
    """Input samples could not be turned into a plottable series."""


class PlotConfigError(ValueError):
    """Configuration values are invalid or could not be loaded."""


class SurfaceError(RuntimeError):
    """The drawing surface could not be allocated."""


class PlotRenderError(RuntimeError):
    pass


class PlotExportError(RuntimeError):
    pass
