from .canvas import blend_coverage, draw_hline, draw_vline, fill_rect, new_canvas
from .draw_lines import draw_line, draw_polyline
from .draw_markers import fill_circle
from .draw_text import draw_text, text_size
from .surface import DrawingSurface, RasterSurface, SurfaceFactory, create_surface

__all__ = [
    "DrawingSurface",
    "RasterSurface",
    "SurfaceFactory",
    "blend_coverage",
    "create_surface",
    "draw_hline",
    "draw_line",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "fill_circle",
    "fill_rect",
    "new_canvas",
    "text_size",
]
