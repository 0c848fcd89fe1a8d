from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import tomllib
from typing import Any, Mapping

from rasterplot.errors import PlotConfigError


RGBA = tuple[int, int, int, int]

_COLOR_FIELDS = frozenset({"background_color", "axis_color", "grid_color", "line_color"})
_INT_FIELDS = frozenset({"width", "height", "margin_left", "margin_right", "margin_top", "margin_bottom"})
_FLOAT_FIELDS = frozenset({"line_width", "point_radius"})
_BOOL_FIELDS = frozenset({"show_grid", "show_points"})
_STR_FIELDS = frozenset({"title", "x_label", "y_label"})


def argb_to_rgba(argb: int) -> RGBA:
    argb = int(argb) & 0xFFFFFFFF
    return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)


def parse_color(value: Any) -> int:
    """Accept an ARGB int, ``#RRGGBB``, ``#AARRGGBB`` or ``0xAARRGGBB``."""
    if isinstance(value, bool):
        raise PlotConfigError(f"invalid color: {value!r}")
    if isinstance(value, int):
        if value < 0 or value > 0xFFFFFFFF:
            raise PlotConfigError(f"color out of range: {value:#x}")
        return value
    if not isinstance(value, str):
        raise PlotConfigError(f"invalid color: {value!r}")
    text = value.strip().lower()
    if text.startswith("#"):
        digits = text[1:]
    elif text.startswith("0x"):
        digits = text[2:]
    else:
        raise PlotConfigError(f"invalid color: {value!r}")
    if len(digits) not in (6, 8):
        raise PlotConfigError(f"invalid color: {value!r}")
    try:
        parsed = int(digits, 16)
    except ValueError as exc:
        raise PlotConfigError(f"invalid color: {value!r}") from exc
    if len(digits) == 6:
        parsed |= 0xFF000000
    return parsed


@dataclass
class PlotConfig:
    # canvas
    width: int = 800
    height: int = 600

    # margins around the plotting rectangle
    margin_left: int = 60
    margin_right: int = 40
    margin_top: int = 40
    margin_bottom: int = 60

    # ARGB colors
    background_color: int = 0xFFFFFFFF
    axis_color: int = 0xFF000000
    grid_color: int = 0xFFCCCCCC
    line_color: int = 0xFF0000FF

    line_width: float = 2.0
    show_grid: bool = True
    show_points: bool = False
    point_radius: float = 4.0

    title: str = ""
    x_label: str = ""
    y_label: str = ""

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PlotConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise PlotConfigError(f"unknown config keys: {', '.join(unknown)}")
        values: dict[str, Any] = {}
        for key, raw in mapping.items():
            values[key] = _coerce_field(key, raw)
        return cls(**values)

    def plot_rect(self) -> tuple[int, int, int, int]:
        plot_w = self.width - self.margin_left - self.margin_right
        plot_h = self.height - self.margin_top - self.margin_bottom
        if plot_w <= 0 or plot_h <= 0:
            raise PlotConfigError(
                f"margins leave no plotting area: {plot_w}x{plot_h} inside {self.width}x{self.height}"
            )
        return self.margin_left, self.margin_top, plot_w, plot_h

    def copy(self) -> "PlotConfig":
        return replace(self)


def _coerce_field(key: str, raw: Any) -> Any:
    try:
        if key in _COLOR_FIELDS:
            return parse_color(raw)
        if key in _INT_FIELDS:
            if isinstance(raw, bool) or int(raw) != raw:
                raise PlotConfigError(f"{key} must be an integer")
            return int(raw)
        if key in _FLOAT_FIELDS:
            if isinstance(raw, bool):
                raise PlotConfigError(f"{key} must be a number")
            return float(raw)
        if key in _BOOL_FIELDS:
            if not isinstance(raw, bool):
                raise PlotConfigError(f"{key} must be a boolean")
            return raw
        if key in _STR_FIELDS:
            return str(raw)
    except PlotConfigError:
        raise
    except (TypeError, ValueError) as exc:
        raise PlotConfigError(f"invalid value for {key}: {raw!r}") from exc
    raise PlotConfigError(f"unknown config key: {key}")


def load_plot_config(path: str | Path) -> PlotConfig:
    """Read a TOML file; keys may sit at top level or under a ``[plot]`` table."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"plot config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise PlotConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    table = raw.get("plot", raw)
    if not isinstance(table, dict):
        raise PlotConfigError("[plot] must be a table")
    return PlotConfig.from_mapping(table)
