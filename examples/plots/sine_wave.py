from __future__ import annotations

import math
import sys

from rasterplot import DataSeries, Plot, linspace


def main() -> int:
    plot = Plot(800, 600)
    config = plot.config
    config.title = "Sine Wave"
    config.x_label = "x (radians)"
    config.y_label = "sin(x)"
    config.show_grid = True
    config.show_points = False
    config.line_width = 3.0

    series = DataSeries("sin(x)")
    for p in linspace(0.0, 2.0 * math.pi, 100):
        series.add_point(p.x, math.sin(p.x))
    plot.add_series(series)

    if plot.save_to_file("sine_wave.png"):
        print("Plot saved to sine_wave.png")
        return 0
    print("Failed to create plot", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
