from __future__ import annotations

import sys

from rasterplot import quick_plot


def main() -> int:
    x = [0, 1, 2, 3, 4, 5]
    y = [0, 1, 4, 9, 16, 25]
    if quick_plot(x, y, "simple_plot.png", "Simple Plot: y = x²"):
        print("Plot saved to simple_plot.png")
        return 0
    print("Failed to create plot", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
