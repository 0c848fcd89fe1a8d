from __future__ import annotations

import sys

from rasterplot.demos import multiple_series


def main() -> int:
    plot = multiple_series()
    if plot.save_to_file("multiple_series.png"):
        print("Plot saved to multiple_series.png")
        return 0
    print("Failed to create plot", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
