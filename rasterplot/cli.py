from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rasterplot.api import quick_plot
from rasterplot.config import PlotConfig, load_plot_config
from rasterplot.demos import DEMOS
from rasterplot.errors import PlotConfigError

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rasterplot")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    quick = sub.add_parser("quick", help="Plot inline x/y values to a PNG file.")
    quick.add_argument("output", type=Path)
    quick.add_argument("--x", type=float, nargs="+", required=True)
    quick.add_argument("--y", type=float, nargs="+", required=True)
    quick.add_argument("--title", default="")
    quick.add_argument("--config", type=Path, default=None, help="TOML file with plot settings.")

    demo = sub.add_parser("demo", help="Render one of the bundled demo plots.")
    demo.add_argument("name", choices=sorted(DEMOS))
    demo.add_argument("output", type=Path)
    demo.add_argument("--config", type=Path, default=None, help="TOML file with plot settings.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config: PlotConfig | None = None
    if args.config is not None:
        try:
            config = load_plot_config(args.config)
        except (FileNotFoundError, PlotConfigError) as exc:
            LOGGER.error("%s", exc)
            return 1

    try:
        if args.command == "quick":
            ok = quick_plot(args.x, args.y, args.output, args.title, config=config)
        elif args.command == "demo":
            ok = DEMOS[args.name](config).save_to_file(args.output)
        else:
            raise RuntimeError(f"unsupported command: {args.command}")
    except PlotConfigError as exc:
        LOGGER.error("%s", exc)
        return 1

    if not ok:
        LOGGER.error("failed to write %s", args.output)
        return 1
    print(f"plot saved to {args.output}")
    return 0
