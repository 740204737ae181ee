"""
OPTICS cluster ordering
=======================
Computes core and reachability distances plus the OPTICS ordering of a set
of labeled 2-D points, prints them and draws a bubble chart and a
reachability plot.

Input is a text file with one ``x y id`` record per line, or a CSV with
x, y and id columns. Without --input the built-in example dataset is used.

Usage:
    uv run python main.py --input points.txt --min-pts 3 --epsilon 100
"""

import argparse
import logging
import sys

import matplotlib
matplotlib.use("Agg")  # non-interactive backend, figures go to disk

from config import DEFAULT_EPSILON, DEFAULT_MIN_PTS, DISPLAY_DECIMALS, FIGURES_DIR
from exceptions import OpticsError
from pipeline import compute_ordering, load_input, plot_results, report_results


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute an OPTICS cluster ordering.")
    parser.add_argument("--input", default=None, help="Text or CSV file of points (default: example dataset).")
    parser.add_argument("--min-pts", type=int, default=DEFAULT_MIN_PTS, help="Neighbours needed for a core point.")
    parser.add_argument("--epsilon", type=float, default=DEFAULT_EPSILON, help="Neighbourhood radius.")
    parser.add_argument("--decimals", type=int, default=DISPLAY_DECIMALS, help="Decimals shown in the report.")
    parser.add_argument("--figures", default=FIGURES_DIR, help="Directory for the saved charts.")
    parser.add_argument("--no-plots", action="store_true", help="Skip drawing charts.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each expansion.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        records = load_input(args.input)
        optics = compute_ordering(records, args.min_pts, args.epsilon)
    except (OpticsError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    report_results(optics, args.decimals)
    if not args.no_plots:
        plot_results(optics, args.figures)
    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
