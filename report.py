import math
from collections import namedtuple

import numpy as np
import pandas as pd

from config import DISPLAY_DECIMALS

PlotRow = namedtuple("PlotRow", ["id", "x", "y", "core_distance", "reachability_distance"])


def round_float(value, decimals=DISPLAY_DECIMALS):
    """Round half up to ``decimals`` places; None stays None."""
    if value is None:
        return None
    multiplier = 10 ** decimals
    return math.floor(value * multiplier + 0.5) / multiplier


def _display(value, decimals):
    return np.inf if value is None else round_float(value, decimals)


def core_distance_table(points, decimals=DISPLAY_DECIMALS):
    """Core distance per core point, in store order."""
    rows = [(p.id, round_float(p.core_distance, decimals)) for p in points if p.is_core]
    return pd.DataFrame(rows, columns=["id", "core_distance"])


def ordering_frame(ordering, decimals=DISPLAY_DECIMALS):
    """The cluster ordering as a table; undefined values show as inf."""
    return pd.DataFrame(
        [
            (e.id, _display(e.reachability_distance, decimals), _display(e.core_distance, decimals))
            for e in ordering
        ],
        columns=["id", "reachability_distance", "core_distance"],
    )


def plot_rows(points):
    """(id, x, y, core, reachability) per point, unreached points plotted at 0."""
    return [
        PlotRow(
            p.id,
            p.x,
            p.y,
            p.core_distance,
            0.0 if p.reachability_distance is None else p.reachability_distance,
        )
        for p in points
    ]


def format_report(points, ordering, min_pts, epsilon, decimals=DISPLAY_DECIMALS):
    core_df = core_distance_table(points, decimals)
    order_df = ordering_frame(ordering, decimals)
    lines = [
        "=" * 70,
        f"  OPTICS ORDERING (min_pts={min_pts}, epsilon={epsilon:g})",
        "=" * 70,
        f"\nCore distances ({len(core_df)} of {len(points)} points are core points):",
        core_df.to_string(index=False) if len(core_df) else "  (none)",
        "\nCluster ordering (id, reachability, core):",
        order_df.to_string(index=False) if len(order_df) else "  (empty)",
    ]
    return "\n".join(lines)
