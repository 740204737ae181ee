import numpy as np
from matplotlib.patches import Patch

from config import BUBBLE_CMAP, REACHABILITY_COLOR, UNREACHED_COLOR


def plot_bubbles(ax, rows, title="Points by core distance"):
    """Bubble chart: position (x, y), size by core distance, colour by reachability."""
    if not rows:
        ax.set_title(title, fontsize=14, fontweight="bold")
        return None

    xs = np.array([r.x for r in rows])
    ys = np.array([r.y for r in rows])
    core = np.array([np.nan if r.core_distance is None else r.core_distance for r in rows])
    reach = np.array([r.reachability_distance for r in rows])

    finite_core = core[~np.isnan(core)]
    scale = finite_core.max() if len(finite_core) else 1.0
    sizes = np.where(np.isnan(core), 40.0, 80.0 + 600.0 * core / scale)

    sc = ax.scatter(
        xs, ys, s=sizes, c=reach, cmap=BUBBLE_CMAP,
        alpha=0.7, edgecolors="white", linewidths=1.5, zorder=2,
    )
    for r in rows:
        ax.annotate(
            r.id, xy=(r.x, r.y), fontsize=9, fontweight="bold",
            ha="center", va="center", zorder=3,
        )

    ax.set_title(title, fontsize=14, fontweight="bold", pad=12)
    ax.set_xlabel("x position", fontsize=12)
    ax.set_ylabel("y position", fontsize=12)
    ax.grid(True, alpha=0.15, linestyle="--")
    return sc


def plot_reachability(ax, ordering, title="Reachability plot"):
    """Bar per point in processing order; unreached points drawn hatched at full height."""
    names = [e.id for e in ordering]
    values = [e.reachability_distance for e in ordering]
    finite = [v for v in values if v is not None]
    top = max(finite) * 1.1 if finite else 1.0

    heights = [top if v is None else v for v in values]
    colors = [UNREACHED_COLOR if v is None else REACHABILITY_COLOR for v in values]
    bars = ax.bar(names, heights, color=colors, edgecolor="white", linewidth=1.5)
    for bar, v in zip(bars, values):
        if v is None:
            bar.set_hatch("//")

    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.set_xlabel("Points (cluster order)")
    ax.set_ylabel("Reachability distance")
    ax.legend(
        handles=[
            Patch(facecolor=REACHABILITY_COLOR, label="Reachability"),
            Patch(facecolor=UNREACHED_COLOR, hatch="//", label="Undefined"),
        ],
        fontsize=9, loc="best", framealpha=0.9,
    )
    return bars
