import os

import matplotlib.pyplot as plt
import seaborn as sns

from config import FIGURE_DPI
from fixtures import REFERENCE_POINTS
from optics import OPTICS
from parsing import load_points
from report import format_report, plot_rows
from visualization import plot_bubbles, plot_reachability


def load_input(path=None):
    print("\n[1/4] Loading points...")
    if path is None:
        records = list(REFERENCE_POINTS)
        print(f"  Using the built-in example dataset ({len(records)} points).")
    else:
        records = load_points(path)
        print(f"  Read {len(records)} points from {path}.")
    return records


def compute_ordering(records, min_pts, epsilon):
    print(f"\n[2/4] Running OPTICS (min_pts={min_pts}, epsilon={epsilon:g})...")
    optics = OPTICS(epsilon=epsilon, min_pts=min_pts).fit(records)
    n_core = len(optics.core_distances())
    print(f"  {len(optics.ordering)} points ordered, {n_core} core points.")
    return optics


def report_results(optics, decimals):
    print("\n[3/4] Reporting...")
    print(format_report(optics.points, optics.ordering, optics.min_pts, optics.epsilon, decimals))


def plot_results(optics, figures_dir):
    print("\n[4/4] Drawing charts...")
    os.makedirs(figures_dir, exist_ok=True)
    sns.set_style("whitegrid")

    fig, ax = plt.subplots(figsize=(12, 9))
    sc = plot_bubbles(ax, plot_rows(optics.points), f"OPTICS points (epsilon={optics.epsilon:g})")
    if sc is not None:
        plt.colorbar(sc, ax=ax, label="Reachability distance")
    plt.tight_layout()
    bubble_path = os.path.join(figures_dir, "01_bubbles.png")
    plt.savefig(bubble_path, dpi=FIGURE_DPI, bbox_inches="tight")
    plt.close()

    fig, ax = plt.subplots(figsize=(12, 6))
    plot_reachability(ax, optics.ordering, f"Reachability plot (min_pts={optics.min_pts})")
    plt.tight_layout()
    reach_path = os.path.join(figures_dir, "02_reachability.png")
    plt.savefig(reach_path, dpi=FIGURE_DPI, bbox_inches="tight")
    plt.close()

    print(f"  Saved {bubble_path} and {reach_path}.")
    return bubble_path, reach_path
