# config.py

# ---------- OPTICS parameters ----------
DEFAULT_MIN_PTS = 3        # neighbours needed within epsilon for a core point
DEFAULT_EPSILON = 100.0    # neighbourhood radius

# ---------- Distance precomputation ----------
DISTANCE_CHUNK_SIZE = 500  # rows per vectorised block

# ---------- Reporting ----------
DISPLAY_DECIMALS = 2

# ---------- Figures ----------
FIGURES_DIR = "figures"
FIGURE_DPI = 150
REACHABILITY_COLOR = "#457B9D"
UNREACHED_COLOR = "#CCCCCC"
BUBBLE_CMAP = "viridis_r"
