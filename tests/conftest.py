import os
import sys

import matplotlib

matplotlib.use("Agg")

# Put the repository root on sys.path so the flat modules import without
# installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
