from config import DEFAULT_EPSILON, DEFAULT_MIN_PTS
from parsing import parse_points

# The 11-point example dataset the tool ships with, in its text input format.
REFERENCE_INPUT = """\
40.00000 69.835013 A
78.0952367 153.64454 B
103.80952 138.406443 C
109.523813 161.26358 D
148.57143 129.835013 E
151.42857 187.9302567 F
94.2857167 186.025493 G
71.42857 60.311203 H
63.809523 174.596923 I
100.952383 154.596913 J
100.952383 197.45406 K
"""

REFERENCE_POINTS = parse_points(REFERENCE_INPUT)

__all__ = ["REFERENCE_INPUT", "REFERENCE_POINTS", "DEFAULT_MIN_PTS", "DEFAULT_EPSILON"]
