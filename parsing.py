import math
from pathlib import Path

import pandas as pd

from exceptions import ParseError

CSV_COLUMNS = ["x", "y", "id"]


def _coordinate(value, name, line_number, line):
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ParseError(line_number, line, f"{name} coordinate {value!r} is not a number") from None
    if not math.isfinite(number):
        raise ParseError(line_number, line, f"{name} coordinate {value!r} is not finite")
    return number


def parse_line(line, line_number):
    """Parse ``"x y id"`` into an ``(x, y, id)`` record."""
    fields = line.split()
    if len(fields) != 3:
        raise ParseError(line_number, line, f"expected 3 fields (x y id), got {len(fields)}")
    x = _coordinate(fields[0], "x", line_number, line)
    y = _coordinate(fields[1], "y", line_number, line)
    return x, y, fields[2]


def parse_points(text):
    """One point per line, whitespace separated; blank lines are skipped."""
    return [
        parse_line(line, number)
        for number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]


def load_points(path):
    """Read records from a ``.csv`` with x/y/id columns, or from a text file."""
    path = Path(path)
    if path.suffix.lower() != ".csv":
        return parse_points(path.read_text())

    df = pd.read_csv(path, dtype=str)
    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise ParseError(1, ",".join(map(str, df.columns)), f"missing columns {missing}")

    records = []
    for row_number, row in enumerate(df[CSV_COLUMNS].itertuples(index=False), start=2):
        line = ",".join(str(v) for v in row)
        if pd.isna(row.id) or not str(row.id).strip():
            raise ParseError(row_number, line, "missing identifier")
        x = _coordinate(row.x, "x", row_number, line)
        y = _coordinate(row.y, "y", row_number, line)
        records.append((x, y, str(row.id).strip()))
    return records
