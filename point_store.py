import numpy as np

from exceptions import DuplicateIdentifierError


class Point:
    """A labeled point plus the state one OPTICS run attaches to it."""

    def __init__(self, id, x, y):
        self.id = str(id)
        self.x = float(x)
        self.y = float(y)
        self.reset()

    def reset(self):
        # None means undefined (not a core point) / not reached yet.
        self.core_distance = None
        self.reachability_distance = None
        self.processed = False

    @property
    def is_core(self):
        return self.core_distance is not None

    def offer_reachability(self, candidate):
        """Lower the reachability distance to ``candidate`` if that improves it."""
        if self.reachability_distance is None or candidate < self.reachability_distance:
            self.reachability_distance = candidate
            return True
        return False

    def __repr__(self):
        return (
            f"Point({self.id!r}, x={self.x}, y={self.y}, core={self.core_distance}, "
            f"reach={self.reachability_distance}, processed={self.processed})"
        )


class PointStore:
    """Ordered collection of points keyed by identifier.

    Iteration follows insertion order, which is the order OPTICS visits
    unprocessed points in.
    """

    def __init__(self, records=()):
        self._points = {}
        for x, y, id in records:
            self.add(x, y, id)

    def add(self, x, y, id):
        point = Point(id, x, y)
        if point.id in self._points:
            raise DuplicateIdentifierError(point.id)
        self._points[point.id] = point
        return point

    def reset(self):
        for point in self._points.values():
            point.reset()

    def coordinates(self):
        """(n, 2) array of x/y in store order."""
        if not self._points:
            return np.empty((0, 2))
        return np.array([[p.x, p.y] for p in self._points.values()], dtype=float)

    def ids(self):
        return list(self._points)

    def __getitem__(self, id):
        return self._points[id]

    def __contains__(self, id):
        return id in self._points

    def __iter__(self):
        return iter(self._points.values())

    def __len__(self):
        return len(self._points)
