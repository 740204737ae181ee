import math

import numpy as np

from config import DISTANCE_CHUNK_SIZE


def euclidean(a, b):
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


class DistanceMatrix:
    """Symmetric pairwise distances over a point store, memoised per unordered pair.

    ``distance(a, a)`` is infinite so a point never lands in its own
    neighbourhood. Pass ``metric`` to swap Euclidean for another metric.
    """

    def __init__(self, points, metric=None):
        self.points = points
        self.metric = metric or euclidean
        self.n_computed = 0
        self._cache = {}

    @staticmethod
    def _key(a, b):
        return (a.id, b.id) if a.id < b.id else (b.id, a.id)

    def distance(self, a, b):
        if a.id == b.id:
            return math.inf
        key = self._key(a, b)
        d = self._cache.get(key)
        if d is None:
            d = float(self.metric(a, b))
            self._cache[key] = d
            self.n_computed += 1
        return d

    def precompute(self):
        """Fill every pair before the expansion loop reads them."""
        pts = list(self.points)
        if self.metric is not euclidean:
            for i, a in enumerate(pts):
                for b in pts[i + 1:]:
                    self.distance(a, b)
            return self

        X = self.points.coordinates()
        n = len(pts)
        for start in range(0, n, DISTANCE_CHUNK_SIZE):
            end = min(start + DISTANCE_CHUNK_SIZE, n)
            dists = np.sqrt(
                ((X[start:end, np.newaxis, :] - X[np.newaxis, :, :]) ** 2).sum(axis=2)
            )
            for i in range(start, end):
                for j in range(i + 1, n):
                    key = self._key(pts[i], pts[j])
                    if key not in self._cache:
                        self._cache[key] = float(dists[i - start, j])
                        self.n_computed += 1
        return self

    def __len__(self):
        return len(self._cache)
