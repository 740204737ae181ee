import logging
import math
import numbers
from collections import namedtuple

from core_distance import compute_core_distances
from distance_matrix import DistanceMatrix
from exceptions import InvalidConfigurationError, OpticsCancelled
from point_store import PointStore
from seed_queue import SeedQueue

logger = logging.getLogger(__name__)

OrderingEntry = namedtuple(
    "OrderingEntry", ["id", "reachability_distance", "core_distance"]
)


def validate_config(min_pts, epsilon):
    if isinstance(min_pts, bool) or not isinstance(min_pts, numbers.Integral):
        raise InvalidConfigurationError(f"min_pts must be an integer, got {min_pts!r}")
    if min_pts <= 0:
        raise InvalidConfigurationError(f"min_pts must be positive, got {min_pts}")
    if isinstance(epsilon, bool) or not isinstance(epsilon, numbers.Real):
        raise InvalidConfigurationError(f"epsilon must be a number, got {epsilon!r}")
    if math.isnan(epsilon) or epsilon <= 0:
        raise InvalidConfigurationError(f"epsilon must be positive, got {epsilon}")


def range_query(point, points, distances, epsilon):
    """Unprocessed points within ``epsilon`` of ``point``, in store order."""
    if point is None:
        return []
    return [
        q
        for q in points
        if q.id != point.id
        and not q.processed
        and distances.distance(point, q) <= epsilon
    ]


def update_reachability(point, neighbors, seeds, distances):
    """Push reachability from core point ``point`` to its unprocessed neighbours."""
    for neighbor in neighbors:
        candidate = max(point.core_distance, distances.distance(point, neighbor))
        neighbor.offer_reachability(candidate)
        seeds.insert_or_update(neighbor)


class RunContext:
    """State owned by a single OPTICS run."""

    def __init__(self, points, distances, epsilon):
        self.points = points
        self.distances = distances
        self.epsilon = epsilon
        self.ordering = []

    def process(self, point, seeds):
        neighbors = range_query(point, self.points, self.distances, self.epsilon)
        point.processed = True
        self.ordering.append(
            OrderingEntry(point.id, point.reachability_distance, point.core_distance)
        )
        if point.is_core:
            update_reachability(point, neighbors, seeds, self.distances)

    def expand(self, point):
        seeds = SeedQueue()
        self.process(point, seeds)
        while seeds:
            self.process(seeds.pop(), seeds)


class OPTICS:
    """OPTICS cluster ordering implemented from scratch.

    Pipeline: pairwise distances -> core distances -> seed-queue expansion
    from every unvisited point in store order.

    ``fit`` accepts a ``PointStore`` or an iterable of ``(x, y, id)`` records.
    ``cancel`` is any object with ``is_set()`` (e.g. ``threading.Event``); it
    is checked before each new expansion and raises ``OpticsCancelled``.
    """

    def __init__(self, epsilon=100.0, min_pts=3, metric=None, precompute=True):
        validate_config(min_pts, epsilon)
        self.epsilon = epsilon
        self.min_pts = min_pts
        self.metric = metric
        self.precompute = precompute
        self.points = None
        self.distances = None
        self.ordering = None

    def fit(self, points, cancel=None):
        store = points if isinstance(points, PointStore) else PointStore(points)
        store.reset()

        distances = DistanceMatrix(store, metric=self.metric)
        if self.precompute:
            distances.precompute()
        compute_core_distances(store, distances, self.epsilon, self.min_pts)

        ctx = RunContext(store, distances, self.epsilon)
        for point in store:
            if point.processed:
                continue
            if cancel is not None and cancel.is_set():
                logger.info("Cancelled after %d of %d points.", len(ctx.ordering), len(store))
                raise OpticsCancelled(ctx.ordering)
            logger.debug("Expanding from %s", point.id)
            ctx.expand(point)

        logger.info(
            "Ordered %d points (%d distances computed).",
            len(ctx.ordering),
            distances.n_computed,
        )
        self.points = store
        self.distances = distances
        self.ordering = ctx.ordering
        return self

    def core_distances(self):
        """id -> core distance, for core points only."""
        return {p.id: p.core_distance for p in self.points if p.is_core}


def run(points, min_pts, epsilon, metric=None, cancel=None):
    """Compute the OPTICS ordering of ``points`` as a list of ``OrderingEntry``."""
    return OPTICS(epsilon=epsilon, min_pts=min_pts, metric=metric).fit(
        points, cancel=cancel
    ).ordering
