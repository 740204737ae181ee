import logging

logger = logging.getLogger(__name__)


def core_distance(point, points, distances, epsilon, min_pts):
    """Distance to the ``min_pts``-th nearest neighbour within ``epsilon``.

    Returns None when fewer than ``min_pts`` other points lie within
    ``epsilon``, i.e. ``point`` is not a core point.
    """
    within = sorted(
        d
        for d in (distances.distance(point, q) for q in points if q.id != point.id)
        if d <= epsilon
    )
    if len(within) < min_pts:
        return None
    return within[min_pts - 1]


def compute_core_distances(points, distances, epsilon, min_pts):
    """Assign ``core_distance`` on every point of the store; returns the core count."""
    n_core = 0
    for point in points:
        point.core_distance = core_distance(point, points, distances, epsilon, min_pts)
        if point.is_core:
            n_core += 1
    logger.info("Found %d core points out of %d.", n_core, len(points))
    return n_core
