import math

import pytest

from distance_matrix import DistanceMatrix, euclidean
from fixtures import REFERENCE_POINTS
from point_store import PointStore


def _counting_metric(calls):
    def metric(a, b):
        calls.append(frozenset((a.id, b.id)))
        return euclidean(a, b)

    return metric


def test_distance_is_euclidean():
    store = PointStore([(0.0, 0.0, "a"), (3.0, 4.0, "b")])
    dm = DistanceMatrix(store)
    assert dm.distance(store["a"], store["b"]) == 5.0


def test_distance_to_self_is_infinite():
    store = PointStore([(1.0, 2.0, "a")])
    dm = DistanceMatrix(store)
    assert dm.distance(store["a"], store["a"]) == math.inf
    assert dm.n_computed == 0


def test_symmetric_and_each_pair_computed_once():
    store = PointStore(REFERENCE_POINTS)
    calls = []
    dm = DistanceMatrix(store, metric=_counting_metric(calls))

    for a in store:
        for b in store:
            if a.id != b.id:
                assert dm.distance(a, b) == dm.distance(b, a)

    n = len(store)
    assert len(calls) == n * (n - 1) // 2
    assert len(set(calls)) == len(calls)
    assert dm.n_computed == len(calls)


def test_precompute_matches_lazy_distances():
    store = PointStore(REFERENCE_POINTS)
    eager = DistanceMatrix(store).precompute()
    lazy = DistanceMatrix(store)

    n = len(store)
    assert len(eager) == n * (n - 1) // 2
    for a in store:
        for b in store:
            if a.id != b.id:
                assert eager.distance(a, b) == pytest.approx(lazy.distance(a, b), rel=1e-12)
    assert eager.n_computed == n * (n - 1) // 2


def test_precompute_with_custom_metric():
    store = PointStore([(0.0, 0.0, "a"), (3.0, 4.0, "b"), (1.0, 1.0, "c")])

    def manhattan(a, b):
        return abs(a.x - b.x) + abs(a.y - b.y)

    dm = DistanceMatrix(store, metric=manhattan).precompute()
    assert len(dm) == 3
    assert dm.distance(store["b"], store["a"]) == 7.0
    assert dm.distance(store["c"], store["a"]) == 2.0
