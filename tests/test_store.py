"""
Tests for the sample store and the triplet badness heuristic.

The store keeps badness on the left sample of each interval and a running
count of bad intervals; these tests pin both down, with explicit insertions at
either end of the sequence.
"""

import math

import numpy as np

from afs.badness import ASYMPTOTE_BADNESS
from tests.utils import assert_store_invariants, make_store


def peak(x: float) -> float:
    return 1.0 - abs(x - 1.0)


def test_peak_marks_both_intervals():
    store, _ = make_store(peak, [0.0, 1.0, 2.0])

    assert store.bad_intervals == 2
    assert store[0].badness == 2.0
    assert store[1].badness == 2.0
    assert_store_invariants(store)


def test_insert_at_end_keeps_last_badness_zero():
    store, evaluator = make_store(peak, [0.0, 1.0, 2.0])

    assert store.insert(3.0, evaluator(3.0))

    assert len(store) == 4
    assert store[2].badness == 0.0
    assert store[3].badness == 0.0
    assert store.bad_intervals == 2
    assert_store_invariants(store)


def test_insert_at_start_shifts_ownership():
    store, evaluator = make_store(peak, [0.0, 1.0, 2.0])

    assert store.insert(-1.0, evaluator(-1.0))

    assert store.xs == [-1.0, 0.0, 1.0, 2.0]
    # (-1, 0, 1) is collinear: the new leading interval stays clean
    assert store[0].badness == 0.0
    assert store[1].badness == 2.0
    assert store[2].badness == 2.0
    assert store.bad_intervals == 2
    assert_store_invariants(store)


def test_split_interval_is_rescored():
    store, evaluator = make_store(peak, [0.0, 1.0, 2.0])

    assert store.insert(0.5, evaluator(0.5))

    # (0, 0.5, 1) is a straight line, so the old score of (0, 1) is gone
    assert store[0].badness == 0.0
    assert store[1].badness == 1.0
    assert store[2].badness == 2.0
    assert store.bad_intervals == 2
    assert_store_invariants(store)


def test_rejects_duplicates_and_close_points():
    store, evaluator = make_store(peak, [0.0, 1.0, 2.0], min_dx=1e-3)

    assert not store.insert(1.0, 1.0)
    assert not store.insert(1.0 + 5e-4, 1.0)
    assert not store.insert(2.0 - 5e-4, 0.0)
    assert len(store) == 3
    assert store.insert(1.0 + 2e-3, evaluator(1.0 + 2e-3))
    assert_store_invariants(store)


def test_rejects_insert_when_full():
    store, evaluator = make_store(peak, [0.0, 1.0, 2.0], initial_points=2, max_points=3)

    assert not store.insert(0.5, evaluator(0.5))
    assert len(store) == 3


def test_undefined_sample_clears_touching_intervals():
    values = {0.0: 0.0, 1.0: 1.0, 2.0: 0.0}
    store, evaluator = make_store(values.get, [0.0, 1.0, 2.0])
    assert store.bad_intervals == 2

    y = evaluator(1.5)
    assert math.isnan(y)
    assert store.insert(1.5, y)

    assert store[0].badness == 2.0
    assert store[1].badness == 0.0
    assert store[2].badness == 0.0
    assert store.bad_intervals == 1
    assert_store_invariants(store)


def test_asymptote_gets_large_badness():
    values = {-1.0: -1.0, 0.0: math.inf, 1.0: 1.0}
    store, _ = make_store(values.get, [-1.0, 0.0, 1.0])

    assert store[0].badness == ASYMPTOTE_BADNESS
    assert store[1].badness == ASYMPTOTE_BADNESS
    assert store.bad_intervals == 2


def test_all_infinite_triplet_is_left_alone():
    store, _ = make_store(lambda x: math.inf, [0.0, 1.0, 2.0])

    assert store.bad_intervals == 0


def test_flat_thresholds():
    values = {0.0: 0.0, 1.0: 1e-4, 2.0: 0.0, 3.0: 1e-4, 4.0: 10.0}
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]

    # Wiggles far below 1e-3 of the overall range count as flat
    store, _ = make_store(values.get, xs)
    assert store[0].badness == 0.0
    assert store[1].badness == 0.0
    assert store[2].badness > 0.0
    assert store[3].badness > 0.0
    assert_store_invariants(store)

    # Without a relative threshold the same wiggle is a sharp turn
    store, _ = make_store(values.get, xs, min_dy_rel=0.0)
    assert store[0].badness > 0.0
    assert_store_invariants(store)

    store, _ = make_store(values.get, xs, min_dy_abs=100.0)
    assert store.bad_intervals == 0


def test_max_curvature_of_one_disables_refinement():
    store, _ = make_store(peak, [0.0, 1.0, 2.0], max_curvature=1.0)

    assert store.bad_intervals == 0


def test_counter_matches_scan_under_random_inserts():
    """Counter stays exact through many inserts, holes and poles included."""

    def wiggly(x: float):
        if 0.4 < x < 0.6:
            return None
        if abs(x - 2.0) < 1e-3:
            return math.inf
        return math.sin(5.0 * x) * math.exp(-x)

    rng = np.random.RandomState(42)
    store, evaluator = make_store(wiggly, list(np.linspace(-1.0, 3.0, 9)), min_dx=1e-4)
    assert_store_invariants(store)

    for x in rng.uniform(-2.0, 4.0, size=300):
        store.insert(float(x), evaluator(float(x)))
        assert_store_invariants(store)

    # Explicit boundary inserts after the random ones
    for x in (-5.0, 7.0):
        assert store.insert(x, evaluator(x))
        assert_store_invariants(store)
