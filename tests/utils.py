import math
from typing import Callable, List, Sequence, Tuple

from afs.badness import BadnessEstimator
from afs.evaluator import Evaluator
from afs.options import resolve_options
from afs.store import SampleStore
from afs.types import Point, Sample


def gaps(points: Sequence[Point]) -> List[float]:
    """Consecutive x-differences of an ordered point list."""
    return [b.x - a.x for a, b in zip(points[:-1], points[1:])]


def reciprocal(x: float) -> float:
    """1/x with the pole reported as +inf instead of raising."""
    if x == 0.0:
        return math.inf
    return 1.0 / x


def make_store(
    func: Callable[[float], float], xs: Sequence[float], **overrides
) -> Tuple[SampleStore, Evaluator]:
    """Seed a store with ``func`` evaluated at ``xs`` (sorted, spaced)."""
    options = resolve_options((min(xs), max(xs)), **overrides)
    evaluator = Evaluator(func)
    store = SampleStore(options, BadnessEstimator(options, evaluator))
    store.seed([Sample(x=x, y=evaluator(x)) for x in xs])
    return store, evaluator


def assert_store_invariants(store: SampleStore) -> None:
    """Counter matches a full scan, x strictly increasing, last badness is 0."""
    assert store.bad_intervals == store.count_positive_badness()
    xs = store.xs
    for a, b in zip(xs[:-1], xs[1:]):
        assert b - a >= store.options.min_dx
    if len(store):
        assert store[len(store) - 1].badness == 0.0
