"""
Ordered sample container with incremental badness bookkeeping.

Ownership rule: ``samples[i].badness`` describes the interval
``(samples[i], samples[i + 1])``. The last sample never carries badness.
``bad_intervals`` always equals the number of samples with badness > 0; every
badness write goes through `clear_badness` / `raise_badness` to keep it so.
"""

from bisect import bisect_left
from typing import Iterator, List, Sequence

from afs.badness import BadnessEstimator
from afs.options import SamplerOptions
from afs.types import Point, Sample


class SampleStore:
    def __init__(self, options: SamplerOptions, estimator: BadnessEstimator) -> None:
        self.options = options
        self._estimator = estimator
        self._samples: List[Sample] = []
        self._xs: List[float] = []
        self._bad_intervals: int = 0

    # -----------------
    # Container access
    # -----------------

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)

    @property
    def xs(self) -> List[float]:
        return list(self._xs)

    @property
    def bad_intervals(self) -> int:
        return self._bad_intervals

    def count_positive_badness(self) -> int:
        """Full scan equivalent of `bad_intervals`, for invariant checks."""
        return sum(1 for s in self._samples if s.badness > 0)

    def interval_gap(self, index: int) -> float:
        return self._xs[index + 1] - self._xs[index]

    def points(self) -> List[Point]:
        return [s.to_point() for s in self._samples]

    # -----------------
    # Badness writes
    # -----------------

    def clear_badness(self, index: int) -> None:
        if index < 0 or index >= len(self._samples):
            return
        sample = self._samples[index]
        if sample.badness > 0:
            self._bad_intervals -= 1
        sample.badness = 0.0

    def raise_badness(self, index: int, value: float) -> None:
        """Set the badness of interval ``index`` to at least ``value``."""
        if value <= 0:
            return
        sample = self._samples[index]
        if sample.badness <= 0:
            self._bad_intervals += 1
        if value > sample.badness:
            sample.badness = value

    # -----------------
    # Mutation
    # -----------------

    def seed(self, samples: Sequence[Sample]) -> None:
        """Load x-sorted, already spaced seed samples and score them once."""
        if self._samples:
            raise RuntimeError("SampleStore.seed called on a non-empty store")
        for sample in samples:
            self._samples.append(Sample(x=sample.x, y=sample.y))
            self._xs.append(sample.x)
        for i in range(1, len(self._samples) - 1):
            self._estimator.update(self, i)

    def insert(self, x: float, y: float) -> bool:
        """
        Insert a sample and rescore the triplets it touches.

        The insertion is discarded (returns False) when the store is full, an
        equal x exists, or a neighbour is closer than min_dx.
        """
        if len(self._samples) >= self.options.max_points:
            return False

        min_dx = self.options.min_dx
        pos = bisect_left(self._xs, x)
        n = len(self._xs)
        if pos < n and self._xs[pos] == x:
            return False
        if pos > 0 and x - self._xs[pos - 1] < min_dx:
            return False
        if pos < n and self._xs[pos] - x < min_dx:
            return False

        # The interval (pos - 1, pos) is being split; its score is stale.
        self.clear_badness(pos - 1)

        self._samples.insert(pos, Sample(x=x, y=y))
        self._xs.insert(pos, x)

        for centre in (pos - 1, pos, pos + 1):
            self._estimator.update(self, centre)
        return True
