"""
Triplet badness heuristic.

A triplet is three consecutive samples (prev, mid, next). Its score says how
urgently the two intervals (prev, mid) and (mid, next) need subdivision. The
score of an interval is stored on its left sample, so the interval (prev, mid)
lives at index ``i - 1`` and (mid, next) at index ``i`` for a triplet centred
on ``i``.

The rules are applied in a fixed order:
1. Both gaps already below min_dx: nothing left to split, clear both.
2. An undefined (NaN) y: clear the intervals touching it. Segmentation
   isolates the hole later.
3. Some but not all y infinite: flag the intervals crossing between finite
   and infinite with ASYMPTOTE_BADNESS so the driver keeps halving toward the
   asymptote until min_dx stops it.
4. Visually flat (both |dy| below the absolute or relative threshold): clear.
5. Curvature: sine of the angle between the normalized chords. Above
   max_curvature both intervals get raised to the parallelogram area of the
   raw chords.
"""

import math
from typing import TYPE_CHECKING

from afs.evaluator import Evaluator
from afs.options import DBL_EPSILON, SamplerOptions

if TYPE_CHECKING:
    from afs.store import SampleStore

# Several orders of magnitude above any geometric badness of a plotted range
ASYMPTOTE_BADNESS = 1e12


class BadnessEstimator:
    """Scores triplets and writes the result into a `SampleStore`."""

    def __init__(self, options: SamplerOptions, evaluator: Evaluator) -> None:
        self.options = options
        self._evaluator = evaluator

    def update(self, store: "SampleStore", i: int) -> None:
        """Rescore the triplet centred on index ``i``.

        Centres without a neighbour on both sides are skipped.
        """
        if i <= 0 or i >= len(store) - 1:
            return

        prev, mid, nxt = store[i - 1], store[i], store[i + 1]
        min_dx = self.options.min_dx
        dx0 = mid.x - prev.x
        dx1 = nxt.x - mid.x

        if dx0 < min_dx and dx1 < min_dx:
            store.clear_badness(i - 1)
            store.clear_badness(i)
            return

        nan_prev, nan_mid, nan_next = (
            math.isnan(prev.y),
            math.isnan(mid.y),
            math.isnan(nxt.y),
        )
        if nan_prev or nan_mid or nan_next:
            if nan_prev or nan_mid:
                store.clear_badness(i - 1)
            if nan_mid or nan_next:
                store.clear_badness(i)
            return

        fin_prev, fin_mid, fin_next = (
            math.isfinite(prev.y),
            math.isfinite(mid.y),
            math.isfinite(nxt.y),
        )
        if not (fin_prev and fin_mid and fin_next):
            if dx0 > min_dx and fin_prev != fin_mid:
                store.raise_badness(i - 1, ASYMPTOTE_BADNESS)
            if dx1 > min_dx and fin_mid != fin_next:
                store.raise_badness(i, ASYMPTOTE_BADNESS)
            return

        dy0 = mid.y - prev.y
        dy1 = nxt.y - mid.y
        if self._is_flat(abs(dy0), abs(dy1)):
            store.clear_badness(i - 1)
            store.clear_badness(i)
            return

        sine = self._sine(prev.y, mid.y, nxt.y, dx0, dx1, dy0, dy1)
        if sine is None or abs(sine) <= self.options.max_curvature:
            return

        badness = abs(dx0 * dy1 - dx1 * dy0)
        if dx0 > min_dx:
            store.raise_badness(i - 1, badness)
        if dx1 > min_dx:
            store.raise_badness(i, badness)

    def _is_flat(self, ady0: float, ady1: float) -> bool:
        min_dy_abs = self.options.min_dy_abs
        if ady0 < min_dy_abs and ady1 < min_dy_abs:
            return True
        y_range = self._evaluator.y_range
        if y_range > DBL_EPSILON:
            min_dy = y_range * self.options.min_dy_rel
            if ady0 < min_dy and ady1 < min_dy:
                return True
        return False

    @staticmethod
    def _sine(
        y_prev: float,
        y_mid: float,
        y_next: float,
        dx0: float,
        dx1: float,
        dy0: float,
        dy1: float,
    ):
        """Sine of the turn between the chords, or None for a degenerate triplet.

        Chords are normalized by the triplet's own x-span and y-span so the
        result does not depend on the aspect ratio of the plot.
        """
        y_span = max(y_prev, y_mid, y_next) - min(y_prev, y_mid, y_next)
        if y_span < DBL_EPSILON:
            return None
        x_span = dx0 + dx1
        if x_span < DBL_EPSILON:
            return None

        nx0, nx1 = dx0 / x_span, dx1 / x_span
        ny0, ny1 = dy0 / y_span, dy1 / y_span
        len0_sq = nx0 * nx0 + ny0 * ny0
        len1_sq = nx1 * nx1 + ny1 * ny1
        if len0_sq < DBL_EPSILON * DBL_EPSILON or len1_sq < DBL_EPSILON * DBL_EPSILON:
            return None

        return (nx0 * ny1 - ny0 * nx1) / math.sqrt(len0_sq * len1_sq)
