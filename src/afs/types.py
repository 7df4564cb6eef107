"""
Type definitions for AFS library.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray


# -----------------------------
# Public result data structures
# -----------------------------


@dataclass(frozen=True)
class Point:
    """A sampled point of the plotted function.

    ``y`` is finite inside a segment. In the raw sample list it can also be
    ``inf``/``-inf`` (asymptote) or ``nan`` (undefined).
    """

    x: float
    y: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.y)


@dataclass
class SamplingResult:
    """Result of an adaptive sampling run.

    ``early_stop_reason`` is None when every flagged interval was refined
    away. "unsplittable" means the remaining flagged intervals were narrower
    than 2 * min_dx and had their badness cleared instead, so it also comes
    with ``bad_intervals_remaining == 0``; the curve converged only down to
    the min_dx resolution. "max_points", "max_iterations" and "no_progress"
    leave flagged intervals behind.
    """

    points: List[Point]
    total_evals: int
    iterations: int
    early_stop_reason: Optional[str]
    bad_intervals_remaining: int
    info: Optional[Dict[str, Any]] = None  # Optional info dict for additional data

    @property
    def segments(self) -> List[List[Point]]:
        from afs.segments import split_segments

        if self.early_stop_reason == "degenerate_domain":
            return [list(self.points)] if self.points[0].is_finite else []
        return split_segments(self.points)

    @property
    def flat(self) -> List[Point]:
        from afs.segments import flatten_segments

        if self.early_stop_reason == "degenerate_domain":
            return list(self.points)
        return flatten_segments(self.segments)

    def as_arrays(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        xs = np.array([p.x for p in self.points], dtype=np.float64)
        ys = np.array([p.y for p in self.points], dtype=np.float64)
        return xs, ys


# --------------------
# Internal data models
# --------------------


@dataclass
class Sample:
    """Internal sample. ``badness`` describes the interval to the right neighbour."""

    x: float
    y: float
    badness: float = field(default=0.0)

    def to_point(self) -> Point:
        return Point(x=self.x, y=self.y)
