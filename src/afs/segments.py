"""
Segmentation of sampled points into continuous polylines.
"""

import math
from typing import List, Optional, Sequence

from afs.types import Point


def split_segments(points: Sequence[Point]) -> List[List[Point]]:
    """
    Split ordered points into maximal runs of finite y.

    NaN and +/-inf both end a run. Runs of fewer than two points are dropped
    since a lone point cannot form a line.
    """
    runs: List[List[Point]] = []
    current: List[Point] = []
    for point in points:
        if math.isfinite(point.y):
            current.append(point)
            continue
        if len(current) > 1:
            runs.append(current)
        current = []
    if len(current) > 1:
        runs.append(current)
    return runs


def flatten_segments(runs: Sequence[Sequence[Point]]) -> List[Point]:
    """Join runs into one list with a ``Point(x, nan)`` break marker between them."""
    flat: List[Point] = []
    for run in runs:
        if not run:
            continue
        if flat:
            flat.append(Point(x=0.5 * (flat[-1].x + run[0].x), y=math.nan))
        flat.extend(run)
    return flat


def _format_number(value: float, precision: Optional[int]) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}f}"


def to_svg_path(runs: Sequence[Sequence[Point]], precision: Optional[int] = None) -> str:
    """
    Build SVG path data with one ``M ... L ...`` subpath per run.

    Args:
        runs: Point runs, e.g. the output of `split_segments`.
        precision: Fixed number of decimals, or None for the shortest exact
            float representation.
    """
    subpaths = []
    for run in runs:
        if not run:
            continue
        head, *tail = run
        parts = [f"M {_format_number(head.x, precision)} {_format_number(head.y, precision)}"]
        parts.extend(
            f"L {_format_number(p.x, precision)} {_format_number(p.y, precision)}"
            for p in tail
        )
        subpaths.append(" ".join(parts))
    return " ".join(subpaths)
