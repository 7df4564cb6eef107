"""
Option resolution for the adaptive function sampler.

Every tunable is a hint: out-of-range values are clamped to the nearest valid
value instead of being rejected. Only the domain itself is validated.
"""

import math
import sys
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple

DBL_EPSILON = sys.float_info.epsilon

DEFAULT_MIN_DX = 1e-6
DEFAULT_MIN_DY_ABS = 0.0
DEFAULT_MIN_DY_REL = 1e-3
DEFAULT_MAX_CURVATURE = 0.1736  # sin(10 degrees)
DEFAULT_INITIAL_POINTS = 11
DEFAULT_MAX_POINTS = 1000


@dataclass(frozen=True)
class SamplerOptions:
    """Resolved sampler options. Build instances with `resolve_options`."""

    x_min: float
    x_max: float
    min_dx: float = DEFAULT_MIN_DX
    min_dy_abs: float = DEFAULT_MIN_DY_ABS
    min_dy_rel: float = DEFAULT_MIN_DY_REL
    max_curvature: float = DEFAULT_MAX_CURVATURE
    initial_points: int = DEFAULT_INITIAL_POINTS
    max_points: int = DEFAULT_MAX_POINTS

    @property
    def domain(self) -> Tuple[float, float]:
        return self.x_min, self.x_max

    @property
    def max_iterations(self) -> int:
        """Safety cap on refinement passes."""
        return max(self.max_points, 200) * 5

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _pick(value: Optional[Any], default: Any) -> Any:
    return default if value is None else value


def resolve_options(
    domain: Tuple[float, float],
    *,
    min_dx: Optional[float] = None,
    min_dy_abs: Optional[float] = None,
    min_dy_rel: Optional[float] = None,
    max_curvature: Optional[float] = None,
    initial_points: Optional[int] = None,
    max_points: Optional[int] = None,
) -> SamplerOptions:
    """
    Normalize user-supplied tunables into a `SamplerOptions`.

    Args:
        domain: (x_min, x_max). Reversed bounds are swapped.
        min_dx: Minimum x-spacing between samples (at least machine epsilon).
        min_dy_abs: Absolute y-change below which a triplet counts as flat.
        min_dy_rel: Fraction of the global finite y-range below which a
            triplet counts as flat.
        max_curvature: Sine-of-angle threshold, clamped to [eps, 1].
        initial_points: Number of evenly spaced seed samples (at least 2).
        max_points: Total sample budget (at least initial_points).

    Raises:
        ValueError: If a domain endpoint is not a finite number.
    """
    x_min, x_max = float(domain[0]), float(domain[1])
    if not (math.isfinite(x_min) and math.isfinite(x_max)):
        raise ValueError(f"Domain endpoints must be finite, got {domain}")
    if x_min > x_max:
        x_min, x_max = x_max, x_min

    initial = max(2, int(_pick(initial_points, DEFAULT_INITIAL_POINTS)))

    return SamplerOptions(
        x_min=x_min,
        x_max=x_max,
        min_dx=max(DBL_EPSILON, float(_pick(min_dx, DEFAULT_MIN_DX))),
        min_dy_abs=max(0.0, float(_pick(min_dy_abs, DEFAULT_MIN_DY_ABS))),
        min_dy_rel=max(0.0, float(_pick(min_dy_rel, DEFAULT_MIN_DY_REL))),
        max_curvature=max(
            DBL_EPSILON,
            min(1.0, float(_pick(max_curvature, DEFAULT_MAX_CURVATURE))),
        ),
        initial_points=initial,
        max_points=max(initial, int(_pick(max_points, DEFAULT_MAX_POINTS))),
    )
