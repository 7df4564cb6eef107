"""
Evaluation wrapper around the user function.
"""

import math
from typing import Callable, Optional

UNDEFINED = float("nan")


class Evaluator:
    """Calls the user function and sanitizes what it returns.

    Exceptions raised by the function are not caught. ``None`` and NaN become
    the undefined sentinel (NaN). Finite values widen the running finite
    y-range; infinities are passed through without touching it.
    """

    def __init__(self, func: Callable[[float], Optional[float]]) -> None:
        self._func = func
        self.y_min: float = math.inf
        self.y_max: float = -math.inf
        self.total_evals: int = 0

    def __call__(self, x: float) -> float:
        value = self._func(x)
        self.total_evals += 1

        if value is None:
            return UNDEFINED
        y = float(value)
        if math.isnan(y):
            return UNDEFINED
        if math.isfinite(y):
            if y < self.y_min:
                self.y_min = y
            if y > self.y_max:
                self.y_max = y
        return y

    @property
    def y_range(self) -> float:
        """Span of finite values seen so far, 0.0 before the first one."""
        if self.y_max < self.y_min:
            return 0.0
        return self.y_max - self.y_min
