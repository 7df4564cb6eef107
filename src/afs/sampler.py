"""
Adaptive function sampler.

Seeds the domain with evenly spaced samples, then repeatedly bisects every
interval the badness heuristic flags until nothing is flagged, the point
budget is spent, or the iteration cap is reached. The result is a bounded,
non-uniform sample list that follows curvature and isolates asymptotes and
undefined regions.
"""

from typing import Callable, List, Optional, Tuple, Union

import numpy as np

from afs.badness import BadnessEstimator
from afs.evaluator import Evaluator
from afs.options import SamplerOptions, resolve_options
from afs.store import SampleStore
from afs.types import Point, Sample, SamplingResult

OUTPUT_MODES = ("segments", "flat")


class AdaptiveFunctionSampler:
    """
    Curvature-driven adaptive sampler for plotting ``y = f(x)``.

    Each call to `run` owns a fresh store and y-range, so one instance can be
    run repeatedly and gives identical results for a deterministic function.
    Exceptions raised by the function propagate out of `run`.
    """

    def __init__(
        self,
        func: Callable[[float], Optional[float]],
        options: SamplerOptions,
        verbose: bool = False,
    ) -> None:
        """
        Args:
            func: Function to sample; called with a float, returns a number,
                None or NaN (undefined) or +/-inf (asymptote).
            options: Resolved options, see `resolve_options`.
            verbose: Whether to print progress messages
        """
        self.func = func
        self.options = options
        self.verbose = verbose

    # -----------------
    # Public entrypoint
    # -----------------

    def run(self) -> SamplingResult:
        opts = self.options
        evaluator = Evaluator(self.func)

        if opts.x_min == opts.x_max:
            y = evaluator(opts.x_min)
            if self.verbose:
                print(f"Degenerate domain at x={opts.x_min}, single evaluation")
            return SamplingResult(
                points=[Point(x=opts.x_min, y=y)],
                total_evals=evaluator.total_evals,
                iterations=0,
                early_stop_reason="degenerate_domain",
                bad_intervals_remaining=0,
                info=opts.as_dict(),
            )

        store = SampleStore(opts, BadnessEstimator(opts, evaluator))
        store.seed(self._seed_samples(evaluator))

        if self.verbose:
            print(
                f"Seeded {len(store)} samples on [{opts.x_min}, {opts.x_max}], "
                f"{store.bad_intervals} bad intervals"
            )

        iterations, reason = self._refine(store, evaluator)

        if self.verbose:
            print(f"Total evaluations: {evaluator.total_evals}")
            print(f"Samples: {len(store)}/{opts.max_points} after {iterations} iterations")
            if reason is not None:
                print(f"Stopped early: {reason}")

        return SamplingResult(
            points=store.points(),
            total_evals=evaluator.total_evals,
            iterations=iterations,
            early_stop_reason=reason,
            bad_intervals_remaining=store.bad_intervals,
            info=opts.as_dict(),
        )

    # -----------------
    # Initialization
    # -----------------

    def _seed_samples(self, evaluator: Evaluator) -> List[Sample]:
        opts = self.options
        seeds: List[Sample] = []
        for x in np.linspace(opts.x_min, opts.x_max, opts.initial_points):
            x = float(x)
            y = evaluator(x)
            if seeds and x - seeds[-1].x < opts.min_dx:
                continue
            seeds.append(Sample(x=x, y=y))
        return seeds

    # -----------------
    # Refinement loop
    # -----------------

    def _refine(self, store: SampleStore, evaluator: Evaluator) -> Tuple[int, Optional[str]]:
        opts = self.options
        iterations = 0

        while store.bad_intervals > 0:
            if len(store) >= opts.max_points:
                return iterations, "max_points"
            if iterations >= opts.max_iterations:
                return iterations, "max_iterations"

            candidates = self._collect_candidates(store)
            if not candidates:
                # Every flagged interval was too narrow to halve
                return iterations, "unsplittable"

            added = 0
            for x in candidates:
                if len(store) >= opts.max_points:
                    break
                if store.insert(x, evaluator(x)):
                    added += 1

            if self.verbose:
                print(
                    f"Iteration {iterations + 1}: {len(candidates)} candidates, "
                    f"{added} inserted, {store.bad_intervals} bad intervals left"
                )

            if added == 0 and store.bad_intervals > 0:
                return iterations, "no_progress"
            iterations += 1

        return iterations, None

    def _collect_candidates(self, store: SampleStore) -> List[float]:
        """Midpoints of splittable bad intervals; unsplittable ones are cleared."""
        min_split = 2.0 * self.options.min_dx
        candidates = []
        for i in range(len(store) - 1):
            if store[i].badness <= 0:
                continue
            if store.interval_gap(i) >= min_split:
                candidates.append(0.5 * (store[i].x + store[i + 1].x))
            else:
                store.clear_badness(i)
        return sorted(set(candidates))


def sample_function(
    func: Callable[[float], Optional[float]],
    domain: Tuple[float, float],
    *,
    min_dx: Optional[float] = None,
    min_dy_abs: Optional[float] = None,
    min_dy_rel: Optional[float] = None,
    max_curvature: Optional[float] = None,
    initial_points: Optional[int] = None,
    max_points: Optional[int] = None,
    mode: str = "segments",
    verbose: bool = False,
) -> Union[List[List[Point]], List[Point]]:
    """
    Sample ``func`` over ``domain`` for polyline rendering.

    Args:
        func: Function of one variable.
        domain: (x_min, x_max); reversed bounds are swapped.
        mode: "segments" returns a list of continuous runs of finite points;
            "flat" returns one list with ``Point(x, nan)`` break markers.
        verbose: Whether to print progress messages
        Remaining keyword arguments are tunables, see `resolve_options`.

    Raises:
        ValueError: For an unknown mode or a non-finite domain.
    """
    if mode not in OUTPUT_MODES:
        raise ValueError(f"mode must be one of {OUTPUT_MODES}, got {mode!r}")

    options = resolve_options(
        domain,
        min_dx=min_dx,
        min_dy_abs=min_dy_abs,
        min_dy_rel=min_dy_rel,
        max_curvature=max_curvature,
        initial_points=initial_points,
        max_points=max_points,
    )
    result = AdaptiveFunctionSampler(func, options, verbose=verbose).run()
    if mode == "flat":
        return result.flat
    return result.segments
