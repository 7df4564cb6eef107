"""
Basic usage example for AFS library.

This example samples a few smooth functions and shows how the sample density
follows curvature: flat stretches keep the seed spacing, bends get refined.
"""

import math

import numpy as np
from afs import AdaptiveFunctionSampler, resolve_options, sample_function


def example_flat_and_curved():
    """Example 1: A constant versus a parabola."""
    print("=" * 60)
    print("EXAMPLE 1: Flat vs. Curved")
    print("=" * 60)

    constant = sample_function(lambda x: 5.0, (-10.0, 10.0))
    parabola = sample_function(lambda x: x * x, (-5.0, 5.0))

    print("\nResults:")
    print(f"- Constant: {sum(len(run) for run in constant)} points")
    print(f"- Parabola: {sum(len(run) for run in parabola)} points")

    xs = np.array([p.x for p in parabola[0]])
    spacing = np.diff(xs)
    print(f"- Parabola spacing near 0: {spacing[np.argmin(np.abs(xs[:-1]))]:.4f}")
    print(f"- Parabola spacing near 5: {spacing[-1]:.4f}")

    return parabola


def example_diagnostics():
    """Example 2: Running the sampler directly to inspect diagnostics."""
    print("\n" + "=" * 60)
    print("EXAMPLE 2: Sampler Diagnostics")
    print("=" * 60)

    options = resolve_options((-2.0 * math.pi, 2.0 * math.pi), max_points=300)
    sampler = AdaptiveFunctionSampler(
        lambda x: math.sin(3.0 * x) * math.exp(-0.1 * x * x),
        options,
        verbose=True,
    )

    result = sampler.run()

    print("\nResults:")
    print(f"- Points: {len(result.points)}/{options.max_points}")
    print(f"- Total evaluations: {result.total_evals}")
    print(f"- Iterations: {result.iterations}")
    print(f"- Early stop reason: {result.early_stop_reason}")
    print(f"- Bad intervals remaining: {result.bad_intervals_remaining}")

    return result


def example_tuning():
    """Example 3: Effect of the curvature threshold."""
    print("\n" + "=" * 60)
    print("EXAMPLE 3: Curvature Threshold")
    print("=" * 60)

    func = lambda x: math.sin(x) + 0.3 * math.sin(7.0 * x)
    for degrees in (30, 10, 3):
        max_curvature = math.sin(math.radians(degrees))
        segments = sample_function(func, (0.0, 10.0), max_curvature=max_curvature)
        total = sum(len(run) for run in segments)
        print(f"  max turn {degrees:>2} deg (sin={max_curvature:.4f}) -> {total} points")


if __name__ == "__main__":
    print("AFS Library - Basic Usage Examples")
    print("This demonstrates curvature-driven adaptive function sampling")

    example_flat_and_curved()
    example_diagnostics()
    example_tuning()

    print("\n" + "=" * 60)
    print("Examples completed successfully!")
    print("Try modifying the parameters to see how they affect the samples.")
    print("=" * 60)
