"""
Advanced usage example for AFS library.

Shows how poles and undefined regions are isolated into separate segments,
the flat output mode with NaN break markers, and SVG path output. A plot of
the segments is written next to the script (requires matplotlib).
"""

import math
from pathlib import Path

from afs import sample_function, to_svg_path


def reciprocal(x: float) -> float:
    return math.inf if x == 0.0 else 1.0 / x


def sqrt_or_undefined(x: float):
    return math.sqrt(x) if x >= 0.0 else None


def example_pole():
    """Example 1: 1/x splits into two segments around x = 0."""
    print("=" * 60)
    print("EXAMPLE 1: Pole at x = 0")
    print("=" * 60)

    segments = sample_function(reciprocal, (-1.0, 1.0))
    for i, run in enumerate(segments):
        print(
            f"  segment {i}: {len(run)} points, x in [{run[0].x:.6f}, {run[-1].x:.6f}]"
        )
    return segments


def example_undefined_region():
    """Example 2: sqrt(x) is undefined left of 0."""
    print("\n" + "=" * 60)
    print("EXAMPLE 2: Undefined Region")
    print("=" * 60)

    flat = sample_function(sqrt_or_undefined, (-1.0, 1.0), mode="flat")
    print(f"  flat output: {len(flat)} points, first x = {flat[0].x:.6f}")
    return flat


def example_svg(segments):
    """Example 3: SVG path data for a pre-segmented result."""
    print("\n" + "=" * 60)
    print("EXAMPLE 3: SVG Path Data")
    print("=" * 60)

    path = to_svg_path(segments, precision=4)
    print(f"  {path[:120]}...")
    return path


def save_plot(segments, filename: str = "reciprocal.png") -> Path:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    out = Path(__file__).with_name(filename)
    plt.figure(figsize=(8, 5))
    for run in segments:
        plt.plot([p.x for p in run], [p.y for p in run], ".-", linewidth=1.0, markersize=3)
    plt.ylim(-50, 50)
    plt.grid(True, alpha=0.3)
    plt.title("1/x sampled adaptively")
    plt.savefig(out, dpi=150, bbox_inches="tight")
    plt.close()
    return out


if __name__ == "__main__":
    segments = example_pole()
    example_undefined_region()
    example_svg(segments)
    print(f"\nPlot saved to {save_plot(segments)}")
