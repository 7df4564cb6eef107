"""
AFS - Adaptive Function Sampling

Python library for sampling one-variable functions into polylines, with
curvature-driven refinement and isolation of asymptotes and undefined regions.
"""

from .types import Point, SamplingResult
from .options import SamplerOptions, resolve_options
from .sampler import AdaptiveFunctionSampler, sample_function
from .segments import split_segments, flatten_segments, to_svg_path

__version__ = "0.1.0"
__all__ = [
    "AdaptiveFunctionSampler",
    "sample_function",
    "SamplerOptions",
    "resolve_options",
    "Point",
    "SamplingResult",
    "split_segments",
    "flatten_segments",
    "to_svg_path",
]
