"""Pure thumbnail computations: fit dimensions and resampling."""

from .fit_dimensions import compute_fit_dimensions
from .resampler import PillowResampler, ResampleFilter, Resampler, get_resampler

__all__ = [
    "PillowResampler",
    "ResampleFilter",
    "Resampler",
    "compute_fit_dimensions",
    "get_resampler",
]
