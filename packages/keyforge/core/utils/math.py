"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)

TAU = 2.0 * math.pi


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def sample_at_fractional_index(samples: np.ndarray, index: float) -> np.ndarray:
    """Linearly interpolate rows of ``samples`` at a fractional row index.

    Indices outside ``[0, n-1]`` are linearly extrapolated from the first or
    last segment.

    Args:
        samples: Array of shape (n, components), n >= 2
        index: Fractional row index

    Returns:
        Interpolated row of shape (components,)
    """
    last = samples.shape[0] - 1
    lo = int(clamp(math.floor(index), 0, last - 1))
    frac = index - lo
    result: np.ndarray = samples[lo] + (samples[lo + 1] - samples[lo]) * frac
    return result
