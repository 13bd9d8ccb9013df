"""Scalar curve shapes: ramps, periodic waves and Bezier blends."""

from __future__ import annotations

import math

import bezier
import numpy as np

from keyforge.core.curves.sampling import check_duration, normalized_positions
from keyforge.core.utils.math import TAU, lerp


def linear(start: float, end: float, steps: int) -> list[float]:
    """Linear ramp from ``start`` to ``end``.

    Example:
        >>> linear(0, 10, 5)
        [0.0, 2.5, 5.0, 7.5, 10.0]
    """
    return [lerp(start, end, p) for p in normalized_positions(steps)]


def _wave_times(steps: int, duration: float) -> list[float]:
    check_duration(duration)
    return [p * duration for p in normalized_positions(steps)]


def sin_wave(
    amplitude: float,
    frequency: float,
    steps: int,
    duration: float = 1.0,
    phase: float = 0.0,
) -> list[float]:
    """Sine wave ``A·sin(2π·f·t + φ)`` sampled over ``[0, duration]``.

    Args:
        amplitude: Peak value
        frequency: Cycles per unit of time
        steps: Number of samples (>= 2)
        duration: Sampled time span (> 0)
        phase: Phase offset in radians

    Returns:
        List of ``steps`` values.
    """
    return [
        math.sin(t * TAU * frequency + phase) * amplitude for t in _wave_times(steps, duration)
    ]


def cos_wave(
    amplitude: float,
    frequency: float,
    steps: int,
    duration: float = 1.0,
    phase: float = 0.0,
) -> list[float]:
    """Cosine counterpart of :func:`sin_wave`."""
    return [
        math.cos(t * TAU * frequency + phase) * amplitude for t in _wave_times(steps, duration)
    ]


def pulse(amplitude: float, frequency: float, steps: int, duration: float = 1.0) -> list[float]:
    """Square pulse: ``amplitude`` while the matching sine is positive, else 0."""
    return [
        amplitude if math.sin(t * TAU * frequency) > 0 else 0.0
        for t in _wave_times(steps, duration)
    ]


def sawtooth(amplitude: float, frequency: float, steps: int, duration: float = 1.0) -> list[float]:
    """Rising ramp from ``-amplitude`` to ``amplitude`` once per cycle."""
    return [((t * frequency) % 1) * amplitude * 2 - amplitude for t in _wave_times(steps, duration)]


def zigzag(amplitude: float, steps: int) -> list[float]:
    """Alternate between ``+amplitude`` and ``-amplitude`` every 0.1 of progress."""
    return [amplitude if (p % 0.2) < 0.1 else -amplitude for p in normalized_positions(steps)]


def parabola(start: float, vertex: float, end: float, steps: int) -> list[float]:
    """Quadratic Bezier blend through ``start`` and ``end`` pulled toward ``vertex``.

    ``vertex`` is the middle control point, so the curve peaks at
    ``(start + 2·vertex + end) / 4``.
    """
    positions = normalized_positions(steps)
    nodes = np.asfortranarray(
        [
            [0.0, 0.5, 1.0],
            [float(start), float(vertex), float(end)],
        ]
    )
    curve = bezier.Curve(nodes, degree=2)
    evaluated = curve.evaluate_multi(np.array(positions))
    values = [float(v) for v in evaluated[1, :]]
    # Pin the endpoints to the control values
    values[0] = float(start)
    values[-1] = float(end)
    return values


def exponential_curve(start: float, end: float, rate: float, steps: int) -> list[float]:
    """Exponential approach ``start + (end - start)·(1 - e^(-rate·p))``.

    Only reaches ``end`` asymptotically; the last sample is short of it by
    ``(end - start)·e^(-rate)``.
    """
    return [start + (end - start) * (1 - math.exp(-rate * p)) for p in normalized_positions(steps)]
