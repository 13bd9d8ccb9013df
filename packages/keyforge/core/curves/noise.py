"""Deterministic noise-like curves.

Random-driven shapes take an explicit seed (or a ``numpy.random.Generator``)
so identical inputs always produce identical samples.
"""

from __future__ import annotations

import math

import numpy as np

from keyforge.core.curves.sampling import normalized_positions
from keyforge.core.utils.math import clamp

OCTAVE_MULTIPLIERS: tuple[float, ...] = (2.0, 4.0, 8.0, 16.0)
OCTAVE_WEIGHTS: tuple[float, ...] = (1.0, 0.5, 0.25, 0.125)
OCTAVE_SEED_OFFSETS: tuple[float, ...] = (1.0, 1.3, 1.7, 2.1)
OCTAVE_NORMALIZER = sum(OCTAVE_WEIGHTS)  # 1.875

Seed = int | np.random.Generator


def make_rng(seed: Seed) -> np.random.Generator:
    """Return ``seed`` if it is already a Generator, else a fresh seeded one."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def organic_noise(amplitude: float, frequency: float, steps: int, seed: float = 0.0) -> list[float]:
    """Four-octave weighted sine pseudo-noise.

    Each sample is ``A · Σ w_k·sin(t·f·π·m_k + seed·o_k) / 1.875`` with
    multipliers ``m = (2, 4, 8, 16)``, weights ``w = (1, .5, .25, .125)`` and
    phase offsets ``o = (1, 1.3, 1.7, 2.1)``. The seed only shifts phases,
    so the output is bounded by ``±amplitude``.

    Args:
        amplitude: Output bound
        frequency: Base frequency over normalized progress
        steps: Number of samples (>= 2)
        seed: Phase seed; different seeds give decorrelated curves
    """
    values: list[float] = []
    for p in normalized_positions(steps):
        total = 0.0
        for multiplier, weight, offset in zip(
            OCTAVE_MULTIPLIERS, OCTAVE_WEIGHTS, OCTAVE_SEED_OFFSETS, strict=True
        ):
            total += math.sin(p * frequency * math.pi * multiplier + seed * offset) * weight
        values.append(total / OCTAVE_NORMALIZER * amplitude)
    return values


def random_walk(amplitude: float, steps: int, *, seed: Seed) -> list[float]:
    """Bounded random walk starting at 0.

    Each step adds ``(u - 0.5)·amplitude·0.2`` with ``u`` uniform in [0, 1),
    clamping the running value to ``±amplitude``.

    Args:
        amplitude: Bound on the absolute value
        steps: Number of samples (>= 2)
        seed: Integer seed or Generator driving the increments
    """
    positions = normalized_positions(steps)
    rng = make_rng(seed)
    increments = (rng.random(len(positions) - 1) - 0.5) * amplitude * 0.2

    bound = abs(amplitude)
    current = 0.0
    values = [current]
    for step in increments:
        current = clamp(current + float(step), -bound, bound)
        values.append(current)
    return values


def jitter(amplitude: float, steps: int, *, seed: Seed) -> list[float]:
    """Independent uniform samples in ``[-amplitude/2, amplitude/2)``."""
    positions = normalized_positions(steps)
    rng = make_rng(seed)
    return [float(v) for v in (rng.random(len(positions)) - 0.5) * amplitude]


def glitch_pulses(amplitude: float, steps: int, *, chance: float, seed: Seed) -> list[float]:
    """Mostly-zero signal with sparse random spikes.

    Each sample independently spikes with probability ``chance`` to a value
    uniform in ``[-amplitude/2, amplitude/2)``; otherwise it is 0.
    """
    if not 0.0 <= chance <= 1.0:
        raise ValueError(f"chance must be in [0, 1], got {chance}")
    positions = normalized_positions(steps)
    rng = make_rng(seed)
    values: list[float] = []
    for _ in positions:
        if rng.random() < chance:
            values.append(float(rng.random() - 0.5) * amplitude)
        else:
            values.append(0.0)
    return values
