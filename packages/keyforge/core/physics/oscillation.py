"""Oscillators and decays."""

from __future__ import annotations

import math

from keyforge.core.curves.sampling import time_array
from keyforge.core.physics._validation import require_positive
from keyforge.core.physics.constants import GRAVITY


def damped_value(
    amplitude: float,
    damping: float,
    angular_frequency: float,
    t: float,
    phase: float = 0.0,
) -> float:
    """Single sample of ``A·e^(-c·t)·cos(ω·t + φ)`` at time ``t``."""
    return amplitude * math.exp(-damping * t) * math.cos(angular_frequency * t + phase)


def damped_oscillation(
    amplitude: float,
    damping: float,
    angular_frequency: float,
    steps: int,
    duration: float,
    phase: float = 0.0,
) -> list[float]:
    """Underdamped oscillator ``A·e^(-c·t)·cos(ω·t + φ)``.

    Args:
        amplitude: Initial amplitude A
        damping: Decay coefficient c (>= 0 for a decaying motion)
        angular_frequency: ω in radians per second
        steps: Number of samples (>= 2)
        duration: Sampled time span in seconds (> 0)
        phase: Phase offset φ in radians

    Returns:
        List of ``steps`` values.
    """
    return [
        damped_value(amplitude, damping, angular_frequency, t, phase)
        for t in time_array(steps, duration)
    ]


def spring_motion(
    amplitude: float,
    spring_constant: float,
    mass: float,
    damping: float,
    steps: int,
    duration: float,
) -> list[float]:
    """Mass on a damped spring.

    Delegates to :func:`damped_oscillation` with ``ω = √(k/m)`` and
    ``c = damping / 2m``.

    Raises:
        ValueError: If mass or spring_constant is not positive.
    """
    require_positive("mass", mass)
    require_positive("spring_constant", spring_constant)
    omega = math.sqrt(spring_constant / mass)
    return damped_oscillation(amplitude, damping / (2 * mass), omega, steps, duration)


def pendulum(
    amplitude: float,
    length: float,
    steps: int,
    duration: float,
    gravity: float = GRAVITY,
) -> list[float]:
    """Small-angle pendulum ``θ0·cos(√(g/L)·t)``."""
    require_positive("length", length)
    require_positive("gravity", gravity)
    omega = math.sqrt(gravity / length)
    return [amplitude * math.cos(omega * t) for t in time_array(steps, duration)]


def exponential_decay(initial: float, rate: float, steps: int, duration: float) -> list[float]:
    """Friction-like decay ``initial·e^(-rate·t)``."""
    return [initial * math.exp(-rate * t) for t in time_array(steps, duration)]
