"""Parametric motion-curve samplers."""

from keyforge.core.curves.loci import (
    PlanarPath,
    SpatialPath,
    VerticalPath,
    circular,
    elliptical,
    figure_eight,
    spiral,
)
from keyforge.core.curves.noise import (
    glitch_pulses,
    jitter,
    make_rng,
    organic_noise,
    random_walk,
)
from keyforge.core.curves.phase import (
    Phase,
    PhaseEasing,
    evaluate_phases,
    multi_phase,
    phase,
)
from keyforge.core.curves.sampling import normalized_positions, time_array
from keyforge.core.curves.waves import (
    cos_wave,
    exponential_curve,
    linear,
    parabola,
    pulse,
    sawtooth,
    sin_wave,
    zigzag,
)

__all__ = [
    "Phase",
    "PhaseEasing",
    "PlanarPath",
    "SpatialPath",
    "VerticalPath",
    "circular",
    "cos_wave",
    "elliptical",
    "evaluate_phases",
    "exponential_curve",
    "figure_eight",
    "glitch_pulses",
    "jitter",
    "linear",
    "make_rng",
    "multi_phase",
    "normalized_positions",
    "organic_noise",
    "parabola",
    "phase",
    "pulse",
    "random_walk",
    "sawtooth",
    "sin_wave",
    "spiral",
    "time_array",
    "zigzag",
]
