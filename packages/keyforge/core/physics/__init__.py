"""Physically motivated trajectories."""

from keyforge.core.physics.chaos import LorenzPath, lorenz_attractor, turbulence
from keyforge.core.physics.constants import GRAVITY, MAX_BOUNCES, MIN_BOUNCE_HEIGHT
from keyforge.core.physics.oscillation import (
    damped_oscillation,
    damped_value,
    exponential_decay,
    pendulum,
    spring_motion,
)
from keyforge.core.physics.trajectories import (
    Bounce,
    Orbit,
    Projectile,
    apply_collision,
    bounce_schedule,
    bouncing_trajectory,
    elliptical_orbit,
    free_fall,
    free_fall_curve,
    projectile_motion,
)

__all__ = [
    "GRAVITY",
    "MAX_BOUNCES",
    "MIN_BOUNCE_HEIGHT",
    "Bounce",
    "LorenzPath",
    "Orbit",
    "Projectile",
    "apply_collision",
    "bounce_schedule",
    "bouncing_trajectory",
    "damped_oscillation",
    "damped_value",
    "elliptical_orbit",
    "exponential_decay",
    "free_fall",
    "free_fall_curve",
    "lorenz_attractor",
    "pendulum",
    "projectile_motion",
    "spring_motion",
    "turbulence",
]
