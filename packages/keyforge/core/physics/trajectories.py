"""Closed-form trajectories under constant gravity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
from typing import NamedTuple

from keyforge.core.curves.sampling import normalized_positions, time_array
from keyforge.core.physics._validation import (
    require_non_negative,
    require_positive,
    require_unit_interval,
)
from keyforge.core.physics.constants import GRAVITY, MAX_BOUNCES, MIN_BOUNCE_HEIGHT
from keyforge.core.utils.math import TAU


class Projectile(NamedTuple):
    x: list[float]
    y: list[float]


class Orbit(NamedTuple):
    """Orbit samples plus the normalized time of each sample."""

    x: list[float]
    z: list[float]
    times: list[float]


@dataclass(frozen=True)
class Bounce:
    """One airborne arc: leaves the ground at ``start`` and peaks at ``height``."""

    start: float
    duration: float
    height: float

    @property
    def end(self) -> float:
        return self.start + self.duration

    def height_at(self, t: float, gravity: float = GRAVITY) -> float:
        """Height at absolute time ``t`` inside this arc."""
        local = t - self.start - self.duration / 2
        return max(0.0, self.height - 0.5 * gravity * local * local)


def free_fall(y0: float, t: float, gravity: float = GRAVITY) -> float:
    """Height ``y0 - ½·g·t²`` after falling for ``t`` seconds (not floored)."""
    return y0 - 0.5 * gravity * t * t


def free_fall_curve(
    y0: float, steps: int, duration: float, gravity: float = GRAVITY, floor: float = 0.0
) -> list[float]:
    """Free-fall heights sampled over ``[0, duration]``, floored at ``floor``."""
    require_positive("gravity", gravity)
    return [max(floor, free_fall(y0, t, gravity)) for t in time_array(steps, duration)]


def bounce_schedule(
    initial_height: float,
    restitution: float,
    gravity: float = GRAVITY,
    max_bounces: int = MAX_BOUNCES,
    min_height: float = MIN_BOUNCE_HEIGHT,
) -> list[Bounce]:
    """Sequence of airborne arcs for a ball losing energy on each impact.

    The first arc reaches ``initial_height``; each later arc reaches the
    previous height times ``restitution²``. The schedule stops after
    ``max_bounces`` arcs or once the next height would fall below
    ``min_height``.

    Args:
        initial_height: Peak of the first arc (>= 0)
        restitution: Coefficient of restitution in [0, 1]
        gravity: Gravitational acceleration (> 0)
        max_bounces: Cap on the number of arcs
        min_height: Heights below this end the schedule

    Returns:
        Arcs in time order, each starting where the previous one ended.

    Raises:
        ValueError: On negative height, restitution outside [0, 1] or
            non-positive gravity.
    """
    require_non_negative("initial_height", initial_height)
    require_unit_interval("restitution", restitution)
    require_positive("gravity", gravity)

    arcs: list[Bounce] = []
    start = 0.0
    height = initial_height
    while len(arcs) < max_bounces and height > min_height:
        duration = 2 * math.sqrt(2 * height / gravity)
        arcs.append(Bounce(start=start, duration=duration, height=height))
        start += duration
        height *= restitution * restitution
    return arcs


def bouncing_trajectory(
    initial_height: float,
    restitution: float,
    steps: int,
    duration: float,
    gravity: float = GRAVITY,
    max_bounces: int = MAX_BOUNCES,
) -> list[float]:
    """Heights of a bouncing ball sampled over ``[0, duration]``.

    Each sample is located by walking the bounce schedule forward from
    ``t = 0``. Once the schedule is exhausted the ball rests at 0.

    Example:
        >>> bouncing_trajectory(0.0, 0.5, 3, 1.0)
        [0.0, 0.0, 0.0]
    """
    arcs = bounce_schedule(initial_height, restitution, gravity, max_bounces)
    values: list[float] = []
    for t in time_array(steps, duration):
        current = next((arc for arc in arcs if t <= arc.end), None)
        values.append(current.height_at(t, gravity) if current is not None else 0.0)
    return values


def projectile_motion(
    velocity: float,
    angle: float,
    steps: int,
    duration: float,
    gravity: float = GRAVITY,
) -> Projectile:
    """Ballistic arc launched at ``velocity`` and ``angle`` (radians).

    Horizontal distance is ``vx·t``; height is ``vy·t - ½·g·t²`` floored at 0.
    """
    require_positive("gravity", gravity)
    vx = velocity * math.cos(angle)
    vy = velocity * math.sin(angle)
    times = time_array(steps, duration)
    return Projectile(
        x=[vx * t for t in times],
        y=[max(0.0, vy * t - 0.5 * gravity * t * t) for t in times],
    )


def elliptical_orbit(semi_major_axis: float, eccentricity: float, steps: int) -> Orbit:
    """One revolution around an ellipse with the given eccentricity.

    The semi-minor axis is ``a·√(1 - e²)``. Times are normalized to [0, 1]
    so callers scale them to their own duration.

    Raises:
        ValueError: If eccentricity is outside [0, 1).
    """
    if not 0.0 <= eccentricity < 1.0:
        raise ValueError(f"eccentricity must be in [0, 1), got {eccentricity}")
    semi_minor_axis = semi_major_axis * math.sqrt(1 - eccentricity * eccentricity)

    positions = normalized_positions(steps)
    return Orbit(
        x=[semi_major_axis * math.cos(p * TAU) for p in positions],
        z=[semi_minor_axis * math.sin(p * TAU) for p in positions],
        times=positions,
    )


def apply_collision(
    positions: Sequence[float], threshold: float, restitution: float
) -> list[float]:
    """Reflect a path off a barrier at ``threshold``.

    Samples before the first one reaching ``threshold`` are unchanged. From
    that sample on, each value becomes
    ``threshold - (value - threshold)·restitution``.
    """
    require_unit_interval("restitution", restitution)
    result: list[float] = []
    collided = False
    for value in positions:
        if not collided and value >= threshold:
            collided = True
        if collided:
            result.append(threshold - (value - threshold) * restitution)
        else:
            result.append(float(value))
    return result
