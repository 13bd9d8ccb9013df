"""Turbulence and chaotic systems."""

from __future__ import annotations

import math
from typing import NamedTuple

from keyforge.core.curves.sampling import check_steps, normalized_positions
from keyforge.core.physics._validation import require_positive

TURBULENCE_WEIGHTS: tuple[float, float, float] = (0.5, 0.3, 0.2)


class LorenzPath(NamedTuple):
    x: list[float]
    y: list[float]
    z: list[float]


def turbulence(amplitude: float, frequency: float, steps: int, seed: float = 0.0) -> list[float]:
    """Three-octave sine turbulence with weights .5, .3 and .2.

    Octaves run at ``2π``, ``4π`` and ``8π`` times ``p·frequency`` with phase
    offsets ``seed``, ``1.3·seed`` and ``1.7·seed``.
    """
    w1, w2, w3 = TURBULENCE_WEIGHTS
    values: list[float] = []
    for p in normalized_positions(steps):
        noise = (
            math.sin(p * frequency * math.pi * 2 + seed) * w1
            + math.sin(p * frequency * math.pi * 4 + seed * 1.3) * w2
            + math.sin(p * frequency * math.pi * 8 + seed * 1.7) * w3
        )
        values.append(noise * amplitude)
    return values


def lorenz_attractor(
    steps: int,
    dt: float,
    sigma: float = 10.0,
    rho: float = 28.0,
    beta: float = 8.0 / 3.0,
    start: tuple[float, float, float] = (1.0, 1.0, 1.0),
) -> LorenzPath:
    """Forward-Euler integration of the Lorenz system.

    Returns the state before each of ``steps`` integration steps, so the
    first sample is ``start``.
    """
    check_steps(steps)
    require_positive("dt", dt)
    x, y, z = start
    xs: list[float] = []
    ys: list[float] = []
    zs: list[float] = []
    for _ in range(steps):
        xs.append(x)
        ys.append(y)
        zs.append(z)
        dx = sigma * (y - x)
        dy = x * (rho - z) - y
        dz = x * y - beta * z
        x, y, z = x + dx * dt, y + dy * dt, z + dz * dt
    return LorenzPath(x=xs, y=ys, z=zs)
