"""Multi-component loci traced over normalized progress."""

from __future__ import annotations

import math
from typing import NamedTuple

from keyforge.core.curves.sampling import normalized_positions
from keyforge.core.utils.math import TAU


class PlanarPath(NamedTuple):
    """Path in the horizontal XZ plane."""

    x: list[float]
    z: list[float]


class VerticalPath(NamedTuple):
    """Path in the vertical XY plane."""

    x: list[float]
    y: list[float]


class SpatialPath(NamedTuple):
    x: list[float]
    y: list[float]
    z: list[float]


def circular(radius: float, steps: int) -> PlanarPath:
    """One revolution of radius ``radius`` starting at (radius, 0)."""
    angles = [p * TAU for p in normalized_positions(steps)]
    return PlanarPath(
        x=[math.cos(a) * radius for a in angles],
        z=[math.sin(a) * radius for a in angles],
    )


def elliptical(radius_x: float, radius_z: float, steps: int) -> PlanarPath:
    """One revolution of an axis-aligned ellipse."""
    angles = [p * TAU for p in normalized_positions(steps)]
    return PlanarPath(
        x=[math.cos(a) * radius_x for a in angles],
        z=[math.sin(a) * radius_z for a in angles],
    )


def spiral(radius: float, height: float, rotations: float, steps: int) -> SpatialPath:
    """Helix climbing from 0 to ``height`` over ``rotations`` revolutions.

    Args:
        radius: Horizontal radius
        height: Total climb (negative descends)
        rotations: Number of revolutions
        steps: Number of samples (>= 2)
    """
    xs: list[float] = []
    ys: list[float] = []
    zs: list[float] = []
    for p in normalized_positions(steps):
        angle = p * TAU * rotations
        xs.append(math.cos(angle) * radius)
        ys.append(p * height)
        zs.append(math.sin(angle) * radius)
    return SpatialPath(x=xs, y=ys, z=zs)


def figure_eight(amplitude: float, steps: int) -> VerticalPath:
    """Lissajous figure-eight ``(sin t, sin 2t)`` for t in [0, 2π]."""
    angles = [p * TAU for p in normalized_positions(steps)]
    return VerticalPath(
        x=[math.sin(a) * amplitude for a in angles],
        y=[math.sin(2 * a) * amplitude for a in angles],
    )
