"""Track constructors and timelines used by the builtin preset tables."""

from __future__ import annotations

from collections.abc import Sequence

from keyforge.core.animation import PropertyKind, Track
from keyforge.core.curves.sampling import normalized_positions, scale_times

PRESET_STEPS = 60
SMOOTH_STEPS = 120


def timeline(steps: int, duration: float) -> tuple[list[float], list[float]]:
    """Sample times over ``[0, duration]`` and the matching normalized progress."""
    progress = normalized_positions(steps)
    return scale_times(progress, duration), progress


def rotation(axis: str, times: Sequence[float], values: Sequence[float]) -> Track:
    """Euler rotation of one axis, in radians."""
    return Track.scalar(f".rotation[{axis}]", PropertyKind.ROTATION_EULER, times, values)


def position(axis: str, times: Sequence[float], values: Sequence[float]) -> Track:
    return Track.scalar(f".position[{axis}]", PropertyKind.POSITION, times, values)


def scale(times: Sequence[float], rows: Sequence[Sequence[float]]) -> Track:
    """Scale as one (x, y, z) row per sample."""
    return Track.vector(".scale", PropertyKind.SCALE, times, rows)


def uniform_scale(times: Sequence[float], factors: Sequence[float]) -> Track:
    return scale(times, [(s, s, s) for s in factors])


def positions(
    times: Sequence[float],
    x: Sequence[float] | None = None,
    y: Sequence[float] | None = None,
    z: Sequence[float] | None = None,
) -> list[Track]:
    """Per-axis position tracks for every axis given."""
    return [
        position(axis, times, values)
        for axis, values in (("x", x), ("y", y), ("z", z))
        if values is not None
    ]


def rotations(
    times: Sequence[float],
    x: Sequence[float] | None = None,
    y: Sequence[float] | None = None,
    z: Sequence[float] | None = None,
) -> list[Track]:
    """Per-axis rotation tracks for every axis given."""
    return [
        rotation(axis, times, values)
        for axis, values in (("x", x), ("y", y), ("z", z))
        if values is not None
    ]
