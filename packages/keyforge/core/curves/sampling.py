"""Sampling grids shared by the curve and physics libraries.

Curves are sampled at ``steps`` evenly spaced normalized positions
``i / (steps - 1)`` so the first and last samples land exactly on 0 and 1.
"""

from __future__ import annotations


def check_steps(steps: int) -> None:
    """Raise ValueError unless ``steps >= 2``."""
    if steps < 2:
        raise ValueError(f"steps must be >= 2, got {steps}")


def check_duration(duration: float) -> None:
    """Raise ValueError unless ``duration > 0``."""
    if not duration > 0:
        raise ValueError(f"duration must be > 0, got {duration}")


def normalized_positions(steps: int) -> list[float]:
    """Generate ``steps`` evenly spaced positions in [0, 1], endpoints included.

    Args:
        steps: Number of samples. Must be >= 2.

    Returns:
        List of positions ``[0.0, 1/(steps-1), ..., 1.0]``.

    Raises:
        ValueError: If steps < 2.

    Example:
        >>> normalized_positions(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    check_steps(steps)
    last = steps - 1
    return [i / last for i in range(steps)]


def time_array(steps: int, duration: float) -> list[float]:
    """Sample times from 0 to ``duration`` inclusive.

    Raises:
        ValueError: If steps < 2 or duration <= 0.

    Example:
        >>> time_array(3, 2.0)
        [0.0, 1.0, 2.0]
    """
    check_duration(duration)
    return [p * duration for p in normalized_positions(steps)]


def scale_times(positions: list[float], duration: float) -> list[float]:
    """Scale normalized positions to absolute times."""
    check_duration(duration)
    return [p * duration for p in positions]
