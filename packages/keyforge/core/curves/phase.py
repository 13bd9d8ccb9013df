"""Multi-phase piecewise interpolation.

A motion is split into consecutive phases, each moving from a start value to
an end value over a share of the total progress with its own easing.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
import logging

from pydantic import BaseModel, ConfigDict, Field

from keyforge.core.curves.sampling import normalized_positions
from keyforge.core.easing import EasingType, get_easing
from keyforge.core.utils.math import lerp

logger = logging.getLogger(__name__)


class PhaseEasing(str, Enum):
    """Quadratic easing shapes available inside a phase."""

    LINEAR = "linear"
    EASE_IN = "ease-in"
    EASE_OUT = "ease-out"
    EASE_IN_OUT = "ease-in-out"

    @property
    def easing_type(self) -> EasingType:
        return _PHASE_EASINGS[self]


_PHASE_EASINGS: dict[PhaseEasing, EasingType] = {
    PhaseEasing.LINEAR: EasingType.LINEAR,
    PhaseEasing.EASE_IN: EasingType.EASE_IN_QUAD,
    PhaseEasing.EASE_OUT: EasingType.EASE_OUT_QUAD,
    PhaseEasing.EASE_IN_OUT: EasingType.EASE_IN_OUT_QUAD,
}


class Phase(BaseModel):
    """One segment of a multi-phase motion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    start_value: float
    end_value: float
    share: float = Field(ge=0.0, description="Relative share of total progress")
    easing: PhaseEasing = PhaseEasing.LINEAR


def phase(
    start_value: float,
    end_value: float,
    share: float,
    easing: PhaseEasing | str = PhaseEasing.LINEAR,
) -> Phase:
    """Shorthand constructor used by preset tables."""
    return Phase(
        start_value=start_value, end_value=end_value, share=share, easing=PhaseEasing(easing)
    )


def _boundaries(phases: Sequence[Phase]) -> list[tuple[float, float]]:
    if not phases:
        raise ValueError("phases must not be empty")
    total = sum(p.share for p in phases)
    if total <= 0:
        raise ValueError("phase shares must sum to > 0")

    bounds: list[tuple[float, float]] = []
    cursor = 0.0
    for p in phases:
        end = cursor + p.share / total
        bounds.append((cursor, end))
        cursor = end
    return bounds


def _evaluate(phases: Sequence[Phase], bounds: list[tuple[float, float]], t: float) -> float:
    # Half-open [start, end): a boundary belongs to the later phase.
    for p, (start, end) in zip(phases, bounds, strict=True):
        if start <= t < end:
            local = (t - start) / (end - start)
            eased = get_easing(p.easing.easing_type)(local)
            return lerp(p.start_value, p.end_value, eased)
    if t < 0:
        return phases[0].start_value
    return phases[-1].end_value


def evaluate_phases(phases: Sequence[Phase], t: float) -> float:
    """Value of a multi-phase motion at normalized time ``t``.

    Shares are re-normalized to sum to 1. A ``t`` exactly on a boundary
    belongs to the later phase; ``t`` at or past the end clamps to the last
    phase's end value and ``t`` before 0 to the first start value.

    Raises:
        ValueError: If phases is empty or the shares sum to zero.
    """
    return _evaluate(phases, _boundaries(phases), t)


def multi_phase(phases: Sequence[Phase], total_steps: int) -> list[float]:
    """Sample a multi-phase motion at ``total_steps`` evenly spaced positions.

    Args:
        phases: Ordered phases
        total_steps: Number of samples (>= 2)

    Returns:
        List of ``total_steps`` values.

    Example:
        >>> multi_phase([phase(0, 1, 1), phase(1, 1, 1)], 5)
        [0.0, 0.5, 1.0, 1.0, 1.0]
    """
    positions = normalized_positions(total_steps)
    bounds = _boundaries(phases)
    return [_evaluate(phases, bounds, t) for t in positions]
