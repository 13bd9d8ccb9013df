"""Easing functions mapping progress in [0, 1] onto [0, 1].

Polynomial and exponential families are backed by ``easing_functions``;
bounce, elastic and back use their canonical closed forms. Every function
returns exactly 0.0 at ``p <= 0`` and exactly 1.0 at ``p >= 1``.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import math
import re
from typing import Any

from easing_functions import (
    CubicEaseIn,
    CubicEaseInOut,
    CubicEaseOut,
    ExponentialEaseIn,
    ExponentialEaseInOut,
    ExponentialEaseOut,
    QuadEaseIn,
    QuadEaseInOut,
    QuadEaseOut,
    QuarticEaseIn,
    QuarticEaseInOut,
    QuarticEaseOut,
)

from keyforge.core.easing.types import EasingType

logger = logging.getLogger(__name__)

EasingFn = Callable[[float], float]

BACK_C1 = 1.70158
BACK_C2 = BACK_C1 * 1.525
BACK_C3 = BACK_C1 + 1
ELASTIC_C4 = (2 * math.pi) / 3
ELASTIC_C5 = (2 * math.pi) / 4.5
BOUNCE_N1 = 7.5625
BOUNCE_D1 = 2.75

_EASING_DEFAULTS: dict[str, float] = {
    "start": 0.0,
    "end": 1.0,
    "duration": 1.0,
}


class UnknownEasingError(KeyError):
    """Raised when an easing identifier is not registered."""


def _make_easing(easing_cls: type[Any], **kwargs: Any) -> EasingFn:
    obj = easing_cls(**{**_EASING_DEFAULTS, **kwargs})
    return lambda p: float(obj.ease(p))


def _pinned(fn: EasingFn) -> EasingFn:
    """Wrap ``fn`` so the boundaries are exact regardless of float error."""

    def eased(p: float) -> float:
        if p <= 0.0:
            return 0.0
        if p >= 1.0:
            return 1.0
        return fn(p)

    eased.__name__ = getattr(fn, "__name__", "eased")
    return eased


def linear(p: float) -> float:
    return p


def _bounce_out_value(p: float) -> float:
    if p < 1 / BOUNCE_D1:
        return BOUNCE_N1 * p * p
    if p < 2 / BOUNCE_D1:
        p -= 1.5 / BOUNCE_D1
        return BOUNCE_N1 * p * p + 0.75
    if p < 2.5 / BOUNCE_D1:
        p -= 2.25 / BOUNCE_D1
        return BOUNCE_N1 * p * p + 0.9375
    p -= 2.625 / BOUNCE_D1
    return BOUNCE_N1 * p * p + 0.984375


def ease_out_bounce(p: float) -> float:
    return _bounce_out_value(p)


def ease_in_bounce(p: float) -> float:
    return 1 - _bounce_out_value(1 - p)


def ease_in_out_bounce(p: float) -> float:
    if p < 0.5:
        return (1 - _bounce_out_value(1 - 2 * p)) / 2
    return (1 + _bounce_out_value(2 * p - 1)) / 2


def ease_in_elastic(p: float) -> float:
    if p == 0 or p == 1:
        return p
    return -math.pow(2, 10 * p - 10) * math.sin((p * 10 - 10.75) * ELASTIC_C4)


def ease_out_elastic(p: float) -> float:
    if p == 0 or p == 1:
        return p
    return math.pow(2, -10 * p) * math.sin((p * 10 - 0.75) * ELASTIC_C4) + 1


def ease_in_out_elastic(p: float) -> float:
    if p == 0 or p == 1:
        return p
    if p < 0.5:
        return -(math.pow(2, 20 * p - 10) * math.sin((20 * p - 11.125) * ELASTIC_C5)) / 2
    return (math.pow(2, -20 * p + 10) * math.sin((20 * p - 11.125) * ELASTIC_C5)) / 2 + 1


def ease_in_back(p: float) -> float:
    return BACK_C3 * p * p * p - BACK_C1 * p * p


def ease_out_back(p: float) -> float:
    q = p - 1
    return 1 + BACK_C3 * q * q * q + BACK_C1 * q * q


def ease_in_out_back(p: float) -> float:
    if p < 0.5:
        return (math.pow(2 * p, 2) * ((BACK_C2 + 1) * 2 * p - BACK_C2)) / 2
    return (math.pow(2 * p - 2, 2) * ((BACK_C2 + 1) * (p * 2 - 2) + BACK_C2) + 2) / 2


_EASINGS: dict[EasingType, EasingFn] = {
    EasingType.LINEAR: linear,
    EasingType.EASE_IN_QUAD: _make_easing(QuadEaseIn),
    EasingType.EASE_OUT_QUAD: _make_easing(QuadEaseOut),
    EasingType.EASE_IN_OUT_QUAD: _make_easing(QuadEaseInOut),
    EasingType.EASE_IN_CUBIC: _make_easing(CubicEaseIn),
    EasingType.EASE_OUT_CUBIC: _make_easing(CubicEaseOut),
    EasingType.EASE_IN_OUT_CUBIC: _make_easing(CubicEaseInOut),
    EasingType.EASE_IN_QUART: _make_easing(QuarticEaseIn),
    EasingType.EASE_OUT_QUART: _make_easing(QuarticEaseOut),
    EasingType.EASE_IN_OUT_QUART: _make_easing(QuarticEaseInOut),
    EasingType.EASE_IN_EXPO: _make_easing(ExponentialEaseIn),
    EasingType.EASE_OUT_EXPO: _make_easing(ExponentialEaseOut),
    EasingType.EASE_IN_OUT_EXPO: _make_easing(ExponentialEaseInOut),
    EasingType.EASE_IN_BOUNCE: ease_in_bounce,
    EasingType.EASE_OUT_BOUNCE: ease_out_bounce,
    EasingType.EASE_IN_OUT_BOUNCE: ease_in_out_bounce,
    EasingType.EASE_IN_ELASTIC: ease_in_elastic,
    EasingType.EASE_OUT_ELASTIC: ease_out_elastic,
    EasingType.EASE_IN_OUT_ELASTIC: ease_in_out_elastic,
    EasingType.EASE_IN_BACK: ease_in_back,
    EasingType.EASE_OUT_BACK: ease_out_back,
    EasingType.EASE_IN_OUT_BACK: ease_in_out_back,
}

EASINGS: dict[EasingType, EasingFn] = {name: _pinned(fn) for name, fn in _EASINGS.items()}


def _norm_key(s: str) -> str:
    return re.sub(r"[^a-z0-9]", "", s.strip().lower())


_BY_KEY: dict[str, EasingType] = {_norm_key(e.value): e for e in EasingType}


def resolve_easing_type(name: EasingType | str) -> EasingType:
    """Resolve an identifier such as ``"easeInQuad"`` or ``"ease_in_quad"``.

    Raises:
        UnknownEasingError: If the identifier names no easing function
    """
    if isinstance(name, EasingType):
        return name
    try:
        return _BY_KEY[_norm_key(name)]
    except KeyError:
        raise UnknownEasingError(f"Unknown easing: {name!r}") from None


def get_easing(name: EasingType | str) -> EasingFn:
    """Return the easing function for ``name``.

    Args:
        name: EasingType member or identifier in any case/separator style

    Returns:
        Function mapping progress in [0, 1] to eased progress

    Raises:
        UnknownEasingError: If the identifier names no easing function

    Example:
        >>> get_easing("easeInQuad")(0.5)
        0.25
    """
    return EASINGS[resolve_easing_type(name)]


def is_identity(name: EasingType | str) -> bool:
    return resolve_easing_type(name) is EasingType.LINEAR


def list_easings() -> list[EasingType]:
    return list(EasingType)
