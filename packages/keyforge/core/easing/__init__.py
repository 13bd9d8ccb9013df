"""Easing library."""

from keyforge.core.easing.functions import (
    EASINGS,
    EasingFn,
    UnknownEasingError,
    get_easing,
    is_identity,
    list_easings,
    resolve_easing_type,
)
from keyforge.core.easing.types import EasingType

__all__ = [
    "EASINGS",
    "EasingFn",
    "EasingType",
    "UnknownEasingError",
    "get_easing",
    "is_identity",
    "list_easings",
    "resolve_easing_type",
]
