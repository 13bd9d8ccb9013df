"""Easing showcase presets: a vertical rise shaped by one easing curve."""

from __future__ import annotations

import math

from keyforge.core.animation import Track
from keyforge.core.easing import EasingType, get_easing
from keyforge.core.easing.functions import ease_in_elastic
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import PRESET_STEPS, position, timeline

_CATEGORY = PresetCategory.EASING
_RISE = 3.0


def _rise(shape: EasingType, intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    fn = get_easing(shape)
    return position("y", times, [intensity * _RISE * fn(p) for p in progress])


def _decaying_bounce(p: float) -> float:
    """Rectified 4-hop cosine whose envelope shrinks linearly to 0."""
    return abs(math.cos(p * math.pi * 4)) * (1 - p)


@register_preset(
    preset_id="bounce-in",
    name="Bounce in",
    category=_CATEGORY,
    description="Drops from the top in hops that die out at the floor.",
    icon="⬇",
)
def bounce_in(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return position("y", times, [intensity * _RISE * _decaying_bounce(p) for p in progress])


@register_preset(
    preset_id="bounce-out",
    name="Bounce out",
    category=_CATEGORY,
    description="Climbs while bouncing, the hops shrinking as it nears the top.",
    icon="⬆",
)
def bounce_out(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return position(
        "y", times, [intensity * _RISE * (p + _decaying_bounce(p)) for p in progress]
    )


@register_preset(
    preset_id="elastic-in",
    name="Elastic in",
    category=_CATEGORY,
    description="Snaps to the top and wobbles ever wider before settling.",
    icon="🪃",
)
def elastic_in(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    # End keys sit on the plain rise; the interior hangs from the top.
    values = [
        intensity * _RISE * (p if p in (0.0, 1.0) else 1 + ease_in_elastic(p)) for p in progress
    ]
    return position("y", times, values)


@register_preset(
    preset_id="elastic-out",
    name="Elastic out",
    category=_CATEGORY,
    description="Overshoots the top and wobbles into place.",
    icon="🎯",
)
def elastic_out(intensity: float, duration: float) -> Track:
    return _rise(EasingType.EASE_OUT_ELASTIC, intensity, duration)


@register_preset(
    preset_id="back-in",
    name="Back in",
    category=_CATEGORY,
    description="Dips below the start before rising.",
    icon="◀",
)
def back_in(intensity: float, duration: float) -> Track:
    return _rise(EasingType.EASE_IN_BACK, intensity, duration)


@register_preset(
    preset_id="back-out",
    name="Back out",
    category=_CATEGORY,
    description="Overshoots the top and settles back.",
    icon="▶",
)
def back_out(intensity: float, duration: float) -> Track:
    return _rise(EasingType.EASE_OUT_BACK, intensity, duration)


@register_preset(
    preset_id="circular",
    name="Circular",
    category=_CATEGORY,
    description="Rises along a quarter circle.",
    icon="⭕",
)
def circular(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return position(
        "y", times, [intensity * _RISE * math.sqrt(1 - (p - 1) ** 2) for p in progress]
    )


@register_preset(
    preset_id="exponential",
    name="Exponential",
    category=_CATEGORY,
    description="Shoots up and eases into the top.",
    icon="📈",
)
def exponential(intensity: float, duration: float) -> Track:
    return _rise(EasingType.EASE_OUT_EXPO, intensity, duration)
