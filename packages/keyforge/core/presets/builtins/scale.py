"""Scale presets."""

from __future__ import annotations

import math

from keyforge.core.animation import Track
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import PRESET_STEPS, scale, timeline, uniform_scale
from keyforge.core.utils.math import TAU

_CATEGORY = PresetCategory.SCALE


def _swell(depth: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return uniform_scale(times, [1 + math.sin(p * TAU) * depth for p in progress])


@register_preset(
    preset_id="pulse",
    name="Pulse",
    category=_CATEGORY,
    description="Grows and shrinks once, rhythmically.",
    icon="💓",
)
def pulse(intensity: float, duration: float) -> Track:
    return _swell(0.5 * intensity, duration)


@register_preset(
    preset_id="breathe",
    name="Breathe",
    category=_CATEGORY,
    description="Swells gently as if breathing.",
    icon="🫁",
)
def breathe(intensity: float, duration: float) -> Track:
    return _swell(0.2 * intensity, duration)


@register_preset(
    preset_id="heartbeat",
    name="Heartbeat",
    category=_CATEGORY,
    description="Double thump followed by a rest.",
    icon="❤",
)
def heartbeat(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    factors = [
        1 + math.sin((p % 1) * math.pi * 10) * 0.3 * intensity if (p % 1) < 0.3 else 1.0
        for p in progress
    ]
    return uniform_scale(times, factors)


@register_preset(
    preset_id="expand",
    name="Expand",
    category=_CATEGORY,
    description="Grows steadily larger.",
    icon="⬜",
)
def expand(intensity: float, duration: float) -> Track:
    return uniform_scale([0.0, duration], [1.0, 1 + intensity])


@register_preset(
    preset_id="contract",
    name="Contract",
    category=_CATEGORY,
    description="Shrinks steadily, never below a tenth.",
    icon="▪",
)
def contract(intensity: float, duration: float) -> Track:
    return uniform_scale([0.0, duration], [1.0, max(0.1, 1 - intensity * 0.9)])


@register_preset(
    preset_id="pop",
    name="Pop",
    category=_CATEGORY,
    description="Bursts large, settles, and returns.",
    icon="💥",
)
def pop(intensity: float, duration: float) -> Track:
    times = [0.0, duration * 0.3, duration * 0.5, duration]
    return uniform_scale(times, [1.0, 1 + intensity * 1.5, 1 + intensity * 0.8, 1.0])


@register_preset(
    preset_id="squeeze-horizontal",
    name="Horizontal squeeze",
    category=_CATEGORY,
    description="Stretches and squashes along X.",
    icon="↔",
)
def squeeze_horizontal(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return scale(times, [(1 + math.sin(p * TAU) * 0.5 * intensity, 1.0, 1.0) for p in progress])


@register_preset(
    preset_id="squeeze-vertical",
    name="Vertical squeeze",
    category=_CATEGORY,
    description="Stretches and squashes along Y.",
    icon="↕",
)
def squeeze_vertical(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return scale(times, [(1.0, 1 + math.sin(p * TAU) * 0.5 * intensity, 1.0) for p in progress])


@register_preset(
    preset_id="aspect-deform",
    name="Aspect deform",
    category=_CATEGORY,
    description="Trades width for height and back.",
    icon="⬛",
)
def aspect_deform(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    rows = [
        (1 + math.sin(p * TAU) * 0.5 * intensity, 1 + math.cos(p * TAU) * 0.5 * intensity, 1.0)
        for p in progress
    ]
    return scale(times, rows)


@register_preset(
    preset_id="bounce-scale",
    name="Bouncing scale",
    category=_CATEGORY,
    description="Springy size bounces in two bursts.",
    icon="🏀",
)
def bounce_scale(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    factors = []
    for p in progress:
        local = p % 0.5
        if local < 0.25:
            factors.append(1 + abs(math.sin(local * math.pi * 8)) * 0.5 * intensity)
        else:
            factors.append(1.0)
    return uniform_scale(times, factors)
