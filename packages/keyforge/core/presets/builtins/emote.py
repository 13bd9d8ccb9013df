"""Emotive gesture presets."""

from __future__ import annotations

import math

from keyforge.core.animation import Track
from keyforge.core.curves import jitter
from keyforge.core.curves.noise import make_rng
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import (
    PRESET_STEPS,
    SMOOTH_STEPS,
    position,
    rotation,
    rotations,
    timeline,
    uniform_scale,
)
from keyforge.core.utils.math import TAU

_CATEGORY = PresetCategory.EMOTE

SHIVER_SEED = 7


@register_preset(
    preset_id="jump",
    name="Jump",
    category=_CATEGORY,
    description="Two quick hops.",
    icon="🦘",
)
def jump(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return position("y", times, [abs(math.sin(p * TAU)) * intensity * 2 for p in progress])


@register_preset(
    preset_id="nod",
    name="Nod",
    category=_CATEGORY,
    description="Nods twice in agreement.",
    icon="🙆",
)
def nod(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotation("x", times, [math.sin(p * 2 * TAU) * (math.pi / 8) * intensity for p in progress])


@register_preset(
    preset_id="shake-head",
    name="Shake head",
    category=_CATEGORY,
    description="Shakes the head to say no.",
    icon="🙅",
)
def shake_head(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotation("y", times, [math.sin(p * 2 * TAU) * (math.pi / 6) * intensity for p in progress])


def _spike(p: float) -> float:
    """Fast rise over the first fifth, slow fall afterwards."""
    if p < 0.2:
        return p / 0.2
    return 1 - (p - 0.2) / 0.8


@register_preset(
    preset_id="surprise",
    name="Surprise",
    category=_CATEGORY,
    description="Jolts upward and swells, then settles.",
    icon="❗",
)
def surprise(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        position("y", times, [_spike(p) * intensity for p in progress]),
        uniform_scale(times, [1 + _spike(p) * 0.2 * intensity for p in progress]),
    ]


@register_preset(
    preset_id="happy",
    name="Happy",
    category=_CATEGORY,
    description="Bounces with a cheerful sway.",
    icon="😆",
)
def happy(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        position("y", times, [abs(math.sin(p * 3 * TAU)) * 0.5 * intensity for p in progress]),
        rotation("z", times, [math.sin(p * 2 * TAU) * 0.2 * intensity for p in progress]),
    ]


@register_preset(
    preset_id="dizzy",
    name="Dizzy",
    category=_CATEGORY,
    description="Spins with a woozy wobble.",
    icon="💫",
)
def dizzy(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotations(
        times,
        y=[p * 2 * TAU for p in progress],
        x=[math.sin(p * 3 * TAU) * 0.3 * intensity for p in progress],
        z=[math.cos(p * 2.5 * TAU) * 0.3 * intensity for p in progress],
    )


@register_preset(
    preset_id="shiver",
    name="Shiver",
    category=_CATEGORY,
    description="Trembles as if cold.",
    icon="🥶",
)
def shiver(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    rng = make_rng(SHIVER_SEED)
    return [
        position("x", times, jitter(0.2 * intensity, SMOOTH_STEPS, seed=rng)),
        rotation("z", times, jitter(0.1 * intensity, SMOOTH_STEPS, seed=rng)),
    ]


@register_preset(
    preset_id="bow",
    name="Bow",
    category=_CATEGORY,
    description="Bends forward, holds, and straightens up.",
    icon="🙇",
)
def bow(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    depth = (math.pi / 4) * intensity
    values = []
    for p in progress:
        if p < 0.3:
            values.append(p / 0.3 * depth)
        elif p < 0.7:
            values.append(depth)
        else:
            values.append((1 - (p - 0.7) / 0.3) * depth)
    return rotation("x", times, values)
