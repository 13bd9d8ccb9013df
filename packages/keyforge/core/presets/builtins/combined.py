"""Combined presets mixing rotation, translation and scale."""

from __future__ import annotations

import math

from keyforge.core.animation import Track
from keyforge.core.curves import circular, glitch_pulses, random_walk, sin_wave, spiral
from keyforge.core.curves.noise import make_rng
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import (
    PRESET_STEPS,
    SMOOTH_STEPS,
    position,
    positions,
    rotation,
    timeline,
    uniform_scale,
)
from keyforge.core.utils.math import TAU

_CATEGORY = PresetCategory.COMBINED

DRUNK_SEED = 2024
GLITCH_SEED = 404


def _turns(progress: list[float], turns: float) -> list[float]:
    return [p * TAU * turns for p in progress]


@register_preset(
    preset_id="floating",
    name="Floating",
    category=_CATEGORY,
    description="Drifts up and down while slowly turning.",
    icon="✨",
)
def floating(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        position("y", times, [math.sin(p * TAU) * intensity for p in progress]),
        rotation("y", times, _turns(progress, 1)),
    ]


@register_preset(
    preset_id="spin-and-grow",
    name="Spin and grow",
    category=_CATEGORY,
    description="Turns while swelling and shrinking.",
    icon="🌟",
)
def spin_and_grow(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        rotation("y", times, _turns(progress, intensity)),
        uniform_scale(times, [1 + math.sin(p * TAU) * 0.5 * intensity for p in progress]),
    ]


def _circling(intensity: float, duration: float, spin_turns: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    path = circular(intensity * 3, SMOOTH_STEPS)
    return [*positions(times, x=path.x, z=path.z), rotation("y", times, _turns(progress, spin_turns))]


@register_preset(
    preset_id="orbit-motion",
    name="Orbit motion",
    category=_CATEGORY,
    description="Circles around the origin, facing along the orbit.",
    icon="🪐",
)
def orbit_motion(intensity: float, duration: float) -> list[Track]:
    return _circling(intensity, duration, 1)


@register_preset(
    preset_id="satellite",
    name="Satellite",
    category=_CATEGORY,
    description="Circles the origin while spinning twice as fast.",
    icon="🛰",
)
def satellite(intensity: float, duration: float) -> list[Track]:
    return _circling(intensity, duration, 2)


@register_preset(
    preset_id="dance",
    name="Dance",
    category=_CATEGORY,
    description="Spins, bobs and pulses to a beat.",
    icon="💃",
)
def dance(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    return [
        rotation("y", times, _turns(progress, 2)),
        position("y", times, [math.sin(p * 4 * TAU) * intensity * 0.5 for p in progress]),
        uniform_scale(times, [1 + math.sin(p * 8 * TAU) * intensity * 0.2 for p in progress]),
    ]


@register_preset(
    preset_id="drunk",
    name="Drunk",
    category=_CATEGORY,
    description="Staggers around and turns unpredictably.",
    icon="🍺",
)
def drunk(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    rng = make_rng(DRUNK_SEED)
    return [
        position("x", times, random_walk(intensity * 2, PRESET_STEPS, seed=rng)),
        position("z", times, random_walk(intensity * 2, PRESET_STEPS, seed=rng)),
        rotation("y", times, random_walk(math.pi, PRESET_STEPS, seed=rng)),
    ]


@register_preset(
    preset_id="explode",
    name="Explode",
    category=_CATEGORY,
    description="Blows up in size while rising and spinning.",
    icon="💥",
)
def explode(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        uniform_scale(times, [1 + p * intensity * 2 for p in progress]),
        position("y", times, [p * intensity * 3 for p in progress]),
        rotation("y", times, _turns(progress, 2)),
    ]


@register_preset(
    preset_id="implode",
    name="Implode",
    category=_CATEGORY,
    description="Collapses inward while sinking and spinning.",
    icon="🌑",
)
def implode(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        uniform_scale(times, [max(0.1, 1 - p * intensity * 0.9) for p in progress]),
        position("y", times, [-p * intensity * 2 for p in progress]),
        rotation("y", times, _turns(progress, 2)),
    ]


@register_preset(
    preset_id="warp-in",
    name="Warp in",
    category=_CATEGORY,
    description="Spins into existence from nothing.",
    icon="🌀",
)
def warp_in(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        uniform_scale(times, [p * intensity for p in progress]),
        rotation("y", times, _turns(progress, 3)),
    ]


@register_preset(
    preset_id="warp-out",
    name="Warp out",
    category=_CATEGORY,
    description="Spins down to nothing.",
    icon="🌪",
)
def warp_out(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        uniform_scale(times, [max(0.0, 1 - p) * intensity for p in progress]),
        rotation("y", times, _turns(progress, 3)),
    ]


@register_preset(
    preset_id="rolling",
    name="Rolling",
    category=_CATEGORY,
    description="Rolls along X like a ball.",
    icon="⚽",
)
def rolling(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    return [
        position("x", times, [p * intensity * 5 for p in progress]),
        rotation("z", times, [-t for t in _turns(progress, 2 * intensity)]),
    ]


@register_preset(
    preset_id="hovering",
    name="Hovering",
    category=_CATEGORY,
    description="Hovers with a slow bob and a fine flutter.",
    icon="🚁",
)
def hovering(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    heights = [
        math.sin(p * TAU) * intensity * 0.5 + math.sin(p * 10 * TAU) * intensity * 0.05
        for p in progress
    ]
    return [position("y", times, heights), rotation("y", times, _turns(progress, 1))]


@register_preset(
    preset_id="tornado",
    name="Tornado",
    category=_CATEGORY,
    description="Whirls upward along a widening spiral.",
    icon="🌪",
)
def tornado(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    path = spiral(intensity * 2, intensity * 4, 3, SMOOTH_STEPS)
    return [
        *positions(times, x=path.x, y=path.y, z=path.z),
        rotation("y", times, _turns(progress, 4)),
    ]


@register_preset(
    preset_id="shake",
    name="Shake",
    category=_CATEGORY,
    description="Shakes violently in every direction.",
    icon="📳",
)
def shake(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    amplitude = intensity * 0.2
    return [
        *positions(
            times,
            x=sin_wave(amplitude, 15, SMOOTH_STEPS, duration),
            y=sin_wave(amplitude, 15, SMOOTH_STEPS, duration, math.pi / 3),
            z=sin_wave(amplitude, 15, SMOOTH_STEPS, duration, TAU / 3),
        ),
        rotation("y", times, sin_wave(amplitude, 15, SMOOTH_STEPS, duration)),
    ]


@register_preset(
    preset_id="glitch",
    name="Glitch",
    category=_CATEGORY,
    description="Jumps and flickers in size at random moments.",
    icon="⚡",
)
def glitch(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    rng = make_rng(GLITCH_SEED)
    x = glitch_pulses(intensity, PRESET_STEPS, chance=0.1, seed=rng)
    y = glitch_pulses(intensity, PRESET_STEPS, chance=0.1, seed=rng)
    flicker = glitch_pulses(intensity * 0.3, PRESET_STEPS, chance=0.05, seed=rng)
    return [*positions(times, x=x, y=y), uniform_scale(times, [1 + f for f in flicker])]
