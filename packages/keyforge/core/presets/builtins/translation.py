"""Translation presets."""

from __future__ import annotations

import math

from keyforge.core.animation import Track
from keyforge.core.curves import circular, elliptical, figure_eight, random_walk, sin_wave, spiral
from keyforge.core.curves import zigzag as zigzag_curve
from keyforge.core.curves.noise import make_rng
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import (
    PRESET_STEPS,
    SMOOTH_STEPS,
    position,
    positions,
    timeline,
)
from keyforge.core.utils.math import TAU

_CATEGORY = PresetCategory.TRANSLATION

RANDOM_WALK_SEED = 1701


def _oscillate(axis: str, intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return position(axis, times, [math.sin(p * TAU) * intensity * 2 for p in progress])


@register_preset(
    preset_id="move-up-down",
    name="Move up and down",
    category=_CATEGORY,
    description="Travels back and forth along Y.",
    icon="⬆",
)
def move_up_down(intensity: float, duration: float) -> Track:
    return _oscillate("y", intensity, duration)


@register_preset(
    preset_id="move-left-right",
    name="Move left and right",
    category=_CATEGORY,
    description="Travels back and forth along X.",
    icon="↔",
)
def move_left_right(intensity: float, duration: float) -> Track:
    return _oscillate("x", intensity, duration)


@register_preset(
    preset_id="move-front-back",
    name="Move front and back",
    category=_CATEGORY,
    description="Travels back and forth along Z.",
    icon="⇄",
)
def move_front_back(intensity: float, duration: float) -> Track:
    return _oscillate("z", intensity, duration)


@register_preset(
    preset_id="circular-horizontal",
    name="Horizontal circle",
    category=_CATEGORY,
    description="Traces a circle in the XZ plane.",
    icon="⭕",
)
def circular_horizontal(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    path = circular(intensity * 2, SMOOTH_STEPS)
    return positions(times, x=path.x, z=path.z)


@register_preset(
    preset_id="circular-vertical",
    name="Vertical circle",
    category=_CATEGORY,
    description="Traces a circle in the XY plane.",
    icon="◯",
)
def circular_vertical(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    path = circular(intensity * 2, SMOOTH_STEPS)
    # Same circle, stood upright
    return positions(times, x=path.x, y=path.z)


@register_preset(
    preset_id="figure-8",
    name="Figure eight",
    category=_CATEGORY,
    description="Traces a Lissajous figure eight.",
    icon="∞",
)
def figure_8(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    path = figure_eight(intensity * 2, SMOOTH_STEPS)
    return positions(times, x=path.x, y=path.y)


@register_preset(
    preset_id="wave",
    name="Wave",
    category=_CATEGORY,
    description="Rises and falls like a wave, one cycle per second.",
    icon="〰",
)
def wave(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    return position("y", times, sin_wave(intensity * 2, 1, PRESET_STEPS, duration))


def _spiral(height: float, intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    path = spiral(intensity * 1.5, height, 2, SMOOTH_STEPS)
    return positions(times, x=path.x, y=path.y, z=path.z)


@register_preset(
    preset_id="spiral-up",
    name="Spiral up",
    category=_CATEGORY,
    description="Climbs along a helix.",
    icon="🌀",
)
def spiral_up(intensity: float, duration: float) -> list[Track]:
    return _spiral(intensity * 3, intensity, duration)


@register_preset(
    preset_id="spiral-down",
    name="Spiral down",
    category=_CATEGORY,
    description="Descends along a helix.",
    icon="🌊",
)
def spiral_down(intensity: float, duration: float) -> list[Track]:
    return _spiral(-intensity * 3, intensity, duration)


@register_preset(
    preset_id="zigzag",
    name="Zigzag",
    category=_CATEGORY,
    description="Snaps left and right in a zigzag.",
    icon="⚡",
)
def zigzag(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    return position("x", times, zigzag_curve(intensity * 2, PRESET_STEPS))


@register_preset(
    preset_id="bounce-move",
    name="Bouncing move",
    category=_CATEGORY,
    description="Hops four times.",
    icon="⛹",
)
def bounce_move(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return position("y", times, [abs(math.sin(p * 4 * math.pi)) * intensity * 2 for p in progress])


@register_preset(
    preset_id="random-walk",
    name="Random walk",
    category=_CATEGORY,
    description="Wanders in a bounded random walk.",
    icon="🎲",
)
def random_walk_preset(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    rng = make_rng(RANDOM_WALK_SEED)
    x, y, z = (random_walk(intensity * 2, PRESET_STEPS, seed=rng) for _ in range(3))
    return positions(times, x=x, y=y, z=z)


@register_preset(
    preset_id="orbit",
    name="Orbit",
    category=_CATEGORY,
    description="Follows an elliptical orbit.",
    icon="🛸",
)
def orbit(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    path = elliptical(intensity * 3, intensity * 2, SMOOTH_STEPS)
    return positions(times, x=path.x, z=path.z)


@register_preset(
    preset_id="teleport",
    name="Teleport",
    category=_CATEGORY,
    description="Blinks up, holds, and blinks back down.",
    icon="✨",
)
def teleport(intensity: float, duration: float) -> Track:
    times = [f * duration for f in (0.0, 0.3, 0.31, 0.7, 0.71, 1.0)]
    height = intensity * 3
    return position("y", times, [0.0, 0.0, height, height, 0.0, 0.0])


@register_preset(
    preset_id="vibrate",
    name="Vibrate",
    category=_CATEGORY,
    description="Buzzes rapidly on all axes.",
    icon="📳",
)
def vibrate(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    amplitude = intensity * 0.1
    return positions(
        times,
        x=sin_wave(amplitude, 10, SMOOTH_STEPS, duration),
        y=sin_wave(amplitude, 10, SMOOTH_STEPS, duration, math.pi / 2),
        z=sin_wave(amplitude, 10, SMOOTH_STEPS, duration, math.pi),
    )
