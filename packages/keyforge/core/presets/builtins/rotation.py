"""Rotation presets."""

from __future__ import annotations

import math

from keyforge.core.animation import Track
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import PRESET_STEPS, position, rotation, rotations, timeline
from keyforge.core.utils.math import TAU

_CATEGORY = PresetCategory.ROTATION


def _full_turn(axis: str, turns: float, duration: float) -> Track:
    return rotation(axis, [0.0, duration], [0.0, TAU * turns])


@register_preset(
    preset_id="rotation-y",
    name="Y-axis rotation",
    category=_CATEGORY,
    description="Spins a full turn around the Y axis.",
    icon="🔄",
)
def rotation_y(intensity: float, duration: float) -> Track:
    return _full_turn("y", intensity, duration)


@register_preset(
    preset_id="rotation-x",
    name="X-axis rotation",
    category=_CATEGORY,
    description="Spins a full turn around the X axis.",
    icon="↻",
)
def rotation_x(intensity: float, duration: float) -> Track:
    return _full_turn("x", intensity, duration)


@register_preset(
    preset_id="rotation-z",
    name="Z-axis rotation",
    category=_CATEGORY,
    description="Spins a full turn around the Z axis.",
    icon="⟳",
)
def rotation_z(intensity: float, duration: float) -> Track:
    return _full_turn("z", intensity, duration)


@register_preset(
    preset_id="spiral-rotation",
    name="Spiral rotation",
    category=_CATEGORY,
    description="Turns around Y while bobbing up and down.",
    icon="🌀",
)
def spiral_rotation(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        rotation("y", times, [p * TAU * intensity for p in progress]),
        position("y", times, [math.sin(p * TAU) * intensity for p in progress]),
    ]


def _swing(axis: str, intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotation(axis, times, [math.sin(p * TAU) * (math.pi / 4) * intensity for p in progress])


@register_preset(
    preset_id="pendulum-x",
    name="Pendulum swing (X)",
    category=_CATEGORY,
    description="Rocks back and forth around the X axis.",
    icon="⏰",
)
def pendulum_x(intensity: float, duration: float) -> Track:
    return _swing("x", intensity, duration)


@register_preset(
    preset_id="pendulum-z",
    name="Pendulum swing (Z)",
    category=_CATEGORY,
    description="Rocks side to side around the Z axis.",
    icon="⏱",
)
def pendulum_z(intensity: float, duration: float) -> Track:
    return _swing("z", intensity, duration)


@register_preset(
    preset_id="double-rotation",
    name="Double rotation",
    category=_CATEGORY,
    description="Turns around X and Y at the same time.",
    icon="🔃",
)
def double_rotation(intensity: float, duration: float) -> list[Track]:
    return [_full_turn("x", intensity, duration), _full_turn("y", intensity, duration)]


@register_preset(
    preset_id="triple-rotation",
    name="Triple rotation",
    category=_CATEGORY,
    description="Turns around all three axes at once.",
    icon="⚙",
)
def triple_rotation(intensity: float, duration: float) -> list[Track]:
    return [_full_turn(axis, intensity, duration) for axis in ("x", "y", "z")]


@register_preset(
    preset_id="tumble",
    name="Tumble",
    category=_CATEGORY,
    description="Tumbles with a different rate on every axis.",
    icon="🎲",
)
def tumble(intensity: float, duration: float) -> list[Track]:
    return [
        _full_turn("x", 1.5 * intensity, duration),
        _full_turn("y", intensity, duration),
        _full_turn("z", 0.75 * intensity, duration),
    ]


@register_preset(
    preset_id="wobble-rotation",
    name="Wobble rotation",
    category=_CATEGORY,
    description="Turns around Y while wobbling on X and Z.",
    icon="〰",
)
def wobble_rotation(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotations(
        times,
        y=[p * TAU for p in progress],
        x=[math.sin(p * 2 * TAU) * 0.3 * intensity for p in progress],
        z=[math.cos(p * 2 * TAU) * 0.3 * intensity for p in progress],
    )


@register_preset(
    preset_id="spin-up",
    name="Spin up",
    category=_CATEGORY,
    description="Starts slowly and accelerates into a full turn.",
    icon="⏫",
)
def spin_up(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotation("y", times, [p * p * TAU * intensity for p in progress])


@register_preset(
    preset_id="spin-down",
    name="Spin down",
    category=_CATEGORY,
    description="Starts fast and decelerates to a stop.",
    icon="⏬",
)
def spin_down(intensity: float, duration: float) -> Track:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotation("y", times, [(1 - (1 - p) * (1 - p)) * TAU * intensity for p in progress])
