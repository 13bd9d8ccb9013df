"""Physics-driven presets built on the trajectory and oscillator helpers."""

from __future__ import annotations

import math

import numpy as np

from keyforge.core.animation import Track
from keyforge.core.curves import exponential_curve
from keyforge.core.physics import (
    GRAVITY,
    bouncing_trajectory,
    damped_oscillation,
    damped_value,
    elliptical_orbit,
    exponential_decay,
    free_fall,
    free_fall_curve,
    lorenz_attractor,
    pendulum,
    projectile_motion,
    turbulence,
)
from keyforge.core.presets.catalog import register_preset
from keyforge.core.presets.models import PresetCategory
from keyforge.core.presets.tracks import (
    PRESET_STEPS,
    SMOOTH_STEPS,
    position,
    positions,
    rotation,
    rotations,
    timeline,
    uniform_scale,
)
from keyforge.core.utils.math import TAU

_CATEGORY = PresetCategory.PHYSICS


@register_preset(
    preset_id="gravity-fall",
    name="Gravity fall",
    category=_CATEGORY,
    description="Free fall under gravity until it reaches the ground.",
    icon="⬇",
)
def gravity_fall(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    heights = free_fall_curve(intensity * 5, PRESET_STEPS, duration, GRAVITY * intensity)
    return position("y", times, heights)


@register_preset(
    preset_id="gravity-bounce",
    name="Gravity bounce",
    category=_CATEGORY,
    description="Falls and keeps bouncing with a restitution of 0.7.",
    icon="⚾",
)
def gravity_bounce(intensity: float, duration: float) -> Track:
    times, _ = timeline(SMOOTH_STEPS, duration)
    return position("y", times, bouncing_trajectory(intensity * 3, 0.7, SMOOTH_STEPS, duration))


@register_preset(
    preset_id="simple-spring",
    name="Simple spring",
    category=_CATEGORY,
    description="Undamped harmonic oscillation.",
    icon="〰",
)
def simple_spring(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    omega = TAU * (1.5 / duration)
    return position("y", times, [math.cos(omega * t) * intensity * 2 for t in times])


@register_preset(
    preset_id="damped-spring",
    name="Damped spring",
    category=_CATEGORY,
    description="Spring oscillation that gradually dies out.",
    icon="📉",
)
def damped_spring(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    values = damped_oscillation(intensity * 2, 1.5, math.pi * 3, PRESET_STEPS, duration)
    return position("y", times, values)


@register_preset(
    preset_id="pendulum-swing",
    name="Pendulum swing",
    category=_CATEGORY,
    description="Simple pendulum motion.",
    icon="⏱",
)
def pendulum_swing(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    return rotation("z", times, pendulum(math.pi / 6 * intensity, 2.0, PRESET_STEPS, duration))


@register_preset(
    preset_id="magnetic-attraction",
    name="Magnetic attraction",
    category=_CATEGORY,
    description="Pulled toward the center, accelerating on the way.",
    icon="🧲",
)
def magnetic_attraction(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    return positions(
        times,
        x=exponential_curve(intensity * 3, 0, 3, PRESET_STEPS),
        z=exponential_curve(intensity * 2, 0, 3, PRESET_STEPS),
    )


@register_preset(
    preset_id="inertial-drift",
    name="Inertial drift",
    category=_CATEGORY,
    description="Slides and slows to a stop under friction.",
    icon="🛑",
)
def inertial_drift(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    velocity = np.asarray(exponential_decay(intensity * 3, 2, PRESET_STEPS, duration))
    travelled = np.cumsum(velocity) * (duration / PRESET_STEPS)
    return position("x", times, travelled.tolist())


@register_preset(
    preset_id="centrifugal-spin",
    name="Centrifugal spin",
    category=_CATEGORY,
    description="Spins while spiralling outward.",
    icon="🌀",
)
def centrifugal_spin(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    angles = [p * 2 * TAU * intensity for p in progress]
    radii = [p * intensity * 2 for p in progress]
    return [
        rotation("y", times, angles),
        *positions(
            times,
            x=[math.cos(a) * r for a, r in zip(angles, radii, strict=True)],
            z=[math.sin(a) * r for a, r in zip(angles, radii, strict=True)],
        ),
    ]


@register_preset(
    preset_id="projectile-arc",
    name="Projectile arc",
    category=_CATEGORY,
    description="Ballistic arc of a thrown object.",
    icon="🏹",
)
def projectile_arc(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    arc = projectile_motion(intensity * 5, math.pi / 4, PRESET_STEPS, duration)
    return positions(times, x=arc.x, y=arc.y)


@register_preset(
    preset_id="orbit-gravity",
    name="Gravity orbit",
    category=_CATEGORY,
    description="Traces an elliptical orbit.",
    icon="🛸",
)
def orbit_gravity(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    orbit = elliptical_orbit(intensity * 3, 0.5, PRESET_STEPS)
    return positions(times, x=orbit.x, z=orbit.z)


@register_preset(
    preset_id="double-pendulum",
    name="Double pendulum",
    category=_CATEGORY,
    description="Chaotic-looking swing of two linked pendulums.",
    icon="⚖",
)
def double_pendulum(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    upper = pendulum(math.pi / 4 * intensity, 1.5, SMOOTH_STEPS, duration)
    lower = pendulum(math.pi / 6 * intensity, 2.0, SMOOTH_STEPS, duration, gravity=GRAVITY * 1.2)
    x_values = []
    y_values = []
    for a, b in zip(upper, lower, strict=True):
        x_values.append((math.sin(a) + math.sin(a + b)) * intensity)
        y_values.append(-(math.cos(a) + math.cos(a + b)) * intensity)
    return positions(times, x=x_values, y=y_values)


@register_preset(
    preset_id="spring-rebound",
    name="Spring rebound",
    category=_CATEGORY,
    description="A compressed spring releases and launches upward.",
    icon="⏫",
)
def spring_rebound(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    release = duration * 0.2
    launch_speed = intensity * 8
    values = []
    for t in times:
        if t < release:
            values.append(0.0)
            continue
        elapsed = t - release
        values.append(max(0.0, launch_speed * elapsed - 0.5 * GRAVITY * elapsed * elapsed))
    return position("y", times, values)


@register_preset(
    preset_id="friction-slide",
    name="Friction slide",
    category=_CATEGORY,
    description="Decelerates uniformly under friction until it stops.",
    icon="🛷",
)
def friction_slide(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    speed = intensity * 5
    deceleration = intensity * 3
    return position(
        "x", times, [max(0.0, speed * t - 0.5 * deceleration * t * t) for t in times]
    )


@register_preset(
    preset_id="wave-propagation",
    name="Wave propagation",
    category=_CATEGORY,
    description="Rides a travelling wave.",
    icon="🌊",
)
def wave_propagation(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    k = TAU / (intensity * 2)
    omega = 2 * TAU / duration
    return [
        position("y", times, [math.sin(k * t - omega * t) * intensity for t in times]),
        rotation("z", times, [math.sin(2 * TAU * t / duration) * intensity * 0.3 for t in times]),
    ]


@register_preset(
    preset_id="torque-rotation",
    name="Torque rotation",
    category=_CATEGORY,
    description="Spins up under constant angular acceleration.",
    icon="⚙",
)
def torque_rotation(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    angular_acceleration = intensity * 2
    return rotation("y", times, [0.5 * angular_acceleration * t * t for t in times])


@register_preset(
    preset_id="elastic-collision",
    name="Elastic collision",
    category=_CATEGORY,
    description="Hits a wall and bounces back.",
    icon="💥",
)
def elastic_collision(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    speed = intensity * 3
    impact_time = duration / 3
    impact_point = impact_time * speed
    values = [
        t * speed if t < impact_time else impact_point - (t - impact_time) * speed * 0.8
        for t in times
    ]
    return position("x", times, values)


@register_preset(
    preset_id="gyroscopic-precession",
    name="Gyroscopic precession",
    category=_CATEGORY,
    description="Spinning top whose axis slowly precesses.",
    icon="🌏",
)
def gyroscopic_precession(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return rotations(
        times,
        y=[p * 4 * TAU * intensity for p in progress],
        x=[math.sin(p * TAU) * 0.3 * intensity for p in progress],
        z=[math.cos(p * TAU) * 0.3 * intensity for p in progress],
    )


@register_preset(
    preset_id="air-resistance",
    name="Air resistance",
    category=_CATEGORY,
    description="Slowed down by drag while drifting and sinking.",
    icon="💨",
)
def air_resistance(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    fall_speed = exponential_decay(intensity * 3, 1.5, PRESET_STEPS, duration)
    return positions(
        times,
        x=exponential_curve(0, intensity * 2, 3, PRESET_STEPS),
        y=[
            max(0.0, intensity * 3 - speed * t)
            for speed, t in zip(fall_speed, times, strict=True)
        ],
    )


@register_preset(
    preset_id="coupled-oscillators",
    name="Coupled oscillators",
    category=_CATEGORY,
    description="Two coupled oscillators beating against each other.",
    icon="〰〰",
)
def coupled_oscillators(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    f1, f2 = 1.8, 2.0
    x_values = []
    y_values = []
    for t in times:
        a, b = TAU * f1 * t, TAU * f2 * t
        x_values.append((math.cos(a) + math.cos(b)) * 0.5 * intensity)
        y_values.append((math.sin(a) - math.sin(b)) * 0.5 * intensity)
    return positions(times, x=x_values, y=y_values)


def _cradle_swing(phase_position: float, intensity: float) -> float:
    """Swing-out, rest, swing-back, rest within one cradle period."""
    if phase_position < 0.25:
        return -math.cos(phase_position * 2 * TAU) * intensity
    if phase_position < 0.5:
        return 0.0
    if phase_position < 0.75:
        return math.cos((phase_position - 0.5) * 2 * TAU) * intensity
    return 0.0


@register_preset(
    preset_id="newtons-cradle",
    name="Newton's cradle",
    category=_CATEGORY,
    description="Chain of pendulums passing momentum along.",
    icon="⚫⚫⚫",
)
def newtons_cradle(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    period = duration / 4
    return [
        position("x", times, [_cradle_swing((t % period) / period, intensity) for t in times]),
        rotation(
            "z",
            times,
            damped_oscillation(intensity * 0.5, 0.5, 2 * TAU, SMOOTH_STEPS, duration),
        ),
    ]


@register_preset(
    preset_id="turbulent-flow",
    name="Turbulent flow",
    category=_CATEGORY,
    description="Tossed around by a chaotic flow.",
    icon="🌪",
)
def turbulent_flow(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    return [
        *positions(
            times,
            x=turbulence(intensity * 2, 3, SMOOTH_STEPS, 123),
            y=turbulence(intensity * 2, 2.7, SMOOTH_STEPS, 456),
            z=turbulence(intensity * 2, 3.3, SMOOTH_STEPS, 789),
        ),
        rotation("y", times, turbulence(intensity, 4, SMOOTH_STEPS, 321)),
    ]


@register_preset(
    preset_id="vortex-motion",
    name="Vortex",
    category=_CATEGORY,
    description="Spirals inward and down into a vortex.",
    icon="🌀",
)
def vortex_motion(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    angles = [p * 4 * TAU * intensity for p in progress]
    radii = [intensity * 3 * (1 - p) for p in progress]
    return [
        *positions(
            times,
            x=[math.cos(a) * r for a, r in zip(angles, radii, strict=True)],
            y=[intensity * 3 * (1 - p * p) for p in progress],
            z=[math.sin(a) * r for a, r in zip(angles, radii, strict=True)],
        ),
        rotation("y", times, angles),
    ]


@register_preset(
    preset_id="chaos-system",
    name="Chaos system",
    category=_CATEGORY,
    description="Wanders along a Lorenz attractor.",
    icon="∞",
)
def chaos_system(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    path = lorenz_attractor(SMOOTH_STEPS, duration / SMOOTH_STEPS)
    factor = intensity * 0.1
    return positions(
        times,
        x=[v * factor for v in path.x],
        y=[v * factor for v in path.y],
        z=[v * factor for v in path.z],
    )


@register_preset(
    preset_id="resonance-vibration",
    name="Resonance",
    category=_CATEGORY,
    description="Vibration whose amplitude grows through resonance.",
    icon="📳",
)
def resonance_vibration(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    carrier = [math.sin(6 * math.pi * t) for t in times]
    heights = [c * intensity * (0.5 + 1.5 * p) for c, p in zip(carrier, progress, strict=True)]
    return [
        position("y", times, heights),
        rotation("z", times, [h * 0.3 for h in heights]),
        uniform_scale(
            times,
            [1 + abs(c) * 0.2 * intensity * (0.5 + p) for c, p in zip(carrier, progress, strict=True)],
        ),
    ]


def _buoyant_height(t: float, duration: float, intensity: float) -> float:
    """Sinks for the first fifth, then bobs around an underwater equilibrium."""
    release = duration * 0.2
    if t < release:
        return free_fall(0.0, t, GRAVITY * intensity)
    bobbing = t - release
    equilibrium = -intensity * 1.5
    return equilibrium + damped_value(intensity * 2, 0.5, 1.5 * TAU, bobbing)


@register_preset(
    preset_id="fluid-buoyancy",
    name="Buoyancy",
    category=_CATEGORY,
    description="Sinks, then bobs as buoyancy and gravity balance out.",
    icon="🎈",
)
def fluid_buoyancy(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(SMOOTH_STEPS, duration)
    return [
        position("y", times, [_buoyant_height(t, duration, intensity) for t in times]),
        *rotations(
            times,
            x=damped_oscillation(intensity * 0.3, 0.8, TAU, SMOOTH_STEPS, duration),
            z=damped_oscillation(
                intensity * 0.2, 0.8, math.pi * 2.5, SMOOTH_STEPS, duration, math.pi / 4
            ),
        ),
    ]
