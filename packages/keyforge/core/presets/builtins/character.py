"""Character action presets: locomotion, gestures and combat moves.

Most actions are described as phase tables (anticipation, action, hold,
recovery) sampled with :func:`keyforge.core.curves.multi_phase`.
"""

from __future__ import annotations

from collections.abc import Callable
import math

from keyforge.core.animation import Track
from keyforge.core.curves import multi_phase, phase
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

_CATEGORY = PresetCategory.CHARACTER


def _window(
    progress: list[float], start: float, end: float, fn: Callable[[float], float]
) -> list[float]:
    """``fn(p)`` for ``start < p < end``, 0 elsewhere."""
    return [fn(p) if start < p < end else 0.0 for p in progress]


def _guard(p: float, attack: float = 0.2, release: float = 0.8) -> float:
    """Envelope ramping 0 to 1 over ``[0, attack]``, holding, then ramping back after ``release``."""
    if p < attack:
        return p / attack
    if p < release:
        return 1.0
    return 1.0 - (p - release) / (1.0 - release)


@register_preset(
    preset_id="walk-cycle",
    name="Walk cycle",
    category=_CATEGORY,
    description="Basic walking motion.",
    icon="🚶",
)
def walk_cycle(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        *positions(
            times,
            x=[p * intensity * 3 for p in progress],
            y=[abs(math.sin(p * 2 * TAU)) * intensity * 0.3 for p in progress],
        ),
        rotation("z", times, [math.sin(p * 2 * TAU) * intensity * 0.1 for p in progress]),
    ]


@register_preset(
    preset_id="run-cycle",
    name="Run cycle",
    category=_CATEGORY,
    description="Fast running motion.",
    icon="🏃",
)
def run_cycle(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        *positions(
            times,
            x=[p * intensity * 6 for p in progress],
            y=[abs(math.sin(p * 3 * TAU)) * intensity * 0.5 for p in progress],
        ),
        rotation("x", times, [math.sin(p * 3 * TAU) * intensity * 0.15 for p in progress]),
    ]


@register_preset(
    preset_id="idle-breathing",
    name="Idle breathing",
    category=_CATEGORY,
    description="Quiet idle breathing.",
    icon="😌",
)
def idle_breathing(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        uniform_scale(times, [1 + math.sin(p * TAU) * intensity * 0.02 for p in progress]),
        position("y", times, [math.sin(p * TAU) * intensity * 0.05 for p in progress]),
    ]


@register_preset(
    preset_id="turn-around",
    name="Turn around",
    category=_CATEGORY,
    description="Turns 180 degrees.",
    icon="↩",
)
def turn_around(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    turned = math.pi * intensity
    return [
        rotation(
            "y",
            times,
            multi_phase(
                [phase(0, turned, 0.7, "ease-in-out"), phase(turned, turned, 0.3)],
                PRESET_STEPS,
            ),
        ),
        position(
            "x", times, [math.sin(p * math.pi) * intensity * 0.3 if p < 0.5 else 0.0 for p in progress]
        ),
    ]


@register_preset(
    preset_id="sit-down",
    name="Sit down",
    category=_CATEGORY,
    description="Crouches down into a seat.",
    icon="🪑",
)
def sit_down(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)
    seated = -intensity * 1.5
    lean = intensity * 0.3
    return [
        position(
            "y",
            times,
            multi_phase([phase(0, seated, 0.6, "ease-in"), phase(seated, seated, 0.4)], PRESET_STEPS),
        ),
        rotation(
            "x",
            times,
            multi_phase([phase(0, lean, 0.4, "ease-in"), phase(lean, 0, 0.6, "ease-out")], PRESET_STEPS),
        ),
    ]


def _stand_up_scale(p: float, intensity: float) -> float:
    if p < 0.2:
        return 1 - p * intensity * 0.1
    if p < 0.5:
        return 0.98 + (p - 0.2) * intensity * 0.15
    return 1.0


@register_preset(
    preset_id="stand-up",
    name="Stand up",
    category=_CATEGORY,
    description="Rises from a seated pose.",
    icon="🧍",
)
def stand_up(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    seated = -intensity * 1.5
    pushed = -intensity * 1.7
    return [
        position(
            "y",
            times,
            multi_phase(
                [
                    phase(seated, pushed, 0.2, "ease-in"),
                    phase(pushed, 0, 0.6, "ease-out"),
                    phase(0, 0, 0.2),
                ],
                PRESET_STEPS,
            ),
        ),
        rotation(
            "x",
            times,
            multi_phase(
                [
                    phase(0, intensity * 0.4, 0.3, "ease-in"),
                    phase(intensity * 0.4, -intensity * 0.1, 0.4, "ease-out"),
                    phase(-intensity * 0.1, 0, 0.3, "ease-out"),
                ],
                PRESET_STEPS,
            ),
        ),
        uniform_scale(times, [_stand_up_scale(p, intensity) for p in progress]),
    ]


@register_preset(
    preset_id="point-gesture",
    name="Point",
    category=_CATEGORY,
    description="Points forward.",
    icon="👉",
)
def point_gesture(intensity: float, duration: float) -> list[Track]:
    times, _ = timeline(PRESET_STEPS, duration)

    def reach(peak: float) -> list[float]:
        return multi_phase(
            [phase(0, peak, 0.3, "ease-out"), phase(peak, peak, 0.5), phase(peak, 0, 0.2, "ease-in")],
            PRESET_STEPS,
        )

    return [
        rotation("x", times, reach(-intensity * 0.2)),
        position("z", times, reach(intensity * 0.8)),
    ]


@register_preset(
    preset_id="waving-hand",
    name="Wave hand",
    category=_CATEGORY,
    description="Waves side to side in greeting.",
    icon="👋",
)
def waving_hand(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        rotation("z", times, [math.sin(p * 3 * TAU) * intensity * 0.4 for p in progress]),
        position("y", times, [abs(math.sin(p * 3 * TAU)) * intensity * 0.2 for p in progress]),
    ]


@register_preset(
    preset_id="head-tilt",
    name="Head tilt",
    category=_CATEGORY,
    description="Tilts the head in curiosity.",
    icon="🤔",
)
def head_tilt(intensity: float, duration: float) -> Track:
    times, _ = timeline(PRESET_STEPS, duration)
    tilt = intensity * 0.3
    values = multi_phase(
        [phase(0, tilt, 0.4, "ease-out"), phase(tilt, tilt, 0.4), phase(tilt, 0, 0.2, "ease-in")],
        PRESET_STEPS,
    )
    return rotation("z", times, values)


def _jump_scale(p: float, intensity: float) -> float:
    if p < 0.15:
        return 1 - p * intensity * 0.2
    if p < 0.2:
        return 0.97 + (p - 0.15) * intensity * 0.6
    if p > 0.9:
        return 1 - (p - 0.9) * intensity * 0.3
    return 1.0


@register_preset(
    preset_id="jump-action",
    name="Jump action",
    category=_CATEGORY,
    description="Crouch, leap and land.",
    icon="🦘",
)
def jump_action(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    crouch = -intensity * 0.5
    apex = intensity * 3
    impact = -intensity * 0.2
    heights = multi_phase(
        [
            phase(0, crouch, 0.15, "ease-in"),
            phase(crouch, apex, 0.4, "ease-out"),
            phase(apex, 0, 0.35, "ease-in"),
            phase(0, impact, 0.05),
            phase(impact, 0, 0.05, "ease-out"),
        ],
        PRESET_STEPS,
    )
    return [
        position("y", times, heights),
        uniform_scale(times, [_jump_scale(p, intensity) for p in progress]),
        rotation(
            "x", times, [-math.sin(p * TAU) * intensity * 0.2 if p < 0.55 else 0.0 for p in progress]
        ),
    ]


@register_preset(
    preset_id="punch-attack",
    name="Punch",
    category=_CATEGORY,
    description="Throws a forward punch.",
    icon="👊",
)
def punch_attack(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    windup = -intensity * 0.5
    strike = intensity * 2
    follow = intensity * 1.5
    return [
        position(
            "z",
            times,
            multi_phase(
                [
                    phase(0, windup, 0.2, "ease-in"),
                    phase(windup, strike, 0.3, "ease-out"),
                    phase(strike, follow, 0.2),
                    phase(follow, 0, 0.3, "ease-in"),
                ],
                PRESET_STEPS,
            ),
        ),
        rotation(
            "y",
            times,
            _window(progress, 0.2, 0.5, lambda p: math.sin((p - 0.2) * 2 * TAU) * intensity * 0.15),
        ),
        position(
            "x",
            times,
            _window(progress, 0.2, 0.5, lambda p: -math.sin((p - 0.2) * TAU) * intensity * 0.3),
        ),
    ]


@register_preset(
    preset_id="kick-attack",
    name="Kick",
    category=_CATEGORY,
    description="Delivers a kick.",
    icon="🦵",
)
def kick_attack(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    lean_back = -intensity * 0.8
    lift = intensity * 0.5
    return [
        position(
            "x",
            times,
            multi_phase(
                [
                    phase(0, lean_back, 0.3, "ease-out"),
                    phase(lean_back, lean_back, 0.3),
                    phase(lean_back, 0, 0.4, "ease-in"),
                ],
                PRESET_STEPS,
            ),
        ),
        *rotations(
            times,
            x=multi_phase(
                [
                    phase(0, lift, 0.25, "ease-in"),
                    phase(lift, lift, 0.3),
                    phase(lift, 0, 0.45, "ease-out"),
                ],
                PRESET_STEPS,
            ),
            z=[intensity * 0.2 * math.sin(p * TAU) if p < 0.3 else 0.0 for p in progress],
        ),
    ]


@register_preset(
    preset_id="block-defense",
    name="Block",
    category=_CATEGORY,
    description="Raises a defensive guard.",
    icon="🛡",
)
def block_defense(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    brace = -intensity * 0.3
    return [
        rotation(
            "x",
            times,
            multi_phase(
                [phase(0, brace, 0.2, "ease-out"), phase(brace, brace, 0.6), phase(brace, 0, 0.2, "ease-in")],
                PRESET_STEPS,
            ),
        ),
        uniform_scale(times, [1 - _guard(p) * intensity * 0.08 for p in progress]),
        position("y", times, [-_guard(p) * intensity * 0.2 for p in progress]),
    ]


@register_preset(
    preset_id="dodge-roll",
    name="Dodge roll",
    category=_CATEGORY,
    description="Rolls sideways out of harm's way.",
    icon="🤸",
)
def dodge_roll(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    distance = intensity * 3
    return [
        *positions(
            times,
            x=multi_phase(
                [phase(0, distance, 0.7, "ease-in-out"), phase(distance, distance, 0.3)],
                PRESET_STEPS,
            ),
            y=[-abs(math.sin(p * math.pi / 0.7)) * intensity * 0.5 if p < 0.7 else 0.0 for p in progress],
        ),
        rotation("z", times, [min(p / 0.7, 1.0) * TAU * intensity for p in progress]),
    ]


@register_preset(
    preset_id="climb-up",
    name="Climb",
    category=_CATEGORY,
    description="Climbs a wall or ladder.",
    icon="🧗",
)
def climb_up(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        position("y", times, [p * intensity * 4 for p in progress]),
        *rotations(
            times,
            z=[math.sin(p * 2 * TAU) * intensity * 0.15 for p in progress],
            x=[math.cos(p * 2 * TAU) * intensity * 0.1 for p in progress],
        ),
    ]


@register_preset(
    preset_id="crawl",
    name="Crawl",
    category=_CATEGORY,
    description="Crawls forward along the ground.",
    icon="🐍",
)
def crawl(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        *positions(
            times,
            x=[p * intensity * 2 for p in progress],
            y=[-intensity * 1.2 + math.sin(p * 2 * TAU) * intensity * 0.1 for p in progress],
        ),
        *rotations(
            times,
            x=[math.sin(p * 2 * TAU + math.pi / 2) * intensity * 0.15 for p in progress],
            z=[math.sin(p * 2 * TAU) * intensity * 0.1 for p in progress],
        ),
    ]


@register_preset(
    preset_id="stumble",
    name="Stumble",
    category=_CATEGORY,
    description="Loses balance and staggers.",
    icon="😵",
)
def stumble(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)

    def fading(fn: Callable[[float], float], amplitude: float) -> list[float]:
        return [fn(p) * intensity * amplitude * (1 - p) for p in progress]

    return [
        *positions(
            times,
            x=fading(lambda p: math.sin(p * math.pi * 3), 0.8),
            z=fading(lambda p: math.cos(p * math.pi * 3), 0.5),
        ),
        *rotations(
            times,
            y=fading(lambda p: math.sin(p * 2 * TAU), 0.3),
            z=fading(lambda p: math.cos(p * math.pi * 5), 0.2),
        ),
    ]


@register_preset(
    preset_id="spin-attack",
    name="Spin attack",
    category=_CATEGORY,
    description="Attacks while spinning around.",
    icon="🌪",
)
def spin_attack(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    return [
        rotation("y", times, [p * TAU * intensity for p in progress]),
        uniform_scale(times, [1 + min(p, 1 - p) * intensity * 0.3 for p in progress]),
        position("y", times, [abs(math.sin(p * math.pi)) * intensity * 0.5 for p in progress]),
    ]


@register_preset(
    preset_id="backstep",
    name="Backstep",
    category=_CATEGORY,
    description="Quickly steps backward.",
    icon="⬅",
)
def backstep(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    retreat = -intensity * 2
    return [
        position(
            "z",
            times,
            multi_phase(
                [phase(0, 0, 0.1), phase(0, retreat, 0.4, "ease-out"), phase(retreat, retreat, 0.5)],
                PRESET_STEPS,
            ),
        ),
        rotation(
            "x", times, [-math.sin(p * TAU) * intensity * 0.2 if p < 0.5 else 0.0 for p in progress]
        ),
        position(
            "y",
            times,
            _window(progress, 0.1, 0.5, lambda p: abs(math.sin((p - 0.1) * math.pi / 0.4)) * intensity * 0.2),
        ),
    ]


@register_preset(
    preset_id="combo-attack",
    name="Combo attack",
    category=_CATEGORY,
    description="Punch, kick and spin in one chain.",
    icon="⚡",
)
def combo_attack(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    punch = intensity * 1.5
    kick = intensity * 1.2
    finish = intensity * 0.8

    def swing(p: float) -> float:
        return math.sin((p - 0.35) * math.pi / 0.35)

    def spin_progress(p: float) -> float:
        return (p - 0.7) / 0.3

    return [
        position(
            "z",
            times,
            multi_phase(
                [
                    phase(0, punch, 0.2, "ease-out"),
                    phase(punch, 0, 0.15, "ease-in"),
                    phase(0, kick, 0.2, "ease-out"),
                    phase(kick, 0, 0.15, "ease-in"),
                    phase(0, finish, 0.3),
                ],
                SMOOTH_STEPS,
            ),
        ),
        position("x", times, _window(progress, 0.35, 0.7, lambda p: -swing(p) * intensity * 0.8)),
        rotation(
            "y",
            times,
            _window(progress, 0.7, math.inf, lambda p: spin_progress(p) * TAU * intensity),
        ),
        position(
            "y",
            times,
            _window(
                progress,
                0.7,
                math.inf,
                lambda p: abs(math.sin(spin_progress(p) * math.pi)) * intensity * 0.5,
            ),
        ),
        rotation("x", times, _window(progress, 0.35, 0.7, lambda p: swing(p) * intensity * 0.4)),
    ]


@register_preset(
    preset_id="celebration-dance",
    name="Victory dance",
    category=_CATEGORY,
    description="Victory dance mixing jumps and spins.",
    icon="🎉",
)
def celebration_dance(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    hops = [abs(math.sin(p * 2 * TAU)) for p in progress]
    return [
        position("y", times, [h * intensity * 1.5 for h in hops]),
        *rotations(
            times,
            y=[math.sin(p * 3 * TAU) * intensity * math.pi / 2 for p in progress],
            z=[math.sin(p * 4 * TAU) * intensity * 0.3 for p in progress],
        ),
        uniform_scale(times, [1 + h * intensity * 0.15 for h in hops]),
    ]


@register_preset(
    preset_id="sneak-walk",
    name="Sneak",
    category=_CATEGORY,
    description="Creeps forward in a crouch.",
    icon="🤫",
)
def sneak_walk(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    crouch = -intensity * 0.8
    return [
        *positions(
            times,
            x=[p * intensity * 1.5 for p in progress],
            y=[crouch + abs(math.sin(p * 3 * TAU)) * intensity * 0.1 for p in progress],
        ),
        *rotations(
            times,
            x=[intensity * 0.3 + math.sin(p * 3 * TAU) * intensity * 0.05 for p in progress],
            z=[math.sin(p * 3 * TAU + math.pi / 2) * intensity * 0.08 for p in progress],
        ),
    ]


@register_preset(
    preset_id="get-hit-reaction",
    name="Hit reaction",
    category=_CATEGORY,
    description="Knocked back by an incoming hit.",
    icon="💢",
)
def get_hit_reaction(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(PRESET_STEPS, duration)
    knocked = -intensity * 1.5
    staggered = -intensity * 1.2
    recovered = -intensity * 0.5
    recoil = -intensity * 0.4
    bent = -intensity * 0.3
    return [
        position(
            "x",
            times,
            multi_phase(
                [
                    phase(0, knocked, 0.2, "ease-out"),
                    phase(knocked, staggered, 0.3),
                    phase(staggered, recovered, 0.5, "ease-in-out"),
                ],
                PRESET_STEPS,
            ),
        ),
        position(
            "z", times, [-math.sin(p * math.pi / 0.5) * intensity * 0.5 if p < 0.5 else 0.0 for p in progress]
        ),
        *rotations(
            times,
            x=multi_phase(
                [
                    phase(0, recoil, 0.2, "ease-out"),
                    phase(recoil, bent, 0.3),
                    phase(bent, 0, 0.5, "ease-out"),
                ],
                PRESET_STEPS,
            ),
            y=[math.sin(p * math.pi / 0.2) * intensity * 0.15 if p < 0.2 else 0.0 for p in progress],
        ),
        uniform_scale(times, [1 - _guard(p, 0.2, 0.5) * intensity * 0.1 for p in progress]),
    ]


@register_preset(
    preset_id="charge-power",
    name="Charge power",
    category=_CATEGORY,
    description="Gathers energy in a charging stance.",
    icon="⚡",
)
def charge_power(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    return [
        uniform_scale(
            times,
            [1 + p * intensity * 0.2 + math.sin(p * 4 * TAU) * 0.05 * intensity for p in progress],
        ),
        position("y", times, [math.sin(p * 8 * TAU) * intensity * 0.05 for p in progress]),
        *rotations(
            times,
            y=[p * TAU * intensity * 0.5 for p in progress],
            x=[math.sin(p * 6 * TAU) * intensity * 0.05 for p in progress],
            z=[math.cos(p * 6 * TAU) * intensity * 0.05 for p in progress],
        ),
    ]


def _collapse_tilt(p: float, intensity: float) -> float:
    if p < 0.3:
        return math.sin(p * math.pi / 0.3) * intensity * 0.15
    if p < 0.7:
        return intensity * ((p - 0.3) / 0.4) * 0.3
    return intensity * 0.3


@register_preset(
    preset_id="death-fall",
    name="Death fall",
    category=_CATEGORY,
    description="Staggers and collapses to the ground.",
    icon="💀",
)
def death_fall(intensity: float, duration: float) -> list[Track]:
    times, progress = timeline(SMOOTH_STEPS, duration)
    sag = -intensity * 0.3
    down = -intensity * 2
    impact = -intensity * 2.2
    lean = intensity * 0.2
    flat = intensity * math.pi / 2
    return [
        position(
            "y",
            times,
            multi_phase(
                [
                    phase(0, 0, 0.15),
                    phase(0, sag, 0.15, "ease-in"),
                    phase(sag, down, 0.4, "ease-in"),
                    phase(down, impact, 0.1),
                    phase(impact, down, 0.2, "ease-out"),
                ],
                SMOOTH_STEPS,
            ),
        ),
        *rotations(
            times,
            x=multi_phase(
                [
                    phase(0, 0, 0.15),
                    phase(0, lean, 0.15, "ease-in"),
                    phase(lean, flat, 0.4, "ease-in"),
                    phase(flat, flat, 0.3),
                ],
                SMOOTH_STEPS,
            ),
            z=[_collapse_tilt(p, intensity) for p in progress],
        ),
        uniform_scale(
            times,
            [1 - (p - 0.7) / 0.3 * intensity * 0.15 if p > 0.7 else 1.0 for p in progress],
        ),
    ]
