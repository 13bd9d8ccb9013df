"""Clip assembly: preset + parameters -> AnimationClip."""

from __future__ import annotations

from typing import Any

import numpy as np

from keyforge.core.animation import AnimationClip, Track
from keyforge.core.config.models import AnimationParams
from keyforge.core.easing import EasingFn, EasingType, get_easing, resolve_easing_type
from keyforge.core.presets import AnimationPreset, get_preset
from keyforge.core.utils.logging import get_logger, log_performance
from keyforge.core.utils.math import sample_at_fractional_index


def _remap_rows(rows: np.ndarray, easing: EasingFn) -> np.ndarray:
    last = rows.shape[0] - 1
    eased = np.empty_like(rows)
    for i in range(rows.shape[0]):
        eased[i] = sample_at_fractional_index(rows, easing(i / last) * last)
    return eased


def apply_easing(track: Track, easing: EasingType | str) -> Track:
    """Reshape a track positionally through an easing function.

    Sample ``i`` of ``n`` takes the raw curve's value at fractional sample
    index ``f(i / (n - 1)) * (n - 1)``; times are left untouched, so easing
    works on sample positions, not on the track's own time spacing.
    Overshooting easings extrapolate linearly past the first or last
    segment. Vector tracks are remapped per sample, keeping components
    together.

    Quaternion, boolean and string tracks, single-sample tracks and the
    linear easing return ``track`` itself.

    Raises:
        UnknownEasingError: If ``easing`` names no easing function
    """
    easing_type = resolve_easing_type(easing)
    if easing_type is EasingType.LINEAR:
        return track
    if not track.value_type.easable or track.sample_count < 2:
        return track

    eased = _remap_rows(track.value_rows(), get_easing(easing_type))
    return track.replace(values=eased.ravel().tolist())


@log_performance
def build_clip(preset: AnimationPreset, params: AnimationParams | None = None) -> AnimationClip:
    """Build a clip from a preset.

    Every generator is called with ``(params.intensity, params.duration)``
    and the results are flattened in order. Track times past
    ``params.duration`` are kept as generated.

    Args:
        preset: Preset to realize
        params: Runtime parameters (defaults when None)

    Returns:
        New clip named after the preset with ``duration = params.duration``

    Raises:
        UnknownEasingError: If ``params.easing`` names no easing function
    """
    params = params or AnimationParams()
    log = get_logger(__name__, preset_id=preset.id)
    easing_type = resolve_easing_type(params.easing)

    tracks = preset.generate(params.intensity, params.duration)
    if easing_type is not EasingType.LINEAR:
        tracks = [apply_easing(track, easing_type) for track in tracks]

    log.debug(
        f"Built clip {preset.id!r}: {len(tracks)} tracks, "
        f"intensity={params.intensity}, duration={params.duration}, easing={easing_type.value}"
    )
    return AnimationClip(name=preset.name, duration=params.duration, tracks=tuple(tracks))


def generate_clip(preset_key: str, **params: Any) -> AnimationClip:
    """Look up a preset by id or name in the global catalog and build it.

    Example:
        >>> clip = generate_clip("rotation-y", intensity=1.0, duration=2.0)
        >>> clip.tracks[0].values[-1]
        6.283185307179586

    Raises:
        PresetNotFoundError: If no preset matches ``preset_key``
        ValidationError: If ``params`` contains unknown fields
    """
    return build_clip(get_preset(preset_key), AnimationParams(**params))
