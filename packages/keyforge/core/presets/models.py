"""Preset value objects."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from keyforge.core.animation import Track

TrackGenerator = Callable[[float, float], Track | Sequence[Track]]


class PresetCategory(str, Enum):
    """Browsing groups for presets. Never used to branch runtime behavior."""

    ROTATION = "rotation"
    TRANSLATION = "translation"
    SCALE = "scale"
    COMBINED = "combined"
    EMOTE = "emote"
    EASING = "easing"
    PHYSICS = "physics"
    CHARACTER = "character"

    @property
    def order(self) -> int:
        return list(PresetCategory).index(self)


@dataclass(frozen=True)
class AnimationPreset:
    """Named recipe: generator functions called with ``(intensity, duration)``."""

    id: str
    name: str
    category: PresetCategory
    description: str
    icon: str
    generators: tuple[TrackGenerator, ...]

    def generate(self, intensity: float, duration: float) -> list[Track]:
        """Invoke every generator and flatten the results in order."""
        tracks: list[Track] = []
        for generator in self.generators:
            result = generator(intensity, duration)
            if isinstance(result, Track):
                tracks.append(result)
            else:
                tracks.extend(result)
        return tracks


@dataclass(frozen=True)
class PresetInfo:
    """Lightweight metadata for listing and search."""

    preset_id: str
    name: str
    category: PresetCategory
    description: str
    icon: str
