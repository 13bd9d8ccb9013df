"""Preset catalog.

The catalog is filled once at import time by the ``@register_preset``
decorators in :mod:`keyforge.core.presets.builtins` and only read afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
import logging

from keyforge.core.animation import Track
from keyforge.core.presets.models import (
    AnimationPreset,
    PresetCategory,
    PresetInfo,
    TrackGenerator,
)

logger = logging.getLogger(__name__)

# Intensity/duration used to materialize generators once at registration.
_PROBE_INTENSITY = 1.0
_PROBE_DURATION = 1.0
_ALL_COMPONENTS = ("x", "y", "z", "w")


class PresetNotFoundError(KeyError):
    pass


def _norm_key(s: str) -> str:
    """Normalize user-provided keys (id/name/alias) to a stable lookup key."""
    return "".join(ch.lower() if ch.isalnum() else "_" for ch in s).strip("_")


def _target_components(track: Track) -> set[tuple[str, str]]:
    target = track.target
    if target.axis is not None:
        return {(target.property, target.axis)}
    return {(target.property, axis) for axis in _ALL_COMPONENTS}


def _check_unique_targets(preset: AnimationPreset) -> None:
    seen: dict[tuple[str, str], str] = {}
    for track in preset.generate(_PROBE_INTENSITY, _PROBE_DURATION):
        for component in _target_components(track):
            if component in seen:
                raise ValueError(
                    f"Preset {preset.id!r} animates {track.path!r} "
                    f"which overlaps {seen[component]!r}"
                )
            seen[component] = track.path


class PresetCatalog:
    """Registry of immutable presets, keyed by id with name aliases."""

    def __init__(self) -> None:
        self._presets_by_id: dict[str, AnimationPreset] = {}
        self._aliases: dict[str, str] = {}  # alias_key -> preset id
        self._info_by_id: dict[str, PresetInfo] = {}

    def register(self, preset: AnimationPreset) -> None:
        """Add a preset.

        Generators are materialized once; two tracks addressing the same
        property component are rejected.

        Raises:
            ValueError: If the id is taken, an alias collides with another
                preset, or the preset's tracks overlap.
        """
        if preset.id in self._presets_by_id:
            raise ValueError(f"Preset already registered: {preset.id}")
        if not preset.generators:
            raise ValueError(f"Preset {preset.id!r} has no generators")

        _check_unique_targets(preset)

        alias_keys = {_norm_key(preset.id), _norm_key(preset.name)}
        for key in alias_keys:
            owner = self._aliases.get(key)
            if owner is not None and owner != preset.id:
                raise ValueError(f"Preset alias {key!r} already used by {owner}")

        self._presets_by_id[preset.id] = preset
        for key in alias_keys:
            self._aliases[key] = preset.id
        self._info_by_id[preset.id] = PresetInfo(
            preset_id=preset.id,
            name=preset.name,
            category=preset.category,
            description=preset.description,
            icon=preset.icon,
        )
        logger.debug(f"Registered preset: {preset.id} ({preset.category.value})")

    def get(self, key: str) -> AnimationPreset:
        """Lookup by preset id OR name (case/format insensitive).

        Raises:
            PresetNotFoundError: If nothing matches
        """
        pid = self._aliases.get(_norm_key(key), key)
        preset = self._presets_by_id.get(pid)
        if preset is None:
            raise PresetNotFoundError(f"Unknown preset: {key}")
        return preset

    def has(self, key: str) -> bool:
        return _norm_key(key) in self._aliases or key in self._presets_by_id

    def list_all(self) -> list[PresetInfo]:
        """All presets, grouped by category in catalog order."""
        return sorted(self._info_by_id.values(), key=lambda info: info.category.order)

    def find(
        self,
        *,
        category: PresetCategory | str | None = None,
        name_contains: str | None = None,
    ) -> list[PresetInfo]:
        wanted = PresetCategory(category) if category is not None else None
        name_key = name_contains.lower() if name_contains else None

        out: list[PresetInfo] = []
        for info in self.list_all():
            if wanted is not None and info.category != wanted:
                continue
            if name_key is not None and not (
                name_key in info.name.lower() or name_key in info.preset_id
            ):
                continue
            out.append(info)
        return out

    def by_category(self) -> dict[PresetCategory, list[PresetInfo]]:
        grouped: dict[PresetCategory, list[PresetInfo]] = {c: [] for c in PresetCategory}
        for info in self.list_all():
            grouped[info.category].append(info)
        return grouped

    def __len__(self) -> int:
        return len(self._presets_by_id)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[AnimationPreset]:
        for info in self.list_all():
            yield self._presets_by_id[info.preset_id]


# Global catalog instance
PRESETS = PresetCatalog()


def register_preset(
    *,
    preset_id: str,
    name: str,
    category: PresetCategory,
    description: str,
    icon: str,
) -> Callable[[TrackGenerator], TrackGenerator]:
    """
    Decorator registering a generator function as a single-generator preset.

    Usage:
        @register_preset(preset_id="rotation-y", name="Y-axis rotation", ...)
        def rotation_y(intensity: float, duration: float) -> Track: ...
    """

    def deco(fn: TrackGenerator) -> TrackGenerator:
        PRESETS.register(
            AnimationPreset(
                id=preset_id,
                name=name,
                category=category,
                description=description,
                icon=icon,
                generators=(fn,),
            )
        )
        return fn

    return deco


def get_preset(key: str) -> AnimationPreset:
    return PRESETS.get(key)


def list_presets(category: PresetCategory | str | None = None) -> list[PresetInfo]:
    return PRESETS.find(category=category)
