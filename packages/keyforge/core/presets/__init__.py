"""Animation preset catalog."""

from keyforge.core.presets import builtins  # noqa: F401
from keyforge.core.presets.catalog import (
    PRESETS,
    PresetCatalog,
    PresetNotFoundError,
    get_preset,
    list_presets,
    register_preset,
)
from keyforge.core.presets.models import (
    AnimationPreset,
    PresetCategory,
    PresetInfo,
    TrackGenerator,
)

__all__ = [
    "PRESETS",
    "AnimationPreset",
    "PresetCatalog",
    "PresetCategory",
    "PresetInfo",
    "PresetNotFoundError",
    "TrackGenerator",
    "get_preset",
    "list_presets",
    "register_preset",
]
