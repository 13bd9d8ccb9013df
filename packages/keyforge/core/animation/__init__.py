"""Animation data model: tracks, clips and target paths."""

from keyforge.core.animation.enums import AXES, MergePolicy, PropertyKind, ValueType
from keyforge.core.animation.models import AnimationClip, Track
from keyforge.core.animation.paths import TrackPath, is_valid_node_name

__all__ = [
    "AXES",
    "AnimationClip",
    "MergePolicy",
    "PropertyKind",
    "Track",
    "TrackPath",
    "ValueType",
    "is_valid_node_name",
]
