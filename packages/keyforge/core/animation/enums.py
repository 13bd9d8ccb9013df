"""Track value types and animated property kinds.

Track variants are an explicit tagged union: the value type carries the
component count and whether easing applies, the property kind carries the
export merge policy and missing-axis default. Nothing dispatches on Python
runtime types.
"""

from __future__ import annotations

from enum import Enum


class ValueType(str, Enum):
    """Per-sample value shape of a track."""

    SCALAR = "scalar"
    VECTOR3 = "vector3"
    QUATERNION = "quaternion"
    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def component_count(self) -> int:
        return _COMPONENT_COUNTS[self]

    @property
    def easable(self) -> bool:
        """Whether positional easing may remap this track's values."""
        return self in (ValueType.SCALAR, ValueType.VECTOR3)

    @property
    def numeric(self) -> bool:
        return self not in (ValueType.BOOLEAN, ValueType.STRING)


_COMPONENT_COUNTS: dict[ValueType, int] = {
    ValueType.SCALAR: 1,
    ValueType.VECTOR3: 3,
    ValueType.QUATERNION: 4,
    ValueType.BOOLEAN: 1,
    ValueType.STRING: 1,
}


class MergePolicy(str, Enum):
    """How the export resolver combines per-axis tracks of one property."""

    EULER_TO_QUATERNION = "euler_to_quaternion"
    INTERLEAVE = "interleave"
    NONE = "none"


class PropertyKind(str, Enum):
    """Animated property a track addresses."""

    ROTATION_EULER = "rotationEuler"
    ROTATION_QUATERNION = "rotationQuaternion"
    POSITION = "positionVector"
    SCALE = "scaleVector"
    COLOR = "colorVector"
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "numberScalar"

    @property
    def merge_policy(self) -> MergePolicy:
        if self is PropertyKind.ROTATION_EULER:
            return MergePolicy.EULER_TO_QUATERNION
        if self in (PropertyKind.POSITION, PropertyKind.SCALE):
            return MergePolicy.INTERLEAVE
        return MergePolicy.NONE

    @property
    def merge_group(self) -> str | None:
        """Name shared by kinds that bind to the same exported channel."""
        if self in (PropertyKind.ROTATION_EULER, PropertyKind.ROTATION_QUATERNION):
            return "rotation"
        if self is PropertyKind.POSITION:
            return "position"
        if self is PropertyKind.SCALE:
            return "scale"
        return None

    @property
    def axis_default(self) -> float:
        """Value used for an axis no track animates."""
        return 1.0 if self is PropertyKind.SCALE else 0.0

    @property
    def channel(self) -> str | None:
        """Exported property name, or None to keep the track's own name."""
        return _CHANNELS.get(self)


_CHANNELS: dict[PropertyKind, str] = {
    PropertyKind.ROTATION_EULER: "rotation",
    PropertyKind.ROTATION_QUATERNION: "rotation",
    PropertyKind.POSITION: "translation",
    PropertyKind.SCALE: "scale",
    PropertyKind.COLOR: "color",
}


AXES: tuple[str, str, str] = ("x", "y", "z")
