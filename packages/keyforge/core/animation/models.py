"""Track and clip models."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import math
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from keyforge.core.animation.enums import PropertyKind, ValueType
from keyforge.core.animation.paths import TrackPath

# Value types each property kind may carry; per-axis paths are always scalar.
_ALLOWED_VALUE_TYPES: dict[PropertyKind, frozenset[ValueType]] = {
    PropertyKind.ROTATION_EULER: frozenset({ValueType.SCALAR, ValueType.VECTOR3}),
    PropertyKind.ROTATION_QUATERNION: frozenset({ValueType.QUATERNION}),
    PropertyKind.POSITION: frozenset({ValueType.SCALAR, ValueType.VECTOR3}),
    PropertyKind.SCALE: frozenset({ValueType.SCALAR, ValueType.VECTOR3}),
    PropertyKind.COLOR: frozenset({ValueType.SCALAR, ValueType.VECTOR3}),
    PropertyKind.BOOLEAN: frozenset({ValueType.BOOLEAN}),
    PropertyKind.STRING: frozenset({ValueType.STRING}),
    PropertyKind.NUMBER: frozenset({ValueType.SCALAR}),
}


def _coerce_values(value_type: ValueType, values: Iterable[Any]) -> tuple[Any, ...]:
    if value_type is ValueType.BOOLEAN:
        return tuple(bool(v) for v in values)
    if value_type is ValueType.STRING:
        return tuple(str(v) for v in values)
    return tuple(float(v) for v in values)


class Track(BaseModel):
    """Time-stamped sample sequence for one animated property or component.

    ``values`` is flat: ``len(values) == len(times) * component_count``.
    A path that names an axis (``".position[x]"``) always carries one
    component per sample.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(description="Target path, e.g. '.rotation[y]' or 'RootNode.rotation'")
    kind: PropertyKind
    value_type: ValueType = ValueType.SCALAR
    times: tuple[float, ...] = Field(min_length=1)
    values: tuple[float | bool | str, ...]

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "values" not in data:
            return data
        value_type = ValueType(data.get("value_type", ValueType.SCALAR))
        coerced = dict(data)
        coerced["values"] = _coerce_values(value_type, data["values"])
        if "times" in data:
            coerced["times"] = tuple(float(t) for t in data["times"])
        return coerced

    @model_validator(mode="after")
    def _validate_shape(self) -> Track:
        parsed = TrackPath.parse(self.path)

        if self.value_type not in _ALLOWED_VALUE_TYPES[self.kind]:
            raise ValueError(
                f"{self.kind.value} track {self.path!r} cannot carry {self.value_type.value} values"
            )
        if parsed.axis is not None and self.value_type is not ValueType.SCALAR:
            raise ValueError(f"Per-axis track {self.path!r} must be scalar")

        previous = -math.inf
        for t in self.times:
            if not math.isfinite(t) or t < 0:
                raise ValueError(f"Track {self.path!r} has invalid time {t}")
            if t <= previous:
                raise ValueError(f"Track {self.path!r} times must be strictly increasing")
            previous = t

        expected = len(self.times) * self.value_type.component_count
        if len(self.values) != expected:
            raise ValueError(
                f"Track {self.path!r} has {len(self.values)} values, expected {expected} "
                f"({len(self.times)} samples x {self.value_type.component_count} components)"
            )
        return self

    @classmethod
    def scalar(
        cls, path: str, kind: PropertyKind, times: Sequence[float], values: Sequence[float]
    ) -> Track:
        return cls(path=path, kind=kind, value_type=ValueType.SCALAR, times=times, values=values)

    @classmethod
    def vector(
        cls,
        path: str,
        kind: PropertyKind,
        times: Sequence[float],
        rows: Iterable[Sequence[float]],
    ) -> Track:
        """Build a 3-component track from one (x, y, z) row per sample."""
        flat = [component for row in rows for component in row]
        return cls(path=path, kind=kind, value_type=ValueType.VECTOR3, times=times, values=flat)

    @property
    def target(self) -> TrackPath:
        return TrackPath.parse(self.path)

    @property
    def component_count(self) -> int:
        return self.value_type.component_count

    @property
    def sample_count(self) -> int:
        return len(self.times)

    def value_rows(self) -> np.ndarray:
        """Numeric values reshaped to (samples, components)."""
        if not self.value_type.numeric:
            raise TypeError(f"Track {self.path!r} holds {self.value_type.value} values")
        return np.asarray(self.values, dtype=np.float64).reshape(
            self.sample_count, self.component_count
        )

    def replace(self, **changes: Any) -> Track:
        """Return a validated copy with ``changes`` applied."""
        data = {
            "path": self.path,
            "kind": self.kind,
            "value_type": self.value_type,
            "times": self.times,
            "values": self.values,
        }
        data.update(changes)
        return Track.model_validate(data)


class AnimationClip(BaseModel):
    """Named bundle of tracks sharing a nominal duration.

    Track times are expected to lie within ``[0, duration]`` but this is not
    enforced; presets may generate samples past the clip duration.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    duration: float = Field(gt=0)
    tracks: tuple[Track, ...] = ()

    def track_paths(self) -> list[str]:
        return [track.path for track in self.tracks]

    def get_track(self, path: str) -> Track:
        """Return the first track addressing ``path``.

        Raises:
            KeyError: If no track has that path
        """
        for track in self.tracks:
            if track.path == path:
                return track
        raise KeyError(f"Clip {self.name!r} has no track {path!r}")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
