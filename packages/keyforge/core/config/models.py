"""Configuration models for keyforge."""

from __future__ import annotations

from enum import Enum
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from keyforge.core.utils.math import clamp

logger = logging.getLogger(__name__)

SPEED_RANGE: tuple[float, float] = (0.1, 5.0)
INTENSITY_RANGE: tuple[float, float] = (0.1, 3.0)
DURATION_RANGE: tuple[float, float] = (0.5, 30.0)


class TimeBasePolicy(str, Enum):
    """How per-axis tracks with different sample times are reconciled on export."""

    UNION = "union"
    REFERENCE = "reference"


class EulerOrder(str, Enum):
    """Intrinsic rotation order used when merging Euler axes into a quaternion."""

    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"


class AnimationParams(BaseModel):
    """Runtime parameters for building a clip from a preset.

    Out-of-range ``speed``, ``intensity`` and ``duration`` are clamped to
    their documented bounds, never rejected. ``easing`` is resolved when the
    clip is built, so an unknown identifier surfaces there.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    speed: float = Field(default=1.0, description="Playback rate multiplier [0.1, 5.0]")
    intensity: float = Field(default=1.0, description="Motion amplitude multiplier [0.1, 3.0]")
    duration: float = Field(default=3.0, description="Clip duration in seconds [0.5, 30]")
    loop_count: PositiveInt | Literal["infinite"] = Field(
        default="infinite", description="Number of playback loops"
    )
    easing: str = Field(default="linear", description="Easing identifier, e.g. 'easeInQuad'")

    @field_validator("speed")
    @classmethod
    def _clamp_speed(cls, v: float) -> float:
        return _clamped("speed", v, SPEED_RANGE)

    @field_validator("intensity")
    @classmethod
    def _clamp_intensity(cls, v: float) -> float:
        return _clamped("intensity", v, INTENSITY_RANGE)

    @field_validator("duration")
    @classmethod
    def _clamp_duration(cls, v: float) -> float:
        return _clamped("duration", v, DURATION_RANGE)


def _clamped(name: str, value: float, bounds: tuple[float, float]) -> float:
    result = float(clamp(value, *bounds))
    if result != value:
        logger.debug(f"Clamped {name} {value} -> {result}")
    return result


class ResolverConfig(BaseModel):
    """Export-time track resolution settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    time_base_policy: TimeBasePolicy = Field(
        default=TimeBasePolicy.UNION,
        description="Reconcile mismatched axis times by union resampling or a reference axis",
    )
    euler_order: EulerOrder = Field(
        default=EulerOrder.XYZ, description="Intrinsic axis order of Euler rotation tracks"
    )
    target_name: str | None = Field(
        default=None, description="Explicit animation target node; overrides the scene's own"
    )


class AppConfig(BaseModel):
    """Application configuration.

    Loaded from a JSON or YAML file; every field has a default.
    """

    model_config = ConfigDict(extra="forbid")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Root logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Plain text or structured JSON log lines"
    )
    output_dir: Path = Field(default=Path("exports"), description="Where exported files go")
    params: AnimationParams = Field(default_factory=AnimationParams)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v
