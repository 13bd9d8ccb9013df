"""Configuration models and loaders."""

from keyforge.core.config.loader import detect_format, load_app_config, load_config
from keyforge.core.config.models import (
    DURATION_RANGE,
    INTENSITY_RANGE,
    SPEED_RANGE,
    AnimationParams,
    AppConfig,
    EulerOrder,
    ResolverConfig,
    TimeBasePolicy,
)

__all__ = [
    "DURATION_RANGE",
    "INTENSITY_RANGE",
    "SPEED_RANGE",
    "AnimationParams",
    "AppConfig",
    "EulerOrder",
    "ResolverConfig",
    "TimeBasePolicy",
    "detect_format",
    "load_app_config",
    "load_config",
]
