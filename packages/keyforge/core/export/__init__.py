"""Export-time track resolution and serialization."""

from keyforge.core.config.models import EulerOrder, ResolverConfig, TimeBasePolicy
from keyforge.core.export.errors import (
    ConflictingTracksError,
    ExportError,
    IrreconcilableTimeBaseError,
    NoAnimationTargetError,
)
from keyforge.core.export.graph import ExportTarget, SceneNode, resolve_animation_target
from keyforge.core.export.quaternion import (
    enforce_sign_continuity,
    euler_to_quaternion,
    quaternion_multiply,
    quaternion_to_euler_xyz,
)
from keyforge.core.export.resolver import ExportTrackResolver
from keyforge.core.export.serializer import (
    ClipSerializer,
    ExportArtifact,
    JsonClipSerializer,
    export_clip,
    generate_filename,
)

__all__ = [
    "ClipSerializer",
    "ConflictingTracksError",
    "EulerOrder",
    "ExportArtifact",
    "ExportError",
    "ExportTarget",
    "ExportTrackResolver",
    "IrreconcilableTimeBaseError",
    "JsonClipSerializer",
    "NoAnimationTargetError",
    "ResolverConfig",
    "SceneNode",
    "TimeBasePolicy",
    "enforce_sign_continuity",
    "euler_to_quaternion",
    "export_clip",
    "generate_filename",
    "quaternion_multiply",
    "quaternion_to_euler_xyz",
    "resolve_animation_target",
]
