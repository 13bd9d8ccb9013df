"""Serializer contract, export filenames and the export entry point."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from keyforge.core.animation import AnimationClip, Track
from keyforge.core.export.graph import ExportTarget
from keyforge.core.export.resolver import ExportTrackResolver
from keyforge.core.utils.formatting import sanitize_filename
from keyforge.core.utils.json import dumps_json

logger = logging.getLogger(__name__)

FILENAME_TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S"
DEFAULT_EXTENSION = "glb"


@runtime_checkable
class ClipSerializer(Protocol):
    """Encodes a resolved clip plus its scene into a self-contained document.

    Called once per export. Implementations raise on failure and the error
    reaches the caller unchanged. ``file_extension`` names the container the
    bytes form and becomes the extension of the exported filename.
    """

    file_extension: str

    def serialize(self, target: ExportTarget, clip: AnimationClip) -> bytes: ...


class JsonClipSerializer:
    """Writes the scene and one animation as a UTF-8 JSON document.

    Each resolved track becomes a channel addressing ``node`` and ``path``
    with a linear sampler over its times and flat values.
    """

    file_extension = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def serialize(self, target: ExportTarget, clip: AnimationClip) -> bytes:
        document = {
            "asset": {"generator": "keyforge"},
            "scene": target.root.to_dict(),
            "animations": [
                {
                    "name": clip.name,
                    "duration": clip.duration,
                    "channels": [self._channel(track) for track in clip.tracks],
                }
            ],
        }
        return dumps_json(document, indent=self.indent).encode("utf-8")

    @staticmethod
    def _channel(track: Track) -> dict[str, Any]:
        path = track.target
        return {
            "target": {"node": path.node, "path": path.property, "axis": path.axis},
            "valueType": track.value_type.value,
            "sampler": {
                "interpolation": "LINEAR",
                "input": list(track.times),
                "output": list(track.values),
            },
        }


@dataclass(frozen=True)
class ExportArtifact:
    """Serialized bytes with the filename they should be saved under."""

    filename: str
    data: bytes

    def write(self, directory: str | Path) -> Path:
        """Write the artifact into ``directory`` (created if missing)."""
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path = out_dir / self.filename
        out_path.write_bytes(self.data)
        return out_path


def generate_filename(
    name: str, now: datetime | None = None, extension: str = DEFAULT_EXTENSION
) -> str:
    """Build ``{sanitized-name}_{YYYY-MM-DDTHH-MM-SS}.{extension}``.

    Characters outside ``[A-Za-z0-9_-]`` become ``_``. The timestamp is UTC;
    naive datetimes are taken to already be UTC.

    Example:
        >>> generate_filename("Y-axis rotation", datetime(2024, 5, 1, 12, 30, 5))
        'Y-axis_rotation_2024-05-01T12-30-05.glb'
    """
    if now is None:
        now = datetime.now(UTC)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    stamp = now.astimezone(UTC).strftime(FILENAME_TIMESTAMP_FORMAT)
    return f"{sanitize_filename(name)}_{stamp}.{extension.lstrip('.')}"


def export_clip(
    clip: AnimationClip,
    target: ExportTarget,
    serializer: ClipSerializer,
    *,
    resolver: ExportTrackResolver | None = None,
    now: datetime | None = None,
    extension: str | None = None,
) -> ExportArtifact:
    """Resolve ``clip`` against ``target`` and serialize it exactly once.

    Resolution errors abort before the serializer is called. Serializer
    errors propagate unchanged; nothing is retried. The filename takes the
    serializer's ``file_extension`` unless ``extension`` overrides it.

    Raises:
        ExportError: If the clip cannot be resolved against the scene
    """
    resolver = resolver or ExportTrackResolver()
    resolved = resolver.resolve(clip, target)
    data = serializer.serialize(target, resolved)
    filename = generate_filename(
        clip.name, now=now, extension=extension or serializer.file_extension
    )
    logger.info(f"Exported {clip.name!r} as {filename} ({len(data)} bytes)")
    return ExportArtifact(filename=filename, data=data)
