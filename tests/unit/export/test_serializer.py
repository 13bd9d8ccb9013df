"""Tests for serializers, export filenames and export_clip."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
import json
from pathlib import Path

import pytest

from keyforge.core.animation import AnimationClip, Track
from keyforge.core.export import (
    ClipSerializer,
    ExportArtifact,
    ExportTarget,
    JsonClipSerializer,
    NoAnimationTargetError,
    export_clip,
    generate_filename,
)

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 5, tzinfo=UTC)


class RecordingSerializer:
    """Serializer double that records each call."""

    file_extension = "glb"

    def __init__(self) -> None:
        self.calls: list[tuple[ExportTarget, AnimationClip]] = []

    def serialize(self, target: ExportTarget, clip: AnimationClip) -> bytes:
        self.calls.append((target, clip))
        return b"payload"


class ExplodingSerializer:
    file_extension = "glb"

    def serialize(self, target: ExportTarget, clip: AnimationClip) -> bytes:
        raise OSError("disk full")


@pytest.fixture
def spin_clip(spin_track: Track) -> AnimationClip:
    """Y-axis rotation clip with a single local track."""
    return AnimationClip(name="Y-axis rotation", duration=2.0, tracks=(spin_track,))


class TestGenerateFilename:
    """Tests for generate_filename."""

    def test_documented_example(self) -> None:
        """Spaces become underscores and the timestamp uses dashes."""
        assert generate_filename("Y-axis rotation", FIXED_NOW) == (
            "Y-axis_rotation_2024-05-01T12-30-05.glb"
        )

    def test_unsafe_characters(self) -> None:
        """Everything outside [A-Za-z0-9_-] is replaced one for one."""
        name = generate_filename("Newton's cradle (v2)", FIXED_NOW, extension="json")
        assert name == "Newton_s_cradle__v2__2024-05-01T12-30-05.json"

    def test_aware_time_converted_to_utc(self) -> None:
        """Offsets are normalized to UTC."""
        local = datetime(2024, 5, 1, 14, 30, 5, tzinfo=timezone(timedelta(hours=2)))
        assert generate_filename("clip", local).endswith("2024-05-01T12-30-05.glb")

    def test_naive_time_taken_as_utc(self) -> None:
        """Naive datetimes are not shifted."""
        assert generate_filename("clip", datetime(2024, 5, 1, 12, 30, 5)) == (
            "clip_2024-05-01T12-30-05.glb"
        )

    def test_extension_dot_optional(self) -> None:
        """A leading dot on the extension is tolerated."""
        assert generate_filename("clip", FIXED_NOW, extension=".gltf").endswith(".gltf")
        assert ".." not in generate_filename("clip", FIXED_NOW, extension=".gltf")


class TestJsonClipSerializer:
    """Tests for the JSON document layout."""

    def test_is_a_clip_serializer(self) -> None:
        """The JSON serializer satisfies the protocol."""
        assert isinstance(JsonClipSerializer(), ClipSerializer)

    def test_document_layout(
        self, root_node_scene: ExportTarget, spin_clip: AnimationClip
    ) -> None:
        """Scene and channels land in the expected places."""
        artifact = export_clip(spin_clip, root_node_scene, JsonClipSerializer(), now=FIXED_NOW)
        document = json.loads(artifact.data.decode("utf-8"))

        assert document["asset"] == {"generator": "keyforge"}
        assert document["scene"]["children"][0]["name"] == "RootNode"
        (animation,) = document["animations"]
        assert animation["name"] == "Y-axis rotation"
        assert animation["duration"] == 2.0
        (channel,) = animation["channels"]
        assert channel["target"] == {"node": "RootNode", "path": "rotation", "axis": None}
        assert channel["valueType"] == "quaternion"
        assert channel["sampler"]["interpolation"] == "LINEAR"
        assert channel["sampler"]["input"] == pytest.approx([0.0, 0.5, 1.0, 1.5, 2.0])
        assert len(channel["sampler"]["output"]) == 20


class TestExportClip:
    """Tests for export_clip."""

    def test_serializes_resolved_clip_once(
        self, root_node_scene: ExportTarget, spin_clip: AnimationClip
    ) -> None:
        """The serializer sees the resolved clip exactly once."""
        serializer = RecordingSerializer()
        artifact = export_clip(spin_clip, root_node_scene, serializer, now=FIXED_NOW)

        assert artifact == ExportArtifact(
            filename="Y-axis_rotation_2024-05-01T12-30-05.glb", data=b"payload"
        )
        assert len(serializer.calls) == 1
        target, clip = serializer.calls[0]
        assert target is root_node_scene
        assert clip.track_paths() == ["RootNode.rotation"]

    def test_filename_uses_serializer_extension(
        self, root_node_scene: ExportTarget, spin_clip: AnimationClip
    ) -> None:
        """A JSON document is saved as .json unless the caller overrides it."""
        artifact = export_clip(spin_clip, root_node_scene, JsonClipSerializer(), now=FIXED_NOW)
        assert artifact.filename == "Y-axis_rotation_2024-05-01T12-30-05.json"

        gltf = export_clip(
            spin_clip, root_node_scene, JsonClipSerializer(), now=FIXED_NOW, extension="gltf"
        )
        assert gltf.filename.endswith(".gltf")

    def test_resolution_error_skips_serializer(
        self, branching_scene: ExportTarget, spin_clip: AnimationClip
    ) -> None:
        """Nothing is serialized when resolution fails."""
        serializer = RecordingSerializer()
        with pytest.raises(NoAnimationTargetError):
            export_clip(spin_clip, branching_scene, serializer)
        assert serializer.calls == []

    def test_serializer_error_propagates(
        self, root_node_scene: ExportTarget, spin_clip: AnimationClip
    ) -> None:
        """Serializer failures reach the caller unchanged."""
        with pytest.raises(OSError, match="disk full"):
            export_clip(spin_clip, root_node_scene, ExplodingSerializer())

    def test_artifact_write(self, tmp_path: Path) -> None:
        """Artifacts write into a directory created on demand."""
        artifact = ExportArtifact(filename="clip.json", data=b"{}")
        out_path = artifact.write(tmp_path / "nested" / "out")
        assert out_path == tmp_path / "nested" / "out" / "clip.json"
        assert out_path.read_bytes() == b"{}"
