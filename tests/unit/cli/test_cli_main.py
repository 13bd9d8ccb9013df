"""Unit tests for the keyforge command line."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import pytest

from keyforge.cli.main import build_arg_parser, main


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """main() reconfigures logging; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def scene_file(tmp_path: Path) -> Path:
    """YAML scene with a single RootNode under the scene root."""
    path = tmp_path / "scene.yaml"
    path.write_text("root:\n  name: Scene\n  children:\n    - name: RootNode\n", encoding="utf-8")
    return path


@pytest.fixture
def branching_scene_file(tmp_path: Path) -> Path:
    """JSON scene whose root has two children."""
    path = tmp_path / "branching.json"
    path.write_text(
        json.dumps({"root": {"name": "Scene", "children": [{"name": "Hero"}, {"name": "Prop"}]}}),
        encoding="utf-8",
    )
    return path


def test_build_prints_clip_json(capsys: pytest.CaptureFixture[str]) -> None:
    """build writes the params and clip as JSON on stdout."""
    assert main(["build", "rotation-y", "--duration", "2", "--intensity", "1"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document["params"]["duration"] == 2.0
    (track,) = document["clip"]["tracks"]
    assert track["path"] == ".rotation[y]"
    assert track["values"] == [0.0, pytest.approx(2 * math.pi)]


def test_build_clamps_params(capsys: pytest.CaptureFixture[str]) -> None:
    """Out-of-range overrides are clamped like any other params."""
    assert main(["build", "pulse", "--intensity", "10", "--duration", "0.01"]) == 0
    params = json.loads(capsys.readouterr().out)["params"]
    assert params["intensity"] == 3.0
    assert params["duration"] == 0.5


def test_build_to_file(tmp_path: Path) -> None:
    """-o writes the document to a file instead of stdout."""
    out = tmp_path / "clips" / "spin.json"
    assert main(["build", "Y-axis rotation", "-o", str(out)]) == 0
    assert json.loads(out.read_text(encoding="utf-8"))["clip"]["name"] == "Y-axis rotation"


def test_build_uses_config_params(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Config-file params apply unless overridden on the command line."""
    config = tmp_path / "keyforge.yaml"
    config.write_text("params:\n  duration: 5\n  intensity: 2\n", encoding="utf-8")
    assert main(["--config", str(config), "build", "rotation-y", "--intensity", "1"]) == 0
    params = json.loads(capsys.readouterr().out)["params"]
    assert params["duration"] == 5.0
    assert params["intensity"] == 1.0


def test_unknown_preset_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """User errors print a message and exit with 1."""
    assert main(["build", "moonwalk"]) == 1
    assert "Unknown preset" in capsys.readouterr().err


def test_unknown_easing_fails(capsys: pytest.CaptureFixture[str]) -> None:
    """Easing identifiers are checked when the clip is built."""
    assert main(["build", "rotation-y", "--easing", "sproing"]) == 1
    assert "sproing" in capsys.readouterr().err


def test_missing_config_fails(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """A missing config file is reported before any command runs."""
    assert main(["--config", str(tmp_path / "nope.yaml"), "list"]) == 1
    assert "Could not load config" in capsys.readouterr().err


def test_list_by_category(capsys: pytest.CaptureFixture[str]) -> None:
    """list prints a table titled with the preset count."""
    assert main(["list", "--category", "rotation"]) == 0
    assert "Presets (12)" in capsys.readouterr().out


def test_show(capsys: pytest.CaptureFixture[str]) -> None:
    """show describes the preset."""
    assert main(["show", "gravity-bounce"]) == 0
    out = capsys.readouterr().out
    assert "Gravity bounce" in out
    assert "physics" in out


def test_export_writes_file(scene_file: Path, tmp_path: Path) -> None:
    """export resolves against the scene and saves a timestamped JSON file."""
    out_dir = tmp_path / "exports"
    assert main(["export", "rotation-y", "--scene", str(scene_file), "-o", str(out_dir)]) == 0
    (written,) = out_dir.iterdir()
    assert written.name.startswith("Y-axis_rotation_")
    assert written.suffix == ".json"
    document = json.loads(written.read_text(encoding="utf-8"))
    (channel,) = document["animations"][0]["channels"]
    assert channel["target"]["node"] == "RootNode"
    assert channel["valueType"] == "quaternion"


def test_export_ambiguous_scene(
    branching_scene_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Without --target an ambiguous scene is an error."""
    args = ["export", "nod", "--scene", str(branching_scene_file), "-o", str(tmp_path / "out")]
    assert main(args) == 1
    assert "name the animation target" in capsys.readouterr().err


def test_export_with_target(branching_scene_file: Path, tmp_path: Path) -> None:
    """--target picks the node."""
    out_dir = tmp_path / "out"
    args = ["export", "nod", "--scene", str(branching_scene_file), "--target", "Prop"]
    assert main([*args, "-o", str(out_dir)]) == 0
    (written,) = out_dir.iterdir()
    document = json.loads(written.read_text(encoding="utf-8"))
    assert {c["target"]["node"] for c in document["animations"][0]["channels"]} == {"Prop"}


def test_log_level_is_case_insensitive() -> None:
    """--log-level accepts lower-case names."""
    args = build_arg_parser().parse_args(["--log-level", "debug", "list"])
    assert args.log_level == "DEBUG"
