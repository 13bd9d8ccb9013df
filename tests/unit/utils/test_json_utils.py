"""Tests for JSON and filename utilities."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

import numpy as np
import pytest

from keyforge.core.utils.formatting import sanitize_filename
from keyforge.core.utils.json import dumps_json, read_json, write_json


class Color(Enum):
    RED = "red"


@pytest.fixture
def temp_json_file(tmp_path: Path) -> Path:
    """Create a temporary JSON file path."""
    return tmp_path / "test.json"


def test_write_and_read_json(temp_json_file: Path) -> None:
    """Test writing and reading JSON files."""
    data = {"string": "value", "number": 42, "list": [1, 2, 3], "nested": {"key": "value"}}
    write_json(temp_json_file, data)
    assert read_json(temp_json_file) == data


def test_write_json_creates_parent_dirs(tmp_path: Path) -> None:
    """Test that write_json creates parent directories."""
    nested_path = tmp_path / "subdir" / "nested" / "test.json"
    write_json(nested_path, {"test": "value"})
    assert nested_path.exists()


def test_dumps_json_special_types() -> None:
    """numpy, Enum and Path values serialize to plain JSON."""
    text = dumps_json(
        {
            "array": np.array([1.5, 2.5]),
            "int": np.int64(3),
            "float": np.float32(0.5),
            "enum": Color.RED,
            "path": Path("exports"),
        },
        indent=None,
    )
    assert text == (
        '{"array": [1.5, 2.5], "int": 3, "float": 0.5, "enum": "red", "path": "exports"}'
    )


def test_read_json_rejects_non_object(temp_json_file: Path) -> None:
    """Only JSON objects are accepted."""
    temp_json_file.write_text("[1]", encoding="utf-8")
    with pytest.raises(ValueError, match="Expected JSON object"):
        read_json(temp_json_file)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Y-axis rotation", "Y-axis_rotation"),
        ("Pendulum swing (X)", "Pendulum_swing__X_"),
        ("plain_name-1", "plain_name-1"),
    ],
)
def test_sanitize_filename(name: str, expected: str) -> None:
    """Unsafe characters map one-to-one onto underscores."""
    assert sanitize_filename(name) == expected
