"""Shared pytest fixtures for keyforge tests."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from keyforge.core.animation import AnimationClip, PropertyKind, Track
from keyforge.core.export import ExportTarget, SceneNode

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Scene Fixtures
# ============================================================================


@pytest.fixture
def root_node_scene() -> ExportTarget:
    """Scene wrapper with a single 'RootNode' child (the common export shape)."""
    return ExportTarget(root=SceneNode(name="Scene", children=(SceneNode(name="RootNode"),)))


@pytest.fixture
def branching_scene() -> ExportTarget:
    """Scene whose root has two children, so the target must be named."""
    return ExportTarget(
        root=SceneNode(
            name="Scene",
            children=(
                SceneNode(name="Body", children=(SceneNode(name="Head"),)),
                SceneNode(name="Prop"),
            ),
        )
    )


# ============================================================================
# Track Fixtures
# ============================================================================


@pytest.fixture
def spin_track() -> Track:
    """Two-sample Y rotation from 0 to 2π over 2 seconds."""
    return Track.scalar(".rotation[y]", PropertyKind.ROTATION_EULER, [0.0, 2.0], [0.0, math.tau])


@pytest.fixture
def ramp_track() -> Track:
    """Five-sample scalar ramp 0..4 on position x."""
    return Track.scalar(
        ".position[x]", PropertyKind.POSITION, [0.0, 0.25, 0.5, 0.75, 1.0], [0, 1, 2, 3, 4]
    )


@pytest.fixture
def euler_clip() -> AnimationClip:
    """Clip with three per-axis rotation tracks sharing one time base."""
    times = [0.0, 0.5, 1.0]
    return AnimationClip(
        name="Tumble",
        duration=1.0,
        tracks=(
            Track.scalar(".rotation[x]", PropertyKind.ROTATION_EULER, times, [0.0, 0.3, 0.6]),
            Track.scalar(".rotation[y]", PropertyKind.ROTATION_EULER, times, [0.0, -0.4, 0.2]),
            Track.scalar(".rotation[z]", PropertyKind.ROTATION_EULER, times, [0.1, 0.5, 1.0]),
        ),
    )
