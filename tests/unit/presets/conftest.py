"""Fixtures for preset tests."""

from __future__ import annotations

import pytest

from keyforge.core.animation import Track
from keyforge.core.presets import AnimationPreset, PresetCatalog, PresetCategory
from keyforge.core.presets.tracks import position, rotation


def _nod(intensity: float, duration: float) -> Track:
    return rotation("x", [0.0, duration / 2, duration], [0.0, 0.3 * intensity, 0.0])


def _lift(intensity: float, duration: float) -> list[Track]:
    return [position("y", [0.0, duration], [0.0, intensity])]


@pytest.fixture
def catalog() -> PresetCatalog:
    """Empty catalog, isolated from the global one."""
    return PresetCatalog()


@pytest.fixture
def nod_preset() -> AnimationPreset:
    """Single-generator emote preset."""
    return AnimationPreset(
        id="test-nod",
        name="Test nod",
        category=PresetCategory.EMOTE,
        description="Dips forward once.",
        icon="🙂",
        generators=(_nod,),
    )


@pytest.fixture
def nod_and_lift_preset() -> AnimationPreset:
    """Two generators, one returning a list."""
    return AnimationPreset(
        id="nod-and-lift",
        name="Nod and lift",
        category=PresetCategory.COMBINED,
        description="Nods while rising.",
        icon="⬆",
        generators=(_nod, _lift),
    )
