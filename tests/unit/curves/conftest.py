"""Fixtures for curve tests."""

from __future__ import annotations

import pytest

from keyforge.core.curves import Phase, phase


@pytest.fixture
def rise_and_hold() -> list[Phase]:
    """Two equal phases: linear rise from 0 to 1, then hold at 1."""
    return [phase(0, 1, 1), phase(1, 1, 1)]


@pytest.fixture
def three_phase_jump() -> list[Phase]:
    """Crouch, launch and land with quadratic easings."""
    return [
        phase(0, -0.5, 0.2, "ease-out"),
        phase(-0.5, 2.0, 0.5, "ease-in-out"),
        phase(2.0, 0.0, 0.3, "ease-in"),
    ]
