"""Tests for math utilities."""

from __future__ import annotations

import numpy as np
import pytest

from keyforge.core.utils.math import clamp, lerp, sample_at_fractional_index


def test_clamp() -> None:
    """Values are clamped into range."""
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11.5, 0.0, 10.0) == 10.0


def test_lerp() -> None:
    """Linear interpolation hits both ends and the middle."""
    assert lerp(2, 4, 0.0) == 2.0
    assert lerp(2, 4, 1.0) == 4.0
    assert lerp(2, 4, 0.5) == 3.0


@pytest.fixture
def rows() -> np.ndarray:
    """Three two-component rows."""
    return np.array([[0.0, 10.0], [1.0, 20.0], [3.0, 40.0]])


def test_fractional_index_interpolates(rows: np.ndarray) -> None:
    """Between rows the result is a linear blend."""
    assert sample_at_fractional_index(rows, 1.5).tolist() == [2.0, 30.0]


def test_fractional_index_exact_rows(rows: np.ndarray) -> None:
    """Whole indices return the rows themselves."""
    assert sample_at_fractional_index(rows, 0.0).tolist() == [0.0, 10.0]
    assert sample_at_fractional_index(rows, 2.0).tolist() == [3.0, 40.0]


def test_fractional_index_extrapolates(rows: np.ndarray) -> None:
    """Outside the range the first or last segment is extended."""
    assert sample_at_fractional_index(rows, -0.5).tolist() == [-0.5, 5.0]
    assert sample_at_fractional_index(rows, 2.5).tolist() == [4.0, 50.0]
