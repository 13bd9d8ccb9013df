"""Tests for multi-component loci."""

from __future__ import annotations

import math

import pytest

from keyforge.core.curves import circular, elliptical, figure_eight, spiral


class TestLoci:
    """Tests for circle, ellipse, spiral and figure-eight paths."""

    def test_circular_stays_on_radius(self) -> None:
        """Every sample lies on the circle and the loop closes."""
        path = circular(2.0, 13)
        assert len(path.x) == len(path.z) == 13
        for x, z in zip(path.x, path.z):
            assert math.hypot(x, z) == pytest.approx(2.0)
        assert (path.x[0], path.z[0]) == pytest.approx((2.0, 0.0))
        assert (path.x[-1], path.z[-1]) == pytest.approx((2.0, 0.0), abs=1e-12)

    def test_elliptical_axes(self) -> None:
        """Quarter turns reach the ellipse's two radii."""
        path = elliptical(3.0, 1.0, 5)
        assert path.x == pytest.approx([3.0, 0.0, -3.0, 0.0, 3.0], abs=1e-12)
        assert path.z == pytest.approx([0.0, 1.0, 0.0, -1.0, 0.0], abs=1e-12)

    def test_spiral_climbs_linearly(self) -> None:
        """Height rises linearly while the radius stays fixed."""
        path = spiral(1.0, 4.0, 2.0, 5)
        assert path.y == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])
        for x, z in zip(path.x, path.z):
            assert math.hypot(x, z) == pytest.approx(1.0)

    def test_spiral_descends_with_negative_height(self) -> None:
        """A negative height descends."""
        assert spiral(1.0, -2.0, 1.0, 3).y == pytest.approx([0.0, -1.0, -2.0])

    def test_figure_eight_crosses_origin(self) -> None:
        """The Lissajous figure passes through the origin at its centre."""
        path = figure_eight(1.0, 5)
        assert (path.x[2], path.y[2]) == pytest.approx((0.0, 0.0), abs=1e-12)
        assert path.x[1] == pytest.approx(1.0)
