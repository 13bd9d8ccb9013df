"""Tests for turbulence and the Lorenz attractor."""

from __future__ import annotations

import pytest

from keyforge.core.physics import lorenz_attractor, turbulence


class TestTurbulence:
    """Tests for three-octave turbulence."""

    def test_bounded(self) -> None:
        """Weights sum to 1, so samples stay inside ±amplitude."""
        values = turbulence(2.0, 3.0, 100, seed=1.5)
        assert len(values) == 100
        assert max(abs(v) for v in values) <= 2.0

    def test_deterministic(self) -> None:
        """No hidden randomness."""
        assert turbulence(1.0, 2.0, 30, seed=0.5) == turbulence(1.0, 2.0, 30, seed=0.5)


class TestLorenz:
    """Tests for Lorenz integration."""

    def test_first_sample_is_start(self) -> None:
        """The path begins at the start state."""
        path = lorenz_attractor(10, 0.01)
        assert (path.x[0], path.y[0], path.z[0]) == (1.0, 1.0, 1.0)
        assert len(path.x) == len(path.y) == len(path.z) == 10

    def test_single_euler_step(self) -> None:
        """The second sample is one forward-Euler step from the first."""
        path = lorenz_attractor(2, 0.01, start=(1.0, 2.0, 3.0))
        assert path.x[1] == pytest.approx(1.0 + 10.0 * (2.0 - 1.0) * 0.01)
        assert path.y[1] == pytest.approx(2.0 + (1.0 * (28.0 - 3.0) - 2.0) * 0.01)
        assert path.z[1] == pytest.approx(3.0 + (1.0 * 2.0 - 8.0 / 3.0 * 3.0) * 0.01)

    def test_stays_bounded(self) -> None:
        """A small step keeps the trajectory on the attractor."""
        path = lorenz_attractor(2000, 0.005)
        assert max(abs(v) for v in path.x + path.y + path.z) < 100.0

    def test_dt_validated(self) -> None:
        """Time step must be positive."""
        with pytest.raises(ValueError, match="dt"):
            lorenz_attractor(10, 0.0)
