"""Tests for oscillators and decays."""

from __future__ import annotations

import math

import pytest

from keyforge.core.physics import (
    damped_oscillation,
    damped_value,
    exponential_decay,
    pendulum,
    spring_motion,
)


class TestDamped:
    """Tests for damped oscillation."""

    def test_starts_at_amplitude(self) -> None:
        """At t = 0 with no phase the value is the amplitude."""
        assert damped_oscillation(2.0, 0.5, 3.0, 10, 1.0)[0] == pytest.approx(2.0)

    def test_envelope_decays(self) -> None:
        """Samples stay inside the exponential envelope."""
        times = [i / 49 * 4.0 for i in range(50)]
        values = damped_oscillation(1.0, 0.8, 6.0, 50, 4.0)
        for t, v in zip(times, values):
            assert abs(v) <= math.exp(-0.8 * t) + 1e-12

    def test_single_sample_matches_curve(self) -> None:
        """damped_value agrees with the sampled curve."""
        values = damped_oscillation(1.5, 0.3, 2.0, 5, 2.0, phase=0.4)
        assert values[2] == pytest.approx(damped_value(1.5, 0.3, 2.0, 1.0, phase=0.4))

    def test_no_damping_is_cosine(self) -> None:
        """Zero damping reduces to a plain cosine."""
        assert damped_value(1.0, 0.0, math.pi, 1.0) == pytest.approx(-1.0)


class TestSpringAndPendulum:
    """Tests for spring and pendulum models."""

    def test_spring_uses_natural_frequency(self) -> None:
        """ω = √(k/m) and c = damping / 2m."""
        values = spring_motion(1.0, 4.0, 1.0, 0.0, 3, math.pi / 2)
        # ω = 2, so half a period has elapsed at t = π/2
        assert values == pytest.approx([1.0, math.cos(math.pi / 2), -1.0], abs=1e-12)

    @pytest.mark.parametrize(("k", "m", "name"), [(1.0, 0.0, "mass"), (0.0, 1.0, "spring")])
    def test_spring_validates(self, k: float, m: float, name: str) -> None:
        """Mass and spring constant must be positive."""
        with pytest.raises(ValueError, match=name):
            spring_motion(1.0, k, m, 0.1, 5, 1.0)

    def test_pendulum_period(self) -> None:
        """A full small-angle period returns to the start angle."""
        length = 2.0
        period = 2 * math.pi * math.sqrt(length / 9.8)
        values = pendulum(0.3, length, 5, period)
        assert values[0] == pytest.approx(0.3)
        assert values[2] == pytest.approx(-0.3)
        assert values[-1] == pytest.approx(0.3)

    def test_pendulum_length_validated(self) -> None:
        """Length must be positive."""
        with pytest.raises(ValueError, match="length"):
            pendulum(0.3, 0.0, 5, 1.0)

    def test_exponential_decay(self) -> None:
        """Friction decay follows initial·e^(-rate·t)."""
        values = exponential_decay(4.0, 1.0, 3, 2.0)
        assert values == pytest.approx([4.0, 4.0 * math.exp(-1.0), 4.0 * math.exp(-2.0)])
