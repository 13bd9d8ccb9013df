"""Tests for seeded noise curves."""

from __future__ import annotations

import numpy as np
import pytest

from keyforge.core.curves import glitch_pulses, jitter, make_rng, organic_noise, random_walk


class TestOrganicNoise:
    """Tests for four-octave sine noise."""

    def test_bounded_by_amplitude(self) -> None:
        """Normalized weights keep samples inside ±amplitude."""
        values = organic_noise(2.0, 3.0, 200, seed=4.2)
        assert len(values) == 200
        assert max(abs(v) for v in values) <= 2.0

    def test_seed_changes_shape(self) -> None:
        """Different seeds give different curves."""
        assert organic_noise(1.0, 1.0, 20, seed=0.0) != organic_noise(1.0, 1.0, 20, seed=1.0)

    def test_zero_seed_starts_at_zero(self) -> None:
        """With no phase offset every octave starts at sin(0)."""
        assert organic_noise(1.0, 1.0, 10)[0] == 0.0


class TestRandomWalk:
    """Tests for the bounded random walk."""

    def test_same_seed_same_walk(self) -> None:
        """Identical seeds reproduce identical walks."""
        assert random_walk(1.0, 50, seed=1701) == random_walk(1.0, 50, seed=1701)

    def test_different_seed_different_walk(self) -> None:
        """Different seeds diverge."""
        assert random_walk(1.0, 50, seed=1) != random_walk(1.0, 50, seed=2)

    def test_starts_at_zero_and_stays_bounded(self) -> None:
        """Walk begins at 0 and never leaves ±amplitude."""
        values = random_walk(0.5, 500, seed=3)
        assert values[0] == 0.0
        assert len(values) == 500
        assert all(-0.5 <= v <= 0.5 for v in values)

    def test_step_size_limited(self) -> None:
        """Each step moves at most 0.1·amplitude."""
        values = random_walk(2.0, 100, seed=11)
        assert max(abs(b - a) for a, b in zip(values, values[1:])) <= 0.2 + 1e-12

    def test_shared_generator_advances(self) -> None:
        """Passing one Generator to successive calls yields different walks."""
        rng = make_rng(5)
        assert random_walk(1.0, 20, seed=rng) != random_walk(1.0, 20, seed=rng)


class TestJitterAndGlitch:
    """Tests for jitter and glitch pulses."""

    def test_jitter_range(self) -> None:
        """Jitter stays inside [-A/2, A/2)."""
        values = jitter(1.0, 300, seed=7)
        assert all(-0.5 <= v < 0.5 for v in values)

    def test_glitch_never_fires_at_zero_chance(self) -> None:
        """Zero chance means a flat signal."""
        assert glitch_pulses(1.0, 30, chance=0.0, seed=404) == [0.0] * 30

    def test_glitch_reproducible(self) -> None:
        """Same seed, same glitches."""
        a = glitch_pulses(1.0, 60, chance=0.3, seed=404)
        b = glitch_pulses(1.0, 60, chance=0.3, seed=404)
        assert a == b
        assert any(v != 0.0 for v in a)

    def test_glitch_chance_validated(self) -> None:
        """Chance must be a probability."""
        with pytest.raises(ValueError, match="chance"):
            glitch_pulses(1.0, 10, chance=1.5, seed=0)

    def test_make_rng_passes_generator_through(self) -> None:
        """An existing Generator is reused, not reseeded."""
        rng = np.random.default_rng(0)
        assert make_rng(rng) is rng
