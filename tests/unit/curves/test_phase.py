"""Tests for multi-phase interpolation."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from keyforge.core.curves import Phase, PhaseEasing, evaluate_phases, multi_phase, phase


class TestMultiPhase:
    """Tests for multi_phase and evaluate_phases."""

    def test_documented_example(self, rise_and_hold: list[Phase]) -> None:
        """A linear rise followed by a hold."""
        assert multi_phase(rise_and_hold, 5) == [0.0, 0.5, 1.0, 1.0, 1.0]

    def test_boundary_sample_takes_later_phase(self) -> None:
        """A sample on a phase boundary starts the next phase, even across a jump."""
        values = multi_phase([phase(0, 1, 1), phase(5, 6, 1)], 3)
        assert values[1] == 5.0
        assert evaluate_phases([phase(0, 1, 1), phase(5, 6, 1)], 0.5) == 5.0

    def test_length_and_endpoints(self, three_phase_jump: list[Phase]) -> None:
        """The motion starts at the first start and ends at the last end."""
        values = multi_phase(three_phase_jump, 61)
        assert len(values) == 61
        assert values[0] == pytest.approx(0.0)
        assert values[-1] == pytest.approx(0.0)
        assert max(values) == pytest.approx(2.0, abs=0.05)

    def test_shares_are_renormalized(self) -> None:
        """Shares are relative weights, not absolute fractions."""
        a = multi_phase([phase(0, 1, 2), phase(1, 0, 2)], 9)
        b = multi_phase([phase(0, 1, 0.5), phase(1, 0, 0.5)], 9)
        assert a == pytest.approx(b)

    def test_phase_easing_is_quadratic(self) -> None:
        """ease-in reaches a quarter of the way at the phase midpoint."""
        assert evaluate_phases([phase(0, 4, 1, "ease-in")], 0.5) == pytest.approx(1.0)
        assert evaluate_phases([phase(0, 4, 1, "ease-out")], 0.5) == pytest.approx(3.0)

    def test_clamps_outside_unit_range(self, three_phase_jump: list[Phase]) -> None:
        """Before 0 holds the first start; past 1 holds the last end."""
        assert evaluate_phases(three_phase_jump, -0.1) == 0.0
        assert evaluate_phases(three_phase_jump, 1.5) == 0.0

    def test_zero_share_phase_is_skipped(self) -> None:
        """A zero-share phase occupies no progress."""
        values = multi_phase([phase(5, 5, 0), phase(0, 1, 1)], 3)
        assert values == pytest.approx([0.0, 0.5, 1.0])

    def test_empty_phases_rejected(self) -> None:
        """At least one phase is required."""
        with pytest.raises(ValueError, match="must not be empty"):
            multi_phase([], 5)

    def test_zero_total_share_rejected(self) -> None:
        """Shares must sum to a positive total."""
        with pytest.raises(ValueError, match="sum to > 0"):
            multi_phase([phase(0, 1, 0)], 5)

    def test_negative_share_rejected(self) -> None:
        """Phase validates its share."""
        with pytest.raises(ValidationError):
            Phase(start_value=0, end_value=1, share=-1)

    def test_unknown_phase_easing_rejected(self) -> None:
        """Only the four quadratic shapes are accepted."""
        with pytest.raises(ValueError):
            phase(0, 1, 1, "bounce")
        assert PhaseEasing("ease-in-out").easing_type.value == "easeInOutQuad"
