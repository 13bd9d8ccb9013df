"""Tests for the easing library."""

from __future__ import annotations

import math

import pytest

from keyforge.core.easing import (
    EASINGS,
    EasingType,
    UnknownEasingError,
    get_easing,
    is_identity,
    list_easings,
    resolve_easing_type,
)


class TestBoundaries:
    """Every easing pins its endpoints exactly."""

    @pytest.mark.parametrize("easing", list(EasingType))
    def test_endpoints_exact(self, easing: EasingType) -> None:
        """f(0) == 0 and f(1) == 1 with no float error."""
        fn = get_easing(easing)
        assert fn(0.0) == 0.0
        assert fn(1.0) == 1.0

    @pytest.mark.parametrize("easing", list(EasingType))
    def test_out_of_range_clamps(self, easing: EasingType) -> None:
        """Progress outside [0, 1] clamps to the endpoints."""
        fn = get_easing(easing)
        assert fn(-0.5) == 0.0
        assert fn(1.5) == 1.0


class TestMidpoints:
    """Each family matches its canonical formula at p = 0.5."""

    @pytest.mark.parametrize(
        ("easing", "expected"),
        [
            ("linear", 0.5),
            ("easeInQuad", 0.25),
            ("easeOutQuad", 0.75),
            ("easeInOutQuad", 0.5),
            ("easeInCubic", 0.125),
            ("easeOutCubic", 0.875),
            ("easeInOutCubic", 0.5),
            ("easeInQuart", 0.0625),
            ("easeOutQuart", 0.9375),
            ("easeInOutQuart", 0.5),
            ("easeInExpo", 2 ** -5),
            ("easeOutExpo", 1 - 2 ** -5),
            ("easeInOutExpo", 0.5),
            ("easeOutBounce", 0.765625),
            ("easeInBounce", 0.234375),
            ("easeInOutBounce", 0.5),
            ("easeInBack", 0.125 * 2.70158 - 0.25 * 1.70158),
            ("easeOutBack", 1 - 0.125 * 2.70158 + 0.25 * 1.70158),
            ("easeInOutBack", 0.5),
            ("easeInOutElastic", 0.5),
        ],
    )
    def test_half_way(self, easing: str, expected: float) -> None:
        """Canonical value at the midpoint."""
        assert get_easing(easing)(0.5) == pytest.approx(expected, abs=1e-3)

    def test_elastic_midpoints(self) -> None:
        """Elastic in/out at 0.5 follow the closed form."""
        c4 = 2 * math.pi / 3
        expected_in = -math.pow(2, -5) * math.sin((5 - 10.75) * c4)
        expected_out = math.pow(2, -5) * math.sin((5 - 0.75) * c4) + 1
        assert get_easing("easeInElastic")(0.5) == pytest.approx(expected_in)
        assert get_easing("easeOutElastic")(0.5) == pytest.approx(expected_out)

    def test_back_overshoots(self) -> None:
        """Back easings leave [0, 1] in the interior."""
        assert get_easing("easeInBack")(0.2) < 0.0
        assert get_easing("easeOutBack")(0.8) > 1.0


class TestLookup:
    """Tests for identifier resolution."""

    @pytest.mark.parametrize("name", ["easeInQuad", "ease_in_quad", "EASE-IN-QUAD", " easeinquad "])
    def test_any_case_or_separator(self, name: str) -> None:
        """Identifiers are case and separator insensitive."""
        assert resolve_easing_type(name) is EasingType.EASE_IN_QUAD

    def test_enum_member_passes_through(self) -> None:
        """Enum members resolve to themselves."""
        assert resolve_easing_type(EasingType.EASE_OUT_BACK) is EasingType.EASE_OUT_BACK

    def test_unknown_raises(self) -> None:
        """Unknown identifiers raise UnknownEasingError, a KeyError."""
        with pytest.raises(UnknownEasingError, match="wobbly"):
            get_easing("wobbly")
        assert issubclass(UnknownEasingError, KeyError)

    def test_is_identity(self) -> None:
        """Only linear is the identity."""
        assert is_identity("linear")
        assert not is_identity("easeInQuad")

    def test_registry_complete(self) -> None:
        """All 22 identifiers are registered."""
        assert len(list_easings()) == 22
        assert set(EASINGS) == set(EasingType)
