"""
Heat Index Tests
================

Rothfusz regression, display rounding and risk tier boundaries.
"""

import math
import sys

import pytest

from heatrisk_engine.engine.heat_index import (
    classify_risk,
    compute_heat_index,
    display_heat_index,
)
from heatrisk_engine.engine.parameters import round_half_up
from heatrisk_engine.models.tiers import RiskTier


class TestHeatIndex:
    """Tests for the heat index polynomial."""

    def test_matches_reference_polynomial(self):
        """T=32, R=60 evaluates the documented coefficients exactly."""
        t, r = 32.0, 60.0
        expected = (
            -8.784695
            + 1.61139411 * t
            + 2.338549 * r
            - 0.14611605 * t * r
            - 0.012308094 * t * t
            - 0.01642482777 * r * r
            + 0.002211732 * t * t * r
            + 0.00072546 * t * r * r
            - 0.000003582 * t * t * r * r
        )
        assert compute_heat_index(t, r) == pytest.approx(expected, abs=1e-9)
        assert compute_heat_index(t, r) == pytest.approx(37.0743, abs=1e-4)

    def test_display_value_is_rounded(self):
        assert display_heat_index(32.0, 60.0) == 37
        assert display_heat_index(38.0, 55.0) == 52
        assert display_heat_index(20.0, 50.0) == 25

    def test_no_range_checks(self):
        """Out-of-domain inputs still return a float."""
        assert isinstance(compute_heat_index(-10.0, 0.0), float)
        assert isinstance(compute_heat_index(60.0, 100.0), float)


class TestRounding:
    """Display rounding rounds halves up."""

    def test_half_rounds_up(self):
        assert round_half_up(6.5) == 7
        assert round_half_up(8.5) == 9
        assert round_half_up(58.5) == 59

    def test_regular_values(self):
        assert round_half_up(6.49) == 6
        assert round_half_up(0.0) == 0


class TestClassifyRisk:
    """Tier boundaries are left-inclusive and gap-free."""

    @pytest.mark.parametrize(
        "value,tier",
        [
            (26.999, RiskTier.SAFE),
            (27, RiskTier.CAUTION),
            (31.999, RiskTier.CAUTION),
            (32, RiskTier.DANGER),
            (40.999, RiskTier.DANGER),
            (41, RiskTier.EXTREME),
            (-40, RiskTier.SAFE),
            (120, RiskTier.EXTREME),
        ],
    )
    def test_boundaries(self, value, tier):
        assert classify_risk(value) == tier

    def test_just_below_caution_is_not_caution(self):
        assert classify_risk(26.999) != RiskTier.CAUTION

    def test_ordinals(self):
        assert [t.ordinal for t in RiskTier] == [1, 2, 3, 4]


class TestOverflow:
    """Display value for temperatures that overflow the polynomial."""

    def test_huge_temperature_saturates_high(self):
        assert not math.isfinite(compute_heat_index(1e155, 50.0))
        assert display_heat_index(1e155, 50.0) == int(sys.float_info.max)
        assert display_heat_index(-1e155, 50.0) == int(sys.float_info.max)

    def test_dry_overflow_saturates_low(self):
        """At 0% humidity the T² coefficient is negative."""
        assert display_heat_index(1e155, 0.0) == -int(sys.float_info.max)

    def test_largest_float_temperature(self):
        value = display_heat_index(sys.float_info.max, 100.0)
        assert classify_risk(value) == RiskTier.EXTREME
