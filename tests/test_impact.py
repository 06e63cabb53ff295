"""
Impact Tests
============

City impact buckets, policy mitigation and system stress.
"""

import pytest

from heatrisk_engine.engine.heatwave import NO_HEATWAVE, detect_heatwave
from heatrisk_engine.engine.impact import (
    city_impact,
    classify_stress,
    mitigation_fraction,
    system_impact,
)
from heatrisk_engine.models.tiers import CityRiskTier, StressTier


class TestCityImpact:
    """Tests for city-wide risk."""

    @pytest.mark.parametrize(
        "heat_index,percent,tier,vulnerable,centers",
        [
            (25, 15, CityRiskTier.LOW, 13500, 5),
            (28, 35, CityRiskTier.MODERATE, 31500, 5),
            (38, 65, CityRiskTier.HIGH, 58500, 7),
            (52, 85, CityRiskTier.CRITICAL, 76500, 9),
        ],
    )
    def test_buckets(self, heat_index, percent, tier, vulnerable, centers):
        result = city_impact(heat_index)
        assert result.risk_percent == percent
        assert result.risk_tier == tier
        assert result.vulnerable_population == vulnerable
        assert result.active_centers == centers

    def test_policy_centers_added_uncapped(self):
        assert city_impact(38, policy_centers=3).active_centers == 10
        assert city_impact(38, policy_centers=250).active_centers == 257

    def test_to_model(self):
        model = city_impact(52).to_model()
        assert model.risk_percent == 85
        assert model.risk_tier == CityRiskTier.CRITICAL


class TestMitigation:
    """Policy mitigation saturates at the cap."""

    def test_linear_below_cap(self):
        assert mitigation_fraction(0) == 0.0
        assert mitigation_fraction(10) == pytest.approx(0.2)

    def test_saturates_at_twenty_centers(self):
        assert mitigation_fraction(20) == mitigation_fraction(100)
        assert mitigation_fraction(20) == pytest.approx(0.4)

    def test_hospital_load_stops_decreasing(self):
        heatwave = detect_heatwave([40, 40, 40, 40, 40])
        at_cap = system_impact(85, heatwave, 2.5, policy_centers=20)
        beyond = system_impact(85, heatwave, 2.5, policy_centers=100)
        assert at_cap.hospital_load_raw == beyond.hospital_load_raw
        assert at_cap.mitigation == beyond.mitigation


class TestSystemImpact:
    """Tests for hospital load, emergency calls and cooling demand."""

    def test_baseline_without_heatwave(self):
        result = system_impact(65, NO_HEATWAVE, 0.0)
        assert result.hospital_load_raw == pytest.approx(39.0)
        assert result.hospital_load == 39
        # 39 * 1.5 = 58.5 rounds up
        assert result.emergency_increase == 59
        assert result.cooling_demand == 65
        assert result.stress_tier == StressTier.STABLE

    def test_severe_heatwave_extreme_tier(self):
        heatwave = detect_heatwave([36, 36, 36, 36, 30])
        result = system_impact(85, heatwave, 1.7)
        assert result.hospital_load_raw == pytest.approx(74.5875)
        assert result.hospital_load == 75
        assert result.emergency_increase == 112
        assert result.cooling_demand == 100
        assert result.stress_tier == StressTier.HIGH

    def test_caps(self):
        heatwave = detect_heatwave([45] * 7)
        result = system_impact(100, heatwave, 10.0)
        assert result.hospital_load == 100
        assert result.emergency_increase == 150
        assert result.cooling_demand == 100
        assert result.stress_tier == StressTier.CRITICAL

    def test_policy_centers_raise_cooling_demand(self):
        result = system_impact(15, NO_HEATWAVE, 0.0, policy_centers=10)
        assert result.cooling_demand == 20

    def test_mitigation_lowers_hospital_load(self):
        without = system_impact(85, NO_HEATWAVE, 0.0)
        with_policy = system_impact(85, NO_HEATWAVE, 0.0, policy_centers=10)
        assert with_policy.hospital_load_raw == pytest.approx(without.hospital_load_raw * 0.8)


class TestClassifyStress:
    """Stress tier boundaries on hospital load."""

    @pytest.mark.parametrize(
        "load,tier",
        [
            (0, StressTier.STABLE),
            (49.99, StressTier.STABLE),
            (50, StressTier.ELEVATED),
            (69.99, StressTier.ELEVATED),
            (70, StressTier.HIGH),
            (84.99, StressTier.HIGH),
            (85, StressTier.CRITICAL),
            (100, StressTier.CRITICAL),
        ],
    )
    def test_boundaries(self, load, tier):
        assert classify_stress(load) == tier
