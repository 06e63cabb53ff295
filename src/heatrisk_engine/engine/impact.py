"""
City & System Impact
====================

City-wide risk and downstream infrastructure stress.

City impact buckets the heat index with the personal risk tiers:
    SAFE → 15% Low, CAUTION → 35% Moderate,
    DANGER → 65% High, EXTREME → 85% Critical

System impact:
    base_load        = risk_percent × 0.6
    momentum_factor  = 1 + momentum × 0.1
    mitigation       = min(0.4, policy_centers × 0.02)
    hospital_load    = min(100, base_load × heatwave × momentum_factor × (1 - mitigation))
    emergency        = min(200, round(hospital_load × 1.5))
    cooling_demand   = min(100, round(risk_percent × heatwave) + policy_centers × 0.5)

The heatwave result is a direct argument of system_impact, so it can only
be computed after heatwave detection for the same pass.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from heatrisk_engine.engine.heat_index import classify_risk
from heatrisk_engine.engine.heatwave import HeatwaveResult
from heatrisk_engine.engine.parameters import (
    DEFAULT_PARAMETERS,
    EngineParameters,
    round_half_up,
)
from heatrisk_engine.models.snapshot import CityImpact, SystemImpact
from heatrisk_engine.models.tiers import CityRiskTier, RiskTier, StressTier


CITY_RISK_TABLE: Dict[RiskTier, Tuple[int, CityRiskTier]] = {
    RiskTier.SAFE: (15, CityRiskTier.LOW),
    RiskTier.CAUTION: (35, CityRiskTier.MODERATE),
    RiskTier.DANGER: (65, CityRiskTier.HIGH),
    RiskTier.EXTREME: (85, CityRiskTier.CRITICAL),
}

BASE_LOAD_FACTOR = 0.6
MOMENTUM_LOAD_FACTOR = 0.1
EMERGENCY_FACTOR = 1.5
EMERGENCY_CAP = 200
COOLING_PER_POLICY_CENTER = 0.5


@dataclass(frozen=True, slots=True)
class CityImpactResult:
    """City-wide risk for one pass."""

    risk_percent: int
    risk_tier: CityRiskTier
    vulnerable_population: int
    active_centers: int

    def to_model(self) -> CityImpact:
        """Convert to the snapshot model."""
        return CityImpact(
            risk_percent=self.risk_percent,
            risk_tier=self.risk_tier,
            vulnerable_population=self.vulnerable_population,
            active_centers=self.active_centers,
        )


@dataclass(frozen=True, slots=True)
class SystemImpactResult:
    """
    Infrastructure stress for one pass.

    hospital_load_raw keeps the unrounded value the stress tier is
    derived from.
    """

    hospital_load_raw: float
    emergency_increase: int
    cooling_demand: int
    stress_tier: StressTier
    mitigation: float

    @property
    def hospital_load(self) -> int:
        """Hospital load rounded for display."""
        return round_half_up(self.hospital_load_raw)

    def to_model(self) -> SystemImpact:
        """Convert to the snapshot model."""
        return SystemImpact(
            hospital_load=self.hospital_load,
            emergency_increase=self.emergency_increase,
            cooling_demand=self.cooling_demand,
            stress_tier=self.stress_tier,
            mitigation=self.mitigation,
        )


def city_impact(
    heat_index: float,
    policy_centers: int = 0,
    params: Optional[EngineParameters] = None,
) -> CityImpactResult:
    """
    Compute city-wide risk from the heat index.

    Args:
        heat_index: Heat index for this pass
        policy_centers: Additional centers from the policy simulator (1:1, uncapped)
        params: Engine parameters (defaults if None)

    Returns:
        CityImpactResult
    """
    params = params or DEFAULT_PARAMETERS
    percent, tier = CITY_RISK_TABLE[classify_risk(heat_index)]

    vulnerable = round_half_up(
        params.city_population * params.vulnerable_ratio * (percent / 100)
    )
    base_centers = max(params.min_active_centers, round_half_up(percent / 10))

    return CityImpactResult(
        risk_percent=percent,
        risk_tier=tier,
        vulnerable_population=vulnerable,
        active_centers=base_centers + policy_centers,
    )


def mitigation_fraction(
    policy_centers: int,
    params: Optional[EngineParameters] = None,
) -> float:
    """Hospital load reduction from policy centers, saturating at the cap."""
    params = params or DEFAULT_PARAMETERS
    return min(params.mitigation_cap, policy_centers * params.mitigation_per_center)


def classify_stress(hospital_load: float) -> StressTier:
    """Stress tier for a (raw) hospital load percentage."""
    if hospital_load < 50:
        return StressTier.STABLE
    if hospital_load < 70:
        return StressTier.ELEVATED
    if hospital_load < 85:
        return StressTier.HIGH
    return StressTier.CRITICAL


def system_impact(
    risk_percent: float,
    heatwave: HeatwaveResult,
    momentum: float,
    policy_centers: int = 0,
    params: Optional[EngineParameters] = None,
) -> SystemImpactResult:
    """
    Compute downstream infrastructure metrics.

    Args:
        risk_percent: City risk percentage from city_impact
        heatwave: Heatwave result for the same pass (supplies the multiplier)
        momentum: Final predictive momentum for the same pass
        policy_centers: Additional centers from the policy simulator
        params: Engine parameters (defaults if None)

    Returns:
        SystemImpactResult
    """
    multiplier = heatwave.multiplier
    mitigation = mitigation_fraction(policy_centers, params)

    base_load = risk_percent * BASE_LOAD_FACTOR
    momentum_factor = 1 + momentum * MOMENTUM_LOAD_FACTOR
    mitigation_factor = 1 - mitigation

    hospital = min(100.0, base_load * multiplier * momentum_factor * mitigation_factor)
    emergency = min(EMERGENCY_CAP, round_half_up(hospital * EMERGENCY_FACTOR))
    cooling = min(
        100.0,
        round_half_up(risk_percent * multiplier) + policy_centers * COOLING_PER_POLICY_CENTER,
    )

    return SystemImpactResult(
        hospital_load_raw=hospital,
        emergency_increase=emergency,
        cooling_demand=round_half_up(cooling),
        stress_tier=classify_stress(hospital),
        mitigation=mitigation,
    )
