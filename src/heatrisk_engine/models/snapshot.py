"""
Risk Snapshot Models
====================

This module defines the complete output contract of the engine.

A RiskSnapshot is rebuilt from scratch on every engine pass and is never
mutated afterwards. Callers observe the whole record instead of individual
fields, so a partially-updated snapshot can never be seen.

Output Contract:
    {
        "heat_index": 52,
        "risk_tier": "EXTREME",
        "advice": [{"title": "Stay Indoors", "text": "...", "icon": "home"}, ...],
        "heatwave": {
            "active": true,
            "level": "Severe",
            "consecutive_days": 4,
            "multiplier": 1.25
        },
        "predictive_risk": [{"day_offset": 0, "score": 3.5, "momentum": 0.5}, ...],
        "risk_momentum": 1.7,
        "city": {
            "risk_percent": 85,
            "risk_tier": "Critical",
            "vulnerable_population": 76500,
            "active_centers": 9
        },
        "system": {
            "hospital_load": 75,
            "emergency_increase": 112,
            "cooling_demand": 100,
            "stress_tier": "High",
            "mitigation": 0.0
        },
        "forecast_heat": [],
        "trend": null,
        "extreme_alert": true,
        "mitigation_protocol": "LEVEL 3"
    }

Design Rules:
    - Every field is always populated (empty forecast → inactive/empty/zero)
    - All values are deterministic for a given EngineInput
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from heatrisk_engine.models.tiers import (
    CityRiskTier,
    HeatTrend,
    HeatwaveLevel,
    RiskTier,
    StressTier,
)


class AdviceItem(BaseModel):
    """
    One safety tip shown for a risk tier.

    Attributes:
        title: Short headline
        text: One-sentence guidance
        icon: Icon key understood by the presentation layer
    """

    title: str
    text: str
    icon: str

    class Config:
        """Pydantic model configuration."""

        frozen = True


class HeatwaveState(BaseModel):
    """
    Heatwave detection result.

    Attributes:
        active: True when the leading run of hot days is long enough
        level: Severity, None when inactive
        consecutive_days: Length of the leading run, 0 when inactive
        multiplier: Load multiplier applied to system impact
    """

    active: bool = Field(default=False)
    level: Optional[HeatwaveLevel] = Field(default=None)
    consecutive_days: int = Field(default=0, ge=0)
    multiplier: float = Field(default=1.0, ge=1.0)

    class Config:
        """Pydantic model configuration."""

        frozen = True


class PredictivePoint(BaseModel):
    """
    Predictive risk score for one forecast day.

    Attributes:
        day_offset: Days from today (0 = today)
        score: (base risk + momentum) × vulnerability modifier, 1 decimal
        momentum: Momentum after folding this day
    """

    day_offset: int = Field(..., ge=0)
    score: float = Field(..., ge=0.0)
    momentum: float = Field(..., ge=0.0)

    class Config:
        """Pydantic model configuration."""

        frozen = True


class CityImpact(BaseModel):
    """
    City-wide risk derived from the heat index tier and policy centers.

    Attributes:
        risk_percent: City risk percentage (15/35/65/85)
        risk_tier: City risk bucket
        vulnerable_population: Estimated vulnerable residents at risk
        active_centers: Demand-driven centers plus policy centers
    """

    risk_percent: int = Field(..., ge=0, le=100)
    risk_tier: CityRiskTier
    vulnerable_population: int = Field(..., ge=0)
    active_centers: int = Field(..., ge=0)

    class Config:
        """Pydantic model configuration."""

        frozen = True


class SystemImpact(BaseModel):
    """
    Downstream civic infrastructure metrics.

    Attributes:
        hospital_load: Hospital load percent (0-100)
        emergency_increase: Emergency call increase percent (0-200)
        cooling_demand: Cooling grid demand percent (0-100)
        stress_tier: Qualitative stress bucket from hospital load
        mitigation: Fraction of load removed by policy centers (0-cap)
    """

    hospital_load: int = Field(..., ge=0, le=100)
    emergency_increase: int = Field(..., ge=0, le=200)
    cooling_demand: int = Field(..., ge=0, le=100)
    stress_tier: StressTier
    mitigation: float = Field(default=0.0, ge=0.0, le=1.0)

    class Config:
        """Pydantic model configuration."""

        frozen = True


class RiskSnapshot(BaseModel):
    """
    Complete, immutable result of one engine pass.

    This is the only thing the engine produces. Presentation and transport
    layers read its fields; nothing writes back into it.
    """

    heat_index: int = Field(..., description="Heat index rounded for display")
    risk_tier: RiskTier
    advice: List[AdviceItem] = Field(default_factory=list)
    heatwave: HeatwaveState = Field(default_factory=HeatwaveState)
    predictive_risk: List[PredictivePoint] = Field(default_factory=list)
    risk_momentum: float = Field(default=0.0, ge=0.0)
    city: CityImpact
    system: SystemImpact
    forecast_heat: List[int] = Field(
        default_factory=list,
        description="Heat index for the next few hours",
    )
    trend: Optional[HeatTrend] = Field(default=None)
    extreme_alert: bool = Field(
        default=False,
        description="True when the risk tier is EXTREME",
    )
    mitigation_protocol: str = Field(
        default="NORMAL",
        description="Heat mitigation protocol label",
    )

    class Config:
        """Pydantic model configuration."""

        frozen = True
