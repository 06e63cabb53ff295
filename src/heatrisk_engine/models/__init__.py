"""
Data Models
===========

Pydantic models for the HeatRisk engine.

This module re-exports all data models for convenient access.

Models:
    Input:
        - WeatherSample, DailyForecast, HourlyForecast: Upstream weather
        - UserPreference: Caller-owned toggles
        - EngineInput: Flat contract for one engine pass
        - HeatIndexReading: Precomputed heat index for alert checks

    Tiers:
        - RiskTier, HeatwaveLevel, CityRiskTier, StressTier, HeatTrend

    Output:
        - AdviceItem, HeatwaveState, PredictivePoint
        - CityImpact, SystemImpact
        - RiskSnapshot: Complete output contract
"""

from heatrisk_engine.models.input import (
    DailyForecast,
    EngineInput,
    ForecastPayloadError,
    HeatIndexReading,
    HourlyForecast,
    UserPreference,
    WeatherSample,
)
from heatrisk_engine.models.tiers import (
    CityRiskTier,
    HeatTrend,
    HeatwaveLevel,
    RiskTier,
    StressTier,
)
from heatrisk_engine.models.snapshot import (
    AdviceItem,
    CityImpact,
    HeatwaveState,
    PredictivePoint,
    RiskSnapshot,
    SystemImpact,
)

__all__ = [
    # Input
    "WeatherSample",
    "DailyForecast",
    "HourlyForecast",
    "UserPreference",
    "EngineInput",
    "ForecastPayloadError",
    "HeatIndexReading",
    # Tiers
    "RiskTier",
    "HeatwaveLevel",
    "CityRiskTier",
    "StressTier",
    "HeatTrend",
    # Output
    "AdviceItem",
    "HeatwaveState",
    "PredictivePoint",
    "CityImpact",
    "SystemImpact",
    "RiskSnapshot",
]
