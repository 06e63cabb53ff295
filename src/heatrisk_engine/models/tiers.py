"""
Tier Enums
==========

Fixed, ordered categories produced by the engine.

Each enum value is the exact string shown to users, so snapshots can be
serialized and compared without a lookup table.

Tiers:
    - RiskTier: Personal risk from heat index (SAFE → EXTREME)
    - HeatwaveLevel: Severity of an active heatwave
    - CityRiskTier: City-wide risk bucket
    - StressTier: Civic infrastructure strain from hospital load
    - HeatTrend: Direction of the next few hours of heat
"""

from enum import Enum


class RiskTier(str, Enum):
    """
    Personal heat risk tier, a total function of heat index.

    Boundaries are left-inclusive on the lower bound:
        < 27      SAFE
        [27, 32)  CAUTION
        [32, 41)  DANGER
        >= 41     EXTREME
    """

    SAFE = "SAFE"
    CAUTION = "CAUTION"
    DANGER = "DANGER"
    EXTREME = "EXTREME"

    @property
    def ordinal(self) -> int:
        """1-based severity ordinal (SAFE=1 ... EXTREME=4)."""
        return _RISK_ORDER.index(self) + 1


_RISK_ORDER = [RiskTier.SAFE, RiskTier.CAUTION, RiskTier.DANGER, RiskTier.EXTREME]


class HeatwaveLevel(str, Enum):
    """
    Heatwave severity by consecutive qualifying days.

    Attributes:
        MODERATE: Exactly 3 days
        SEVERE: Exactly 4 days
        EXTREME: 5 or more days
    """

    MODERATE = "Moderate"
    SEVERE = "Severe"
    EXTREME = "Extreme"


class CityRiskTier(str, Enum):
    """City-wide risk bucket, one per RiskTier."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    CRITICAL = "Critical"


class StressTier(str, Enum):
    """
    Downstream system stress, derived from hospital load.

    Boundaries:
        < 50      Stable
        [50, 70)  Elevated
        [70, 85)  High
        >= 85     Critical
    """

    STABLE = "Stable"
    ELEVATED = "Elevated"
    HIGH = "High"
    CRITICAL = "Critical"


class HeatTrend(str, Enum):
    """Short-term heat direction from the hourly forecast."""

    RISING = "Rising"
    DECREASING = "Decreasing"
    STABLE = "Stable"
