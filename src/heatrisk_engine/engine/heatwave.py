"""
Heatwave Detection
==================

Prefix scan over the daily forecast.

A heatwave is a run of hot days that starts today. The scan stops at the
first day below the threshold; later hot days never extend the run, and a
cool day 0 means no heatwave at all.

Levels:
    3 days   → Moderate (load multiplier 1.1)
    4 days   → Severe   (load multiplier 1.25)
    5+ days  → Extreme  (load multiplier 1.4)
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from heatrisk_engine.engine.parameters import DEFAULT_PARAMETERS, EngineParameters
from heatrisk_engine.models.snapshot import HeatwaveState
from heatrisk_engine.models.tiers import HeatwaveLevel


HEATWAVE_MULTIPLIERS = {
    HeatwaveLevel.MODERATE: 1.1,
    HeatwaveLevel.SEVERE: 1.25,
    HeatwaveLevel.EXTREME: 1.4,
}


@dataclass(frozen=True, slots=True)
class HeatwaveResult:
    """
    Heatwave detection result.

    Attributes:
        active: Leading run is at least the minimum length
        level: Severity, None when inactive
        consecutive_days: Leading run length, 0 when inactive
    """

    active: bool
    level: Optional[HeatwaveLevel]
    consecutive_days: int

    @property
    def multiplier(self) -> float:
        """System load multiplier (1.0 when inactive)."""
        if self.level is None:
            return 1.0
        return HEATWAVE_MULTIPLIERS[self.level]

    def to_state(self) -> HeatwaveState:
        """Convert to the snapshot model."""
        return HeatwaveState(
            active=self.active,
            level=self.level,
            consecutive_days=self.consecutive_days,
            multiplier=self.multiplier,
        )


NO_HEATWAVE = HeatwaveResult(active=False, level=None, consecutive_days=0)


def leading_hot_days(daily_max_temps: Sequence[float], threshold_c: float) -> int:
    """Count qualifying days from day 0 up to the first cooler day."""
    count = 0
    for temp in daily_max_temps:
        if temp < threshold_c:
            break
        count += 1
    return count


def detect_heatwave(
    daily_max_temps: Sequence[float],
    params: Optional[EngineParameters] = None,
) -> HeatwaveResult:
    """
    Detect a heatwave starting today.

    Args:
        daily_max_temps: Daily maxima, index 0 is today
        params: Engine parameters (defaults if None)

    Returns:
        HeatwaveResult (inactive with zero days below the minimum run)
    """
    params = params or DEFAULT_PARAMETERS
    days = leading_hot_days(daily_max_temps, params.heatwave_threshold_c)

    if days < params.heatwave_min_days:
        return NO_HEATWAVE

    if days == params.heatwave_min_days:
        level = HeatwaveLevel.MODERATE
    elif days == params.heatwave_min_days + 1:
        level = HeatwaveLevel.SEVERE
    else:
        level = HeatwaveLevel.EXTREME

    return HeatwaveResult(active=True, level=level, consecutive_days=days)
