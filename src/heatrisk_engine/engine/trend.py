"""
Short-Term Heat Trend
=====================

Heat index for the next few hours and whether heat is rising.

The trend compares the average heat index of the next hours against the
current heat index with a ±1 dead band.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from heatrisk_engine.engine.heat_index import display_heat_index
from heatrisk_engine.models.input import HourlyForecast
from heatrisk_engine.models.tiers import HeatTrend


TREND_HOURS = 3
TREND_DEAD_BAND = 1.0


@dataclass(frozen=True, slots=True)
class TrendResult:
    """Upcoming hourly heat index values and their direction."""

    forecast_heat: List[int] = field(default_factory=list)
    trend: Optional[HeatTrend] = None


def next_hours_heat(
    hourly: Optional[HourlyForecast],
    current_hour: Optional[int],
    hours: int = TREND_HOURS,
) -> List[int]:
    """Heat index for the hours after current_hour that the forecast covers."""
    if hourly is None or current_hour is None:
        return []

    values = []
    for offset in range(1, hours + 1):
        idx = current_hour + offset
        if idx >= len(hourly.temperatures_c):
            break
        values.append(display_heat_index(hourly.temperatures_c[idx], hourly.humidities[idx]))
    return values


def classify_trend(current_heat_index: float, upcoming: List[int]) -> Optional[HeatTrend]:
    """Direction of the upcoming heat relative to now (None without data)."""
    if not upcoming:
        return None

    average = sum(upcoming) / len(upcoming)
    if average > current_heat_index + TREND_DEAD_BAND:
        return HeatTrend.RISING
    if average < current_heat_index - TREND_DEAD_BAND:
        return HeatTrend.DECREASING
    return HeatTrend.STABLE


def heat_trend(
    current_heat_index: float,
    hourly: Optional[HourlyForecast],
    current_hour: Optional[int],
) -> TrendResult:
    """Compute upcoming heat index values and the trend."""
    upcoming = next_hours_heat(hourly, current_hour)
    return TrendResult(
        forecast_heat=upcoming,
        trend=classify_trend(current_heat_index, upcoming),
    )
