"""
Predictive Risk
===============

Five-day predictive risk series with a momentum accumulator.

For each leading forecast day, in order:
    1. base risk = ordinal (1-4) of the day's max temperature, using the
       heat-index tier boundaries applied to raw temperature
    2. momentum += 0.5 on a hot day (>= 32 °C), otherwise
       momentum = max(0, momentum - 0.3)
    3. score = (base risk + momentum) × (1.2 if vulnerable else 1.0),
       rounded to one decimal place

Momentum starts at 0 for every pass and is carried across the days of
that pass only; the value after the last day is reported on its own.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from heatrisk_engine.engine.heat_index import classify_risk
from heatrisk_engine.engine.parameters import DEFAULT_PARAMETERS, EngineParameters
from heatrisk_engine.models.snapshot import PredictivePoint


@dataclass(frozen=True, slots=True)
class PredictiveResult:
    """
    Predictive series plus the final momentum.

    Attributes:
        points: One entry per folded forecast day
        momentum: Momentum after the last folded day
    """

    points: Tuple[PredictivePoint, ...]
    momentum: float


def base_risk(temp_c: float) -> int:
    """Base risk ordinal (1-4) for a daily max temperature."""
    return classify_risk(temp_c).ordinal


def step_momentum(
    momentum: float,
    temp_c: float,
    params: Optional[EngineParameters] = None,
) -> float:
    """Advance the momentum accumulator by one forecast day."""
    params = params or DEFAULT_PARAMETERS
    if temp_c >= params.momentum_hot_threshold_c:
        return momentum + params.momentum_step
    return max(0.0, momentum - params.momentum_decay)


def predictive_risk(
    daily_max_temps: Sequence[float],
    is_vulnerable: bool = False,
    params: Optional[EngineParameters] = None,
) -> PredictiveResult:
    """
    Fold the leading forecast days into a predictive risk series.

    Args:
        daily_max_temps: Daily maxima, index 0 is today
        is_vulnerable: Apply the vulnerability modifier
        params: Engine parameters (defaults if None)

    Returns:
        PredictiveResult (empty series and zero momentum for no forecast)
    """
    params = params or DEFAULT_PARAMETERS
    modifier = params.vulnerable_modifier if is_vulnerable else 1.0

    momentum = 0.0
    points: List[PredictivePoint] = []
    for offset, temp in enumerate(daily_max_temps[: params.predictive_horizon_days]):
        momentum = step_momentum(momentum, temp, params)
        score = (base_risk(temp) + momentum) * modifier
        points.append(PredictivePoint(
            day_offset=offset,
            score=round(score, 1),
            momentum=momentum,
        ))

    return PredictiveResult(points=tuple(points), momentum=momentum)
