"""
Heat Index
==========

NOAA/Rothfusz regression and the heat-index risk tiers.

The regression is a fixed 9-term polynomial in temperature (T, °C) and
relative humidity (R, %):

    HI = c1 + c2·T + c3·R + c4·T·R + c5·T² + c6·R²
         + c7·T²·R + c8·T·R² + c9·T²·R²

It is only physically meaningful for T >= ~20 °C but is evaluated for any
input without range checks. When a huge temperature overflows the
polynomial, the displayed value saturates at the largest finite float with
the sign of the dominant T² term.
"""

import math
import sys

from heatrisk_engine.engine.parameters import round_half_up
from heatrisk_engine.models.tiers import RiskTier


# Celsius Rothfusz coefficients
C1 = -8.784695
C2 = 1.61139411
C3 = 2.338549
C4 = -0.14611605
C5 = -0.012308094
C6 = -0.01642482777
C7 = 0.002211732
C8 = 0.00072546
C9 = -0.000003582

# Lower bounds (inclusive) of CAUTION, DANGER and EXTREME
CAUTION_THRESHOLD = 27.0
DANGER_THRESHOLD = 32.0
EXTREME_THRESHOLD = 41.0


def compute_heat_index(temp_c: float, humidity: float) -> float:
    """
    Compute the heat index from temperature and relative humidity.

    Args:
        temp_c: Air temperature (°C)
        humidity: Relative humidity (%)

    Returns:
        Unrounded heat index
    """
    t = temp_c
    r = humidity
    return (
        C1
        + C2 * t
        + C3 * r
        + C4 * t * r
        + C5 * t * t
        + C6 * r * r
        + C7 * t * t * r
        + C8 * t * r * r
        + C9 * t * t * r * r
    )


def _overflow_limit(temp_c: float, humidity: float) -> float:
    """Largest finite float signed like the term that dominates as |T| grows."""
    leading = C5 + C7 * humidity + C9 * humidity * humidity
    if leading == 0:
        leading = (C2 + C4 * humidity + C8 * humidity * humidity) * temp_c
    return math.copysign(sys.float_info.max, leading)


def display_heat_index(temp_c: float, humidity: float) -> int:
    """Heat index rounded to the nearest integer for display."""
    value = compute_heat_index(temp_c, humidity)
    if not math.isfinite(value):
        value = _overflow_limit(temp_c, humidity)
    return round_half_up(value)


def classify_risk(value: float) -> RiskTier:
    """
    Map a heat index (or, for predictive scoring, a temperature) to a tier.

    The four ranges partition the real line with no gaps or overlaps.
    """
    if value < CAUTION_THRESHOLD:
        return RiskTier.SAFE
    if value < DANGER_THRESHOLD:
        return RiskTier.CAUTION
    if value < EXTREME_THRESHOLD:
        return RiskTier.DANGER
    return RiskTier.EXTREME
