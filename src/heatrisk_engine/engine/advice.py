"""
Safety Advice
=============

Static advice table keyed by risk tier.
"""

from typing import Dict, List, Union

from heatrisk_engine.models.snapshot import AdviceItem
from heatrisk_engine.models.tiers import RiskTier


_SAFE_ADVICE = [
    AdviceItem(title="Enjoy Outdoors", text="Conditions are safe for outdoor activities.", icon="wb-sunny"),
    AdviceItem(title="Stay Active", text="Great weather for exercise or walking.", icon="directions-run"),
    AdviceItem(title="Open Windows", text="Good time to ventilate your home naturally.", icon="window"),
]

_CAUTION_ADVICE = [
    AdviceItem(title="Drink More Water", text="Heat is rising. Hydrate before you feel thirsty.", icon="water-drop"),
    AdviceItem(title="Seek Shade", text="Take frequent breaks in shaded areas when outdoors.", icon="park"),
    AdviceItem(title="Dress Light", text="Wear light-colored, loose-fitting clothes to reflect heat.", icon="checkroom"),
]

# DANGER and EXTREME share one list
_DANGER_ADVICE = [
    AdviceItem(title="Stay Indoors", text="Avoid outdoor activities immediately. Stay in air-conditioning.", icon="home"),
    AdviceItem(title="Check Vulnerable", text="Check on elderly neighbors, children, and pets.", icon="people"),
    AdviceItem(title="Find Cooling", text="If you lack AC, go to a public library or cooling center.", icon="ac-unit"),
]

ADVICE_TABLE: Dict[RiskTier, List[AdviceItem]] = {
    RiskTier.SAFE: _SAFE_ADVICE,
    RiskTier.CAUTION: _CAUTION_ADVICE,
    RiskTier.DANGER: _DANGER_ADVICE,
    RiskTier.EXTREME: _DANGER_ADVICE,
}


def advice_for(tier: Union[RiskTier, str]) -> List[AdviceItem]:
    """
    Return the ordered advice list for a tier.

    Accepts the enum or its string value. Unknown tiers yield an empty list.
    """
    try:
        key = RiskTier(tier)
    except ValueError:
        return []
    return list(ADVICE_TABLE.get(key, []))
