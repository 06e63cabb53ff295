"""
Engine Parameters
=================

Tunable constants for the risk and impact calculations.

Defaults reproduce the published product behaviour. The service builds an
instance from config.yaml; library callers normally rely on the defaults.
Risk tier boundaries (27/32/41) are not parameters: they are fixed.
"""

import math
from dataclasses import dataclass

from heatrisk_engine.config import EngineConfig


@dataclass(frozen=True)
class EngineParameters:
    """
    Constants consumed by the engine stages.

    Loaded from configuration file.
    """

    # City model
    city_population: int = 500000
    vulnerable_ratio: float = 0.18
    min_active_centers: int = 5

    # Heatwave detection
    heatwave_threshold_c: float = 35.0
    heatwave_min_days: int = 3

    # Predictive risk
    predictive_horizon_days: int = 5
    vulnerable_modifier: float = 1.2
    momentum_hot_threshold_c: float = 32.0
    momentum_step: float = 0.5
    momentum_decay: float = 0.3

    # Policy mitigation
    mitigation_per_center: float = 0.02
    mitigation_cap: float = 0.4

    @classmethod
    def from_config(cls, config: EngineConfig) -> "EngineParameters":
        """Build parameters from the engine section of Settings."""
        return cls(**config.model_dump())


DEFAULT_PARAMETERS = EngineParameters()


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves toward +infinity.

    Display values (6.5 → 7) must not use banker's rounding.
    """
    return int(math.floor(value + 0.5))
