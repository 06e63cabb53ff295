"""
Engine Module
=============

Deterministic risk and impact calculations.

This module implements the engine as pure functions plus a LangGraph
pipeline that runs them in a fixed order:
    - heat_index.py: Rothfusz heat index and risk tiers
    - advice.py: Static advice table
    - heatwave.py: Prefix-scan heatwave detection
    - predictive.py: Predictive risk series with momentum
    - impact.py: City impact and system stress
    - trend.py: Short-term hourly heat trend
    - graph.py: Pipeline definition and compute_snapshot()
    - monitor.py: Reactive single-snapshot wrapper

Key Design Decisions:
    - LangGraph is used for STRUCTURE, not LLM reasoning
    - Every pass recomputes every stage; nothing is memoized
    - Stage dependencies are explicit function arguments
"""

from heatrisk_engine.engine.advice import advice_for
from heatrisk_engine.engine.graph import RiskEngineGraph, compute_snapshot
from heatrisk_engine.engine.heat_index import (
    classify_risk,
    compute_heat_index,
    display_heat_index,
)
from heatrisk_engine.engine.heatwave import HeatwaveResult, detect_heatwave
from heatrisk_engine.engine.impact import (
    CityImpactResult,
    SystemImpactResult,
    city_impact,
    system_impact,
)
from heatrisk_engine.engine.monitor import RiskMonitor
from heatrisk_engine.engine.parameters import DEFAULT_PARAMETERS, EngineParameters
from heatrisk_engine.engine.predictive import PredictiveResult, predictive_risk

__all__ = [
    "compute_heat_index",
    "display_heat_index",
    "classify_risk",
    "advice_for",
    "detect_heatwave",
    "HeatwaveResult",
    "predictive_risk",
    "PredictiveResult",
    "city_impact",
    "CityImpactResult",
    "system_impact",
    "SystemImpactResult",
    "EngineParameters",
    "DEFAULT_PARAMETERS",
    "RiskEngineGraph",
    "compute_snapshot",
    "RiskMonitor",
]
