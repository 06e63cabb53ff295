"""
HeatRisk Engine
===============

Deterministic heat risk and civic impact engine.

This package turns current weather, a daily forecast and a couple of user
toggles into a single immutable RiskSnapshot: heat index, risk tier, safety
advice, heatwave detection, a 5-day predictive risk series with momentum,
city-wide risk, and downstream system stress metrics.

Components:
    - models: Input contract, tier enums, snapshot output
    - engine: Pure calculations and the LangGraph recompute pipeline
    - alerts: Heat alert decision for background checks
    - main: FastAPI service exposing the engine

Example:
    from heatrisk_engine.engine import compute_snapshot
    from heatrisk_engine.models import EngineInput

    snapshot = compute_snapshot(EngineInput(
        temperature_c=38.0,
        relative_humidity=55.0,
        daily_max_temps=[36, 36, 36, 36, 30],
    ))
    print(snapshot.risk_tier, snapshot.system.stress_tier)
"""

__version__ = "0.1.0"
__author__ = "HeatRisk Project"

__all__ = [
    "__version__",
]
