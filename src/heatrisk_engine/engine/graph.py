"""
Engine Graph Definition
=======================

LangGraph pipeline for one full engine pass.

LangGraph is used for CONTROL FLOW only. Every node is a thin wrapper
around a pure function and the graph has no memory between invocations.

Graph Structure:
    START → compute_heat_index → classify_risk_tier → select_advice
          → detect_heatwave_run → fold_predictive_risk → assess_city_impact
          → assess_system_impact → project_trend → assemble_snapshot → END

The order is load-bearing: system impact consumes the heatwave result and
momentum written earlier in the same pass.
"""

import logging
from typing import Any, Dict, List, Optional, TypedDict

from langgraph.graph import StateGraph, END

from heatrisk_engine.engine.advice import advice_for
from heatrisk_engine.engine.heat_index import classify_risk, display_heat_index
from heatrisk_engine.engine.heatwave import HeatwaveResult, detect_heatwave
from heatrisk_engine.engine.impact import (
    CityImpactResult,
    SystemImpactResult,
    city_impact,
    system_impact,
)
from heatrisk_engine.engine.parameters import DEFAULT_PARAMETERS, EngineParameters
from heatrisk_engine.engine.predictive import PredictiveResult, predictive_risk
from heatrisk_engine.engine.trend import TrendResult, heat_trend
from heatrisk_engine.models.input import EngineInput
from heatrisk_engine.models.snapshot import AdviceItem, RiskSnapshot
from heatrisk_engine.models.tiers import RiskTier


logger = logging.getLogger(__name__)


class EngineGraphState(TypedDict, total=False):
    """
    Channels passed through the engine graph.

    Attributes:
        engine_input: Validated input for this pass
        params: Engine parameters
        heat_index: Rounded heat index
        risk_tier: Personal risk tier
        advice: Advice list for the tier
        heatwave: Heatwave detection result
        predictive: Predictive series and momentum
        city: City impact
        system: System impact
        trend: Hourly trend
        snapshot: Assembled output
    """
    engine_input: EngineInput
    params: EngineParameters
    heat_index: int
    risk_tier: RiskTier
    advice: List[AdviceItem]
    heatwave: HeatwaveResult
    predictive: PredictiveResult
    city: CityImpactResult
    system: SystemImpactResult
    trend: TrendResult
    snapshot: RiskSnapshot


class RiskEngineGraph:
    """
    LangGraph-based engine pipeline.

    Stateless: each call to compute() runs every stage from scratch and
    returns a new RiskSnapshot. Safe to share between callers.
    """

    def __init__(self, params: Optional[EngineParameters] = None) -> None:
        """
        Initialize the engine graph.

        Args:
            params: Engine parameters (uses defaults if None)
        """
        self.params = params or DEFAULT_PARAMETERS
        self._graph = self._build_graph()
        logger.info("RiskEngineGraph initialized")

    def _build_graph(self) -> StateGraph:
        """Build the LangGraph workflow."""
        workflow = StateGraph(EngineGraphState)

        stages = [
            ("compute_heat_index", self._heat_index_node),
            ("classify_risk_tier", self._risk_tier_node),
            ("select_advice", self._advice_node),
            ("detect_heatwave_run", self._heatwave_node),
            ("fold_predictive_risk", self._predictive_node),
            ("assess_city_impact", self._city_node),
            ("assess_system_impact", self._system_node),
            ("project_trend", self._trend_node),
            ("assemble_snapshot", self._assemble_node),
        ]
        for name, node in stages:
            workflow.add_node(name, node)

        workflow.set_entry_point(stages[0][0])
        for (current, _), (following, _) in zip(stages, stages[1:]):
            workflow.add_edge(current, following)
        workflow.add_edge(stages[-1][0], END)

        return workflow.compile()

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def _heat_index_node(self, state: EngineGraphState) -> Dict[str, Any]:
        engine_input = state["engine_input"]
        return {
            "heat_index": display_heat_index(
                engine_input.temperature_c, engine_input.relative_humidity
            ),
        }

    def _risk_tier_node(self, state: EngineGraphState) -> Dict[str, Any]:
        return {"risk_tier": classify_risk(state["heat_index"])}

    def _advice_node(self, state: EngineGraphState) -> Dict[str, Any]:
        return {"advice": advice_for(state["risk_tier"])}

    def _heatwave_node(self, state: EngineGraphState) -> Dict[str, Any]:
        engine_input = state["engine_input"]
        return {"heatwave": detect_heatwave(engine_input.daily_max_temps, state["params"])}

    def _predictive_node(self, state: EngineGraphState) -> Dict[str, Any]:
        engine_input = state["engine_input"]
        return {
            "predictive": predictive_risk(
                engine_input.daily_max_temps,
                engine_input.is_vulnerable,
                state["params"],
            ),
        }

    def _city_node(self, state: EngineGraphState) -> Dict[str, Any]:
        return {
            "city": city_impact(
                state["heat_index"],
                state["engine_input"].policy_centers,
                state["params"],
            ),
        }

    def _system_node(self, state: EngineGraphState) -> Dict[str, Any]:
        return {
            "system": system_impact(
                state["city"].risk_percent,
                state["heatwave"],
                state["predictive"].momentum,
                state["engine_input"].policy_centers,
                state["params"],
            ),
        }

    def _trend_node(self, state: EngineGraphState) -> Dict[str, Any]:
        engine_input = state["engine_input"]
        return {
            "trend": heat_trend(
                state["heat_index"], engine_input.hourly, engine_input.current_hour
            ),
        }

    def _assemble_node(self, state: EngineGraphState) -> Dict[str, Any]:
        heatwave = state["heatwave"]
        predictive = state["predictive"]
        trend = state["trend"]
        risk_tier = state["risk_tier"]

        snapshot = RiskSnapshot(
            heat_index=state["heat_index"],
            risk_tier=risk_tier,
            advice=state["advice"],
            heatwave=heatwave.to_state(),
            predictive_risk=list(predictive.points),
            risk_momentum=predictive.momentum,
            city=state["city"].to_model(),
            system=state["system"].to_model(),
            forecast_heat=trend.forecast_heat,
            trend=trend.trend,
            extreme_alert=risk_tier == RiskTier.EXTREME,
            mitigation_protocol="LEVEL 3" if heatwave.active else "NORMAL",
        )

        logger.debug(
            f"Engine pass: hi={snapshot.heat_index}, tier={risk_tier.value}, "
            f"heatwave={heatwave.consecutive_days}d, "
            f"momentum={predictive.momentum:.2f}, "
            f"stress={snapshot.system.stress_tier.value}"
        )

        return {"snapshot": snapshot}

    # -------------------------------------------------------------------------
    # Entry point
    # -------------------------------------------------------------------------

    def compute(self, engine_input: EngineInput) -> RiskSnapshot:
        """
        Run one full engine pass.

        Args:
            engine_input: Validated engine input

        Returns:
            Freshly built RiskSnapshot
        """
        result = self._graph.invoke({
            "engine_input": engine_input,
            "params": self.params,
        })
        return result["snapshot"]


_default_graph: Optional[RiskEngineGraph] = None


def get_default_graph() -> RiskEngineGraph:
    """Shared graph built with default parameters."""
    global _default_graph
    if _default_graph is None:
        _default_graph = RiskEngineGraph()
    return _default_graph


def compute_snapshot(
    engine_input: EngineInput,
    params: Optional[EngineParameters] = None,
) -> RiskSnapshot:
    """
    Compute a RiskSnapshot for one set of inputs.

    Args:
        engine_input: Validated engine input
        params: Engine parameters (defaults if None)

    Returns:
        RiskSnapshot with every field populated
    """
    if params is None or params == DEFAULT_PARAMETERS:
        return get_default_graph().compute(engine_input)
    return RiskEngineGraph(params).compute(engine_input)
