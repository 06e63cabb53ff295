"""
HeatRisk Engine Main Application
================================

FastAPI entry point exposing the heat risk engine.

The service never fetches weather itself. Callers post resolved values
(or an already-fetched forecast payload) and receive a RiskSnapshot.

Endpoints:
    GET  /                      - Service information
    GET  /health                - Liveness probe
    GET  /metrics               - Request counters and last result
    POST /snapshot              - Compute a snapshot from EngineInput
    POST /snapshot/open-meteo   - Compute a snapshot from a forecast payload
    POST /alert                 - Heat alert decision for a heat index or WeatherSample
    GET  /advice/{tier}         - Advice list for a risk tier
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from heatrisk_engine.alerts import HeatAlertPolicy
from heatrisk_engine.config import settings
from heatrisk_engine.engine import RiskEngineGraph, advice_for
from heatrisk_engine.engine.parameters import EngineParameters
from heatrisk_engine.models.input import (
    EngineInput,
    ForecastPayloadError,
    HeatIndexReading,
    WeatherSample,
)
from heatrisk_engine.models.snapshot import RiskSnapshot
from heatrisk_engine.models.tiers import RiskTier


logger = logging.getLogger(__name__)


# =============================================================================
# Global State
# =============================================================================

_engine: Optional[RiskEngineGraph] = None
_alert_policy: Optional[HeatAlertPolicy] = None
_startup_time: float = 0.0

# Counters
_snapshots_computed: int = 0
_alerts_raised: int = 0
_last_snapshot: Optional[RiskSnapshot] = None


# =============================================================================
# Getters
# =============================================================================

def get_engine() -> RiskEngineGraph:
    if _engine is None:
        raise HTTPException(status_code=503, detail="Engine not initialized")
    return _engine

def get_alert_policy() -> HeatAlertPolicy:
    if _alert_policy is None:
        raise HTTPException(status_code=503, detail="Alert policy not initialized")
    return _alert_policy


def _run_engine(engine_input: EngineInput) -> JSONResponse:
    """Compute a snapshot and record counters."""
    global _snapshots_computed, _last_snapshot

    snapshot = get_engine().compute(engine_input)
    _snapshots_computed += 1
    _last_snapshot = snapshot
    return JSONResponse(snapshot.model_dump(mode="json"))


# =============================================================================
# Lifespan Management
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    global _engine, _alert_policy, _startup_time

    _startup_time = time.time()
    logger.info(f"Starting {settings.service.name} {settings.service.version}")

    _engine = RiskEngineGraph(EngineParameters.from_config(settings.engine))
    _alert_policy = HeatAlertPolicy.from_config(settings.alerts)

    logger.info(
        f"Alert policy: enabled={_alert_policy.enabled}, "
        f"threshold={_alert_policy.threshold}"
    )

    yield

    logger.info("Shutdown complete")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="HeatRisk Engine",
    description="Deterministic heat risk and civic impact engine",
    version=settings.service.version,
    lifespan=lifespan,
)


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "HeatRisk Engine",
        "version": settings.service.version,
        "name": settings.service.name,
        "status": "running",
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?

    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
    })


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Counters and the last computed tier for observability."""
    last: Dict[str, Any] = {}
    if _last_snapshot is not None:
        last = {
            "last_heat_index": _last_snapshot.heat_index,
            "last_risk_tier": _last_snapshot.risk_tier.value,
            "last_stress_tier": _last_snapshot.system.stress_tier.value,
        }

    return JSONResponse({
        "uptime_seconds": round(time.time() - _startup_time, 1),
        "snapshots_computed": _snapshots_computed,
        "alerts_raised": _alerts_raised,
        **last,
    })


@app.post("/snapshot")
async def snapshot(engine_input: EngineInput) -> JSONResponse:
    """Compute a RiskSnapshot from resolved inputs."""
    return _run_engine(engine_input)


@app.post("/snapshot/open-meteo")
async def snapshot_from_forecast(
    payload: Dict[str, Any],
    is_vulnerable: bool = Query(default=False),
    policy_centers: int = Query(default=0, ge=0),
    current_hour: Optional[int] = Query(default=None, ge=0),
) -> JSONResponse:
    """Compute a RiskSnapshot from an already-fetched forecast payload."""
    try:
        engine_input = EngineInput.from_open_meteo(
            payload,
            is_vulnerable=is_vulnerable,
            policy_centers=policy_centers,
            current_hour=current_hour,
        )
    except ForecastPayloadError as e:
        logger.warning(f"Rejected forecast payload: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except ValidationError as e:
        logger.warning(f"Invalid forecast values: {e.error_count()} error(s)")
        raise HTTPException(status_code=422, detail=str(e))

    return _run_engine(engine_input)


@app.post("/alert")
async def alert(reading: Union[HeatIndexReading, WeatherSample]) -> JSONResponse:
    """Heat alert decision for a heat index or for current conditions."""
    global _alerts_raised

    policy = get_alert_policy()
    if isinstance(reading, HeatIndexReading):
        heat_alert = policy.evaluate(reading.heat_index)
    else:
        heat_alert = policy.evaluate_weather(reading)
    if heat_alert is not None:
        _alerts_raised += 1

    return JSONResponse({"alert": heat_alert.to_dict() if heat_alert else None})


@app.get("/advice/{tier}")
async def advice(tier: str) -> JSONResponse:
    """Advice list for a risk tier (case-insensitive)."""
    try:
        risk_tier = RiskTier(tier.upper())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown risk tier: {tier}")

    return JSONResponse({
        "tier": risk_tier.value,
        "advice": [item.model_dump() for item in advice_for(risk_tier)],
    })


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "heatrisk_engine.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=False,
    )
