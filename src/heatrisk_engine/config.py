"""
HeatRisk Engine Configuration
=============================

This module handles configuration loading for the heat risk engine.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    HEATRISK_POPULATION       -> engine.city_population
    HEATRISK_ALERT_THRESHOLD  -> alerts.heat_index_threshold
    HEATRISK_ALERTS_ENABLED   -> alerts.enabled
    HEATRISK_PORT             -> server.port
    HEATRISK_LOG_LEVEL        -> logging.level

Example:
    from heatrisk_engine.config import settings

    print(settings.service.name)
    print(settings.engine.heatwave_threshold_c)
    print(settings.alerts.heat_index_threshold)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="heatrisk-engine", description="Service name")
    version: str = Field(default="v0.1.0", description="Service version")


class EngineConfig(BaseModel):
    """Constants used by the risk and impact calculations."""

    city_population: int = Field(
        default=500000,
        gt=0,
        description="Population used for the vulnerable estimate",
    )
    vulnerable_ratio: float = Field(
        default=0.18,
        ge=0,
        le=1.0,
        description="Share of the population considered vulnerable",
    )
    min_active_centers: int = Field(
        default=5,
        ge=0,
        description="Floor for demand-driven cooling centers",
    )
    heatwave_threshold_c: float = Field(
        default=35.0,
        description="Daily max temperature that counts as a heatwave day",
    )
    heatwave_min_days: int = Field(
        default=3,
        ge=1,
        description="Consecutive days (from today) required for a heatwave",
    )
    predictive_horizon_days: int = Field(
        default=5,
        ge=1,
        description="Forecast days folded into the predictive risk series",
    )
    vulnerable_modifier: float = Field(
        default=1.2,
        gt=0,
        description="Predictive score multiplier for vulnerable users",
    )
    momentum_hot_threshold_c: float = Field(
        default=32.0,
        description="Daily max at or above which momentum grows",
    )
    momentum_step: float = Field(
        default=0.5,
        ge=0,
        description="Momentum gained on a hot day",
    )
    momentum_decay: float = Field(
        default=0.3,
        ge=0,
        description="Momentum lost on a cooler day (floored at 0)",
    )
    mitigation_per_center: float = Field(
        default=0.02,
        ge=0,
        description="Hospital load reduction per policy center",
    )
    mitigation_cap: float = Field(
        default=0.4,
        ge=0,
        le=1.0,
        description="Maximum total hospital load reduction",
    )


class AlertsConfig(BaseModel):
    """Heat alert decision configuration."""

    enabled: bool = Field(default=True, description="Emit heat alerts")
    heat_index_threshold: float = Field(
        default=32.0,
        description="Heat index at or above which an alert is raised",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the HeatRisk engine.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)
    alerts: AlertsConfig = Field(default_factory=AlertsConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Engine settings
    if env_pop := os.environ.get("HEATRISK_POPULATION"):
        config_data.setdefault("engine", {})["city_population"] = int(env_pop)

    # Alert settings
    if env_threshold := os.environ.get("HEATRISK_ALERT_THRESHOLD"):
        config_data.setdefault("alerts", {})["heat_index_threshold"] = float(env_threshold)
    if env_enabled := os.environ.get("HEATRISK_ALERTS_ENABLED"):
        config_data.setdefault("alerts", {})["enabled"] = env_enabled.lower() not in ("0", "false", "no")

    # Server settings
    if env_port := os.environ.get("HEATRISK_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    # Logging settings
    if env_log := os.environ.get("HEATRISK_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
setup_logging(settings)
