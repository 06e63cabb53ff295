"""
Engine Input Schema
===================

Pydantic models for the values handed to the engine.

The engine is only ever called with already-resolved numbers. Weather
acquisition (HTTP fetch, geolocation) happens elsewhere; this module
validates whatever that collaborator produced before it reaches the engine.
NaN and infinite values are rejected at this boundary.

Input Contract:
    {
        "temperature_c": 38.0,
        "relative_humidity": 55.0,
        "daily_max_temps": [36, 36, 36, 36, 30],
        "is_vulnerable": false,
        "policy_centers": 0,
        "hourly": {"temperatures_c": [...], "humidities": [...]},
        "current_hour": 14
    }

Upstream forecast payload (Open-Meteo shape):
    {
        "current": {"temperature_2m": 38.0, "relative_humidity_2m": 55},
        "hourly": {"temperature_2m": [...], "relative_humidity_2m": [...]},
        "daily": {"temperature_2m_max": [...]}
    }

Example:
    from heatrisk_engine.models.input import EngineInput

    engine_input = EngineInput.from_open_meteo(payload, current_hour=14)
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, FiniteFloat, model_validator


class ForecastPayloadError(ValueError):
    """Raised when an upstream forecast payload lacks required sections."""


class WeatherSample(BaseModel):
    """
    Current conditions at the user's location.

    Attributes:
        temperature_c: Air temperature in °C
        relative_humidity: Relative humidity in percent
    """

    temperature_c: float = Field(..., allow_inf_nan=False, description="Air temperature (°C)")
    relative_humidity: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        allow_inf_nan=False,
        description="Relative humidity (%)",
    )


class DailyForecast(BaseModel):
    """
    Daily maximum temperatures, index 0 is today.

    Attributes:
        max_temps_c: Ordered daily maxima (°C)
    """

    max_temps_c: List[FiniteFloat] = Field(
        default_factory=list,
        description="Daily maximum temperatures, today first (°C)",
    )


class HourlyForecast(BaseModel):
    """
    Hourly temperature and humidity, index is hour of the forecast window.

    Attributes:
        temperatures_c: Hourly temperatures (°C)
        humidities: Hourly relative humidity (%), parallel to temperatures_c
    """

    temperatures_c: List[FiniteFloat] = Field(default_factory=list)
    humidities: List[FiniteFloat] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_parallel(self) -> "HourlyForecast":
        if len(self.temperatures_c) != len(self.humidities):
            raise ValueError("temperatures_c and humidities must have the same length")
        return self


class HeatIndexReading(BaseModel):
    """Already-computed heat index submitted for an alert decision."""

    heat_index: int = Field(..., description="Rounded heat index (°C)")


class UserPreference(BaseModel):
    """
    Caller-owned toggles that feed the engine.

    Attributes:
        is_vulnerable: User belongs to a heat-vulnerable group
        policy_centers: Additional cooling centers from the policy simulator
    """

    is_vulnerable: bool = Field(default=False)
    policy_centers: int = Field(default=0, ge=0)


class EngineInput(BaseModel):
    """
    Flat in-process contract for one engine pass.

    Only the first predictive_horizon_days of daily_max_temps feed the
    predictive series; the heatwave scan only looks at its leading run.
    """

    temperature_c: float = Field(..., allow_inf_nan=False, description="Current temperature (°C)")
    relative_humidity: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        allow_inf_nan=False,
        description="Current relative humidity (%)",
    )
    daily_max_temps: List[FiniteFloat] = Field(
        default_factory=list,
        description="Daily maximum temperatures, today first (°C)",
    )
    is_vulnerable: bool = Field(default=False)
    policy_centers: int = Field(default=0, ge=0)
    hourly: Optional[HourlyForecast] = Field(
        default=None,
        description="Hourly forecast for the short-term trend",
    )
    current_hour: Optional[int] = Field(
        default=None,
        ge=0,
        description="Index of the current hour within the hourly forecast",
    )

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @classmethod
    def build(
        cls,
        weather: WeatherSample,
        forecast: Optional[DailyForecast] = None,
        preference: Optional[UserPreference] = None,
        hourly: Optional[HourlyForecast] = None,
        current_hour: Optional[int] = None,
    ) -> "EngineInput":
        """Assemble an input from its separately-owned parts."""
        forecast = forecast or DailyForecast()
        preference = preference or UserPreference()
        return cls(
            temperature_c=weather.temperature_c,
            relative_humidity=weather.relative_humidity,
            daily_max_temps=forecast.max_temps_c,
            is_vulnerable=preference.is_vulnerable,
            policy_centers=preference.policy_centers,
            hourly=hourly,
            current_hour=current_hour,
        )

    @classmethod
    def from_open_meteo(
        cls,
        payload: Dict[str, Any],
        is_vulnerable: bool = False,
        policy_centers: int = 0,
        current_hour: Optional[int] = None,
    ) -> "EngineInput":
        """
        Parse an Open-Meteo forecast response.

        Args:
            payload: Decoded JSON body of the forecast response
            is_vulnerable: User vulnerability flag
            policy_centers: Policy simulator center count
            current_hour: Local hour used to pick the next hourly entries

        Returns:
            Validated EngineInput

        Raises:
            ForecastPayloadError: If the current conditions are missing or a
                section is not an object
            pydantic.ValidationError: If values are not numeric or out of range
        """
        current = payload.get("current")
        if not isinstance(current, dict):
            raise ForecastPayloadError("forecast payload has no 'current' section")
        if "temperature_2m" not in current or "relative_humidity_2m" not in current:
            raise ForecastPayloadError(
                "forecast payload 'current' section needs temperature_2m and relative_humidity_2m"
            )

        hourly = None
        hourly_data = payload.get("hourly") or {}
        if not isinstance(hourly_data, dict):
            raise ForecastPayloadError("forecast payload 'hourly' section must be an object")
        if hourly_data.get("temperature_2m"):
            hourly = HourlyForecast(
                temperatures_c=hourly_data["temperature_2m"],
                humidities=hourly_data.get("relative_humidity_2m", []),
            )

        daily_data = payload.get("daily") or {}
        if not isinstance(daily_data, dict):
            raise ForecastPayloadError("forecast payload 'daily' section must be an object")

        return cls(
            temperature_c=current["temperature_2m"],
            relative_humidity=current["relative_humidity_2m"],
            daily_max_temps=daily_data.get("temperature_2m_max") or [],
            is_vulnerable=is_vulnerable,
            policy_centers=policy_centers,
            hourly=hourly,
            current_hour=current_hour,
        )
