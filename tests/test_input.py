"""
Input Schema Tests
==================

Validation of engine inputs and upstream payload parsing.
"""

import pytest
from pydantic import ValidationError

from heatrisk_engine.models.input import (
    DailyForecast,
    EngineInput,
    ForecastPayloadError,
    HourlyForecast,
    UserPreference,
    WeatherSample,
)


class TestEngineInput:
    """Tests for the engine input contract."""

    def test_defaults(self):
        engine_input = EngineInput(temperature_c=30, relative_humidity=40)
        assert engine_input.daily_max_temps == []
        assert engine_input.is_vulnerable is False
        assert engine_input.policy_centers == 0

    def test_negative_policy_centers_rejected(self):
        with pytest.raises(ValidationError):
            EngineInput(temperature_c=30, relative_humidity=40, policy_centers=-1)

    def test_humidity_range(self):
        with pytest.raises(ValidationError):
            WeatherSample(temperature_c=30, relative_humidity=120)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            EngineInput(temperature_c="hot", relative_humidity=40)

    def test_hourly_lengths_must_match(self):
        with pytest.raises(ValidationError):
            HourlyForecast(temperatures_c=[30, 31], humidities=[50])

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_temperature_rejected(self, value):
        with pytest.raises(ValidationError):
            EngineInput(temperature_c=value, relative_humidity=40)
        with pytest.raises(ValidationError):
            WeatherSample(temperature_c=value, relative_humidity=40)

    def test_non_finite_humidity_rejected(self):
        with pytest.raises(ValidationError):
            EngineInput(temperature_c=30, relative_humidity=float("nan"))

    def test_non_finite_forecast_values_rejected(self):
        with pytest.raises(ValidationError):
            EngineInput(temperature_c=30, relative_humidity=40, daily_max_temps=[35, float("inf")])
        with pytest.raises(ValidationError):
            DailyForecast(max_temps_c=[float("nan")])
        with pytest.raises(ValidationError):
            HourlyForecast(temperatures_c=[30, float("nan")], humidities=[50, 50])

    def test_large_finite_temperature_accepted(self):
        assert EngineInput(temperature_c=1e155, relative_humidity=50).temperature_c == 1e155

    def test_build_from_parts(self):
        engine_input = EngineInput.build(
            WeatherSample(temperature_c=33, relative_humidity=45),
            DailyForecast(max_temps_c=[35, 36]),
            UserPreference(is_vulnerable=True, policy_centers=3),
        )
        assert engine_input.daily_max_temps == [35, 36]
        assert engine_input.is_vulnerable is True
        assert engine_input.policy_centers == 3


class TestFromOpenMeteo:
    """Tests for upstream payload parsing."""

    def test_full_payload(self, sample_open_meteo_payload):
        engine_input = EngineInput.from_open_meteo(
            sample_open_meteo_payload, policy_centers=2, current_hour=0
        )
        assert engine_input.temperature_c == 38.0
        assert engine_input.relative_humidity == 55.0
        assert engine_input.daily_max_temps[:5] == [36.0, 36.0, 36.0, 36.0, 30.0]
        assert engine_input.hourly is not None
        assert len(engine_input.hourly.temperatures_c) == 5
        assert engine_input.policy_centers == 2
        assert engine_input.current_hour == 0

    def test_current_only(self):
        payload = {"current": {"temperature_2m": 25.0, "relative_humidity_2m": 40}}
        engine_input = EngineInput.from_open_meteo(payload)
        assert engine_input.daily_max_temps == []
        assert engine_input.hourly is None

    def test_missing_current(self):
        with pytest.raises(ForecastPayloadError):
            EngineInput.from_open_meteo({"daily": {"temperature_2m_max": [30]}})

    def test_missing_humidity(self):
        with pytest.raises(ForecastPayloadError):
            EngineInput.from_open_meteo({"current": {"temperature_2m": 30}})

    def test_non_numeric_values(self):
        payload = {"current": {"temperature_2m": "n/a", "relative_humidity_2m": 40}}
        with pytest.raises(ValidationError):
            EngineInput.from_open_meteo(payload)

    @pytest.mark.parametrize("section", ["hourly", "daily"])
    def test_section_must_be_object(self, section):
        payload = {
            "current": {"temperature_2m": 30.0, "relative_humidity_2m": 40},
            section: [30.0, 31.0],
        }
        with pytest.raises(ForecastPayloadError):
            EngineInput.from_open_meteo(payload)
