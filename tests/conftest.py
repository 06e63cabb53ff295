"""
Test Configuration
==================

Pytest fixtures and test configuration for the HeatRisk engine.
"""

import pytest


@pytest.fixture
def heatwave_input():
    """Hot, humid day with a four-day heatwave starting today."""
    from heatrisk_engine.models.input import EngineInput

    return EngineInput(
        temperature_c=38.0,
        relative_humidity=55.0,
        daily_max_temps=[36, 36, 36, 36, 30],
        is_vulnerable=False,
        policy_centers=0,
    )


@pytest.fixture
def mild_input():
    """Mild day with no forecast."""
    from heatrisk_engine.models.input import EngineInput

    return EngineInput(temperature_c=20.0, relative_humidity=50.0)


@pytest.fixture
def sample_open_meteo_payload():
    """Provide a sample Open-Meteo forecast response."""
    return {
        "latitude": 33.45,
        "longitude": -112.07,
        "current": {
            "temperature_2m": 38.0,
            "relative_humidity_2m": 55,
        },
        "hourly": {
            "temperature_2m": [30.0, 34.0, 34.0, 34.0, 33.0],
            "relative_humidity_2m": [50, 50, 50, 50, 50],
        },
        "daily": {
            "temperature_2m_max": [36.0, 36.0, 36.0, 36.0, 30.0, 29.0, 28.0],
        },
    }
