"""
Heat Alert Tests
================

Threshold decision for background heat alerts.
"""

from heatrisk_engine.alerts import ALERT_TITLE, HeatAlertPolicy
from heatrisk_engine.config import AlertsConfig
from heatrisk_engine.models.input import WeatherSample


class TestHeatAlertPolicy:
    """Tests for the alert threshold policy."""

    def test_below_threshold(self):
        assert HeatAlertPolicy().evaluate(31) is None

    def test_at_threshold(self):
        alert = HeatAlertPolicy().evaluate(32)
        assert alert is not None
        assert alert.title == ALERT_TITLE
        assert "feels like 32°C" in alert.body

    def test_disabled(self):
        assert HeatAlertPolicy(enabled=False).evaluate(50) is None

    def test_evaluate_weather(self):
        policy = HeatAlertPolicy()
        alert = policy.evaluate_weather(WeatherSample(temperature_c=32, relative_humidity=60))
        assert alert is not None
        assert alert.heat_index == 37
        assert policy.evaluate_weather(WeatherSample(temperature_c=20, relative_humidity=50)) is None

    def test_from_config(self):
        policy = HeatAlertPolicy.from_config(AlertsConfig(heat_index_threshold=40.0))
        assert policy.evaluate(38) is None
        assert policy.evaluate(40).to_dict()["heat_index"] == 40
