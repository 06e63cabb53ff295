"""
Heat Alerts
===========

Decides whether current conditions warrant a heat alert.

This is the rule the periodic background check applies to fresh weather:
when the heat index reaches the alert threshold, an alert with display
text is produced. Scheduling and delivering the notification belong to
the caller.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from heatrisk_engine.config import AlertsConfig
from heatrisk_engine.engine.heat_index import display_heat_index
from heatrisk_engine.models.input import WeatherSample


logger = logging.getLogger(__name__)


ALERT_TITLE = "High Heat Alert!"


@dataclass(frozen=True, slots=True)
class HeatAlert:
    """
    Alert content for the notification layer.

    Attributes:
        heat_index: Rounded heat index that triggered the alert
        title: Notification title
        body: Notification body
    """

    heat_index: int
    title: str
    body: str

    def to_dict(self) -> dict:
        """Export as dictionary for serialization."""
        return {
            "heat_index": self.heat_index,
            "title": self.title,
            "body": self.body,
        }


class HeatAlertPolicy:
    """
    Threshold policy for heat alerts.

    Example:
        policy = HeatAlertPolicy(threshold=32.0)
        alert = policy.evaluate_weather(WeatherSample(temperature_c=35, relative_humidity=60))
        if alert:
            notify(alert.title, alert.body)
    """

    def __init__(self, threshold: float = 32.0, enabled: bool = True) -> None:
        """
        Initialize alert policy.

        Args:
            threshold: Heat index at or above which an alert is raised
            enabled: When False no alert is ever produced
        """
        self.threshold = threshold
        self.enabled = enabled

    @classmethod
    def from_config(cls, config: AlertsConfig) -> "HeatAlertPolicy":
        """Build a policy from the alerts section of Settings."""
        return cls(threshold=config.heat_index_threshold, enabled=config.enabled)

    def evaluate(self, heat_index: int) -> Optional[HeatAlert]:
        """
        Evaluate a rounded heat index.

        Returns:
            HeatAlert when enabled and at/above threshold, else None
        """
        if not self.enabled:
            return None
        if heat_index < self.threshold:
            return None

        logger.info(f"Heat alert raised for heat index {heat_index}")
        return HeatAlert(
            heat_index=heat_index,
            title=ALERT_TITLE,
            body=f"Temperature feels like {heat_index}°C. Stay cool and find shelter if needed.",
        )

    def evaluate_weather(self, weather: WeatherSample) -> Optional[HeatAlert]:
        """Compute the heat index for a sample and evaluate it."""
        return self.evaluate(display_heat_index(weather.temperature_c, weather.relative_humidity))
