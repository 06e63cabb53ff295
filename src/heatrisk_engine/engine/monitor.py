"""
Risk Monitor
============

Reactive wrapper that keeps one snapshot in sync with its inputs.

The monitor owns the current inputs (weather, forecast, user toggles) and
exactly one derived RiskSnapshot. Any setter that changes the effective
input triggers a full recompute; setting an identical value does nothing.
Subscribers receive every new snapshot as an explicit value.

Example:
    monitor = RiskMonitor()
    monitor.subscribe(lambda snap: print(snap.risk_tier))

    monitor.update_weather(WeatherSample(temperature_c=34, relative_humidity=50))
    monitor.update_forecast([36, 37, 36, 31, 30])
    monitor.set_policy_centers(4)
"""

import logging
from typing import Callable, List, Optional, Sequence

from heatrisk_engine.engine.graph import RiskEngineGraph, get_default_graph
from heatrisk_engine.engine.parameters import EngineParameters
from heatrisk_engine.models.input import EngineInput, HourlyForecast, WeatherSample
from heatrisk_engine.models.snapshot import RiskSnapshot
from heatrisk_engine.models.tiers import RiskTier


logger = logging.getLogger(__name__)


SnapshotListener = Callable[[RiskSnapshot], None]


class RiskMonitor:
    """
    Holds engine inputs and the single snapshot derived from them.

    Intended for one caller at a time; it holds no locks.

    Attributes:
        graph: Engine graph used for recomputation
    """

    def __init__(
        self,
        params: Optional[EngineParameters] = None,
        is_vulnerable: bool = False,
        policy_centers: int = 0,
    ) -> None:
        """
        Initialize the monitor.

        Args:
            params: Engine parameters (defaults if None)
            is_vulnerable: Initial vulnerability flag
            policy_centers: Initial policy center count

        Raises:
            ValueError: If policy_centers is negative
        """
        if policy_centers < 0:
            raise ValueError("policy_centers must be non-negative")

        self.graph = RiskEngineGraph(params) if params is not None else get_default_graph()

        self._weather: Optional[WeatherSample] = None
        self._daily_max_temps: List[float] = []
        self._hourly: Optional[HourlyForecast] = None
        self._current_hour: Optional[int] = None
        self._is_vulnerable = is_vulnerable
        self._policy_centers = policy_centers

        self._last_input: Optional[EngineInput] = None
        self._snapshot: Optional[RiskSnapshot] = None
        self._recompute_count: int = 0
        self._listeners: List[SnapshotListener] = []

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------

    def update_weather(
        self,
        weather: WeatherSample,
        hourly: Optional[HourlyForecast] = None,
        current_hour: Optional[int] = None,
    ) -> Optional[RiskSnapshot]:
        """
        Set current conditions (and optionally the hourly forecast).

        Omitted hourly data keeps the previous forecast; use
        update_hourly(None) to drop it.
        """
        self._weather = weather
        if hourly is not None:
            self._hourly = hourly
        if current_hour is not None:
            self._current_hour = current_hour
        return self._refresh()

    def update_hourly(
        self,
        hourly: Optional[HourlyForecast],
        current_hour: Optional[int] = None,
    ) -> Optional[RiskSnapshot]:
        """Replace the hourly forecast and current hour; None clears them."""
        self._hourly = hourly
        self._current_hour = current_hour
        return self._refresh()

    def update_forecast(self, daily_max_temps: Sequence[float]) -> Optional[RiskSnapshot]:
        """Replace the daily forecast maxima (index 0 is today)."""
        self._daily_max_temps = list(daily_max_temps)
        return self._refresh()

    def set_vulnerable(self, is_vulnerable: bool) -> Optional[RiskSnapshot]:
        """Toggle the vulnerability flag."""
        self._is_vulnerable = is_vulnerable
        return self._refresh()

    def set_policy_centers(self, policy_centers: int) -> Optional[RiskSnapshot]:
        """
        Set the policy simulator's additional center count.

        Raises:
            ValueError: If policy_centers is negative
        """
        if policy_centers < 0:
            raise ValueError("policy_centers must be non-negative")
        self._policy_centers = policy_centers
        return self._refresh()

    def apply(self, engine_input: EngineInput) -> Optional[RiskSnapshot]:
        """Replace every input at once."""
        self._weather = WeatherSample(
            temperature_c=engine_input.temperature_c,
            relative_humidity=engine_input.relative_humidity,
        )
        self._daily_max_temps = list(engine_input.daily_max_temps)
        self._hourly = engine_input.hourly
        self._current_hour = engine_input.current_hour
        self._is_vulnerable = engine_input.is_vulnerable
        self._policy_centers = engine_input.policy_centers
        return self._refresh()

    # -------------------------------------------------------------------------
    # Observation
    # -------------------------------------------------------------------------

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """
        Register a listener for new snapshots.

        The listener is called immediately if a snapshot already exists.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)
        if self._snapshot is not None:
            listener(self._snapshot)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def snapshot(self) -> Optional[RiskSnapshot]:
        """Current snapshot, None until weather has been supplied."""
        return self._snapshot

    @property
    def recompute_count(self) -> int:
        """Number of full recomputes performed."""
        return self._recompute_count

    def get_metrics(self) -> dict:
        """Get monitor metrics for observability."""
        return {
            "recompute_count": self._recompute_count,
            "has_snapshot": self._snapshot is not None,
            "risk_tier": self._snapshot.risk_tier.value if self._snapshot else None,
            "policy_centers": self._policy_centers,
            "is_vulnerable": self._is_vulnerable,
            "listeners": len(self._listeners),
        }

    # -------------------------------------------------------------------------
    # Recompute
    # -------------------------------------------------------------------------

    def _current_input(self) -> Optional[EngineInput]:
        if self._weather is None:
            return None
        return EngineInput(
            temperature_c=self._weather.temperature_c,
            relative_humidity=self._weather.relative_humidity,
            daily_max_temps=self._daily_max_temps,
            is_vulnerable=self._is_vulnerable,
            policy_centers=self._policy_centers,
            hourly=self._hourly,
            current_hour=self._current_hour,
        )

    def _refresh(self) -> Optional[RiskSnapshot]:
        engine_input = self._current_input()
        if engine_input is None:
            return None
        if engine_input == self._last_input:
            return self._snapshot

        previous = self._snapshot
        snapshot = self.graph.compute(engine_input)

        self._last_input = engine_input
        self._snapshot = snapshot
        self._recompute_count += 1

        self._log_changes(previous, snapshot)

        for listener in list(self._listeners):
            listener(snapshot)

        return snapshot

    def _log_changes(self, previous: Optional[RiskSnapshot], current: RiskSnapshot) -> None:
        logger.info(
            f"RiskMonitor recompute #{self._recompute_count}: "
            f"hi={current.heat_index}, tier={current.risk_tier.value}, "
            f"stress={current.system.stress_tier.value}"
        )

        was_heatwave = previous.heatwave.active if previous else False
        if current.heatwave.active and not was_heatwave:
            logger.warning(
                f"HEATWAVE ACTIVE: level={current.heatwave.level.value}, "
                f"days={current.heatwave.consecutive_days}"
            )

        was_extreme = previous.risk_tier == RiskTier.EXTREME if previous else False
        if current.risk_tier == RiskTier.EXTREME and not was_extreme:
            logger.warning(f"RISK TIER EXTREME: heat index {current.heat_index}")
