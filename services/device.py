"""Top-level device that owns the threshold policy and wires the object graph."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from models.schemas import AlertMessage, Severity, Thresholds, build_thresholds
from services.cooling import CoolingDevice
from services.interfaces import AlertSink
from services.sensor import HeatSensor
from services.thermostat import Thermostat
from settings import DEFAULT_SENSOR_INTERVAL, get_settings

logger = logging.getLogger(__name__)

WARNING_TEMP = 27.0
EMERGENCY_TEMP = 85.0


class Device:
    """Builds the cooling device, sensor and thermostat, then runs one simulation."""

    def __init__(
        self,
        sink: AlertSink,
        *,
        interval: float = DEFAULT_SENSOR_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.sink = sink
        self.interval = interval
        self._sleep = sleep
        self._thresholds = build_thresholds(WARNING_TEMP, EMERGENCY_TEMP)

    @property
    def warning_temp(self) -> float:
        return self._thresholds.warning

    @property
    def emergency_temp(self) -> float:
        return self._thresholds.emergency

    @property
    def thresholds(self) -> Thresholds:
        return self._thresholds

    def run_device(self) -> None:
        logger.info(
            "Device starting",
            extra={"warning": self.warning_temp, "emergency": self.emergency_temp},
        )
        cooling_device = CoolingDevice(self.sink)
        heat_sensor = HeatSensor(self._thresholds, interval=self.interval, sleep=self._sleep)
        thermostat = Thermostat(cooling_device, heat_sensor, self, self.sink)
        thermostat.run_therm()

    def handle_emergency(self) -> None:
        """Report the emergency and shut the system down.

        Callable directly by anyone holding the device; the sensor's emergency
        notification does not trigger it.
        """
        logger.warning("Emergency handling requested")
        self.sink.emit(
            AlertMessage(
                severity=Severity.emergency,
                text="Encountered Emergency...\nShutting down system",
            )
        )
        self._shutdown()

    def _shutdown(self) -> None:
        logger.warning("Shutting down")
        self.sink.emit(AlertMessage(severity=Severity.emergency, text="Shutting down the system."))


def build_default_device(
    sink: AlertSink,
    interval: Optional[float] = None,
) -> Device:
    """Factory that wires a device with interval defaults from the environment."""
    settings = get_settings()
    sensor_interval = settings.sensor_interval if interval is None else interval
    return Device(sink=sink, interval=sensor_interval)
