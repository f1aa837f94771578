"""Console reporting bound to the heat sensor's notifications."""

from __future__ import annotations

import logging
from typing import List

from models.records import TemperatureSample
from models.schemas import AlertMessage, Severity
from services.interfaces import AlertSink, CoolingControl, Reporting, Sensing, Unsubscribe

logger = logging.getLogger(__name__)


class Thermostat:
    """Subscribes one reporting handler per sensor channel, then runs the sensor.

    Messages quote the device's thresholds rather than the sensor's; both are
    built from the same values. The cooling device is held for future control
    logic but is not switched by any handler.
    """

    def __init__(
        self,
        cooling_device: CoolingControl,
        heat_sensor: Sensing,
        device: Reporting,
        sink: AlertSink,
    ) -> None:
        self.cooling_device = cooling_device
        self.heat_sensor = heat_sensor
        self.device = device
        self.sink = sink
        self._subscriptions: List[Unsubscribe] = []

    def wire_up_to_events(self) -> None:
        if self._subscriptions:
            return
        self._subscriptions = [
            self.heat_sensor.subscribe_warning(self._on_warning_reached),
            self.heat_sensor.subscribe_emergency(self._on_emergency_reached),
            self.heat_sensor.subscribe_fell_below_warning(self._on_fell_below_warning),
        ]

    def detach(self) -> None:
        while self._subscriptions:
            unsubscribe = self._subscriptions.pop()
            unsubscribe()

    def run_therm(self) -> None:
        logger.info("Thermostat is running")
        self.wire_up_to_events()
        self.heat_sensor.run_sensor()

    def _report(self, severity: Severity, text: str, sample: TemperatureSample) -> None:
        logger.debug("Reporting alert", extra={"severity": severity.value, "reading": sample.value})
        self.sink.emit(
            AlertMessage(
                severity=severity,
                text=text,
                value=sample.value,
                timestamp=sample.timestamp,
            )
        )

    def _on_warning_reached(self, sample: TemperatureSample) -> None:
        thresholds = self.device.thresholds
        self._report(
            Severity.warning,
            (
                "Warning Alert!! Temperature reached warning level "
                f"(warning level is between {thresholds.warning} and {thresholds.emergency})"
            ),
            sample,
        )

    def _on_emergency_reached(self, sample: TemperatureSample) -> None:
        thresholds = self.device.thresholds
        self._report(
            Severity.emergency,
            (
                "Emergency Alert!! Temperature reached emergency level "
                f"(emergency level is higher than {thresholds.emergency})"
            ),
            sample,
        )

    def _on_fell_below_warning(self, sample: TemperatureSample) -> None:
        thresholds = self.device.thresholds
        self._report(
            Severity.info,
            (
                "Information Alert!! Temperature fell below warning level "
                f"(warning level is {thresholds.warning})"
            ),
            sample,
        )
