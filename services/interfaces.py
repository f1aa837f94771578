"""Capability interfaces used to wire the device, sensor and thermostat."""

from __future__ import annotations

from typing import Callable, Protocol

from models.records import TemperatureSample
from models.schemas import AlertMessage, Thresholds

Listener = Callable[[TemperatureSample], None]
Unsubscribe = Callable[[], None]


class AlertSink(Protocol):
    def emit(self, message: AlertMessage) -> None: ...


class CoolingControl(Protocol):
    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...


class Sensing(Protocol):
    def subscribe_warning(self, listener: Listener) -> Unsubscribe: ...

    def subscribe_emergency(self, listener: Listener) -> Unsubscribe: ...

    def subscribe_fell_below_warning(self, listener: Listener) -> Unsubscribe: ...

    def run_sensor(self) -> None: ...


class Reporting(Protocol):
    """What a thermostat needs to know about the device it reports for."""

    @property
    def thresholds(self) -> Thresholds: ...

    def handle_emergency(self) -> None: ...
