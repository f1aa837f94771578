"""Playback sensor that classifies readings and notifies subscribers."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from models.errors import EmptySequenceError
from models.records import TemperatureSample
from models.schemas import Thresholds
from services.interfaces import Listener, Unsubscribe
from settings import DEFAULT_SENSOR_INTERVAL

logger = logging.getLogger(__name__)

REFERENCE_READINGS: tuple[float, ...] = (
    16, 17, 16.5, 18, 19, 22, 24, 26.75, 28.7, 27.6, 26, 24, 22, 45, 68, 86.45,
)


class SensorEvent(str, Enum):
    warning_reached = "warning_reached"
    emergency_reached = "emergency_reached"
    fell_below_warning = "fell_below_warning"


class EventChannel:
    """Ordered multicast list of listeners for one kind of notification.

    ``emit`` walks a snapshot of the listeners, so a listener that subscribes
    or unsubscribes during delivery only affects later emissions.
    """

    def __init__(self, event: SensorEvent) -> None:
        self.event = event
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        entry = _Subscription(listener)
        self._listeners.append(entry)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(entry)
            except ValueError:
                pass

        return unsubscribe

    def emit(self, sample: TemperatureSample) -> None:
        listeners = tuple(self._listeners)
        logger.debug(
            "Dispatching sensor event",
            extra={"event": self.event.value, "reading": sample.value, "listener_count": len(listeners)},
        )
        for listener in listeners:
            listener(sample)


class _Subscription:
    # Wraps the callable so the same function can be subscribed twice and
    # each handle removes only its own registration.
    __slots__ = ("listener",)

    def __init__(self, listener: Listener) -> None:
        self.listener = listener

    def __call__(self, sample: TemperatureSample) -> None:
        self.listener(sample)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HeatSensor:
    """Replays a fixed reading sequence against warning and emergency levels."""

    def __init__(
        self,
        thresholds: Thresholds,
        readings: Optional[Iterable[float]] = None,
        *,
        interval: float = DEFAULT_SENSOR_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.thresholds = thresholds
        self.interval = interval
        self._sleep = sleep
        self._clock = clock
        self.warning_active = False
        self._channels: Dict[SensorEvent, EventChannel] = {
            event: EventChannel(event) for event in SensorEvent
        }
        self._readings = self._seed(readings)

    @staticmethod
    def _seed(readings: Optional[Iterable[float]]) -> tuple[float, ...]:
        if readings is None:
            return tuple(float(value) for value in REFERENCE_READINGS)
        seeded = tuple(float(value) for value in readings)
        if not seeded:
            raise EmptySequenceError("HeatSensor requires at least one reading.")
        return seeded

    @property
    def readings(self) -> tuple[float, ...]:
        return self._readings

    def subscribe(self, event: SensorEvent, listener: Listener) -> Unsubscribe:
        return self._channels[SensorEvent(event)].subscribe(listener)

    def subscribe_warning(self, listener: Listener) -> Unsubscribe:
        return self.subscribe(SensorEvent.warning_reached, listener)

    def subscribe_emergency(self, listener: Listener) -> Unsubscribe:
        return self.subscribe(SensorEvent.emergency_reached, listener)

    def subscribe_fell_below_warning(self, listener: Listener) -> Unsubscribe:
        return self.subscribe(SensorEvent.fell_below_warning, listener)

    def listener_count(self, event: SensorEvent) -> int:
        return len(self._channels[SensorEvent(event)])

    def classify(self, value: float) -> Optional[SensorEvent]:
        """Apply one reading to the sensor state and return the event it raises.

        A reading exactly equal to the emergency level matches neither the
        warning band nor the emergency band and raises nothing.
        """
        warning = self.thresholds.warning
        emergency = self.thresholds.emergency

        if warning <= value < emergency:
            self.warning_active = True
            return SensorEvent.warning_reached
        if value > emergency:
            self.warning_active = True
            return SensorEvent.emergency_reached
        if value < warning and self.warning_active:
            self.warning_active = False
            return SensorEvent.fell_below_warning
        return None

    def monitor_temperature(self) -> None:
        for value in self._readings:
            logger.info("Reading sampled", extra={"reading": value})
            event = self.classify(value)
            if event is not None:
                sample = TemperatureSample(timestamp=self._clock(), value=value)
                self._channels[event].emit(sample)
            self._sleep(self.interval)

    def run_sensor(self) -> None:
        logger.info(
            "HeatSensor running",
            extra={
                "reading_count": len(self._readings),
                "warning": self.thresholds.warning,
                "emergency": self.thresholds.emergency,
                "interval": self.interval,
            },
        )
        self.monitor_temperature()
