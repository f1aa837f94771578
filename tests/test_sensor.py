"""Unit tests for the heat sensor classification and event channels."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Tuple

import pytest

from models.errors import EmptySequenceError
from models.records import TemperatureSample
from models.schemas import build_thresholds
from services.sensor import REFERENCE_READINGS, HeatSensor, SensorEvent

FIXED_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _sensor(readings=None, sleeps: List[float] | None = None) -> HeatSensor:
    def record_sleep(seconds: float) -> None:
        if sleeps is not None:
            sleeps.append(seconds)

    return HeatSensor(
        build_thresholds(27.0, 85.0),
        readings,
        sleep=record_sleep,
        clock=lambda: FIXED_TIME,
    )


def _record_all(sensor: HeatSensor) -> List[Tuple[SensorEvent, float]]:
    events: List[Tuple[SensorEvent, float]] = []
    for event in SensorEvent:
        sensor.subscribe(event, lambda sample, event=event: events.append((event, sample.value)))
    return events


def test_reference_sequence_emits_expected_events() -> None:
    sensor = _sensor()
    events = _record_all(sensor)

    sensor.run_sensor()

    assert events == [
        (SensorEvent.warning_reached, 28.7),
        (SensorEvent.warning_reached, 27.6),
        (SensorEvent.fell_below_warning, 26.0),
        (SensorEvent.warning_reached, 45.0),
        (SensorEvent.warning_reached, 68.0),
        (SensorEvent.emergency_reached, 86.45),
    ]


def test_sensor_sleeps_after_every_reading() -> None:
    sleeps: List[float] = []
    sensor = _sensor(sleeps=sleeps)

    sensor.run_sensor()

    assert sleeps == [1.0] * len(REFERENCE_READINGS)


def test_samples_carry_clock_timestamp() -> None:
    sensor = _sensor([30.0])
    received: List[TemperatureSample] = []
    sensor.subscribe_warning(received.append)

    sensor.run_sensor()

    assert received == [TemperatureSample(timestamp=FIXED_TIME, value=30.0)]


def test_reading_equal_to_emergency_emits_nothing() -> None:
    sensor = _sensor([85.0])
    events = _record_all(sensor)

    sensor.run_sensor()

    assert events == []
    assert sensor.warning_active is False


def test_reading_equal_to_warning_is_a_warning() -> None:
    sensor = _sensor([27.0])
    events = _record_all(sensor)

    sensor.run_sensor()

    assert events == [(SensorEvent.warning_reached, 27.0)]


def test_first_reading_below_warning_does_not_fall() -> None:
    sensor = _sensor([10.0, 12.0])
    events = _record_all(sensor)

    sensor.run_sensor()

    assert events == []


def test_emergency_then_low_reading_falls_below_warning() -> None:
    sensor = _sensor([90.0, 20.0, 19.0])
    events = _record_all(sensor)

    sensor.run_sensor()

    assert events == [
        (SensorEvent.emergency_reached, 90.0),
        (SensorEvent.fell_below_warning, 20.0),
    ]


def test_repeated_elevated_readings_emit_each_time() -> None:
    sensor = _sensor([30.0, 30.0, 86.0, 86.0])
    events = _record_all(sensor)

    sensor.run_sensor()

    assert [event for event, _ in events] == [
        SensorEvent.warning_reached,
        SensorEvent.warning_reached,
        SensorEvent.emergency_reached,
        SensorEvent.emergency_reached,
    ]


def test_multiple_subscribers_receive_in_registration_order() -> None:
    sensor = _sensor([50.0, 60.0])
    calls: List[str] = []
    sensor.subscribe_warning(lambda sample: calls.append(f"first:{sample.value}"))
    sensor.subscribe_warning(lambda sample: calls.append(f"second:{sample.value}"))

    sensor.run_sensor()

    assert calls == ["first:50.0", "second:50.0", "first:60.0", "second:60.0"]


def test_unsubscribe_handle_stops_delivery_and_is_idempotent() -> None:
    sensor = _sensor([50.0])
    calls: List[float] = []
    unsubscribe = sensor.subscribe_warning(lambda sample: calls.append(sample.value))

    unsubscribe()
    unsubscribe()
    sensor.run_sensor()

    assert calls == []
    assert sensor.listener_count(SensorEvent.warning_reached) == 0


def test_same_listener_subscribed_twice_is_removed_once() -> None:
    sensor = _sensor([50.0])
    calls: List[float] = []
    listener = lambda sample: calls.append(sample.value)  # noqa: E731
    first = sensor.subscribe_warning(listener)
    sensor.subscribe_warning(listener)

    first()
    sensor.run_sensor()

    assert calls == [50.0]


def test_unsubscribe_during_delivery_applies_to_next_emission() -> None:
    sensor = _sensor([50.0, 60.0])
    calls: List[str] = []
    handles = {}

    def first(sample: TemperatureSample) -> None:
        calls.append(f"first:{sample.value}")
        handles["second"]()

    handles["first"] = sensor.subscribe_warning(first)
    handles["second"] = sensor.subscribe_warning(
        lambda sample: calls.append(f"second:{sample.value}")
    )

    sensor.run_sensor()

    assert calls == ["first:50.0", "second:50.0", "first:60.0"]


def test_empty_sequence_is_rejected() -> None:
    with pytest.raises(EmptySequenceError):
        _sensor([])


def test_readings_are_kept_as_floats() -> None:
    sensor = _sensor([26, 28.7])

    assert sensor.readings == (26.0, 28.7)
    assert sensor.classify(26.75) is None
