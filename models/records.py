"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class TemperatureSample:
    """A single temperature reading taken during a sensor scan."""

    timestamp: datetime
    value: float
