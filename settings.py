from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_SENSOR_INTERVAL_ENV = "THERMAL_SENSOR_INTERVAL"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_SENSOR_INTERVAL = 1.0


@dataclass(frozen=True)
class Settings:
    sensor_interval: float
    log_level: str


def _read_interval(default: float) -> float:
    value = os.getenv(_SENSOR_INTERVAL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed >= 0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        sensor_interval=_read_interval(DEFAULT_SENSOR_INTERVAL),
        log_level=_read_log_level("INFO"),
    )
